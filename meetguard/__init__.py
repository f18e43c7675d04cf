"""Per-client fixed-window request rate limiting (see ``meetguard.rate_limit``)."""

__version__ = "0.1.0"
__all__ = ["rate_limit"]
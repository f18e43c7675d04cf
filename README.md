# meetguard

meetguard limits how many requests each client may make in a fixed time window.
The default setting is 100 requests per 60 seconds. A client is identified by the
`X-Real-IP` request header. When that header is missing, the client is counted as
`"unknown"`.

Everything lives in one module, `meetguard.rate_limit`.

## Installation

```
pip install meetguard
```

Python 3.10 or later is needed. The package has no runtime dependencies.

## Usage

```python
from meetguard.rate_limit import RateLimiter, RateLimitExceeded, check_rate_limit

limiter = RateLimiter(window=60.0, max_requests=100)

if limiter.check_rate_limit("203.0.113.7"):
    ...  # handle the request

try:
    check_rate_limit(limiter, "203.0.113.7")
except RateLimitExceeded as exc:
    ...  # answer with HTTP 429; exc.client_ip holds the client
```

`RateLimiter.check_rate_limit(client_ip)` records one request and returns whether
it is allowed. The first request from a client opens a window. Each request inside
that window adds one to the client's count. A request is allowed while the count
is at most `max_requests`. The first request that arrives after the window has
passed starts a new window, and its count is 1. The limiter is safe to share
between threads.

`limiter.clear_expired()` drops clients whose window has ended. `len(limiter)`
gives the number of clients being tracked, and `"203.0.113.7" in limiter` tells
whether a client is being tracked. Each client's bookkeeping is a
`RateLimitEntry` with `last_request` (a clock reading) and `count`.

### Reading the client address

`client_ip_from_headers(headers)` takes either a mapping or an iterable of
`(name, value)` pairs. Header names are matched without regard to case, and
values may be `str` or `bytes`. It returns the first `X-Real-IP` value. If that
value holds characters other than printable ASCII and tab, or if there is no
such header, it returns `"unknown"`.

### As middleware

`rate_limit(limiter, headers, call_next)` reads the client address with
`client_ip_from_headers`. It then either calls `call_next()` and returns its
result, or raises `RateLimitExceeded`. If `call_next` returns an awaitable,
`rate_limit` returns that awaitable, so the result can be awaited in async
frameworks.

### Defaults and testing

`init_rate_limiter()` builds a limiter that allows 100 requests per 60 seconds.
Time is read from `time.monotonic` by default. For tests, pass your own clock
callable that returns seconds as a float. This works both with
`init_rate_limiter(clock)` and with `RateLimiter(..., clock=clock)`.

## What it does not do

meetguard is a library only. It provides no server, no command-line tool and no
persistent storage. Counts are kept in memory and are lost when the process
ends. Expired clients are removed only when you call `clear_expired()`. Nothing
runs that task in the background.

## Running the tests

```
pip install "meetguard[test]"
pytest
```
# gogox

Small building blocks for writing services, with no dependencies outside the
standard library:

- **`gogox.errorx`** – an application error type with a stable machine-readable
  `code`, a user-facing `message`, optional field-level `details`, a separate
  log message for operators, an optional wrapped cause and a captured stack.
- **`gogox.context`** – an immutable request context that carries values and an
  optional deadline through a call chain.
- **`gogox.log`** – log metadata and carrying it inside a context.
- **`gogox.trace`** – trace IDs: generation and propagation through a context.
- **`gogox.cache`** – a cache interface with no-op, Redis and memcache
  implementations that store values as JSON.
- **`gogox.stats`** – a metrics interface (counters, gauges, histograms) with
  tags, and a no-op implementation.
- **`gogox.web`** – WSGI middleware that attaches a trace ID to every request.
- **`gogox.grpcx`** – unary server and client interceptors in the gRPC style
  that propagate trace IDs through call metadata.
- **`gogox.sugar`** – small helpers for working with sequences.

Python 3.10 or later is required.

## Errors

```python
from gogox import errorx

err = errorx.new("user.not_found", "user does not exist")
str(err)          # "user does not exist"
err.log_error()   # "[user.not_found] user does not exist"

try:
    load_profile()
except OSError as exc:
    wrapped = errorx.wrap(exc, "profile.load_failed", "could not load profile")
    wrapped.log_error()  # "[profile.load_failed] could not load profile: <cause>"
```

`errorx.Error` is an exception, so it can be raised and caught directly. Its
`cause` is also set as `__cause__`.

Formatted variants (`newf`, `wrapf`, `newf_with_log`, `wrapf_with_log`) take
`%`-style arguments for the message; the `*_with_log` variants let the log
message differ from the message shown to users. `log_error()` flattens a chain
of wrapped causes into one line, and `print_stack_trace()` returns the frames
captured where the error was created, innermost first.

Shortcuts exist for the common codes: `err_internal`, `err_not_found`,
`err_unauthorized` and `err_invalid_parameter`. They set only the code and
message (no log message, no stack). Field-level problems are attached with
`add_details`, and `as_dict()` gives a JSON-ready form:

```python
err = errorx.err_invalid_parameter("request is invalid")
err.add_details(errorx.Details(field="name", message="Name is empty"))
err.as_dict()
# {"code": "common.invalid_parameter", "message": "request is invalid",
#  "details": [{"field": "name", "message": "Name is empty"}]}
```

`parse(err)` returns `err` if it is an `errorx.Error` and `None` otherwise;
`parse_and_wrap(err, msg)` returns it unchanged if so and otherwise wraps it as
an internal error (`CODE_INTERNAL`) with `msg`.

The module also defines the common code constants (`CODE_INTERNAL`,
`CODE_NOT_FOUND`, `CODE_UNAUTHORIZED`, `CODE_INVALID_PARAMETER`,
`CODE_TIMEOUT`, `CODE_ALREADY_EXISTS`, `CODE_FORBIDDEN`, `CODE_UNIMPLEMENTED`),
the `StatusCode` enum of canonical RPC status codes, and `DEFAULT_CODE_MAP`,
which maps each non-OK status code to one of those error codes.

## Contexts, log metadata and trace IDs

```python
from gogox.context import background
from gogox.log.context import new_context, metadata_from_context
from gogox.trace.context import new_context as with_trace, trace_from_context
from gogox.trace.generator import new as new_trace_id

ctx = new_context(background(), {"service": "api"})
ctx = with_trace(ctx, new_trace_id())

metadata_from_context(ctx)   # {"service": "api"}  (a fresh copy each time)
trace_from_context(ctx)      # the generated trace ID
```

`Context.with_value` and `Context.with_deadline` return new contexts and never
change the original; `with_deadline` keeps an existing deadline when it is
earlier. Both lookups above are safe on a context that holds nothing, or on
`None`: they return an empty dict and an empty string.

Trace IDs are 27-character, base-62, time-ordered strings made of a
seconds timestamp followed by 16 random bytes.

`merge_metadata(md1, md2)` in `gogox.log.metadata` builds a new dict from two
mappings (either may be `None`), with `md2` winning on conflicts.

## Caching

```python
from datetime import timedelta
from gogox.cache.cache import NopCache

cache = NopCache()
cache.set("key", {"id": 1}, timedelta(seconds=60))
cache.get("key")   # raises errorx.Error with code "common.not_found"
```

`RedisCache` (`gogox.cache.redis`) and `MemcacheCache` (`gogox.cache.memcache`)
wrap a client object you supply, store values as compact JSON and raise a
not-found `errorx.Error` for missing keys. `delete` accepts any number of keys.

- `RedisCache` expects a client whose `get` returns `None` for a missing key
  and whose `set` accepts `ex` and `px`. A non-positive expiration stores the
  key without expiry; expirations that are not whole seconds use `px`.
- `MemcacheCache` expects `get(key)`, `set(key, value, expire=seconds)` and
  `delete(key)`; the expiration is truncated to whole seconds and keys are
  deleted one by one, stopping at the first failure.

## Stats

`Stats` in `gogox.stats.stats` is an abstract interface with `increment`,
`add`, `gauge` and `histogram`, each taking an `Option` with a sample `rate`
and `tags`. `merge_tags(t1, t2)` merges two tag mappings into a new one.
`NopStats` records nothing and only counts, in `dropped`, how many
measurements it received.

## Web middleware

```python
from gogox.web.trace import trace_middleware, request_context
from gogox.log.context import metadata_from_context

def my_app(environ, start_response):
    md = metadata_from_context(request_context(environ))  # {"trace_id": ...}
    start_response("200 OK", [("Content-Type", "text/plain")])
    return [b"ok"]

app = trace_middleware("trace_id", "X-Trace-Id", my_app)
```

`trace_middleware` takes the trace ID from the request header, or from the
request context, or generates one. It stores the ID in the request context,
writes it back into the request header in the WSGI environ, and adds it to the
log metadata under the given field. `request_context(environ)` returns the
context of a request, or the empty root context.

## gRPC-style interceptors

`gogox.grpcx.trace` provides `unary_server_interceptor(trace_field,
trace_header_key)` and `unary_client_interceptor(trace_field,
trace_header_key)`. A server interceptor is called as
`interceptor(ctx, req, info, handler)` and calls `handler(ctx, req)`; a client
interceptor is called as `interceptor(ctx, method, req, reply, cc, invoker,
*opts)` and calls `invoker` with the same arguments. Both read the trace ID
from the incoming or outgoing call metadata, fall back to the context and then
to a new ID, and put it in the trace context and the log metadata; the client
interceptor also appends it to the outgoing metadata under `trace_field`.

Call metadata lives in the context and is managed with
`new_incoming_context`, `new_outgoing_context`, `incoming_metadata`,
`outgoing_metadata` and `append_to_outgoing_context`. Keys are lower-cased
and each maps to a list of values.

## Sequence helpers

```python
from gogox import sugar

nums = [1, 2, 3, 4]
sugar.find_any(nums, lambda x: x > 2, 0)       # 3
sugar.select(nums, lambda x: x > 2)            # [3, 4]
sugar.is_all(nums, lambda x: x > 0)            # True
sugar.sum_by(0, nums, lambda x: x)             # 10
sugar.map_values(nums, str)                    # ["1", "2", "3", "4"]
sugar.concat([1.2, 2.3, 3.4], "|")             # "1.2|2.3|3.4"
sugar.if_then(True, "yes", "no")               # "yes"
```

When no predicate is given, `is_all`, `is_any` and `is_none` answer `False`,
`find_any` returns the default, `select` returns the input itself and `sum_by`
returns the zero value of the initial value's type. `reverse` reverses a list
in place and returns it.

## What is not included

- There is no logger: no logger interface, no log levels and no adapters for
  any logging library. The package only builds and carries log metadata; you
  pass it to a logger of your choice.
- There is no request-logging WSGI middleware and no call-logging interceptor;
  the middleware and interceptors here only propagate trace IDs.
- There is no metrics backend or exporter; `NopStats` is the only `Stats`
  implementation.
- The cache implementations do not create connections; you supply the client.
from wsgiref.util import setup_testing_defaults

from gogox.context import background
from gogox.log.context import metadata_from_context
from gogox.trace.context import new_context, trace_from_context
from gogox.web.trace import ENVIRON_CONTEXT_KEY, request_context, trace_middleware


def _environ(path="/test", **extra):
    environ = {"PATH_INFO": path, "REQUEST_METHOD": "GET"}
    environ.update(extra)
    setup_testing_defaults(environ)
    return environ


class _App:
    def __init__(self):
        self.environ = None

    def __call__(self, environ, start_response):
        self.environ = environ
        start_response("200 OK", [("Content-Type", "text/plain")])
        return [b"ok"]


def _start_response(status, headers, exc_info=None):
    return lambda data: None


def test_trace_taken_from_header():
    app = _App()
    handler = trace_middleware("traceField", "X-Trace-Header-Key", app)
    body = handler(_environ(HTTP_X_TRACE_HEADER_KEY="abc"), _start_response)

    assert list(body) == [b"ok"]
    ctx = request_context(app.environ)
    assert trace_from_context(ctx) == "abc"
    assert metadata_from_context(ctx)["traceField"] == "abc"


def test_trace_taken_from_context():
    app = _App()
    handler = trace_middleware("traceField", "X-Trace-Header-Key", app)
    environ = _environ()
    environ[ENVIRON_CONTEXT_KEY] = new_context(background(), "mytrace")
    handler(environ, _start_response)

    ctx = request_context(app.environ)
    assert trace_from_context(ctx) == "mytrace"
    assert app.environ["HTTP_X_TRACE_HEADER_KEY"] == "mytrace"


def test_trace_generated_when_missing():
    app = _App()
    handler = trace_middleware("traceField", "X-Trace-Header-Key", app)
    handler(_environ(), _start_response)

    ctx = request_context(app.environ)
    trace_id = trace_from_context(ctx)
    assert len(trace_id) == 27
    assert app.environ["HTTP_X_TRACE_HEADER_KEY"] == trace_id
    assert metadata_from_context(ctx)["traceField"] == trace_id


def test_request_context_without_context_is_empty():
    ctx = request_context(_environ())
    assert trace_from_context(ctx) == ""
    assert metadata_from_context(ctx) == {}
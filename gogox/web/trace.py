"""WSGI middleware that attaches a trace identifier to every request."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableMapping

from gogox.context import Context, background
from gogox.log.context import metadata_from_context
from gogox.log.context import new_context as new_log_context
from gogox.trace.context import new_context as new_trace_context
from gogox.trace.context import trace_from_context
from gogox.trace.generator import new as new_trace

ENVIRON_CONTEXT_KEY = "gogox.context"

WSGIEnviron = MutableMapping[str, Any]
WSGIApp = Callable[[WSGIEnviron, Callable[..., Any]], Iterable[bytes]]


def _environ_header_key(header: str) -> str:
    return "HTTP_" + header.upper().replace("-", "_")


def request_context(environ: WSGIEnviron) -> Context:
    """Return the context attached to the request, or the empty root context."""
    ctx = environ.get(ENVIRON_CONTEXT_KEY)
    return ctx if isinstance(ctx, Context) else background()


def trace_middleware(trace_field: str, trace_header_key: str, app: WSGIApp) -> WSGIApp:
    """Wrap ``app`` so each request carries a trace identifier.

    The identifier comes from the ``trace_header_key`` request header, else
    from the request context, else it is generated. It is stored in the
    request context, written back to the request header, and added to the
    log metadata under ``trace_field``.
    """
    header_env_key = _environ_header_key(trace_header_key)

    def middleware(environ: WSGIEnviron, start_response: Callable[..., Any]) -> Iterable[bytes]:
        ctx = request_context(environ)

        trace_id = environ.get(header_env_key, "")
        if not trace_id:
            trace_id = trace_from_context(ctx) or new_trace()

        ctx = new_trace_context(ctx, trace_id)
        environ[header_env_key] = trace_id

        log_md = metadata_from_context(ctx)
        log_md[trace_field] = trace_id
        environ[ENVIRON_CONTEXT_KEY] = new_log_context(ctx, log_md)

        return app(environ, start_response)

    return middleware
"""RPC interceptors that attach a trace identifier, and call metadata helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from gogox.context import Context
from gogox.log.context import metadata_from_context
from gogox.log.context import new_context as new_log_context
from gogox.trace.context import new_context as new_trace_context
from gogox.trace.context import trace_from_context
from gogox.trace.generator import new as new_trace

CallMetadata = Dict[str, List[str]]


@dataclass(frozen=True)
class _MetadataKey:
    name: str


_INCOMING_KEY = _MetadataKey("incoming")
_OUTGOING_KEY = _MetadataKey("outgoing")


def _normalise(md: Optional[Mapping[str, Union[str, Iterable[str]]]]) -> CallMetadata:
    res: CallMetadata = {}
    for key, values in (md or {}).items():
        items = [values] if isinstance(values, str) else list(values)
        res.setdefault(key.lower(), []).extend(items)
    return res


def _copy(md: Optional[CallMetadata]) -> Optional[CallMetadata]:
    if md is None:
        return None
    return {key: list(values) for key, values in md.items()}


def new_incoming_context(ctx: Context, md: Mapping[str, Union[str, Iterable[str]]]) -> Context:
    """Return a context carrying ``md`` as the metadata received with a call."""
    return ctx.with_value(_INCOMING_KEY, _normalise(md))


def new_outgoing_context(ctx: Context, md: Mapping[str, Union[str, Iterable[str]]]) -> Context:
    """Return a context carrying ``md`` as the metadata to send with a call."""
    return ctx.with_value(_OUTGOING_KEY, _normalise(md))


def incoming_metadata(ctx: Context) -> Optional[CallMetadata]:
    """Return a copy of the received metadata, or ``None`` if there is none."""
    return _copy(ctx.value(_INCOMING_KEY))


def outgoing_metadata(ctx: Context) -> Optional[CallMetadata]:
    """Return a copy of the metadata to send, or ``None`` if there is none."""
    return _copy(ctx.value(_OUTGOING_KEY))


def append_to_outgoing_context(ctx: Context, *kv: str) -> Context:
    """Return a context whose outgoing metadata also holds the key-value pairs ``kv``."""
    if len(kv) % 2:
        raise ValueError(f"append_to_outgoing_context got an odd number of arguments: {len(kv)}")
    md = outgoing_metadata(ctx) or {}
    for key, value in zip(kv[::2], kv[1::2]):
        md.setdefault(key.lower(), []).append(value)
    return ctx.with_value(_OUTGOING_KEY, md)


def _value_from_metadata(md: Optional[CallMetadata], key: str) -> str:
    if not md:
        return ""
    values = md.get(key.lower())
    return values[0] if values else ""


def _with_trace(ctx: Context, trace_field: str, trace_id: str) -> Context:
    ctx = new_trace_context(ctx, trace_id)
    log_md = metadata_from_context(ctx)
    log_md[trace_field] = trace_id
    return new_log_context(ctx, log_md)


ServerHandler = Callable[[Context, Any], Any]
ServerInterceptor = Callable[[Context, Any, Any, ServerHandler], Any]
Invoker = Callable[..., Any]
ClientInterceptor = Callable[..., Any]


def unary_server_interceptor(trace_field: str, trace_header_key: str) -> ServerInterceptor:
    """Return a server interceptor that puts a trace identifier in the handler's context.

    The identifier comes from the received ``trace_header_key`` metadata, else
    from the context, else it is generated; it is added to the log metadata
    under ``trace_field``.
    """

    def interceptor(ctx: Context, req: Any, info: Any, handler: ServerHandler) -> Any:
        trace_id = _value_from_metadata(incoming_metadata(ctx), trace_header_key)
        if not trace_id:
            trace_id = trace_from_context(ctx) or new_trace()
        return handler(_with_trace(ctx, trace_field, trace_id), req)

    return interceptor


def unary_client_interceptor(trace_field: str, trace_header_key: str) -> ClientInterceptor:
    """Return a client interceptor that sends a trace identifier with each call.

    The identifier comes from the outgoing ``trace_header_key`` metadata, else
    from the context, else it is generated. It is appended to the outgoing
    metadata under ``trace_field`` and added to the log metadata.
    """

    def interceptor(
        ctx: Context,
        method: str,
        req: Any,
        reply: Any,
        cc: Any,
        invoker: Invoker,
        *opts: Any,
    ) -> Any:
        trace_id = _value_from_metadata(outgoing_metadata(ctx), trace_header_key)
        if not trace_id:
            trace_id = trace_from_context(ctx) or new_trace()
        ctx = append_to_outgoing_context(ctx, trace_field, trace_id)
        return invoker(_with_trace(ctx, trace_field, trace_id), method, req, reply, cc, *opts)

    return interceptor
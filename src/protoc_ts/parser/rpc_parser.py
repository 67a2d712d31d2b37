"""Translate `rpc` declarations into TypeScript method signatures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from protoc_ts.models import StreamBehaviour, TranslateOptions
from protoc_ts.naming import to_camel

_RPC_RE = re.compile(
    r"rpc\s+(?P<name>[^(\s]+)\s*"
    r"\(\s*(?:(?P<request_stream>stream)\s+)?(?P<request_type>[^)\s]+)\s*\)\s*"
    r"returns\s*"
    r"\(\s*(?:(?P<response_stream>stream)\s+)?(?P<response_type>[^)\s]+)\s*\)"
)

METADATA_PARAMETER = "metadata: any"


@dataclass
class RpcMethod:
    name: str
    request_type: str
    response_type: str
    request_stream: bool = False
    response_stream: bool = False


def match_rpc(line: str) -> Optional[RpcMethod]:
    """Extract the parts of an rpc declaration, or None if the line has another shape."""
    m = _RPC_RE.search(line)
    if m is None:
        return None
    return RpcMethod(
        name=m.group("name"),
        request_type=m.group("request_type"),
        response_type=m.group("response_type"),
        request_stream=m.group("request_stream") is not None,
        response_stream=m.group("response_stream") is not None,
    )


def render_stream_type(type_name: str, is_stream: bool, behaviour: StreamBehaviour) -> str:
    if not is_stream or behaviour is StreamBehaviour.STRIP:
        return type_name
    if behaviour is StreamBehaviour.NATIVE:
        return "Stream"
    return f"Stream<{type_name}>"


def render_rpc_method(method: RpcMethod, options: TranslateOptions) -> str:
    behaviour = options.stream_behaviour

    param_name = to_camel(method.request_type)
    if method.request_stream and behaviour is not StreamBehaviour.STRIP:
        param_name += "Stream"

    request_type = render_stream_type(method.request_type, method.request_stream, behaviour)
    response_type = render_stream_type(method.response_type, method.response_stream, behaviour)

    params = f"{param_name}: {request_type}"
    if options.use_metadata:
        params += f", {METADATA_PARAMETER}"
    if options.use_observable:
        response_type = f"Observable<{response_type}>"

    return f"{to_camel(method.name)} ({params}): {response_type}"


def parse_rpc_line(line: str, options: TranslateOptions) -> str:
    """Translate an rpc line; lines that don't look like `rpc A(B) returns (C)` pass through unchanged."""
    method = match_rpc(line)
    if method is None:
        return line
    return render_rpc_method(method, options)

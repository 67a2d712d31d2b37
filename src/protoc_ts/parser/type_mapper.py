from __future__ import annotations

from typing import Dict, Optional

# Proto scalar type -> TypeScript type
SCALAR_TYPE_MAP: Dict[str, str] = {
    "double": "number",
    "float": "number",
    "int32": "number",
    "int64": "number",
    "uint32": "number",
    "uint64": "number",
    "sint32": "number",
    "sint64": "number",
    "fixed32": "number",
    "fixed64": "number",
    "sfixed32": "number",
    "sfixed64": "number",
    "bool": "boolean",
    "string": "string",
    "bytes": "string",
}


def map_scalar_type(token: str) -> Optional[str]:
    """Return the TypeScript type for a proto scalar keyword, or None for anything else."""
    return SCALAR_TYPE_MAP.get(token)


def resolve_field_type(token: str) -> str:
    """Scalars map to their TypeScript type; other tokens are message/enum references."""
    return map_scalar_type(token) or token

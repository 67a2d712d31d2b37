from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Union

from protoc_ts.models import ConfigurationError, ProtocTsError

Source = Union[str, bytes, bytearray, os.PathLike, IO]

_SCHEMA_CHARS = ("{", "=", ";")


class SourceError(ProtocTsError):
    """Raised when a schema source cannot be read."""


def _read_path(path: Union[str, os.PathLike]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Cannot read schema file '{path}': {e}") from e


def _decode(data: Union[bytes, bytearray], origin: str) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceError(f"Cannot decode schema {origin} as UTF-8: {e}") from e


def _looks_like_path(text: str) -> bool:
    if any(c in text for c in _SCHEMA_CHARS):
        return False
    return text.endswith(".proto") or "/" in text or os.sep in text


def read_source(source: Source) -> str:
    """Resolve a schema source into its text.

    Accepts raw schema text, a path (str or PathLike), bytes, or any
    readable object returning str or bytes. A single-line str naming an
    existing file is read from disk. A single-line str that looks like a
    path (ends in ``.proto`` or holds a path separator, and has none of
    ``{``, ``=`` or ``;``) but names no file raises SourceError. Any other
    str is the schema text itself.
    """
    if source is None:
        raise ConfigurationError("No file specified")

    if isinstance(source, (bytes, bytearray)):
        content = _decode(source, "bytes")
    elif isinstance(source, str):
        candidate = source.strip()
        if "\n" in source or not candidate:
            content = source
        elif os.path.isfile(source):
            content = _read_path(source)
        elif _looks_like_path(candidate):
            raise SourceError(f"Schema file '{source}' does not exist")
        else:
            content = source
    elif isinstance(source, os.PathLike):
        content = _read_path(source)
    elif hasattr(source, "read"):
        data = source.read()
        content = _decode(data, "stream") if isinstance(data, (bytes, bytearray)) else data
    else:
        raise SourceError(f"Unsupported schema source type: {type(source).__name__}")

    if not content:
        raise ConfigurationError("No file specified")
    return content

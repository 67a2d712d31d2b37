from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

DEFAULT_SYNTAX = "proto3"


class ProtocTsError(Exception):
    """Base class for all errors raised by protoc_ts."""


class ConfigurationError(ProtocTsError):
    """Raised for invalid options or missing input, before any line is parsed."""


class StreamBehaviour(Enum):
    STRIP = "strip"
    GENERIC = "generic"
    NATIVE = "native"


def resolve_stream_behaviour(value: Union[StreamBehaviour, str]) -> StreamBehaviour:
    """Accept either a StreamBehaviour or its string value."""
    if isinstance(value, StreamBehaviour):
        return value
    try:
        return StreamBehaviour(value)
    except ValueError:
        raise ConfigurationError(f'"{value}" is not a valid stream behaviour!') from None


@dataclass
class ParseState:
    """State carried across the lines of a single translation run."""

    syntax: str = DEFAULT_SYNTAX
    has_package: bool = False

    @property
    def fields_optional_by_default(self) -> bool:
        return self.syntax == "proto3"


@dataclass
class TranslateOptions:
    keep_comments: bool = False
    stream_behaviour: Union[StreamBehaviour, str] = StreamBehaviour.NATIVE
    strip_empty_lines: bool = True
    use_observable: bool = False
    use_metadata: bool = False
    # Run the Prettier pass in parse() when a config file is found.
    format_output: bool = True

    def __post_init__(self):
        self.stream_behaviour = resolve_stream_behaviour(self.stream_behaviour)

    @property
    def strips_streams(self) -> bool:
        return self.stream_behaviour is StreamBehaviour.STRIP


@dataclass(frozen=True)
class TranslationResult:
    text: str

    def to_string(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def to_file(self, path: Union[str, Path]) -> str:
        """Write the generated declarations to path and return the path written."""
        Path(path).write_text(self.text, encoding="utf-8")
        return str(path)

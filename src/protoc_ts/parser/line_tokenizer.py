"""Line tokenizer and classifier for protobuf (.proto) source lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class LineKind(Enum):
    BLANK = auto()
    REMOVED = auto()
    COMMENT = auto()
    CLOSE_BRACE = auto()
    MESSAGE_OPEN = auto()
    ENUM_OPEN = auto()
    RPC = auto()
    PACKAGE = auto()
    FIELD = auto()


class FieldModifier(Enum):
    NONE = auto()
    REQUIRED = auto()
    OPTIONAL = auto()
    REPEATED = auto()


_KEYWORDS = {
    "//": LineKind.COMMENT,
    "}": LineKind.CLOSE_BRACE,
    "message": LineKind.MESSAGE_OPEN,
    "service": LineKind.MESSAGE_OPEN,
    "enum": LineKind.ENUM_OPEN,
    "rpc": LineKind.RPC,
    "package": LineKind.PACKAGE,
}

_MODIFIERS = {
    "required": FieldModifier.REQUIRED,
    "optional": FieldModifier.OPTIONAL,
    "repeated": FieldModifier.REPEATED,
}


@dataclass
class ClassifiedLine:
    kind: LineKind
    line: str = ""
    tokens: List[str] = field(default_factory=list)
    modifier: FieldModifier = FieldModifier.NONE


def tokenize_line(line: str) -> List[str]:
    """Split a line into its non-empty whitespace-delimited tokens."""
    return line.split()


def classify_line(line: Optional[str]) -> ClassifiedLine:
    """Classify a source line by its leading token.

    A None line is one the preprocessor marked for removal. For field
    lines the leading required/optional/repeated keyword is consumed and
    recorded as the modifier; the remaining tokens start at the type.
    """
    if line is None:
        return ClassifiedLine(LineKind.REMOVED)

    tokens = tokenize_line(line)
    if not tokens:
        return ClassifiedLine(LineKind.BLANK, line)

    kind = _KEYWORDS.get(tokens[0])
    if kind is not None:
        return ClassifiedLine(kind, line, tokens)

    modifier = _MODIFIERS.get(tokens[0])
    if modifier is not None:
        return ClassifiedLine(LineKind.FIELD, line, tokens[1:], modifier)

    return ClassifiedLine(LineKind.FIELD, line, tokens)

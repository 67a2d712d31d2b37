"""Syntax detection and declaration stripping, run once over the raw schema text."""

from __future__ import annotations

import re
from typing import List, Optional

_SYNTAX_RE = re.compile(r"^\s*syntax\s*=\s*[\"'](proto[23])[\"']\s*;", re.MULTILINE)
_DECLARATION_RE = re.compile(r"^\s*(?:syntax\b|option\s)")


def detect_syntax(text: str) -> Optional[str]:
    """Return "proto2"/"proto3" from the first syntax declaration, or None if there is none."""
    match = _SYNTAX_RE.search(text)
    return match.group(1) if match else None


def split_lines(text: str) -> List[str]:
    return [line.rstrip("\r") for line in text.split("\n")]


def strip_declarations(lines: List[str]) -> List[Optional[str]]:
    """Replace syntax and option declaration lines with None (the removal marker)."""
    return [None if _DECLARATION_RE.match(line) else line for line in lines]

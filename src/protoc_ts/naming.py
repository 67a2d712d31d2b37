"""Identifier case conversion for generated TypeScript names."""

from __future__ import annotations

import re
from typing import List

# Word boundaries: fooBar -> foo Bar, HTTPServer -> HTTP Server
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(name: str) -> List[str]:
    """Split an identifier into words.

    Handles:
    - snake_case / kebab-case / dotted: route_note, route.note -> [route, note]
    - PascalCase/camelCase: GetFeature -> [Get, Feature]
    - acronyms: GetHTTPInfo -> [Get, HTTP, Info]
    """
    s = _LOWER_UPPER.sub(r"\1 \2", name)
    s = _ACRONYM_WORD.sub(r"\1 \2", s)
    return _SEPARATORS.sub(" ", s).split()


def _capitalize(word: str, index: int) -> str:
    rest = word[1:].lower()
    # A digit-leading word after the first keeps a separator: version_2 -> Version_2
    if index > 0 and word[0].isdigit():
        return f"_{word[0]}{rest}"
    return word[0].upper() + rest


def to_pascal(name: str) -> str:
    return "".join(_capitalize(w, i) for i, w in enumerate(split_words(name)))


def to_camel(name: str) -> str:
    words = split_words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(w, i) for i, w in enumerate(words) if i > 0)

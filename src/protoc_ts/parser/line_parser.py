"""Per-line construct parsers.

A LineTranslator owns the ParseState of one translation run; every line
is classified first and then handed to the parser for its construct.
Each call returns the translated line, or None when the line is dropped.
"""

from __future__ import annotations

from typing import List, Optional

from protoc_ts.models import ParseState, TranslateOptions
from protoc_ts.naming import to_camel, to_pascal

from .line_tokenizer import ClassifiedLine, FieldModifier, LineKind, classify_line
from .rpc_parser import parse_rpc_line
from .type_mapper import map_scalar_type, resolve_field_type


class LineTranslator:
    def __init__(self, options: TranslateOptions, state: Optional[ParseState] = None):
        self.options = options
        self.state = state if state is not None else ParseState()

    def translate_lines(self, lines: List[Optional[str]]) -> List[str]:
        """Translate every line, keeping input order and dropping removed lines."""
        result: List[str] = []
        for line in lines:
            translated = self.translate_line(line)
            if translated is not None:
                result.append(translated)
        return result

    def translate_line(self, line: Optional[str]) -> Optional[str]:
        classified = classify_line(line)
        kind = classified.kind

        if kind in (LineKind.BLANK, LineKind.REMOVED):
            return None if self.options.strip_empty_lines else ""
        if kind == LineKind.COMMENT:
            return classified.line if self.options.keep_comments else None
        if kind == LineKind.CLOSE_BRACE:
            return "}"
        if kind == LineKind.MESSAGE_OPEN:
            return self._parse_block("interface", classified.tokens)
        if kind == LineKind.ENUM_OPEN:
            return self._parse_block("enum", classified.tokens)
        if kind == LineKind.RPC:
            # Signatures need the unsplit parenthesis structure.
            return parse_rpc_line(classified.line, self.options)
        if kind == LineKind.PACKAGE:
            return self._parse_package(classified.tokens)
        return self._parse_field(classified)

    # -- construct parsers --

    def _parse_block(self, declaration: str, tokens: List[str]) -> str:
        """Parse: (message|service|enum) Name { [single trailing fragment }]"""
        name = tokens[1] if len(tokens) > 1 else ""
        body_start = 3
        if name.endswith("{"):
            name = name[:-1]
            body_start = 2
        output = f"export {declaration} {name} {{"
        # message Foo {  -- body follows on the next lines
        if len(tokens) <= body_start:
            return output

        # Only one trailing fragment is translated; nested bodies on one line are not.
        body = tokens[body_start:]
        if body[-1] == "}":
            body = body[:-1]
        fragment = self.translate_line(" ".join(body)) if body else None
        return output + (fragment or "") + "}"

    def _parse_package(self, tokens: List[str]) -> str:
        self.state.has_package = True
        name = tokens[1].replace(";", "") if len(tokens) > 1 else ""
        return f"export namespace {to_pascal(name)} {{"

    def _parse_field(self, classified: ClassifiedLine) -> Optional[str]:
        """Parse a message field or enum value from tokens starting at the type."""
        tokens = classified.tokens
        if not tokens:
            # A lone modifier keyword.
            return None if self.options.strip_empty_lines else ""

        if _is_enum_value(tokens):
            return f"{tokens[0]},"

        optional = self.state.fields_optional_by_default
        if classified.modifier == FieldModifier.REQUIRED:
            optional = False
        elif classified.modifier == FieldModifier.OPTIONAL:
            optional = True
        repeated = classified.modifier == FieldModifier.REPEATED

        field_name = to_camel(tokens[1]) if len(tokens) > 1 else ""
        ts_type = resolve_field_type(tokens[0])
        return f"{field_name}{'?' if optional else ''}: {ts_type}{'[]' if repeated else ''}"


def _is_enum_value(tokens: List[str]) -> bool:
    """The only place fields and enum values are told apart.

    An unmapped first token directly followed by `=` is taken to be an enum
    value (`NAME = 1;`); everything else is a field declaration. This is a
    heuristic: it does not know whether the enclosing block is an enum.
    """
    if map_scalar_type(tokens[0]) is not None:
        return False
    return len(tokens) > 1 and tokens[1] == "="

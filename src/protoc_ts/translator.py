"""Translate .proto schema text into TypeScript declarations.

    result = parse("route_guide.proto", stream_behaviour="generic", keep_comments=True)
    result.to_file("route_guide.ts")
"""

from __future__ import annotations

import dataclasses
import sys
from typing import Optional

from protoc_ts.formatter import FormatterError, maybe_format
from protoc_ts.generator.ts_generator import assemble
from protoc_ts.models import (
    ConfigurationError,
    ParseState,
    TranslateOptions,
    TranslationResult,
    resolve_stream_behaviour,
)
from protoc_ts.parser.line_parser import LineTranslator
from protoc_ts.parser.syntax import detect_syntax, split_lines, strip_declarations
from protoc_ts.reader import Source, read_source


def _resolve_options(options: Optional[TranslateOptions], overrides) -> TranslateOptions:
    if options is None:
        options = TranslateOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)
    # Options are mutable, so re-check a behaviour assigned after construction.
    behaviour = resolve_stream_behaviour(options.stream_behaviour)
    if behaviour is not options.stream_behaviour:
        options = dataclasses.replace(options, stream_behaviour=behaviour)
    return options


def translate(text: str, options: Optional[TranslateOptions] = None, **overrides) -> TranslationResult:
    """Translate schema text without touching the filesystem or the formatter.

    Every call builds its own ParseState, so runs never share syntax or
    package state.
    """
    options = _resolve_options(options, overrides)
    if not text:
        raise ConfigurationError("No file specified")

    state = ParseState()
    state.syntax = detect_syntax(text) or state.syntax

    lines = strip_declarations(split_lines(text))
    translator = LineTranslator(options, state)
    output = translator.translate_lines(lines)

    return TranslationResult(assemble(output, options, state))


def parse(source: Source, options: Optional[TranslateOptions] = None, **overrides) -> TranslationResult:
    """Read a schema from text, a path, bytes or a readable object and translate it.

    When options.format_output is set and a Prettier config is found, the
    output is run through prettier; a failing prettier leaves the text
    unformatted.
    """
    options = _resolve_options(options, overrides)
    text = read_source(source)
    result = translate(text, options)

    if not options.format_output:
        return result
    try:
        return TranslationResult(maybe_format(result.text))
    except FormatterError as e:
        print(f"Warning: {e}. Keeping unformatted output.", file=sys.stderr)
        return result

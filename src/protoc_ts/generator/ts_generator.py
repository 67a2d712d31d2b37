from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from protoc_ts.models import ParseState, StreamBehaviour, TranslateOptions

OBSERVABLE_IMPORT = "import { Observable } from 'rxjs';"

# Stream behaviour -> module providing the Stream type
STREAM_MODULES = {
    StreamBehaviour.NATIVE: "stream",
    StreamBehaviour.GENERIC: "ts-stream",
}


def stream_import_line(behaviour: StreamBehaviour) -> str:
    return f"import Stream from '{STREAM_MODULES[behaviour]}'"


def _needs_stream_import(lines: List[str], options: TranslateOptions) -> bool:
    if options.strips_streams:
        return False
    return any("Stream" in line for line in lines)


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=False,
    )


def assemble(lines: List[str], options: TranslateOptions, state: ParseState) -> str:
    """Join translated lines into the final declaration file.

    Prepends the rxjs Observable import and the Stream import when they are
    used, and closes the package namespace when one was opened.
    """
    env = _get_template_env()
    template = env.get_template("declarations.ts.j2")

    stream_import = None
    if _needs_stream_import(lines, options):
        stream_import = stream_import_line(options.stream_behaviour)

    return template.render(
        observable_import=OBSERVABLE_IMPORT if options.use_observable else None,
        stream_import=stream_import,
        lines=lines,
        close_namespace=state.has_package,
    )

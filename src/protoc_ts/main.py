from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from protoc_ts.models import ProtocTsError, StreamBehaviour, TranslateOptions
from protoc_ts.translator import parse


def _find_proto_files(root: str) -> List[str]:
    """Recursively find .proto files under root, sorted for deterministic output."""
    return sorted(str(p) for p in Path(root).rglob("*.proto"))


def generate(proto_path: str, out_dir: str, options: TranslateOptions) -> str:
    """Translate one .proto file and write <out_dir>/<stem>.ts; returns the written path."""
    result = parse(Path(proto_path), options)
    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, Path(proto_path).stem + ".ts")
    return result.to_file(out_path)


def run(proto: str, out_dir: str, options: TranslateOptions) -> List[str]:
    if os.path.isdir(proto):
        inputs = _find_proto_files(proto)
        if not inputs:
            print(f"No .proto files found under directory: {proto}")
            sys.exit(1)
    else:
        inputs = [proto]

    generated: List[str] = []
    for p in inputs:
        try:
            generated.append(generate(p, out_dir, options))
        except ProtocTsError as e:
            print(f"FATAL: {p}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"  Generated: {generated[-1]}")

    print(f"Done! {len(generated)} file(s) written to {out_dir}")
    return generated


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate TypeScript interfaces, enums and namespaces from .proto files",
    )
    parser.add_argument("--proto", required=True, help="Path to a .proto file or a directory containing .proto files (recursively)")
    parser.add_argument("--out", required=True, help="Output directory for generated .ts file(s)")
    parser.add_argument("--keep-comments", action="store_true", help="Keep // comment lines in the output")
    parser.add_argument(
        "--stream-behaviour",
        default=StreamBehaviour.NATIVE.value,
        choices=[b.value for b in StreamBehaviour],
        help="How streaming rpc types are rendered (default: native)",
    )
    parser.add_argument("--keep-empty-lines", action="store_true", help="Keep blank lines instead of stripping them")
    parser.add_argument("--observable", action="store_true", help="Wrap rpc return types in rxjs Observable<>")
    parser.add_argument("--metadata", action="store_true", help="Add a `metadata: any` parameter to every rpc method")
    parser.add_argument("--no-format", action="store_true", help="Skip the prettier pass even when a config is found")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_arg_parser().parse_args(argv)
    options = TranslateOptions(
        keep_comments=args.keep_comments,
        stream_behaviour=args.stream_behaviour,
        strip_empty_lines=not args.keep_empty_lines,
        use_observable=args.observable,
        use_metadata=args.metadata,
        format_output=not args.no_format,
    )
    run(args.proto, args.out, options)


if __name__ == "__main__":
    main()

"""Optional Prettier pass over the generated TypeScript."""

from __future__ import annotations

import json
import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from protoc_ts.models import ProtocTsError

PRETTIER_CONFIG_FILES = (
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.yaml",
    ".prettierrc.yml",
    ".prettierrc.json5",
    ".prettierrc.js",
    ".prettierrc.cjs",
    ".prettierrc.toml",
    "prettier.config.js",
    "prettier.config.cjs",
)


class FormatterError(ProtocTsError):
    """Raised when the prettier process fails."""


def _package_json_has_prettier(path: Path) -> bool:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return False
    return isinstance(data, dict) and "prettier" in data


def find_prettier_config(start_dir: Optional[str] = None) -> Optional[Path]:
    """Walk up from start_dir (default: cwd) to the first directory holding a Prettier config."""
    directory = Path(start_dir or os.getcwd()).resolve()
    for candidate in (directory, *directory.parents):
        for name in PRETTIER_CONFIG_FILES:
            path = candidate / name
            if path.is_file():
                return path
        package_json = candidate / "package.json"
        if package_json.is_file() and _package_json_has_prettier(package_json):
            return package_json
    return None


def format_typescript(text: str, config_path: Path, executable: str = "prettier") -> str:
    """Run prettier over text with the given config and return the formatted source."""
    cmd = [executable, "--parser", "typescript"]
    if config_path.name != "package.json":
        cmd += ["--config", str(config_path)]
    try:
        res = subprocess.run(
            cmd,
            input=text,
            check=True,
            capture_output=True,
            text=True,
            cwd=str(config_path.parent),
        )
    except FileNotFoundError as e:
        raise FormatterError(f"'{executable}' not found. Install prettier and ensure it is in PATH.") from e
    except subprocess.CalledProcessError as e:
        raise FormatterError(f"prettier failed: {e.stderr}") from e
    return res.stdout


def maybe_format(text: str, start_dir: Optional[str] = None) -> str:
    """Format text when both a Prettier config and a prettier executable are available."""
    config_path = find_prettier_config(start_dir)
    if config_path is None:
        return text
    executable = shutil.which("prettier")
    if executable is None:
        return text
    return format_typescript(text, config_path, executable)

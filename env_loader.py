from __future__ import annotations

import os
from pathlib import Path

ENV_FILES = (".env", ".env.local")


def _parse_line(raw: str) -> tuple[str, str] | None:
    line = raw.strip()
    if not line or line.startswith("#"):
        return None
    if line.lower().startswith("export "):
        line = line[len("export "):].strip()
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_dotenv_like(*candidates: str) -> str | None:
    """Load KEY=VALUE pairs from the first ``.env``-style file found.

    Explicit ``candidates`` are tried first, then ``.env`` / ``.env.local``
    in the working directory and in the project root. Variables already set
    in the environment win. Returns the loaded path, or None.
    """
    project_root = Path(__file__).resolve().parent
    paths = [Path(c) for c in candidates if c]
    for name in ENV_FILES:
        paths.extend([Path.cwd() / name, project_root / name])

    for path in paths:
        if not path.is_file():
            continue
        for raw in path.read_text(encoding="utf-8").splitlines():
            parsed = _parse_line(raw)
            if parsed is not None:
                os.environ.setdefault(*parsed)
        return str(path)
    return None

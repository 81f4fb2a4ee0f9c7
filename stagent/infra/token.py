"""Agent bearer token loading."""

from __future__ import annotations

from pathlib import Path

from stagent.infra.config import settings


def read_token(path: str | Path | None = None) -> str:
    """Read the agent token from ``path`` (default: ``settings.agent_token_file``).

    Surrounding whitespace is stripped. A missing file raises
    FileNotFoundError; an empty one raises ValueError.
    """
    token_path = Path(path if path is not None else settings.agent_token_file)
    token = token_path.read_text(encoding="utf-8").strip()
    if not token:
        raise ValueError(f"Agent token file {token_path} is empty")
    return token

from __future__ import annotations

from collections.abc import Sequence


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def format_command_line(executable: str, args: Sequence[str]) -> str:
    """Render a command for log output only; it is never handed to a shell."""
    parts = [executable]
    for arg in args:
        parts.append(f'"{arg}"' if any(c.isspace() for c in arg) else arg)
    return " ".join(parts)

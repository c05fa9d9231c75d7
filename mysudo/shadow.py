"""Reading of the system shadow password database."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

SHADOW_PATH = "/etc/shadow"

_LINE_PATTERN = re.compile(r"([^:]+):([^:]+)")


@dataclass
class ShadowEntry:
    """One account from the shadow file: name and stored password hash."""

    user: str
    hash: str
    id: str = ""
    salt: str = ""


def parse_shadow_line(line: str) -> Optional[ShadowEntry]:
    """Parse ``user:hash:...``; return ``None`` if either field is empty or missing."""
    match = _LINE_PATTERN.match(line)
    if match is None:
        return None
    user, full_hash = match.groups()
    return ShadowEntry(user=user, hash=full_hash)


def parse_shadow(lines: Iterable[str]) -> list[ShadowEntry]:
    """Parse every line, skipping those that do not hold an account."""
    return [entry for entry in map(parse_shadow_line, lines) if entry is not None]


def load_shadow(path: Union[str, Path] = SHADOW_PATH) -> list[ShadowEntry]:
    """Read the shadow file at ``path``; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_shadow(handle)
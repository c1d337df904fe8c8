"""Domain models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class User:
    """Login credentials record. No identity field; created by the repository or the service."""

    nick: str
    password: str = field(repr=False)


__all__ = ["User"]

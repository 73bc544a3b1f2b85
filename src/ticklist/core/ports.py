# src/ticklist/core/ports.py

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps the preferences backend swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

TaskListener = Callable[[Sequence[Any]], None]
# Receives the current ordered task snapshot after every change.


class PrefsRepo(Protocol):
    """Durable key -> bytes slot (local preferences)."""

    def get_data(self, key: str) -> bytes | None: ...
    def set_data(self, key: str, value: bytes) -> None: ...
    def remove(self, key: str) -> bool: ...
    def close(self) -> None: ...

# src/ticklist/tasks/task_codec.py

"""
JSON wire format of the persisted task list.

The blob is a compact UTF-8 JSON array:
    [{"id": "<uuid>", "name": "...", "isDone": false}, ...]

Decoding is all-or-nothing: one bad item rejects the whole blob.
"""

from __future__ import annotations

import json
import re
import uuid
from collections.abc import Iterable
from typing import Any

from .task_models import Task

# Canonical 8-4-4-4-12 text only; braced, urn: and bare-hex spellings are rejected.
_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


class TaskDecodeError(ValueError):
    """Raised when a persisted blob is not a valid task list."""


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {"id": task.id, "name": task.name, "isDone": task.is_done}


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    # TypeError/ValueError propagate to the caller (e.g. a non-str name).
    payload = [_task_to_dict(t) for t in tasks]
    # ASCII output: lone surrogates (surrogateescape input) become \udcXX escapes.
    return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("ascii")


def _dict_to_task(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise TaskDecodeError(f"item {index}: expected an object, got {type(raw).__name__}")

    for key in ("id", "name", "isDone"):
        if key not in raw:
            raise TaskDecodeError(f"item {index}: missing key {key!r}")

    task_id, name, is_done = raw["id"], raw["name"], raw["isDone"]

    if not isinstance(task_id, str):
        raise TaskDecodeError(f"item {index}: id must be a string")
    if not _UUID_RE.fullmatch(task_id):
        raise TaskDecodeError(f"item {index}: id is not a UUID: {task_id!r}")
    if not isinstance(name, str):
        raise TaskDecodeError(f"item {index}: name must be a string")
    if not isinstance(is_done, bool):
        raise TaskDecodeError(f"item {index}: isDone must be a boolean")

    return Task(id=task_id, name=name, is_done=is_done)


def decode_tasks(blob: bytes | str) -> list[Task]:
    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise TaskDecodeError(f"not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a JSON array, got {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[uuid.UUID] = set()
    for i, raw in enumerate(data):
        task = _dict_to_task(raw, i)
        # Compare parsed values so case variants of one UUID count as duplicates.
        key = uuid.UUID(task.id)
        if key in seen:
            raise TaskDecodeError(f"item {i}: duplicate id {task.id}")
        seen.add(key)
        tasks.append(task)
    return tasks

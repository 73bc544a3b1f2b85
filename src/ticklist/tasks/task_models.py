# src/ticklist/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Frozen: the store swaps in an updated copy (dataclasses.replace) at the same
    position, so snapshots handed to listeners never change under them.
    """

    name: str
    is_done: bool = False
    id: str = field(default_factory=new_task_id)

from .task_codec import TaskDecodeError, decode_tasks, encode_tasks
from .task_models import Task
from .task_store import TASKS_KEY, TaskListStore

__all__ = [
    "TASKS_KEY",
    "Task",
    "TaskDecodeError",
    "TaskListStore",
    "decode_tasks",
    "encode_tasks",
]

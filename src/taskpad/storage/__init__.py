"""
Task persistence.

- task_file.py: rendered-line codec (encode_task/decode_task) and TaskFileStorage
"""

from .task_file import TaskDecodeError, TaskFileStorage, decode_task, encode_task

__all__ = ["TaskDecodeError", "TaskFileStorage", "decode_task", "encode_task"]

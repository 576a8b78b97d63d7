"""
Small utilities shared by all layers.
"""

from .timestamp_utils import now_epoch_ms, epoch_ms_to_iso8601
from .types import UserId, TaskId

__all__ = ["now_epoch_ms", "epoch_ms_to_iso8601", "UserId", "TaskId"]

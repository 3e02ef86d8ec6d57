"""
本文件用于定义日志提取任务的内存模型（不落库，仅在进程生命周期内有效）。
主要类:
- `LogTaskStatus`: 任务状态
- `LogTask`: 日志提取任务记录
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class LogTaskStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass
class LogTask:
    id: str
    date: str
    status: LogTaskStatus = LogTaskStatus.IN_PROGRESS
    file_path: Optional[str] = None
    error_message: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_finished(self) -> bool:
        return self.status != LogTaskStatus.IN_PROGRESS

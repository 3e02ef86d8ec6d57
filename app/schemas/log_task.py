"""
本文件用于定义日志提取任务相关的响应体数据模型。
主要类:
- `LogTaskCreated`: 提交任务后的响应（仅含任务 ID）
- `LogTaskRead`: 任务状态响应
"""

from datetime import datetime
from typing import Optional

from app.models.log_task import LogTaskStatus
from app.schemas.common import CamelModel


class LogTaskCreated(CamelModel):
    task_id: str


class LogTaskRead(CamelModel):
    id: str
    status: LogTaskStatus
    date: str
    file_path: Optional[str] = None
    error_message: Optional[str] = None
    created_at: datetime

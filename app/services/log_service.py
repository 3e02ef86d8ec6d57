"""
本文件用于实现日志文件提取：按日期从应用日志中筛选行，异步生成新文件并跟踪任务状态，供后续下载。
主要类/函数:
- `filter_log_lines`: 从源日志中筛选包含指定日期子串的行
- `LogService`: 日志任务管理（提交、查询状态、获取下载路径、同步按日期读取）
"""

import asyncio
import time
import uuid
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Dict, List, Optional

from app.core.exceptions import InvalidInputError, NotFoundError, StorageIOError
from app.core.logger import setup_logger
from app.models.log_task import LogTask, LogTaskStatus

logger = setup_logger("LogService")

DATE_FORMAT = "%Y-%m-%d"


def validate_date(date: str) -> str:
    try:
        datetime.strptime(date, DATE_FORMAT)
    except (TypeError, ValueError):
        raise InvalidInputError("Invalid date format. Use yyyy-MM-dd")
    return date


def filter_log_lines(source_path: Path, date: str) -> List[str]:
    with open(source_path, "r", encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\r\n") for line in f if date in line]


class LogService:
    """
    输入:
    - `source_log_path`: 源日志文件路径
    - `output_dir`: 生成文件的输出目录

    输出:
    - 日志任务服务对象

    作用:
    - `generate` 立即返回任务，文件扫描在线程中执行；任务只会从 IN_PROGRESS 迁移一次到 COMPLETED/FAILED
    """

    def __init__(self, source_log_path: str, output_dir: str) -> None:
        self.source_log_path = Path(source_log_path)
        self.output_dir = Path(output_dir)
        self._lock = Lock()
        self._tasks: Dict[str, LogTask] = {}
        self._jobs: Dict[str, asyncio.Task] = {}

    def generate(self, date: str) -> LogTask:
        validate_date(date)
        task = LogTask(id=str(uuid.uuid4()), date=date)
        with self._lock:
            self._tasks[task.id] = task

        job = asyncio.create_task(self._run(task))
        self._jobs[task.id] = job
        job.add_done_callback(lambda _: self._jobs.pop(task.id, None))
        logger.info(f"Log task submitted: id={task.id}, date={date}")
        return task

    async def _run(self, task: LogTask) -> None:
        try:
            file_path = await asyncio.to_thread(self._extract, task.date)
        except Exception as e:
            self._finish(task, LogTaskStatus.FAILED, error_message=str(e))
            logger.error(f"Log task failed: id={task.id}, error={e}")
            return
        self._finish(task, LogTaskStatus.COMPLETED, file_path=file_path)
        logger.info(f"Log task completed: id={task.id}, file={file_path}")

    def _extract(self, date: str) -> str:
        lines = filter_log_lines(self.source_log_path, date)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / f"log-{date}-{int(time.time() * 1000)}.log"
        with open(target, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        return str(target)

    def _finish(
        self,
        task: LogTask,
        status: LogTaskStatus,
        file_path: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> None:
        with self._lock:
            if task.is_finished:
                return
            task.file_path = file_path
            task.error_message = error_message
            task.status = status

    def get_task(self, task_id: str) -> LogTask:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(f"Log task {task_id} not found")
        return task

    def get_download_path(self, task_id: str) -> Path:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None or task.status != LogTaskStatus.COMPLETED:
            raise NotFoundError(f"Log file for task {task_id} is not available")
        path = Path(task.file_path)
        if not path.is_file():
            raise NotFoundError(f"Log file for task {task_id} no longer exists")
        return path

    async def wait_for(self, task_id: str) -> LogTask:
        job = self._jobs.get(task_id)
        if job is not None:
            await asyncio.shield(job)
        return self.get_task(task_id)

    async def drain(self) -> None:
        jobs = list(self._jobs.values())
        if jobs:
            logger.info(f"Waiting for {len(jobs)} pending log tasks")
            await asyncio.gather(*jobs, return_exceptions=True)

    async def get_logs_by_date(self, date: str) -> str:
        """
        输入:
        - `date`: yyyy-MM-dd 格式日期

        输出:
        - 源日志中包含该日期的所有行（以换行拼接）

        作用:
        - 同步读取路径：日期非法抛 InvalidInputError，文件不存在或无匹配抛 NotFoundError，读取失败抛 StorageIOError
        """

        validate_date(date)
        if not self.source_log_path.is_file():
            raise NotFoundError("Source log file not found")
        try:
            lines = await asyncio.to_thread(filter_log_lines, self.source_log_path, date)
        except OSError as e:
            logger.error(f"Failed to read log file {self.source_log_path}: {e}")
            raise StorageIOError("Error reading log file")
        if not lines:
            raise NotFoundError(f"No log entries found for {date}")
        return "\n".join(lines)

"""
本文件用于提供日志文件相关 API：提交按日期提取任务、查询任务状态、下载生成文件、直接按日期读取。
主要函数:
- `generate_log_file`: 提交提取任务（立即返回任务 ID）
- `get_task_status`: 查询任务状态
- `download_log_file`: 下载已完成任务的文件
- `get_logs_by_date`: 同步读取指定日期的日志行
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse, PlainTextResponse

from app.api.deps import get_log_service
from app.schemas.log_task import LogTaskCreated, LogTaskRead
from app.services import LogService

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.post("/generate", response_model=LogTaskCreated)
async def generate_log_file(
    date: str = Query(..., description="yyyy-MM-dd"),
    service: LogService = Depends(get_log_service),
):
    """
    输入:
    - `date`: 日期（yyyy-MM-dd）

    输出:
    - `{"taskId": ...}`

    作用:
    - 以后台任务方式从源日志中提取该日期的行，不等待任务完成
    """

    task = service.generate(date)
    return LogTaskCreated(task_id=task.id)


@router.get("/status/{task_id}", response_model=LogTaskRead)
async def get_task_status(task_id: str, service: LogService = Depends(get_log_service)):
    return service.get_task(task_id)


@router.get("/download/{task_id}")
async def download_log_file(task_id: str, service: LogService = Depends(get_log_service)):
    path = service.get_download_path(task_id)
    return FileResponse(path, media_type="text/plain", filename=path.name)


@router.get("/by-date", response_class=PlainTextResponse)
async def get_logs_by_date(
    date: str = Query(..., description="yyyy-MM-dd"),
    service: LogService = Depends(get_log_service),
):
    return PlainTextResponse(await service.get_logs_by_date(date))

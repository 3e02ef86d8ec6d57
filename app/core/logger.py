"""
本文件用于初始化并提供项目统一日志能力（根 logger 配置与命名 logger 获取）。
根 logger 同时输出到控制台与 `LOG_FILE_PATH` 指定的日志文件，后者是日志提取功能的数据源。
主要函数:
- `configure_logging`: 初始化根日志格式、等级与输出目标
- `setup_logger`: 获取具备统一格式的命名 logger
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_file_handler: Optional[logging.FileHandler] = None


def _resolve_level(level: str) -> int:
    """
    输入:
    - `level`: 日志等级字符串（如 INFO/DEBUG）

    输出:
    - `logging` 对应的等级整数

    作用:
    - 将字符串日志等级转换为 `logging` 可用的等级值
    """

    return getattr(logging, (level or "").upper(), logging.INFO)


def _attach_file_handler(root: logging.Logger, log_path: str, level: int, formatter: logging.Formatter) -> None:
    global _file_handler
    target = Path(log_path).resolve()
    if _file_handler is not None:
        if Path(_file_handler.baseFilename) == target:
            _file_handler.setLevel(level)
            return
        root.removeHandler(_file_handler)
        _file_handler.close()

    target.parent.mkdir(parents=True, exist_ok=True)
    _file_handler = logging.FileHandler(target, encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(formatter)
    root.addHandler(_file_handler)


def configure_logging() -> None:
    """
    输入:
    - 无

    输出:
    - 无

    作用:
    - 初始化根 logger 的输出格式与等级，挂载控制台与文件输出，并压低常见库的日志等级
    """

    settings = get_settings()
    log_level = _resolve_level(settings.LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    root.setLevel(log_level)

    try:
        _attach_file_handler(root, settings.LOG_FILE_PATH, log_level, formatter)
    except OSError as e:
        root.warning(f"无法写入日志文件 {settings.LOG_FILE_PATH}: {e}")

    noisy_level = log_level
    if log_level == logging.INFO:
        noisy_level = logging.WARNING

    for name in (
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access",
        "asyncio",
        "sqlalchemy.engine",
        "aiosqlite",
    ):
        logging.getLogger(name).setLevel(noisy_level)


def setup_logger(name: str) -> logging.Logger:
    """
    输入:
    - `name`: logger 名称

    输出:
    - `logging.Logger` 实例

    作用:
    - 返回指定名称的 logger，日志统一交由根 logger 的 handler 输出
    """

    logger = logging.getLogger(name)
    if logger.hasHandlers():
        return logger

    configure_logging()
    return logger


logger = setup_logger(get_settings().APP_NAME)

"""
本文件用于定义项目统一的业务异常，便于 API 层集中转换为 HTTP 响应。
主要类:
- `ErrorKind`: 业务错误类别（未找到/输入非法/IO 失败）
- `StoreError`: 业务异常基类
- `NotFoundError` / `InvalidInputError` / `StorageIOError`: 具体业务异常
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    IO_FAILURE = "IO_FAILURE"


class StoreError(Exception):
    """
    输入:
    - `message`: 业务错误信息

    输出:
    - 异常对象（携带 `kind` 错误类别）

    作用:
    - 作为项目统一的业务异常基类，API 层按 `kind` 映射状态码
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class InvalidInputError(StoreError):
    kind = ErrorKind.INVALID_INPUT


class StorageIOError(StoreError):
    """日志文件读写失败"""

    kind = ErrorKind.IO_FAILURE


ERROR_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.IO_FAILURE: 500,
}

"""
本文件用于加载项目运行配置：优先读取项目根目录的 `config.yaml`，其次是环境变量与 `.env`。
主要函数/类:
- `Settings`: 运行时配置模型（支持类型校验与默认值）
- `get_settings`: 获取配置单例（带缓存）
- `reload_settings`: 清除缓存并重新加载配置
- `load_yaml_dict`: 从 YAML 文件读取为字典
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]
CONFIG_PATH = BASE_DIR / "config.yaml"


def load_yaml_dict(file_path: Path) -> Dict[str, Any]:
    if not file_path.exists():
        return {}

    raw_text = file_path.read_text(encoding="utf-8").strip()
    if not raw_text:
        return {}

    data = yaml.safe_load(raw_text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml 顶层必须为映射（key-value）结构")
    return data


def _normalize_yaml_config(data: Dict[str, Any]) -> Dict[str, Any]:
    return {str(k).upper(): v for k, v in (data or {}).items()}


class Settings(BaseSettings):
    """
    输入:
    - `config.yaml`、环境变量与 `.env` 文件中的配置项

    输出:
    - 统一的运行时配置对象

    作用:
    - 集中管理服务运行所需的配置（数据库、日志文件位置等），并提供默认值与类型校验
    """

    APP_NAME: str = "Store"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    DATABASE_URL: str = "sqlite+aiosqlite:///./store.db"
    DB_ECHO: bool = False

    # 应用自身写入的日志文件，同时也是日志提取功能的数据源
    LOG_FILE_PATH: str = "./store.log"
    LOG_OUTPUT_DIR: str = "./generated-logs"

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def yaml_settings():
            return _normalize_yaml_config(load_yaml_dict(CONFIG_PATH))

        return (
            init_settings,
            yaml_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    输入:
    - 无

    输出:
    - `Settings` 单例实例

    作用:
    - 通过缓存避免重复解析配置文件与环境变量
    """

    return Settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()

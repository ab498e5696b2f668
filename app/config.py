"""
全局配置模块：通过 pydantic-settings 读取 .env 环境变量

默认值即服务的固定监听地址（127.0.0.1:3000），不配置也能直接启动。
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从 .env 文件加载（可选）"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── 应用 ──
    ENV: str = "development"  # development | production
    APP_NAME: str = "todo-service"
    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR

    # ── 监听地址 ──
    HOST: str = "127.0.0.1"  # 仅回环地址
    APP_PORT: int = 3000


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()

"""
结构化日志配置：structlog + contextvars 自动注入 trace_id
- 开发环境：彩色文本输出
- 生产环境：JSON 输出（便于日志平台解析）
- 日志级别由 Settings.LOG_LEVEL 控制
"""

import logging
import sys

import structlog


def setup_logging(env: str = "development", level: str = "INFO") -> None:
    """初始化结构化日志，level 为标准级别名（DEBUG / INFO / WARNING ...）"""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"未知的日志级别: {level}")

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,  # 请求中间件绑定的 trace_id
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if env == "production":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn 的访问日志也输出到 stdout，与 structlog 保持同一出口
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

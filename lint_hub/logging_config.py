# lint_hub/logging_config.py
"""
本模块负责集中配置项目的日志系统：structlog 负责结构化，
控制台模式下由 Rich 渲染为单行彩色输出，生产环境则输出 JSON。
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Literal

import structlog
from rich.console import Console
from rich.text import Text
from structlog.typing import Processor


class RichLineRenderer:
    """一个 structlog 处理器，把日志渲染为带颜色的单行文本，键值对附在行尾。"""

    def __init__(self, show_timestamp: bool = True, kv_truncate_at: int = 80):
        self._console = Console()
        self._show_timestamp = show_timestamp
        self._kv_truncate_at = kv_truncate_at
        self._level_styles = {
            "debug": ("blue", "DEBUG   "),
            "info": ("green", "INFO    "),
            "warning": ("yellow", "WARNING "),
            "error": ("bold red", "ERROR   "),
            "critical": ("bold magenta", "CRITICAL"),
        }

    def __call__(
        self, logger: Any, name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = str(event_dict.pop("event", "")).strip()
        if not event:
            return ""

        timestamp = event_dict.pop("timestamp", "")
        level = event_dict.pop("level", "info").lower()
        logger_name = event_dict.pop("logger", "unknown")
        exception = event_dict.pop("exception", None)
        style, level_text = self._level_styles.get(level, ("default", level.upper()))

        line = Text()
        if self._show_timestamp and timestamp:
            line.append(str(timestamp), style="dim")
            line.append(" ")
        line.append(level_text, style=style)
        line.append(" ")
        line.append(event)
        line.append(f" ({logger_name})", style="cyan dim")
        for key, value in sorted(event_dict.items()):
            value_repr = repr(value)
            if len(value_repr) > self._kv_truncate_at:
                value_repr = value_repr[: self._kv_truncate_at] + "…"
            line.append(f" {key}=", style="dim")
            line.append(value_repr)

        with self._console.capture() as capture:
            self._console.print(line, soft_wrap=True)
        rendered = capture.get().rstrip()
        if exception:
            rendered = f"{rendered}\n{exception}"
        return rendered


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    show_timestamp: bool = True,
) -> None:
    """
    配置全局的 structlog 日志系统。

    Args:
        log_level: 要显示的最低日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)。
        log_format: 'console' 用于终端中的可读输出，'json' 用于机器可读输出。
        show_timestamp: 是否在日志中包含时间戳。
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console":
        processors.insert(3, structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False))
        processors.append(RichLineRenderer(show_timestamp=show_timestamp))
    else:
        processors.insert(3, structlog.processors.TimeStamper(fmt="iso", utc=True))
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()

    class PassthroughFormatter(logging.Formatter):
        """直接传递 structlog 已经渲染好的字符串。"""

        def format(self, record: logging.LogRecord) -> str:
            return str(record.getMessage())

    handler.setFormatter(PassthroughFormatter())

    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    app_logger = logging.getLogger("lint_hub")
    app_logger.setLevel(log_level.upper())
    app_logger.propagate = True

    structlog.get_logger("lint_hub.logging_config").debug(
        "日志系统已配置完成。", log_format=log_format, app_log_level=log_level.upper()
    )


def null_logger() -> Any:
    """返回一个丢弃所有输出的 structlog 记录器，供测试作为诊断输出使用。"""
    return structlog.wrap_logger(
        structlog.ReturnLogger(), processors=[], wrapper_class=structlog.BoundLogger
    )

"""日志配置 - 基于Loguru

支持：
- 结构化 JSON 日志
- request_id 追踪
- 敏感信息脱敏（Cookie、签名头）
- 日志文件轮转

注意：MCP stdio 模式下 stdout 属于协议通道，所有日志只能写到 stderr 或文件。
"""

import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from ..constants import LOG_FILE_NAME

# 请求 ID 上下文变量
_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def mask_sensitive(value: str | None, visible_chars: int = 4) -> str:
    """
    脱敏处理敏感信息

    Args:
        value: 需要脱敏的字符串
        visible_chars: 前后可见字符数

    Returns:
        脱敏后的字符串，如 "uuid***ect;"

    Examples:
        >>> mask_sensitive("uuid_tt_dd=10_2029; SESSION=f5c1")
        'uuid***f5c1'
        >>> mask_sensitive("short")
        '***'
    """
    if not value:
        return "***"
    if len(value) <= visible_chars * 2:
        return "***"
    return f"{value[:visible_chars]}***{value[-visible_chars:]}"


def mask_cookie(cookie: str | None) -> str:
    """专门用于 Cookie 的脱敏处理"""
    if not cookie:
        return "[未配置]"
    return mask_sensitive(cookie, visible_chars=6)


def setup_logger(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path | None = None,
    json_format: bool = False,
    rotation: str = "10 MB",
    retention: str = "30 days",
    compression: str = "zip",
) -> None:
    """
    配置日志

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_to_file: 是否写入文件
        log_dir: 日志目录，默认使用平台标准数据目录
        json_format: 是否使用JSON格式（便于日志收集系统）
        rotation: 日志文件轮转策略 (例如 "10 MB", "1 day")
        retention: 日志保留时间 (例如 "30 days", "5 files")
        compression: 压缩格式 ("zip", "gz", "bz2")
    """
    # 移除默认处理器
    logger.remove()

    if json_format:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_to_file:
        if log_dir is None:
            from ...infrastructure.config.paths import get_log_dir

            log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / LOG_FILE_NAME,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
            enqueue=True,  # 异步写入
        )


# -------------------- Request ID 追踪 --------------------

def generate_request_id() -> str:
    """生成新的请求 ID"""
    return str(uuid.uuid4())[:8]


def set_request_id(request_id: str | None = None) -> str:
    """设置当前请求的 request_id"""
    if request_id is None:
        request_id = generate_request_id()
    _request_id_var.set(request_id)
    return request_id


def get_request_id() -> str | None:
    """获取当前请求的 request_id"""
    return _request_id_var.get()


def clear_request_id() -> None:
    """清除当前请求的 request_id"""
    _request_id_var.set(None)


# -------------------- 结构化日志记录 --------------------

def log_event(
    event: str,
    level: str = "INFO",
    **kwargs: Any,
) -> None:
    """
    记录结构化事件

    Examples:
        log_event("article_published", title="...", code=200)
    """
    request_id = get_request_id()
    if request_id:
        kwargs["request_id"] = request_id

    # 通过 bind 附加字段，避免 loguru 对消息中的花括号做 format
    logger.bind(event=event, **kwargs).log(
        level.upper(),
        f"[{event}] " + " ".join(f"{k}={v}" for k, v in kwargs.items()),
    )


def log_article_published(
    title: str,
    code: int | None,
    duration_ms: int,
    success: bool = True,
) -> None:
    """记录文章发布事件"""
    level = "INFO" if success else "WARNING"
    log_event(
        "article_published",
        level=level,
        title=title[:100],  # 截断过长标题
        code=code,
        duration_ms=duration_ms,
        success=success,
    )


__all__ = [
    "logger",
    "setup_logger",
    "mask_sensitive",
    "mask_cookie",
    "generate_request_id",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "log_event",
    "log_article_published",
]

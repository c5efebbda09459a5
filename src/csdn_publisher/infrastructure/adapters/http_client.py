"""HTTP 客户端工厂

创建长生命周期的 httpx.Client：统一超时、连接池使用 httpx 默认值，
并通过事件钩子记录完整的请求/响应报文。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
from loguru import logger

from ...shared.constants import DEFAULT_TIMEOUT
from ...shared.utils.logger import mask_cookie

# 日志中需要脱敏的请求头
SENSITIVE_HEADERS = frozenset({"cookie", "set-cookie", "x-ca-signature"})


@dataclass
class ClientConfig:
    """客户端配置

    默认连接/读/写超时均为 5 分钟，发布长文时服务端处理较慢。
    log_bodies 开启时请求/响应体按 INFO 级别输出，请求头/响应头只在 DEBUG 级别输出。
    """

    base_url: str = ""
    timeout_connect: float = DEFAULT_TIMEOUT
    timeout_read: float = DEFAULT_TIMEOUT
    timeout_write: float = DEFAULT_TIMEOUT
    timeout_pool: float = DEFAULT_TIMEOUT
    follow_redirects: bool = False
    log_bodies: bool = True
    headers: dict[str, str] = field(default_factory=dict)
    transport: httpx.BaseTransport | None = None  # 测试时注入 MockTransport

    @classmethod
    def with_timeout(cls, base_url: str, timeout: float, **kwargs: Any) -> ClientConfig:
        """所有阶段使用同一超时"""
        return cls(
            base_url=base_url,
            timeout_connect=timeout,
            timeout_read=timeout,
            timeout_write=timeout,
            timeout_pool=timeout,
            **kwargs,
        )

    def to_httpx_timeout(self) -> httpx.Timeout:
        """转换为 httpx.Timeout"""
        return httpx.Timeout(
            connect=self.timeout_connect,
            read=self.timeout_read,
            write=self.timeout_write,
            pool=self.timeout_pool,
        )


def _masked_headers(headers: httpx.Headers) -> dict[str, str]:
    return {
        key: mask_cookie(value) if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _log_request(request: httpx.Request) -> None:
    logger.info(f"--> {request.method} {request.url}")
    logger.debug(f"请求头: {_masked_headers(request.headers)}")
    if request.content:
        logger.info(f"请求体: {request.content.decode('utf-8', errors='replace')}")


def _log_response(response: httpx.Response) -> None:
    # 钩子触发时响应体尚未读取
    response.read()
    logger.info(f"<-- {response.status_code} {response.request.url}")
    logger.debug(f"响应头: {_masked_headers(response.headers)}")
    logger.info(f"响应体: {response.text}")


def _log_status_only(response: httpx.Response) -> None:
    logger.info(f"<-- {response.status_code} {response.request.url}")


def create_http_client(config: ClientConfig) -> httpx.Client:
    """创建客户端实例

    Args:
        config: 客户端配置

    Returns:
        httpx.Client 实例（调用方负责 close）
    """
    kwargs: dict[str, Any] = {
        "base_url": config.base_url,
        "timeout": config.to_httpx_timeout(),
        "follow_redirects": config.follow_redirects,
        "headers": config.headers,
    }

    if config.log_bodies:
        kwargs["event_hooks"] = {"request": [_log_request], "response": [_log_response]}
    else:
        kwargs["event_hooks"] = {"request": [], "response": [_log_status_only]}

    if config.transport is not None:
        kwargs["transport"] = config.transport

    logger.debug(f"创建 HTTP 客户端: {config.base_url}")
    return httpx.Client(**kwargs)

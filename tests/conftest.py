"""测试夹具和共享配置

提供测试中常用的夹具：
- 示例发布请求、CSDN 配置
- 基于 httpx.MockTransport 的发布器工厂
- 配置/容器的隔离重置
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator

import httpx
import pytest
from loguru import logger
from pydantic import SecretStr

from csdn_publisher.domain.entities import PublishRequest
from csdn_publisher.infrastructure.adapters.csdn import CsdnApiClient, CsdnArticlePublisher
from csdn_publisher.infrastructure.config import CsdnSettings, get_settings, reset_container

TEST_COOKIE = "uuid_tt_dd=10_20290684990; UserName=tester; SESSION=f5c18dcb-bdfe"

Handler = Callable[[httpx.Request], httpx.Response]


# ============== 隔离 ==============


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """每个测试使用干净的环境变量、工作目录和容器"""
    for key in list(os.environ):
        if key.startswith("CSDN_PUBLISHER_") or key in ("CSDN_COOKIE", "CSDN_CATEGORIES"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


# ============== 基础夹具 ==============


@pytest.fixture
def sample_request() -> PublishRequest:
    """示例发布请求"""
    return PublishRequest(
        title="测试文章标题",
        markdown_content="# 测试文章\n\n这是一篇测试文章的内容。",
        tags="Java,测试",
        description="这是一篇测试文章。",
    )


@pytest.fixture
def csdn_settings() -> CsdnSettings:
    """示例 CSDN 配置"""
    return CsdnSettings(cookie=SecretStr(TEST_COOKIE), categories="Python")


@pytest.fixture
def success_payload() -> dict:
    """模拟发布成功的响应体"""
    return {
        "code": 200,
        "traceId": "b6f3c8a2-1d0e-4f1b-9a55-2f0c7e9d1a10",
        "data": {
            "url": "https://blog.csdn.net/tester/article/details/150701174",
            "id": 150701174,
            "qrcode": "https://test-bizapi.csdn.net/qrcode/150701174.png",
            "title": "测试文章标题",
            "description": "这是一篇测试文章。",
        },
        "msg": "success",
    }


# ============== HTTP 夹具 ==============


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """记录 MockTransport 收到的请求"""
    return []


@pytest.fixture
def make_publisher(
    csdn_settings: CsdnSettings,
    sent_requests: list[httpx.Request],
) -> Generator[Callable[[Handler], CsdnArticlePublisher], None, None]:
    """按给定的响应处理函数创建发布器"""
    clients: list[CsdnApiClient] = []

    def _make(handler: Handler) -> CsdnArticlePublisher:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client = CsdnApiClient.from_settings(
            csdn_settings,
            transport=httpx.MockTransport(recording_handler),
        )
        clients.append(client)
        return CsdnArticlePublisher(
            client,
            cookie=csdn_settings.cookie.get_secret_value(),
            categories=csdn_settings.categories,
        )

    yield _make

    for client in clients:
        client.close()


# ============== 日志夹具 ==============


@pytest.fixture
def captured_records() -> Generator[list[dict], None, None]:
    """捕获 loguru 日志记录"""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)

"""依赖注入容器 - 组装应用组件"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from ...application.use_cases import PublishArticleUseCase
from ...shared.utils.logger import mask_cookie
from .settings import AppSettings, get_settings

if TYPE_CHECKING:
    import httpx

    from ...application.ports.outbound import ArticlePublisherPort
    from ..adapters.csdn import CsdnApiClient


@dataclass
class Container:
    """
    依赖注入容器

    配置只在这里读取一次，并以显式参数传给各适配器。
    """

    settings: AppSettings = field(default_factory=get_settings)
    transport: httpx.BaseTransport | None = None  # 测试时注入

    # 线程安全锁（保护懒加载属性的初始化）
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    _api_client: CsdnApiClient | None = field(default=None, init=False)
    _publisher: ArticlePublisherPort | None = field(default=None, init=False)
    _publish_use_case: PublishArticleUseCase | None = field(default=None, init=False)

    @property
    def api_client(self) -> CsdnApiClient:
        """获取 CSDN 接口客户端（长生命周期）"""
        if self._api_client is None:
            with self._lock:
                if self._api_client is None:
                    from ..adapters.csdn import CsdnApiClient

                    self._api_client = CsdnApiClient.from_settings(
                        self.settings.csdn,
                        transport=self.transport,
                    )
        return self._api_client

    @property
    def publisher(self) -> ArticlePublisherPort:
        """获取文章发布器"""
        if self._publisher is None:
            client = self.api_client
            with self._lock:
                if self._publisher is None:
                    from ..adapters.csdn import CsdnArticlePublisher

                    self._publisher = CsdnArticlePublisher(
                        client,
                        cookie=self.settings.csdn.cookie.get_secret_value(),
                        categories=self.settings.csdn.categories,
                    )
        return self._publisher

    @property
    def publish_use_case(self) -> PublishArticleUseCase:
        """获取发布文章用例"""
        if self._publish_use_case is None:
            publisher = self.publisher
            with self._lock:
                if self._publish_use_case is None:
                    self._publish_use_case = PublishArticleUseCase(publisher)
        return self._publish_use_case

    def check_settings(self) -> bool:
        """启动检查：缺少 Cookie 或默认分类时只告警，不阻止启动

        Returns:
            配置是否完整
        """
        csdn = self.settings.csdn
        ok = True

        cookie = csdn.cookie.get_secret_value()
        if not cookie:
            logger.warning("CSDN Cookie 未配置，请设置 CSDN_PUBLISHER_CSDN__COOKIE 或 CSDN_COOKIE")
            ok = False
        else:
            logger.info(f"CSDN Cookie: {mask_cookie(cookie)}")

        if not csdn.categories:
            logger.warning("未配置默认文章分类，发布时将不携带 categories 字段")
            ok = False

        return ok

    def close(self) -> None:
        """关闭容器持有的资源（httpx 客户端）"""
        if self._api_client is not None:
            self._api_client.close()
            self._api_client = None
        self._publisher = None
        self._publish_use_case = None
        logger.debug("容器资源已关闭")


# 全局容器实例
_container: Container | None = None


def get_container() -> Container:
    """获取全局容器实例"""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """重置容器（用于测试）"""
    global _container
    if _container is not None:
        _container.close()
    _container = None

"""CSDN saveArticle 接口定义

模拟 Web 编辑器的请求：固定的浏览器头和网关签名头 + 调用方提供的 Cookie。
签名头（X-Ca-*）不会按请求重新计算，CSDN 轮换后需要更新配置。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ....shared.constants import CSDN_EDITOR_ORIGIN, CSDN_PUBLISH_PATH, SEC_CH_UA
from ..http_client import ClientConfig, create_http_client

if TYPE_CHECKING:
    from ...config.settings import CsdnSettings
    from .dto import CsdnPublishRequest


def build_static_headers(settings: CsdnSettings) -> dict[str, str]:
    """构建每次请求都相同的请求头"""
    return {
        "Accept": "*/*",
        "Accept-Language": "zh-CN,zh;q=0.9",
        "Content-Type": "application/json",
        "DNT": "1",
        "Priority": "u=1, i",
        "Sec-Ch-Ua": SEC_CH_UA,
        "Sec-Ch-Ua-Mobile": "?0",
        "Sec-Ch-Ua-Platform": '"macOS"',
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-site",
        "X-Ca-Key": settings.x_ca_key,
        "X-Ca-Nonce": settings.x_ca_nonce,
        "X-Ca-Signature": settings.x_ca_signature.get_secret_value(),
        "X-Ca-Signature-Headers": settings.x_ca_signature_headers,
        "User-Agent": settings.user_agent,
        "Referer": f"{CSDN_EDITOR_ORIGIN}/",
        "Origin": CSDN_EDITOR_ORIGIN,
    }


class CsdnApiClient:
    """
    CSDN 发布接口客户端

    持有一个长生命周期的 httpx.Client，每次调用只发出一次 POST，不做重试。
    """

    publish_path = CSDN_PUBLISH_PATH

    def __init__(self, http_client: httpx.Client):
        self._http = http_client

    @classmethod
    def from_settings(
        cls,
        settings: CsdnSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> CsdnApiClient:
        """按配置创建客户端"""
        config = ClientConfig.with_timeout(
            settings.base_url,
            settings.timeout,
            headers=build_static_headers(settings),
            transport=transport,
        )
        return cls(create_http_client(config))

    def publish_article(self, cookie: str, request: CsdnPublishRequest) -> httpx.Response:
        """
        POST saveArticle

        Args:
            cookie: 登录 Cookie
            request: 请求体

        Returns:
            原始响应（不检查状态码）

        Raises:
            httpx.TransportError: 网络层故障
        """
        return self._http.post(
            self.publish_path,
            headers={"Cookie": cookie},
            json=request.to_payload(),
        )

    def close(self) -> None:
        """关闭底层连接"""
        self._http.close()

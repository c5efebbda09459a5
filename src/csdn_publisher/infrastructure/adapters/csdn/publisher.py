"""CSDN 文章发布器 - ArticlePublisherPort 的实现"""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ....domain.entities import PublishRequest, PublishResponse
from ....shared.exceptions import NetworkError, PublishTimeoutError
from .client import CsdnApiClient
from .dto import CsdnPublishRequest, CsdnPublishResponse


class CsdnArticlePublisher:
    """
    CSDN 文章发布器

    结果映射：
    - 2xx 且有 data：code/msg 取自响应体，id/url 取自 data
    - 2xx 但 data 为空、缺少 id/url 或响应体无法解析：记录警告，id/url 留空
    - 非 2xx：code 为 HTTP 状态码，msg 为错误响应体，不抛异常
    - 网络层故障：包装为 NetworkError / PublishTimeoutError 抛出
    """

    def __init__(self, client: CsdnApiClient, cookie: str, categories: str | None = None):
        """
        Args:
            client: CSDN 接口客户端
            cookie: 登录 Cookie
            categories: 默认文章分类（为空时不发送该字段）
        """
        self._client = client
        self._cookie = cookie
        self._categories = categories

    def publish(self, request: PublishRequest) -> PublishResponse:
        """发布文章到 CSDN"""
        payload = CsdnPublishRequest.from_domain(request, self._categories)
        logger.info(f"开始发布CSDN文章，标题: {request.title}")

        try:
            response = self._client.publish_article(self._cookie, payload)
        except httpx.TimeoutException as e:
            raise PublishTimeoutError(f"请求超时: {e}", cause=e) from e
        except httpx.TransportError as e:
            raise NetworkError(f"网络错误: {e}", cause=e) from e

        logger.info(f"API响应状态码: {response.status_code}")

        if response.is_success:
            return self._map_success(response)
        return self._map_failure(response)

    def _map_success(self, response: httpx.Response) -> PublishResponse:
        try:
            result = CsdnPublishResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.warning(f"API响应无法解析: {e}")
            return PublishResponse(code=response.status_code, msg=response.text or None)

        data = result.data
        if data is None or data.id is None or data.url is None:
            logger.warning(f"API响应成功但未返回文章ID或URL: {response.text}")
            return PublishResponse(code=result.code, msg=result.msg)

        logger.info(f"文章发布成功！文章ID: {data.id} 文章URL: {data.url}")
        return PublishResponse(
            code=result.code,
            msg=result.msg,
            id=data.id,
            url=data.url,
        )

    def _map_failure(self, response: httpx.Response) -> PublishResponse:
        logger.error(f"文章发布失败！HTTP状态码: {response.status_code}")
        msg = response.text or response.reason_phrase
        logger.error(f"API错误信息: {msg}")
        return PublishResponse(code=response.status_code, msg=msg)

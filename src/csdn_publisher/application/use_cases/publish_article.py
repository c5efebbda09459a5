"""发布文章用例"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from loguru import logger

from ...shared.utils.logger import clear_request_id, log_article_published, set_request_id

if TYPE_CHECKING:
    from ...domain.entities import PublishRequest, PublishResponse
    from ..ports.outbound import ArticlePublisherPort


class PublishArticleUseCase:
    """
    发布文章用例

    只负责转发到发布端口，不做重试、去重或缓存：
    同一请求调用两次就会产生两次独立的发布。
    """

    def __init__(self, publisher: ArticlePublisherPort):
        self._publisher = publisher

    def execute(self, request: PublishRequest) -> PublishResponse:
        """
        执行发布文章用例

        Args:
            request: 发布请求

        Returns:
            发布结果（远端拒绝时为失败结果）

        Raises:
            NetworkError: 网络层故障，原样向上传播
        """
        request_id = set_request_id()
        logger.info(
            f"开始发布CSDN文章，标题: {request.title} 标签: {request.tags} "
            f"(request_id={request_id})"
        )

        start = time.perf_counter()
        try:
            response = self._publisher.publish(request)
            log_article_published(
                title=request.title,
                code=response.code,
                duration_ms=int((time.perf_counter() - start) * 1000),
                success=response.is_success,
            )
            return response
        finally:
            clear_request_id()

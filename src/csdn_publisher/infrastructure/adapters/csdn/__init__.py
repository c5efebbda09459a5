"""CSDN 发布适配器"""

from .client import CsdnApiClient, build_static_headers
from .dto import CsdnPublishData, CsdnPublishRequest, CsdnPublishResponse
from .publisher import CsdnArticlePublisher

__all__ = [
    "CsdnApiClient",
    "build_static_headers",
    "CsdnArticlePublisher",
    "CsdnPublishRequest",
    "CsdnPublishResponse",
    "CsdnPublishData",
]

"""基础设施适配器"""

from .csdn import CsdnApiClient, CsdnArticlePublisher
from .http_client import ClientConfig, create_http_client

__all__ = [
    # CSDN
    "CsdnApiClient",
    "CsdnArticlePublisher",
    # HTTP Client
    "ClientConfig",
    "create_http_client",
]

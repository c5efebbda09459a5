"""
领域层

领域层包含：
- entities: 发布请求与发布结果

依赖规则：领域层不依赖任何外部层
"""

from .entities import PublishRequest, PublishResponse

__all__ = [
    "PublishRequest",
    "PublishResponse",
]

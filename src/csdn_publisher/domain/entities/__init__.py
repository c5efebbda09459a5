"""领域实体"""

from .article import PublishRequest, PublishResponse

__all__ = [
    "PublishRequest",
    "PublishResponse",
]

"""出站端口 - 定义应用层依赖的外部服务接口"""

from .publisher_port import ArticlePublisherPort

__all__ = [
    "ArticlePublisherPort",
]

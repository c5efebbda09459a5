"""
应用层端口

Hexagonal Architecture中的端口定义：
- outbound: 出站端口，定义应用层依赖的外部服务接口
"""

from .outbound import ArticlePublisherPort

__all__ = [
    "ArticlePublisherPort",
]

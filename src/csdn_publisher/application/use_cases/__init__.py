"""应用用例"""

from .publish_article import PublishArticleUseCase

__all__ = [
    "PublishArticleUseCase",
]

"""共享工具"""

from .logger import logger, mask_cookie, mask_sensitive, setup_logger
from .markdown import markdown_to_html

__all__ = [
    # Logger
    "logger",
    "setup_logger",
    "mask_sensitive",
    "mask_cookie",
    # Markdown
    "markdown_to_html",
]

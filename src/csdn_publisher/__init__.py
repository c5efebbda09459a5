"""CSDN 文章发布服务

把 Markdown 文章发布到 CSDN 博客，并以 MCP 工具的形式提供给 AI Agent。

架构：
- 六边形架构 (Hexagonal Architecture)：端口 ArticlePublisherPort + CSDN 适配器
- 基于 httpx 模拟 CSDN Web 编辑器的发布接口

使用方式：
    # MCP 服务
    python -m csdn_publisher.mcp

    # CLI
    python -m csdn_publisher publish post.md --tags "Python,MCP"
"""

from .shared.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME

__all__ = ["__version__", "__app_name__"]

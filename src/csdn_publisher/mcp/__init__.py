"""MCP (Model Context Protocol) 服务模块

让 AI Agent 可以直接调用 CSDN 文章发布能力。

使用方式：
    # 启动 MCP 服务
    python -m csdn_publisher.mcp

    # 或通过 CLI
    csdn-publisher mcp-server
"""

from .server import create_mcp_server, run_mcp_server, save_csdn_article

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
    "save_csdn_article",
]

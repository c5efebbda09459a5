"""MCP 服务器实现

提供以下工具给 AI Agent：
- saveCsdnArticle: 发布 Markdown 文章到 CSDN
"""

from __future__ import annotations

import asyncio
from typing import Annotated, Any

from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..domain.entities import PublishRequest
from ..shared.constants import MCP_SERVER_NAME, PUBLISH_TOOL_DESCRIPTION, PUBLISH_TOOL_NAME

TRANSPORTS = ("stdio", "sse", "streamable-http")

# 创建 MCP 实例（延迟初始化）
mcp: FastMCP | None = None


async def save_csdn_article(
    title: Annotated[str, Field(description="文章标题")],
    markdowncontent: Annotated[str, Field(description="文章内容")],
    tags: Annotated[str, Field(description="文章标签，英文逗号隔开")],
    description: Annotated[str, Field(description="文章简述")],
) -> dict[str, Any]:
    """发布Csdn文章

    Returns:
        发布结果，包含 code、msg，成功时还包含 id、url
    """
    from ..infrastructure.config import get_container

    container = get_container()
    request = PublishRequest(
        title=title,
        markdown_content=markdowncontent,
        tags=tags,
        description=description,
    )
    # 发布是同步阻塞调用，放到线程中执行；异常交由 MCP 框架作为工具错误返回
    response = await asyncio.to_thread(container.publish_use_case.execute, request)
    return response.to_dict()


def _register_tools(mcp_instance: FastMCP) -> None:
    """注册 MCP 工具"""
    mcp_instance.add_tool(
        save_csdn_article,
        name=PUBLISH_TOOL_NAME,
        description=PUBLISH_TOOL_DESCRIPTION,
    )


def create_mcp_server() -> FastMCP:
    """创建并注册工具的 MCP 实例"""
    mcp_instance = FastMCP(MCP_SERVER_NAME)
    _register_tools(mcp_instance)
    return mcp_instance


def _ensure_mcp() -> FastMCP:
    """确保 MCP 实例已创建"""
    global mcp
    if mcp is None:
        mcp = create_mcp_server()
    return mcp


def run_mcp_server(transport: str = "stdio") -> None:
    """运行 MCP 服务器

    Args:
        transport: 传输方式 ("stdio"、"sse" 或 "streamable-http")
    """
    if transport not in TRANSPORTS:
        raise ValueError(f"不支持的传输方式: {transport}")

    from ..infrastructure.config import get_container

    get_container().check_settings()
    mcp_instance = _ensure_mcp()

    logger.info(f"启动 MCP 服务器 (transport={transport})")
    logger.info("MCP服务器启动成功！CSDN文章发布服务已就绪。")
    mcp_instance.run(transport=transport)

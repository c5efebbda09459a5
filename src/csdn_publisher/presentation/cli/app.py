"""CLI主应用 - 基于Click和Rich"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...domain.entities import PublishRequest, PublishResponse
from ...infrastructure.config import get_container, get_settings
from ...shared.constants import VERSION
from ...shared.exceptions import (
    ConfigMissingError,
    CsdnPublisherError,
    ValidationError,
    wrap_exception,
)
from ...shared.utils import mask_cookie, setup_logger

console = Console()
# MCP stdio 模式下 stdout 属于协议通道
err_console = Console(stderr=True)


@click.group()
@click.version_option(VERSION, prog_name="csdn-publisher")
@click.option("--debug", is_flag=True, help="启用调试模式（输出完整请求/响应报文）")
def cli(debug: bool):
    """CSDN 文章发布 - 命令行工具"""
    settings = get_settings()
    log_level = "DEBUG" if debug or settings.debug else settings.log_level
    setup_logger(level=log_level, log_to_file=settings.log_to_file)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", "-t", help="文章标题（默认使用文件名）")
@click.option("--tags", required=True, help="文章标签，英文逗号隔开")
@click.option("--description", "-d", default="", help="文章简述")
def publish(file: Path, title: str | None, tags: str, description: str):
    """
    发布 Markdown 文件到 CSDN

    示例:
        csdn-publisher publish post.md --tags "Python,MCP" -d "一篇测试文章"
    """
    try:
        request = PublishRequest(
            title=title or file.stem,
            markdown_content=_read_markdown(file),
            tags=tags,
            description=description,
        )

        container = get_container()
        if not container.settings.csdn.cookie.get_secret_value():
            raise ConfigMissingError(
                "CSDN Cookie 未配置，请设置 CSDN_PUBLISHER_CSDN__COOKIE 或 CSDN_COOKIE",
                details={"key": "CSDN_PUBLISHER_CSDN__COOKIE"},
            )

        with console.status("正在发布文章..."):
            response = container.publish_use_case.execute(request)
    except CsdnPublisherError as e:
        console.print(f"[red]发布失败: {e.user_message}")
        sys.exit(1)

    _display_response(request, response)
    if not response.is_success:
        sys.exit(1)


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="以 JSON 格式输出")
def config(output_json: bool):
    """显示当前配置（敏感信息已脱敏）"""
    import json as json_lib

    settings = get_settings()
    csdn = settings.csdn

    config_data = {
        "调试模式": settings.debug,
        "日志级别": settings.log_level,
        "接口地址": csdn.base_url,
        "超时(秒)": csdn.timeout,
        "Cookie": mask_cookie(csdn.cookie.get_secret_value()),
        "默认分类": csdn.categories or "[未配置]",
        "X-Ca-Key": csdn.x_ca_key,
        "X-Ca-Nonce": csdn.x_ca_nonce,
    }

    if output_json:
        console.print(
            json_lib.dumps(config_data, ensure_ascii=False, indent=2),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("值", style="green")

    for key, value in config_data.items():
        table.add_row(key, str(value))

    console.print(table)


@cli.command(name="mcp-server")
@click.option(
    "--transport",
    "-t",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="传输协议 (stdio 用于 AI Agent 本地调用)",
)
def mcp_server(transport: str):
    """
    启动 MCP (Model Context Protocol) 服务器

    供 AI Agent (如 Claude Desktop、Cursor) 调用文章发布能力。

    示例:
        csdn-publisher mcp-server
        csdn-publisher mcp-server -t sse
    """
    from ...mcp import run_mcp_server

    err_console.print(f"[bold green]启动 MCP 服务器[/bold green] (transport={transport})")
    err_console.print("[dim]提供工具: saveCsdnArticle[/dim]")
    run_mcp_server(transport=transport)


def _read_markdown(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise wrap_exception(e, ValidationError, f"无法读取文件: {file}") from e


def _display_response(request: PublishRequest, response: PublishResponse) -> None:
    """显示发布结果"""
    if response.is_success:
        text = f"""[bold]标题:[/bold] {request.title}
[bold]文章ID:[/bold] {response.id}
[bold]URL:[/bold] {response.url}"""
        console.print(Panel(text, title="发布成功", border_style="green"))
        return

    text = f"""[bold]标题:[/bold] {request.title}
[bold]状态码:[/bold] {response.code}
[bold]消息:[/bold] {response.msg or "无"}"""
    console.print(Panel(text, title="发布失败", border_style="red"))


def run_cli():
    """运行CLI"""
    cli()


if __name__ == "__main__":
    run_cli()

"""CSDN 文章发布 - 主入口点

使用方式：
- python -m csdn_publisher publish post.md --tags "Python,MCP"
- python -m csdn_publisher mcp-server
"""

from .presentation.cli import run_cli


def main() -> None:
    """主入口函数"""
    run_cli()


if __name__ == "__main__":
    main()

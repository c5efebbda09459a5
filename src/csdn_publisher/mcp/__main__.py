"""MCP 服务器入口

使用方式：
    python -m csdn_publisher.mcp
    python -m csdn_publisher.mcp --transport sse
"""

import argparse

from ..infrastructure.config import get_settings
from ..shared.utils import setup_logger
from .server import TRANSPORTS, run_mcp_server


def main():
    parser = argparse.ArgumentParser(
        description="CSDN 文章发布 - MCP 服务器"
    )
    parser.add_argument(
        "--transport",
        "-t",
        choices=TRANSPORTS,
        default="stdio",
        help="传输方式 (默认: stdio)",
    )

    args = parser.parse_args()

    settings = get_settings()
    setup_logger(level=settings.log_level, log_to_file=settings.log_to_file)
    run_mcp_server(transport=args.transport)


if __name__ == "__main__":
    main()

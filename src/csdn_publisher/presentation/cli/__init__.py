"""命令行界面"""

from .app import cli, run_cli

__all__ = ["cli", "run_cli"]

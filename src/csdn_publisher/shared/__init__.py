"""共享层

包含跨层共享的工具、常量、异常定义。

说明：
此处不再使用 `import *` 以便静态分析工具（ruff/mypy）正确工作。
"""

from . import constants, exceptions, utils

__all__ = [
    "constants",
    "exceptions",
    "utils",
]

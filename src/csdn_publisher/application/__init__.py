"""应用层

应用层负责用例编排，协调领域层和基础设施层。

包含：
- ports: 端口定义（出站）
- use_cases: 应用用例
"""

from . import ports, use_cases

__all__ = [
    "ports",
    "use_cases",
]

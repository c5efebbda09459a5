"""
基础设施层

包含外部服务的具体实现（适配器）：
- adapters/csdn: CSDN 发布接口
- adapters/http_client: HTTP 客户端工厂
- config: 配置管理和依赖注入
"""

from .config import AppSettings, Container, get_container, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    "Container",
    "get_container",
]

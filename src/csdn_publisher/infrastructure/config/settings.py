"""配置管理 - 基于Pydantic Settings

注意：该项目同时兼容两类环境变量：
1) 推荐：CSDN_PUBLISHER_ 前缀 + 双下划线嵌套（如 CSDN_PUBLISHER_CSDN__COOKIE）
2) 兼容：简化变量名（CSDN_COOKIE、CSDN_CATEGORIES）

兼容逻辑实现于 get_settings()：会从 OS 环境变量与 .env 文件读取并回填到 settings 对象。
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.constants import (
    CSDN_BASE_URL,
    DEFAULT_CA_KEY,
    DEFAULT_CA_NONCE,
    DEFAULT_CA_SIGNATURE,
    DEFAULT_CA_SIGNATURE_HEADERS,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)


class CsdnSettings(BaseModel):
    """CSDN 接口配置

    x_ca_* 签名头是从 Web 编辑器抓取的固定值，不会按请求重新计算。
    CSDN 轮换签名方案后所有请求都会失败，需要重新抓包并更新这些配置。
    作为嵌套模型只从 CSDN_PUBLISHER_CSDN__* 读取，不读取无前缀的环境变量。
    """

    cookie: SecretStr = Field(default=SecretStr(""), description="登录后的 Cookie")
    categories: str | None = Field(default=None, description="默认文章分类")
    base_url: str = Field(default=CSDN_BASE_URL, description="接口基础URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="连接/读/写超时秒数")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent")

    x_ca_key: str = Field(default=DEFAULT_CA_KEY, description="X-Ca-Key 签名头")
    x_ca_nonce: str = Field(default=DEFAULT_CA_NONCE, description="X-Ca-Nonce 签名头")
    x_ca_signature: SecretStr = Field(
        default=SecretStr(DEFAULT_CA_SIGNATURE), description="X-Ca-Signature 签名头"
    )
    x_ca_signature_headers: str = Field(
        default=DEFAULT_CA_SIGNATURE_HEADERS, description="X-Ca-Signature-Headers 签名头"
    )


class AppSettings(BaseSettings):
    """主应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="CSDN_PUBLISHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 基本设置
    debug: bool = Field(default=False, description="调试模式")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="日志级别",
    )
    log_to_file: bool = Field(default=False, description="是否写入日志文件")

    # 子配置
    csdn: CsdnSettings = Field(default_factory=CsdnSettings)


def _parse_dotenv_file(path: Path) -> dict[str, str]:
    """极简 .env 解析器（避免额外依赖 python-dotenv）。

    只支持 KEY=VALUE，忽略空行与 # 注释；支持 value 用单/双引号包裹。
    """
    if not path.exists() or not path.is_file():
        return {}

    env: dict[str, str] = {}
    lines = path.read_text(encoding="utf-8", errors="ignore").splitlines()

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        # 支持 `export KEY=VALUE`
        if line.startswith("export "):
            line = line[len("export ") :].strip()

        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()

        # 去掉两端引号（Cookie 中常见分号，通常会被引号包裹）
        if len(value) >= 2 and ((value[0] == value[-1] == '"') or (value[0] == value[-1] == "'")):
            value = value[1:-1]

        if key:
            env[key] = value

    return env


def _get_env_value(key: str, dotenv: dict[str, str]) -> str | None:
    """从 OS 环境变量或 .env 文件获取值（OS 优先）。"""
    return os.getenv(key) or dotenv.get(key)


@lru_cache
def get_settings() -> AppSettings:
    """获取应用配置（单例）

    - 先由 Pydantic Settings 读取 CSDN_PUBLISHER_* 变量（含 .env）
    - 再回填简化变量（CSDN_COOKIE / CSDN_CATEGORIES）
    """
    settings = AppSettings()
    apply_legacy_env(settings, _parse_dotenv_file(Path(".env")))
    return settings


def apply_legacy_env(settings: AppSettings, dotenv: dict[str, str]) -> AppSettings:
    """用简化变量名回填尚未配置的字段"""
    if not settings.csdn.cookie.get_secret_value():
        legacy = _get_env_value("CSDN_COOKIE", dotenv)
        if legacy:
            settings.csdn.cookie = SecretStr(legacy)

    if settings.csdn.categories is None:
        legacy = _get_env_value("CSDN_CATEGORIES", dotenv)
        if legacy:
            settings.csdn.categories = legacy

    return settings

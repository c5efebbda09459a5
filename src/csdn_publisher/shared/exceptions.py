"""自定义异常类

包含：
- 错误码枚举 (ErrorCode)
- 分层异常类（领域层、基础设施层）
- 用户友好的错误消息

说明：远端拒绝（HTTP 4xx/5xx）不会抛出异常，而是作为 PublishResponse 返回；
这里的异常只覆盖参数缺失、网络故障和配置问题。
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """错误码枚举

    错误码范围：
    - 1xxx: 通用错误
    - 2xxx: 网络错误
    - 6xxx: 配置错误
    """

    # 通用错误 1xxx
    UNKNOWN_ERROR = (1000, "未知错误")
    INVALID_INPUT = (1001, "输入无效")

    # 网络错误 2xxx
    NETWORK_ERROR = (2000, "网络连接失败")
    NETWORK_TIMEOUT = (2001, "请求超时")

    # 配置错误 6xxx
    CONFIG_ERROR = (6000, "配置错误")
    CONFIG_MISSING = (6001, "缺少必要配置")

    def __init__(self, code: int, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> int:
        """错误码"""
        return self._code

    @property
    def message(self) -> str:
        """错误消息"""
        return self._message

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class CsdnPublisherError(Exception):
    """基础异常类

    所有自定义异常的基类，支持错误码和详细信息。
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.error_code
        self._message = message or self._error_code.message
        self._details = details or {}
        self._cause = cause

        super().__init__(self._message)

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def user_message(self) -> str:
        """用户友好的错误消息"""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """详细信息"""
        return self._details

    @property
    def cause(self) -> Exception | None:
        """原始异常"""
        return self._cause

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于API响应或日志）"""
        return {
            "error_code": self._error_code.code,
            "error_type": self._error_code.name,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        return f"[{self._error_code.code}] {self._message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self._error_code.code}, message={self._message!r})"


# ============ 领域层异常 ============


class DomainError(CsdnPublisherError):
    """领域异常基类"""


class ValidationError(DomainError):
    """验证异常（请求字段缺失）"""

    error_code = ErrorCode.INVALID_INPUT


# ============ 基础设施层异常 ============


class InfrastructureError(CsdnPublisherError):
    """基础设施异常基类"""


class NetworkError(InfrastructureError):
    """网络连接异常"""

    error_code = ErrorCode.NETWORK_ERROR


class PublishTimeoutError(NetworkError):
    """请求超时异常"""

    error_code = ErrorCode.NETWORK_TIMEOUT


class ConfigError(InfrastructureError):
    """配置异常"""

    error_code = ErrorCode.CONFIG_ERROR


class ConfigMissingError(ConfigError):
    """配置缺失异常"""

    error_code = ErrorCode.CONFIG_MISSING


# ============ 工具函数 ============


def wrap_exception(
    exc: Exception,
    error_class: type[CsdnPublisherError] = CsdnPublisherError,
    message: str | None = None,
) -> CsdnPublisherError:
    """将普通异常包装为 CsdnPublisherError

    Args:
        exc: 原始异常
        error_class: 目标异常类
        message: 自定义消息（可选）

    Returns:
        包装后的异常
    """
    if isinstance(exc, CsdnPublisherError):
        return exc

    return error_class(
        message=message or str(exc),
        cause=exc,
    )

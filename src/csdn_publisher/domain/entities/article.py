"""文章发布实体

PublishRequest / PublishResponse 只存在于一次发布调用内，不做持久化。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ...shared.exceptions import ValidationError
from ...shared.utils.markdown import markdown_to_html


@dataclass(frozen=True)
class PublishRequest:
    """
    文章发布请求

    除字段存在性外不做本地校验，内容是否合法由 CSDN 接口判定。
    """

    title: str
    markdown_content: str
    tags: str  # 英文逗号分隔，原样透传
    description: str

    def __post_init__(self) -> None:
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise ValidationError(
                f"缺少必填字段: {', '.join(missing)}",
                details={"missing": missing},
            )

    @property
    def content(self) -> str:
        """由 Markdown 渲染得到的 HTML 正文"""
        return markdown_to_html(self.markdown_content)


@dataclass
class PublishResponse:
    """
    文章发布结果

    id / url 仅在发布成功（2xx 且响应携带 data）时填充。
    """

    code: int | None = None
    msg: str | None = None
    id: int | None = None
    url: str | None = None

    @property
    def is_success(self) -> bool:
        """是否发布成功"""
        return self.id is not None and self.url is not None

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（忽略空值）"""
        data = {
            "code": self.code,
            "msg": self.msg,
            "id": self.id,
            "url": self.url,
        }
        return {k: v for k, v in data.items() if v is not None}

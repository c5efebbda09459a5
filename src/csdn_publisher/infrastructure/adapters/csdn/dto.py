"""CSDN 发布接口的数据传输对象

字段与 Web 编辑器提交的 JSON 结构一一对应，JSON 键名通过 alias 指定。
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ....domain.entities import PublishRequest


class CsdnPublishRequest(BaseModel):
    """saveArticle 请求体

    除标题/正文/标签/简述/分类外，其余字段都是编辑器的固定取值。
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    markdown_content: str = Field(alias="markdowncontent")
    content: str
    read_type: str = Field(default="public", alias="readType")
    level: str = "0"
    tags: str
    status: int = 0
    categories: str | None = None
    type: str = "original"
    original_link: str | None = None
    authorized_status: bool = False
    description: str = Field(alias="Description")
    resource_url: str | None = None
    not_auto_saved: str = "1"
    source: str = "pc_mdeditor"
    cover_images: list[str] = Field(default_factory=list)
    cover_type: int = 1
    is_new: int = 1
    vote_id: int = 0
    resource_id: str | None = None
    pub_status: str = Field(default="publish", alias="pubStatus")
    sync_git_code: int = 0

    @classmethod
    def from_domain(cls, request: PublishRequest, categories: str | None) -> CsdnPublishRequest:
        """由领域请求构建，content 为 Markdown 渲染后的 HTML"""
        return cls(
            title=request.title,
            markdown_content=request.markdown_content,
            content=request.content,
            tags=request.tags,
            description=request.description,
            categories=categories,
        )

    def to_payload(self) -> dict[str, Any]:
        """序列化为请求 JSON（使用别名，忽略空值）"""
        return self.model_dump(by_alias=True, exclude_none=True)


class CsdnPublishData(BaseModel):
    """发布成功后返回的文章信息"""

    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    id: int | None = None
    qrcode: str | None = None
    title: str | None = None
    description: str | None = None


class CsdnPublishResponse(BaseModel):
    """saveArticle 响应体"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: int | None = None
    trace_id: str | None = Field(default=None, alias="traceId")
    data: CsdnPublishData | None = None
    msg: str | None = None

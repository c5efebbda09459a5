"""Markdown 转 HTML

CSDN 的发布接口同时需要 Markdown 原文（markdowncontent）和渲染后的 HTML（content）。
"""

from __future__ import annotations

from markdown import markdown

# extra: fenced_code / tables / footnotes / abbr 等
MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def markdown_to_html(text: str | None) -> str:
    """将 Markdown 文本转换为 HTML

    块级原始 HTML 会原样保留，因此对已转换的 HTML 再次转换结果不变。

    Args:
        text: Markdown 文本

    Returns:
        HTML 字符串；输入为空时返回空字符串
    """
    if not text:
        return ""
    return markdown(text, extensions=MARKDOWN_EXTENSIONS)

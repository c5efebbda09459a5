"""Markdown 转换测试"""

import pytest

from csdn_publisher.shared.utils import markdown_to_html


class TestMarkdownToHtml:
    """markdown_to_html 测试"""

    @pytest.mark.unit
    def test_heading(self) -> None:
        """测试标题"""
        assert markdown_to_html("# 测试文章") == "<h1>测试文章</h1>"
        assert "<h2>小节</h2>" in markdown_to_html("## 小节")

    @pytest.mark.unit
    def test_paragraph_and_emphasis(self) -> None:
        """测试段落和强调"""
        html = markdown_to_html("这是 **加粗** 文本")
        assert html.startswith("<p>")
        assert "<strong>加粗</strong>" in html

    @pytest.mark.unit
    def test_fenced_code(self) -> None:
        """测试代码块"""
        html = markdown_to_html("```python\nprint(1)\n```")
        assert '<pre><code class="language-python">' in html
        assert "print(1)" in html
        assert "</code></pre>" in html

    @pytest.mark.unit
    def test_unordered_list(self) -> None:
        """测试无序列表"""
        html = markdown_to_html("- Java\n- Python")
        assert "<ul>" in html
        assert "<li>Java</li>" in html
        assert "<li>Python</li>" in html

    @pytest.mark.unit
    def test_ordered_list(self) -> None:
        """测试有序列表"""
        html = markdown_to_html("1. 第一步\n2. 第二步")
        assert "<ol>" in html
        assert "<li>第一步</li>" in html

    @pytest.mark.unit
    def test_table(self) -> None:
        """测试表格"""
        html = markdown_to_html("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    @pytest.mark.unit
    def test_document_with_mixed_blocks(self) -> None:
        """测试混合内容"""
        text = "# 标题\n\n正文\n\n- 要点\n\n```\ncode\n```"
        html = markdown_to_html(text)
        assert "<h1>标题</h1>" in html
        assert "<p>正文</p>" in html
        assert "<li>要点</li>" in html
        assert "<pre><code>" in html

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        [
            "# 测试文章",
            "普通段落",
            "# 标题\n\n- Java\n- Python",
            "## 步骤\n\n1. 第一步\n2. 第二步\n\n结尾段落",
            "```python\nprint(1)\n\nprint(2)\n```",
            "| a | b |\n|---|---|\n| 1 | 2 |",
            "# 标题\n\n正文\n\n```\ncode\n```\n\n| a |\n|---|\n| 1 |",
        ],
    )
    def test_idempotent_on_converted_html(self, text: str) -> None:
        """测试已转换的 HTML 再次转换保持不变"""
        html = markdown_to_html(text)
        assert markdown_to_html(html) == html

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text) -> None:
        """测试空输入"""
        assert markdown_to_html(text) == ""

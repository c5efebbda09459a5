"""CSDN 数据传输对象测试"""

import pytest

from csdn_publisher.domain.entities import PublishRequest
from csdn_publisher.infrastructure.adapters.csdn import (
    CsdnPublishRequest,
    CsdnPublishResponse,
)


class TestCsdnPublishRequest:
    """请求体映射测试"""

    @pytest.mark.unit
    def test_payload_carries_request_fields(self, sample_request: PublishRequest) -> None:
        """测试标题/正文/标签/简述原样透传"""
        payload = CsdnPublishRequest.from_domain(sample_request, "Python").to_payload()

        assert payload["title"] == sample_request.title
        assert payload["markdowncontent"] == sample_request.markdown_content
        assert payload["content"] == sample_request.content
        assert payload["tags"] == sample_request.tags
        assert payload["Description"] == sample_request.description
        assert payload["categories"] == "Python"

    @pytest.mark.unit
    def test_fixed_editor_fields(self, sample_request: PublishRequest) -> None:
        """测试编辑器固定字段"""
        payload = CsdnPublishRequest.from_domain(sample_request, "Python").to_payload()

        assert payload["readType"] == "public"
        assert payload["level"] == "0"
        assert payload["status"] == 0
        assert payload["type"] == "original"
        assert payload["authorized_status"] is False
        assert payload["not_auto_saved"] == "1"
        assert payload["source"] == "pc_mdeditor"
        assert payload["cover_images"] == []
        assert payload["cover_type"] == 1
        assert payload["is_new"] == 1
        assert payload["vote_id"] == 0
        assert payload["pubStatus"] == "publish"
        assert payload["sync_git_code"] == 0

    @pytest.mark.unit
    def test_unset_optional_fields_omitted(self, sample_request: PublishRequest) -> None:
        """测试空字段不序列化"""
        payload = CsdnPublishRequest.from_domain(sample_request, None).to_payload()

        assert "categories" not in payload
        assert "original_link" not in payload
        assert "resource_url" not in payload
        assert "resource_id" not in payload

    @pytest.mark.unit
    def test_python_names_not_in_payload(self, sample_request: PublishRequest) -> None:
        """测试序列化只使用 JSON 键名"""
        payload = CsdnPublishRequest.from_domain(sample_request, "Python").to_payload()

        for name in ("markdown_content", "read_type", "description", "pub_status"):
            assert name not in payload


class TestCsdnPublishResponse:
    """响应体解析测试"""

    @pytest.mark.unit
    def test_parse_success(self, success_payload: dict) -> None:
        """测试解析成功响应"""
        result = CsdnPublishResponse.model_validate(success_payload)

        assert result.code == 200
        assert result.msg == "success"
        assert result.trace_id == success_payload["traceId"]
        assert result.data is not None
        assert result.data.id == 150701174
        assert result.data.url == "https://blog.csdn.net/tester/article/details/150701174"

    @pytest.mark.unit
    def test_parse_without_data(self) -> None:
        """测试 data 为空"""
        result = CsdnPublishResponse.model_validate({"code": 400, "data": None, "msg": "标签不能为空"})

        assert result.code == 400
        assert result.data is None
        assert result.msg == "标签不能为空"

    @pytest.mark.unit
    def test_unknown_fields_ignored(self, success_payload: dict) -> None:
        """测试忽略未知字段"""
        success_payload["data"]["extra_field"] = "x"
        success_payload["unknown"] = 1

        result = CsdnPublishResponse.model_validate(success_payload)
        assert result.data.id == 150701174

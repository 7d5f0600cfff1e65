"""Tests for tool payload conversion."""
from src.article_extractor.models import ArticleData, ArticleMetadata, ArticleRecord
from src.tool_interface.converters import record_to_tool_payload


class TestRecordToToolPayload:
    """Tests for record_to_tool_payload."""

    async def test_payload_lifts_formats_to_top_level(self, sample_record: ArticleRecord):
        payload = record_to_tool_payload(sample_record)

        assert payload["status"] == "success"
        assert payload["timestamp"] == sample_record.timestamp
        assert payload["metadata"] == sample_record.metadata.model_dump()
        assert payload["markdown"] == sample_record.data.markdown
        assert payload["html"] == sample_record.data.html
        assert "data" not in payload

    async def test_absent_format_is_omitted(self):
        record = ArticleRecord(
            url="https://mp.weixin.qq.com/s/abc",
            timestamp="2025-10-29T09:00:00.000Z",
            metadata=ArticleMetadata(),
            data=ArticleData(html="<p>x</p>"),
        )

        payload = record_to_tool_payload(record)

        assert "markdown" not in payload
        assert payload["html"] == "<p>x</p>"

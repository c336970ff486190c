"""Unit tests for input/output models"""

import logging

import pytest
from pydantic import ValidationError

from toolsearch.models import CatalogEntry, SearchOptions, SearchResult, ToolInfo


class TestToolInfo:
    """Test tool descriptor validation"""

    def test_description_optional(self):
        tool = ToolInfo(name="read_file")
        assert tool.description is None

    def test_extra_fields_preserved(self):
        """Extra descriptor fields survive validation"""
        tool = ToolInfo.model_validate({
            "name": "read_file",
            "description": "Read a file",
            "inputSchema": {"type": "object"},
        })
        assert tool.model_dump()["inputSchema"] == {"type": "object"}

    @pytest.mark.parametrize("payload", [
        {},
        {"name": None},
        {"name": 42},
        {"name": "read_file", "description": 123},
        {"name": "read_file", "description": ["Read", "a", "file"]},
    ])
    def test_malformed_rejected(self, payload):
        with pytest.raises(ValidationError):
            ToolInfo.model_validate(payload)


class TestCatalogEntry:
    def test_nested_validation(self):
        entry = CatalogEntry.model_validate({"server": "fs", "tool": {"name": "read_file"}})
        assert entry.server == "fs"
        assert entry.tool.name == "read_file"

    def test_server_must_be_string(self):
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate({"server": 1, "tool": {"name": "read_file"}})


class TestSearchOptions:
    """Test defaults, aliases and clamping"""

    def test_defaults(self):
        options = SearchOptions()
        assert options.threshold == 0.3
        assert options.limit == 10
        assert options.use_synonyms is True

    def test_camel_case_alias(self):
        """Test useSynonyms and use_synonyms are both accepted"""
        assert SearchOptions.model_validate({"useSynonyms": False}).use_synonyms is False
        assert SearchOptions(use_synonyms=False).use_synonyms is False

    def test_negative_values_clamped(self, caplog):
        """Test negative threshold and limit become 0 with a warning"""
        with caplog.at_level(logging.WARNING):
            options = SearchOptions(threshold=-1.5, limit=-3)

        assert options.threshold == 0.0
        assert options.limit == 0
        assert "clamped to 0" in caplog.text

    def test_invalid_types_rejected(self):
        with pytest.raises(ValidationError):
            SearchOptions(limit="many")


class TestSearchResult:
    def test_serializes_matched_tokens_alias(self):
        result = SearchResult(
            server="fs",
            tool=ToolInfo(name="read_file"),
            score=1.5,
            matched_tokens=["read"],
        )
        dumped = result.model_dump(by_alias=True)
        assert dumped["matchedTokens"] == ["read"]
        assert dumped["tool"]["name"] == "read_file"

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            SearchResult(server="fs", tool=ToolInfo(name="x"), score=-0.1)

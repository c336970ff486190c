"""
Data models for tool search input and output.

Catalog entries are validated here, before any text reaches the tokenizer.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3
DEFAULT_LIMIT = 10


class ToolInfo(BaseModel):
    # Keep extra descriptor fields (input schema etc.) so callers get their tool back unchanged
    model_config = ConfigDict(extra="allow")

    name: StrictStr = Field(..., description="Tool name")
    description: Optional[StrictStr] = Field(
        default=None,
        description="Free-text description (missing description is searched as empty text)"
    )


class CatalogEntry(BaseModel):
    server: StrictStr = Field(..., description="Server / namespace publishing the tool")
    tool: ToolInfo


class SearchOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        description="Minimum BM25 score (inclusive). Negative values are clamped to 0."
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of results. Negative values are clamped to 0."
    )
    use_synonyms: bool = Field(
        default=True,
        alias="useSynonyms",
        description="Expand the query with synonyms (synonym matches weigh 70%)"
    )

    @field_validator("threshold", "limit")
    @classmethod
    def clamp_negative(cls, value, info):
        if value < 0:
            logger.warning(f"Negative {info.field_name}={value} clamped to 0")
            return type(value)(0)
        return value


class SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    server: str
    tool: ToolInfo
    score: float = Field(..., ge=0.0, description="Raw BM25 score, comparable only within one result set")
    matched_tokens: List[str] = Field(
        default_factory=list,
        alias="matchedTokens",
        description="Distinct matched query terms (exact and synonym) in first-seen order"
    )

"""Exceptions raised at the search boundary"""

from typing import Any, Dict, List, Optional


class ToolSearchError(Exception):
    """Base class for tool search errors"""


class InputValidationError(ToolSearchError, ValueError):
    """Search input failed validation with actionable error message"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class CatalogValidationError(InputValidationError):
    """A catalog entry is malformed (missing name, non-string description, ...)"""

    def __init__(self, message: str, index: Optional[int] = None, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, errors)
        self.index = index


class OptionsValidationError(InputValidationError):
    """Search options (threshold, limit, use_synonyms) are invalid"""


def format_pydantic_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Render pydantic error dicts as indented lines.

    Example:
        >>> format_pydantic_errors([{"loc": ("tool", "name"), "msg": "Field required"}])
        '  tool.name: Field required'
    """
    lines = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ())) or "<entry>"
        lines.append(f"  {location}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines)

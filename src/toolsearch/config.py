"""
Configuration from environment variables.

Settings are read from the process environment, falling back to
.env.local (local dev, highest priority) or .env in the current directory:

    TOOL_SEARCH_THRESHOLD      Minimum score (default: 0.3)
    TOOL_SEARCH_LIMIT          Maximum results (default: 10)
    TOOL_SEARCH_USE_SYNONYMS   "true" / "false" (default: true)

Env files are only read, never exported: os.environ is left untouched and
variables the host sets explicitly always win.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values
from pydantic import ValidationError

from .errors import OptionsValidationError, format_pydantic_errors
from .models import DEFAULT_LIMIT, DEFAULT_THRESHOLD, SearchOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "TOOL_SEARCH_"
ENV_THRESHOLD = "TOOL_SEARCH_THRESHOLD"
ENV_LIMIT = "TOOL_SEARCH_LIMIT"
ENV_USE_SYNONYMS = "TOOL_SEARCH_USE_SYNONYMS"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}

# TOOL_SEARCH_* values read from the env file (None = not read yet)
_file_settings: Optional[Dict[str, str]] = None


def load_environment(base_dir: Optional[Union[str, Path]] = None, force: bool = False) -> Dict[str, str]:
    """
    Read TOOL_SEARCH_* settings from .env.local or .env (once per process).
    
    Args:
        base_dir: Directory containing the env files (default: current directory)
        force: Re-read even if already loaded
        
    Returns:
        TOOL_SEARCH_* values found in the file (empty if no file was found)
    """
    global _file_settings
    if _file_settings is not None and not force:
        return _file_settings
    
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    env_local = base / ".env.local"
    env_file = base / ".env"
    
    if env_local.exists():
        source = env_local
    elif env_file.exists():
        source = env_file
    else:
        logger.debug("No .env.local or .env file found - using system environment variables only")
        _file_settings = {}
        return _file_settings
    
    logger.info(f"Reading tool search settings from: {source}")
    _file_settings = {
        key: value
        for key, value in dotenv_values(source).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }
    return _file_settings


def _setting(name: str, default: str) -> str:
    """Process environment first, then env file, then default."""
    value = os.environ.get(name)
    if value is not None:
        return value
    return load_environment().get(name, default)


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise OptionsValidationError(
        f"Invalid value for {name}: '{value}'.\n"
        f"Expected one of: true, false, 1, 0, yes, no, on, off"
    )


def load_options() -> SearchOptions:
    """
    Build default search options from the environment.
    
    Returns:
        SearchOptions (unset variables fall back to built-in defaults)
        
    Raises:
        OptionsValidationError: If a variable cannot be parsed
    """
    threshold = _setting(ENV_THRESHOLD, str(DEFAULT_THRESHOLD))
    limit = _setting(ENV_LIMIT, str(DEFAULT_LIMIT))
    use_synonyms = _parse_bool(ENV_USE_SYNONYMS, _setting(ENV_USE_SYNONYMS, "true"))
    
    try:
        return SearchOptions(threshold=threshold, limit=limit, use_synonyms=use_synonyms)
    except ValidationError as e:
        raise OptionsValidationError(
            f"Invalid tool search configuration "
            f"({ENV_THRESHOLD}={threshold!r}, {ENV_LIMIT}={limit!r}):\n"
            f"{format_pydantic_errors(e.errors())}",
            errors=e.errors(),
        ) from e

"""
Key style conversion for payloads crossing the API boundary.

The tracking API mixes snake_case and camelCase keys. Models in this package
are snake_case, so responses are converted on the way in and request bodies
that the API expects in camelCase are converted on the way out.
"""
import re
from typing import Any

_SNAKE_SEGMENT = re.compile(r"_([a-z0-9])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

def camelize(key: str) -> str:
    """
    Convert a snake_case key to camelCase.

    Example:
        >>> camelize("avg_cycle_length")
        'avgCycleLength'
    """
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), key)

def snakify(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    A run of capitals is kept together as one word.

    Example:
        >>> snakify("lastPeriodStart")
        'last_period_start'
        >>> snakify("HTTPStatus")
        'http_status'
    """
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    return _CAMEL_BOUNDARY.sub(r"\1_\2", key).lower()

def _convert_keys(value: Any, convert) -> Any:
    if isinstance(value, dict):
        return {
            (convert(key) if isinstance(key, str) else key): _convert_keys(item, convert)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_convert_keys(item, convert) for item in value]
    return value

def to_camel_case(value: Any) -> Any:
    """Recursively convert dictionary keys to camelCase."""
    return _convert_keys(value, camelize)

def to_snake_case(value: Any) -> Any:
    """Recursively convert dictionary keys to snake_case."""
    return _convert_keys(value, snakify)

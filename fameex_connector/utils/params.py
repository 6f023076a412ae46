"""Request parameter helpers used for signing payloads and log lines."""

from typing import Any, Dict, Optional


def trim_any(text: str, chars: str) -> str:
    """Strip any of ``chars`` from both ends of ``text``.

    Raises AttributeError when ``text`` is not a string, the response
    classifier relies on that to detect malformed error messages.
    """
    return text.strip(chars)


def get_params_string(params: Optional[Dict[str, Any]]) -> str:
    """Render params as ``key=value&key=value`` for log lines.

    Keys keep insertion order. List values are comma-joined. None values
    are skipped.
    """
    if not params:
        return ""

    parts = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        parts.append(f"{key}={value}")
    return "&".join(parts)

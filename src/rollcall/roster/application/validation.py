"""Input validation shared by the roster application services."""

from __future__ import annotations

from roster.ports.exceptions import InvalidNameError


def normalize_name(kind: str, name: str, max_length: int) -> str:
    """Strip surrounding whitespace and check the result is usable.

    Args:
        kind: What is being named ("group" or "player"), used in errors
        name: Raw user input
        max_length: Longest accepted name after stripping

    Returns:
        The stripped name

    Raises:
        InvalidNameError: If the stripped name is empty or too long
    """
    cleaned = name.strip()
    if not cleaned:
        raise InvalidNameError(kind, name, "name must not be blank")
    if len(cleaned) > max_length:
        raise InvalidNameError(
            kind, name, f"name must be at most {max_length} characters"
        )
    return cleaned

"""
Helpers shared by endpoint functions.
"""


def require_id(value: str | int, name: str) -> str:
    """
    Normalize a Steam or app ID into a query parameter value.

    Raises:
        ValueError: If the ID is empty
    """
    text = str(value).strip()
    if not text:
        raise ValueError(f"{name} must not be empty")
    return text


def require_non_negative(value: int, name: str) -> str:
    """
    Normalize a count-like argument into a query parameter value.

    Raises:
        ValueError: If the value is negative or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return str(value)

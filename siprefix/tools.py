#
# SI Prefix Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """Format the type of an object (or a type itself) for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(target_type, "__name__", str(target_type))
    return f"<type: {type_name}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Broken __repr__ methods and very long representations are handled gracefully,
    so the formatter is safe to call from any error path.

    Args:
        x: Any Python object.
        max_repr: Maximum length of the value repr before truncation.

    Returns:
        Formatted string like "<int: 42>".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("kilo")
        "<str: 'kilo'>"
        >>> fmt_value(10 ** 400, max_repr=8)
        '<int: 10000000...>'
    """
    t = type(x).__name__

    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    # Escape before truncation so the ellipsis token stays intact
    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_fmt_truncate(base_repr, max_repr)}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """
    Truncate s to at most max_len characters before appending the ellipsis.

    Quoted reprs keep their quotes, with the ellipsis placed outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 4)]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max_len] + ellipsis

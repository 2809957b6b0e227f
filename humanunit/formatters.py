"""
Formatting of types and values for exception and warning messages.

Formatters never raise: broken __repr__ methods and very long representations
are handled so that an error message can always be built.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """
    Format the type of an object, or a type itself, as a short display token.

    Args:
        obj: Any Python object or type.
        fully_qualified: Include the module name for non-builtin types.

    Returns:
        Formatted string like "<int>".

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__name__", "?")
    if fully_qualified and cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    return f"<{name}>"


def fmt_value(obj: Any, *, max_repr: int = 80, ellipsis: str = "...") -> str:
    """
    Format a value as a type-value pair.

    Args:
        obj: Any Python object.
        max_repr: Maximum length of the value repr before truncation.
        ellipsis: Truncation token.

    Returns:
        Formatted string like "<int: 42>" or "<str: 'KB'>".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("x" * 10, max_repr=4)
        "<str: 'xx...>"
    """
    repr_ = _safe_repr(obj)
    if len(repr_) > max_repr:
        repr_ = repr_[:max(1, max_repr - 1)] + ellipsis
    type_name = fmt_type(obj)[1:-1]
    return f"<{type_name}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj: Any) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"

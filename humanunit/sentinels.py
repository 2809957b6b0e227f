"""
Sentinel object for distinguishing between an unprovided argument and an explicit value.

Option fields such as `unit_separator` or `empty_value` accept any string including "",
and `merge()` methods need to tell "not passed" apart from every legal value, so
identity checks against UNSET are used instead of None checks.

Example:
    >>> def merge(self, locale: str | UnsetType = UNSET) -> "HumanizeOptions":
    ...     locale = ifnotunset(locale, default=self.locale)
"""

from typing import Any, Callable, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity and preserved through pickling.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None, default_factory: Callable[[], Any] | None = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check.
        default: Returned when value is UNSET.
        default_factory: Callable producing the default, evaluated only when value is UNSET.

    Raises:
        ValueError: If both default and default_factory are provided.

    Examples:
        >>> ifnotunset(UNSET, default=3)
        3
        >>> ifnotunset("", default="n/a")
        ''
    """
    if value is not UNSET:
        return value

    if default_factory is not None and default is not None:
        raise ValueError("Cannot specify both default and default_factory")

    if default_factory is not None:
        return default_factory()

    return default

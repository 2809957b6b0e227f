#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanunit.numbers import resolve_locale
from humanunit.units import Unit


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def kmb_units() -> list[Unit]:
    """Unit table with mega, kilo and plain breakpoints."""
    return [
        Unit(1_000_000, "M"),
        Unit(1_000, "K"),
        Unit(1, ""),
    ]


@pytest.fixture
def fresh_locales():
    """Clear the resolved locales cache so that fallback warnings are emitted again."""
    resolve_locale.cache_clear()
    yield
    resolve_locale.cache_clear()

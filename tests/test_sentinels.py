#
# Humanize Unit - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import copy
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanunit.sentinels import UNSET, UnsetType, ifnotunset


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnset:

    def test_singleton(self):
        assert UnsetType() is UNSET
        assert copy.deepcopy(UNSET) is UNSET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_falsy_and_repr(self):
        assert not UNSET
        assert repr(UNSET) == "<UNSET>"

    def test_identity_equality(self):
        assert UNSET == UNSET
        assert UNSET != None  # noqa: E711
        assert UNSET != ""


class TestIfNotUnset:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(UNSET, "default", id="unset"),
            pytest.param(None, None, id="none"),
            pytest.param("", "", id="empty-str"),
            pytest.param(0, 0, id="zero"),
        ],
    )
    def test_default(self, value, expected):
        assert ifnotunset(value, default="default") == expected

    def test_default_factory(self):
        assert ifnotunset(UNSET, default_factory=list) == []
        assert ifnotunset(1, default_factory=list) == 1

    def test_both_defaults(self):
        with pytest.raises(ValueError):
            ifnotunset(UNSET, default=1, default_factory=list)

"""Unit tests for the poll registry."""
from dataclasses import FrozenInstanceError

import pytest

from votebox.bootstrap.registry import PollRegistry


@pytest.fixture
def registry():
    return PollRegistry.from_rows([(3, "Bands", "band"), (8, "Sites", "website"), (9, "Other", None)])


@pytest.mark.unit
class TestPollRegistry:

    def test_lookups(self, registry):
        assert registry.poll_id("Sites") == 8
        assert registry.poll_id("Missing") is None
        assert registry.category_of(3) == "band"
        assert registry.category_of(9) is None
        assert registry.category_of(42) is None
        assert registry.poll_id_for_category("website") == 8
        assert registry.poll_id_for_category("movie") is None
        assert len(registry) == 3

    def test_is_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.ids_by_title["New"] = 10
        with pytest.raises(FrozenInstanceError):
            registry.categories = {}

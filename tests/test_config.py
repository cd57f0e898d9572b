import pytest
from hypothesis import given, strategies as st

from fieldlist.config import Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.show_types is True
        assert settings.type_placeholder == "-"
        assert settings.column_gap == 2

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        settings = Settings(
            show_types=False,
            type_placeholder="?",
            column_gap=4
        )
        assert settings.show_types is False
        assert settings.type_placeholder == "?"
        assert settings.column_gap == 4

    @given(gap=st.integers(min_value=0, max_value=40))
    def test_non_negative_gaps_are_valid(self, gap):
        """For any non-negative gap, Settings should accept it."""
        settings = Settings(column_gap=gap)
        assert settings.column_gap == gap

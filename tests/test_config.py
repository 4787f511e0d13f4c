"""
Unit tests for generator configuration and random sources.
"""

import logging
from unittest.mock import MagicMock

import pytest

from pwpattern.charset import CharacterClassTable
from pwpattern.config import GeneratorOptions
from pwpattern.random_source import SystemRandomSource


class TestGeneratorOptions:
    """Test GeneratorOptions defaults and parsing."""

    def test_defaults(self):
        """Test default option values."""
        options = GeneratorOptions()

        assert options.remove_lookalikes is False
        assert options.permute is True
        assert options.table is CharacterClassTable.DEFAULT

    def test_options_are_immutable(self):
        """Test that options cannot be changed after creation."""
        options = GeneratorOptions()
        with pytest.raises(AttributeError):
            options.permute = False

    def test_from_mapping(self):
        """Test parsing recognised keys."""
        options = GeneratorOptions.from_mapping({"remove_lookalikes": True, "permute": False})

        assert options.remove_lookalikes is True
        assert options.permute is False

    @pytest.mark.parametrize("table", ["ascii", "ASCII", CharacterClassTable.ASCII])
    def test_table_names(self, table):
        """Test that tables may be named or passed directly."""
        assert GeneratorOptions.from_mapping({"table": table}).table is CharacterClassTable.ASCII

    def test_ascii_only_alias(self):
        """Test the ascii_only shorthand."""
        assert GeneratorOptions.from_mapping({"ascii_only": True}).table is CharacterClassTable.ASCII
        assert GeneratorOptions.from_mapping({"ascii_only": False}).table is CharacterClassTable.DEFAULT

    def test_unknown_table(self):
        """Test that an unknown table name raises."""
        with pytest.raises(ValueError):
            GeneratorOptions.from_mapping({"table": "ebcdic"})

    def test_unknown_keys_ignored(self, caplog):
        """Test that unknown keys are logged and dropped."""
        with caplog.at_level(logging.WARNING, logger="pwpattern.config"):
            options = GeneratorOptions.from_mapping({"length": 12, "permute": False})

        assert options == GeneratorOptions(permute=False)
        assert "Ignoring unknown generator options: length" in caplog.text


class TestSystemRandomSource:
    """Test the default random source."""

    def test_sample_picks_member(self):
        """Test that sample returns an item of the input."""
        source = SystemRandomSource()
        items = ["a", "b", "c"]

        for _ in range(20):
            assert source.sample(items) in items
        assert items == ["a", "b", "c"]

    def test_sample_and_shuffle_share_rng(self):
        """Test that both operations draw from the same generator instance."""
        source = SystemRandomSource()
        source._rng = MagicMock()
        source._rng.choice.return_value = "b"

        assert source.sample(["a", "b"]) == "b"
        source._rng.choice.assert_called_once_with(["a", "b"])

        source.shuffle(["a", "b"])
        source._rng.shuffle.assert_called_once_with(["a", "b"])

    def test_sample_empty(self):
        """Test that sampling nothing raises."""
        with pytest.raises(ValueError):
            SystemRandomSource().sample([])

    def test_shuffle_returns_permutation(self):
        """Test that shuffle leaves its input alone."""
        items = list("abcdefghij")
        shuffled = SystemRandomSource().shuffle(items)

        assert sorted(shuffled) == items
        assert items == list("abcdefghij")
        assert shuffled is not items


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

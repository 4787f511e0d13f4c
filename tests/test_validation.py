"""
Tests for pattern validation helpers.
"""

import pytest

from pwpattern.charset import CharacterClassTable
from pwpattern.utils.validation import validate_pattern, get_validation_error_message


class TestValidation:
    """Test pattern validation."""

    def test_valid_patterns(self):
        """Test that valid patterns pass validation."""
        valid_patterns = [
            "uullA{6}",
            "HH\\-HH\\-HH",
            "[v^e^i^o^u]",
            "\\^[\\^]",
            "x{4}",
        ]

        for pattern in valid_patterns:
            assert validate_pattern(pattern), f"Pattern '{pattern}' should be valid"

    def test_invalid_patterns(self):
        """Test that invalid patterns fail validation."""
        invalid_patterns = [
            "",  # Empty
            "^a",  # Negated to nothing
            "[ab",  # Unterminated group
            "q",  # Unknown class
            None,  # Not a string
        ]

        for pattern in invalid_patterns:
            assert not validate_pattern(pattern), f"Pattern {pattern!r} should be invalid"

    def test_validation_options(self):
        """Test that table and lookalike options are honoured."""
        assert not validate_pattern("x", table=CharacterClassTable.ASCII)
        assert validate_pattern("[\\I\\|]")
        assert not validate_pattern("[\\I\\|]", remove_lookalikes=True)

    def test_validation_error_messages(self):
        """Test validation error messages."""
        assert "must be a string" in get_validation_error_message(42)
        assert "cannot be empty" in get_validation_error_message("")
        assert "malformed" in get_validation_error_message("[ab")
        assert "unknown character class: 'q'" in get_validation_error_message("q")
        assert "nothing to choose from" in get_validation_error_message("[^a]")
        assert "nothing to choose from" in get_validation_error_message("\\1", remove_lookalikes=True)
        assert get_validation_error_message("d{4}") == "Pattern is valid"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

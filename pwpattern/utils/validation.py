"""
Pattern validation utilities for pwpattern.
"""

from typing import Any

from ..charset import CharacterClassTable
from ..exceptions import InvalidCharacterClassID, InvalidPatternError, PatternSyntaxError
from ..generator import PasswordGenerator


def validate_pattern(pattern: Any,
                     table: CharacterClassTable = CharacterClassTable.DEFAULT,
                     remove_lookalikes: bool = False) -> bool:
    """
    Check whether a pattern can generate passwords.

    Args:
        pattern: The pattern to validate
        table: Character class table to resolve class IDs against
        remove_lookalikes: Validate as if lookalike removal were enabled

    Returns:
        True if pattern is valid, False otherwise
    """
    if not isinstance(pattern, str):
        return False

    try:
        PasswordGenerator(pattern, remove_lookalikes=remove_lookalikes, table=table)
    except (InvalidPatternError, InvalidCharacterClassID):
        return False

    return True


def get_validation_error_message(pattern: Any,
                                 table: CharacterClassTable = CharacterClassTable.DEFAULT,
                                 remove_lookalikes: bool = False) -> str:
    """
    Get a descriptive error message for a pattern.

    Args:
        pattern: The pattern to describe

    Returns:
        Error message describing why the pattern is invalid
    """
    if not isinstance(pattern, str):
        return "Pattern must be a string"

    if len(pattern) == 0:
        return "Pattern cannot be empty"

    try:
        PasswordGenerator(pattern, remove_lookalikes=remove_lookalikes, table=table)
    except PatternSyntaxError as e:
        return f"Pattern is malformed: {e}"
    except InvalidCharacterClassID as e:
        return f"Pattern uses an unknown character class: {e.class_id!r}"
    except InvalidPatternError as e:
        return f"Pattern has nothing to choose from: {e}"

    return "Pattern is valid"

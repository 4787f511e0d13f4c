"""
Custom exceptions for pwpattern.
"""

from typing import Optional


class PwPatternException(Exception):
    """Base exception for pwpattern."""

    pass


class InvalidCharacterClassID(PwPatternException):
    """Character class ID has no entry in the active table."""

    def __init__(self, class_id: str):
        self.class_id = class_id
        super().__init__(f"No such character class ID {class_id!r}")


class InvalidPatternError(PwPatternException):
    """Pattern resolves to an empty character set."""

    def __init__(self, message: str, pattern: Optional[str] = None):
        self.pattern = pattern
        super().__init__(message)


class PatternSyntaxError(InvalidPatternError):
    """Pattern is malformed."""

    def __init__(self, message: str, position: int, pattern: Optional[str] = None):
        self.position = position
        super().__init__(f"{message} at position {position}", pattern)

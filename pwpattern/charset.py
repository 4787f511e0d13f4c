"""
Character sets and class tables for the KeePass pattern language.

See https://keepass.info/help/base/pwgenerator.html#pattern
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .exceptions import InvalidCharacterClassID

# Character sets
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
UPPER_CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
LOWER_CONSONANTS = "bcdfghjklmnpqrstvwxyz"
UPPER_VOWELS = "AEIOU"
LOWER_VOWELS = "aeiou"
PUNCTUATION = ",.;:"
BRACKETS = "[]{}()<>"
PRINTABLE_ASCII_SPECIAL = "!\"#$%&'()*+,-./:;<=>?[\\]^_{|}~"
UPPER_HEX = "0123456789ABCDEF"
LOWER_HEX = "0123456789abcdef"

# Windows-1252 upper half, as Unicode code points
HIGH_ANSI_CODE_POINTS = (
    0x007E, 0x20AC, 0x201A, 0x0192, 0x201E, 0x2026, 0x2020, 0x2021, 0x02C6, 0x2030,
    0x0160, 0x2039, 0x0152, 0x017D, 0x2018, 0x2019, 0x201C, 0x201D, 0x2022, 0x2013,
    0x2014, 0x02DC, 0x2122, 0x0161, 0x203A, 0x0153, 0x017E, 0x0178, 0x00A1, 0x00A2,
    0x00A3, 0x00A4, 0x00A5, 0x00A6, 0x00A7, 0x00A8, 0x00A9, 0x00AA, 0x00AB, 0x00AC,
    0x00AE, 0x00AF, 0x00B0, 0x00B1, 0x00B2, 0x00B3, 0x00B4, 0x00B5, 0x00B6, 0x00B7,
    0x00B8, 0x00B9, 0x00BA, 0x00BB, 0x00BC, 0x00BD, 0x00BE, 0x00BF, 0x00C0, 0x00C1,
    0x00C2, 0x00C3, 0x00C4, 0x00C5, 0x00C6, 0x00C7, 0x00C8, 0x00C9, 0x00CA, 0x00CB,
    0x00CC, 0x00CD, 0x00CE, 0x00CF, 0x00D0, 0x00D1, 0x00D2, 0x00D3, 0x00D4, 0x00D5,
    0x00D6, 0x00D7, 0x00D8, 0x00D9, 0x00DA, 0x00DB, 0x00DC, 0x00DD, 0x00DE, 0x00DF,
    0x00E0, 0x00E1, 0x00E2, 0x00E3, 0x00E4, 0x00E5, 0x00E6, 0x00E7, 0x00E8, 0x00E9,
    0x00EA, 0x00EB, 0x00EC, 0x00ED, 0x00EE, 0x00EF, 0x00F0, 0x00F1, 0x00F2, 0x00F3,
    0x00F4, 0x00F5, 0x00F6, 0x00F7, 0x00F8, 0x00F9, 0x00FA, 0x00FB, 0x00FC, 0x00FD,
    0x00FE,
)
HIGH_ANSI = "".join(chr(cp) for cp in HIGH_ANSI_CODE_POINTS)

# Visually ambiguous characters removed by the lookalike option
LOOKALIKES = frozenset("O0l1I|")

_DEFAULT_MAPPING = {
    "a": (LOWERCASE, DIGITS),
    "A": (LOWERCASE, UPPERCASE, DIGITS),
    "U": (UPPERCASE, DIGITS),
    "c": (LOWER_CONSONANTS,),
    "C": (LOWER_CONSONANTS, UPPER_CONSONANTS),
    "z": (UPPER_CONSONANTS,),
    "d": (DIGITS,),
    "h": (LOWER_HEX,),
    "H": (UPPER_HEX,),
    "l": (LOWERCASE,),
    "L": (LOWERCASE, UPPERCASE),
    "u": (UPPERCASE,),
    "p": (PUNCTUATION,),
    "b": (BRACKETS,),
    "s": (PRINTABLE_ASCII_SPECIAL,),
    "S": (UPPERCASE, LOWERCASE, DIGITS, PRINTABLE_ASCII_SPECIAL),
    "v": (LOWER_VOWELS,),
    "V": (LOWER_VOWELS, UPPER_VOWELS),
    "Z": (UPPER_VOWELS,),
    "x": (HIGH_ANSI,),
}

DEFAULT_MAPPING: Mapping[str, Tuple[str, ...]] = MappingProxyType(_DEFAULT_MAPPING)
ASCII_MAPPING: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {k: v for k, v in _DEFAULT_MAPPING.items() if k != "x"}
)


class CharacterClassTable(Enum):
    """Selects which class ID mapping a pattern is resolved against."""

    DEFAULT = "default"
    ASCII = "ascii"

    @property
    def mapping(self) -> Mapping[str, Tuple[str, ...]]:
        return ASCII_MAPPING if self is CharacterClassTable.ASCII else DEFAULT_MAPPING


class CharacterSet(set):
    """A set of single characters built from class IDs and literals."""

    def __init__(self, chars: Iterable[str] = (), table: Optional[CharacterClassTable] = None):
        super().__init__(chars)
        self.table = table or CharacterClassTable.DEFAULT

    def add_from_class_id(self, class_id: str) -> "CharacterSet":
        """
        Add every character of a KeePass character class.

        Args:
            class_id: One-letter class ID, e.g. ``"l"`` for lowercase letters

        Returns:
            self

        Raises:
            InvalidCharacterClassID: If the active table has no such ID
        """
        strings = self.table.mapping.get(class_id)
        if strings is None:
            raise InvalidCharacterClassID(class_id)
        return self.add_from_literal(*strings)

    def add_from_literal(self, *strings: str) -> "CharacterSet":
        """Add each character of each string verbatim."""
        for s in strings:
            self.update(s)
        return self

    def without_lookalikes(self, lookalikes: Iterable[str] = LOOKALIKES) -> "CharacterSet":
        return CharacterSet(self - set(lookalikes), table=self.table)

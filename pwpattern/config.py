"""
Generator configuration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .charset import CharacterClassTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorOptions:
    """
    Options recognised by PasswordGenerator.

    Attributes:
        remove_lookalikes: Strip visually ambiguous characters (O 0 l 1 I |)
            from every character set
        permute: Shuffle the sampled characters before joining them
        table: Character class table used to resolve class IDs
    """

    remove_lookalikes: bool = False
    permute: bool = True
    table: CharacterClassTable = CharacterClassTable.DEFAULT

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "GeneratorOptions":
        """
        Build options from a loose dictionary.

        ``table`` may be a CharacterClassTable, or a member name or value
        such as ``"ascii"``. ``ascii_only=True`` selects the ASCII table.
        Unknown keys are logged and ignored.

        Raises:
            ValueError: If ``table`` names no known table
        """
        known = {"remove_lookalikes", "permute", "table", "ascii_only"}
        unknown = sorted(set(options) - known)
        if unknown:
            logger.warning(f"Ignoring unknown generator options: {', '.join(unknown)}")

        table = options.get("table", CharacterClassTable.DEFAULT)
        if options.get("ascii_only"):
            table = CharacterClassTable.ASCII

        return cls(
            remove_lookalikes=bool(options.get("remove_lookalikes", False)),
            permute=bool(options.get("permute", True)),
            table=_coerce_table(table),
        )


def _coerce_table(table: Any) -> CharacterClassTable:
    if isinstance(table, CharacterClassTable):
        return table
    if isinstance(table, str):
        for member in CharacterClassTable:
            if table.lower() in (member.name.lower(), member.value):
                return member
    raise ValueError(f"Unknown character class table: {table!r}")

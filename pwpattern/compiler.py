"""
Pattern compiler for the KeePass password pattern language.

A pattern is scanned left to right into tokens. Each token resolves to one
CharacterSet and may carry a ``{n}`` repetition count. Compiling a pattern
yields one set per character of the password to be generated.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional

from .charset import CharacterClassTable, CharacterSet
from .exceptions import InvalidPatternError, PatternSyntaxError

logger = logging.getLogger(__name__)

ESCAPE = "\\"
NEGATE = "^"
GROUP_OPEN = "["
GROUP_CLOSE = "]"
COUNT_OPEN = "{"
COUNT_CLOSE = "}"

# Upper bound for a single {n} repetition count
MAX_REPEAT = 1024


@dataclass(frozen=True)
class Token:
    """One parsed unit of a pattern."""

    kind: str  # "class", "group" or "literal"
    position: int
    class_ids: FrozenSet[str] = frozenset()
    literals: FrozenSet[str] = frozenset()
    excluded: FrozenSet[str] = frozenset()
    excluded_class_ids: FrozenSet[str] = frozenset()
    count: int = 1

    def resolve(self, table: CharacterClassTable) -> CharacterSet:
        char_set = CharacterSet(table=table)
        for class_id in sorted(self.class_ids):
            char_set.add_from_class_id(class_id)
        char_set.add_from_literal(*self.literals)
        # Exclusions apply once, after every inclusion
        char_set -= self.excluded
        for class_id in sorted(self.excluded_class_ids):
            char_set -= CharacterSet(table=table).add_from_class_id(class_id)
        return char_set


@dataclass
class _Group:
    class_ids: set = field(default_factory=set)
    literals: set = field(default_factory=set)
    excluded: set = field(default_factory=set)


class PatternCompiler:
    """Compile patterns into ordered lists of character sets."""

    def __init__(self, table: CharacterClassTable = CharacterClassTable.DEFAULT):
        self.table = table

    def compile(self, pattern: str) -> List[CharacterSet]:
        """
        Compile a pattern into one character set per output character.

        A token repeated with ``{n}`` contributes the same CharacterSet
        object n times.

        Args:
            pattern: KeePass pattern, e.g. ``"uullA{6}"``

        Returns:
            Character sets in pattern order

        Raises:
            PatternSyntaxError: If the pattern is malformed
            InvalidCharacterClassID: If a class ID is not in the table
            InvalidPatternError: If any token resolves to an empty set,
                or the pattern produces no characters at all
        """
        tokens = self.tokenize(pattern)

        char_sets: List[CharacterSet] = []
        for token in tokens:
            char_set = token.resolve(self.table)
            if not char_set:
                raise InvalidPatternError(
                    f"Token at position {token.position} resolves to an empty character set",
                    pattern,
                )
            char_sets.extend([char_set] * token.count)

        if not char_sets:
            raise InvalidPatternError("Pattern produces no characters", pattern)

        logger.debug(f"Compiled pattern into {len(tokens)} tokens, {len(char_sets)} character sets")
        return char_sets

    def tokenize(self, pattern: str) -> List[Token]:
        """Split a pattern into tokens without resolving them."""
        if not isinstance(pattern, str):
            raise TypeError(f"Pattern must be a string, not {type(pattern).__name__}")

        tokens: List[Token] = []
        pos = 0
        length = len(pattern)

        while pos < length:
            char = pattern[pos]
            start = pos

            if char == ESCAPE:
                literal, pos = self._read_escape(pattern, pos)
                token = Token("literal", start, literals=frozenset(literal))
            elif char == GROUP_OPEN:
                group, pos = self._read_group(pattern, pos)
                token = Token(
                    "group",
                    start,
                    class_ids=frozenset(group.class_ids),
                    literals=frozenset(group.literals),
                    excluded=frozenset(group.excluded),
                )
            elif char == NEGATE:
                token, pos = self._read_bare_negation(pattern, pos)
            elif char == COUNT_OPEN:
                raise PatternSyntaxError("Repetition count without a preceding token", pos, pattern)
            else:
                token = Token("class", start, class_ids=frozenset(char))
                pos += 1

            count, pos = self._read_count(pattern, pos)
            if count is not None:
                token = replace(token, count=count)
            tokens.append(token)

        return tokens

    def _read_escape(self, pattern: str, pos: int):
        if pos + 1 >= len(pattern):
            raise PatternSyntaxError("Trailing escape character", pos, pattern)
        return pattern[pos + 1], pos + 2

    def _read_negation(self, pattern: str, pos: int):
        # "^X" and "^\X" both exclude the literal X
        pos += 1
        if pos >= len(pattern):
            raise PatternSyntaxError("Negation without a character", pos - 1, pattern)
        if pattern[pos] == ESCAPE:
            return self._read_escape(pattern, pos)
        return pattern[pos], pos + 1

    def _read_bare_negation(self, pattern: str, pos: int):
        # Outside a group "^X" negates the class X against itself
        if pos + 1 < len(pattern) and pattern[pos + 1] not in (ESCAPE, COUNT_OPEN):
            class_id = frozenset(pattern[pos + 1])
            return Token("group", pos, class_ids=class_id, excluded_class_ids=class_id), pos + 2
        excluded, end = self._read_negation(pattern, pos)
        return Token("group", pos, excluded=frozenset(excluded)), end

    def _read_group(self, pattern: str, pos: int):
        start = pos
        group = _Group()
        pos += 1

        while pos < len(pattern):
            char = pattern[pos]
            if char == GROUP_CLOSE:
                return group, pos + 1
            if char == ESCAPE:
                literal, pos = self._read_escape(pattern, pos)
                group.literals.add(literal)
            elif char == NEGATE:
                excluded, pos = self._read_negation(pattern, pos)
                group.excluded.add(excluded)
            else:
                group.class_ids.add(char)
                pos += 1

        raise PatternSyntaxError("Unterminated character group", start, pattern)

    def _read_count(self, pattern: str, pos: int):
        if pos >= len(pattern) or pattern[pos] != COUNT_OPEN:
            return None, pos

        end = pattern.find(COUNT_CLOSE, pos + 1)
        if end == -1:
            raise PatternSyntaxError("Unterminated repetition count", pos, pattern)

        digits = pattern[pos + 1:end]
        if not digits.isascii() or not digits.isdigit():
            raise PatternSyntaxError(f"Invalid repetition count {digits!r}", pos, pattern)

        if len(digits.lstrip("0")) > len(str(MAX_REPEAT)) or int(digits) > MAX_REPEAT:
            raise PatternSyntaxError(f"Repetition count exceeds {MAX_REPEAT}", pos, pattern)
        count = int(digits)

        return count, end + 1


def compile_pattern(
    pattern: str, table: Optional[CharacterClassTable] = None
) -> List[CharacterSet]:
    """Convenience function to compile a pattern against a table."""
    return PatternCompiler(table or CharacterClassTable.DEFAULT).compile(pattern)

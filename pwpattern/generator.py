"""
Pattern-based password generation.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from .charset import LOOKALIKES, CharacterClassTable
from .compiler import PatternCompiler
from .config import GeneratorOptions
from .exceptions import InvalidPatternError
from .random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords from a KeePass pattern."""

    LOOKALIKES = LOOKALIKES

    def __init__(self,
                 pattern: str,
                 remove_lookalikes: bool = False,
                 permute: bool = True,
                 table: CharacterClassTable = CharacterClassTable.DEFAULT,
                 random_source: Optional[RandomSource] = None):
        """
        Compile and validate a pattern.

        Args:
            pattern: KeePass pattern, e.g. ``"uullA{6}"``
            remove_lookalikes: Exclude visually ambiguous characters (O, 0, l, 1, I, |)
            permute: Shuffle the generated characters instead of keeping pattern order
            table: Character class table (DEFAULT includes high ANSI, ASCII does not)
            random_source: Source of randomness, defaults to SystemRandomSource

        Raises:
            InvalidPatternError: If the pattern is malformed or any position
                has no characters left to choose from
            InvalidCharacterClassID: If the pattern references an unknown class
        """
        self.pattern = pattern
        self.remove_lookalikes = remove_lookalikes
        self.permute = permute
        self.table = table
        self.random_source = random_source or SystemRandomSource()

        self._char_sets = self._build_char_sets()

    @classmethod
    def from_options(cls,
                     pattern: str,
                     options: Union[GeneratorOptions, Mapping[str, Any], None] = None,
                     random_source: Optional[RandomSource] = None) -> "PasswordGenerator":
        """Create a generator from a GeneratorOptions or an options dict."""
        if options is None:
            options = GeneratorOptions()
        elif not isinstance(options, GeneratorOptions):
            options = GeneratorOptions.from_mapping(options)

        return cls(
            pattern,
            remove_lookalikes=options.remove_lookalikes,
            permute=options.permute,
            table=options.table,
            random_source=random_source,
        )

    def _build_char_sets(self) -> List[FrozenSet[str]]:
        """Compile the pattern, drop lookalikes and reject empty positions."""
        char_sets = PatternCompiler(self.table).compile(self.pattern)

        # Repeated tokens share one set, so each distinct set is frozen once
        frozen: Dict[int, FrozenSet[str]] = {}
        result: List[FrozenSet[str]] = []
        for index, char_set in enumerate(char_sets):
            key = id(char_set)
            if key not in frozen:
                if self.remove_lookalikes:
                    char_set = char_set.without_lookalikes(self.LOOKALIKES)
                if not char_set:
                    raise InvalidPatternError(
                        f"Character set for position {index} is empty after removing lookalikes",
                        self.pattern,
                    )
                frozen[key] = frozenset(char_set)
            result.append(frozen[key])

        return result

    @property
    def char_sets(self) -> List[FrozenSet[str]]:
        """Character sets, one per generated character, in pattern order."""
        return list(self._char_sets)

    def __len__(self) -> int:
        return len(self._char_sets)

    def generate(self) -> str:
        """
        Generate a password.

        Returns:
            Generated password string
        """
        chars = [self.random_source.sample(sorted(char_set)) for char_set in self._char_sets]

        if self.permute:
            chars = self.random_source.shuffle(chars)

        logger.debug(f"Generated {len(chars)}-character password (permute={self.permute})")
        return "".join(chars)


def generate_password(pattern: str,
                      remove_lookalikes: bool = False,
                      permute: bool = True,
                      table: CharacterClassTable = CharacterClassTable.DEFAULT,
                      random_source: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password from a pattern.

    Args:
        pattern: KeePass pattern
        remove_lookalikes: Exclude visually ambiguous characters
        permute: Shuffle the generated characters
        table: Character class table
        random_source: Source of randomness

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(
        pattern,
        remove_lookalikes=remove_lookalikes,
        permute=permute,
        table=table,
        random_source=random_source,
    )

    return generator.generate()


def generate_passwords(pattern: str, count: int, **options: Any) -> List[str]:
    """Compile a pattern once and generate ``count`` passwords from it."""
    if count < 1:
        raise ValueError("count must be at least 1")

    generator = PasswordGenerator(pattern, **options)
    return [generator.generate() for _ in range(count)]

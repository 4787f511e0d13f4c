"""
Password generation from KeePass-style patterns.
"""

from .charset import LOOKALIKES, CharacterClassTable, CharacterSet
from .compiler import PatternCompiler, compile_pattern
from .config import GeneratorOptions
from .exceptions import (
    InvalidCharacterClassID,
    InvalidPatternError,
    PatternSyntaxError,
    PwPatternException,
)
from .generator import PasswordGenerator, generate_password, generate_passwords
from .random_source import RandomSource, SystemRandomSource

__all__ = [
    'LOOKALIKES',
    'CharacterClassTable',
    'CharacterSet',
    'PatternCompiler',
    'compile_pattern',
    'GeneratorOptions',
    'InvalidCharacterClassID',
    'InvalidPatternError',
    'PatternSyntaxError',
    'PwPatternException',
    'PasswordGenerator',
    'generate_password',
    'generate_passwords',
    'RandomSource',
    'SystemRandomSource',
]

"""Keysmith: random passwords from configurable character classes."""

from .errors import EmptySet, InvalidLength, InvalidOption, NoCharacterClassSelected, PasswordGenerationError
from .generator import (
    CHARACTER_CLASSES,
    DIGITS,
    LOWERCASE,
    MIN_LENGTH,
    SYMBOLS,
    UPPERCASE,
    GenerationOptions,
    PasswordGenerator,
    generate,
)
from .randomness import RandomSource, SystemRandomSource

__version__ = "0.1.0"

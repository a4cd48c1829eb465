"""
keysmith.generator
Password generator: one character from every selected class, filled to length
from the union of the classes, then shuffled.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import EmptySet, InvalidLength, InvalidOption, NoCharacterClassSelected
from .randomness import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# declaration order matters: it is the order classes are seeded in
CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
    ("numbers", DIGITS),
    ("symbols", SYMBOLS),
)

MIN_LENGTH = 4
DEFAULT_LENGTH = 12

# camelCase names accepted by GenerationOptions.from_mapping
_ALIASES = {
    "includeLowercase": "include_lowercase",
    "includeUppercase": "include_uppercase",
    "includeNumbers": "include_numbers",
    "includeSymbols": "include_symbols",
}


@dataclass(frozen=True)
class GenerationOptions:
    length: int = DEFAULT_LENGTH
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def _flags(self) -> Tuple[bool, ...]:
        return (self.include_lowercase, self.include_uppercase, self.include_numbers, self.include_symbols)

    def selected_names(self) -> List[str]:
        return [name for (name, _), on in zip(CHARACTER_CLASSES, self._flags()) if on]

    def selected_classes(self) -> List[str]:
        """Chars of every enabled class, in declaration order."""
        return [chars for (_, chars), on in zip(CHARACTER_CLASSES, self._flags()) if on]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationOptions":
        """
        Build options from a dict. Accepts snake_case field names and the
        camelCase spelling (includeLowercase, ...). Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            key = _ALIASES.get(key, key)
            if key not in known or value is None:
                continue
            _check_type(key, value)
            kwargs[key] = value
        return cls(**kwargs)

    def validate(self) -> None:
        """
        Raises:
            InvalidOption: a field has the wrong type.
            InvalidLength: length below MIN_LENGTH.
            NoCharacterClassSelected: every include flag is false.
        """
        for f in fields(self):
            _check_type(f.name, getattr(self, f.name))
        if self.length < MIN_LENGTH:
            raise InvalidLength(self.length, MIN_LENGTH)
        if not any(self._flags()):
            raise NoCharacterClassSelected()


def _check_type(name: str, value: Any) -> None:
    # bool is an int subclass, so it has to be ruled out for length
    if name == "length":
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidOption(name, value, "an integer")
    elif not isinstance(value, bool):
        raise InvalidOption(name, value, "true or false")


OptionsLike = Union[GenerationOptions, Mapping[str, Any], None]


class PasswordGenerator:
    """Generates passwords from the four fixed character classes."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or SystemRandomSource()

    def generate(self, options: OptionsLike = None, **overrides: Any) -> str:
        """
        Generate a random password.

        Options may be a GenerationOptions, a mapping or None (all defaults);
        keyword arguments replace single fields.

        Raises:
            InvalidOption: an option has the wrong type.
            InvalidLength: length below MIN_LENGTH.
            NoCharacterClassSelected: every include flag is false.
        """
        if options is None:
            opts = GenerationOptions()
        elif isinstance(options, GenerationOptions):
            opts = options
        else:
            opts = GenerationOptions.from_mapping(options)
        if overrides:
            opts = replace(opts, **overrides)
        opts.validate()

        classes = opts.selected_classes()
        logger.debug("generating password: length=%d classes=%s", opts.length, ",".join(opts.selected_names()))
        return self.compose(classes, opts.length)

    def compose(self, classes: Sequence[str], length: int) -> str:
        """
        Seed one char per class, fill from the union up to length and shuffle.
        Never truncates: with more classes than length the result is longer.
        """
        all_chars = "".join(classes)
        chars = [self.pick_random_char(c) for c in classes]
        while len(chars) < length:
            chars.append(self.pick_random_char(all_chars))
        return "".join(self.shuffle(chars))

    def pick_random_char(self, chars: Sequence[str]) -> str:
        if not chars:
            raise EmptySet()
        return chars[self.random_source.randbelow(len(chars))]

    def shuffle(self, sequence: Sequence[str]) -> List[str]:
        """Fisher-Yates on a copy; the input is left untouched."""
        out = list(sequence)
        for i in range(len(out) - 1, 0, -1):
            j = self.random_source.randbelow(i + 1)
            out[i], out[j] = out[j], out[i]
        return out


_default_generator = PasswordGenerator()


def generate(
    length: int = DEFAULT_LENGTH,
    include_lowercase: bool = True,
    include_uppercase: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = True,
    random_source: Optional[RandomSource] = None,
) -> str:
    """
    Generate a password without managing a PasswordGenerator instance.
    """
    gen = PasswordGenerator(random_source) if random_source else _default_generator
    return gen.generate(
        GenerationOptions(
            length=length,
            include_lowercase=include_lowercase,
            include_uppercase=include_uppercase,
            include_numbers=include_numbers,
            include_symbols=include_symbols,
        )
    )

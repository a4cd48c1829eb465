"""
keysmith.errors
Exceptions raised by the password generator.
"""


class PasswordGenerationError(ValueError):
    """Base class for every generator failure."""

    kind = "PasswordGenerationError"


class InvalidLength(PasswordGenerationError):
    kind = "InvalidLength"

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Password length must be at least {minimum} characters (got {length})")


class NoCharacterClassSelected(PasswordGenerationError):
    kind = "NoCharacterClassSelected"

    def __init__(self):
        super().__init__("At least one character set must be selected")


class EmptySet(PasswordGenerationError):
    kind = "EmptySet"

    def __init__(self):
        super().__init__("Cannot pick a character from an empty set")


class InvalidOption(PasswordGenerationError):
    kind = "InvalidOption"

    def __init__(self, name: str, value, expected: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {expected} (got {value!r})")

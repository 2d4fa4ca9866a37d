from __future__ import annotations

import enum
import string

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from ..settings import MAX_LENGTH, MIN_LENGTH


class Alphabet(enum.Enum):
    """A script whose letters may appear in a password."""

    LATIN = (
        'abcdefghijklmnopqrstuvwxyz',
        'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    )
    CYRILLIC = (
        'абвгдеёжзийклмнопрстуфхцчшщъыьэюя',
        'АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ',
    )

    def __init__(self, lower: str, upper: str) -> None:
        self.lower = lower
        self.upper = upper

    @classmethod
    def ordered(cls, alphabets: Iterable[Alphabet]) -> list[Alphabet]:
        """Return the given alphabets in declaration order."""
        selected = set(alphabets)
        return [alphabet for alphabet in cls if alphabet in selected]


@dataclass(frozen=True)
class PasswordConfig:
    """
    Composition policy for a generated password.

    Build instances with PasswordConfig.of, which validates eagerly.
    Direct construction skips validation; PasswordGenerator validates
    again before using a config.
    """

    length: int
    alphabets: frozenset[Alphabet]
    upper: bool
    lower: bool
    digits: bool
    special: bool
    required_digits: str = ''

    @classmethod
    def of(
        cls,
        length: int,
        alphabets: Optional[Iterable[Alphabet]],
        upper: bool,
        lower: bool,
        digits: bool,
        special: bool,
        required_digits: Optional[str] = '',
    ) -> PasswordConfig:
        """
        Create a validated config.

        Args:
            length: Exact number of characters in the password.
            alphabets: Scripts to draw letters from. None means no letters.
            upper: Allow uppercase letters.
            lower: Allow lowercase letters.
            digits: Allow ASCII digits.
            special: Allow special characters.
            required_digits: Digits that must each appear at least once.
                Surrounding whitespace is ignored.

        Returns:
            The config, already validated.

        Raises:
            ValueError: If the values do not describe a usable policy.
        """
        config = cls(
            length=length,
            alphabets=frozenset(alphabets or ()),
            upper=upper,
            lower=lower,
            digits=digits,
            special=special,
            required_digits=(required_digits or '').strip(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check that the config is consistent.

        Raises:
            ValueError: On the first rule the config violates.
        """
        if self.length < MIN_LENGTH:
            msg = f'Length must be >= {MIN_LENGTH}'
            raise ValueError(msg)
        if self.length > MAX_LENGTH:
            msg = f'Length must be <= {MAX_LENGTH:_}'
            raise ValueError(msg)

        if self.alphabets is None:
            msg = 'alphabets must not be None'
            raise ValueError(msg)

        if self.required_digits and not all(
            ch in string.digits for ch in self.required_digits
        ):
            msg = 'required_digits must contain only digits 0-9'
            raise ValueError(msg)
        if self.required_digits and not self.digits:
            msg = 'required_digits is set but digits are disabled'
            raise ValueError(msg)

        any_letters = bool(self.alphabets) and (self.upper or self.lower)
        any_other = self.digits or self.special

        if not any_letters and not any_other:
            msg = 'No character sets selected (choose letters and/or digits/special)'
            raise ValueError(msg)

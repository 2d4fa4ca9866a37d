from __future__ import annotations

import random
import string

from dataclasses import dataclass, field
from typing import Final, NamedTuple, Protocol

from .config import Alphabet, PasswordConfig

DIGITS: Final[str] = string.digits
SPECIALS: Final[str] = '!@#$%^&*()-_=+[]{};:,.?/\\|'


class RandomSource(Protocol):
    """Anything that returns a uniform integer in [0, n)."""

    def randrange(self, stop: int) -> int: ...


class Pools(NamedTuple):
    lower_letters: str
    upper_letters: str
    all_chars: str


@dataclass
class PasswordGenerator:
    """
    Generate passwords that satisfy a PasswordConfig.

    Mandatory characters are placed first, the rest of the password is
    filled from the full pool, and the whole buffer is then shuffled so
    the mandatory characters end up at uniformly random positions.
    """

    rng: RandomSource = field(default_factory=random.SystemRandom)

    def generate(self, config: PasswordConfig) -> str:
        """
        Return a new password for the given config.

        Raises:
            ValueError: If the config is invalid or its mandatory
                characters do not fit into config.length.
        """
        config.validate()

        pools = self._build_pools(config)
        mandatory = self._build_mandatory(config, pools)

        if len(mandatory) > config.length:
            msg = f'Too many mandatory constraints for length={config.length}'
            raise ValueError(msg)

        result = [''] * config.length
        result[:len(mandatory)] = mandatory
        for i in range(len(mandatory), config.length):
            result[i] = self._random_char(pools.all_chars)

        self._shuffle(result)
        return ''.join(result)

    def _build_pools(self, config: PasswordConfig) -> Pools:
        alphabets = Alphabet.ordered(config.alphabets)
        lower_letters = ''.join(a.lower for a in alphabets)
        upper_letters = ''.join(a.upper for a in alphabets)

        characters = ''
        if config.lower:
            characters += lower_letters
        if config.upper:
            characters += upper_letters
        if config.digits:
            characters += DIGITS
        if config.special:
            characters += SPECIALS

        if not characters:
            msg = 'No allowed characters after applying config'
            raise ValueError(msg)

        return Pools(lower_letters, upper_letters, characters)

    def _build_mandatory(self, config: PasswordConfig, pools: Pools) -> list[str]:
        mandatory = list(config.required_digits)

        if config.digits and not any(ch in DIGITS for ch in mandatory):
            mandatory.append(self._random_char(DIGITS))

        if config.special:
            mandatory.append(self._random_char(SPECIALS))

        if config.lower and pools.lower_letters:
            mandatory.append(self._random_char(pools.lower_letters))
        if config.upper and pools.upper_letters:
            mandatory.append(self._random_char(pools.upper_letters))

        # One letter per alphabet, on top of the case picks above.
        if config.lower or config.upper:
            for alphabet in Alphabet.ordered(config.alphabets):
                local = ''
                if config.lower:
                    local += alphabet.lower
                if config.upper:
                    local += alphabet.upper
                if local:
                    mandatory.append(self._random_char(local))

        return mandatory

    def _shuffle(self, chars: list[str]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    def _random_char(self, pool: str) -> str:
        return pool[self.rng.randrange(len(pool))]

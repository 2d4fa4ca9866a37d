from __future__ import annotations

import enum
import time

from collections.abc import Iterable

from .core.config import Alphabet, PasswordConfig
from .core.password_generator import PasswordGenerator
from .settings import BENCHMARK_LENGTHS, BENCHMARK_REPEATS, BENCHMARK_WARMUPS


class Profile(enum.Enum):
    """Complexity levels used by the benchmark."""

    SIMPLE = 'latin lowercase'
    MEDIUM = 'latin both cases + digits'
    HARD = 'latin + cyrillic, both cases, digits, specials, required digits'

    def config(self, length: int) -> PasswordConfig:
        """Build the config for this level at the given length."""
        if self is Profile.SIMPLE:
            return PasswordConfig.of(
                length, {Alphabet.LATIN}, False, True, False, False, '',
            )
        if self is Profile.MEDIUM:
            return PasswordConfig.of(
                length, {Alphabet.LATIN}, True, True, True, False, '',
            )
        return PasswordConfig.of(
            length,
            {Alphabet.LATIN, Alphabet.CYRILLIC},
            True,
            True,
            True,
            True,
            '13579',
        )


def measure_avg(
    generator: PasswordGenerator,
    config: PasswordConfig,
    repeats: int,
) -> float:
    """Return the average wall-clock time of one generate call in ms."""
    total = 0.0
    for _ in range(repeats):
        start = time.perf_counter()
        generator.generate(config)
        total += (time.perf_counter() - start) * 1000.0
    return total / repeats


def run(
    generator: PasswordGenerator,
    lengths: Iterable[int] = BENCHMARK_LENGTHS,
    profiles: Iterable[Profile] = tuple(Profile),
    warmups: int = BENCHMARK_WARMUPS,
    repeats: int = BENCHMARK_REPEATS,
) -> str:
    """
    Time the generator for every profile and length.

    Args:
        generator: Generator under test.
        lengths: Password lengths to measure.
        profiles: Complexity levels to measure.
        warmups: Untimed calls made before each measurement.
        repeats: Timed calls averaged per row.

    Returns:
        A text table with one row per profile and length.
    """
    lengths = tuple(lengths)
    lines = [
        f'{"LEVEL":<7} | {"LENGTH":<9} | {"AVG(ms)":<10}',
        '-' * 34,
    ]

    for profile in profiles:
        for length in lengths:
            config = profile.config(length)
            for _ in range(warmups):
                generator.generate(config)
            avg = measure_avg(generator, config, repeats)
            lines.append(f'{profile.name:<7} | {length:<9d} | {avg:<10.3f}')

    return '\n'.join(lines) + '\n'

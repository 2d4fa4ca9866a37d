from __future__ import annotations

import os

from typing import Final

MIN_LENGTH: Final[int] = 1
MAX_LENGTH: Final[int] = 1_000_000
DEFAULT_LENGTH: Final[int] = 16

# Longer passwords are cut to this many characters on the console.
PREVIEW_LIMIT: Final[int] = 2000

BENCHMARK_LENGTHS: Final[tuple[int, ...]] = (10_000, 100_000, 500_000, 1_000_000)
BENCHMARK_WARMUPS: Final[int] = 1
BENCHMARK_REPEATS: Final[int] = 3

LOG_FORMAT: Final[str] = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVEL: str = os.getenv('PASSGEN_LOG_LEVEL', 'WARNING').upper()

"""Settings read from THREADMATCH_* environment variables.

  THREADMATCH_ALGORITHM   default distance algorithm (ciede2000)
  THREADMATCH_CATALOG     extra catalog JSON files, os.pathsep-separated
  THREADMATCH_SEED        integer seed for palette reduction (unset = random)
  THREADMATCH_LOG_LEVEL   logging level name (WARNING)
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from threadmatch.core.types import DEFAULT_ALGORITHM, Algorithm


@dataclass
class Settings:
    algorithm: Algorithm = DEFAULT_ALGORITHM
    catalogs: list[str] = field(default_factory=list)
    seed: int | None = None
    log_level: int = logging.WARNING


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment. Invalid values raise ValueError."""
    env = os.environ if environ is None else environ
    settings = Settings()

    algorithm = env.get('THREADMATCH_ALGORITHM')
    if algorithm:
        try:
            settings.algorithm = Algorithm.parse(algorithm)
        except ValueError as e:
            raise ValueError(f'THREADMATCH_ALGORITHM: {e}') from None

    catalogs = env.get('THREADMATCH_CATALOG')
    if catalogs:
        settings.catalogs = [p for p in catalogs.split(os.pathsep) if p]

    seed = env.get('THREADMATCH_SEED')
    if seed:
        try:
            settings.seed = int(seed)
        except ValueError:
            raise ValueError(f'THREADMATCH_SEED: expected an integer, got {seed!r}') from None

    level = env.get('THREADMATCH_LOG_LEVEL')
    if level:
        value = logging.getLevelName(level.strip().upper())
        if not isinstance(value, int):
            raise ValueError(f'THREADMATCH_LOG_LEVEL: unknown level {level!r}')
        settings.log_level = value

    return settings

"""
strongpass.generator
Secure password generator built on strongpass.rng.
"""

import logging
from typing import List, Optional

from .charsets import pool_for
from .config import GenerationConfig, MIN_UI_LENGTH, MAX_UI_LENGTH
from .exceptions import InvalidConfiguration
from .rng import RandomSource, secure_choice, secure_shuffle

logger = logging.getLogger(__name__)


def generate(config: Optional[GenerationConfig] = None, source: Optional[RandomSource] = None) -> str:
    """
    Generate a password with at least one character from every enabled class.

    Returns "" when no class is enabled. A length below the number of enabled
    classes (including zero or negative) still yields one character per class.
    """
    config = config or GenerationConfig()

    pool = ""
    password_chars: List[str] = []
    for cls in config.enabled_classes():
        chars = pool_for(cls)
        pool += chars
        password_chars.append(secure_choice(chars, source))

    if not pool:
        logger.debug("No character class enabled; returning empty password")
        return ""

    remaining = max(0, config.length - len(password_chars))
    for _ in range(remaining):
        password_chars.append(secure_choice(pool, source))

    return "".join(secure_shuffle(password_chars, source))


def generate_many(
    config: Optional[GenerationConfig] = None,
    count: int = 1,
    source: Optional[RandomSource] = None,
) -> List[str]:
    if count < 0:
        raise InvalidConfiguration("count must be >= 0")
    return [generate(config, source) for _ in range(count)]


def validate_config(
    config: GenerationConfig,
    min_length: Optional[int] = MIN_UI_LENGTH,
    max_length: Optional[int] = MAX_UI_LENGTH,
) -> GenerationConfig:
    """
    Boundary check for callers that take user input (CLI, API).
    generate() itself accepts any config. Pass None to skip a bound.
    """
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfiguration(f"length must be an integer, got {length!r}")
    if min_length is not None and length < min_length:
        raise InvalidConfiguration(f"length must be >= {min_length}")
    if max_length is not None and length > max_length:
        raise InvalidConfiguration(f"length must be <= {max_length}")
    if length < 1:
        raise InvalidConfiguration("length must be > 0")
    if not config.has_any_class():
        raise InvalidConfiguration("At least one character set must be enabled")
    return config


def clamp_length(value: int, min_length: int = MIN_UI_LENGTH, max_length: int = MAX_UI_LENGTH) -> int:
    return min(max_length, max(min_length, value))

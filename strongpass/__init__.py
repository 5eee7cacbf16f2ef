"""
strongpass
Cryptographically seeded password generator and strength scorer.
"""

from .charsets import CharacterClass, POOLS
from .config import GenerationConfig
from .exceptions import StrongPassError, InvalidConfiguration, ConfigFileError
from .generator import generate, generate_many, validate_config, clamp_length
from .score import score, StrengthResult

__version__ = "1.0.0"

__all__ = [
    "CharacterClass",
    "POOLS",
    "GenerationConfig",
    "StrongPassError",
    "InvalidConfiguration",
    "ConfigFileError",
    "generate",
    "generate_many",
    "validate_config",
    "clamp_length",
    "score",
    "StrengthResult",
]

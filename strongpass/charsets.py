"""
strongpass.charsets
The four fixed character classes shared by the generator and the scorer.
"""

import string
from enum import Enum
from typing import Dict, Tuple


SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class CharacterClass(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digits"
    SYMBOL = "symbols"


POOLS: Dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: string.ascii_uppercase,
    CharacterClass.LOWERCASE: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: SYMBOLS,
}

# canonical order for pool construction and required characters
CANONICAL_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)

UPPERCASE_SET = frozenset(POOLS[CharacterClass.UPPERCASE])
LOWERCASE_SET = frozenset(POOLS[CharacterClass.LOWERCASE])
DIGIT_SET = frozenset(POOLS[CharacterClass.DIGIT])
ALNUM_SET = UPPERCASE_SET | LOWERCASE_SET | DIGIT_SET


def pool_for(cls: CharacterClass) -> str:
    return POOLS[cls]

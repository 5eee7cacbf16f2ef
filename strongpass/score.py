from dataclasses import dataclass, asdict
from typing import Dict, Union

from .charsets import ALNUM_SET, DIGIT_SET, LOWERCASE_SET, UPPERCASE_SET

NONE_COLOR = "#9ca3af"   # gray
WEAK_COLOR = "#dc2626"   # red
MEDIUM_COLOR = "#ca8a04"  # amber
STRONG_COLOR = "#16a34a"  # green

# (minimum length, points)
LENGTH_BUCKETS = ((8, 15), (12, 15), (16, 10), (24, 10))
LOWERCASE_POINTS = 15
UPPERCASE_POINTS = 15
DIGIT_POINTS = 10
SYMBOL_POINTS = 10

STRONG_THRESHOLD = 75
MEDIUM_THRESHOLD = 50


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    color: str

    def as_dict(self) -> Dict[str, Union[int, str]]:
        return asdict(self)


NONE_RESULT = StrengthResult(0, "None", NONE_COLOR)


def score(password: str) -> StrengthResult:
    """
    Score a password from 0 to 100 and label it None / Weak / Medium / Strong.
    Every bucket is awarded independently; all eight together give 100.
    """
    if not password:
        return NONE_RESULT

    points = 0

    # --- Length ---
    length = len(password)
    for minimum, value in LENGTH_BUCKETS:
        if length >= minimum:
            points += value

    # --- Character variety ---
    chars = set(password)
    if chars & LOWERCASE_SET:
        points += LOWERCASE_POINTS
    if chars & UPPERCASE_SET:
        points += UPPERCASE_POINTS
    if chars & DIGIT_SET:
        points += DIGIT_POINTS
    if chars - ALNUM_SET:  # anything outside [A-Za-z0-9]
        points += SYMBOL_POINTS

    # --- Strength label ---
    if points >= STRONG_THRESHOLD:
        return StrengthResult(points, "Strong", STRONG_COLOR)
    if points >= MEDIUM_THRESHOLD:
        return StrengthResult(points, "Medium", MEDIUM_COLOR)
    return StrengthResult(points, "Weak", WEAK_COLOR)


if __name__ == "__main__":
    # For quick testing
    pwd = input("Enter password to test: ")
    result = score(pwd)
    print(f"Password Strength: {result.label} (Score: {result.score}/100)")

"""PassGen -- password generation and strength checking.

Core functions for generating passwords that mix every character class and
for scoring a password against a fixed checklist of requirements.
"""

import secrets
from typing import Callable, NamedTuple, Sequence


# ── Character classes ──────────────────────────────────────────────────────


class CharacterClass(NamedTuple):
    name: str
    characters: str


UPPERCASE = CharacterClass("uppercase", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
LOWERCASE = CharacterClass("lowercase", "abcdefghijklmnopqrstuvwxyz")
DIGITS = CharacterClass("digits", "0123456789")
SYMBOLS = CharacterClass("symbols", "@#$%^&*()_+~|}{[]></-=")

# Seed order of generate_password.
CHARACTER_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, SYMBOLS)
ALPHABET = "".join(c.characters for c in CHARACTER_CLASSES)

# "!" is accepted as special but never generated.
SPECIAL_CHARACTERS = "!" + SYMBOLS.characters


# ── Password generation ────────────────────────────────────────────────────


class GenerationConfig(NamedTuple):
    """Target length and the classes every password must draw from.

    ``length`` should be at least ``len(classes)``; shorter lengths are
    accepted and yield one character per class.
    """

    length: int = 12
    classes: Sequence[CharacterClass] = CHARACTER_CLASSES


def generate_password(
    config: GenerationConfig = GenerationConfig(),
    *,
    randbelow: Callable[[int], int] = secrets.randbelow,
) -> str:
    """Generate a random password for *config*.

    One character is drawn from each class, in class order, then characters
    from the combined alphabet are appended until the target length is
    reached.  The result is never truncated, so a length below the number
    of classes still returns one character per class.

    *randbelow* must return a uniform integer in ``[0, n)``.  It defaults to
    :func:`secrets.randbelow`; swap in ``random.Random(seed).randrange`` for
    reproducible output.
    """
    chars = [c.characters[randbelow(len(c.characters))] for c in config.classes]

    alphabet = "".join(c.characters for c in config.classes)
    while len(chars) < config.length:
        chars.append(alphabet[randbelow(len(alphabet))])

    return "".join(chars)


# ── Strength evaluation ────────────────────────────────────────────────────


def _contains_any(characters: str) -> Callable[[str], bool]:
    allowed = frozenset(characters)
    return lambda password: any(ch in allowed for ch in password)


class Requirement(NamedTuple):
    description: str
    predicate: Callable[[str], bool]


REQUIREMENTS = (
    Requirement("At least 8 characters", lambda password: len(password) >= 8),
    Requirement("At least 1 number", _contains_any(DIGITS.characters)),
    Requirement("At least 1 lowercase letter", _contains_any(LOWERCASE.characters)),
    Requirement("At least 1 uppercase letter", _contains_any(UPPERCASE.characters)),
    Requirement("At least 1 special character", _contains_any(SPECIAL_CHARACTERS)),
)

MAX_SCORE = len(REQUIREMENTS)

# Indexed by score.
_LABELS = (
    "Enter a password",
    "Weak password",
    "Weak password",
    "Medium password",
    "Strong password",
    "Very strong password",
)
_TIERS = ("neutral", "critical", "critical", "caution", "good", "excellent")


def strength_label(score: int) -> str:
    """Return the human-readable label for a 0-5 *score*."""
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Score must be between 0 and {MAX_SCORE}, got {score}")
    return _LABELS[score]


def strength_tier(score: int) -> str:
    """Return the meter tier for a 0-5 *score*.

    One of ``neutral``, ``critical``, ``caution``, ``good`` or ``excellent``;
    the UI decides which colour each tier gets.
    """
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Score must be between 0 and {MAX_SCORE}, got {score}")
    return _TIERS[score]


class RequirementStatus(NamedTuple):
    description: str
    met: bool


class StrengthResult(NamedTuple):
    requirements: tuple[RequirementStatus, ...]
    score: int

    @property
    def label(self) -> str:
        return strength_label(self.score)

    @property
    def tier(self) -> str:
        return strength_tier(self.score)

    @property
    def percent(self) -> float:
        """Meter fill, 0-100."""
        return self.score / MAX_SCORE * 100


def evaluate_strength(password: str) -> StrengthResult:
    """Check *password* against every requirement, in order.

    The score is the number of requirements met.  Any string is valid input;
    the empty string scores 0.
    """
    statuses = tuple(
        RequirementStatus(req.description, req.predicate(password))
        for req in REQUIREMENTS
    )
    return StrengthResult(statuses, sum(s.met for s in statuses))

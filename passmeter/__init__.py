"""PassMeter -- password strength utilities.

Core functions for strength scoring, crack-time estimation, character
analysis and random password generation.  The session history lives in
:mod:`passmeter.history`.
"""

import logging
import math
import random
import string
from dataclasses import dataclass, field
from types import MappingProxyType

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
GUESSES_PER_SECOND = 1_000_000_000
DEFAULT_LENGTH = 12

SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

REQUIREMENT_KEYS = ("length", "uppercase", "lowercase", "numbers", "special")


class InvalidConfiguration(ValueError):
    """Raised when a generator configuration cannot produce a password."""


# ── Level table ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Palette:
    bg: str
    border: str
    text: str


@dataclass(frozen=True)
class Level:
    label: str
    icon: str
    tip: str
    color: Palette


LEVELS = {
    0: Level(
        "None", "\U0001f513",
        "Start typing to create a password.",
        Palette("rgba(107, 114, 128, 0.2)", "#6b7280", "#d1d5db"),
    ),
    1: Level(
        "Very Weak", "\U0001f513",
        "Add more variety: mix uppercase, lowercase, numbers, and symbols.",
        Palette("rgba(239, 68, 68, 0.2)", "#ef4444", "#fca5a5"),
    ),
    2: Level(
        "Weak", "\u26a0\ufe0f",
        "Make it stronger: add special characters and increase length.",
        Palette("rgba(249, 115, 22, 0.2)", "#f97316", "#fdba74"),
    ),
    3: Level(
        "Fair", "\U0001f4dd",
        "Getting close! Add more special characters for maximum security.",
        Palette("rgba(234, 179, 8, 0.2)", "#eab308", "#fcd34d"),
    ),
    4: Level(
        "Good", "\u2713",
        "Almost there! Just need one more element for perfect strength.",
        Palette("rgba(132, 204, 22, 0.2)", "#84cc16", "#d4fc79"),
    ),
    5: Level(
        "Very Strong", "\U0001f512",
        "Your password is very strong! You're all set.",
        Palette("rgba(34, 197, 94, 0.2)", "#22c55e", "#86efac"),
    ),
}


def level_for(score: int) -> Level:
    """Return the display level for *score* (0-5)."""
    try:
        return LEVELS[score]
    except KeyError:
        raise ValueError(f"Score must be between 0 and 5, got {score!r}") from None


# ── Strength analysis ──────────────────────────────────────────────────────


def _has_upper(password: str) -> bool:
    return any(c in string.ascii_uppercase for c in password)


def _has_lower(password: str) -> bool:
    return any(c in string.ascii_lowercase for c in password)


def _has_digit(password: str) -> bool:
    return any(c in string.digits for c in password)


def _has_special(password: str) -> bool:
    return any(c in SPECIAL_CHARS for c in password)


@dataclass(frozen=True)
class StrengthResult:
    """Outcome of one :func:`evaluate` call.

    ``score`` is always the number of true values in ``requirements``;
    the remaining display fields are looked up from :data:`LEVELS`.
    ``requirements`` is a read-only view.
    """

    score: int
    requirements: MappingProxyType = field(hash=False)
    level: str
    tip: str
    icon: str
    color: Palette
    crack_time: str

    @property
    def percentage(self) -> float:
        return self.score / len(REQUIREMENT_KEYS) * 100


def check_requirements(password: str) -> dict[str, bool]:
    """Return the five strength requirements for *password*, in fixed order."""
    return {
        "length":    len(password) >= MIN_LENGTH,
        "uppercase": _has_upper(password),
        "lowercase": _has_lower(password),
        "numbers":   _has_digit(password),
        "special":   _has_special(password),
    }


def evaluate(password: str) -> StrengthResult:
    """Score *password* against the requirement set.

    Total over every string: the empty password scores 0 with every
    requirement unmet and an "Instant" crack time.
    """
    requirements = check_requirements(password)
    score = sum(requirements.values())
    level = level_for(score)
    logger.debug("Scored password of length %d: %d/5", len(password), score)

    return StrengthResult(
        score=score,
        requirements=MappingProxyType(requirements),
        level=level.label,
        tip=level.tip,
        icon=level.icon,
        color=level.color,
        crack_time=estimate_crack_time(password),
    )


def char_breakdown(password: str) -> dict[str, int]:
    """Count the characters of *password* falling in each character class.

    Characters outside the four classes (spaces, non-ASCII letters, and the
    punctuation not in :data:`SPECIAL_CHARS`) are not counted.
    """
    return {
        "uppercase": sum(c in string.ascii_uppercase for c in password),
        "lowercase": sum(c in string.ascii_lowercase for c in password),
        "numbers":   sum(c in string.digits for c in password),
        "symbols":   sum(c in SPECIAL_CHARS for c in password),
    }


# ── Crack-time estimation ──────────────────────────────────────────────────

_TIME_UNITS = [
    # (upper bound in seconds, unit length in seconds, unit name)
    (60, 1, "seconds"),
    (3600, 60, "minutes"),
    (86400, 3600, "hours"),
    (2592000, 86400, "days"),
    (31536000, 2592000, "months"),
]


def _charset_size(password: str) -> int:
    return sum([
        26 if _has_lower(password) else 0,
        26 if _has_upper(password) else 0,
        10 if _has_digit(password) else 0,
        32 if _has_special(password) else 0,
    ])


def estimate_crack_seconds(password: str) -> float:
    """Return the expected brute-force time for *password* in seconds.

    Only the character classes the password actually uses count towards the
    search space.  Half the space is searched on average, at
    :data:`GUESSES_PER_SECOND`.
    """
    if not password:
        return 0.0

    combinations = _charset_size(password) ** len(password)
    try:
        return combinations / (2 * GUESSES_PER_SECOND)
    except OverflowError:
        return math.inf


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_duration(seconds: float) -> str:
    """Map a duration in seconds to the coarse labels shown to users."""
    if seconds < 1:
        return "Instant"
    for bound, unit, name in _TIME_UNITS:
        if seconds < bound:
            return f"{_round_half_up(seconds / unit)} {name}"
    return "Centuries"


def estimate_crack_time(password: str) -> str:
    """Return a human-readable brute-force estimate for *password*."""
    return format_duration(estimate_crack_seconds(password))


# ── Password generation ────────────────────────────────────────────────────

# The generator draws symbols from all of string.punctuation, a superset of
# SPECIAL_CHARS: a password whose only symbols are "`" or "~" does not meet
# the "special" requirement.
CHARACTER_CLASSES = {
    "uppercase": string.ascii_uppercase,
    "lowercase": string.ascii_lowercase,
    "numbers":   string.digits,
    "symbols":   string.punctuation,
}

ALL_CLASSES = frozenset(CHARACTER_CLASSES)


@dataclass(frozen=True)
class GeneratorConfig:
    length: int = DEFAULT_LENGTH
    classes: frozenset = ALL_CLASSES

    def validate(self) -> None:
        if self.length < 0:
            raise InvalidConfiguration("Password length cannot be negative")
        unknown = set(self.classes) - ALL_CLASSES
        if unknown:
            raise InvalidConfiguration(
                f"Unknown character class(es): {', '.join(sorted(unknown))}"
            )
        if not self.classes:
            raise InvalidConfiguration("Select at least one character type")

    @property
    def alphabet(self) -> str:
        # Declaration order of CHARACTER_CLASSES fixes the alphabet order.
        return "".join(
            chars for name, chars in CHARACTER_CLASSES.items()
            if name in self.classes
        )


DEFAULT_CONFIG = GeneratorConfig()


class PasswordGenerator:
    """Draw passwords uniformly from the enabled character classes.

    *rng* is any object with a ``choice(seq)`` method.  It defaults to the
    :mod:`random` module, which is not suitable for secrets; pass
    ``random.SystemRandom()`` when the output must be unpredictable.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random

    def generate(self, length: int, classes) -> str:
        return self.generate_from(GeneratorConfig(length, frozenset(classes)))

    def generate_from(self, config: GeneratorConfig) -> str:
        config.validate()
        alphabet = config.alphabet
        logger.debug(
            "Generating %d characters from %s (%d symbols)",
            config.length, sorted(config.classes), len(alphabet),
        )
        return "".join(self.rng.choice(alphabet) for _ in range(config.length))


def generate_password(
    length: int = DEFAULT_LENGTH,
    classes=ALL_CLASSES,
    *,
    rng=None,
) -> str:
    """Generate a random password of *length* characters.

    Raises :class:`InvalidConfiguration` when *classes* is empty.
    """
    return PasswordGenerator(rng).generate(length, classes)

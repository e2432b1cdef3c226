"""Scoring and diagnostics for email subject lines."""

from __future__ import annotations

import logging
import math
import random
import re
from datetime import datetime, timezone

from .constants import (
    CAPS_ENTIRE_ISSUE,
    CAPS_PENALTY,
    CAPS_WORDS_ISSUE,
    IMPACT_LOW,
    IMPACT_MEDIUM,
    INVALID_INPUT_MESSAGE,
    LENGTH_IDEAL_MAX,
    LENGTH_LONG,
    LENGTH_SCORE_ACCEPTABLE,
    LENGTH_SCORE_IDEAL,
    LENGTH_SCORE_LONG,
    LENGTH_SCORE_SHORT,
    LENGTH_SHORT,
    MAX_WORDS,
    MIN_WORDS,
    OVERALL_BASE,
    OVERALL_LENGTH_WEIGHT,
    OVERALL_SPAM_WEIGHT,
    POWER_WORD_BONUS,
    POWER_WORD_EXCESS_PENALTY,
    POWER_WORD_SATURATION,
    POWER_WORDS,
    SCORE_MAX,
    SCORE_MIN,
    SPAM_CAPS_BONUS,
    SPAM_EXCLAMATION_BONUS,
    SPAM_TRIGGERS,
    SPAM_WEIGHT_DEFAULT,
    SPAM_WEIGHTS,
    SUGGESTED_POWER_WORDS,
    TOO_FEW_WORDS_ISSUE,
    TOO_LONG_ISSUE,
    TOO_SHORT_ISSUE,
    WORD_COUNT_PENALTY,
)
from .errors import InvalidInputError
from .models import AnalysisResult, Issue, PowerWord, SpamTrigger

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_CAPS_RUN_RE = re.compile(r"[A-Z]{3,}")
_EXCLAMATIONS_RE = re.compile(r"!{2,}")
_PUNCTUATION_RE = re.compile(r"[!?.]")


def get_spam_triggers() -> tuple[SpamTrigger, ...]:
    """Return the spam trigger table in table order."""
    return SPAM_TRIGGERS


def get_power_words() -> tuple[PowerWord, ...]:
    """Return the power word table in table order."""
    return POWER_WORDS


def _clamp(value: int) -> int:
    return min(SCORE_MAX, max(SCORE_MIN, value))


def tokenize(normalized: str) -> list[str]:
    """Split a lower-cased subject on whitespace runs.

    Leading or trailing whitespace produces empty tokens, which still count
    as words.
    """
    return _WHITESPACE_RE.split(normalized)


def find_spam_triggers(normalized: str) -> list[SpamTrigger]:
    """Return triggers whose phrase occurs anywhere in the subject."""
    return [t for t in SPAM_TRIGGERS if t.word.lower() in normalized]


def calculate_spam_score(found_triggers: list[SpamTrigger], subject_line: str) -> int:
    """Calculate a spam score between 0 and 100 (higher is worse).

    Capitalization and punctuation only add to the score when at least one
    trigger phrase was found.
    """
    if not found_triggers:
        return 0

    score = 0
    for trigger in found_triggers:
        score += SPAM_WEIGHTS.get(trigger.impact, SPAM_WEIGHT_DEFAULT)

    if _CAPS_RUN_RE.search(subject_line):
        score += SPAM_CAPS_BONUS

    if _EXCLAMATIONS_RE.search(subject_line):
        score += SPAM_EXCLAMATION_BONUS

    return _clamp(score)


def find_power_words(words: list[str]) -> list[PowerWord]:
    """Return power words that appear as a whole token."""
    tokens = set(words)
    return [pw for pw in POWER_WORDS if pw.word.lower() in tokens]


def calculate_length_score(length: int) -> int:
    if length < LENGTH_SHORT:
        return LENGTH_SCORE_SHORT
    if length <= LENGTH_IDEAL_MAX:
        return LENGTH_SCORE_IDEAL
    if length <= LENGTH_LONG:
        return LENGTH_SCORE_ACCEPTABLE
    return LENGTH_SCORE_LONG


def check_capitalization(subject_line: str) -> str | None:
    """Return a description of the capitalization problem, if any."""
    if _CAPS_RUN_RE.search(subject_line):
        return CAPS_WORDS_ISSUE
    if subject_line == subject_line.upper():
        return CAPS_ENTIRE_ISSUE
    return None


def calculate_overall_score(
    spam_score: int,
    length_score: int,
    power_words_count: int,
    has_caps_issue: bool,
    word_count: int,
) -> int:
    """Combine the individual factors into an effectiveness score (0-100)."""
    score = float(OVERALL_BASE)
    score -= spam_score * OVERALL_SPAM_WEIGHT
    score += length_score * OVERALL_LENGTH_WEIGHT
    score += power_words_count * POWER_WORD_BONUS

    # Past saturation each extra word claws back part of its bonus
    if power_words_count > POWER_WORD_SATURATION:
        score -= (power_words_count - POWER_WORD_SATURATION) * POWER_WORD_EXCESS_PENALTY

    if has_caps_issue:
        score -= CAPS_PENALTY

    if word_count < MIN_WORDS or word_count > MAX_WORDS:
        score -= WORD_COUNT_PENALTY

    # Half-up rounding
    return _clamp(math.floor(score + 0.5))


def build_issues(
    found_triggers: list[SpamTrigger],
    caps_issue: str | None,
    length: int,
    word_count: int,
) -> list[Issue]:
    issues = [
        Issue(f'Contains spam trigger word "{t.word}"', t.impact) for t in found_triggers
    ]
    if caps_issue:
        issues.append(Issue(caps_issue, IMPACT_MEDIUM))
    if length > LENGTH_LONG:
        issues.append(Issue(TOO_LONG_ISSUE, IMPACT_MEDIUM))
    if length < LENGTH_SHORT:
        issues.append(Issue(TOO_SHORT_ISSUE, IMPACT_LOW))
    if word_count < MIN_WORDS:
        issues.append(Issue(TOO_FEW_WORDS_ISSUE, IMPACT_MEDIUM))
    return issues


def generate_suggestions(
    subject_line: str,
    length: int,
    word_count: int,
    found_triggers: list[SpamTrigger],
    found_power_words: list[PowerWord],
    caps_issue: str | None,
    rng: random.Random | None = None,
) -> list[str]:
    """Build the ordered list of improvement suggestions.

    The only non-deterministic text is the sample of power words offered
    when none were found; pass a seeded ``rng`` to fix it.
    """
    suggestions: list[str] = []

    if length < LENGTH_SHORT:
        suggestions.append(
            "Add more detail to increase subject line length (aim for 30-50 characters)"
        )
    elif length > LENGTH_LONG:
        suggestions.append(
            "Shorten your subject line to 50-70 characters for better deliverability"
        )

    if found_triggers:
        words = ", ".join(t.word for t in found_triggers)
        suggestions.append(f"Replace spam trigger words: {words}")

    if not found_power_words:
        if rng is None:
            rng = random.Random()
        sample = rng.sample(POWER_WORDS, SUGGESTED_POWER_WORDS)
        words = ", ".join(pw.word for pw in sample)
        suggestions.append(f"Consider adding power words like: {words}")
    elif len(found_power_words) > POWER_WORD_SATURATION:
        suggestions.append("Using too many power words can reduce effectiveness")

    if caps_issue:
        suggestions.append("Avoid using ALL CAPS as it can trigger spam filters")

    if "[" not in subject_line and "you" not in subject_line.lower():
        suggestions.append("Add personalization to increase engagement")

    if word_count < MIN_WORDS:
        suggestions.append("Use at least 3-5 words for better impact")
    elif word_count > MAX_WORDS:
        suggestions.append("Consider reducing word count for better readability")

    return suggestions


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def analyze(subject_line: str, rng: random.Random | None = None) -> AnalysisResult:
    """Analyze a subject line and return its scores, issues and suggestions.

    Raises InvalidInputError when ``subject_line`` is not a non-empty string.
    """
    if not isinstance(subject_line, str) or not subject_line:
        raise InvalidInputError(INVALID_INPUT_MESSAGE)

    normalized = subject_line.lower()
    words = tokenize(normalized)
    length = len(subject_line)
    word_count = len(words)

    found_triggers = find_spam_triggers(normalized)
    spam_score = calculate_spam_score(found_triggers, subject_line)
    found_power_words = find_power_words(words)
    length_score = calculate_length_score(length)
    caps_issue = check_capitalization(subject_line)

    overall_score = calculate_overall_score(
        spam_score=spam_score,
        length_score=length_score,
        power_words_count=len(found_power_words),
        has_caps_issue=caps_issue is not None,
        word_count=word_count,
    )

    logger.debug(
        "Analyzed %r: length=%d words=%d triggers=%d power_words=%d spam=%d overall=%d",
        subject_line,
        length,
        word_count,
        len(found_triggers),
        len(found_power_words),
        spam_score,
        overall_score,
    )

    return AnalysisResult(
        subject_line=subject_line,
        length=length,
        word_count=word_count,
        spam_score=spam_score,
        overall_score=overall_score,
        analyzed_at=_timestamp(),
        power_words=tuple(pw.word for pw in found_power_words),
        issues=tuple(build_issues(found_triggers, caps_issue, length, word_count)),
        suggestions=tuple(
            generate_suggestions(
                subject_line,
                length,
                word_count,
                found_triggers,
                found_power_words,
                caps_issue,
                rng=rng,
            )
        ),
        has_punctuation=bool(_PUNCTUATION_RE.search(subject_line)),
    )

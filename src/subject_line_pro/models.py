"""Data models for Subject Line Pro."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpamTrigger:
    """A phrase that raises the spam score when found in a subject."""

    word: str
    impact: str  # "low", "medium" or "high"
    reason: str

    def to_dict(self) -> dict:
        return {"word": self.word, "impact": self.impact, "reason": self.reason}


@dataclass(frozen=True)
class PowerWord:
    """A persuasive word that raises the overall score."""

    word: str
    category: str
    impact: str

    def to_dict(self) -> dict:
        return {"word": self.word, "category": self.category, "impact": self.impact}


@dataclass(frozen=True)
class Issue:
    """A single problem detected in a subject line."""

    text: str
    impact: str

    def to_dict(self) -> dict:
        return {"text": self.text, "impact": self.impact}


@dataclass(frozen=True)
class AnalysisResult:
    """Result of analyzing one subject line."""

    subject_line: str
    length: int
    word_count: int
    spam_score: int
    overall_score: int
    analyzed_at: str  # ISO 8601, UTC
    power_words: tuple[str, ...] = ()
    issues: tuple[Issue, ...] = ()
    suggestions: tuple[str, ...] = ()
    has_punctuation: bool = False

    def to_dict(self) -> dict:
        """Return a JSON-ready dict using the API field names."""
        return {
            "subjectLine": self.subject_line,
            "length": self.length,
            "wordCount": self.word_count,
            "spamScore": self.spam_score,
            "overallScore": self.overall_score,
            "powerWords": list(self.power_words),
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": list(self.suggestions),
            "hasPunctuation": self.has_punctuation,
            "analyzedAt": self.analyzed_at,
        }

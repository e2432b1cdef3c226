"""Tests for the data models."""

from subject_line_pro.models import AnalysisResult, Issue, PowerWord, SpamTrigger


def test_analysis_result_to_dict():
    result = AnalysisResult(
        subject_line="Hi",
        length=2,
        word_count=1,
        spam_score=0,
        overall_score=55,
        analyzed_at="2026-01-01T00:00:00.000Z",
        power_words=("secret",),
        issues=(Issue("Too few words", "medium"),),
        suggestions=("Use at least 3-5 words for better impact",),
        has_punctuation=False,
    )
    assert result.to_dict() == {
        "subjectLine": "Hi",
        "length": 2,
        "wordCount": 1,
        "spamScore": 0,
        "overallScore": 55,
        "powerWords": ["secret"],
        "issues": [{"text": "Too few words", "impact": "medium"}],
        "suggestions": ["Use at least 3-5 words for better impact"],
        "hasPunctuation": False,
        "analyzedAt": "2026-01-01T00:00:00.000Z",
    }


def test_table_entries_to_dict():
    assert SpamTrigger("cash", "high", "Financial spam trigger").to_dict() == {
        "word": "cash",
        "impact": "high",
        "reason": "Financial spam trigger",
    }
    assert PowerWord("secret", "exclusivity", "high").to_dict() == {
        "word": "secret",
        "category": "exclusivity",
        "impact": "high",
    }

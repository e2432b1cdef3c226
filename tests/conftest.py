"""Shared fixtures for tests."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def spammy_subject() -> str:
    return "FREE Exclusive Offer: LIMITED TIME ONLY!!!"


@pytest.fixture
def clean_subject() -> str:
    return "Quick question about your project"


@pytest.fixture
def long_subject() -> str:
    # 96 characters, 16 words, no triggers
    return (
        "one two three four five six seven eight nine ten "
        "eleven twelve thirteen fourteen fifteen sixteen"
    )


@pytest.fixture
def sample_subjects(spammy_subject: str, clean_subject: str, long_subject: str) -> list[str]:
    return [
        spammy_subject,
        clean_subject,
        long_subject,
        "guaranteed cash prize",
        "HI",
        " ",
        "!!!!!!!! $$$ FREE CASH WINNER URGENT guaranteed congratulations",
        "Hi [Name], discover the secret to a stunning premium garden",
        "Your weekly update",
    ]

"""Shared test fixtures for the Atbash suite."""
from __future__ import annotations

import pytest

import atbash_engine


@pytest.fixture(autouse=True)
def quiet_engine(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with verbose diagnostics off."""
    monkeypatch.setattr(atbash_engine, "VERBOSE", False)


@pytest.fixture()
def sample_text() -> str:
    """Mixed Latin, Hangul, digits and punctuation."""
    return "Hello, 세계! Atbash 123 가나다 ~"

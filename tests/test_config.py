from __future__ import annotations

import pytest

from src.relevance import ScorerConfig


def test_defaults():
    config = ScorerConfig()
    assert config.top_k == 100
    assert config.output_range == (14.0, 60.0)
    assert config.min_term_length == 3
    assert config.workers == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"top_k": 0},
        {"min_term_length": 0},
        {"workers": 0},
        {"output_range": (60, 14)},
        {"output_range": (-1, 10)},
        {"output_range": (1, 2, 3)},
        {"output_range": (float("nan"), 60)},
        {"output_range": (14, float("inf"))},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ScorerConfig(**kwargs)


def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WORDCLOUD_TOP_K", "25")
    monkeypatch.setenv("WORDCLOUD_MIN_SIZE", "10")
    monkeypatch.setenv("WORDCLOUD_MAX_SIZE", "40")
    monkeypatch.setenv("WORDCLOUD_MIN_TERM_LENGTH", "4")
    monkeypatch.setenv("WORDCLOUD_WORKERS", "2")
    config = ScorerConfig.from_env()
    assert config == ScorerConfig(top_k=25, output_range=(10, 40), min_term_length=4, workers=2)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "WORDCLOUD_TOP_K",
        "WORDCLOUD_MIN_SIZE",
        "WORDCLOUD_MAX_SIZE",
        "WORDCLOUD_MIN_TERM_LENGTH",
        "WORDCLOUD_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    assert ScorerConfig.from_env() == ScorerConfig()


def test_from_env_rejects_nan_size(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WORDCLOUD_MIN_SIZE", "nan")
    with pytest.raises(ValueError, match="finite"):
        ScorerConfig.from_env()

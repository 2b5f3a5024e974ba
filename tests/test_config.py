from __future__ import annotations

import pytest
from pydantic import ValidationError

from adapters.evaluator.ast_evaluator import evaluate
from config import Settings, get_settings
from contracts import INT_MAX, INT_MIN, BinOpNode, NumberNode


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for var in ("EXPRTREE_OVERFLOW", "EXPRTREE_MODULO_BY_ZERO", "EXPRTREE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()

    assert settings.overflow == "checked"
    assert settings.modulo_by_zero == "fault"
    assert settings.log_level == "WARNING"


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("EXPRTREE_OVERFLOW", "wrap")

    assert Settings().overflow == "wrap"
    ast = BinOpNode(op="+", left=NumberNode(value=INT_MAX), right=NumberNode(value=1))
    assert evaluate(ast) == INT_MIN


def test_settings_are_read_once(monkeypatch):
    monkeypatch.setenv("EXPRTREE_OVERFLOW", "wrap")
    first = get_settings()

    monkeypatch.setenv("EXPRTREE_OVERFLOW", "unbounded")

    assert get_settings() is first
    assert get_settings().overflow == "wrap"
    ast = BinOpNode(op="+", left=NumberNode(value=INT_MAX), right=NumberNode(value=1))
    assert evaluate(ast) == INT_MIN


def test_invalid_policy_is_rejected():
    with pytest.raises(ValidationError):
        Settings(overflow="saturate")

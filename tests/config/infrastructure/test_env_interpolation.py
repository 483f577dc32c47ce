"""Tests for ${ENV_VAR} interpolation."""

import pytest

from feedback_triage.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_reports_unset_vars_once_in_order(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("A_VAR", raising=False)
        monkeypatch.delenv("B_VAR", raising=False)
        data = {"x": "${A_VAR}", "y": ["${B_VAR}", "${A_VAR}"]}

        assert collect_missing_vars(data) == ["A_VAR", "B_VAR"]

    def test_vars_with_inline_default_are_not_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("A_VAR", raising=False)

        assert collect_missing_vars({"x": "${A_VAR:-fallback}"}) == []

    def test_set_vars_are_not_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("A_VAR", "1")

        assert collect_missing_vars("${A_VAR}") == []


class TestInterpolate:
    def test_substitutes_nested_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_DIR", "/var/lib")
        data = {"database": {"path": "${DB_DIR}/feedback.db"}, "n": 3}

        assert interpolate(data) == {
            "database": {"path": "/var/lib/feedback.db"},
            "n": 3,
        }

    def test_inline_default_used_when_unset(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DB_DIR", raising=False)

        assert interpolate("${DB_DIR:-./data}") == "./data"

    def test_environment_wins_over_inline_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DB_DIR", "/srv")

        assert interpolate("${DB_DIR:-./data}") == "/srv"

    def test_non_string_scalars_are_untouched(self) -> None:
        assert interpolate([1, 2.5, True, None]) == [1, 2.5, True, None]

"""Tests for the predict.py command line."""

import sys

import pytest

import predict

COUNTS = {'malaria prevention "Nigeria"': 1000, '"Nigeria"': 1_000_000}


def run(monkeypatch, *args) -> int:
    """Run main() with argv, returning the exit code (0 when it returns normally)."""
    monkeypatch.setattr(sys, "argv", ["predict.py", *args])
    try:
        predict.main()
    except SystemExit as e:
        return e.code
    return 0


class TestUsage:
    def test_no_arguments(self, monkeypatch, capsys):
        assert run(monkeypatch) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_too_many_arguments(self, monkeypatch, capsys):
        assert run(monkeypatch, "a", "b", "c") == 1
        assert "Usage:" in capsys.readouterr().out

    @pytest.mark.parametrize("values", [("10", "abc"), ("-5", "100"), ("10",)])
    def test_counts_rejects_bad_values(self, monkeypatch, capsys, values):
        assert run(monkeypatch, "--counts", *values) == 1
        assert "Usage:" in capsys.readouterr().out


class TestCounts:
    def test_report(self, monkeypatch, capsys):
        assert run(monkeypatch, "--counts", "1000", "1000000") == 0
        out = capsys.readouterr().out
        assert "1.0K topic+country works" in out
        assert "Predicted error rate: 46%" in out
        assert "Risk: High" in out
        assert ">90% (ceiling effect)" in out


class TestQuery:
    def test_success(self, monkeypatch, capsys, mock_openalex, works_transport):
        mock_openalex(works_transport(COUNTS))
        assert run(monkeypatch, "malaria prevention", "Nigeria") == 0
        assert "malaria prevention + Nigeria" in capsys.readouterr().out

    def test_lookup_failure(self, monkeypatch, capsys, mock_openalex, works_transport):
        mock_openalex(works_transport(COUNTS, status_code=500))
        assert run(monkeypatch, "malaria prevention", "Nigeria") == 1
        assert "Could not reach OpenAlex. Please try again." in capsys.readouterr().out

    def test_blank_topic(self, monkeypatch, capsys):
        assert run(monkeypatch, " ", "Nigeria") == 1
        assert "Topic must not be empty" in capsys.readouterr().out


class TestInfo:
    def test_coefficient_table(self, monkeypatch, capsys):
        assert run(monkeypatch, "--info") == 0
        out = capsys.readouterr().out
        assert "Based on 1,435 verified citations" in out
        assert "overall" in out and "unverified" in out
        assert "1.5650" in out and "-0.1220" in out

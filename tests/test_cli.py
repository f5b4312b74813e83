"""Tests for the content-intel CLI. Provider credentials are cleared, so every
command runs on the rule engine and the builtin generator."""

import json

import pytest
from typer.testing import CliRunner

from content_intel.cli import app

runner = CliRunner()

PROVIDER_ENV = ["GROQ_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "OLLAMA_URL"]


@pytest.fixture(autouse=True)
def no_providers(monkeypatch):
    for name in PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)


def test_analyze_json():
    result = runner.invoke(app, ["analyze", "Post", "I will hurt you", "--no-ai", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["severity"] == "critical"
    assert data["violations"][0]["type"] == "violence"
    assert data["sourcesUsed"]["ai"] is False


def test_analyze_clean_table():
    result = runner.invoke(app, ["analyze", "Post", "A calm post about gardens."])
    assert result.exit_code == 0
    assert "No violations found." in result.stdout


def test_paragraphs_short_title_exits_nonzero():
    result = runner.invoke(app, ["paragraphs", "AI"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["success"] is False


def test_paragraphs_builtin():
    result = runner.invoke(app, ["paragraphs", "Soil Health Basics", "--category", "science"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["provider"] == "builtin"
    assert len(data["paragraphs"]) == 3


def test_excerpt_from_stdin():
    result = runner.invoke(
        app, ["excerpt", "-", "--max-length", "20"], input="<p>Sentence one. Sentence two.</p>"
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["excerpt"] == "Sentence one."


def test_status_lists_builtin():
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "builtin" in result.stdout
    assert "Primary provider" in result.stdout

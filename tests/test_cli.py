"""Tests for the click command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from timi.cli.main import cli
from timi.cli.score_cmd import parse_answers


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    """Run commands from an empty directory with no user config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("TIMI_CONFIG", raising=False)
    monkeypatch.setattr("timi.config.loader.DEFAULT_CONFIG_PATHS", [])
    return tmp_path


class TestParseAnswers:
    def test_compact_letters(self):
        assert parse_answers("YNy") == [True, False, True]

    def test_digits_with_commas(self):
        assert parse_answers("1, 0,1") == [True, False, True]

    def test_korean_labels(self):
        assert parse_answers("예 아니오 네") == [True, False, True]

    def test_single_word(self):
        assert parse_answers("yes") == [True]

    def test_custom_labels(self):
        assert parse_answers("oui non", yes_label="oui", no_label="non") == [True, False]

    def test_bad_token(self):
        with pytest.raises(ValueError, match="Answer 2"):
            parse_answers("Y?N")


class TestScoreCommand:
    def test_all_yes(self, runner, no_config):
        result = runner.invoke(cli, ["score", "Y" * 15])
        assert result.exit_code == 0, result.output
        assert "Type: ENFP" in result.output

    def test_separate_tokens(self, runner, no_config):
        result = runner.invoke(cli, ["score", *(["0"] * 15)])
        assert result.exit_code == 0, result.output
        assert "Type: ISTJ" in result.output

    def test_legacy_mode(self, runner, no_config):
        result = runner.invoke(cli, ["score", "--mode", "legacy", "N" * 15])
        assert "Type: ISFJ" in result.output

    def test_json(self, runner, no_config):
        result = runner.invoke(cli, ["score", "--json", "NNNYYYYYNYNNNNN"])
        payload = json.loads(result.output)
        assert payload["type_code"] == "INTJ"

    def test_explain(self, runner, no_config):
        result = runner.invoke(cli, ["score", "--explain", "Y" * 15])
        assert "Axis totals" in result.output

    def test_wrong_length(self, runner, no_config):
        result = runner.invoke(cli, ["score", "YNY"])
        assert result.exit_code == 1
        assert "15개의 답변이 모두 필요합니다" in result.output

    def test_bad_token(self, runner, no_config):
        result = runner.invoke(cli, ["score", "Y?" * 8])
        assert result.exit_code == 2

    def test_mode_from_config(self, runner, no_config):
        cfg = no_config / "cfg.yaml"
        cfg.write_text("scoring:\n  mode: legacy\n")
        result = runner.invoke(cli, ["--config", str(cfg), "score", "N" * 15])
        assert "Type: ISFJ" in result.output


class TestOtherCommands:
    def test_progress(self, runner, no_config):
        result = runner.invoke(cli, ["progress", "5"])
        assert result.output.strip() == "33%"

    def test_progress_out_of_range(self, runner, no_config):
        result = runner.invoke(cli, ["progress", "16"])
        assert result.exit_code == 2

    def test_weights_table(self, runner, no_config):
        result = runner.invoke(cli, ["weights"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 15
        assert "I 0.7, J 0.3" in result.output

    def test_weights_unknown_question(self, runner, no_config):
        result = runner.invoke(cli, ["weights", "99"])
        assert "(none)" in result.output

    def test_config_validate(self, runner, no_config):
        result = runner.invoke(cli, ["config", "validate"])
        assert result.exit_code == 0
        assert "Scoring mode: balanced" in result.output

    def test_config_validate_bad_file(self, runner, no_config):
        cfg = no_config / "bad.yaml"
        cfg.write_text("scoring:\n  mode: nope\n")
        result = runner.invoke(cli, ["--config", str(cfg), "config", "validate"])
        assert result.exit_code == 1

    def test_config_show(self, runner, no_config):
        result = runner.invoke(cli, ["config", "show"])
        assert json.loads(result.output)["scoring"]["mode"] == "balanced"


class TestQuizCommand:
    def test_full_run(self, runner, no_config):
        replies = "\n".join(["y"] * 15) + "\n"
        result = runner.invoke(cli, ["quiz"], input=replies)
        assert result.exit_code == 0, result.output
        assert "Type: ENFP" in result.output
        assert "[15/15] 93%" in result.output

    def test_back_and_invalid_reply(self, runner, no_config):
        replies = ["n", "b", "maybe"] + ["n"] * 15
        result = runner.invoke(cli, ["quiz"], input="\n".join(replies) + "\n")
        assert result.exit_code == 0, result.output
        assert "Please answer" in result.output
        assert "Type: ISTJ" in result.output

    def test_quit(self, runner, no_config):
        result = runner.invoke(cli, ["quiz"], input="y\nq\n")
        assert "Quiz cancelled." in result.output
        assert "Type:" not in result.output

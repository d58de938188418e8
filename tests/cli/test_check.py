"""
Tests for cli.check

Covers checking a content directory and single items, strict mode,
JSON output and reports, configuration errors and exit codes.
"""

import json

import pytest
from click.testing import CliRunner

from cli import main
from cli.help_texts import ExitCodes


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run from an empty directory so no project configuration is picked up."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in (
        "CONTENT_PREFLIGHT_CONTENT_DIR",
        "CONTENT_PREFLIGHT_LOG_LEVEL",
        "CONTENT_PREFLIGHT_LOG_FILE",
        "CONTENT_PREFLIGHT_STRICT",
        "CONTENT_PREFLIGHT_REPORT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return workdir


@pytest.fixture
def article_without_emoji(content_dir, write_file):
    return write_file(content_dir / "articles" / "article-without-emoji.md", """
        ---
        title: "No emoji here"
        type: "idea"
        topics: ["writing"]
        ---
    """)


class TestCheckDirectory:
    def test_valid_content(self, runner, content_dir):
        result = runner.invoke(main, ["check", "--content-dir", str(content_dir)])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Checking 4 item(s)..." in result.output
        assert "✅ 4 passed" in result.output
        assert "failed" not in result.output

    def test_invalid_content(self, runner, content_dir, write_file):
        write_file(content_dir / "articles" / "untitled-article.md", """
            ---
            type: "tech"
            emoji: "📦"
            topics: ["python"]
            ---
        """)
        result = runner.invoke(main, ["check", "-d", str(content_dir)])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "[MissingTitle]" in result.output
        assert "❌ 1 failed" in result.output

    def test_warnings_pass_without_strict(self, runner, content_dir, article_without_emoji):
        result = runner.invoke(main, ["check", "-d", str(content_dir)])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "[MissingEmoji]" in result.output
        assert "⚠ 1 with warnings" in result.output

    def test_strict_fails_on_warnings(self, runner, content_dir, article_without_emoji):
        result = runner.invoke(main, ["check", "-d", str(content_dir), "--strict"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "❌ 1 failed" in result.output

    def test_content_dir_from_environment(self, runner, content_dir, monkeypatch):
        monkeypatch.setenv("CONTENT_PREFLIGHT_CONTENT_DIR", str(content_dir))
        result = runner.invoke(main, ["check"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Checking 4 item(s)..." in result.output

    def test_content_dir_from_project_config(self, runner, content_dir, isolated_cwd):
        (isolated_cwd / ".content-preflight.yaml").write_text(f"content_dir: {content_dir}\n")
        result = runner.invoke(main, ["check"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Checking 4 item(s)..." in result.output

    def test_empty_directory(self, runner):
        result = runner.invoke(main, ["check"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Checking 0 item(s)..." in result.output


class TestCheckFile:
    def test_inferred_article(self, runner, content_dir):
        path = content_dir / "articles" / "python-packaging-notes.md"
        result = runner.invoke(main, ["check", "--file", str(path)])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Checking 1 item(s)..." in result.output

    def test_inferred_book(self, runner, content_dir):
        path = content_dir / "books" / "practical-asyncio-book"
        result = runner.invoke(main, ["check", "-f", str(path)])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "book practical-asyncio-book" in result.output

    def test_kind_cannot_be_inferred(self, runner, tmp_path, write_file):
        path = write_file(tmp_path / "notes.md", "---\ntitle: x\n---\n")
        result = runner.invoke(main, ["check", "--file", str(path)])
        assert result.exit_code == ExitCodes.MISSING_REQUIRED_OPTION
        assert "--kind" in result.output

    def test_explicit_kind(self, runner, tmp_path, write_file):
        path = write_file(tmp_path / "7.md", "---\ntitle: Seven\n---\n")
        result = runner.invoke(main, ["check", "--file", str(path), "--kind", "chapter"])
        assert result.exit_code == ExitCodes.SUCCESS

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["check", "--file", str(tmp_path / "missing.md")])
        assert result.exit_code == 2

    def test_unloadable_file(self, runner, content_dir, write_file):
        path = write_file(content_dir / "articles" / "broken-front-matter.md", """
            ---
            title: [unclosed
            ---
        """)
        result = runner.invoke(main, ["check", "-f", str(path)])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "[ContentLoad]" in result.output


class TestCheckOutput:
    def test_json_format(self, runner, content_dir):
        result = runner.invoke(main, ["check", "-d", str(content_dir), "--format", "json"])
        assert result.exit_code == ExitCodes.SUCCESS
        data = json.loads(result.output)
        assert data["total"] == 4
        assert data["passed"] == 4
        assert data["failed"] == 0
        assert [r["kind"] for r in data["reports"]] == ["article", "book", "chapter", "chapter"]

    def test_report_file(self, runner, content_dir, tmp_path, article_without_emoji):
        report_path = tmp_path / "out" / "preflight.json"
        result = runner.invoke(main, [
            "check", "-d", str(content_dir), "--report", str(report_path),
        ])
        assert result.exit_code == ExitCodes.SUCCESS
        assert report_path.exists()
        data = json.loads(report_path.read_text(encoding="utf-8"))
        assert data["total"] == 5
        warned = [r for r in data["reports"] if r["summary"]["warnings"]]
        assert warned[0]["identifier"] == "article-without-emoji"
        assert warned[0]["findings"][0]["rule"] == "MissingEmoji"


class TestCheckConfiguration:
    def test_unknown_key_in_config(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("strictness: high\n")
        result = runner.invoke(main, ["check", "--config", str(path)])
        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Configuration Error" in result.output

    def test_invalid_environment_value(self, runner, monkeypatch):
        monkeypatch.setenv("CONTENT_PREFLIGHT_STRICT", "sometimes")
        result = runner.invoke(main, ["check"])
        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION

    def test_log_file(self, runner, content_dir, tmp_path):
        log_path = tmp_path / "logs" / "preflight.log"
        result = runner.invoke(main, [
            "check", "-d", str(content_dir), "--log-level", "DEBUG", "--log-file", str(log_path),
        ])
        assert result.exit_code == ExitCodes.SUCCESS
        assert log_path.exists()
        assert "Logging configured" in log_path.read_text(encoding="utf-8")


class TestMain:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "content-preflight" in result.output
        assert "1.0.0" in result.output

    def test_help_lists_check(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output

    def test_check_help_documents_environment(self, runner):
        result = runner.invoke(main, ["check", "--help"])
        assert result.exit_code == 0
        assert "CONTENT_PREFLIGHT_STRICT" in result.output

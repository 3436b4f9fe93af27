"""Tests for the Typer command-line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from inkwell.cli import app

runner = CliRunner()


def test_build_command(content_dir: Path, tmp_path: Path):
    out = tmp_path / "site"

    result = runner.invoke(
        app,
        ["build", "--content", str(content_dir), "--output", str(out), "--log-level", "WARNING"],
    )

    assert result.exit_code == 0, result.output
    assert "Site generated" in result.output
    assert (out / "blog" / "index.html").exists()


def test_build_command_with_drafts(content_dir: Path, tmp_path: Path):
    out = tmp_path / "site"

    result = runner.invoke(
        app,
        ["build", "--content", str(content_dir), "--output", str(out), "--drafts", "--log-level", "WARNING"],
    )

    assert result.exit_code == 0, result.output
    assert (out / "blog" / "b" / "index.html").exists()


def test_build_command_reports_broken_content(tmp_path: Path):
    result = runner.invoke(
        app,
        ["build", "--content", str(tmp_path / "missing"), "--output", str(tmp_path / "site")],
    )

    assert result.exit_code == 1
    assert "Build failed" in result.output


def test_check_command_counts_content(content_dir: Path):
    result = runner.invoke(app, ["check", "--content", str(content_dir)])

    assert result.exit_code == 0, result.output
    assert "collections=2, posts=3, drafts=1" in result.output

from __future__ import annotations

from typer.testing import CliRunner

from src.employee_directory.employee_directory.cli import app

runner = CliRunner()


def test_run_reads_commands_from_stdin():
    result = runner.invoke(
        app,
        ["run", "--no-banner"],
        input="Add Sally to Engineering\nAdd Amir to Sales\nList all\nquit\n",
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Added Sally to Engineering",
        "Added Amir to Sales",
        "Listing by departments:",
        "People in Engineering:",
        "Sally",
        "People in Sales:",
        "Amir",
        "Exiting",
    ]


def test_run_exits_cleanly_on_closed_input():
    result = runner.invoke(app, ["run", "--no-banner"], input="")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Exiting"]


def test_run_with_banner():
    result = runner.invoke(app, ["run", "--banner"], input="quit\n")

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Starting Directory Program"
    assert lines[-1] == "Exiting"


def test_run_from_script(tmp_path):
    script = tmp_path / "commands.txt"
    script.write_text("Add Omar to Engineering\nAdd Sally to Engineering\nList Engineering\n", encoding="utf-8")

    result = runner.invoke(app, ["run", "--no-banner", "--script", str(script)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Added Omar to Engineering",
        "Added Sally to Engineering",
        "People in Engineering:",
        "Omar",
        "Sally",
        "Exiting",
    ]


def test_run_rejects_missing_script(tmp_path):
    result = runner.invoke(app, ["run", "--script", str(tmp_path / "missing.txt")])

    assert result.exit_code != 0


def test_stats():
    result = runner.invoke(app, ["stats", "11", "7", "11", "7", "11"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "list of integers: [7, 7, 11, 11, 11]",
        "Median: 11.00",
        "Mode: 11 (occurs 3 times)",
    ]


def test_stats_accepts_negative_values():
    result = runner.invoke(app, ["stats", "-3", "5", "1"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "list of integers: [-3, 1, 5]",
        "Median: 1.00",
        "Mode: -3 (occurs 1 times)",
    ]


def test_stats_without_values_fails():
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 1


def test_pig_latin():
    result = runner.invoke(app, ["pig-latin", "first", "apple"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["pig latin first: irst-fay", "pig latin apple: pple-aay"]


def test_word_count():
    result = runner.invoke(app, ["word-count", "hello world wonderful world"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["hello: 1", "world: 2", "wonderful: 1"]


def test_run_script_with_undecodable_line_keeps_valid_commands(tmp_path):
    script = tmp_path / "commands.txt"
    script.write_bytes(b"Add Sally to Eng\n\xff\xfe\nList Eng\n")

    result = runner.invoke(app, ["run", "--no-banner", "--script", str(script)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Added Sally to Eng", "Invalid command.", "People in Eng:", "Sally", "Exiting"]


def test_run_stdin_with_undecodable_line_keeps_valid_commands():
    result = runner.invoke(app, ["run", "--no-banner"], input=b"Add Sally to Eng\n\xff\xfe\nList Eng\nquit\n")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Added Sally to Eng", "Invalid command.", "People in Eng:", "Sally", "Exiting"]

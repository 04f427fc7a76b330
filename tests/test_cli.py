"""Tests for the command line interface."""

import pytest
import questionary
from click.testing import CliRunner
from loguru import logger

from liftlog.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("LIFTLOG_DATA_DIR", str(tmp_path / "data"))
    yield CliRunner()
    # The CLI points loguru at the runner's captured stderr
    logger.remove()


class ScriptedQuestion:
    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


@pytest.fixture
def answers(monkeypatch):
    """Answer questionary prompts without a terminal.

    Returns a function setting the menu entry to pick and the confirm answer;
    it returns the list of prompt messages shown.
    """
    prompts = []

    def configure(select_index=0, confirm=True):
        def select(message, choices, **kwargs):
            prompts.append(message)
            return ScriptedQuestion(choices[select_index].value)

        def ask_confirm(message, **kwargs):
            prompts.append(message)
            return ScriptedQuestion(confirm)

        monkeypatch.setattr(questionary, "select", select)
        monkeypatch.setattr(questionary, "confirm", ask_confirm)
        return prompts

    return configure


@pytest.fixture
def initialized(runner):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


class TestInit:
    def test_init(self, runner):
        result = runner.invoke(main, ["init"])
        assert result.exit_code == 0
        assert "Database initialized" in result.output

    def test_commands_require_init(self, runner):
        result = runner.invoke(main, ["exercises", "list"])
        assert result.exit_code == 1
        assert "liftlog init" in result.output


class TestExerciseCommands:
    def test_list_by_muscle(self, initialized):
        result = initialized.invoke(main, ["exercises", "list", "--muscle", "calves"])
        assert result.exit_code == 0
        assert "Seated Calf Raise" in result.output
        assert "Total: 3 exercise(s)" in result.output

    def test_search_no_match(self, initialized):
        result = initialized.invoke(main, ["exercises", "search", "kettlebell"])
        assert result.exit_code == 0
        assert "No exercises match" in result.output


class TestImportCommand:
    """Tests for importing a Setgraph export from the command line."""

    def test_import_accepting_proposals(self, initialized, tmp_path, sample_csv):
        export = tmp_path / "setgraph.csv"
        export.write_text(sample_csv)

        result = initialized.invoke(main, ["import", "setgraph", str(export), "--yes"])

        assert result.exit_code == 0, result.output
        assert "Imported 2 workouts and 5 sets" in result.output
        assert "Created 1 new exercises" in result.output

        result = initialized.invoke(main, ["workouts", "list"])
        assert "2024-01-03 07:30" in result.output
        assert "2024-01-01 18:00" in result.output

    def test_interactive_create_new_exercise(self, initialized, tmp_path, sample_csv, answers):
        """Choosing the first menu entry creates a custom exercise."""
        export = tmp_path / "setgraph.csv"
        export.write_text(sample_csv)
        answers(select_index=0)

        result = initialized.invoke(main, ["import", "setgraph", str(export)])

        assert result.exit_code == 0, result.output
        assert "Created 1 new exercises" in result.output

        result = initialized.invoke(main, ["exercises", "search", "zottman"])
        assert "Zottman Curls" in result.output
        assert "custom" in result.output

    def test_interactive_pick_suggestion(self, initialized, tmp_path, sample_csv, answers):
        export = tmp_path / "setgraph.csv"
        export.write_text(sample_csv)
        prompts = answers(select_index=1)

        result = initialized.invoke(main, ["import", "setgraph", str(export)])

        assert result.exit_code == 0, result.output
        assert "Imported 2 workouts and 5 sets" in result.output
        assert "Created" not in result.output
        assert prompts == ["'Zottman Curls' has no match. Map it to:", "Import 5 sets?"]

        result = initialized.invoke(main, ["exercises", "search", "zottman"])
        assert "No exercises match" in result.output

    def test_interactive_cancel(self, initialized, tmp_path, sample_csv, answers):
        export = tmp_path / "setgraph.csv"
        export.write_text(sample_csv)
        answers(select_index=0, confirm=False)

        result = initialized.invoke(main, ["import", "setgraph", str(export)])

        assert result.exit_code == 0
        assert "Import cancelled" in result.output

        result = initialized.invoke(main, ["workouts", "list"])
        assert "No workouts logged yet" in result.output

    def test_invalid_export(self, initialized, tmp_path):
        export = tmp_path / "empty.csv"
        export.write_text("exerciseName,date,repetitions,weightLb,weightKg,note,labelName\n")

        result = initialized.invoke(main, ["import", "setgraph", str(export), "--yes"])

        assert result.exit_code == 1
        assert "No valid data rows found in CSV" in result.output


class TestHistoryCommands:
    def test_empty_history(self, initialized):
        result = initialized.invoke(main, ["workouts", "list"])
        assert result.exit_code == 0
        assert "No workouts logged yet" in result.output

    def test_show_missing(self, initialized):
        result = initialized.invoke(main, ["workouts", "show", "nope"])
        assert result.exit_code == 1

    def test_volume(self, initialized):
        result = initialized.invoke(main, ["stats", "volume", "--weeks", "2"])
        assert result.exit_code == 0
        assert "Score" in result.output

from pathlib import Path
import pytest
from anagram import config as CFG
from anagram.__main__ import run_menu
from anagram.engine import Engine


def _scripted(*answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return fake_input


def _engine() -> Engine:
    eng = Engine()
    eng.use_words(["cat", "act", "cats", "tac", "dog"], source="test.csv")
    return eng


@pytest.mark.e2e
def test_menu_runs_each_search(capsys):
    eng = _engine()
    rc = run_menu(eng, _scripted("1", "Ca Ts", "2", "3", "4", "5", "0", "Y"))
    out = capsys.readouterr().out
    assert rc == 0
    assert "You have entered: cats as your current word." in out
    assert "\ncat\nact\ncats\ntac\n" in out
    assert "The largest word found is: cats" in out
    assert "All 3-letter words found from the letters of 'cats':" in out
    assert "No 5-letter words found." in out
    assert "current: test.csv" in out
    assert "Time taken to complete the last function was:" in out


@pytest.mark.e2e
def test_menu_invalid_option_and_declined_quit(capsys):
    rc = run_menu(_engine(), _scripted("9", "0", "n", "0", "Yes"))
    out = capsys.readouterr().out
    assert rc == 0
    assert "Unfortunately, 9 is not a valid option, please try again." in out
    assert out.count("Are you sure (Y/N)?") == 2


@pytest.mark.e2e
def test_menu_reports_missing_dictionary(capsys):
    rc = run_menu(Engine(), _scripted("2", "3"))
    out = capsys.readouterr().out
    assert rc == 0  # EOF ends the loop
    assert out.count("Error: Dictionary not loaded.") == 2


@pytest.mark.e2e
def test_menu_selects_dictionary(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "Words_1K.csv").write_text("Stone\nNotes\nOnset\n", encoding="utf-8")
    monkeypatch.setattr(CFG, "DATA_ROOT", tmp_path)
    eng = Engine()
    run_menu(eng, _scripted("6", "7", "6", "3", "6", "2", "1", "tones", "5"))
    out = capsys.readouterr().out
    assert "Invalid choice. The dictionary remains unchanged." in out
    assert "Error: Could not open the file" in out
    assert "Loaded 3 words from" in out
    assert "\nstone\nnotes\nonset\n" in out
    assert eng.size == 3

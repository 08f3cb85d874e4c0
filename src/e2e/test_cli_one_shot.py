import json
from pathlib import Path
import pytest
from anagram.__main__ import main


def _seed(tmp: Path) -> str:
    p = tmp / "words.csv"
    p.write_text("cat\nact\ncats\ntac\ndog\n", encoding="utf-8")
    return str(p)


@pytest.mark.e2e
def test_one_shot_all_words(tmp_path: Path, capsys):
    rc = main(["--dict", _seed(tmp_path), "--q", "Cats"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Loaded 5 words" in out
    lines = out.splitlines()
    start = lines.index("Words found from the letters of 'cats':")
    assert lines[start + 1:start + 5] == ["cat", "act", "cats", "tac"]


@pytest.mark.e2e
def test_one_shot_json_longest(tmp_path: Path, capsys):
    rc = main(["--dict", _seed(tmp_path), "--q", "cats", "--mode", "longest", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert data["mode"] == "longest"
    assert data["words"] == ["cats"]


@pytest.mark.e2e
def test_one_shot_no_match_message(tmp_path: Path, capsys):
    rc = main(["--dict", _seed(tmp_path), "--q", "xyz", "--mode", "length", "-n", "3"])
    assert rc == 0
    assert "No 3-letter words found." in capsys.readouterr().out


@pytest.mark.e2e
def test_missing_dictionary_file(tmp_path: Path, capsys):
    rc = main(["--dict", str(tmp_path / "none.csv"), "--q", "cats"])
    assert rc == 1
    assert "Error: Could not open the file" in capsys.readouterr().out


def test_length_mode_requires_n(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--dict", _seed(tmp_path), "--q", "cats", "--mode", "length"])


@pytest.mark.e2e
def test_json_mode_reports_load_errors_as_json(tmp_path: Path, capsys):
    rc = main(["--dict", str(tmp_path / "none.csv"), "--q", "cats", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 1
    assert data["error"].startswith("Error: Could not open the file")


@pytest.mark.e2e
def test_json_mode_reports_empty_dictionary_as_json(tmp_path: Path, capsys):
    p = tmp_path / "blank.csv"
    p.write_text("\n\n", encoding="utf-8")
    rc = main(["--dict", str(p), "--q", "cats", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 1
    assert "Dictionary not loaded" in data["error"]

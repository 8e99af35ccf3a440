import importlib.util
import io
import json
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "parse_recipe_text.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("parse_recipe_text_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_file_to_json(script, tmp_path, capsys, spaghetti_text):
    recipe_file = tmp_path / "rezept.txt"
    recipe_file.write_text(spaghetti_text, encoding="utf-8")

    assert script.main([str(recipe_file)]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["title"] == "Spaghetti"
    assert payload["calories"] == 450
    assert payload["ingredients"][0] == {
        "id": "ingredient-1",
        "name": "Nudeln",
        "quantity": 200.0,
        "unit": "g",
    }
    assert "image" not in payload["steps"][0]


def test_parse_stdin_with_portions(script, monkeypatch, capsys, spaghetti_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(spaghetti_text))

    assert script.main(["--portions", "4"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["portions"] == 4
    assert [i["quantity"] for i in payload["ingredients"]] == [400.0, 4.0]


def test_invalid_portions(script, monkeypatch, spaghetti_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(spaghetti_text))

    assert script.main(["--portions", "0"]) == 2


def test_missing_file(script, tmp_path):
    assert script.main([str(tmp_path / "fehlt.txt")]) == 1

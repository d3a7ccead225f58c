"""Integration tests for the search, get, and import commands"""

import json

import pytest
from typer.testing import CliRunner

from docstore.cli.cli import app


SEED = """\
- id: DOC-1
  title: Alpha notes
  content: budget
  author: {id: AUTH-1, name: Ada}
  created: 2024-01-01T00:00:00Z
- id: DOC-2
  title: Beta notes
  content: forecast
  author: {id: AUTH-2, name: Grace}
  created: 2024-01-02T00:00:00Z
- id: DOC-3
  title: Alpha plan
  content: forecast
  author: {id: AUTH-1, name: Ada}
  created: 2024-01-03T00:00:00Z
"""

runner = CliRunner()


@pytest.fixture(name="seed")
def seed_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "seed.yaml"
    path.write_text(SEED)
    return str(path)


def _ids(output: str) -> list[str]:
    return [d["id"] for d in json.loads(output)]


def test_search_without_filters_lists_all(seed):
    result = runner.invoke(app, ["search", seed])
    assert result.exit_code == 0, result.output
    assert _ids(result.output) == ["DOC-1", "DOC-2", "DOC-3"]


def test_search_title_and_content(seed):
    result = runner.invoke(app, ["search", seed, "--title-prefix", "Alpha", "--contains", "forecast"])
    assert result.exit_code == 0, result.output
    assert _ids(result.output) == ["DOC-3"]


def test_search_repeated_options_are_alternatives(seed):
    result = runner.invoke(app, ["search", seed, "--title-prefix", "Beta", "--title-prefix", "Alpha p"])
    assert _ids(result.output) == ["DOC-2", "DOC-3"]


def test_search_by_author_and_range(seed):
    result = runner.invoke(app, [
        "search", seed, "--author", "AUTH-1",
        "--from", "2024-01-01T00:00:00", "--to", "2024-01-02T00:00:00",
    ])
    assert result.exit_code == 0, result.output
    assert _ids(result.output) == ["DOC-1"]


def test_get_found(seed):
    result = runner.invoke(app, ["get", seed, "DOC-2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["title"] == "Beta notes"


def test_get_missing(seed):
    result = runner.invoke(app, ["get", seed, "DOC-99"])
    assert result.exit_code == 1
    assert "No document with id 'DOC-99'." in result.output


def test_import_reassigns_ids_and_dedupes_authors(seed):
    result = runner.invoke(app, ["import", seed])
    assert result.exit_code == 0, result.output
    assert "  DOC-1: Alpha notes" in result.output
    assert "Imported 3 document(s), 2 author(s)." in result.output


def test_missing_seed_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["search", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Seed file not found" in result.output


def test_config_prefix_applies_to_import(seed, tmp_path):
    (tmp_path / "config.yaml").write_text("doc_id_prefix: NOTE\n")
    result = runner.invoke(app, ["import", seed])
    assert result.exit_code == 0, result.output
    assert "  NOTE-1: Alpha notes" in result.output


def test_log_level_option(seed):
    result = runner.invoke(app, ["--log-level", "debug", "search", seed])
    assert result.exit_code == 0, result.output


def test_config_option_selects_settings_file(seed, tmp_path):
    (tmp_path / "custom.yaml").write_text("doc_id_prefix: REC\n")
    result = runner.invoke(app, ["--config", str(tmp_path / "custom.yaml"), "import", seed])
    assert result.exit_code == 0, result.output
    assert "  REC-1: Alpha notes" in result.output


def test_bad_config_fails_cleanly(seed, tmp_path):
    (tmp_path / "config.yaml").write_text("title_length: 0\n")
    result = runner.invoke(app, ["search", seed])
    assert result.exit_code == 1
    assert "Error:" in result.output

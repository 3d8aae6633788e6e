"""Tests for loading the questionnaire content."""
import json

import pytest
import yaml

from utils import registry
from utils.registry import REQUIRED_SECTIONS, load_survey


@pytest.fixture(autouse=True)
def quiet_streamlit(monkeypatch):
    monkeypatch.setattr(registry.st, "error", lambda msg: None)


def _minimal_doc():
    return {section: {"title": section} for section in REQUIRED_SECTIONS}


def test_bundled_survey_loads():
    doc = load_survey()
    assert doc["key"] == "oral_hygiene"
    assert doc["plaque"]["teeth"] == [12, 16, 24, 26, 32, 44]
    assert doc["perio"]["teeth"] == [16, 17, 26, 27, 36, 37, 46, 47]
    assert len(doc["perio"]["teeth"]) * len(doc["perio"]["sites"]) == 24
    assert len(doc["interdental"]["sites"]) == 4


def test_bundled_plaque_groups_cover_all_sites():
    doc = load_survey()
    indices = [i for g in doc["plaque"]["groups"] for i in g["indices"]]
    assert indices == list(range(6))


def test_json_preferred_over_yaml(tmp_path):
    doc = _minimal_doc()
    (tmp_path / "x.json").write_text(json.dumps({**doc, "key": "from-json"}), encoding="utf-8")
    (tmp_path / "x.yaml").write_text(yaml.safe_dump({**doc, "key": "from-yaml"}), encoding="utf-8")
    assert load_survey("x", base_dir=tmp_path)["key"] == "from-json"


def test_yaml_survey(tmp_path):
    (tmp_path / "y.yml").write_text(yaml.safe_dump(_minimal_doc(), allow_unicode=True), encoding="utf-8")
    assert load_survey("y", base_dir=tmp_path)["intro"]["title"] == "intro"


def test_missing_survey_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_survey("absent", base_dir=tmp_path)


def test_missing_section_raises(tmp_path):
    doc = _minimal_doc()
    del doc["perio"]
    (tmp_path / "z.json").write_text(json.dumps(doc), encoding="utf-8")
    with pytest.raises(ValueError, match="perio"):
        load_survey("z", base_dir=tmp_path)

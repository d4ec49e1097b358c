"""Unit tests for crud/fixtures.py"""

import json
import logging

import pytest

from docstore.crud.fixtures import load_documents


_YAML_LIST = """\
- id: "1"
  title: Spring
  content: Spring official documentation
  author: {id: "1", name: Peter}
  created: "2024-09-30T20:58:00Z"
- id: "2"
  title: Java
  author: {id: "2", name: Dan}
"""


def test_load_yaml_list(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text(_YAML_LIST)
    docs = load_documents(path)
    assert set(docs) == {"1", "2"}
    assert docs["1"].author.name == "Peter"
    assert docs["1"].created.year == 2024
    assert docs["2"].content is None


def test_load_json_mapping_uses_keys_as_ids(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text(json.dumps({"abc": {"title": "Jira", "author": {"id": "4", "name": "Amelia"}}}))
    docs = load_documents(path)
    assert docs["abc"].id == "abc"
    assert docs["abc"].title == "Jira"


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_documents(path) == {}


def test_load_logs_count(tmp_path, caplog):
    path = tmp_path / "docs.yaml"
    path.write_text(_YAML_LIST)
    with caplog.at_level(logging.INFO, logger="docstore.crud.fixtures"):
        load_documents(path)
    assert "Loaded 2 document(s)" in caplog.text


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid docs.yaml"):
        load_documents(path)


def test_load_invalid_json(tmp_path):
    path = tmp_path / "docs.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid docs.json"):
        load_documents(path)


def test_load_unsupported_suffix(tmp_path):
    path = tmp_path / "docs.txt"
    path.write_text("")
    with pytest.raises(ValueError, match="Unsupported data file type"):
        load_documents(path)


def test_load_missing_id(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("- title: x\n  author: {id: '1'}\n")
    with pytest.raises(ValueError, match="has no id"):
        load_documents(path)


def test_load_duplicate_id(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("- {id: '1', author: {id: '1'}}\n- {id: '1', author: {id: '2'}}\n")
    with pytest.raises(ValueError, match="duplicate id '1'"):
        load_documents(path)


def test_load_entry_without_author(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("- {id: '1', title: x}\n")
    with pytest.raises(ValueError, match="entry 0"):
        load_documents(path)


def test_load_scalar_top_level(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("42\n")
    with pytest.raises(ValueError, match="expected a list or mapping"):
        load_documents(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_documents(tmp_path / "nope.yaml")


def test_load_yaml_unquoted_numeric_ids(tmp_path):
    """Unquoted ids that YAML reads as integers are kept as strings."""
    path = tmp_path / "docs.yaml"
    path.write_text("- id: 1234\n  title: Spring\n  author: {id: 1, name: Peter}\n")
    docs = load_documents(path)
    assert set(docs) == {"1234"}
    assert docs["1234"].id == "1234"
    assert docs["1234"].author.id == "1"


def test_load_mapping_key_fills_empty_inner_id(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("abc: {id: '', title: x, author: {id: '1'}}\n")
    assert load_documents(path)["abc"].id == "abc"


def test_load_mapping_matching_inner_id(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("1234: {id: 1234, title: x, author: {id: '1'}}\n")
    assert set(load_documents(path)) == {"1234"}


def test_load_mapping_rejects_mismatched_inner_id(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text("abc: {id: xyz, title: x, author: {id: '1'}}\n")
    with pytest.raises(ValueError, match="mismatched id 'xyz'"):
        load_documents(path)

"""Tests for JSON/YAML file loading and dumping."""

from __future__ import annotations

import json

import pytest
import yaml

from rljson import io


def test_json_round_trip(tmp_path, deep_db):
    path = tmp_path / "db.json"
    path.write_text(io.dumps(deep_db, "json"))
    loaded = io.load(path, validate_hashes=True)
    assert loaded.ls() == deep_db.ls()
    assert loaded.data_hash == deep_db.data_hash


def test_yaml_round_trip(tmp_path, db):
    path = tmp_path / "db.yaml"
    path.write_text(io.dumps(db, "yaml"))
    assert yaml.safe_load(path.read_text())["_hash"] == db.data_hash
    loaded = io.load(path)
    assert loaded.data_hash == db.data_hash


def test_detect_format():
    assert io.detect_format("x.yml") == "yaml"
    assert io.detect_format("x.YAML") == "yaml"
    assert io.detect_format("x.json") == "json"


def test_load_file_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2]))
    with pytest.raises(ValueError, match="Expected a mapping"):
        io.load_file(path)


def test_dumps_unknown_format(db):
    with pytest.raises(ValueError, match="Unsupported format"):
        io.dumps(db, "xml")

"""Tests for rljson export, example and merge commands."""

import json

import yaml

from rljson import Rljson, io
from tests.cli.conftest import invoke


def test_export_stdout(runner, db_file):
    result = invoke(runner, ["export"], db_file)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["_hash"] == Rljson.example().data_hash


def test_export_yaml_file(runner, db_file, tmp_path):
    out = tmp_path / "out.yaml"
    result = invoke(runner, ["export", "--format", "yaml", "--output", str(out)], db_file)
    assert result.exit_code == 0
    assert "Wrote 2 table(s)" in result.output
    assert yaml.safe_load(out.read_text())["_hash"] == Rljson.example().data_hash


def test_export_table_subset(runner, db_file):
    result = invoke(runner, ["export", "--table", "tableB"], db_file)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert set(data) == {"tableB", "_hash"}


def test_export_unknown_table(runner, db_file):
    result = invoke(runner, ["export", "--table", "tableC"], db_file)
    assert result.exit_code == 4


def test_export_bad_format(runner, db_file):
    result = invoke(runner, ["export", "--format", "xml"], db_file)
    assert result.exit_code == 2


def test_example_kinds(runner):
    result = invoke(runner, ["example", "--kind", "deep-link"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert set(data) == {"a", "b", "c", "d", "_hash"}


def test_example_unknown_kind(runner):
    result = invoke(runner, ["example", "--kind", "nope"])
    assert result.exit_code == 2


def test_merge_into_input(runner, db_file, tmp_path):
    extra = tmp_path / "extra.json"
    batch = {
        "tableA": {"_data": [{"keyA0": "a0"}, {"keyA2": "a2"}]},
        "tableC": {"_data": []},
    }
    extra.write_text(json.dumps(batch))
    out = tmp_path / "merged.json"
    result = invoke(runner, ["merge", str(extra), "--output", str(out)], db_file)
    assert result.exit_code == 0

    merged = io.load(out, validate_hashes=True)
    assert len(merged.table("tableA")) == 3
    assert merged.has_table("tableC")


def test_merge_without_input(runner, tmp_path):
    first = tmp_path / "first.yaml"
    first.write_text(yaml.safe_dump({"t": {"_data": [{"k": 1}]}}))
    second = tmp_path / "second.json"
    second.write_text(json.dumps({"t": {"_data": [{"k": 1}, {"k": 2}]}}))

    result = invoke(runner, ["merge", str(first), str(second)])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [row["k"] for row in data["t"]["_data"]] == [1, 2]


def test_merge_malformed_file(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"t": {}, "u": {}}))
    result = invoke(runner, ["merge", str(bad)])
    assert result.exit_code == 3


def test_merge_check_links(runner, tmp_path):
    bad = tmp_path / "links.json"
    bad.write_text(json.dumps({"t": {"_data": [{"uRef": "missing"}]}}))
    result = invoke(runner, ["merge", str(bad), "--check-links"])
    assert result.exit_code == 5

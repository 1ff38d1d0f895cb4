"""Tests for the command-line interface."""

import json

import pytest

from ringfind.cli import main
from ringfind.graph_builders import graph_to_dict


@pytest.fixture
def fused_file(tmp_path, fused_5_6):
    path = tmp_path / "fused.json"
    path.write_text(json.dumps(graph_to_dict(fused_5_6)))
    return str(path)


def test_text_report(fused_file, capsys):
    assert main([fused_file, "--atom", "4", "--all"]) == 0
    out = capsys.readouterr().out
    assert "# Rings: 2 found" in out
    assert "C4 C5 C6 C7 C8" in out


def test_json_output(fused_file, capsys):
    assert main([fused_file, "--atom", "4", "--all", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["size"] for r in data["rings"]] == [6, 5]


def test_size_option(fused_file, capsys):
    assert main([fused_file, "--atom", "4", "--size", "5", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["atoms"] for r in data["rings"]] == [[4, 5, 6, 7, 8]]


def test_bond_origin(fused_file, capsys):
    assert main([fused_file, "--bond", "8,4", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [r["atoms"] for r in data["rings"]] == [[4, 5, 6, 7, 8]]


def test_exclude(fused_file, capsys):
    assert main([fused_file, "--atom", "0", "--exclude", "3", "--all"]) == 0
    assert "# Rings: 0 found" in capsys.readouterr().out


def test_unknown_atom(fused_file, capsys):
    assert main([fused_file, "--atom", "42"]) == 1
    assert "not in the graph" in capsys.readouterr().err


def test_unbonded_pair(fused_file, capsys):
    assert main([fused_file, "--bond", "0,3"]) == 1
    assert "not bonded" in capsys.readouterr().err


def test_bad_exclude(fused_file, capsys):
    assert main([fused_file, "--atom", "0", "--exclude", "a,b"]) == 1
    assert "Error" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.json"), "--atom", "0"]) == 1


def test_origin_required(fused_file):
    with pytest.raises(SystemExit):
        main([fused_file])


def test_input_required():
    with pytest.raises(SystemExit):
        main(["--atom", "0"])


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("ringfind v")


def test_smiles_aromaticity(capsys):
    pytest.importorskip("rdkit")
    assert main(["--smiles", "c1ccccc1", "--atom", "0", "--aromaticity", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["rings"][0]["size"] == 6
    assert data["rings"][0]["aromatic"] is True

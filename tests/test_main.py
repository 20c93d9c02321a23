"""
Tests for the command-line entry point.
"""

import json

from treegraph.main import main, render


def _write(tmp_path, text, name="input.json"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_default_prints_text(tmp_path, capsys, sample_json):
    assert main([str(_write(tmp_path, sample_json))]) == 0
    assert capsys.readouterr().out == "1 { 2 { 4 { 3 { } 5 { } } } } \n"


def test_matrix_format(tmp_path, capsys, sample_json):
    assert main([str(_write(tmp_path, sample_json)), "--format", "matrix"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("IncidenceMatrix {")
    assert '"4-5",' in out


def test_json_format_round_trips(tmp_path, capsys, sample_json):
    main([str(_write(tmp_path, sample_json)), "-f", "json"])
    assert json.loads(capsys.readouterr().out) == json.loads(sample_json)


def test_table_format(sample):
    table = render(sample, "table")
    assert "1-2" in table and "vertex" in table


def test_output_and_audit_files(tmp_path, sample_json):
    out = tmp_path / "out" / "matrix.txt"
    audit = tmp_path / "audit.json"
    code = main([str(_write(tmp_path, sample_json)), "-f", "matrix", "-o", str(out), "--audit", str(audit)])
    assert code == 0
    assert out.read_text(encoding="utf-8").startswith("IncidenceMatrix {")
    ops = [e["operation"] for e in json.loads(audit.read_text())]
    assert ops == ["read", "write"]


def test_plot_option(tmp_path, sample_json):
    png = tmp_path / "fig.png"
    assert main([str(_write(tmp_path, sample_json)), "--plot", str(png)]) == 0
    assert png.exists()


def test_malformed_input_exit_code(tmp_path, capsys):
    audit = tmp_path / "audit.json"
    assert main([str(_write(tmp_path, '{"nodes": []}')), "--audit", str(audit)]) == 1
    assert "missing field 'value'" in capsys.readouterr().err
    assert json.loads(audit.read_text())[0]["succeeded"] is False


def test_missing_input_exit_code(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 2


def test_non_utf8_input_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_bytes(b"\xff\xfe{")
    assert main([str(path)]) == 1
    assert "not UTF-8" in capsys.readouterr().err

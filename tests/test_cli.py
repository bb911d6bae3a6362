import io
import json

import pytest

from waveform_path.__main__ import main, read_values


@pytest.fixture
def values_file(tmp_path):
    path = tmp_path / "values.json"
    path.write_text(json.dumps([0, 10, 5, 3]))
    return str(path)


def test_read_values(values_file):
    assert read_values(values_file) == [0, 10, 5, 3]


def test_read_values_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2.5, 3]"))
    assert read_values(None) == [1, 2.5, 3]


@pytest.mark.parametrize("payload", ['{"a": 1}', '[1, "2"]', '[true, 1]', '3'])
def test_read_values_rejects_invalid_payload(tmp_path, payload):
    path = tmp_path / "values.json"
    path.write_text(payload)
    with pytest.raises(ValueError):
        read_values(str(path))


def test_main_prints_path(values_file, capsys):
    assert main(["-i", values_file, "-W", "300", "-H", "100"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("M0 98 C")
    assert out.count("C") == 3
    assert "Z" not in out


def test_main_closed(values_file, capsys):
    assert main(["-i", values_file, "-W", "300", "-H", "100", "--closed"]) == 0
    assert capsys.readouterr().out.strip().endswith("L300 100 L0 100 Z")


def test_main_simplify(values_file, capsys):
    assert main(["-i", values_file, "-W", "300", "-H", "100", "-e", "1"]) == 0
    assert capsys.readouterr().out.strip().count("C") == 1


def test_main_svg_output_file(values_file, tmp_path, capsys):
    output = tmp_path / "wave.svg"
    assert main(["-i", values_file, "--svg", "-o", str(output)]) == 0
    assert capsys.readouterr().out == ""
    text = output.read_text()
    assert text.startswith("<svg ")
    assert text.endswith("</svg>")


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]"))
    assert main(["-W", "10", "-H", "10"]) == 0
    assert capsys.readouterr().out.strip().startswith("M0 ")


def test_main_invalid_json(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2")
    assert main(["-i", str(path)]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "missing.json")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_negative_epsilon(values_file, capsys):
    assert main(["-i", values_file, "-e", "-1"]) == 1
    assert "epsilon" in capsys.readouterr().err


def test_main_simplify_default_epsilon(values_file, capsys):
    assert main(["-i", values_file, "-W", "300", "-H", "100", "-e"]) == 0
    assert capsys.readouterr().out.strip().count("C") == 1

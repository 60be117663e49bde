import json

from rupert.cli import main
from rupert.json_rep import Polyhedron

POLY = {
    "v": [
        {"x": {"n": "0", "d": "1"}, "y": {"n": "0", "d": "1"}, "z": {"n": "0", "d": "1"}},
        {"x": {"n": "1", "d": "1"}, "y": {"n": "0", "d": "1"}, "z": {"n": "0", "d": "1"}},
        {"x": {"n": "0", "d": "1"}, "y": {"n": "1", "d": "2"}, "z": {"n": "0", "d": "1"}},
    ],
    "f": [[0, 1, 2], [0, 2, 1]],
}


def _write_input(tmp_path, content):
    path = tmp_path / "poly.json"
    path.write_text(content)
    return path


def test_main_prints_and_writes_svg(tmp_path, capsys):
    src = _write_input(tmp_path, json.dumps(POLY))
    out = tmp_path / "out.svg"
    assert main([str(src), "--output", str(out)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "JSON:"
    assert lines[2] == Polyhedron.from_dict(POLY).to_json()
    assert lines[3] == "Vertices:"
    assert lines[5:] == ["{x: 0, y: 0, z: 0}", "{x: 1, y: 0, z: 0}", "{x: 0, y: 0.5, z: 0}"]
    svg = out.read_text()
    assert svg.startswith("\n<svg")
    assert svg.count("<text") == 3
    assert svg.count("<polygon") == 1


def test_main_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json"), "-o", str(tmp_path / "x.svg")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_main_bad_json(tmp_path, capsys):
    src = _write_input(tmp_path, '{"v": [], "f": [[0, -1]]}')
    out = tmp_path / "x.svg"
    assert main([str(src), "-o", str(out)]) == 1
    assert "not well-formatted" in capsys.readouterr().err
    assert not out.exists()


def test_main_face_index_out_of_range(tmp_path):
    src = _write_input(tmp_path, json.dumps({"v": POLY["v"], "f": [[0, 1, 9]]}))
    out = tmp_path / "x.svg"
    assert main([str(src), "-o", str(out)]) == 1
    assert not out.exists()
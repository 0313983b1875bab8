from __future__ import annotations

import json
from pathlib import Path

import pytest

from spanjson.cli import main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.json", '{"hello": "world"}\n')
    assert main([str(p)]) == 0
    assert capsys.readouterr().out == f"{p}: ok\n"


def test_error_reports_location_and_continues(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = _write(tmp_path, "bad.json", '{\n  "a": 1,\n}')
    good = _write(tmp_path, "good.json", "[]")
    assert main([str(bad), str(good)]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith(f"{bad.resolve()}:3:1: unexpected '}}' after ','")
    assert "hint: remove the trailing comma" in captured.err
    assert captured.out == f"{good}: ok\n"


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "nope.json" in capsys.readouterr().err


def test_invalid_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "latin1.json"
    p.write_bytes(b'"\xe9"')
    assert main([str(p)]) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_format_and_indent(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.json", '{ "a" : [1, 2] }')
    assert main(["--format", str(p)]) == 0
    assert capsys.readouterr().out == '{"a":[1,2]}\n'
    assert main(["--indent", "1", str(p)]) == 0
    assert capsys.readouterr().out == '{\n "a": [\n  1,\n  2\n ]\n}\n'


def test_ast_dump(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.json", '{"k": null}')
    assert main(["--ast", str(p)]) == 0
    dump = json.loads(capsys.readouterr().out)
    assert dump["type"] == "ObjectAst"
    prop = dump["value"][0]
    assert prop["type"] == "PropertyAst"
    assert prop["key"]["value"] == {
        "type": "StringAst",
        "span": {
            "type": "Span",
            "start": {"type": "Loc", "offset": 1, "line": 1, "column": 2},
            "end": {"type": "Loc", "offset": 4, "line": 1, "column": 5},
            "file": str(p.resolve()),
        },
        "value": "k",
    }
    assert prop["value"]["type"] == "NullAst"


def test_max_depth(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "deep.json", "[[[]]]")
    assert main(["--max-depth", "2", str(p)]) == 1
    assert "nesting deeper than 2 levels" in capsys.readouterr().err
    assert main(["--max-depth", "3", str(p)]) == 0


def test_max_depth_must_be_positive(tmp_path: Path) -> None:
    p = _write(tmp_path, "a.json", "[]")
    with pytest.raises(SystemExit) as e:
        main(["--max-depth", "0", str(p)])
    assert e.value.code == 2


def test_unrepresentable_float_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    big = _write(tmp_path, "big.json", "[1e400]")
    good = _write(tmp_path, "good.json", "[1]")
    assert main(["--format", str(big), str(good)]) == 1
    captured = capsys.readouterr()
    assert captured.err == f"{big}: inf has no JSON representation\n"
    assert captured.out == "[1]\n"

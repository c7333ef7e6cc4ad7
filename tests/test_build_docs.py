"""Tests for the static page builder."""

import build_docs


def test_core_source_runs_standalone():
    ns = {}
    exec(build_docs.core_source(), ns)

    pwd = ns["generate_password"](ns["GenerationConfig"](16))
    assert len(pwd) == 16
    result = ns["evaluate_strength"](pwd)
    assert result.score == 5
    assert result.label == "Very strong password"
    assert ns["evaluate_strength"]("").label == "Enter a password"


def test_build_writes_page(tmp_path, capsys):
    out = tmp_path / "docs" / "index.html"
    html = build_docs.build(out)

    assert out.read_text(encoding="utf-8") == html
    assert "__PYSCRIPT_CODE__" not in html
    assert build_docs.PYSCRIPT_VERSION in html
    assert "def evaluate_strength" in html
    assert 'min="8" max="32"' in html
    assert "Built" in capsys.readouterr().out

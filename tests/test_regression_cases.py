import importlib.util
import json
import zipfile
from pathlib import Path

import pytest

import squirclegen as gen

ROOT = Path(__file__).resolve().parents[1]


def _load_tool():
    spec = importlib.util.spec_from_file_location("regression_cases", ROOT / "tools" / "regression_cases.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_bundled_cases_pass(tmp_path):
    tool = _load_tool()
    rc = tool.main(["--params-dir", str(ROOT / "examples" / "regression_params"),
                    "--out-dir", str(tmp_path), "--date", "20260101"])
    assert rc == 0

    packs = sorted(tmp_path.glob("*.zip"))
    assert len(packs) == 5
    with zipfile.ZipFile(packs[0]) as z:
        assert set(z.namelist()) == tool.EXPECTED_ZIP_FILES


def test_failing_case_returns_nonzero(tmp_path):
    tool = _load_tool()
    cases = tmp_path / "cases"
    cases.mkdir()
    (cases / "bad.json").write_text(json.dumps({"name": "bad", "params": {"width": -1, "height": 10}}), encoding="utf-8")
    assert tool.main(["--params-dir", str(cases), "--out-dir", str(tmp_path / "out")]) == 1


def test_bad_date_rejected(tmp_path):
    tool = _load_tool()
    with pytest.raises(ValueError):
        tool.main(["--params-dir", str(ROOT / "examples" / "regression_params"), "--date", "2026-01-01"])


def test_path_points_ends_on_top_edge():
    path = gen.generate_path(120, 80, 16, 16, 16, 16, 0.8)
    pts = gen.path_points(path)
    assert pts[0] == (91.2, 0.0)
    assert pts[-1] == pytest.approx((28.8, 0.0), abs=1e-9)


def test_path_points_rejects_foreign_commands():
    with pytest.raises(ValueError):
        gen.path_points("M 0 0 Q 1 1 2 2 Z")

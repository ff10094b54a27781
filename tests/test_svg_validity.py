import json
import xml.etree.ElementTree as ET

import pytest

import squirclegen as gen


def test_svg_is_valid_xml(tmp_path):
    # Smoke test: generator should output parseable XML.
    res = gen.generate_svg(
        {
            "width": 240,
            "height": 96,
            "corner_radius": 24,
            "top_left_corner_radius": 0,
            "corner_smoothing": 0.6,
            "padding": 4,
        }
    )

    out = tmp_path / "out.svg"
    out.write_text(res["svg"], encoding="utf-8")
    root = ET.parse(str(out)).getroot()

    paths = root.findall(".//{http://www.w3.org/2000/svg}path")
    assert len(paths) == 1
    assert paths[0].get("d") == res["path"]
    assert root.get("viewBox") == "0 0 248 104"


def test_result_is_json_serializable():
    res = gen.generate_svg({"width": 120, "height": 80})
    json.dumps(res)
    assert res["meta"]["radii"]["top_left"] == gen.DEFAULT_CORNER_RADIUS
    assert res["clip_path"] == f"path('{res['path']}')"


def test_warnings_report_capping_and_clamping():
    res = gen.generate_svg({"width": 120, "height": 80, "corner_radius": 70, "corner_smoothing": 1.4})
    codes = {w["code"] for w in res["warnings"]}
    assert "SMOOTHING_OUT_OF_RANGE" in codes
    assert "RADIUS_CAPPED" in codes
    assert "SMOOTHING_REDUCED" in codes
    assert all(w["severity"] != "error" for w in res["warnings"])


def test_preserve_policy_is_reported():
    res = gen.generate_svg({"width": 120, "height": 80, "corner_radius": 40, "preserve_smoothing": True})
    codes = [w["code"] for w in res["warnings"]]
    assert codes.count("SMOOTHING_PRESERVED") == 4
    assert "SMOOTHING_REDUCED" not in codes


def test_generate_svg_requires_dict():
    with pytest.raises(TypeError):
        gen.generate_svg([("width", 10)])


def test_generate_svg_propagates_geometry_errors():
    with pytest.raises(gen.InvalidDimension):
        gen.generate_svg({"height": 80})


def test_clip_path_css_empty_means_no_clip():
    assert gen.clip_path_css("") == ""


def test_cli_writes_svg(tmp_path):
    out = tmp_path / "shape.svg"
    rc = gen.main(["--width", "120", "--height", "80", "--radius", "16", "--smoothing", "0.8",
                   "--format", "svg", "--out", str(out)])
    assert rc == 0
    ET.parse(str(out))


def test_cli_prints_path(capsys):
    rc = gen.main(["--width", "100", "--height", "100", "--radius", "10", "--smoothing", "0"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == gen.generate_path(100, 100, 10, 10, 10, 10, 0.0)


def test_cli_reports_geometry_errors(capsys):
    rc = gen.main(["--width", "0", "--height", "80"])
    assert rc == 2
    assert "width" in capsys.readouterr().err

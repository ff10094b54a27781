#!/usr/bin/env python3

import argparse
import json
import sys
import xml.etree.ElementTree as ET
import zipfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from squirclegen import generate_svg, path_points


EXPECTED_ZIP_FILES = {
    "shape.svg",
    "path.txt",
    "summary.md",
}

CLOSURE_TOL = 0.01


@dataclass
class Case:
    name: str
    params: Dict[str, Any]
    source_file: Path


def _read_case(path: Path) -> Case:
    data = json.loads(path.read_text(encoding="utf-8"))
    name = str(data.get("name", "") or path.stem).strip()
    params = data.get("params")
    if not isinstance(params, dict):
        raise TypeError(f"{path}: params must be an object/dict")
    return Case(name=name, params=params, source_file=path)


def _iter_cases(params_dir: Path) -> List[Case]:
    if not params_dir.exists():
        raise FileNotFoundError(f"Params dir not found: {params_dir}")

    cases: List[Case] = []
    for p in sorted(params_dir.glob("*.json")):
        cases.append(_read_case(p))

    if not cases:
        raise FileNotFoundError(f"No *.json found in: {params_dir}")

    return cases


def _find_error_warnings(warnings: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for w in warnings or []:
        sev = str((w or {}).get("severity", "")).lower()
        if sev == "error":
            out.append(w)
    return out


def _build_summary_md(name: str, params: Dict[str, Any], warnings: List[Dict[str, Any]]) -> str:
    return (
        "# SquircleGen Case Summary\n\n"
        f"Case: **{name}**\n\n"
        "## Generator params\n"
        "```json\n"
        + json.dumps(params, indent=2, sort_keys=True)
        + "\n```\n\n"
        + ("## Warnings\n" + "\n".join([f"- {w.get('code')}: {w.get('message')}" for w in warnings]) + "\n" if warnings else "")
    )


def _validate_svg(svg: str, *, name: str) -> None:
    if not isinstance(svg, str) or not svg.strip():
        raise ValueError(f"{name}: empty svg")
    root = ET.fromstring(svg.encode("utf-8"))
    if not root.tag.endswith("svg"):
        raise ValueError(f"{name}: svg does not look like SVG")


def _validate_closure(path: str, *, name: str) -> None:
    pts = path_points(path)
    if len(pts) < 2:
        raise ValueError(f"{name}: path has no segments")
    (x0, y0), (x1, y1) = pts[0], pts[-1]
    # The trailing Z runs along the top edge, so the last pen position must sit on it.
    if abs(y1 - y0) > CLOSURE_TOL or x1 > x0 + CLOSURE_TOL:
        raise ValueError(f"{name}: path does not close on its start edge: start={pts[0]} end={pts[-1]}")


def _write_zip(out_path: Path, *, svg: str, path: str, name: str, params: Dict[str, Any], warnings: List[Dict[str, Any]]) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(out_path, "w", compression=zipfile.ZIP_DEFLATED) as z:
        z.writestr("shape.svg", svg)
        z.writestr("path.txt", path + "\n")
        z.writestr("summary.md", _build_summary_md(name, params, warnings))

    with zipfile.ZipFile(out_path, "r") as z:
        names = set(z.namelist())
        if names != EXPECTED_ZIP_FILES:
            missing = sorted(EXPECTED_ZIP_FILES - names)
            extra = sorted(names - EXPECTED_ZIP_FILES)
            raise ValueError(
                f"{name}: zip contents mismatch. Missing={missing} Extra={extra} ({out_path})"
            )


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser(description="Generate and validate squircle regression cases.")
    ap.add_argument(
        "--params-dir",
        default="examples/regression_params",
        help="Directory containing *.json files with {name, params} (default: %(default)s)",
    )
    ap.add_argument(
        "--out-dir",
        default="artifacts/regression",
        help="Output directory for generated ZIPs (default: %(default)s)",
    )
    ap.add_argument(
        "--date",
        default=None,
        help="Override date (YYYYMMDD) for deterministic filenames; default is today.",
    )
    args = ap.parse_args(argv)

    params_dir = Path(args.params_dir)
    out_dir = Path(args.out_dir)

    if args.date:
        ymd = str(args.date).strip()
        if not (len(ymd) == 8 and ymd.isdigit()):
            raise ValueError("--date must be YYYYMMDD")
    else:
        ymd = date.today().strftime("%Y%m%d")

    cases = _iter_cases(params_dir)

    failures: List[Tuple[str, str]] = []
    for c in cases:
        try:
            res = generate_svg(c.params)
            warnings = res.get("warnings") or []

            _validate_svg(res.get("svg"), name=c.name)
            _validate_closure(res.get("path", ""), name=c.name)

            errors = _find_error_warnings(warnings)
            if errors:
                raise ValueError(f"Blocking errors returned: {errors}")

            out_path = out_dir / f"SquircleGen_{c.name}_{ymd}.zip"
            _write_zip(out_path, svg=res["svg"], path=res["path"], name=c.name, params=c.params, warnings=warnings)

            print(f"OK  {c.name} -> {out_path}")
        except Exception as e:
            failures.append((c.name, str(e)))
            print(f"FAIL {c.name}: {e}", file=sys.stderr)

    if failures:
        print("\nFailures:", file=sys.stderr)
        for name, msg in failures:
            print(f"- {name}: {msg}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

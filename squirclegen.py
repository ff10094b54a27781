#!/usr/bin/env python3
"""squirclegen.py

Smoothed-corner rectangle ("squircle") SVG path generator.

Each corner of the rectangle is a circular arc flanked by two cubic Bézier
run-ins. The smoothing factor trades arc for run-in:

  smoothing = 0   plain quarter-circle fillet (90 deg arc, no run-in)
  smoothing = 1   no arc left, the whole corner is two Béziers

Pipeline per rectangle:
- distribute_and_normalize(): how much of each edge a corner may claim
  (its rounding/smoothing budget), radius capped to that budget.
- get_path_params_for_corner(): offsets a, b, c, d, p and the arc chord for
  one corner, following figure 11.1 / 12.2 of
  https://www.figma.com/blog/desperately-seeking-squircles/
- get_svg_path_from_path_params(): the closed path string, every number
  rounded to 2 decimals so adjacent commands meet without sub-pixel seams.

When a corner does not fit its budget there are two policies:
- default: lower the smoothing until p == budget.
- preserve_smoothing: keep the smoothing and pull the outer Bézier control
  points in instead. Approximate, but keeps the curvature profile.
"""

from __future__ import annotations

import argparse
import functools
import json
import logging
import math
import sys
import textwrap
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

__version__ = "0.1"

logger = logging.getLogger(__name__)

PRECISION = 2
DEFAULT_CORNER_RADIUS = 8.0
DEFAULT_CORNER_SMOOTHING = 1.0

CORNERS = ("top_left", "top_right", "bottom_left", "bottom_right")

Point = Tuple[float, float]


# ---------------------- Errors ----------------------

class GeometryError(ValueError):
    """Invalid geometric input. Never replaced by a default path."""


class InvalidDimension(GeometryError):
    pass


class InvalidRadius(GeometryError):
    pass


@dataclass
class WarningMsg:
    severity: str  # error|warn|info
    code: str
    message: str
    fix: str


# ---------------------- Numbers ----------------------

def precise_round(n: float, precision: int = PRECISION) -> float:
    # Half-up, the way Math.round() behaves in the browser that consumes the path.
    factor = 10 ** precision
    return math.floor(n * factor + 0.5) / factor


def fmt(n: float) -> str:
    s = f"{precise_round(n):.{PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def clamp_smoothing(smoothing: float) -> float:
    """Clamp into [0, 1]. Animated values overshoot; that must not abort a render."""
    s = float(smoothing)
    if math.isnan(s):
        return 0.0
    return max(0.0, min(1.0, s))


def check_dimension(name: str, value: Optional[float]) -> float:
    if value is None:
        raise InvalidDimension(f"{name} is not known yet")
    v = float(value)
    if not math.isfinite(v) or v <= 0:
        raise InvalidDimension(f"{name} must be a finite number > 0, got {value!r}")
    if not math.isfinite(v * 10 ** PRECISION):
        raise InvalidDimension(f"{name} is too large to round to {PRECISION} decimals, got {value!r}")
    return v


def check_radius(name: str, value: float) -> float:
    r = float(value)
    if not math.isfinite(r) or r < 0:
        raise InvalidRadius(f"{name} radius must be a finite number >= 0, got {value!r}")
    return r


# ---------------------- Corner radii ----------------------

@dataclass(frozen=True)
class CornerRadii:
    top_left: float
    top_right: float
    bottom_left: float
    bottom_right: float

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in CORNERS}


def first_defined(*values: Optional[float]) -> Optional[float]:
    for v in values:
        if v is not None:
            return v
    return None


def resolve_corner_radii(
    base: Optional[float] = None,
    *,
    top_left: Optional[float] = None,
    top_right: Optional[float] = None,
    bottom_left: Optional[float] = None,
    bottom_right: Optional[float] = None,
    top: Optional[float] = None,
    bottom: Optional[float] = None,
    left: Optional[float] = None,
    right: Optional[float] = None,
) -> CornerRadii:
    """Resolve per-corner radii.

    Priority, highest first: the corner's own value, its top/bottom edge
    value, its left/right edge value, the base radius, 0.
    """

    resolved = CornerRadii(
        top_left=first_defined(top_left, top, left, base, 0.0),
        top_right=first_defined(top_right, top, right, base, 0.0),
        bottom_left=first_defined(bottom_left, bottom, left, base, 0.0),
        bottom_right=first_defined(bottom_right, bottom, right, base, 0.0),
    )
    return CornerRadii(**{name: check_radius(name, r) for name, r in resolved.as_dict().items()})


# ---------------------- Budget allocation ----------------------

@dataclass(frozen=True)
class CornerBudget:
    radius: float
    rounding_and_smoothing_budget: float


# corner -> [(neighbour sharing the edge, edge)]
ADJACENTS_BY_CORNER: Dict[str, List[Tuple[str, str]]] = {
    "top_left": [("top_right", "top"), ("bottom_left", "left")],
    "top_right": [("top_left", "top"), ("bottom_right", "right")],
    "bottom_left": [("bottom_right", "bottom"), ("top_left", "left")],
    "bottom_right": [("bottom_left", "bottom"), ("top_right", "right")],
}


def side_length(side: str, width: float, height: float) -> float:
    return width if side in ("top", "bottom") else height


def edge_allowance(radius: float, neighbour_radius: float, length: float) -> float:
    """How much of one edge a corner may claim.

    Half the edge when the neighbour is rounded too, the whole edge when the
    neighbour is sharp, nothing when both are sharp.
    """
    if neighbour_radius == 0:
        return 0.0 if radius == 0 else length
    return length / 2.0


def distribute_and_normalize(width: float, height: float, radii: CornerRadii) -> Dict[str, CornerBudget]:
    width = check_dimension("width", width)
    height = check_dimension("height", height)
    radius_map = radii.as_dict()

    out: Dict[str, CornerBudget] = {}
    for corner, radius in radius_map.items():
        radius = check_radius(corner, radius)
        budget = min(
            edge_allowance(radius, radius_map[neighbour], side_length(side, width, height))
            for neighbour, side in ADJACENTS_BY_CORNER[corner]
        )
        out[corner] = CornerBudget(radius=min(radius, budget), rounding_and_smoothing_budget=budget)
        logger.debug("%s: radius %.4g budget %.4g", corner, radius, budget)
    return out


# ---------------------- Corner parameters ----------------------

@dataclass(frozen=True)
class CornerPathParams:
    a: float
    b: float
    c: float
    d: float
    p: float
    arc_section_length: float
    corner_radius: float
    corner_smoothing: float = 0.0  # effective, after any budget clamp
    arc_measure: float = 90.0  # degrees

    @property
    def is_straight(self) -> bool:
        return self.corner_radius == 0


def arc_measure_for_smoothing(corner_smoothing: float) -> float:
    """Degrees of the circular arc left in a corner. 90 at 0, 0 at 1."""
    return 90.0 * (1.0 - corner_smoothing)


def straight_corner() -> CornerPathParams:
    return CornerPathParams(a=0.0, b=0.0, c=0.0, d=0.0, p=0.0, arc_section_length=0.0,
                            corner_radius=0.0, corner_smoothing=0.0, arc_measure=0.0)


def get_path_params_for_corner(
    corner_radius: float,
    corner_smoothing: float,
    preserve_smoothing: bool,
    rounding_and_smoothing_budget: float,
) -> CornerPathParams:
    if corner_radius == 0:
        return straight_corner()

    budget = rounding_and_smoothing_budget
    # Figure 12.2: p = (1 + smoothing) * q, and q = R for a 90 deg corner.
    p = (1 + corner_smoothing) * corner_radius

    if not preserve_smoothing:
        max_corner_smoothing = max(0.0, budget / corner_radius - 1)
        if corner_smoothing > max_corner_smoothing:
            logger.debug("smoothing %.4g reduced to %.4g to fit budget %.4g",
                         corner_smoothing, max_corner_smoothing, budget)
            corner_smoothing = max_corner_smoothing
        p = min((1 + corner_smoothing) * corner_radius, budget)

    arc_measure = arc_measure_for_smoothing(corner_smoothing)
    arc_section_length = math.sin(to_radians(arc_measure / 2)) * corner_radius * math.sqrt(2)

    # Distance between control points P3 and P4.
    angle_alpha = (90 - arc_measure) / 2
    p3_to_p4_distance = corner_radius * math.tan(to_radians(angle_alpha / 2))

    # Figure 11.1.
    angle_beta = 45 * corner_smoothing
    c = p3_to_p4_distance * math.cos(to_radians(angle_beta))
    d = c * math.tan(to_radians(angle_beta))

    b = (p - arc_section_length - c - d) / 3
    a = 2 * b

    if preserve_smoothing and p > budget:
        p1_to_p3_max_distance = budget - d - arc_section_length - c

        # Keep some distance between P1 and P2 or the curve kinks.
        min_a = p1_to_p3_max_distance / 6
        max_b = p1_to_p3_max_distance - min_a

        b = min(b, max_b)
        a = p1_to_p3_max_distance - b
        p = min(p, budget)
        logger.debug("smoothing %.4g preserved, control points pulled in to budget %.4g",
                     corner_smoothing, budget)

    return CornerPathParams(
        a=a,
        b=b,
        c=c,
        d=d,
        p=p,
        arc_section_length=arc_section_length,
        corner_radius=corner_radius,
        corner_smoothing=corner_smoothing,
        arc_measure=arc_measure,
    )


# ---------------------- Path assembly ----------------------

# Maps (along the incoming edge, along the outgoing edge) to (x, y), clockwise in SVG (y down).
CORNER_ORIENTATION = {
    "top_right": lambda u, v: (u, v),
    "bottom_right": lambda u, v: (-v, u),
    "bottom_left": lambda u, v: (-u, -v),
    "top_left": lambda u, v: (v, -u),
}

CORNER_POINT = {
    "top_right": lambda w, h: (w, 0.0),
    "bottom_right": lambda w, h: (w, h),
    "bottom_left": lambda w, h: (0.0, h),
    "top_left": lambda w, h: (0.0, 0.0),
}


def _pair(orient, u: float, v: float) -> str:
    x, y = orient(u, v)
    return f"{fmt(x)} {fmt(y)}"


def draw_corner_path(corner: str, params: CornerPathParams, width: float, height: float) -> str:
    """Commands for one corner, starting where its lead-in begins.

    Relative offsets are differences of rounded cumulative positions, so each
    corner advances by exactly its rounded p on both axes. The arc spans the
    rounded chord on both axes; the lead-out endpoint absorbs the residual.
    """

    if params.is_straight:
        x, y = CORNER_POINT[corner](width, height)
        return f"L {fmt(x)} {fmt(y)}"

    R = precise_round
    a, b, c, d = params.a, params.b, params.c, params.d
    arc = params.arc_section_length
    r = params.corner_radius
    orient = CORNER_ORIENTATION[corner]

    # Cumulative (u, v) positions from the start of the corner.
    u1, u2, u3, v3 = R(a), R(a + b), R(a + b + c), R(d)
    uq, vq = u3 + R(arc), v3 + R(arc)
    end = R(params.p)

    lead_in = f"c {_pair(orient, u1, 0.0)} {_pair(orient, u2, 0.0)} {_pair(orient, u3, v3)}"
    arc_cmd = f"a {fmt(r)} {fmt(r)} 0 0 1 {_pair(orient, R(arc), R(arc))}"
    lead_out = (
        f"c {_pair(orient, R(uq + d) - uq, R(vq + c) - vq)} "
        f"{_pair(orient, R(uq + d) - uq, R(vq + b + c) - vq)} "
        f"{_pair(orient, end - uq, end - vq)}"
    )
    return " ".join([lead_in, arc_cmd, lead_out])


def get_svg_path_from_path_params(
    width: float,
    height: float,
    *,
    top_left: CornerPathParams,
    top_right: CornerPathParams,
    bottom_left: CornerPathParams,
    bottom_right: CornerPathParams,
) -> str:
    w = precise_round(width)
    h = precise_round(height)
    tl_p = precise_round(top_left.p)
    tr_p = precise_round(top_right.p)
    bl_p = precise_round(bottom_left.p)
    br_p = precise_round(bottom_right.p)

    d = [
        f"M {fmt(w - tr_p)} 0",
        draw_corner_path("top_right", top_right, w, h),
        f"L {fmt(w)} {fmt(h - br_p)}",
        draw_corner_path("bottom_right", bottom_right, w, h),
        f"L {fmt(bl_p)} {fmt(h)}",
        draw_corner_path("bottom_left", bottom_left, w, h),
        f"L 0 {fmt(tl_p)}",
        draw_corner_path("top_left", top_left, w, h),
        "Z",
    ]
    return " ".join(d)


# ---------------------- Public API ----------------------

def corner_params_from_budgets(
    budgets: Dict[str, CornerBudget],
    smoothing: float,
    preserve_smoothing: bool = False,
) -> Dict[str, CornerPathParams]:
    smoothing = clamp_smoothing(smoothing)
    return {
        corner: get_path_params_for_corner(
            corner_radius=budget.radius,
            corner_smoothing=smoothing,
            preserve_smoothing=preserve_smoothing,
            rounding_and_smoothing_budget=budget.rounding_and_smoothing_budget,
        )
        for corner, budget in budgets.items()
    }


def compute_corner_params(
    width: float,
    height: float,
    radii: CornerRadii,
    smoothing: float,
    preserve_smoothing: bool = False,
) -> Dict[str, CornerPathParams]:
    budgets = distribute_and_normalize(width, height, radii)
    return corner_params_from_budgets(budgets, smoothing, preserve_smoothing)


def generate_path(
    width: float,
    height: float,
    top_left: float,
    top_right: float,
    bottom_left: float,
    bottom_right: float,
    smoothing: float,
    preserve_smoothing: bool = False,
) -> str:
    """Closed squircle path for a width x height rectangle.

    Raises InvalidDimension / InvalidRadius; out-of-range smoothing is clamped.
    """

    radii = CornerRadii(
        top_left=check_radius("top_left", top_left),
        top_right=check_radius("top_right", top_right),
        bottom_left=check_radius("bottom_left", bottom_left),
        bottom_right=check_radius("bottom_right", bottom_right),
    )
    params = compute_corner_params(width, height, radii, smoothing, preserve_smoothing)
    return get_svg_path_from_path_params(width, height, **params)


def get_svg_path(
    width: Optional[float],
    height: Optional[float],
    *,
    corner_radius: Optional[float] = 0.0,
    corner_smoothing: float = DEFAULT_CORNER_SMOOTHING,
    top_left_corner_radius: Optional[float] = None,
    top_right_corner_radius: Optional[float] = None,
    bottom_left_corner_radius: Optional[float] = None,
    bottom_right_corner_radius: Optional[float] = None,
    top_corner_radius: Optional[float] = None,
    bottom_corner_radius: Optional[float] = None,
    left_corner_radius: Optional[float] = None,
    right_corner_radius: Optional[float] = None,
    preserve_smoothing: bool = False,
) -> str:
    """Keyword front-end with cascading radius options.

    width/height of None means the host has not measured the element yet.
    """

    radii = resolve_corner_radii(
        corner_radius,
        top_left=top_left_corner_radius,
        top_right=top_right_corner_radius,
        bottom_left=bottom_left_corner_radius,
        bottom_right=bottom_right_corner_radius,
        top=top_corner_radius,
        bottom=bottom_corner_radius,
        left=left_corner_radius,
        right=right_corner_radius,
    )
    width = check_dimension("width", width)
    height = check_dimension("height", height)
    return generate_path(width, height, radii.top_left, radii.top_right, radii.bottom_left,
                         radii.bottom_right, corner_smoothing, preserve_smoothing)


def clip_path_css(path: str) -> str:
    """CSS clip-path value; empty means no clip."""
    if not path:
        return ""
    return f"path('{path}')"


def _cache_key(v: Optional[float]) -> Optional[float]:
    if v is None:
        return None
    v = float(v)
    # Non-finite and huge values pass through; generate_path rejects them.
    if not math.isfinite(v * 10 ** PRECISION):
        return v
    return precise_round(v)


def cached_path_generator(maxsize: int = 128):
    """generate_path behind an LRU keyed on the inputs rounded to 2 decimals.

    Results are quantized: the path is generated from the rounded inputs, so
    it can differ from generate_path() called with the raw values (e.g. a
    smoothing of 0.806 is drawn as 0.81). Hosts that regenerate per frame use
    this; generate_path itself never caches.
    """

    @functools.lru_cache(maxsize=maxsize)
    def _cached(width, height, top_left, top_right, bottom_left, bottom_right, smoothing, preserve_smoothing):
        return generate_path(width, height, top_left, top_right, bottom_left, bottom_right,
                             smoothing, preserve_smoothing)

    def generate(width, height, top_left, top_right, bottom_left, bottom_right, smoothing,
                 preserve_smoothing=False) -> str:
        key = [_cache_key(v) for v in (width, height, top_left, top_right, bottom_left, bottom_right, smoothing)]
        return _cached(*key, bool(preserve_smoothing))

    generate.cache_info = _cached.cache_info
    generate.cache_clear = _cached.cache_clear
    return generate


# ---------------------- Diagnostics ----------------------

def corner_warnings(
    radii: CornerRadii,
    budgets: Dict[str, CornerBudget],
    params: Dict[str, CornerPathParams],
    smoothing: float,
    preserve_smoothing: bool,
) -> List[WarningMsg]:
    warns: List[WarningMsg] = []
    requested = radii.as_dict()
    for corner in CORNERS:
        budget = budgets[corner]
        cp = params[corner]
        if budget.radius < requested[corner]:
            warns.append(WarningMsg("info", "RADIUS_CAPPED",
                                    f"{corner} radius {fmt(requested[corner])} exceeds its budget and was capped to {fmt(budget.radius)}.",
                                    "Reduce the radius or enlarge the rectangle."))
        if cp.is_straight:
            continue
        if not preserve_smoothing and cp.corner_smoothing < smoothing:
            warns.append(WarningMsg("info", "SMOOTHING_REDUCED",
                                    f"{corner} smoothing reduced from {fmt(smoothing)} to {fmt(cp.corner_smoothing)} to fit.",
                                    "Set preserve_smoothing to keep the requested smoothing."))
        if preserve_smoothing and (1 + smoothing) * budget.radius > budget.rounding_and_smoothing_budget:
            warns.append(WarningMsg("info", "SMOOTHING_PRESERVED",
                                    f"{corner} control points were pulled in to keep smoothing {fmt(smoothing)}.",
                                    "Reduce the radius for an exact curve."))
    return warns


PATH_ARITY = {"M": 2, "L": 2, "c": 6, "a": 7, "Z": 0}


def path_points(path: str) -> List[Point]:
    """Pen position after each drawing command of a generated path (Z excluded)."""
    tokens = path.split()
    pts: List[Point] = []
    pos: Point = (0.0, 0.0)
    i = 0
    while i < len(tokens):
        cmd = tokens[i]
        if cmd not in PATH_ARITY:
            raise ValueError(f"unexpected path token: {cmd!r}")
        n = PATH_ARITY[cmd]
        args = [float(t) for t in tokens[i + 1:i + 1 + n]]
        if len(args) != n:
            raise ValueError(f"{cmd} expects {n} numbers")
        i += 1 + n
        if cmd in ("M", "L"):
            pos = (args[0], args[1])
        elif cmd in ("c", "a"):
            pos = (pos[0] + args[-2], pos[1] + args[-1])
        else:
            continue
        pts.append(pos)
    return pts


def _warn_dicts(warns: List[WarningMsg]) -> List[dict]:
    return [w.__dict__.copy() for w in (warns or [])]


def _opt_float(v) -> Optional[float]:
    return None if v is None else float(v)


# ---------------------- SVG ----------------------

def svg_header(width: float, height: float) -> str:
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        f"<svg xmlns=\"http://www.w3.org/2000/svg\" width=\"{fmt(width)}\" height=\"{fmt(height)}\" viewBox=\"0 0 {fmt(width)} {fmt(height)}\">\n"
        f"  <desc>Generated by squirclegen v{__version__}</desc>\n"
    )


def svg_footer() -> str:
    return "</svg>\n"


def make_svg(
    path: str,
    width: float,
    height: float,
    *,
    meta: Optional[dict] = None,
    fill: str = "#111111",
    stroke: str = "none",
    stroke_width: float = 1.0,
    padding: float = 0.0,
) -> str:
    pad = max(0.0, float(padding))
    out = [svg_header(width + 2 * pad, height + 2 * pad)]
    if meta:
        meta_comment = "\n".join(textwrap.wrap(json.dumps(meta, ensure_ascii=False), width=120))
        out.append(f"  <!-- params: {meta_comment} -->\n")
    out.append(f'  <g id="SHAPE" transform="translate({fmt(pad)},{fmt(pad)})">\n')
    out.append(f'    <path d="{path}" fill="{fill}" stroke="{stroke}" stroke-width="{fmt(stroke_width)}"/>\n')
    out.append("  </g>\n")
    out.append(svg_footer())
    return "".join(out)


def generate_svg(params: dict) -> dict:
    """Dict-in, dict-out API.

    Returns a JSON-serializable dict:
      {"path": str, "svg": str, "clip_path": str,
       "warnings": [{severity, code, message, fix}, ...], "meta": dict}
    """
    if not isinstance(params, dict):
        raise TypeError("params must be a dict")

    width = check_dimension("width", _opt_float(params.get("width")))
    height = check_dimension("height", _opt_float(params.get("height")))
    requested_smoothing = float(params.get("corner_smoothing", DEFAULT_CORNER_SMOOTHING))
    preserve_smoothing = bool(params.get("preserve_smoothing", False))

    radii = resolve_corner_radii(
        _opt_float(params.get("corner_radius", DEFAULT_CORNER_RADIUS)),
        top_left=_opt_float(params.get("top_left_corner_radius")),
        top_right=_opt_float(params.get("top_right_corner_radius")),
        bottom_left=_opt_float(params.get("bottom_left_corner_radius")),
        bottom_right=_opt_float(params.get("bottom_right_corner_radius")),
        top=_opt_float(params.get("top_corner_radius")),
        bottom=_opt_float(params.get("bottom_corner_radius")),
        left=_opt_float(params.get("left_corner_radius")),
        right=_opt_float(params.get("right_corner_radius")),
    )

    warns: List[WarningMsg] = []
    smoothing = clamp_smoothing(requested_smoothing)
    if smoothing != requested_smoothing:
        warns.append(WarningMsg("warn", "SMOOTHING_OUT_OF_RANGE",
                                f"corner_smoothing {requested_smoothing!r} is outside [0, 1]; using {fmt(smoothing)}.",
                                "Pass a value between 0 and 1."))

    budgets = distribute_and_normalize(width, height, radii)
    corner_params = corner_params_from_budgets(budgets, smoothing, preserve_smoothing)
    warns += corner_warnings(radii, budgets, corner_params, smoothing, preserve_smoothing)

    path = get_svg_path_from_path_params(width, height, **corner_params)
    meta = {
        "generator": f"squirclegen v{__version__}",
        "inputs": {"width": width, "height": height, "corner_smoothing": requested_smoothing,
                   "preserve_smoothing": preserve_smoothing},
        "radii": radii.as_dict(),
        "derived": {
            corner: {"radius": b.radius, "budget": b.rounding_and_smoothing_budget,
                     "smoothing": corner_params[corner].corner_smoothing, "p": corner_params[corner].p}
            for corner, b in budgets.items()
        },
    }

    return {
        "path": path,
        "svg": make_svg(path, width, height, meta=meta, fill=str(params.get("fill", "#111111")),
                        padding=float(params.get("padding", 0.0))),
        "clip_path": clip_path_css(path),
        "warnings": _warn_dicts(warns),
        "meta": meta,
    }


# ---------------------- CLI ----------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Smoothed-corner rectangle (squircle) SVG path generator.\n\n"
            "Radius priority: --top-left etc. > --top/--bottom > --left/--right > --radius\n"
        ),
    )
    ap.add_argument("--width", type=float, required=True)
    ap.add_argument("--height", type=float, required=True)
    ap.add_argument("--radius", type=float, default=DEFAULT_CORNER_RADIUS, help="Base corner radius")
    ap.add_argument("--top-left", type=float, default=None)
    ap.add_argument("--top-right", type=float, default=None)
    ap.add_argument("--bottom-left", type=float, default=None)
    ap.add_argument("--bottom-right", type=float, default=None)
    ap.add_argument("--top", type=float, default=None, help="Radius for both top corners")
    ap.add_argument("--bottom", type=float, default=None, help="Radius for both bottom corners")
    ap.add_argument("--left", type=float, default=None, help="Radius for both left corners")
    ap.add_argument("--right", type=float, default=None, help="Radius for both right corners")
    ap.add_argument("--smoothing", type=float, default=DEFAULT_CORNER_SMOOTHING, help="0 = circular, 1 = max smoothing")
    ap.add_argument("--preserve-smoothing", action="store_true",
                    help="Keep smoothing under budget pressure by deforming control points")
    ap.add_argument("--format", choices=["path", "svg", "css", "json"], default="path")
    ap.add_argument("--padding", type=float, default=0.0, help="Padding around the shape (svg only)")
    ap.add_argument("--out", default=None, help="Output file (default: stdout)")
    ap.add_argument("--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    params = {
        "width": args.width,
        "height": args.height,
        "corner_radius": args.radius,
        "top_left_corner_radius": args.top_left,
        "top_right_corner_radius": args.top_right,
        "bottom_left_corner_radius": args.bottom_left,
        "bottom_right_corner_radius": args.bottom_right,
        "top_corner_radius": args.top,
        "bottom_corner_radius": args.bottom,
        "left_corner_radius": args.left,
        "right_corner_radius": args.right,
        "corner_smoothing": args.smoothing,
        "preserve_smoothing": args.preserve_smoothing,
        "padding": args.padding,
    }
    try:
        res = generate_svg(params)
    except GeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.format == "svg":
        text = res["svg"]
    elif args.format == "css":
        text = res["clip_path"] + "\n"
    elif args.format == "json":
        text = json.dumps({k: res[k] for k in ("path", "warnings", "meta")}, indent=2) + "\n"
    else:
        text = res["path"] + "\n"

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)

    for w in res["warnings"]:
        print("-", w["severity"], w["code"], w["message"], "| fix:", w["fix"], file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

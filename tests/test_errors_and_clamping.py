import math

import pytest

import squirclegen as gen


@pytest.mark.parametrize("w,h", [(0, 80), (120, 0), (-5, 80), (120, -1), (math.nan, 80), (math.inf, 80)])
def test_bad_dimensions_raise(w, h):
    with pytest.raises(gen.InvalidDimension):
        gen.generate_path(w, h, 8, 8, 8, 8, 0.5)


def test_unmeasured_size_raises():
    with pytest.raises(gen.InvalidDimension):
        gen.get_svg_path(None, 80, corner_radius=8)


@pytest.mark.parametrize("bad", [-0.01, math.nan, math.inf])
def test_bad_radius_raises(bad):
    with pytest.raises(gen.InvalidRadius):
        gen.generate_path(120, 80, 8, bad, 8, 8, 0.5)


def test_geometry_errors_are_value_errors():
    assert issubclass(gen.InvalidDimension, gen.GeometryError)
    assert issubclass(gen.InvalidRadius, gen.GeometryError)
    assert issubclass(gen.GeometryError, ValueError)


@pytest.mark.parametrize("raw,clamped", [(1.7, 1.0), (-0.5, 0.0), (math.nan, 0.0), (0.25, 0.25)])
def test_smoothing_is_clamped_not_rejected(raw, clamped):
    assert gen.clamp_smoothing(raw) == clamped
    assert gen.generate_path(120, 80, 16, 16, 16, 16, raw) == gen.generate_path(120, 80, 16, 16, 16, 16, clamped)


def test_fmt_rounds_half_up_and_drops_trailing_zeros():
    assert gen.fmt(100.0) == "100"
    assert gen.fmt(2.5) == "2.5"
    assert gen.fmt(0.125) == "0.13"
    assert gen.fmt(-0.125) == "-0.12"
    assert gen.fmt(-0.0) == "0"
    assert gen.fmt(-0.001) == "0"


def test_cached_generator_matches_and_hits():
    generate = gen.cached_path_generator(maxsize=8)
    first = generate(120, 80, 16, 16, 16, 16, 0.8)
    second = generate(120.001, 80, 16, 16, 16, 16, 0.8)
    assert first == second == gen.generate_path(120, 80, 16, 16, 16, 16, 0.8)
    assert generate.cache_info().hits == 1


def test_cached_generator_does_not_cache_errors():
    generate = gen.cached_path_generator()
    with pytest.raises(gen.InvalidDimension):
        generate(0, 80, 16, 16, 16, 16, 0.8)
    assert generate.cache_info().currsize == 0


def test_dimension_too_large_to_round_raises():
    with pytest.raises(gen.InvalidDimension):
        gen.generate_path(1e307, 10, 2, 2, 2, 2, 0.5)


def test_get_svg_path_routes_edge_keywords():
    path = gen.get_svg_path(120, 80, corner_radius=8, top_corner_radius=16, left_corner_radius=4)
    assert path == gen.generate_path(120, 80, 16, 16, 4, 8, 1)


def test_get_svg_path_routes_corner_and_bottom_right_keywords():
    path = gen.get_svg_path(
        120, 80,
        corner_radius=2,
        bottom_corner_radius=10,
        right_corner_radius=6,
        bottom_left_corner_radius=3,
        corner_smoothing=0.5,
    )
    assert path == gen.generate_path(120, 80, 2, 6, 3, 10, 0.5)


def test_cached_generator_quantizes_inputs_half_up():
    generate = gen.cached_path_generator()
    # 0.125 rounds half-up to 0.13, matching fmt()
    assert generate(120, 80, 16, 16, 16, 16, 0.125) == gen.generate_path(120, 80, 16, 16, 16, 16, 0.13)
    assert generate(120, 80, 16, 16, 16, 16, 0.806) == gen.generate_path(120, 80, 16, 16, 16, 16, 0.81)

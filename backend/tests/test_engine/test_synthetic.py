"""Tests for the synthetic pattern generator."""

from __future__ import annotations

import numpy as np

from kolam.engine.stages.s0_01_dot_detection import detect_dots, is_encoded_image
from kolam.engine.synthetic import (
    GENERATORS,
    default_pattern,
    generate_circular,
    generate_flower,
    generate_mandala_nine_way,
    generate_spiral,
    hash_data_url,
    select_generator,
    synthesize_pattern,
)


def test_hash_matches_rolling_formula():
    assert hash_data_url("") == 0
    assert hash_data_url("a") == 97
    assert hash_data_url("ab") == 97 * 31 + 98
    assert hash_data_url("hello") == 99162322
    assert hash_data_url(b"hello") == 99162322


def test_hash_reads_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert hash_data_url("\U0001F600") == 0xD83D * 31 + 0xDE00
    assert hash_data_url("\u00e9") == 0xE9


def test_hash_counts_surrogates_toward_the_prefix():
    prefix = "\U0001F600" * 50
    assert hash_data_url(prefix + "tail") == hash_data_url(prefix)


def test_hash_only_reads_first_100_characters():
    prefix = "x" * 100
    assert hash_data_url(prefix + "abc") == hash_data_url(prefix)


def test_hash_is_non_negative_after_overflow():
    assert hash_data_url("data:image/png;base64," + "z" * 80) >= 0


def test_select_generator_is_deterministic():
    assert select_generator("hello") == (4, "symmetric")
    assert select_generator("hello") == select_generator("hello")


def test_synthesize_pattern_is_reproducible(png_data_url):
    first = synthesize_pattern(png_data_url)
    second = synthesize_pattern(png_data_url)
    assert first
    assert first == second


def test_fixed_layout_sizes():
    assert len(generate_circular()) == 37
    assert len(generate_spiral()) == 40
    assert len(generate_mandala_nine_way()) == 91
    assert len(generate_flower()) == 45
    assert len(default_pattern()) == 91


def test_randomised_layouts_stay_in_shape():
    names = dict(GENERATORS)
    grid = names["grid"](np.random.default_rng(7))
    assert len(grid) <= 100
    assert all(p.x % 50 == 0 and p.y % 50 == 0 for p in grid)

    mirrored = names["symmetric"](np.random.default_rng(7))
    assert len(mirrored) % 4 == 0


def test_detect_dots_routes_inputs(png_data_url):
    assert is_encoded_image(png_data_url)
    assert is_encoded_image(b"\x89PNG")
    assert not is_encoded_image("plain text")
    assert not is_encoded_image(b"")

    assert detect_dots(png_data_url) == synthesize_pattern(png_data_url)
    assert detect_dots("plain text") == []
    assert detect_dots(None) == []


def test_detect_dots_coerces_point_likes():
    dots = detect_dots([{"x": 1, "y": 2}, (3, 4), {"px": 5, "py": 6}, {"x": "abc"}])
    assert [(p.x, p.y) for p in dots] == [(1, 2), (3, 4), (5, 6), (0, 0)]
    assert all(p.confidence == 1.0 for p in dots)


def test_detect_dots_defaults_out_of_range_coordinates():
    huge = 10**400
    dots = detect_dots([{"x": huge, "y": 1}, {"x": 2, "y": -huge}, {"x": "1e999", "y": 3}])
    assert [(p.x, p.y) for p in dots] == [(0, 1), (2, 0), (0, 3)]

import logging

import pytest

from src.platformer.background import (
    Cloud, ElementType, GeometricShape, Mountain, Star,
    generate_background, layer_depth, parallax_offset,
)
from src.platformer.config import MAX_LEVEL, GEOMETRIC_SHAPES

LEVELS = list(range(1, MAX_LEVEL + 1))

ELEMENT_CLASS = {
    ElementType.STARS: Star,
    ElementType.CLOUDS: Cloud,
    ElementType.MOUNTAINS: Mountain,
    ElementType.GEOMETRIC: GeometricShape,
}


def test_background_is_deterministic():
    for n in LEVELS:
        a, b = generate_background(n), generate_background(n)
        assert a == b
        for la, lb in zip(a.layers, b.layers):
            assert la.elements == lb.elements


def test_layer_count_and_depths():
    for n in LEVELS:
        bg = generate_background(n)
        assert bg.level_number == n
        assert len(bg.layers) in (3, 4)
        depths = [l.depth for l in bg.layers]
        assert all(0.0 <= d <= 1.0 for d in depths)
        assert len(set(depths)) == len(depths)
        assert depths == sorted(depths)


def test_depth_formula():
    assert layer_depth(0) == pytest.approx(0.1)
    assert layer_depth(1) == pytest.approx(0.2)
    assert layer_depth(3) == pytest.approx(0.4)


def test_index_biased_element_types():
    for n in LEVELS:
        layers = generate_background(n).layers
        assert layers[0].element_type in (ElementType.STARS, ElementType.GEOMETRIC)
        assert layers[1].element_type in (ElementType.CLOUDS, ElementType.MOUNTAINS)


def test_elements_match_layer_type():
    for n in LEVELS:
        for layer in generate_background(n).layers:
            assert layer.elements, "every layer carries elements"
            cls = ELEMENT_CLASS[layer.element_type]
            assert all(isinstance(el, cls) for el in layer.elements)
            assert layer.color.startswith("#")


def test_element_parameters_in_range():
    for n in LEVELS:
        for layer in generate_background(n).layers:
            for el in layer.elements:
                if isinstance(el, Star):
                    assert 1 <= el.size <= 3 and 0.5 <= el.brightness <= 1.0
                elif isinstance(el, (Cloud, Mountain)):
                    assert 0.0 < el.opacity < 1.0 and el.width > 0 and el.height > 0
                else:
                    assert el.shape in GEOMETRIC_SHAPES
                    assert 0.1 <= el.opacity <= 0.4


def test_levels_get_different_backdrops():
    assert generate_background(1) != generate_background(2)


def test_invalid_level_uses_level_one(caplog):
    with caplog.at_level(logging.WARNING):
        bg = generate_background(42)
    assert bg == generate_background(1)
    assert caplog.records


def test_parallax_offset_scales_with_depth():
    layer = generate_background(3).layers[0]
    assert parallax_offset(0.0, layer) == 0.0
    assert parallax_offset(500.0, layer) == pytest.approx(500.0 * layer.depth)

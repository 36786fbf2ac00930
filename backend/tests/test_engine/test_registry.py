"""Tests for the pattern type registry."""

import pytest

from patternforge.engine.config import PatternConfig
from patternforge.engine.layout import Layout, calculate_layout
from patternforge.engine.registry import PatternTypeRegistry, PatternTypeSpec, get_registry, pattern_type
from patternforge.errors import UnknownPatternTypeError


def _fixed(config: PatternConfig) -> Layout:
    return calculate_layout((100, 100), 1)


def test_register_and_get():
    reg = PatternTypeRegistry()
    spec = PatternTypeSpec(id="fixed", fn=_fixed)
    reg.register(spec)
    assert reg.get("fixed") is spec
    assert "fixed" in reg
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = PatternTypeRegistry()
    reg.register(PatternTypeSpec(id="fixed", fn=_fixed))
    with pytest.raises(ValueError):
        reg.register(PatternTypeSpec(id="fixed", fn=_fixed))


def test_unknown_type():
    with pytest.raises(UnknownPatternTypeError):
        PatternTypeRegistry().get("spiral")


def test_decorator_registers_into_given_registry():
    reg = PatternTypeRegistry()

    @pattern_type(id="fixed", description="Always one tile", registry=reg)
    def fixed(config):
        return _fixed(config)

    layout = reg.layout(PatternConfig(seed=1, pattern_type="fixed"))
    assert layout.tile_size == 100
    assert "fixed" not in get_registry()


def test_builtin_types():
    reg = get_registry()
    assert [s.id for s in reg.all()] == ["brick", "gridCentered"]


def test_builtin_grid_centered_uses_config():
    config = PatternConfig(seed=1, container_size=(800, 800), grid_size=4, border_padding=16, line_spacing=8)
    assert get_registry().layout(config).tile_size == 186

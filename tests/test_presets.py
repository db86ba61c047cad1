from elevation_shadows.color import Color
from elevation_shadows.elevation import as_shadows
from elevation_shadows.material import MATERIAL_ELEVATION_SHADOWS
from elevation_shadows.presets import OPACITY_RAMP, materialize
from elevation_shadows.shadow import Shadow


def test_opacity_ramp_values():
    assert OPACITY_RAMP == (0.2, 0.14, 0.12)


def test_materialize_empty_is_identity():
    empty = []
    assert materialize(empty) is empty
    assert materialize(()) == ()


def test_materialize_applies_ramp_to_material_levels():
    result = materialize(MATERIAL_ELEVATION_SHADOWS[8])
    assert [shadow.color.opacity for shadow in result] == [0.2, 0.14, 0.12]
    assert [shadow.blur_radius for shadow in result] == [5.0, 10.0, 14.0]


def test_materialize_restores_opacity_after_recolor():
    faded = as_shadows(6.5, Color(blue=200, alpha=1.0), preserve_opacity=False)
    result = materialize(faded)
    assert [shadow.color.opacity for shadow in result] == [0.2, 0.14, 0.12]
    assert all(shadow.color.blue == 200 for shadow in result)


def test_materialize_with_color():
    teal = Color(green=128, blue=128, alpha=0.9)
    result = materialize(MATERIAL_ELEVATION_SHADOWS[2], color=teal)
    assert result[0].color == teal.with_opacity(0.2)
    assert result[2].color == teal.with_opacity(0.12)


def test_materialize_reuses_last_stop_past_third_shadow():
    shadows = tuple(Shadow(blur_radius=float(n), color=Color(alpha=1.0)) for n in range(5))
    result = materialize(shadows)
    assert [shadow.color.opacity for shadow in result] == [0.2, 0.14, 0.12, 0.12, 0.12]

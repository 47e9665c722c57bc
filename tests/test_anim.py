import math

import pytest

from formengine.anim import (
    Anim,
    AnimList,
    AnimOrder,
    DrawLayers,
    OrderEntry,
    invert_factor,
    make_anim,
    make_sheet,
    roto_to_radian,
)
from formengine.textures import TextureSource


def _texture(width=64, height=32, layers=1):
    return TextureSource(
        name="sheet.png",
        width=width,
        height=height,
        images=[b"\x00" * (width * height * 4)] * layers,
        colors=[1.0, 0.5, 0.25, 1.0] * layers,
    )


def _anim(rows=2, cols=4, **kw):
    return make_anim(_texture(**kw), rows, cols)


def test_make_sheet_single_file():
    assert make_sheet("hero.png", 1) == ["hero.png"]
    assert make_sheet("hero.png", 0) == ["hero.png"]


def test_make_sheet_numbered_layers():
    assert make_sheet("hero.png", 3) == ["hero0.png", "hero1.png", "hero2.png"]


def test_make_anim_defaults():
    anim = _anim(rows=2, cols=4)
    assert anim.sprite_num == 2
    assert anim.lengths == [4, 4]
    assert anim.frame_x == pytest.approx(1 / 4)
    assert anim.frame_y == pytest.approx(1 / 2)
    assert anim.speed == 6
    assert anim.roto == 3
    assert anim.loop is True
    assert anim.reverse is False
    assert anim.frame == 0 and anim.sprite == 0


def test_make_anim_square_cells_have_unit_ratio():
    anim = _anim(rows=2, cols=4, width=64, height=32)
    assert anim.ratio == [1.0, 1.0]


def test_make_anim_wide_cells_shrink_y():
    anim = _anim(rows=1, cols=2, width=64, height=16)
    assert anim.ratio[0] == 1.0
    assert anim.ratio[1] == pytest.approx(16 / 32)


def test_make_anim_tall_cells_shrink_x():
    anim = _anim(rows=1, cols=1, width=16, height=64)
    assert anim.ratio[1] == 1.0
    assert anim.ratio[0] == pytest.approx(16 / 64)


def test_make_anim_palette_is_a_copy():
    tex = _texture(layers=2)
    anim = make_anim(tex, 1, 1)
    assert anim.palette == tex.colors
    anim.palette[0] = 0.0
    assert tex.colors[0] == 1.0


def test_make_anim_without_texture_raises():
    with pytest.raises(ValueError):
        make_anim(None, 1, 1)


def test_animate_waits_for_speed_then_advances():
    anim = _anim()
    anim.speed = 2
    for _ in range(3):
        anim.animate()
    assert anim.frame == 0
    anim.animate()
    assert anim.frame == 1
    assert anim.speed_counter == 0


def test_animate_loops_and_calls_end():
    ended = []
    anim = _anim(rows=1, cols=2)
    anim.speed = 0
    anim.anim_end = ended.append
    frames = []
    for _ in range(6):
        anim.animate()
        frames.append(anim.frame)
    assert frames == [0, 1, 1, 0, 0, 1]
    assert ended == [anim]


def test_animate_without_loop_holds_last_frame():
    anim = _anim(rows=1, cols=2)
    anim.speed = 0
    anim.loop = False
    for _ in range(10):
        anim.animate()
    assert anim.frame == 1


def test_animate_reverse_wraps_to_last_frame():
    anim = _anim(rows=1, cols=3)
    anim.speed = 0
    anim.reverse = True
    anim.animate()
    anim.animate()
    assert anim.frame == 2


def test_animate_zero_length_row_does_nothing():
    anim = _anim(rows=1, cols=3)
    anim.speed = 0
    anim.add_sprite(0, 0)
    for _ in range(5):
        anim.animate()
    assert anim.frame == 0
    assert anim.speed_counter == 0


def test_change_sprite_resets_frame():
    anim = _anim()
    anim.frame = 2
    anim.speed_counter = 3
    anim.change_sprite(1)
    assert (anim.sprite, anim.frame, anim.speed_counter) == (1, 0, 0)


def test_change_sprite_ignores_bad_and_disabled_rows():
    anim = _anim(rows=3)
    anim.change_sprite(5)
    anim.change_sprite(-1)
    assert anim.sprite == 0
    anim.add_sprite(2, -1)
    anim.change_sprite(2)
    assert anim.sprite == 0


def test_add_sprite_out_of_range_is_ignored():
    anim = _anim(rows=2, cols=4)
    anim.add_sprite(7, 9)
    anim.add_sprite(1, 9)
    assert anim.lengths == [4, 9]


def test_coordinates_follow_frame_and_sprite():
    anim = _anim(rows=3, cols=4)
    anim.frame = 2
    assert anim.coord_x() == pytest.approx(2 * anim.frame_x)
    top = anim.coord_y()
    anim.change_sprite(1)
    assert anim.coord_y() == pytest.approx(top - anim.frame_y)
    anim.change_sprite(2)
    assert anim.coord_y() == pytest.approx(1.0)


def test_roto_to_radian_values():
    assert roto_to_radian(0) == 1.5708
    assert roto_to_radian(1) == 3.14159
    assert roto_to_radian(2) == 4.71239
    assert roto_to_radian(3) == 0


def test_invert_factor():
    assert invert_factor(True) == -1
    assert invert_factor(False) == 1


def test_sprite_translation_uses_offset():
    anim = _anim()
    base = anim.sprite_translation(0.5, 0.25, 2, 3)
    anim.set_offset(1, 0)
    moved = anim.sprite_translation(0.5, 0.25, 2, 3)
    assert moved[0] == pytest.approx(base[0] + 0.5)
    assert moved[1] == pytest.approx(base[1])
    assert anim.sprite_translation(0.5, 0.25, 3, 3) == pytest.approx(moved)


def test_sprite_scale_inverts_and_scales():
    anim = _anim()
    anim.set_scale(2, 3)
    sx, sy = anim.sprite_scale(0.5, 0.5)
    assert (sx, sy) == pytest.approx((1.0 * anim.ratio[0], 1.5 * anim.ratio[1]))
    anim.set_invert(0, True)
    assert anim.sprite_scale(0.5, 0.5) == pytest.approx((-sx, sy))


def test_texture_matrices_hold_coords_and_frame_size():
    anim = _anim(rows=2, cols=4)
    anim.frame = 1
    translation, scale = anim.texture_matrices()
    assert translation[2] == pytest.approx(anim.coord_x())
    assert translation[5] == pytest.approx(anim.coord_y())
    assert scale[0] == anim.frame_x and scale[4] == anim.frame_y


def test_rotation_matrix_identity_for_default_roto():
    anim = _anim()
    m = anim.rotation_matrix()
    assert m[0] == pytest.approx(1.0) and m[5] == pytest.approx(1.0)
    assert m[1] == pytest.approx(0.0) and m[4] == pytest.approx(0.0)


def test_rotation_matrix_quarter_turn():
    anim = _anim()
    anim.set_roto(0)
    m = anim.rotation_matrix()
    assert m[0] == pytest.approx(math.cos(1.5708))
    assert m[4] == pytest.approx(math.sin(1.5708))
    assert m[1] == pytest.approx(-m[4])


def test_load_palette_replaces_colors():
    anim = make_anim(_texture(layers=2), 1, 1)
    anim.load_palette([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 9.0])
    assert anim.palette == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8])


def test_load_palette_too_short_raises():
    anim = make_anim(_texture(layers=2), 1, 1)
    with pytest.raises(ValueError):
        anim.load_palette([0.1, 0.2])


def test_anim_list_add_remove_animate():
    anims = AnimList()
    a, b = _anim(rows=1, cols=2), _anim(rows=1, cols=2)
    a.speed = b.speed = 0
    anims.add(a)
    anims.add(b)
    assert len(anims) == 2
    anims.remove(a)
    assert a not in anims and b in anims
    anims.remove(a)
    assert len(anims) == 1
    anims.animate_all()
    anims.animate_all()
    assert (a.frame, b.frame) == (0, 1)
    anims.clear()
    assert list(anims) == []


def test_anim_order_skips_duplicates_when_checking():
    order = AnimOrder(0)
    anim = _anim()
    assert order.add(anim, 1, 2) is True
    assert order.add(anim, 3, 4) is False
    assert order.add(anim, 3, 4, check=False) is True
    assert [(e.x, e.y) for e in order] == [(1, 2), (3, 4)]


def test_anim_order_apply_overrides():
    order = AnimOrder(0)
    a, b = _anim(rows=3), _anim(rows=3)
    order.add(a, 0, 0, sprite=2, rotation=1)
    order.add(b, 5, 6)
    entries = order.apply()
    assert (a.sprite, a.roto) == (2, 1)
    assert (b.sprite, b.roto) == (0, 3)
    assert entries == [OrderEntry(a, 0, 0, 2, 1), OrderEntry(b, 5, 6)]


def test_draw_layers_route_by_order():
    layers = DrawLayers()
    assert layers.layer_for(4) is layers.front
    assert layers.layer_for(-2) is layers.back
    assert layers.layer_for(0) is layers.mid
    anim = _anim()
    layers.add(-1, anim, 1, 1)
    layers.add(1, anim, 1, 1)
    assert [len(layer) for layer in layers] == [1, 0, 1]
    assert [layer.order for layer in layers] == [-1, 0, 1]
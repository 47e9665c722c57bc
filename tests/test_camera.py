from formengine.camera import Camera


def test_default_matrix_is_identity():
    cam = Camera()
    assert cam.matrix() == [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def test_set_position_moves_translation_column():
    cam = Camera()
    cam.set_position(0.25, -0.5)
    m = cam.matrix()
    assert (m[3], m[7]) == (0.25, -0.5)
    assert (cam.x, cam.y) == (0.25, -0.5)


def test_set_size_scales_diagonal_only_in_xy():
    cam = Camera()
    cam.set_size(2.0)
    m = cam.matrix()
    assert (m[0], m[5], m[10], m[15]) == (2.0, 2.0, 1.0, 1.0)


def test_listener_notified_on_each_change():
    seen = []
    cam = Camera(on_change=lambda c: seen.append(c.matrix()))
    cam.set_position(1.0, 2.0)
    cam.set_size(3.0)
    assert len(seen) == 2
    assert seen[0][3] == 1.0 and seen[0][0] == 1.0
    assert seen[1][0] == 3.0 and seen[1][7] == 2.0
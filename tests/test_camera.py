from bentods.camera import Camera
from bentods.fixed import Fixed
from bentods.matrix import Matrix
from bentods.vec2 import Vec2


def test_defaults():
    cam = Camera()
    assert cam.offset == Vec2(0, 0)
    assert cam.target == Vec2(0, 0)
    assert cam.rotation == 0
    assert cam.zoom == 1


def test_zoom_coerced():
    cam = Camera(zoom=2)
    assert isinstance(cam.zoom, Fixed)
    assert cam.zoom == 2


def test_set_copies_vectors():
    offset = Vec2(1, 2)
    target = Vec2(3, 4)
    cam = Camera()
    cam.set(offset, target, 90, 0.5)
    offset.x = 100
    assert cam.offset == Vec2(1, 2)
    assert cam.target == Vec2(3, 4)
    assert cam.rotation == 90
    assert cam.zoom == 0.5


def test_default_matrix_is_rotation_block():
    assert Camera().matrix() == Matrix.rotation(0)


def test_camera_to_screen_subtracts_target():
    cam = Camera(target=Vec2(3, 4))
    p = Vec2(10, 20)
    out = cam.camera_to_screen(p)
    assert out.x == p.x - cam.target.x
    assert out.y == p.y - cam.target.y


def test_default_camera_keeps_position():
    p = Vec2(7, -9)
    assert Camera().camera_to_screen(p) == p
    assert Camera().screen_to_camera(p) == p


def test_screen_to_camera_subtracts_offset():
    cam = Camera(offset=Vec2(5, 6))
    p = Vec2(10, 20)
    out = cam.screen_to_camera(p)
    assert out.x == p.x - cam.offset.x
    assert out.y == p.y - cam.offset.y


def test_singular_camera_falls_back_to_identity():
    cam = Camera(offset=Vec2(5, 6), zoom=0)
    p = Vec2(11, 12)
    assert cam.screen_to_camera(p) == p
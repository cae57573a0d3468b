from pathlib import Path

import pytest

from boardview.image import Image, ImageLoadError


def _loader(texture=7, width=100, height=50):
    calls = []

    def load(path):
        calls.append(path)
        return texture, width, height

    return load, calls


def test_reload_without_file_does_not_load():
    load, calls = _loader()
    image = Image(texture=3)
    image.reload(load)
    assert image.texture == 0
    assert calls == []


def test_reload_sets_texture_and_size():
    load, calls = _loader(texture=9, width=120, height=80)
    image = Image(file=Path("board.png"))
    image.reload(load)
    assert (image.texture, image.width, image.height) == (9, 120, 80)
    assert calls == [Path("board.png")]


def test_reload_failure_raises_and_clears_texture():
    def load(path):
        raise ImageLoadError(f"{path}: broken")

    image = Image(file=Path("x.png"), texture=4)
    with pytest.raises(ImageLoadError, match="broken"):
        image.reload(load)
    assert image.texture == 0


def test_reload_os_error_is_wrapped():
    def load(path):
        raise FileNotFoundError("missing")

    image = Image(file=Path("gone.png"))
    with pytest.raises(ImageLoadError, match="gone.png"):
        image.reload(load)


def test_bounds_from_loaded_size():
    load, _ = _loader(width=100, height=50)
    image = Image(file=Path("a.png"))
    image.reload(load)
    assert image.bounds() == (0.0, 0.0, 100.0, 50.0)


def test_bounds_scale_and_offset_invariant():
    image = Image(width=30, height=20, offset_x=5, offset_y=-4, scaling_x=2.5, scaling_y=0.5)
    x0, y0, x1, y1 = image.bounds()
    assert (x0, y0) == (5.0, -4.0)
    assert x1 - x0 == pytest.approx(image.width * image.scaling_x)
    assert y1 - y0 == pytest.approx(image.height * image.scaling_y)


def test_uv_rotation_zero_no_mirror():
    uvs = Image().transform_relative_coordinates(0)
    assert uvs == ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))


def test_uv_rotation_one_no_mirror():
    uvs = Image().transform_relative_coordinates(1)
    assert uvs == ((0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0))


def test_uv_even_and_odd_rotations_pair_up():
    image = Image(mirror_y=True)
    assert image.transform_relative_coordinates(2) == image.transform_relative_coordinates(0)
    assert image.transform_relative_coordinates(3) == image.transform_relative_coordinates(1)
    assert image.transform_relative_coordinates(9) == image.transform_relative_coordinates(3)


@pytest.mark.parametrize("rotation", [0, 1, 2, 3])
def test_mirror_flips_coordinates(rotation):
    plain = Image().transform_relative_coordinates(rotation)
    mx = Image(mirror_x=True).transform_relative_coordinates(rotation)
    my = Image(mirror_y=True).transform_relative_coordinates(rotation)
    assert [(1 - u, v) for u, v in plain] == list(mx)
    assert [(u, 1 - v) for u, v in plain] == list(my)
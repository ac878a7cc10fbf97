import math

import numpy as np
import pytest

from regimage.direction import Direction
from regimage.image import Image
from regimage.spatial import Point, Spacing


def make_image(origin=(0.0, 0.0, 0.0), spacing=(1.0, 1.0, 1.0), direction=None):
    data = np.zeros((10, 10, 10))
    return Image(
        data,
        Point(origin),
        Spacing(spacing),
        direction if direction is not None else Direction.identity(3),
    )


def rotated_2d_image():
    c, s = math.cos(0.3), math.sin(0.3)
    direction = Direction([[c, -s], [s, c]])
    return Image(np.zeros((6, 8)), Point([2.0, -1.0]), Spacing([0.5, 2.0]), direction)


def test_image_creation():
    image = make_image()
    assert image.shape == (10, 10, 10)
    assert image.ndim == 3
    assert image.origin == Point([0.0, 0.0, 0.0])
    assert image.spacing == Spacing([1.0, 1.0, 1.0])
    assert image.direction == Direction.identity(3)


def test_physical_to_index_transform():
    index = make_image().physical_point_to_index(Point([5.0, 5.0, 5.0]))
    assert index.to_list() == pytest.approx([5.0, 5.0, 5.0], abs=1e-6)


def test_index_to_physical_transform():
    point = make_image().index_to_physical_point(Point([5.0, 5.0, 5.0]))
    assert point.to_list() == pytest.approx([5.0, 5.0, 5.0], abs=1e-6)


def test_transform_roundtrip():
    image = make_image()
    original = Point([3.5, 4.5, 5.5])
    back = image.index_to_physical_point(image.physical_point_to_index(original))
    assert back.to_list() == pytest.approx(original.to_list(), abs=1e-6)


def test_non_unit_spacing():
    image = make_image(spacing=(2.0, 2.0, 2.0))
    index = image.physical_point_to_index(Point([10.0, 10.0, 10.0]))
    assert index.to_list() == pytest.approx([5.0, 5.0, 5.0], abs=1e-6)


def test_non_zero_origin():
    image = make_image(origin=(10.0, 20.0, 30.0))
    index = image.physical_point_to_index(Point([15.0, 25.0, 35.0]))
    assert index.to_list() == pytest.approx([5.0, 5.0, 5.0], abs=1e-6)


def test_index_zero_maps_to_origin():
    image = rotated_2d_image()
    assert image.index_to_physical_point(Point([0.0, 0.0])).to_list() == pytest.approx(
        [2.0, -1.0]
    )


def test_rotated_point_roundtrip():
    image = rotated_2d_image()
    original = Point([3.25, -7.5])
    back = image.index_to_physical_point(image.physical_point_to_index(original))
    assert back.to_list() == pytest.approx(original.to_list(), abs=1e-9)


def test_batch_matches_single_point_methods():
    image = rotated_2d_image()
    points = np.array([[0.0, 0.0], [1.5, 2.5], [-3.0, 4.0]])
    indices = image.world_to_index(points)
    assert indices.shape == (3, 2)
    for row, index in zip(points, indices):
        expected = image.physical_point_to_index(Point(row)).to_list()
        assert index.tolist() == pytest.approx(expected)
    worlds = image.index_to_world(indices)
    for index, world in zip(indices, worlds):
        expected = image.index_to_physical_point(Point(index)).to_list()
        assert world.tolist() == pytest.approx(expected)


def test_batch_roundtrip_3d():
    image = make_image(origin=(10.0, 20.0, 30.0), spacing=(0.5, 1.5, 3.0))
    rng = np.random.default_rng(0)
    points = rng.uniform(-20.0, 20.0, size=(50, 3))
    back = image.index_to_world(image.world_to_index(points))
    np.testing.assert_allclose(back, points, atol=1e-9)


def test_singular_direction_raises():
    image = make_image(direction=Direction.zeros(3))
    with pytest.raises(ValueError):
        image.physical_point_to_index(Point([1.0, 2.0, 3.0]))
    with pytest.raises(ValueError):
        image.world_to_index(np.zeros((2, 3)))


def test_metadata_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        Image(np.zeros((4, 4)), Point([0.0, 0.0, 0.0]), Spacing([1.0, 1.0]), Direction.identity(2))
    with pytest.raises(ValueError):
        Image(np.zeros((4, 4)), Point([0.0, 0.0]), Spacing([1.0, 1.0]), Direction.identity(3))


def test_batch_wrong_width_raises():
    with pytest.raises(ValueError):
        make_image().world_to_index(np.zeros((5, 2)))
    with pytest.raises(ValueError):
        make_image().index_to_world(np.zeros(3))


def test_point_wrong_dimension_raises():
    with pytest.raises(ValueError):
        make_image().physical_point_to_index(Point([1.0, 2.0]))
import numpy as np
import pytest

from regimage.direction import Direction
from regimage.image import Image
from regimage.pyramid import MultiResolutionPyramid
from regimage.spatial import Point, Spacing


def make_image(shape):
    rng = np.random.default_rng(3)
    dim = len(shape)
    return Image(
        rng.random(shape),
        Point([2.0] * dim),
        Spacing.uniform(1.0, dim),
        Direction.identity(dim),
    )


def test_default_schedule_three_levels():
    factors, sigmas = MultiResolutionPyramid.default_schedule(3, 2)
    assert factors == [[4, 4], [2, 2], [1, 1]]
    assert sigmas == [[2.0, 2.0], [1.0, 1.0], [0.0, 0.0]]


def test_default_schedule_empty():
    assert MultiResolutionPyramid.default_schedule(0, 3) == ([], [])


def test_levels_shapes_and_spacing():
    image = make_image((16, 16))
    factors, sigmas = MultiResolutionPyramid.default_schedule(3, 2)
    pyramid = MultiResolutionPyramid(image, factors, sigmas)
    assert len(pyramid) == 3
    assert [level.shape for level in pyramid] == [(4, 4), (8, 8), (16, 16)]
    assert [level.spacing.to_list() for level in pyramid] == [
        [4.0, 4.0],
        [2.0, 2.0],
        [1.0, 1.0],
    ]
    for level in pyramid:
        assert level.origin == image.origin


def test_identity_level_keeps_data():
    image = make_image((8, 8, 8))
    pyramid = MultiResolutionPyramid(image, [[1, 1, 1]], [[0.0, 0.0, 0.0]])
    np.testing.assert_array_equal(pyramid.level(0).data, image.data)


def test_smoothing_only_keeps_shape():
    image = make_image((10, 10))
    pyramid = MultiResolutionPyramid(image, [[1, 1]], [[1.0, 1.0]])
    level = pyramid.level(0)
    assert level.shape == image.shape
    assert level.data.std() < image.data.std()


def test_iteration_matches_levels():
    image = make_image((8, 8))
    factors, sigmas = MultiResolutionPyramid.default_schedule(2, 2)
    pyramid = MultiResolutionPyramid(image, factors, sigmas)
    for i, level in enumerate(pyramid):
        assert level is pyramid.level(i)


def test_mismatched_schedules_raise():
    with pytest.raises(ValueError):
        MultiResolutionPyramid(make_image((4, 4)), [[1, 1], [2, 2]], [[0.0, 0.0]])


def test_level_out_of_range():
    pyramid = MultiResolutionPyramid(make_image((4, 4)), [[1, 1]], [[0.0, 0.0]])
    with pytest.raises(IndexError):
        pyramid.level(1)
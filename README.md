# regimage

NumPy building blocks for placing 2D and 3D images in physical space and
preparing them for coarse-to-fine registration.

## Modules

- `regimage.spatial` provides immutable `Point`, `Vector` and `Spacing` types.
  - A `Vector` supports `+`, `-`, scalar `*` and `/`, and negation.
  - `Point - Point` gives a `Vector`.
  - `Point + Vector` gives a `Point`.
  - `Spacing.uniform(value, dim)`, `is_uniform()`, `min_spacing()` and `max_spacing()` describe pixel spacing.
- `regimage.direction` provides `Direction`, a square matrix whose column *i* is the direction of image axis *i*.
  - `Direction.identity(dim)` and `Direction.zeros(dim)` construct matrices.
  - `determinant()`, `inverse()`, `is_orthogonal()`, `is_proper_rotation()` and `axis_directions()` inspect them.
  - Elements are indexed as `d[row, col]`.
  - `@` multiplies by another `Direction` or by a `Vector`.
- `regimage.metadata` provides the `ImageMetadata` dataclass, which holds an origin, a spacing and a direction.
  - `ImageMetadata.default(dim)` gives a zero origin, unit spacing and identity direction.
  - `ImageMetadata.for_shape(shape)` gives the same defaults for the dimension of `shape`.
- `regimage.grid` provides `generate_grid(shape)` together with `generate_grid_2d` and `generate_grid_3d`.
  - Each returns every pixel index of a 2D or 3D shape as an `(N, D)` float array of `(x, y[, z])` rows.
  - `x` varies fastest in the row order.
- `regimage.image` provides `Image`, an array stored in `[Z, Y, X]` or `[Y, X]` order together with its origin, spacing and direction.
  - The mapping it uses is `point = origin + direction @ (index * spacing)`.
  - For single points it offers `physical_point_to_index` and `index_to_physical_point`.
  - For `(N, D)` arrays it offers `world_to_index` and `index_to_world`.
- `regimage.gaussian` provides `GaussianFilter(sigmas, max_kernel_width=32)`, which applies separable Gaussian smoothing.
  - Sigmas are given in physical units and converted to pixels using the image spacing.
  - Values beyond the array edge count as zero.
  - `gaussian_kernel(sigma, radius)` returns the normalised 1D kernel.
- `regimage.downsample` provides `DownsampleFilter(factors)`.
  - It keeps every Nth pixel along each axis.
  - It multiplies the spacing by the factor and keeps the origin.
- `regimage.pyramid` provides `MultiResolutionPyramid(image, shrink_factors, smoothing_sigmas)`, which smooths and then downsamples for each level.
  - `MultiResolutionPyramid.default_schedule(levels, dim)` gives a power-of-two schedule, coarsest level first.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

```python
import numpy as np
from regimage.spatial import Point, Spacing
from regimage.direction import Direction
from regimage.image import Image
from regimage.pyramid import MultiResolutionPyramid

data = np.zeros((40, 40, 40), dtype=np.float32)
image = Image(data, Point.origin(3), Spacing.uniform(1.0, 3), Direction.identity(3))

index = image.physical_point_to_index(Point([5.0, 5.0, 5.0]))

factors, sigmas = MultiResolutionPyramid.default_schedule(3, 3)
pyramid = MultiResolutionPyramid(image, factors, sigmas)
for level in pyramid:
    print(level.shape)  # (10, 10, 10), (20, 20, 20), (40, 40, 40)
```

## What this package does not do

The package has no way to sample an array at non-integer indices. It therefore
cannot resample an image onto a new grid through a transform. It has no
transforms, similarity metrics or optimisers, so it does not register images
itself. It does not read or write image files either: the data must be
supplied as NumPy arrays.

## Running the tests

```
pytest
```
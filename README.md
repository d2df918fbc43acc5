# coherentnoise

Coherent-noise generation for procedural textures and terrain. Noise is
built from small modules that either generate a value from a 3D point or
transform and combine the output of other modules. The package is pure
Python with no dependencies.

## Installation

    pip install coherentnoise

## Low-level noise functions

`coherentnoise.noisegen` provides the primitive functions:

- `gradient_coherent_noise_3d(x, y, z, seed=0, quality=NoiseQuality.STD)`:
  smooth gradient noise, roughly in -1.0 to +1.0.
- `value_coherent_noise_3d(x, y, z, seed=0, quality=NoiseQuality.STD)`:
  smooth value noise, interpolated from lattice values.
- `gradient_noise_3d(fx, fy, fz, ix, iy, iz, seed=0)`: gradient noise at a
  point relative to one lattice point.
- `int_value_noise_3d(x, y, z, seed=0)`: an integer from 0 to 2147483647
  for a lattice point.
- `value_noise_3d(x, y, z, seed=0)`: the same, mapped to -1.0 to 1.0.
- `make_int32_range(n)`: folds a coordinate so that it fits in a 32-bit
  integer.

`NoiseQuality` selects how the lattice cell is interpolated: `FAST`
(linear), `STD` (cubic S-curve) or `BEST` (quintic S-curve).

```python
from coherentnoise.noisegen import NoiseQuality, gradient_coherent_noise_3d

value = gradient_coherent_noise_3d(1.25, 0.5, 3.75, 0, NoiseQuality.BEST)
```

`coherentnoise.interp` holds the helpers the modules use
(`linear_interp`, `cubic_interp`, `s_curve3`, `s_curve5`, `clamp_value`)
and the constants `PI`, `SQRT_2`, `SQRT_3`, `DEG_TO_RAD` and `RAD_TO_DEG`.
`coherentnoise.vectortable.gradient_vector(index)` returns one of the 256
gradient vectors (an `IndexError` outside 0 to 255).

## Noise modules

Every module derives from `coherentnoise.base.Module` and provides
`get_value(x, y, z)`; a module can also be called directly,
`module(x, y, z)`. Modules that need input take source modules through
`set_source_module(index, module)` and hand them back with
`get_source_module(index)`; `source_module_count` tells how many slots a
module has.

Generators (no sources), in `coherentnoise.generators`:

- `RidgedMulti(frequency, lacunarity, octave_count, noise_quality, seed)`:
  ridged-multifractal noise, suited to mountain ranges. At most
  `RIDGED_MAX_OCTAVE` (30) octaves; `spectral_weights` shows the weight of
  each octave.
- `Spheres(frequency)`: concentric spheres around the origin.
- `Voronoi(displacement, frequency, seed, enable_distance)`: Voronoi cells,
  each with a random value, optionally shaded by the distance to the cell's
  seed point.

Transformers (one source), in `coherentnoise.transformers`. Each takes its
source as the `source` keyword or through the `source` property:

- `RotatePoint(x_angle, y_angle, z_angle)`: rotates the input point;
  angles in degrees, set together with `set_angles` or one by one through
  `x_angle`, `y_angle`, `z_angle`.
- `ScaleBias(scale, bias)`: multiplies the source's output by `scale` and
  adds `bias`.
- `ScalePoint(x_scale, y_scale, z_scale)`: scales the input coordinates;
  `set_scale` takes one factor for all axes or three.
- `TranslatePoint(x_translation, y_translation, z_translation)`: moves the
  input coordinates; `set_translation` takes one amount or three.

Selector and curve modules:

- `coherentnoise.selector.Select(source0, source1, control)`: outputs
  source 0 where the control value lies outside the selection range and
  source 1 inside it. `set_bounds(lower, upper)` sets the range (default
  -1.0 to 1.0) and `edge_falloff` blends the two sources near the bounds;
  the falloff is capped at half the range.
- `coherentnoise.terrace.Terrace(source)`: maps its source onto a
  terrace-forming curve defined by sorted, unique control points
  (`add_control_point`, `make_control_points`, `clear_all_control_points`,
  `control_points`). `invert_terraces()` inverts the curve between points.

```python
from coherentnoise.generators import RidgedMulti, Spheres
from coherentnoise.selector import Select
from coherentnoise.transformers import ScaleBias

mountains = RidgedMulti()
flat = ScaleBias(scale=0.25, bias=-0.5, source=Spheres())

terrain = Select(flat, mountains, mountains)
terrain.set_bounds(0.0, 1000.0)
terrain.edge_falloff = 0.125

print(terrain.get_value(0.5, 0.25, 0.75))
```

## Errors

All errors derive from `coherentnoise.errors.NoiseError`:

- `InvalidParamError` (also a `ValueError`) for bad parameters: a
  duplicate terrace control point, fewer than two control points, a
  lower bound not below the upper bound, too many ridged octaves, or a
  source slot index out of range.
- `NoModuleError` (also a `LookupError`) when a required source module is
  not connected.

## What it does not do

The package computes noise values point by point. It does not build or
write height maps, images or textures, has no command-line tool, and
offers only the modules listed above: there are no arithmetic combiners,
no caching module and no fractal module other than `RidgedMulti`.

## Tests

The test suite uses pytest, installed with the `test` extra:

    pip install coherentnoise[test]
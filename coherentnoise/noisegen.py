"""Coherent-noise primitives: integer, value and gradient noise in three dimensions."""

import enum
import math

from .interp import linear_interp, s_curve3, s_curve5
from .vectortable import gradient_vector

X_NOISE_GEN = 1619
Y_NOISE_GEN = 31337
Z_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 8

_INT32_RANGE = 1073741824.0


class NoiseQuality(enum.IntEnum):
    """Quality of the coherent noise."""

    FAST = 0
    STD = 1
    BEST = 2


def _to_int32(n: int) -> int:
    """Wrap an integer to the range of a signed 32-bit integer."""
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _lattice_hash(x: int, y: int, z: int, seed: int) -> int:
    return _to_int32(
        X_NOISE_GEN * x + Y_NOISE_GEN * y + Z_NOISE_GEN * z + SEED_NOISE_GEN * seed
    )


def _map_fraction(t: float, quality: NoiseQuality) -> float:
    quality = NoiseQuality(quality)
    if quality is NoiseQuality.FAST:
        return t
    if quality is NoiseQuality.STD:
        return s_curve3(t)
    return s_curve5(t)


def _trilinear(corner, xs: float, ys: float, zs: float) -> float:
    """Interpolate the eight values ``corner(dx, dy, dz)`` of a unit cube."""

    def along_x(dy: int, dz: int) -> float:
        return linear_interp(corner(0, dy, dz), corner(1, dy, dz), xs)

    iy0 = linear_interp(along_x(0, 0), along_x(1, 0), ys)
    iy1 = linear_interp(along_x(0, 1), along_x(1, 1), ys)
    return linear_interp(iy0, iy1, zs)


def gradient_noise_3d(
    fx: float, fy: float, fz: float, ix: int, iy: int, iz: int, seed: int = 0
) -> float:
    """Gradient-noise value at (fx, fy, fz) relative to the lattice point (ix, iy, iz)."""
    index = _lattice_hash(ix, iy, iz, seed)
    index ^= index >> SHIFT_NOISE_GEN
    index &= 0xFF

    gx, gy, gz = gradient_vector(index)
    px = fx - ix
    py = fy - iy
    pz = fz - iz
    return (gx * px + gy * py + gz * pz) * 2.12


def gradient_coherent_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STD,
) -> float:
    """Gradient-coherent-noise value at (x, y, z)."""
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    xs = _map_fraction(x - x0, quality)
    ys = _map_fraction(y - y0, quality)
    zs = _map_fraction(z - z0, quality)

    def corner(dx: int, dy: int, dz: int) -> float:
        return gradient_noise_3d(x, y, z, x0 + dx, y0 + dy, z0 + dz, seed)

    return _trilinear(corner, xs, ys, zs)


def int_value_noise_3d(x: int, y: int, z: int, seed: int = 0) -> int:
    """Integer-noise value in the range 0 to 2147483647 at a lattice point."""
    n = _lattice_hash(x, y, z, seed) & 0x7FFFFFFF
    n = (n >> 13) ^ n
    return (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF


def make_int32_range(n: float) -> float:
    """Fold a floating-point value so that it fits in a 32-bit integer."""
    if n >= _INT32_RANGE:
        return 2.0 * math.fmod(n, _INT32_RANGE) - _INT32_RANGE
    if n <= -_INT32_RANGE:
        return 2.0 * math.fmod(n, _INT32_RANGE) + _INT32_RANGE
    return n


def value_noise_3d(x: int, y: int, z: int, seed: int = 0) -> float:
    """Value-noise value in the range -1.0 to 1.0 at a lattice point."""
    return 1.0 - int_value_noise_3d(x, y, z, seed) / _INT32_RANGE


def value_coherent_noise_3d(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: NoiseQuality = NoiseQuality.STD,
) -> float:
    """Value-coherent-noise value at (x, y, z)."""
    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    xs = _map_fraction(x - x0, quality)
    ys = _map_fraction(y - y0, quality)
    zs = _map_fraction(z - z0, quality)

    def corner(dx: int, dy: int, dz: int) -> float:
        return value_noise_3d(x0 + dx, y0 + dy, z0 + dz, seed)

    return _trilinear(corner, xs, ys, zs)
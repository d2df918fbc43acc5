"""Generator noise modules that need no source modules."""

from __future__ import annotations

import math

from .base import Module
from .errors import InvalidParamError
from .interp import SQRT_3
from .noisegen import (
    NoiseQuality,
    gradient_coherent_noise_3d,
    make_int32_range,
    value_noise_3d,
)

DEFAULT_RIDGED_FREQUENCY = 1.0
DEFAULT_RIDGED_LACUNARITY = 2.0
DEFAULT_RIDGED_OCTAVE_COUNT = 6
DEFAULT_RIDGED_QUALITY = NoiseQuality.STD
DEFAULT_RIDGED_SEED = 0
RIDGED_MAX_OCTAVE = 30

DEFAULT_SPHERES_FREQUENCY = 1.0

DEFAULT_VORONOI_DISPLACEMENT = 1.0
DEFAULT_VORONOI_FREQUENCY = 1.0
DEFAULT_VORONOI_SEED = 0


class RidgedMulti(Module):
    """Ridged-multifractal noise, useful for craggy mountains and marble textures.

    Each octave of gradient noise is folded through an absolute-value function
    and weighted by the previous octave's signal, producing ridge-like forms.
    """

    SOURCE_MODULE_COUNT = 0

    def __init__(
        self,
        frequency: float = DEFAULT_RIDGED_FREQUENCY,
        lacunarity: float = DEFAULT_RIDGED_LACUNARITY,
        octave_count: int = DEFAULT_RIDGED_OCTAVE_COUNT,
        noise_quality: NoiseQuality = DEFAULT_RIDGED_QUALITY,
        seed: int = DEFAULT_RIDGED_SEED,
    ) -> None:
        super().__init__()
        self.frequency = frequency
        self.noise_quality = noise_quality
        self.seed = seed
        self.octave_count = octave_count
        self._spectral_weights: list[float] = []
        self.lacunarity = lacunarity

    @property
    def lacunarity(self) -> float:
        """Frequency multiplier between successive octaves."""
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value: float) -> None:
        self._lacunarity = value
        self._calc_spectral_weights()

    @property
    def octave_count(self) -> int:
        """Number of octaves generating the noise (at most RIDGED_MAX_OCTAVE)."""
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value: int) -> None:
        if value > RIDGED_MAX_OCTAVE:
            raise InvalidParamError(
                f"octave count {value} exceeds the maximum of {RIDGED_MAX_OCTAVE}"
            )
        self._octave_count = value

    @property
    def spectral_weights(self) -> tuple[float, ...]:
        """Weight applied to each octave's signal."""
        return tuple(self._spectral_weights)

    def _calc_spectral_weights(self) -> None:
        h = 1.0
        frequency = 1.0
        weights = []
        for _ in range(RIDGED_MAX_OCTAVE):
            weights.append(frequency ** -h)
            frequency *= self._lacunarity
        self._spectral_weights = weights

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency

        value = 0.0
        weight = 1.0
        offset = 1.0
        gain = 2.0

        for octave, spectral_weight in zip(
            range(self._octave_count), self._spectral_weights
        ):
            nx = make_int32_range(x)
            ny = make_int32_range(y)
            nz = make_int32_range(z)

            seed = (self.seed + octave) & 0x7FFFFFFF
            signal = gradient_coherent_noise_3d(nx, ny, nz, seed, self.noise_quality)

            signal = offset - abs(signal)
            signal *= signal
            signal *= weight

            weight = min(max(signal * gain, 0.0), 1.0)

            value += signal * spectral_weight

            x *= self._lacunarity
            y *= self._lacunarity
            z *= self._lacunarity

        return value * 1.25 - 1.0


class Spheres(Module):
    """Concentric spheres centred on the origin, one unit apart at frequency 1."""

    SOURCE_MODULE_COUNT = 0

    def __init__(self, frequency: float = DEFAULT_SPHERES_FREQUENCY) -> None:
        super().__init__()
        self.frequency = frequency

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency

        dist_from_center = math.sqrt(x * x + y * y + z * z)
        dist_from_smaller = dist_from_center - math.floor(dist_from_center)
        dist_from_larger = 1.0 - dist_from_smaller
        nearest = min(dist_from_smaller, dist_from_larger)
        return 1.0 - nearest * 4.0


class Voronoi(Module):
    """Voronoi cells, each given a random constant value scaled by the displacement."""

    SOURCE_MODULE_COUNT = 0

    def __init__(
        self,
        displacement: float = DEFAULT_VORONOI_DISPLACEMENT,
        frequency: float = DEFAULT_VORONOI_FREQUENCY,
        seed: int = DEFAULT_VORONOI_SEED,
        enable_distance: bool = False,
    ) -> None:
        super().__init__()
        self.displacement = displacement
        self.frequency = frequency
        self.seed = seed
        self.enable_distance = enable_distance

    def _seed_point(self, cx: int, cy: int, cz: int) -> tuple[float, float, float]:
        return (
            cx + value_noise_3d(cx, cy, cz, self.seed),
            cy + value_noise_3d(cx, cy, cz, self.seed + 1),
            cz + value_noise_3d(cx, cy, cz, self.seed + 2),
        )

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency

        x_int = math.floor(x)
        y_int = math.floor(y)
        z_int = math.floor(z)

        min_dist = 2147483647.0
        candidate = (0.0, 0.0, 0.0)

        for cz in range(z_int - 2, z_int + 3):
            for cy in range(y_int - 2, y_int + 3):
                for cx in range(x_int - 2, x_int + 3):
                    px, py, pz = self._seed_point(cx, cy, cz)
                    dx = px - x
                    dy = py - y
                    dz = pz - z
                    dist = dx * dx + dy * dy + dz * dz
                    if dist < min_dist:
                        min_dist = dist
                        candidate = (px, py, pz)

        cx_f, cy_f, cz_f = candidate
        if self.enable_distance:
            dx = cx_f - x
            dy = cy_f - y
            dz = cz_f - z
            value = math.sqrt(dx * dx + dy * dy + dz * dz) * SQRT_3 - 1.0
        else:
            value = 0.0

        return value + self.displacement * value_noise_3d(
            math.floor(cx_f), math.floor(cy_f), math.floor(cz_f)
        )
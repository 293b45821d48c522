"""
Heatmap construction: call and put prices on a regular (spot, vol) grid.

The pipeline:
    1. Sample n evenly spaced spot values and n vol values
    2. For each (vol, spot) cell, copy the base inputs with S and v
       replaced and run the scalar pricer
    3. Store call/put at [vol index, spot index]

Every cell goes through `black_scholes.price`, so a grid cell is exactly
the price a caller would get for that single point. Strike, maturity and
rate stay at the base values across the whole sweep.

Grids are small (5-30 points per axis) and recomputed from scratch on
every call; there is no caching.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd

from . import config
from .black_scholes import PricingParameters, price


# ════════════════════════════════════════════════════════════════════════
#  GRID CONFIGURATION
# ════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AxisRange:
    """Closed interval [min, max] for one swept dimension."""
    min: float
    max: float

    @classmethod
    def from_base(cls, base: float, fractions) -> "AxisRange":
        lo, hi = fractions
        return cls(base * lo, base * hi)

    @property
    def is_ordered(self) -> bool:
        return self.min <= self.max

    def ordered(self) -> "AxisRange":
        """Swap the bounds if the user entered them the wrong way round."""
        if self.is_ordered:
            return self
        return AxisRange(self.max, self.min)


@dataclass(frozen=True)
class HeatmapConfig:
    """Grid size plus the spot and vol ranges to sweep."""
    n: int = config.GRID_SIZE
    spot_range: AxisRange = field(default_factory=lambda: AxisRange.from_base(
        config.DEFAULT_SPOT, config.SPOT_RANGE_FRACTIONS))
    vol_range: AxisRange = field(default_factory=lambda: AxisRange.from_base(
        config.DEFAULT_VOL, config.VOL_RANGE_FRACTIONS))

    @classmethod
    def default(cls, params: PricingParameters, n: Optional[int] = None) -> "HeatmapConfig":
        """Spot over [0.8 S, 1.2 S] and vol over [0.5 v, 1.5 v]."""
        if n is None:
            n = config.GRID_SIZE
        return cls(
            n=n,
            spot_range=AxisRange.from_base(params.S, config.SPOT_RANGE_FRACTIONS),
            vol_range=AxisRange.from_base(params.v, config.VOL_RANGE_FRACTIONS),
        )

    def normalized(self) -> "HeatmapConfig":
        return HeatmapConfig(self.n, self.spot_range.ordered(), self.vol_range.ordered())

    @property
    def in_recommended_band(self) -> bool:
        return config.GRID_SIZE_MIN <= self.n <= config.GRID_SIZE_MAX


# ════════════════════════════════════════════════════════════════════════
#  GRID
# ════════════════════════════════════════════════════════════════════════

@dataclass
class HeatmapGrid:
    """
    Priced grid.

    spot_axis, vol_axis : 1D arrays of length n
    call_map, put_map   : (n, n) arrays, row = vol index, column = spot index
    """
    spot_axis: np.ndarray
    vol_axis: np.ndarray
    call_map: np.ndarray
    put_map: np.ndarray

    @classmethod
    def empty(cls, n: int) -> "HeatmapGrid":
        return cls(
            spot_axis=np.zeros(n),
            vol_axis=np.zeros(n),
            call_map=np.zeros((n, n)),
            put_map=np.zeros((n, n)),
        )

    @property
    def n(self) -> int:
        return len(self.spot_axis)

    def to_frame(self, kind: str = "call") -> pd.DataFrame:
        """
        One price map as a DataFrame: vol down the index, spot across columns.

        Parameters
        ----------
        kind : "call" or "put"
        """
        if kind.lower() in ("c", "call"):
            values = self.call_map
        elif kind.lower() in ("p", "put"):
            values = self.put_map
        else:
            raise ValueError(f"Unknown kind: {kind}. Use 'call' or 'put'.")

        return pd.DataFrame(
            values,
            index=pd.Index(self.vol_axis, name="vol"),
            columns=pd.Index(self.spot_axis, name="spot"),
        )


def axis(rng: AxisRange, n: int) -> np.ndarray:
    """
    n evenly spaced samples over [rng.min, rng.max], both ends included.

    n=1 gives just [rng.min].
    """
    _check_size(n)
    if not rng.is_ordered:
        raise ValueError(f"Inverted range: min={rng.min} > max={rng.max}. Call .ordered() first.")
    return np.linspace(rng.min, rng.max, n)


def generate(
    base: PricingParameters,
    spot_range: AxisRange,
    vol_range: AxisRange,
    n: int,
    out: Optional[HeatmapGrid] = None,
) -> HeatmapGrid:
    """
    Price calls and puts over an n x n (vol, spot) grid.

    Parameters
    ----------
    base : inputs for every cell except S and v
    spot_range : spot sweep, min <= max
    vol_range : vol sweep, min <= max
    n : points per axis, >= 1 (5-30 is the usual range)
    out : optional grid to overwrite in place. Reused only if its size
          is n; otherwise a new grid is allocated.

    Returns
    -------
    HeatmapGrid with call_map[i, j] = price(base with S=spot[j], v=vol[i]).call

    Raises
    ------
    ValueError : n < 1, non-integer n, or an inverted range
    """
    spot_axis = axis(spot_range, n)
    vol_axis = axis(vol_range, n)

    grid = out if out is not None and out.n == n else HeatmapGrid.empty(n)
    grid.spot_axis[:] = spot_axis
    grid.vol_axis[:] = vol_axis

    for i, v in enumerate(vol_axis):
        for j, S in enumerate(spot_axis):
            res = price(base.replace(S=float(S), v=float(v)))
            grid.call_map[i, j] = res.call
            grid.put_map[i, j] = res.put

    return grid


def generate_from_config(base: PricingParameters, cfg: HeatmapConfig,
                         out: Optional[HeatmapGrid] = None) -> HeatmapGrid:
    """Shortcut for generate() with the ranges and size taken from a HeatmapConfig."""
    return generate(base, cfg.spot_range, cfg.vol_range, cfg.n, out=out)


def _check_size(n) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"Grid size must be an integer, got {n!r}.")
    if n < 1:
        raise ValueError(f"Grid size must be >= 1, got {n}.")

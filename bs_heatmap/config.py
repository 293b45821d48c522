"""
Default inputs and limits for the pricer and the heatmap sweep.

Keeps all magic numbers in one place. Override via CLI args in main.py
or by editing this file directly for persistent changes.
"""


# ── market parameters ────────────────────────────────────────────────────
DEFAULT_SPOT = 100.0
DEFAULT_STRIKE = 100.0
DEFAULT_MATURITY = 1.0          # years
DEFAULT_VOL = 0.20              # annualized
DEFAULT_RATE = 0.05             # continuous compounding; may be negative


# ── numerics ─────────────────────────────────────────────────────────────
EPS = 1e-12                     # floor for S, K, T, v before pricing


# ── heatmap sweep ────────────────────────────────────────────────────────
SPOT_RANGE_FRACTIONS = (0.8, 1.2)   # spot axis as fractions of base spot
VOL_RANGE_FRACTIONS = (0.5, 1.5)    # vol axis as fractions of base vol
GRID_SIZE = 10                  # points per axis
GRID_SIZE_MIN = 5               # recommended band, not enforced by the core
GRID_SIZE_MAX = 30


# ── display ──────────────────────────────────────────────────────────────
PRICE_PRECISION = 2             # decimals in printed heatmap tables
GREEK_PRECISION = 6             # decimals for prices/greeks of the current point

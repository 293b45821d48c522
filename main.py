#!/usr/bin/env python3
"""
main.py — Price one option and print call/put heatmaps over spot x vol.

Usage:
    python main.py                                  # defaults: S=K=100, T=1, vol=20%, r=5%
    python main.py --spot 105 --vol 0.3 --grid-size 15
    python main.py --spot-min 90 --spot-max 110 --vol-min 0.1 --vol-max 0.4
"""

import argparse
import sys
import time
import warnings

import pandas as pd

from bs_heatmap import config
from bs_heatmap.black_scholes import PricingParameters, price
from bs_heatmap.heatmap import AxisRange, HeatmapConfig, generate_from_config


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Black-Scholes prices, greeks and spot x vol heatmaps.")
    p.add_argument("--spot", type=float, default=config.DEFAULT_SPOT)
    p.add_argument("--strike", type=float, default=config.DEFAULT_STRIKE)
    p.add_argument("--maturity", type=float, default=config.DEFAULT_MATURITY, help="years")
    p.add_argument("--vol", type=float, default=config.DEFAULT_VOL)
    p.add_argument("--rate", type=float, default=config.DEFAULT_RATE)
    p.add_argument("--grid-size", type=int, default=config.GRID_SIZE)
    p.add_argument("--spot-min", type=float, default=None)
    p.add_argument("--spot-max", type=float, default=None)
    p.add_argument("--vol-min", type=float, default=None)
    p.add_argument("--vol-max", type=float, default=None)
    p.add_argument("--precision", type=int, default=config.PRICE_PRECISION)
    return p.parse_args(argv)


def build_inputs(args):
    """
    Turn CLI args into (PricingParameters, HeatmapConfig).

    Missing sweep bounds fall back to the conventional fractions of the
    base spot/vol. Inverted bounds are swapped here, before the grid
    generator sees them.
    """
    params = PricingParameters(S=args.spot, K=args.strike, T=args.maturity,
                               v=args.vol, r=args.rate)
    default = HeatmapConfig.default(params, n=args.grid_size)

    spot_range = AxisRange(
        args.spot_min if args.spot_min is not None else default.spot_range.min,
        args.spot_max if args.spot_max is not None else default.spot_range.max,
    )
    vol_range = AxisRange(
        args.vol_min if args.vol_min is not None else default.vol_range.min,
        args.vol_max if args.vol_max is not None else default.vol_range.max,
    )
    cfg = HeatmapConfig(args.grid_size, spot_range, vol_range).normalized()
    return params, cfg


def main(argv=None):
    args = parse_args(argv)

    print(f"\n{'='*60}")
    print(f"  Black-Scholes Pricing Model")
    print(f"{'='*60}\n")

    t0 = time.time()

    # step 1: inputs
    print("[1/3] Inputs")
    params, cfg = build_inputs(args)

    g = config.GREEK_PRECISION
    print(f"       Current Asset Price (S):  {params.S:.{g}f}")
    print(f"       Strike Price (K):         {params.K:.{g}f}")
    print(f"       Time to Maturity (T):     {params.T:.{g}f}")
    print(f"       Volatility (v):           {params.v:.{g}f}")
    print(f"       Risk-Free Rate (r):       {params.r:.{g}f}")

    # step 2: current point
    print("\n[2/3] Prices")
    out = price(params)
    if out.clamped:
        warnings.warn(
            "S, K, T or v is at or below zero; priced with those inputs floored at "
            f"{config.EPS:g}."
        )
    print(f"       CALL Value:  ${out.call:.4f}")
    print(f"       PUT Value:   ${out.put:.4f}")
    print(f"       Call Delta: {out.call_delta:.{g}f} | Put Delta: {out.put_delta:.{g}f} "
          f"| Gamma: {out.gamma:.{g}f}")

    # step 3: heatmaps
    print(f"\n[3/3] Heatmaps (spot x volatility, {cfg.n} x {cfg.n})")
    if not cfg.in_recommended_band:
        warnings.warn(
            f"Grid size {cfg.n} is outside the usual {config.GRID_SIZE_MIN}-"
            f"{config.GRID_SIZE_MAX} range."
        )
    try:
        grid = generate_from_config(params, cfg)
    except ValueError as e:
        print(f"\n  ERROR: {e}")
        return 1

    print(f"       Spot: {cfg.spot_range.min:.4f} - {cfg.spot_range.max:.4f}")
    print(f"       Vol:  {cfg.vol_range.min:.4f} - {cfg.vol_range.max:.4f}")

    with pd.option_context("display.precision", args.precision,
                           "display.width", 200,
                           "display.max_columns", None):
        for kind in ("call", "put"):
            print(f"\n  {kind.upper()} price heatmap")
            print(grid.to_frame(kind).iloc[::-1].to_string())

    elapsed = time.time() - t0
    print(f"\n  Done in {elapsed:.3f}s.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
bs-heatmap
==========
Black-Scholes pricing and spot x volatility price heatmaps.

Modules:
    black_scholes  - Pricing inputs/outputs, normal PDF/CDF, closed-form pricer
    heatmap        - Axis sampling and call/put price grids
    config         - Default inputs, sweep fractions and grid limits
"""

__version__ = "0.1.0"
__author__ = "bs-heatmap developers"

"""
Shared test fixtures and pytest configuration.
"""

import pytest

from bs_heatmap.black_scholes import PricingParameters
from bs_heatmap.heatmap import AxisRange


@pytest.fixture
def base_params():
    """Textbook ATM option: S=K=100, T=1, vol=20%, r=5%."""
    return PricingParameters(S=100.0, K=100.0, T=1.0, v=0.2, r=0.05)


@pytest.fixture
def spot_range():
    return AxisRange(80.0, 120.0)


@pytest.fixture
def vol_range():
    return AxisRange(0.1, 0.3)

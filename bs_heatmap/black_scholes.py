"""
Black-Scholes pricing and greeks for European options.

Everything here is closed-form. A single call to `price` returns both
option values plus call/put delta and gamma for one set of inputs.

Degenerate inputs are not errors: spot, strike, maturity and vol are
floored at config.EPS before use, so the formula never divides by zero
or takes the log of a non-positive number. The rate is left alone and
may be negative. `PricingResult.clamped` tells the caller whether the
floor changed anything.

References:
    Black, F. & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Hull, J.C. (2018). Options, Futures, and Other Derivatives. 10th ed.
"""

from dataclasses import dataclass, replace as _replace, asdict

import numpy as np
from scipy.special import erf

from . import config


INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)
SQRT_2 = np.sqrt(2.0)


# ════════════════════════════════════════════════════════════════════════
#  NORMAL DISTRIBUTION
# ════════════════════════════════════════════════════════════════════════

def norm_pdf(x: float) -> float:
    """Standard normal density, phi(x) = exp(-x^2 / 2) / sqrt(2 pi)."""
    return INV_SQRT_2PI * np.exp(-0.5 * x * x)


def norm_cdf(x: float) -> float:
    """Standard normal CDF via the error function: 0.5 * (1 + erf(x / sqrt 2))."""
    return 0.5 * (1.0 + erf(x / SQRT_2))


# ════════════════════════════════════════════════════════════════════════
#  INPUTS / OUTPUTS
# ════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PricingParameters:
    """
    One set of Black-Scholes inputs.

    Parameters
    ----------
    S : spot price
    K : strike price
    T : time to expiry in years
    v : volatility (annualized)
    r : risk-free rate (annualized, continuous compounding)
    """
    S: float = config.DEFAULT_SPOT
    K: float = config.DEFAULT_STRIKE
    T: float = config.DEFAULT_MATURITY
    v: float = config.DEFAULT_VOL
    r: float = config.DEFAULT_RATE

    def replace(self, **changes) -> "PricingParameters":
        """Copy with some fields changed. Used per cell by the heatmap sweep."""
        return _replace(self, **changes)

    def clamped(self) -> "PricingParameters":
        """The inputs the pricer actually uses: S, K, T, v floored at EPS."""
        return PricingParameters(
            S=max(self.S, config.EPS),
            K=max(self.K, config.EPS),
            T=max(self.T, config.EPS),
            v=max(self.v, config.EPS),
            r=self.r,
        )


@dataclass(frozen=True)
class PricingResult:
    """
    Output of one pricing call.

    gamma is shared by calls and puts. `clamped` is diagnostic only:
    the numbers are the same whether or not anyone looks at it.
    """
    call: float
    put: float
    call_delta: float
    put_delta: float
    gamma: float
    clamped: bool = False

    def as_dict(self) -> dict:
        d = asdict(self)
        d.pop("clamped")
        return d


# ════════════════════════════════════════════════════════════════════════
#  PRICING
# ════════════════════════════════════════════════════════════════════════

def d1_d2(S: float, K: float, T: float, r: float, sigma: float):
    """
    Compute (d1, d2) for already-clamped inputs.

    d1 = (ln(S/K) + (r + sigma^2 / 2) T) / (sigma sqrt(T))
    d2 = d1 - sigma sqrt(T)
    """
    sqrt_T = np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / (sigma * sqrt_T)
    return d1, d1 - sigma * sqrt_T


def price(params: PricingParameters) -> PricingResult:
    """
    European call/put prices, deltas and gamma under Black-Scholes.

    Never raises for real-valued input. Zero or negative S, K, T, v
    are floored at config.EPS, so T=0 prices exactly like T=1e-12.

    Parameters
    ----------
    params : PricingParameters

    Returns
    -------
    PricingResult
    """
    p = params.clamped()
    S, K, T, sigma, r = p.S, p.K, p.T, p.v, p.r

    sqrt_T = np.sqrt(T)
    d1, d2 = d1_d2(S, K, T, r, sigma)
    disc = np.exp(-r * T)

    call = S * norm_cdf(d1) - K * disc * norm_cdf(d2)
    put = K * disc * norm_cdf(-d2) - S * norm_cdf(-d1)

    call_delta = norm_cdf(d1)
    put_delta = call_delta - 1.0

    gamma = norm_pdf(d1) / (S * sigma * sqrt_T)

    return PricingResult(
        call=float(call),
        put=float(put),
        call_delta=float(call_delta),
        put_delta=float(put_delta),
        gamma=float(gamma),
        clamped=p != params,
    )

"""DCF helpers: NPV, IRR, payback month.

Cash series convention: index 0 is the investment month and is not
discounted; index t is discounted by (1 + r)^t at the monthly rate r.

Key formulas:
  NPV     = Σ CF_t / (1 + r)^t
  NPV'(r) = Σ −t · CF_t / (1 + r)^(t+1)
  IRR     = rate where NPV = 0 (Newton-Raphson, bisection fallback)
  Payback = first t where Σ_{k≤t} CF_k ≥ 0
"""

from __future__ import annotations

import logging
import math

import numpy as np

from swap_econ.models.results import IRRResult

logger = logging.getLogger(__name__)

NEWTON_MAX_ITER = 100
NEWTON_STEP_TOL = 1e-6
NEWTON_MIN_SLOPE = 1e-9

BISECTION_LOW = -0.99
BISECTION_HIGH = 10.0
BISECTION_MAX_ITER = 200
BISECTION_NPV_TOL = 1e-6


def monthly_rate(discount_rate_pct: float) -> float:
    """Simple monthly rate from an annual percentage (18 → 0.015)."""
    return discount_rate_pct / 100 / 12


def _discount_factors(rate: float, n: int, shift: int = 0) -> np.ndarray:
    # Overflow / division by zero degrade to inf or nan, checked by callers.
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return np.power(1.0 + rate, -(np.arange(n, dtype=np.float64) + shift))


def compute_npv(cash_flows: list[float], rate_monthly: float) -> float:
    """Net present value of a monthly cash series at a monthly rate.

    Returns 0.0 for an empty series.
    """
    if not cash_flows:
        return 0.0
    cf = np.asarray(cash_flows, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sum(cf * _discount_factors(rate_monthly, len(cf))))


def _npv_derivative(cash_flows: list[float], rate: float) -> float:
    cf = np.asarray(cash_flows, dtype=np.float64)
    t = np.arange(len(cf), dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sum(-t * cf * _discount_factors(rate, len(cf), shift=1)))


def _newton(cash_flows: list[float], guess: float) -> IRRResult | None:
    """Newton-Raphson from ``guess``; None when it stalls or diverges."""
    r = guess
    for i in range(NEWTON_MAX_ITER):
        fv = compute_npv(cash_flows, r)
        slope = _npv_derivative(cash_flows, r)
        if not (math.isfinite(fv) and math.isfinite(slope)) or abs(slope) < NEWTON_MIN_SLOPE:
            logger.debug("IRR newton stalled at r=%s (slope=%s) after %d iterations", r, slope, i)
            return None
        nxt = r - fv / slope
        # Rates at or below −100% make (1 + r)^t meaningless.
        if not math.isfinite(nxt) or nxt <= -1:
            logger.debug("IRR newton diverged to r=%s after %d iterations", nxt, i + 1)
            return None
        if abs(nxt - r) < NEWTON_STEP_TOL:
            return IRRResult(rate=nxt, method="newton", iterations=i + 1)
        r = nxt
    logger.debug("IRR newton hit the %d-iteration cap", NEWTON_MAX_ITER)
    return None


def _bisection(cash_flows: list[float]) -> IRRResult:
    """Bisection over [−0.99, 10]; undefined without a verified sign change."""
    lo, hi = BISECTION_LOW, BISECTION_HIGH
    f_lo = compute_npv(cash_flows, lo)
    f_hi = compute_npv(cash_flows, hi)
    # Written as "not <= 0" so a nan endpoint also counts as no sign change.
    if not f_lo * f_hi <= 0:
        logger.debug("IRR undefined: no sign change on [%s, %s]", lo, hi)
        return IRRResult(rate=None)

    for i in range(BISECTION_MAX_ITER):
        mid = (lo + hi) / 2
        f_mid = compute_npv(cash_flows, mid)
        if abs(f_mid) < BISECTION_NPV_TOL:
            return IRRResult(rate=mid, method="bisection", iterations=i + 1)
        if f_lo * f_mid < 0:
            hi = mid
        else:
            lo, f_lo = mid, f_mid

    logger.debug("IRR undefined: bisection did not reach |NPV| < %s", BISECTION_NPV_TOL)
    return IRRResult(rate=None)


def compute_irr(cash_flows: list[float], guess: float = 0.02) -> IRRResult:
    """Monthly internal rate of return.

    Tries Newton-Raphson first, then falls back to bisection.  The result
    carries ``defined=False`` (``rate=None``) when no real root is found,
    which is a normal outcome for cash series that never change sign.
    """
    if len(cash_flows) < 2:
        return IRRResult(rate=None)

    result = _newton(cash_flows, guess)
    if result is not None:
        return result
    return _bisection(cash_flows)


def compute_payback_month(cash_flows: list[float]) -> int | None:
    """First index where cumulative cash is ≥ 0.

    Returns None if the running sum never turns non-negative.
    """
    cumulative = 0.0
    for t, cf in enumerate(cash_flows):
        cumulative += cf
        if cumulative >= 0:
            return t
    return None

"""couponlegs public API."""

from .cashflows import (
    AccrualPeriod,
    CmsCoupon,
    CmsLeg,
    Coupon,
    FixedLeg,
    FixedRateCoupon,
    FloatingLeg,
    FloatingRateCoupon,
    IndexFixing,
    SwapLeg,
    accrual_periods,
    attach_swaption_volatility,
    cms_in_arrears_leg,
    cms_leg,
    cms_zero_leg,
    fixed_rate_leg,
    floating_rate_leg,
    resolve,
)
from .diagnostics import leg_table
from .errors import ConfigurationError, InvariantViolation

__all__ = [
    "resolve",
    "AccrualPeriod",
    "accrual_periods",
    "IndexFixing",
    "Coupon",
    "FixedRateCoupon",
    "FloatingRateCoupon",
    "CmsCoupon",
    "fixed_rate_leg",
    "floating_rate_leg",
    "cms_leg",
    "cms_zero_leg",
    "cms_in_arrears_leg",
    "attach_swaption_volatility",
    "SwapLeg",
    "FixedLeg",
    "FloatingLeg",
    "CmsLeg",
    "leg_table",
    "ConfigurationError",
    "InvariantViolation",
]

"""Coupon leg building blocks."""

from .broadcast import as_values, resolve
from .coupons import CmsCoupon, Coupon, FixedRateCoupon, FloatingRateCoupon, IndexFixing
from .periods import AccrualPeriod, accrual_periods
from .swap_leg import (
    AmortizedFixedLeg,
    AmortizedFloatingLeg,
    AmortizedSwapLeg,
    CmsLeg,
    FixedLeg,
    FloatingLeg,
    SwapLeg,
)
from .vectors import (
    attach_swaption_volatility,
    cms_in_arrears_leg,
    cms_leg,
    cms_zero_leg,
    fixed_rate_leg,
    floating_rate_leg,
)

__all__ = [
    "as_values",
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
    "AmortizedSwapLeg",
    "AmortizedFixedLeg",
    "AmortizedFloatingLeg",
]

import couponlegs
from couponlegs.cashflows.swap_leg import CmsLeg, FixedLeg, FloatingLeg


def test_api_surface() -> None:
    for name in (
        "fixed_rate_leg",
        "floating_rate_leg",
        "cms_leg",
        "cms_zero_leg",
        "cms_in_arrears_leg",
        "attach_swaption_volatility",
        "resolve",
        "accrual_periods",
        "ConfigurationError",
        "InvariantViolation",
    ):
        assert hasattr(couponlegs, name)
    assert hasattr(FixedLeg, "coupons")
    assert hasattr(FloatingLeg, "with_index")
    assert hasattr(CmsLeg, "debug")
    assert issubclass(couponlegs.ConfigurationError, ValueError)
    assert issubclass(couponlegs.InvariantViolation, RuntimeError)

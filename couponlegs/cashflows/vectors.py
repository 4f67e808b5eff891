"""
Schedule-driven leg builders.

Every builder resolves its per-period parameters with the hold-last-value
rule of :func:`couponlegs.cashflows.broadcast.resolve`, using the 0-based
index of the period:

    nominals = [1000]         -> 1000   1000   1000   1000
    rates    = [0.03, 0.035]  -> 0.03   0.035  0.035  0.035
                                 P0     P1     P2     P3

The fixed-rate and CMS builders walk the accrual periods of
:func:`couponlegs.cashflows.periods.accrual_periods`; the floating-rate builder
hands the same inputs to QuantLib's ``IborLeg``.

Inputs are validated and normalized before any coupon is built, so a failing
call never leaves a partial leg behind.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

from QuantLib import (
    DayCounter,
    IborIndex,
    IborLeg,
    Schedule,
    SwapIndex,
    SwaptionVolatilityStructureHandle,
    as_floating_rate_coupon,
)

from couponlegs import config
from couponlegs.cashflows.broadcast import Values, as_values, resolve
from couponlegs.cashflows.coupons import (
    CmsCoupon,
    Coupon,
    FixedRateCoupon,
    FloatingRateCoupon,
    IndexFixing,
)
from couponlegs.cashflows.periods import accrual_periods
from couponlegs.errors import ConfigurationError, InvariantViolation

logger = logging.getLogger(__name__)


def _require(values: Values, name: str) -> tuple:
    resolved = as_values(values)
    if not resolved:
        raise ConfigurationError(f"'{name}' not specified")
    return resolved


def _index_fixing(index_fixing: IndexFixing | str | None) -> IndexFixing:
    value = config.INDEX_FIXING if index_fixing is None else index_fixing
    try:
        return IndexFixing(value)
    except ValueError:
        raise ConfigurationError(
            f"unknown index fixing {value!r}, expected one of "
            f"{[f.value for f in IndexFixing]}"
        ) from None


def fixed_rate_leg(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        coupon_rates: Values,
        day_counter: DayCounter,
        first_period_day_counter: Optional[DayCounter] = None,
) -> tuple[FixedRateCoupon, ...]:
    """
    Build a leg of fixed-rate coupons.

    ``first_period_day_counter`` only applies to an irregular first period;
    passing one that differs from ``day_counter`` for a regular first period
    is a configuration error.
    """
    rates = _require(coupon_rates, "coupon_rates")
    nominals = _require(nominals, "nominals")
    periods = accrual_periods(schedule, payment_adjustment)

    if (
        periods[0].is_regular
        and first_period_day_counter is not None
        and first_period_day_counter != day_counter
    ):
        raise ConfigurationError(
            "regular first coupon does not allow a first-period day count"
        )

    leg = []
    for period in periods:
        dc = day_counter
        if period.index == 0 and first_period_day_counter is not None:
            dc = first_period_day_counter
        leg.append(
            FixedRateCoupon(
                nominal=resolve(nominals, period.index),
                payment_date=period.payment_date,
                accrual_start_date=period.accrual_start,
                accrual_end_date=period.accrual_end,
                reference_start_date=period.reference_start,
                reference_end_date=period.reference_end,
                day_counter=dc,
                rate=resolve(rates, period.index),
            )
        )
    logger.debug("Built %d fixed-rate coupons", len(leg))
    return tuple(leg)


def floating_rate_leg(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        fixing_days: int,
        index: IborIndex,
        gearings: Values = None,
        spreads: Values = None,
        day_counter: Optional[DayCounter] = None,
        *,
        index_fixing: IndexFixing | str | None = None,
) -> tuple[FloatingRateCoupon, ...]:
    """
    Build a leg of Ibor-indexed coupons.

    The coupons are assembled by QuantLib's ``IborLeg``, which applies the
    same stub, broadcast and payment rules as the other builders, and are
    then read back into :class:`FloatingRateCoupon` values.

    ``index_fixing`` selects the coupon representation for the whole leg:
    fixing at period start (up front) or at period end (in arrears). When
    omitted, the package default from :mod:`couponlegs.config` is used.
    """
    nominals = _require(nominals, "nominals")
    gearings = as_values(gearings)
    spreads = as_values(spreads)
    fixing = _index_fixing(index_fixing)
    # IborLeg turns zero-gearing periods into fixed-rate coupons
    if any(g == 0.0 for g in gearings):
        raise ConfigurationError("gearings must be non-zero for a floating leg")
    if day_counter is None:
        day_counter = index.dayCounter()

    cashflows = IborLeg(
        nominals=list(nominals),
        schedule=schedule,
        index=index,
        paymentDayCounter=day_counter,
        paymentConvention=payment_adjustment,
        fixingDays=[fixing_days],
        gearings=list(gearings),
        spreads=list(spreads),
        isInArrears=fixing is IndexFixing.IN_ARREARS,
    )

    leg = []
    for i, cf in enumerate(cashflows):
        c = as_floating_rate_coupon(cf)
        if c is None:
            raise InvariantViolation(
                f"IborLeg produced a non-floating cash flow at position {i}"
            )
        leg.append(
            FloatingRateCoupon(
                nominal=c.nominal(),
                payment_date=c.date(),
                accrual_start_date=c.accrualStartDate(),
                accrual_end_date=c.accrualEndDate(),
                reference_start_date=c.referencePeriodStart(),
                reference_end_date=c.referencePeriodEnd(),
                day_counter=day_counter,
                index=index,
                fixing_days=c.fixingDays(),
                gearing=c.gearing(),
                spread=c.spread(),
                index_fixing=fixing,
            )
        )
    logger.debug("Built %d floating-rate coupons (%s)", len(leg), fixing.value)
    return tuple(leg)


def attach_swaption_volatility(
        coupons: Iterable[Coupon],
        volatility: SwaptionVolatilityStructureHandle,
) -> tuple[CmsCoupon, ...]:
    """
    Return ``coupons`` with ``volatility`` attached to each of them.

    Every coupon refers to the very same ``volatility`` object. Meeting
    anything other than a :class:`CmsCoupon` means a builder produced a mixed
    leg and raises :class:`InvariantViolation`.
    """
    if volatility is None:
        raise ConfigurationError("'volatility' not specified")
    attached = []
    for i, coupon in enumerate(coupons):
        if not isinstance(coupon, CmsCoupon):
            raise InvariantViolation(
                f"unexpected {type(coupon).__name__} at position {i} "
                "when attaching swaption volatility to a CMS leg"
            )
        attached.append(replace(coupon, volatility=volatility))
    return tuple(attached)


def _cms_coupons(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        swap_index: SwapIndex,
        fixing_days: int,
        day_counter: DayCounter,
        gearings: Values,
        spreads: Values,
        caps: Values,
        floors: Values,
        mean_reversions: Values,
        pricer: Any,
        volatility: SwaptionVolatilityStructureHandle,
        *,
        in_arrears: bool = False,
        pay_at_maturity: bool = False,
) -> tuple[CmsCoupon, ...]:
    nominals = _require(nominals, "nominals")
    if pricer is None:
        raise ConfigurationError("'pricer' not specified")
    if volatility is None:
        raise ConfigurationError("'volatility' not specified")
    gearings = as_values(gearings)
    spreads = as_values(spreads)
    caps = as_values(caps)
    floors = as_values(floors)
    mean_reversions = as_values(mean_reversions)

    # stub reference dates roll with the payment convention on CMS legs
    periods = accrual_periods(
        schedule,
        payment_adjustment,
        reference_adjustment=payment_adjustment,
        pay_at_maturity=pay_at_maturity,
    )
    coupons = [
        CmsCoupon(
            nominal=resolve(nominals, period.index),
            payment_date=period.payment_date,
            accrual_start_date=period.accrual_start,
            accrual_end_date=period.accrual_end,
            reference_start_date=period.reference_start,
            reference_end_date=period.reference_end,
            day_counter=day_counter,
            swap_index=swap_index,
            fixing_days=fixing_days,
            gearing=resolve(gearings, period.index, 1.0),
            spread=resolve(spreads, period.index, 0.0),
            cap=resolve(caps, period.index),
            floor=resolve(floors, period.index),
            mean_reversion=resolve(mean_reversions, period.index),
            pricer=pricer,
            is_in_arrears=in_arrears,
        )
        for period in periods
    ]
    leg = attach_swaption_volatility(coupons, volatility)
    logger.debug(
        "Built %d CMS coupons (in arrears: %s, paid at maturity: %s)",
        len(leg),
        in_arrears,
        pay_at_maturity,
    )
    return leg


def cms_leg(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        swap_index: SwapIndex,
        settlement_days: int,
        day_counter: DayCounter,
        gearings: Values = None,
        spreads: Values = None,
        caps: Values = None,
        floors: Values = None,
        mean_reversions: Values = None,
        *,
        pricer: Any,
        volatility: SwaptionVolatilityStructureHandle,
) -> tuple[CmsCoupon, ...]:
    """Build a leg of CMS coupons fixing at period start."""
    return _cms_coupons(
        schedule,
        payment_adjustment,
        nominals,
        swap_index,
        settlement_days,
        day_counter,
        gearings,
        spreads,
        caps,
        floors,
        mean_reversions,
        pricer,
        volatility,
    )


def cms_zero_leg(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        swap_index: SwapIndex,
        fixing_days: int,
        day_counter: DayCounter,
        gearings: Values = None,
        spreads: Values = None,
        caps: Values = None,
        floors: Values = None,
        mean_reversions: Values = None,
        *,
        pricer: Any,
        volatility: SwaptionVolatilityStructureHandle,
) -> tuple[CmsCoupon, ...]:
    """Build a leg of CMS coupons all paid on the final schedule date."""
    return _cms_coupons(
        schedule,
        payment_adjustment,
        nominals,
        swap_index,
        fixing_days,
        day_counter,
        gearings,
        spreads,
        caps,
        floors,
        mean_reversions,
        pricer,
        volatility,
        pay_at_maturity=True,
    )


def cms_in_arrears_leg(
        schedule: Schedule,
        payment_adjustment: int,
        nominals: Values,
        swap_index: SwapIndex,
        fixing_days: int,
        day_counter: DayCounter,
        gearings: Values = None,
        spreads: Values = None,
        caps: Values = None,
        floors: Values = None,
        mean_reversions: Values = None,
        *,
        pricer: Any,
        volatility: SwaptionVolatilityStructureHandle,
) -> tuple[CmsCoupon, ...]:
    """Build a leg of CMS coupons fixing at period end."""
    return _cms_coupons(
        schedule,
        payment_adjustment,
        nominals,
        swap_index,
        fixing_days,
        day_counter,
        gearings,
        spreads,
        caps,
        floors,
        mean_reversions,
        pricer,
        volatility,
        in_arrears=True,
    )


__all__ = [
    "fixed_rate_leg",
    "floating_rate_leg",
    "cms_leg",
    "cms_zero_leg",
    "cms_in_arrears_leg",
    "attach_swaption_volatility",
]

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, Literal, Optional

from pandas import option_context
from QuantLib import (
    Calendar,
    CashFlow,
    Date,
    DateGeneration,
    DayCounter,
    IborIndex,
    ModifiedFollowing,
    Period,
    Preceding,
    Schedule,
    SwapIndex,
    SwaptionVolatilityStructureHandle,
)

from couponlegs.cashflows.coupons import (
    CmsCoupon,
    Coupon,
    FixedRateCoupon,
    FloatingRateCoupon,
    IndexFixing,
)
from couponlegs.cashflows.vectors import (
    cms_in_arrears_leg,
    cms_leg,
    cms_zero_leg,
    fixed_rate_leg,
    floating_rate_leg,
)
from couponlegs.diagnostics import leg_table
from couponlegs.errors import ConfigurationError

# Standard schedule construction parameters used across legs
_CONVENTION = ModifiedFollowing
_TERMINATION_CONVENTION = Preceding
_RULE = DateGeneration.Forward
_END_OF_MONTH = False

CmsStyle = Literal["standard", "zero", "in_arrears"]


@dataclass(frozen=True, kw_only=True)
class SwapLeg:
    """
    Base class describing a swap-leg by its terms.

    The class represents the following structure

                     D1    D2    D3        DL
      issue_date ... | ... | ... | ... ... | maturity
                     P1    P2    P3        PL

    where D1 through DL are schedule dates generated from `issue_date`,
    `maturity` and `tenor`, and P1 through PL are the accrual periods ending
    on them. Each period carries its own nominal; coupons are built from the
    schedule and the per-period nominals by the leg builders.
    """

    issue_date: Date
    maturity: Date
    tenor: Period
    calendar: Calendar
    day_counter: DayCounter
    nominal: float
    payment_adjustment: int = ModifiedFollowing

    def __post_init__(self):
        if self.nominal < 0:
            raise ConfigurationError("'nominal' must be positive")

    @cached_property
    def schedule(self) -> Schedule:
        """Returns a schedule with all period dates according to swap-leg settings."""
        return Schedule(
            self.issue_date,
            self.maturity,
            self.tenor,
            self.calendar,
            _CONVENTION,
            _TERMINATION_CONVENTION,
            _RULE,
            _END_OF_MONTH,
        )

    @property
    def period_count(self) -> int:
        return len(self.schedule.dates()) - 1

    @property
    def nominals(self) -> tuple[float, ...]:
        """Returns the fixed nominal value of the swap-leg for every period."""
        return tuple(self.nominal for _ in range(self.period_count))

    @staticmethod
    def debug(coupons: tuple[Coupon, ...]) -> None:
        """Display detailed information about provided coupons."""
        df = leg_table(coupons)
        with option_context("display.float_format", "{:,.2f}".format):
            print(df)


@dataclass(frozen=True, kw_only=True)
class FloatingLeg(SwapLeg):
    """Class that represents a floating leg in a swap contract."""

    index: IborIndex
    gearing: float = 1.0
    spread: float = 0.0
    fixing_days: Optional[int] = None
    index_fixing: Optional[IndexFixing] = None

    def __post_init__(self):
        super().__post_init__()
        if self.gearing == 0.0:
            raise ConfigurationError("gearing must be non-zero for floating leg")

    # To use to create a new leg with new index
    # DO NOT MODIFY INDEX ATTRIBUTE AFTER CREATION
    # Else cached coupons won't be bound to the updated index if you do
    def with_index(self, index: IborIndex) -> FloatingLeg:
        return replace(self, index=index)

    @cached_property
    def coupons(self) -> tuple[FloatingRateCoupon, ...]:
        """
        Returns the floating-rate coupons of the leg.

        Fixing days default to the settlement days of `index`, so Libor-like
        indices fix two business days before the period starts (or ends, for
        in-arrears coupons) while overnight indices fix on the day.
        """
        fixing_days = (
            self.index.fixingDays() if self.fixing_days is None else self.fixing_days
        )
        return floating_rate_leg(
            self.schedule,
            self.payment_adjustment,
            self.nominals,
            fixing_days,
            self.index,
            gearings=self.gearing,
            spreads=self.spread,
            day_counter=self.day_counter,
            index_fixing=self.index_fixing,
        )

    @property
    def cashflows(self) -> tuple[CashFlow, ...]:
        """Returns the coupons as QuantLib cash flows, ready for a pricer."""
        return tuple(c.to_cashflow() for c in self.coupons)


@dataclass(frozen=True, kw_only=True)
class FixedLeg(SwapLeg):
    """Class that represents a fixed leg in a swap contract."""

    rate: float
    first_period_day_counter: Optional[DayCounter] = None

    @cached_property
    def coupons(self) -> tuple[FixedRateCoupon, ...]:
        """Returns the fixed-rate coupons of the leg."""
        return fixed_rate_leg(
            self.schedule,
            self.payment_adjustment,
            self.nominals,
            self.rate,
            self.day_counter,
            self.first_period_day_counter,
        )

    @property
    def cashflows(self) -> tuple[CashFlow, ...]:
        """Returns the coupons as QuantLib cash flows."""
        return tuple(c.to_cashflow() for c in self.coupons)


@dataclass(frozen=True, kw_only=True)
class CmsLeg(SwapLeg):
    """
    Class that represents a leg paying constant-maturity-swap coupons.

    `style` picks the payment profile:

    - ``"standard"``: each coupon fixes at period start and pays at period end
    - ``"zero"``: every coupon is paid at maturity
    - ``"in_arrears"``: each coupon fixes at period end
    """

    swap_index: SwapIndex
    fixing_days: int
    pricer: Any
    volatility: SwaptionVolatilityStructureHandle
    gearing: float = 1.0
    spread: float = 0.0
    cap: Optional[float] = None
    floor: Optional[float] = None
    mean_reversion: Optional[float] = None
    style: CmsStyle = "standard"

    def __post_init__(self):
        super().__post_init__()
        if self.style not in ("standard", "zero", "in_arrears"):
            raise ConfigurationError(f"unsupported CMS leg style: {self.style}")
        if self.pricer is None or self.volatility is None:
            raise ConfigurationError("CMS legs need a 'pricer' and a 'volatility'")
        if self.cap is not None and self.floor is not None and self.floor > self.cap:
            raise ConfigurationError("'floor' must not exceed 'cap'")

    @cached_property
    def coupons(self) -> tuple[CmsCoupon, ...]:
        """Returns the CMS coupons of the leg, sharing one volatility handle."""
        build = {
            "standard": cms_leg,
            "zero": cms_zero_leg,
            "in_arrears": cms_in_arrears_leg,
        }[self.style]
        return build(
            self.schedule,
            self.payment_adjustment,
            self.nominals,
            self.swap_index,
            self.fixing_days,
            self.day_counter,
            self.gearing,
            self.spread,
            self.cap,
            self.floor,
            self.mean_reversion,
            pricer=self.pricer,
            volatility=self.volatility,
        )


@dataclass(frozen=True, kw_only=True)
class AmortizedSwapLeg(SwapLeg):
    """
    Base class representing a swap-leg with amortized nominal payment schedule.

    The class extends `SwapLeg` where the initial nominal of the swap is
    amortized according to an amortization schedule

                     D1    D2    D3        DL
      issue_date ... | ... | ... | ... ... | maturity
                  N  ^  N-A   N-2*A     N-K*A     ^
                     |                            |
                     amortization_first_date      amortization_last_date

    where D1, D2, D3 through DL are dates and N is the initial nominal
    amortized with `amortization_amount` A in each `amortization_period`.
    A period accrues on the nominal outstanding at its start date.
    """

    amortization_amount: float
    amortization_period: Period
    amortization_first_date: Date
    amortization_last_date: Date

    def __post_init__(self):
        super().__post_init__()
        if self.amortization_amount < 0:
            raise ConfigurationError("'amortization_amount' must be positive")

    @cached_property
    def amortization_schedule(self) -> Schedule:
        """
        Returns a schedule with all amortization dates according to the
        swap-leg settings.
        """
        return Schedule(
            self.amortization_first_date,
            self.amortization_last_date,
            self.amortization_period,
            self.calendar,
            _CONVENTION,
            _TERMINATION_CONVENTION,
            _RULE,
            _END_OF_MONTH,
        )

    @property
    def nominals(self) -> tuple[float, ...]:
        """Returns amortized nominal values of the swap-leg for every period."""
        amortization_dates = tuple(self.amortization_schedule.dates())
        ns: list[float] = []
        for start in tuple(self.schedule.dates())[:-1]:
            amortized = sum(
                self.amortization_amount
                for amortization_date in amortization_dates
                if amortization_date <= start
            )
            ns.append(max(0.0, float(self.nominal) - float(amortized)))
        return tuple(ns)


@dataclass(frozen=True, kw_only=True)
class AmortizedFloatingLeg(FloatingLeg, AmortizedSwapLeg):
    """Floating leg in a swap contract with amortized nominal."""

    pass


@dataclass(frozen=True, kw_only=True)
class AmortizedFixedLeg(FixedLeg, AmortizedSwapLeg):
    """Fixed leg in a swap contract with amortized nominal."""

    pass


__all__ = [
    "SwapLeg",
    "FixedLeg",
    "FloatingLeg",
    "CmsLeg",
    "AmortizedSwapLeg",
    "AmortizedFixedLeg",
    "AmortizedFloatingLeg",
]

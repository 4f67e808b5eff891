"""Coupon value objects produced by the leg builders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from QuantLib import (
    Date,
    DayCounter,
    Days,
    IborCoupon,
    IborIndex,
    Preceding,
    SwapIndex,
    SwaptionVolatilityStructureHandle,
)
from QuantLib import FixedRateCoupon as QLFixedRateCoupon


class IndexFixing(str, Enum):
    """When the index of a floating-rate coupon is observed."""

    UP_FRONT = "up_front"
    IN_ARREARS = "in_arrears"


@dataclass(frozen=True, kw_only=True, slots=True)
class Coupon:
    """
    Common fields of an accrual-period cash flow.

    The reference dates are passed to the day counter together with the
    accrual dates; they only differ from them on stub periods.
    """

    nominal: float
    payment_date: Date
    accrual_start_date: Date
    accrual_end_date: Date
    reference_start_date: Date
    reference_end_date: Date
    day_counter: DayCounter

    @property
    def accrual_period(self) -> float:
        """Year fraction of the accrual period."""
        return self.day_counter.yearFraction(
            self.accrual_start_date,
            self.accrual_end_date,
            self.reference_start_date,
            self.reference_end_date,
        )

    @property
    def accrual_days(self) -> int:
        return self.day_counter.dayCount(
            self.accrual_start_date, self.accrual_end_date
        )

    @property
    def is_stub(self) -> bool:
        return (
            self.reference_start_date != self.accrual_start_date
            or self.reference_end_date != self.accrual_end_date
        )

    def as_row(self) -> dict[str, Any]:
        return {
            "Date": self.payment_date.ISO(),
            "Nominal": self.nominal,
            "AccrualStartDate": self.accrual_start_date.ISO(),
            "AccrualEndDate": self.accrual_end_date.ISO(),
            "ReferenceStartDate": self.reference_start_date.ISO(),
            "ReferenceEndDate": self.reference_end_date.ISO(),
            "AccrualDays": self.accrual_days,
        }


@dataclass(frozen=True, kw_only=True, slots=True)
class FixedRateCoupon(Coupon):
    """Coupon paying a fixed simple rate."""

    rate: float

    def to_cashflow(self) -> QLFixedRateCoupon:
        """Return the equivalent QuantLib coupon for valuation."""
        return QLFixedRateCoupon(
            self.payment_date,
            self.nominal,
            self.rate,
            self.day_counter,
            self.accrual_start_date,
            self.accrual_end_date,
            self.reference_start_date,
            self.reference_end_date,
        )

    def as_row(self) -> dict[str, Any]:
        return {**Coupon.as_row(self), "Rate": self.rate}


@dataclass(frozen=True, kw_only=True, slots=True)
class FloatingRateCoupon(Coupon):
    """Coupon paying ``gearing * index fixing + spread``."""

    index: IborIndex
    fixing_days: int
    gearing: float = 1.0
    spread: float = 0.0
    index_fixing: IndexFixing = IndexFixing.UP_FRONT

    @property
    def is_in_arrears(self) -> bool:
        return self.index_fixing is IndexFixing.IN_ARREARS

    @property
    def fixing_date(self) -> Date:
        d = self.accrual_end_date if self.is_in_arrears else self.accrual_start_date
        return self.index.fixingCalendar().advance(
            d, -self.fixing_days, Days, Preceding
        )

    def to_cashflow(self) -> IborCoupon:
        """
        Return the equivalent QuantLib coupon for valuation.

        A coupon pricer still has to be set on the result (e.g. through
        ``setCouponPricer``) before it can be priced.
        """
        return IborCoupon(
            self.payment_date,
            self.nominal,
            self.accrual_start_date,
            self.accrual_end_date,
            self.fixing_days,
            self.index,
            self.gearing,
            self.spread,
            self.reference_start_date,
            self.reference_end_date,
            self.day_counter,
            self.is_in_arrears,
        )

    def as_row(self) -> dict[str, Any]:
        return {
            **Coupon.as_row(self),
            "Gearing": self.gearing,
            "Spread": self.spread,
            "FixingDate": self.fixing_date.ISO(),
            "InArrears": self.is_in_arrears,
        }


@dataclass(frozen=True, kw_only=True, slots=True)
class CmsCoupon(Coupon):
    """
    Coupon indexed on a constant-maturity swap rate.

    ``cap``, ``floor`` and ``mean_reversion`` are ``None`` when unset.
    ``volatility`` is shared by every coupon of a leg and is attached once,
    when the leg is built.
    """

    swap_index: SwapIndex
    fixing_days: int
    gearing: float = 1.0
    spread: float = 0.0
    cap: Optional[float] = None
    floor: Optional[float] = None
    mean_reversion: Optional[float] = None
    pricer: Any = None
    is_in_arrears: bool = False
    volatility: Optional[SwaptionVolatilityStructureHandle] = None

    @property
    def fixing_date(self) -> Date:
        d = self.accrual_end_date if self.is_in_arrears else self.accrual_start_date
        return self.swap_index.fixingCalendar().advance(
            d, -self.fixing_days, Days, Preceding
        )

    def as_row(self) -> dict[str, Any]:
        return {
            **Coupon.as_row(self),
            "Gearing": self.gearing,
            "Spread": self.spread,
            "Cap": self.cap,
            "Floor": self.floor,
            "MeanReversion": self.mean_reversion,
            "FixingDate": self.fixing_date.ISO(),
            "InArrears": self.is_in_arrears,
        }


__all__ = [
    "IndexFixing",
    "Coupon",
    "FixedRateCoupon",
    "FloatingRateCoupon",
    "CmsCoupon",
]

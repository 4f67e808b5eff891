"""Accrual-period sequencing over a payment schedule."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from QuantLib import Date, Schedule

from couponlegs.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True, slots=True)
class AccrualPeriod:
    """
    Dates of a single accrual period of a leg.

    The reference interval feeds the day counter. It equals the accrual
    interval except on a stub, where it spans one full schedule tenor:

              reference_start     accrual_start          accrual_end
      ... ... | ..................| ....................| ... regular periods
                                  <------ stub -------->
              <----------------- one tenor ----------->
    """

    index: int
    accrual_start: Date
    accrual_end: Date
    reference_start: Date
    reference_end: Date
    payment_date: Date
    is_regular: bool = True

    @property
    def is_stub(self) -> bool:
        return (
            self.reference_start != self.accrual_start
            or self.reference_end != self.accrual_end
        )


def accrual_periods(
        schedule: Schedule,
        payment_adjustment: int,
        *,
        reference_adjustment: Optional[int] = None,
        pay_at_maturity: bool = False,
) -> tuple[AccrualPeriod, ...]:
    """
    Split ``schedule`` into its accrual periods.

    Only the first and the last period can be irregular. An irregular first
    period takes its reference start one tenor before its accrual end; an
    irregular last period takes its reference end one tenor after its accrual
    start. Both are rolled with ``reference_adjustment``, which defaults to
    the schedule's own business-day convention.

    Payment dates are accrual ends rolled with ``payment_adjustment``, or the
    rolled final schedule date for every period when ``pay_at_maturity`` is
    set.
    """
    dates = tuple(schedule.dates())
    n = len(dates)
    if n < 2:
        raise ConfigurationError(
            f"schedule needs at least two dates to define a period, got {n}"
        )

    calendar = schedule.calendar()
    if reference_adjustment is None:
        reference_adjustment = schedule.businessDayConvention()
    maturity_payment = (
        calendar.adjust(dates[-1], payment_adjustment) if pay_at_maturity else None
    )

    periods: list[AccrualPeriod] = []
    for i in range(n - 1):
        start, end = dates[i], dates[i + 1]
        reference_start, reference_end = start, end
        regular = True
        if i == 0:
            # first period might be short or long
            regular = schedule.isRegular(1)
            if not regular:
                reference_start = calendar.adjust(
                    end - schedule.tenor(), reference_adjustment
                )
                logger.debug(
                    "Irregular first period %s-%s, reference start %s",
                    start.ISO(),
                    end.ISO(),
                    reference_start.ISO(),
                )
        elif i == n - 2:
            # last period might be short or long
            regular = schedule.isRegular(n - 1)
            if not regular:
                reference_end = calendar.adjust(
                    start + schedule.tenor(), reference_adjustment
                )
                logger.debug(
                    "Irregular last period %s-%s, reference end %s",
                    start.ISO(),
                    end.ISO(),
                    reference_end.ISO(),
                )

        payment_date = (
            maturity_payment
            if maturity_payment is not None
            else calendar.adjust(end, payment_adjustment)
        )
        periods.append(
            AccrualPeriod(
                index=i,
                accrual_start=start,
                accrual_end=end,
                reference_start=reference_start,
                reference_end=reference_end,
                payment_date=payment_date,
                is_regular=regular,
            )
        )
    return tuple(periods)


__all__ = ["AccrualPeriod", "accrual_periods"]

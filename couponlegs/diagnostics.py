"""Tabular views of built legs."""

from __future__ import annotations

from typing import Iterable

from pandas import DataFrame

from couponlegs.cashflows.coupons import Coupon


def leg_table(coupons: Iterable[Coupon]) -> DataFrame:
    """Return one row per coupon, indexed by payment date."""
    df = DataFrame(data=(c.as_row() for c in coupons))
    if df.empty:
        return df
    rounding = {
        col: digits
        for col, digits in (
            ("Nominal", 2),
            ("Rate", 6),
            ("Gearing", 2),
            ("Spread", 6),
        )
        if col in df.columns
    }
    return df.round(rounding).set_index("Date")


__all__ = ["leg_table"]

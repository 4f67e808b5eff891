"""Small demo building fixed, floating and CMS legs over the same dates."""

from __future__ import annotations

import logging

import pandas as pd
from QuantLib import (
    TARGET,
    Actual360,
    Actual365Fixed,
    AnalyticHaganPricer,
    ConstantSwaptionVolatility,
    Date,
    Days,
    Euribor6M,
    EuriborSwapIsdaFixA,
    GFunctionFactory,
    ModifiedFollowing,
    Months,
    Period,
    QuoteHandle,
    Settings,
    SimpleQuote,
    SwaptionVolatilityStructureHandle,
    Thirty360,
    Years,
)

from couponlegs import config
from couponlegs.cashflows.swap_leg import CmsLeg, FixedLeg, FloatingLeg
from couponlegs.diagnostics import leg_table


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL)

    as_of = Date.todaysDate()
    Settings.instance().evaluationDate = as_of

    calendar = TARGET()
    issue = calendar.advance(as_of, Period(2, Days))
    maturity = calendar.advance(issue, Period(5, Years))
    notional = 1_000_000
    volatility = SwaptionVolatilityStructureHandle(
        ConstantSwaptionVolatility(
            0, calendar, ModifiedFollowing, 0.2, Actual365Fixed()
        )
    )
    pricer = AnalyticHaganPricer(
        volatility, GFunctionFactory.Standard, QuoteHandle(SimpleQuote(0.0))
    )

    fixed_leg = FixedLeg(
        issue_date=issue,
        maturity=maturity,
        tenor=Period(1, Years),
        calendar=calendar,
        day_counter=Thirty360(Thirty360.BondBasis),
        nominal=notional,
        rate=0.023,
    )
    float_leg = FloatingLeg(
        issue_date=issue,
        maturity=maturity,
        tenor=Period(6, Months),
        calendar=calendar,
        day_counter=Actual360(),
        nominal=notional,
        index=Euribor6M(),
    )
    cms_leg = CmsLeg(
        issue_date=issue,
        maturity=maturity,
        tenor=Period(1, Years),
        calendar=calendar,
        day_counter=Thirty360(Thirty360.BondBasis),
        nominal=notional,
        payment_adjustment=ModifiedFollowing,
        swap_index=EuriborSwapIsdaFixA(Period(10, Years)),
        fixing_days=2,
        floor=0.0,
        pricer=pricer,
        volatility=volatility,
        style="in_arrears",
    )

    for name, leg in (
        ("fixed", fixed_leg),
        ("float", float_leg),
        ("cms", cms_leg),
    ):
        print(f"--- {name} leg ---")
        leg.debug(leg.coupons)

    rows = []
    for name, leg in (("fixed", fixed_leg), ("float", float_leg)):
        df = leg_table(leg.coupons)
        rows.append(df.assign(Leg=name)[["Leg", "Nominal", "AccrualDays"]])
    print(pd.concat(rows).sort_index())


if __name__ == "__main__":
    main()

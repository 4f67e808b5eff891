import QuantLib as ql

from couponlegs.cashflows.vectors import cms_leg, fixed_rate_leg
from couponlegs.diagnostics import leg_table


def test_fixed_leg_table(quarterly_schedule) -> None:
    leg = fixed_rate_leg(
        quarterly_schedule, ql.Following, [1000], [0.03, 0.035], ql.Actual360()
    )
    df = leg_table(leg)

    assert df.index.name == "Date"
    assert list(df.index) == [c.payment_date.ISO() for c in leg]
    assert list(df.Rate) == [0.03, 0.035, 0.035, 0.035]
    assert list(df.AccrualDays) == [c.accrual_days for c in leg]


def test_cms_leg_table(
        quarterly_schedule, swap_index, volatility, cms_pricer
) -> None:
    leg = cms_leg(
        quarterly_schedule,
        ql.Following,
        [1000],
        swap_index,
        2,
        ql.Actual360(),
        caps=[0.05],
        pricer=cms_pricer,
        volatility=volatility,
    )
    df = leg_table(leg)

    assert {"Gearing", "Spread", "Cap", "Floor", "InArrears"} <= set(df.columns)
    assert list(df.Cap) == [0.05] * 4
    assert not df.InArrears.any()


def test_empty_leg_table() -> None:
    assert leg_table(()).empty

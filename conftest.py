import sys
from pathlib import Path

import pytest
import QuantLib as ql

# Ensure the project root is on sys.path when tests are executed
# via the `pytest` entry script.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _schedule_from_dates(dates, tenor, is_regular, convention=ql.ModifiedFollowing):
    return ql.Schedule(
        dates,
        ql.TARGET(),
        convention,
        convention,
        tenor,
        ql.DateGeneration.Backward,
        False,
        is_regular,
    )


@pytest.fixture
def quarterly_schedule() -> ql.Schedule:
    """15 Jan 2020 to 15 Jan 2021, five dates, all periods regular."""
    return ql.Schedule(
        ql.Date(15, 1, 2020),
        ql.Date(15, 1, 2021),
        ql.Period(3, ql.Months),
        ql.TARGET(),
        ql.ModifiedFollowing,
        ql.ModifiedFollowing,
        ql.DateGeneration.Forward,
        False,
    )


@pytest.fixture
def short_first_schedule() -> ql.Schedule:
    """6M schedule opening with a 3M stub; 20 Apr 2020 - 6M is a Sunday."""
    dates = [
        ql.Date(20, 1, 2020),
        ql.Date(20, 4, 2020),
        ql.Date(20, 10, 2020),
        ql.Date(20, 4, 2021),
    ]
    return _schedule_from_dates(dates, ql.Period(6, ql.Months), [False, True, True])


@pytest.fixture
def short_last_schedule() -> ql.Schedule:
    """6M schedule closing with a 2M stub."""
    dates = [
        ql.Date(20, 1, 2020),
        ql.Date(20, 7, 2020),
        ql.Date(20, 1, 2021),
        ql.Date(19, 3, 2021),
    ]
    return _schedule_from_dates(dates, ql.Period(6, ql.Months), [True, True, False])


@pytest.fixture
def unadjusted_monthly_schedule() -> ql.Schedule:
    """Monthly dates left on weekends (15 Feb and 15 Mar 2020)."""
    dates = [
        ql.Date(15, 1, 2020),
        ql.Date(15, 2, 2020),
        ql.Date(15, 3, 2020),
        ql.Date(15, 4, 2020),
    ]
    return _schedule_from_dates(
        dates, ql.Period(1, ql.Months), [True, True, True], ql.Unadjusted
    )


@pytest.fixture
def single_stub_schedule() -> ql.Schedule:
    """Two dates only: one 3M period on a 6M tenor."""
    dates = [ql.Date(20, 1, 2020), ql.Date(20, 4, 2020)]
    return _schedule_from_dates(dates, ql.Period(6, ql.Months), [False])


@pytest.fixture
def euribor6m() -> ql.IborIndex:
    return ql.Euribor6M()


@pytest.fixture
def swap_index() -> ql.SwapIndex:
    return ql.EuriborSwapIsdaFixA(ql.Period(10, ql.Years))


@pytest.fixture
def volatility() -> ql.SwaptionVolatilityStructureHandle:
    return ql.SwaptionVolatilityStructureHandle(
        ql.ConstantSwaptionVolatility(
            0, ql.TARGET(), ql.ModifiedFollowing, 0.2, ql.Actual365Fixed()
        )
    )


@pytest.fixture
def cms_pricer(volatility) -> ql.CmsCouponPricer:
    return ql.AnalyticHaganPricer(
        volatility,
        ql.GFunctionFactory.Standard,
        ql.QuoteHandle(ql.SimpleQuote(0.0)),
    )

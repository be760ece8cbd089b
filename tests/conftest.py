"""Shared statement pages for the tests.

``sample_page`` is a full first page of a Synovus statement: summary box,
six Other Debits rows and a Checks subsection. ``page_builder`` assembles
smaller synthetic pages from a summary box plus arbitrary fragments.
"""

import re
from typing import Callable, List, Sequence, Tuple

import pytest

from statement_tools.interfaces.text_fragment import TextFragment

SAMPLE_PAGE = """\
(83.01, 647.5) JANE DOE
(335.01, 680.9) Page 1 of 1
(953.01, 720) PAGE 1
(1053.01, 720) 48317603814
(1153.01, 720) 0004
(1253.01, 720) 340
(1353.01, 720) 001007
(1453.01, 720) Y
(1553.01, 720) N
(1653.01, 720) 0
(83.01, 636.4) 1234 EXAMPLE ROAD
(83.01, 625.3) SOMEWHERE ND 87126-0000
(221.01, 514.4) Summary of Account Balance
(59.01, 425.7) Pro Business Checking
(335.01, 747.2) Statement of Account
(331.67, 292.6) * Skip in check sequence
(59.01, 492.2) Account
(293.01, 492.2) Number
(465.71, 492.2) Ending Balance
(97.96, 337) Number          Date
(246.31, 337) Amount
(59.01, 248.3) Date
(107.01, 248.3) Transaction Type
(233.01, 248.3) Description
(510.31, 248.3) Amount
(335.01, 725.1) Last statement:
(425.01, 725.1) June 30, 2016
(335.01, 714) This statement:
(425.01, 714) July 31, 2016
(335.01, 702.9) Total days in statement period: 31
(335.01, 691.8) 965-392-224-7
(437.01, 691.8) 624
(473.01, 691.8) 851
(331.96, 337) Number          Date
(480.31, 337) Amount
(59.01, 470) Pro Business Checking
(281.01, 470) 965-392-224-7
(483.23, 470) $0.00
(281.01, 425.7) Account Number  965-392-224-7
(474.74, 425.7) 6 Enclosures
(59.65, 403.5) Beginning balance
(253, 403.5) {beginning:.2f}
(59.65, 392.4) Deposits/Credits
(243.34, 392.4) {credits:.2f}
(323.01, 392.4) Low balance
(499, 392.4) 0.00
(59.65, 381.3) Withdrawals/Debits
(243.34, 381.3) {debits:.2f}
(323.01, 381.3) Average balance
(499, 381.3) 0.00
(59.65, 370.3) Ending balance
(243.43, 370.3) {ending:.2f}
(323.01, 370.3) Average collected balance
(499, 370.3) 0.05
(53.01, 226.1) 07-02
(101.01, 226.1) Check Card Purchase
(233.01, 226.1) Merchant Purchase Terminal 819579
(517.2, 226.1) 17.36
(53.01, 192.8) 07-03
(101.01, 192.8) Check Card Purchase
(233.01, 192.8) Merchant Purchase Terminal 819578
(517.2, 192.8) 21.19
(53.01, 159.6) 07-05
(101.01, 159.6) Preauthorized Wd
(233.01, 159.6) Paypal Inst Xfer
(517.2, 159.6) 48.20
(53.01, 137.4) 07-06
(101.01, 137.4) Preauthorized Wd
(233.01, 137.4) Paypal Inst Xfer
(510.98, 137.4) 160.13
(53.01, 115.2) 07-07
(101.01, 115.2) Check Card Purchase
(233.01, 115.2) Merchant Purchase Terminal 517241
(517.2, 115.2) 19.77
(53.01, 82) 07-07
(101.01, 82) Check Card Purchase
(233.01, 82) Merchant Purchase Terminal 819578
(517.2, 82) 22.16
(98.33, 314.8) 1049
(161.01, 314.8) 07-05
(246.98, 314.8) 108.00
(98.33, 303.7) 1051 *
(161.01, 303.7) 07-01
(246.98, 303.7) 313.00
(98.33, 292.6) 1052
(161.01, 292.6) 07-13
(246.98, 292.6) 108.00
(98.33, 281.6) 1055 *
(161.01, 281.6) 07-19
(246.98, 281.6) 313.00
(332.33, 314.8) 1056
(395.01, 314.8) 07-26
(480.98, 314.8) 108.00
(332.33, 303.7) 1059 *
(395.01, 303.7) 07-26
(487.2, 303.7) 60.01
(335.01, 647.5) Direct inquiries to:
(335.01, 636.4) 888 123-5555
(53.01, 348.1) Checks
(53.01, 259.4) Other Debits
(233.01, 215) COURTYARD SARATOGA FL
(233.01, 203.9) TRAN DATE 07-08-17XXXXXXXXXXXX9112
(233.01, 181.8) COURTYARD SARATOGA FL
(233.01, 170.7) TRAN DATE 07-08-17XXXXXXXXXXXX9115
(233.01, 148.5) 827412
(233.01, 126.3) 827412
(233.01, 104.1) COURTYARD SARATOGA FL
(233.01, 93.1) TRAN DATE 07-08-17XXXXXXXXXXXX9213
(233.01, 70.9) COURTYARD SARATOGA FL
(233.01, 59.8) TRAN DATE 07-08-17XXXXXXXXXXXX9337
"""

SAMPLE_FRAGMENT_COUNT = 110
SAMPLE_DEBITS = 1298.82

_LINE = re.compile(r"^\((?P<x>[\d.]+),\s(?P<y>[\d.]+)\)\s(?P<text>.+)$", re.MULTILINE)


def parse_fragments(data: str) -> List[TextFragment]:
    return [TextFragment.at(float(m["x"]), float(m["y"]), m["text"]) for m in _LINE.finditer(data)]


def build_sample_page(beginning=2000.0, credits=0.0, debits=SAMPLE_DEBITS, ending=701.18) -> List[TextFragment]:
    data = SAMPLE_PAGE.format(beginning=beginning, credits=credits, debits=debits, ending=ending)
    fragments = parse_fragments(data)
    assert len(fragments) == SAMPLE_FRAGMENT_COUNT
    return fragments


def build_summary(beginning: float, credits: float, debits: float, ending: float,
                  statement_date: str = "July 31, 2016") -> List[TextFragment]:
    """First-page header: statement dates plus the balance summary box"""
    return [
        TextFragment.at(335.01, 725.1, "Last statement:"),
        TextFragment.at(425.01, 725.1, "June 30, 2016"),
        TextFragment.at(335.01, 714, "This statement:"),
        TextFragment.at(425.01, 714, statement_date),
        TextFragment.at(59.65, 403.5, "Beginning balance"),
        TextFragment.at(253, 403.5, f"{beginning:.2f}"),
        TextFragment.at(59.65, 392.4, "Deposits/Credits"),
        TextFragment.at(243.34, 392.4, f"{credits:.2f}"),
        TextFragment.at(323.01, 392.4, "Low balance"),
        TextFragment.at(499, 392.4, "0.00"),
        TextFragment.at(59.65, 381.3, "Withdrawals/Debits"),
        TextFragment.at(243.34, 381.3, f"{debits:.2f}"),
        TextFragment.at(59.65, 370.3, "Ending balance"),
        TextFragment.at(243.43, 370.3, f"{ending:.2f}"),
    ]


def build_page(*groups: Sequence[Tuple[float, float, str]]) -> List[TextFragment]:
    """Flatten ``(x, y, text)`` groups into one page"""
    return [TextFragment.at(x, y, text) for group in groups for x, y, text in group]


@pytest.fixture
def sample_page() -> List[TextFragment]:
    return build_sample_page()


@pytest.fixture
def sample_page_builder() -> Callable[..., List[TextFragment]]:
    return build_sample_page


@pytest.fixture
def summary_builder() -> Callable[..., List[TextFragment]]:
    return build_summary


@pytest.fixture
def page_builder() -> Callable[..., List[TextFragment]]:
    return build_page

"""
pytest configuration and shared fixtures for the decoder tests.

Provides:
- Sample FIX messages in pipe and SOH form
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=ci)
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile("ci", max_examples=500, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


NEW_ORDER_SINGLE = (
    "8=FIX.4.4|9=148|35=D|34=1080|49=TESTBUY1|56=TESTSELL1|"
    "11=636730640278898634|55=MSFT|54=1|10=092"
)


@pytest.fixture
def new_order_single():
    return NEW_ORDER_SINGLE


@pytest.fixture
def new_order_single_soh():
    return NEW_ORDER_SINGLE.replace("|", "\x01") + "\x01"


@pytest.fixture
def logon_fix42():
    return "8=FIX.4.2|9=65|35=A|49=SERVER|56=CLIENT|34=1|52=20240102-09:30:00|98=0|108=30|10=062|"

import os
import sys

import pytest

# Add the project src directory to PYTHONPATH for tests
CURRENT_DIR = os.path.dirname(__file__)
SRC_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from hotelres.config import set_config
from hotelres.hotel import Hotel
from hotelres.services.payment_service import FixedPaymentDecider
from hotelres.store import seed_sample_data


@pytest.fixture
def approve():
    return FixedPaymentDecider(True)


@pytest.fixture
def decline():
    return FixedPaymentDecider(False)


@pytest.fixture
def hotel(approve):
    """Sample hotel (101/102 standard, 201/202 deluxe, 301 suite) whose payments always pass."""
    h = Hotel(payment=approve)
    seed_sample_data(h)
    return h


@pytest.fixture(autouse=True)
def reset_config():
    yield
    set_config(None)

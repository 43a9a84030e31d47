#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import pytest

from physunits.config import CONFIG


@pytest.fixture(autouse=True)
def factory_settings():
    """Every test starts and ends with the factory default settings."""
    CONFIG.reset()
    yield CONFIG
    CONFIG.reset()

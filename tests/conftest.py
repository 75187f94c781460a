from __future__ import annotations

import os
import random

import numpy as np
import pytest

from hobson_trains.utils.config import config as ht_config

DEFAULT_SEED = int(os.getenv("HOBSON_TRAINS_SEED", "1234"))


def pytest_configure(config) -> None:  # pylint: disable=unused-argument
    random.seed(DEFAULT_SEED)
    np.random.seed(DEFAULT_SEED)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(DEFAULT_SEED)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    ht_config.debug = False
    ht_config.validate_heaps = False

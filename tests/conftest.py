import logging

import matplotlib
matplotlib.use("Agg")

import pytest

from quantumscenarios.engine import QuantumEngine


@pytest.fixture
def engine():
    return QuantumEngine()


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("quantumscenarios")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

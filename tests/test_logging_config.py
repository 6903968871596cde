import logging

import numpy as np
import pytest

from cartoseed.geometry import Domain
from cartoseed.sampling import poisson_disk_sample
from cartoseed.utils.logging import configure_logging, level_from_name, logger


@pytest.fixture
def restore_logger():
    yield
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


def test_configure_logging_idempotent(restore_logger):
    configure_logging(True, "debug")
    configure_logging(True, "debug")
    streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(streams) == 1
    assert logger.level == logging.DEBUG

    configure_logging(False)
    assert not any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    assert logger.level > logging.CRITICAL


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("INFO") == logging.INFO
    assert level_from_name("none") == logging.WARNING
    assert level_from_name(None) == logging.WARNING


def test_rounds_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="cartoseed"):
        poisson_disk_sample(Domain.from_bounds(0, 0, 1, 1), 0.3, rng=np.random.default_rng(0))
    text = caplog.text
    assert "round 1:" in text
    assert "poisson sampling done" in text


def test_cap_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="cartoseed"):
        poisson_disk_sample(Domain.from_bounds(0, 0, 1, 1), 0.05, rng=np.random.default_rng(0), max_rounds=2)
    assert any(r.levelno == logging.WARNING and "max_rounds" in r.message for r in caplog.records)


def test_phase_transitions_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="cartoseed"):
        poisson_disk_sample(Domain.from_bounds(0, 0, 1, 1), 0.3, rng=np.random.default_rng(0))
    assert "sampler phase seeding -> iterating" in caplog.text
    assert "sampler phase iterating -> done" in caplog.text

"""Tests for logging infrastructure."""

from jobpool.config.settings import Environment, LogLevel, Settings
import io

from loguru import logger as loguru_logger

from jobpool.infrastructure.logging import (
    configure_logger,
    get_logger,
    is_configured,
    reset_logging,
    setup_logging,
)


def test_get_logger_leaves_sinks_alone():
    """get_logger binds a name without installing or removing sinks."""
    logger = get_logger(__name__)

    assert logger is not None
    assert not is_configured()
    logger.info("Test message")


def test_pool_keeps_host_sinks():
    """Creating library objects doesn't strip sinks the host installed."""
    from jobpool import CancellationToken, JobPool

    sink = io.StringIO()
    loguru_logger.add(sink, format="{message}")

    pool = JobPool(1, 1)
    CancellationToken()
    loguru_logger.info("host message")
    pool.close()
    pool.join(timeout=5.0)

    assert "host message" in sink.getvalue()


def test_get_logger_with_explicit_setup():
    """Test get_logger after explicit setup_logging call."""
    settings = Settings(environment=Environment.TESTING, log_level=LogLevel.CRITICAL)
    setup_logging(settings)

    logger = get_logger(__name__)
    logger.critical("Test critical message")


def test_configure_logger_development(capsys):
    """Development output is human readable and carries the bound name."""
    configure_logger(level=LogLevel.DEBUG, environment=Environment.DEVELOPMENT)

    get_logger("jobpool.tests").debug("Development debug message")

    err = capsys.readouterr().err
    assert "Development debug message" in err
    assert "jobpool.tests" in err


def test_configure_logger_respects_level(capsys):
    configure_logger(level=LogLevel.WARNING, environment=Environment.TESTING)

    logger = get_logger(__name__)
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_configure_logger_production():
    """Test configure_logger with production environment."""
    configure_logger(level=LogLevel.WARNING, environment=Environment.PRODUCTION)

    logger = get_logger(__name__)
    logger.warning("Production warning message")


def test_reset_logging():
    """Test that reset_logging cleans up configuration."""
    configure_logger()
    _ = get_logger(__name__)
    assert is_configured()

    reset_logging()
    assert not is_configured()

    logger2 = get_logger("other_module")
    assert logger2 is not None

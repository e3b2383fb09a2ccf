import pytest
import logger

@pytest.fixture(autouse=True)
def quiet_logger():
    """Every test starts with debug output off."""
    logger.set_verbose(False)
    yield
    logger.set_verbose(False)

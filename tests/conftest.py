#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.size import ByteSize
from bytesize.uint128 import MAX_UINT128
from bytesize.units import BINARY_UNITS, DECIMAL_UNITS


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def max_size() -> ByteSize:
    """Largest representable size, 2**128 - 1 bytes."""
    return ByteSize.from_int(MAX_UINT128)


@pytest.fixture
def registered_units() -> tuple:
    """Every registered Unit, decimal family first."""
    return (*DECIMAL_UNITS, *BINARY_UNITS)

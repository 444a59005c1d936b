#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siprefix.prefixes import SiPrefix
from siprefix.scales import BIGINT, FLOAT, INT32, INT64

ALL_SCALES = (FLOAT, INT32, INT64, BIGINT)
INTEGER_SCALES = (INT32, INT64, BIGINT)


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(params=ALL_SCALES, ids=lambda s: s.numeric.value)
def any_scale(request):
    """Each of the four conversion scales."""
    return request.param


@pytest.fixture(params=INTEGER_SCALES, ids=lambda s: s.numeric.value)
def int_scale(request):
    """Each of the integer conversion scales."""
    return request.param


@pytest.fixture(params=list(SiPrefix), ids=lambda p: p.name)
def any_prefix(request) -> SiPrefix:
    """Each SI prefix from quecto to quetta."""
    return request.param

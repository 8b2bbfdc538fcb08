import pytest
from hypothesis import HealthCheck, settings

from payforblob.blob.types import Blob
from payforblob.config import get_config
from payforblob.msg.address import encode_address

from .helpers import make_blob

# The autouse config fixture below is function scoped; it only resets state.
settings.register_profile("payforblob", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("payforblob")

_ENV_KEYS = (
    "PAYFORBLOB_MAX_SQUARE_SIZE",
    "PAYFORBLOB_SUBTREE_ROOT_THRESHOLD",
    "PAYFORBLOB_ADDRESS_HRP",
    "PAYFORBLOB_COMMIT_WORKERS",
    "PAYFORBLOB_LOG_LEVEL",
    "PAYFORBLOB_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Each test starts from the default environment configuration."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def signer() -> str:
    return encode_address(bytes(range(20)))


@pytest.fixture
def blob() -> Blob:
    return make_blob()


@pytest.fixture
def golden_blob() -> Blob:
    # 3 * 512 bytes of 0xFF under namespace 0x00*18 || 0x01*10
    return make_blob(data=b"\xff" * (3 * 512))

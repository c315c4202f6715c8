import pytest
from stellar_sdk import Keypair

from infrastructure.services.key_service import StellarKeyService
from tests.conftest import PUBLIC_ISSUER, BAD_CHECKSUM_ISSUER


@pytest.fixture
def key_service():
    return StellarKeyService()


def test_valid_public_key(key_service, random_issuer):
    assert key_service.is_valid_public_key(PUBLIC_ISSUER)
    assert key_service.is_valid_public_key(random_issuer)


@pytest.mark.parametrize("value", ["", "GISSUER", BAD_CHECKSUM_ISSUER, PUBLIC_ISSUER + "A"])
def test_invalid_public_key(key_service, value):
    assert not key_service.is_valid_public_key(value)


def test_secret_seed_is_not_public_key(key_service):
    assert not key_service.is_valid_public_key(Keypair.random().secret)


def test_decode_encode(key_service):
    keypair = Keypair.random()
    raw = key_service.decode_public_key(keypair.public_key)
    assert raw == keypair.raw_public_key()
    assert len(raw) == 32
    assert key_service.encode_public_key(raw) == keypair.public_key


def test_decode_invalid(key_service):
    with pytest.raises(ValueError):
        key_service.decode_public_key(BAD_CHECKSUM_ISSUER)

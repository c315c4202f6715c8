from unittest.mock import MagicMock

import pytest
from stellar_sdk import Keypair

from infrastructure.services.asset_codec import XdrAssetCodec
from infrastructure.services.key_service import StellarKeyService

PUBLIC_ISSUER = "GACKTN5DAZGWXRWB2WLM6OPBDHAMT6SJNGLJZPQMEZBUR4JUGBX2UK7V"
# same key with the checksum broken
BAD_CHECKSUM_ISSUER = PUBLIC_ISSUER[:-1] + "A"


@pytest.fixture
def issuer() -> str:
    return PUBLIC_ISSUER


@pytest.fixture
def random_issuer() -> str:
    return Keypair.random().public_key


@pytest.fixture
def codec() -> XdrAssetCodec:
    return XdrAssetCodec(StellarKeyService())


@pytest.fixture
def broken_key_service():
    """Key service that accepts keys but fails on every conversion."""
    service = MagicMock()
    service.is_valid_public_key.return_value = True
    service.decode_public_key.side_effect = ValueError("decode failed")
    service.encode_public_key.side_effect = ValueError("encode failed")
    return service


@pytest.fixture
def lax_charset(monkeypatch):
    from config_reader import config
    monkeypatch.setattr(config, "strict_code_charset", False)
    yield config

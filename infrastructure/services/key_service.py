from stellar_sdk import StrKey

from core.interfaces.services import IKeyService, register_key_service


class StellarKeyService(IKeyService):
    """Account public keys through stellar_sdk's StrKey (ed25519, G...)."""

    def is_valid_public_key(self, public_key: str) -> bool:
        return StrKey.is_valid_ed25519_public_key(public_key)

    def decode_public_key(self, public_key: str) -> bytes:
        return StrKey.decode_ed25519_public_key(public_key)

    def encode_public_key(self, raw_key: bytes) -> str:
        return StrKey.encode_ed25519_public_key(raw_key)


key_service = StellarKeyService()
register_key_service(key_service)

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from stellar_sdk import xdr as stellar_xdr
    from core.domain.value_objects import Asset


class IKeyService(ABC):
    @abstractmethod
    def is_valid_public_key(self, public_key: str) -> bool:
        """Check that the text is a well-formed, checksum-valid public key (G...)."""
        pass

    @abstractmethod
    def decode_public_key(self, public_key: str) -> bytes:
        """
        Decode a public key from its checksummed text form into the raw 32 key bytes.
        Raises ValueError if the text is not a valid public key; the codec wraps any
        exception raised here in EncodingError.
        """
        pass

    @abstractmethod
    def encode_public_key(self, raw_key: bytes) -> str:
        """
        Encode raw public key bytes into the checksummed text form.
        The codec wraps any exception raised here in DecodingError.
        """
        pass


class IAssetCodec(ABC):
    @abstractmethod
    def encode(self, asset: Asset) -> stellar_xdr.Asset:
        """Build the XDR Asset union for the asset."""
        pass

    @abstractmethod
    def decode(self, wire: stellar_xdr.Asset) -> Asset:
        """Rebuild a validated Asset from the XDR Asset union."""
        pass

    @abstractmethod
    def to_xdr(self, asset: Asset) -> str:
        """Serialize the asset as base64 XDR."""
        pass

    @abstractmethod
    def from_xdr(self, xdr: str) -> Asset:
        """Parse base64 XDR into an Asset."""
        pass


# Key service used by Asset validation. Infrastructure registers the default,
# using_key_service() overrides it for the current thread / task.
_default_key_service: Optional[IKeyService] = None
_key_service_override: ContextVar[Optional[IKeyService]] = ContextVar('key_service_override', default=None)


def register_key_service(service: IKeyService) -> None:
    global _default_key_service
    _default_key_service = service


def get_key_service() -> IKeyService:
    service = _key_service_override.get()
    if service is None:
        service = _default_key_service
    if service is None:
        raise RuntimeError("No key service registered, import infrastructure.services.key_service first")
    return service


@contextmanager
def using_key_service(service: IKeyService) -> Iterator[IKeyService]:
    token = _key_service_override.set(service)
    try:
        yield service
    finally:
        _key_service_override.reset(token)

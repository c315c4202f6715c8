from typing import Optional

from loguru import logger
from stellar_sdk import xdr as stellar_xdr

from core.constants import ALPHANUM4_CODE_LENGTH, ALPHANUM12_CODE_LENGTH, CODE_PADDING
from core.domain.exceptions import DecodingError, EncodingError, UnknownAssetType
from core.domain.value_objects import Asset
from core.interfaces.services import IAssetCodec, IKeyService, using_key_service
from infrastructure.services.key_service import key_service as default_key_service


class XdrAssetCodec(IAssetCodec):
    """
    Converts Asset to and from the stellar_sdk XDR Asset union.

    native            -> ASSET_TYPE_NATIVE, no payload
    1-4 char code     -> ASSET_TYPE_CREDIT_ALPHANUM4, code padded to 4 bytes
    5-12 char code    -> ASSET_TYPE_CREDIT_ALPHANUM12, code padded to 12 bytes
    """

    def __init__(self, key_service: Optional[IKeyService] = None):
        self.key_service = key_service or default_key_service

    def encode(self, asset: Asset) -> stellar_xdr.Asset:
        if asset.is_native:
            logger.debug(f"encode {asset}: native")
            return stellar_xdr.Asset(type=stellar_xdr.AssetType.ASSET_TYPE_NATIVE)

        width = ALPHANUM4_CODE_LENGTH if len(asset.code) <= ALPHANUM4_CODE_LENGTH else ALPHANUM12_CODE_LENGTH
        try:
            code_bytes = asset.code.encode('ascii').ljust(width, CODE_PADDING)
        except UnicodeEncodeError as e:
            logger.warning(f"Asset code is not ascii: {asset.code!r}")
            raise EncodingError(asset, "asset code is not ascii") from e
        try:
            raw_issuer = self.key_service.decode_public_key(asset.issuer)
        except Exception as e:
            logger.warning(f"Failed to decode issuer {asset.issuer}: {e}")
            raise EncodingError(asset, f"issuer cannot be decoded: {e}") from e

        issuer = stellar_xdr.AccountID(
            stellar_xdr.PublicKey(
                type=stellar_xdr.PublicKeyType.PUBLIC_KEY_TYPE_ED25519,
                ed25519=stellar_xdr.Uint256(raw_issuer),
            )
        )
        logger.debug(f"encode {asset}: alphanum{width}")
        if width == ALPHANUM4_CODE_LENGTH:
            return stellar_xdr.Asset(
                type=stellar_xdr.AssetType.ASSET_TYPE_CREDIT_ALPHANUM4,
                alpha_num4=stellar_xdr.AlphaNum4(asset_code=stellar_xdr.AssetCode4(code_bytes), issuer=issuer),
            )
        return stellar_xdr.Asset(
            type=stellar_xdr.AssetType.ASSET_TYPE_CREDIT_ALPHANUM12,
            alpha_num12=stellar_xdr.AlphaNum12(asset_code=stellar_xdr.AssetCode12(code_bytes), issuer=issuer),
        )

    def decode(self, wire: stellar_xdr.Asset) -> Asset:
        if wire.type == stellar_xdr.AssetType.ASSET_TYPE_NATIVE:
            return Asset.native()
        if wire.type == stellar_xdr.AssetType.ASSET_TYPE_CREDIT_ALPHANUM4:
            if wire.alpha_num4 is None:
                raise DecodingError("alphanum4 asset without payload", wire)
            code_bytes = wire.alpha_num4.asset_code.asset_code4
            account_id = wire.alpha_num4.issuer
        elif wire.type == stellar_xdr.AssetType.ASSET_TYPE_CREDIT_ALPHANUM12:
            if wire.alpha_num12 is None:
                raise DecodingError("alphanum12 asset without payload", wire)
            code_bytes = wire.alpha_num12.asset_code.asset_code12
            account_id = wire.alpha_num12.issuer
        else:
            logger.warning(f"Unknown asset type in xdr: {wire.type}")
            raise UnknownAssetType(wire.type)

        # only trailing padding is stripped, embedded nulls are left for validation to reject
        code_bytes = code_bytes.rstrip(CODE_PADDING)
        if not code_bytes:
            raise DecodingError("asset code is empty", wire)
        try:
            code = code_bytes.decode('ascii')
        except UnicodeDecodeError as e:
            logger.warning(f"Asset code is not ascii: {code_bytes!r}")
            raise DecodingError(f"asset code is not ascii: {code_bytes!r}", wire) from e
        try:
            issuer = self.key_service.encode_public_key(account_id.account_id.ed25519.uint256)
        except Exception as e:
            logger.warning(f"Failed to encode issuer key: {e}")
            raise DecodingError(f"issuer cannot be encoded: {e}", wire) from e

        with using_key_service(self.key_service):
            asset = Asset(code, issuer)
        logger.debug(f"decode {wire.type.name}: {asset}")
        return asset

    def to_xdr(self, asset: Asset) -> str:
        return self.encode(asset).to_xdr()

    def to_xdr_bytes(self, asset: Asset) -> bytes:
        return self.encode(asset).to_xdr_bytes()

    def from_xdr(self, xdr: str) -> Asset:
        try:
            wire = stellar_xdr.Asset.from_xdr(xdr)
        except Exception as e:
            logger.warning(f"Failed to parse asset xdr {xdr!r}: {e}")
            raise DecodingError(f"malformed xdr: {e}", xdr) from e
        return self.decode(wire)

    def from_xdr_bytes(self, raw: bytes) -> Asset:
        try:
            wire = stellar_xdr.Asset.from_xdr_bytes(raw)
        except Exception as e:
            logger.warning(f"Failed to parse asset xdr bytes {raw!r}: {e}")
            raise DecodingError(f"malformed xdr: {e}", raw) from e
        return self.decode(wire)


asset_codec = XdrAssetCodec()

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config_reader import config
from core.constants import (
    NATIVE_ASSET_CODE, MAX_ASSET_CODE_LENGTH, ALPHANUM4_CODE_LENGTH,
    ASSET_TYPE_NATIVE, ASSET_TYPE_CREDIT_ALPHANUM4, ASSET_TYPE_CREDIT_ALPHANUM12,
    ASSET_STRING_SEPARATOR,
)
from core.domain.exceptions import (
    CodeTooLong, IssuerRequired, InvalidIssuer, InvalidAssetCode, AssetInvariantError,
)
from core.interfaces.services import get_key_service

_ASSET_CODE_RE = re.compile(r"[A-Za-z0-9]{1,12}")


class AssetClass(Enum):
    NATIVE = "native"
    SHORT = "short"  # 1-4 chars, XDR alphanum4
    LONG = "long"  # 5-12 chars, XDR alphanum12


@dataclass(frozen=True)
class Asset:
    """
    Either the native asset (XLM) or an asset code / issuer account ID pair.

    In the case of the native asset the issuer is None. Validation runs on
    construction, so every instance is either native, short or long:
    - code longer than 12 characters raises CodeTooLong
    - non-native code without issuer raises IssuerRequired
    - issuer that is not a valid G... key raises InvalidIssuer
    - empty code, or non-alphanumeric code in strict mode, raises InvalidAssetCode
    """
    code: str
    issuer: Optional[str] = None

    def __post_init__(self):
        if len(self.code) > MAX_ASSET_CODE_LENGTH:
            raise CodeTooLong(self.code)
        if self.code.lower() != NATIVE_ASSET_CODE.lower() and not self.issuer:
            raise IssuerRequired(self.code)
        if self.issuer and not get_key_service().is_valid_public_key(self.issuer):
            raise InvalidIssuer(self.issuer)
        if not self.issuer:
            # "" and None both mean native, any casing of xlm is stored as XLM
            object.__setattr__(self, 'issuer', None)
            object.__setattr__(self, 'code', NATIVE_ASSET_CODE)
        elif not self.code or (config.strict_code_charset and not _ASSET_CODE_RE.fullmatch(self.code)):
            raise InvalidAssetCode(self.code)

    @classmethod
    def native(cls) -> "Asset":
        return cls(NATIVE_ASSET_CODE)

    @property
    def is_native(self) -> bool:
        return self.issuer is None

    @property
    def asset_class(self) -> AssetClass:
        if self.is_native:
            return AssetClass.NATIVE
        if 1 <= len(self.code) <= ALPHANUM4_CODE_LENGTH:
            return AssetClass.SHORT
        if ALPHANUM4_CODE_LENGTH < len(self.code) <= MAX_ASSET_CODE_LENGTH:
            return AssetClass.LONG
        raise AssetInvariantError(self)

    @property
    def asset_type(self) -> str:
        """Horizon name of the asset type: native, credit_alphanum4 or credit_alphanum12."""
        return {
            AssetClass.NATIVE: ASSET_TYPE_NATIVE,
            AssetClass.SHORT: ASSET_TYPE_CREDIT_ALPHANUM4,
            AssetClass.LONG: ASSET_TYPE_CREDIT_ALPHANUM12,
        }[self.asset_class]

    def to_string(self) -> str:
        if self.is_native:
            return self.code
        return f"{self.code}{ASSET_STRING_SEPARATOR}{self.issuer}"

    @classmethod
    def from_string(cls, text: str) -> "Asset":
        """
        Parse "CODE:ISSUER", or "XLM" / "native" for the native asset.
        """
        text = text.strip()
        if text.lower() == ASSET_TYPE_NATIVE:
            return cls.native()
        code, _, issuer = text.partition(ASSET_STRING_SEPARATOR)
        return cls(code, issuer or None)

    def __str__(self) -> str:
        return self.to_string()

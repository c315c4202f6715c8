from typing import Any, Optional


class AssetError(ValueError):
    """
    Base class for every asset validation and codec error.
    """


class CodeTooLong(AssetError):
    """
    Asset code is longer than 12 characters.
    """
    code: str

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Asset code must be 12 characters at max, got {len(code)}: {code!r}")


class IssuerRequired(AssetError):
    """
    Only the native asset may omit the issuer.
    """
    code: str

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Issuer cannot be empty for non-native asset {code!r}")


class InvalidIssuer(AssetError):
    """
    Issuer is not a valid ed25519 public key (G...).
    """
    issuer: str

    def __init__(self, issuer: str) -> None:
        self.issuer = issuer
        super().__init__(f"Issuer is invalid: {issuer!r}")


class InvalidAssetCode(AssetError):
    """
    Asset code is empty or contains characters outside [A-Za-z0-9].
    """
    code: str

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Asset code must be 1-12 alphanumeric characters: {code!r}")


class AssetInvariantError(AssetError):
    """
    A constructed asset fits none of the native / short / long classes.
    """
    asset: Any

    def __init__(self, asset: Any) -> None:
        self.asset = asset
        super().__init__(f"Asset cannot be classified: {asset!r}")


class UnknownAssetType(AssetError):
    asset_type: Any

    def __init__(self, asset_type: Any) -> None:
        self.asset_type = asset_type
        super().__init__(f"Invalid asset type: {getattr(asset_type, 'name', asset_type)}")


class EncodingError(AssetError):
    asset: Any

    def __init__(self, asset: Any, reason: str) -> None:
        self.asset = asset
        super().__init__(f"Cannot encode {asset!r}: {reason}")


class DecodingError(AssetError):
    def __init__(self, reason: str, payload: Optional[Any] = None) -> None:
        self.payload = payload
        super().__init__(f"Cannot decode asset: {reason}")

"""
Stellar asset helpers.

This module provides:
- conversion between domain Asset and stellar_sdk.Asset
- parsing of Horizon balance / asset records
- parsing of user supplied asset lists ("CODE:ISSUER" per line or comma)
"""

import re
from typing import Any, Dict, List

from stellar_sdk import Asset as SdkAsset

from core.constants import ASSET_TYPE_NATIVE, ASSET_TYPE_CREDIT_ALPHANUM4, ASSET_TYPE_CREDIT_ALPHANUM12
from core.domain.exceptions import UnknownAssetType
from core.domain.value_objects import Asset


def to_sdk_asset(asset: Asset) -> SdkAsset:
    """Convert to stellar_sdk.Asset for use with TransactionBuilder and friends."""
    if asset.is_native:
        return SdkAsset.native()
    return SdkAsset(asset.code, asset.issuer)


def from_sdk_asset(sdk_asset: SdkAsset) -> Asset:
    if sdk_asset.is_native():
        return Asset.native()
    return Asset(sdk_asset.code, sdk_asset.issuer)


def asset_from_horizon(record: Dict[str, Any]) -> Asset:
    """
    Build an Asset from a Horizon balance or asset record.

    Records carry 'asset_type' plus 'asset_code' / 'asset_issuer' for credit assets.
    Liquidity pool shares and other types raise UnknownAssetType.
    """
    asset_type = record.get('asset_type')
    if asset_type == ASSET_TYPE_NATIVE:
        return Asset.native()
    if asset_type in (ASSET_TYPE_CREDIT_ALPHANUM4, ASSET_TYPE_CREDIT_ALPHANUM12):
        return Asset(record.get('asset_code', ''), record.get('asset_issuer'))
    raise UnknownAssetType(asset_type)


def parse_asset_list(text: str) -> List[Asset]:
    """Parse assets separated by newlines or commas, e.g. "XLM, EURMTL:GACK...". Blank entries are skipped."""
    return [Asset.from_string(item) for item in re.split(r'[\n,]', text) if item.strip()]

"""Stellar asset constants shared by the domain and the XDR codec."""

NATIVE_ASSET_CODE = "XLM"

# Horizon asset_type names
ASSET_TYPE_NATIVE = "native"
ASSET_TYPE_CREDIT_ALPHANUM4 = "credit_alphanum4"
ASSET_TYPE_CREDIT_ALPHANUM12 = "credit_alphanum12"

# Fixed widths of the XDR asset code fields
ALPHANUM4_CODE_LENGTH = 4
ALPHANUM12_CODE_LENGTH = 12
MAX_ASSET_CODE_LENGTH = ALPHANUM12_CODE_LENGTH

CODE_PADDING = b"\x00"
ASSET_STRING_SEPARATOR = ":"

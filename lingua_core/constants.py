"""Shared constants for lingua key derivation."""

HASH_ALGORITHM = "xxh3"
DIGEST_HEX_LENGTH = 16

# Closed alias table: synonymous engine spellings -> canonical token.
ENGINE_ALIASES = {
    "libretranslate": "libre",
    "libre-translate": "libre",
}

TRIM_CHARS = " \t\n\r\0\x0b"

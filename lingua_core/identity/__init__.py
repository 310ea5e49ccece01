"""Identity key helpers (source keys and translation keys)."""

from .keys import (
    InvalidArgument,
    TranslationIdentity,
    build_translation_identity,
    calc_source_key,
    calc_translation_key,
    normalize_engine,
    normalize_locale,
)

__all__ = [
    "InvalidArgument",
    "TranslationIdentity",
    "build_translation_identity",
    "calc_source_key",
    "calc_translation_key",
    "normalize_engine",
    "normalize_locale",
]

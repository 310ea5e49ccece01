"""Canonical source/translation keys: normalize inputs, frame them, hash with XXH3-64.

Rules:
- source key = hash(normalized locale + "\\n" + normalized text)
- translation key = hash(source hash + "\\n" + normalized target locale + "\\n" + normalized engine)
- engine is required for translation keys; there is no implicit default

Digests are 16 lowercase hex characters. Changing the framing, the algorithm or the
width changes every key held by downstream stores.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import xxhash

from ..constants import ENGINE_ALIASES, TRIM_CHARS

logger = logging.getLogger(__name__)

_HYPHEN_RUN_RE = re.compile(r"-{2,}")


class InvalidArgument(ValueError):
    """Raised when a key cannot be derived from the given arguments."""


@dataclass(frozen=True)
class TranslationIdentity:
    source_key: str
    translation_key: str
    source_locale: str
    target_locale: str
    engine: str


def _trim(value: str | None) -> str:
    return (value or "").strip(TRIM_CHARS)


def _digest(framing: str) -> str:
    return xxhash.xxh3_64_hexdigest(framing.encode("utf-8"))


def normalize_locale(locale: str) -> str:
    """Canonical locale tag: lowercase, '_' -> '-', hyphen runs collapsed ("PT__br" -> "pt-br")."""

    normalized = _trim(locale).lower().replace("_", "-")
    return _HYPHEN_RUN_RE.sub("-", normalized)


def normalize_engine(engine: str) -> str:
    normalized = _trim(engine).lower()
    return ENGINE_ALIASES.get(normalized, normalized)


def _normalize_text(text: str) -> str:
    # Line endings and boundary whitespace only; internal spacing is content.
    unified = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    return _trim(unified)


def calc_source_key(text: str, source_locale: str) -> str:
    locale = normalize_locale(source_locale)
    return _digest(f"{locale}\n{_normalize_text(text)}")


def calc_translation_key(source_hash: str, target_locale: str, engine: str) -> str:
    """Derive the key of one engine's translation of an already keyed source.

    ``source_hash`` is taken as an opaque string (trimmed and lowercased only);
    it is never re-derived from text.

    Raises:
        InvalidArgument: if ``engine`` is empty after normalization.
    """

    source = _trim(source_hash).lower()
    locale = normalize_locale(target_locale)
    normalized_engine = normalize_engine(engine)

    if not normalized_engine:
        logger.debug("Rejected translation key for source %r: engine is empty", source)
        raise InvalidArgument("Engine is required for calc_translation_key().")

    return _digest(f"{source}\n{locale}\n{normalized_engine}")


def build_translation_identity(
    *,
    text: str,
    source_locale: str,
    target_locale: str,
    engine: str,
) -> TranslationIdentity:
    source_key = calc_source_key(text, source_locale)
    translation_key = calc_translation_key(source_key, target_locale, engine)
    return TranslationIdentity(
        source_key=source_key,
        translation_key=translation_key,
        source_locale=normalize_locale(source_locale),
        target_locale=normalize_locale(target_locale),
        engine=normalize_engine(engine),
    )

"""CLI for deriving source/translation keys (text or JSON output)."""

from __future__ import annotations

import argparse
import json
import logging

from .config import load_identity_cli_config_from_env
from .keys import (
    InvalidArgument,
    build_translation_identity,
    calc_source_key,
    calc_translation_key,
    normalize_engine,
    normalize_locale,
)

logger = logging.getLogger(__name__)


def _read_text(args: argparse.Namespace) -> str:
    if args.text_file is None:
        return args.text
    # newline="" keeps CR/CRLF intact for the text normalizer.
    with open(args.text_file, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _add_text_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--text",
        help="Source text. Use --text=VALUE (or --text-file) when the text starts with '-'.",
    )
    group.add_argument("--text-file", default=None, help="UTF-8 file holding the source text.")


def _emit(payload: dict[str, str], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps(payload, ensure_ascii=False))
        return
    if len(payload) == 1:
        print(next(iter(payload.values())))
        return
    for name, value in payload.items():
        print(f"{name}: {value}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Derive stable keys for source texts and translations.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    source_key = sub.add_parser("source-key", help="Key of a source text in its source locale.")
    _add_text_arguments(source_key)
    source_key.add_argument("--locale", required=True)

    translation_key = sub.add_parser("translation-key", help="Key of one engine's translation of a source key.")
    translation_key.add_argument("--source-hash", required=True)
    translation_key.add_argument("--target-locale", required=True)
    translation_key.add_argument("--engine", required=True)

    identity = sub.add_parser("identity", help="Source key and translation key in one step.")
    _add_text_arguments(identity)
    identity.add_argument("--source-locale", required=True)
    identity.add_argument("--target-locale", required=True)
    identity.add_argument("--engine", required=True)

    normalize = sub.add_parser("normalize", help="Print canonical locale and/or engine values.")
    normalize.add_argument("--locale", default=None)
    normalize.add_argument("--engine", default=None)

    args = parser.parse_args()

    try:
        config = load_identity_cli_config_from_env()
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        force=True,
    )
    logger.debug("Running command %s", args.cmd)

    try:
        if args.cmd == "source-key":
            _emit({"source_key": calc_source_key(_read_text(args), args.locale)}, config.output_format)
            return

        if args.cmd == "translation-key":
            key = calc_translation_key(args.source_hash, args.target_locale, args.engine)
            _emit({"translation_key": key}, config.output_format)
            return

        if args.cmd == "identity":
            result = build_translation_identity(
                text=_read_text(args),
                source_locale=args.source_locale,
                target_locale=args.target_locale,
                engine=args.engine,
            )
            _emit(
                {
                    "source_key": result.source_key,
                    "translation_key": result.translation_key,
                    "source_locale": result.source_locale,
                    "target_locale": result.target_locale,
                    "engine": result.engine,
                },
                config.output_format,
            )
            return

        if args.cmd == "normalize":
            if args.locale is None and args.engine is None:
                parser.error("normalize requires --locale and/or --engine")
            payload = {}
            if args.locale is not None:
                payload["locale"] = normalize_locale(args.locale)
            if args.engine is not None:
                payload["engine"] = normalize_engine(args.engine)
            _emit(payload, config.output_format)
            return
    except InvalidArgument as exc:
        parser.error(str(exc))

    raise RuntimeError(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    main()

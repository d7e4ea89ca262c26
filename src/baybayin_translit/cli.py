#!/usr/bin/env python3
"""
Tagalog / Baybayin transliteration CLI.

Reads baybayin.toml from the current directory by default, or override
with flags:

    python -m baybayin_translit.cli --encode "mahal kita"
    python -m baybayin_translit.cli --encode "mahal kita" --mode pamudpod
    python -m baybayin_translit.cli --decode "ᜋᜑᜎ᜔ ᜃᜒᜆ"
    python -m baybayin_translit.cli --file notes.txt --to latin
    python -m baybayin_translit.cli --encode "salamat" --export salamat.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from baybayin_translit.config import Settings, find_default_config
from baybayin_translit.log import setup_logging
from baybayin_translit.mapping import Mode

logger = logging.getLogger(__name__)


def _load_settings(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Settings:
    if args.config:
        try:
            return Settings.from_config(args.config)
        except FileNotFoundError as exc:
            parser.error(str(exc))
    config_path = find_default_config()
    if config_path is None:
        return Settings()
    return Settings.from_config(config_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Transliterate between Latin-script Tagalog and Baybayin"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect baybayin.toml)",
    )
    parser.add_argument(
        "--encode",
        metavar="TEXT",
        help="Convert Latin text to Baybayin",
    )
    parser.add_argument(
        "--decode",
        metavar="TEXT",
        help="Convert Baybayin text to Latin",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read the input text from a UTF-8 file",
    )
    parser.add_argument(
        "--to",
        choices=["baybayin", "latin"],
        default="baybayin",
        help="Target script for --file (default: baybayin)",
    )
    parser.add_argument(
        "--convert-mode",
        metavar="TEXT",
        help="Rewrite dead-consonant marks in Baybayin text to the active mode",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        help="Dead-consonant style (overrides config)",
    )
    parser.add_argument(
        "--export",
        metavar="PATH",
        nargs="?",
        const="",
        help="Write the last conversion to a file, or a timestamped file in a "
        "directory (default: the configured export dir)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (overrides config)",
    )
    args = parser.parse_args(argv)

    if not (args.encode or args.decode or args.file or args.convert_mode):
        parser.error("nothing to do: give --encode, --decode, --file or --convert-mode")

    settings = _load_settings(parser, args)
    if args.mode:
        settings.mode = Mode.coerce(args.mode)
    setup_logging(
        level=args.log_level or settings.log_level,
        format_type=settings.log_format,
        log_file=settings.log_file,
    )
    logger.debug("Active mode: %s", settings.mode.value)

    from baybayin_translit.decoder import decode
    from baybayin_translit.encoder import convert_mode, encode

    # (source title, source text, output title, output text) of the last conversion
    last: tuple[str, str, str, str] | None = None

    if args.encode:
        result = encode(args.encode, settings.mode)
        print(result)
        last = ("Tagalog", args.encode, settings.mode.label, result)

    if args.decode:
        result = decode(args.decode)
        print(result)
        last = (settings.mode.label, args.decode, "Tagalog", result)

    if args.file:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"ERROR: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        if args.to == "latin":
            result = decode(text)
            last = (settings.mode.label, text, "Tagalog", result)
        else:
            result = encode(text, settings.mode)
            last = ("Tagalog", text, settings.mode.label, result)
        print(result)

    if args.convert_mode:
        print(convert_mode(args.convert_mode, settings.mode))

    if args.export is not None:
        if last is None:
            parser.error("--export needs --encode, --decode or --file")
        from baybayin_translit.export import build_export_text, write_export

        source_title, source, output_title, output = last
        content = build_export_text(
            source, output, settings.mode,
            source_title=source_title, output_title=output_title,
        )
        if args.export:
            target, to_dir = Path(args.export), False
        else:
            target, to_dir = settings.export_dir, True
        try:
            written = write_export(
                content, target, prefix=settings.export_prefix, directory=to_dir,
            )
        except OSError as exc:
            print(f"ERROR: cannot write export: {exc}", file=sys.stderr)
            return 1
        print(f"Export written to {written}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
YourLibrary.json を HTML のトラック一覧に変換する CLI。

    library-to-html [-f YourLibrary.json] [--escape] [-v]

出力は入力ファイルと同じ場所に、拡張子を .html に置き換えて書き出す。
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from core import DEFAULT_LIBRARY_FILE, html_output_path, library_counts, load_library
from html_renderer import DEFAULT_TITLE, render_html

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = (
    "Spotify `YourLibrary.json` file required. Please supply the file\n\n"
)


# =========================
# 設定 / ログ
# =========================


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the converter."""
    level_name = os.getenv("YOURLIBRARY_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO
    if verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if unknown_level:
        logger.warning(
            f"Unknown YOURLIBRARY_LOG_LEVEL '{level_name}', using INFO instead"
        )


# =========================
# 引数
# =========================


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Convert a Spotify YourLibrary.json export into an HTML table.",
        add_help=False,
    )
    parser.add_argument(
        "-f",
        dest="file",
        default=DEFAULT_LIBRARY_FILE,
        help=f"spotify library file (required) (default: {DEFAULT_LIBRARY_FILE})",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="HTML-escape artist / track / album values",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="show this help message and exit",
    )
    return parser


def resolve_library_path(file: str) -> Optional[Path]:
    """
    file を絶対パスにして、存在すればそのパスを返す。
    見つからなければ None。
    """
    path = Path(os.path.abspath(file))
    if not path.exists():
        return None
    return path


def usage_exit(parser: argparse.ArgumentParser, message: str = "") -> int:
    print(message, end="")
    sys.stdout.flush()
    parser.print_help(sys.stderr)
    return 1


# =========================
# メイン
# =========================


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    # 引数なしは -f=YourLibrary.json と同じ
    if not args:
        args = [f"-f={DEFAULT_LIBRARY_FILE}"]

    if args[0] == "-h":
        return usage_exit(parser)

    # 最初の非フラグ引数から後ろは無視する
    opts, extra = parser.parse_known_args(args)
    if extra and extra[0].startswith("-") and extra[0] != "-":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    # 先頭以外の -h / --help は使い方を出して正常終了
    if opts.help:
        parser.print_help(sys.stderr)
        return 0

    load_dotenv()
    configure_logging(verbose=opts.verbose)

    path = resolve_library_path(opts.file)
    if path is None:
        return usage_exit(parser, MISSING_FILE_MESSAGE)

    try:
        library = load_library(path)
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Cannot decode {path}: {e}")
        return 1

    logger.debug(f"Loaded {path}: {library_counts(library)}")

    title = os.getenv("YOURLIBRARY_PAGE_TITLE", DEFAULT_TITLE)
    page = render_html(library, title=title, escape=opts.escape)

    html_path = html_output_path(path)
    try:
        html_path.write_text(page, encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot write {html_path}: {e}")
        return 1

    logger.debug(f"HTML: {html_path}")
    logger.info("Done!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

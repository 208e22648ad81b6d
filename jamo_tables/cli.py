#!/usr/bin/env python3
# jamo_tables/cli.py
# Usage:
#   python -m jamo_tables > character_conversions.inc
#   python -m jamo_tables --format python --out jamo_conversions.py
#   python -m jamo_tables --linker-scope Character::CharacterImpl
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .builder import MalformedConfigurationError, build_tables
from .config import load_settings, setup_logging
from .emit import FORMATS, render
from .vocabulary import VocabularyRegistry

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    s = load_settings()
    ap = argparse.ArgumentParser(prog="jamo-tables",
                                 description="Generate compatibility jamo <-> choseong/jungseong/jongseong tables")
    ap.add_argument("--format", choices=FORMATS, default=s.format if s.format in FORMATS else "c",
                    help="output format (default: %(default)s)")
    ap.add_argument("--prefix", default=s.prefix, help="master-side array name prefix (default: %(default)s)")
    ap.add_argument("--linker-scope", default=s.linker_scope,
                    help="emit out-of-line definitions qualified by this scope (c format only)")
    ap.add_argument("--out", default=None, help="output file (default: stdout)")
    ap.add_argument("--log-level", default=s.log_level, help="logging level (default: %(default)s)")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None, registry: Optional[VocabularyRegistry] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    # build + render everything before touching the output
    try:
        tables = build_tables(registry, prefix=args.prefix)
    except MalformedConfigurationError as e:
        log.error("Table generation aborted: %s", e)
        return 1
    text = render(tables, args.format, linker_scope=args.linker_scope)

    if args.out:
        out = Path(args.out)
        out.write_text(text, encoding="utf-8")
        log.info("Wrote %s (%d bytes, format=%s)", out, len(text), args.format)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())

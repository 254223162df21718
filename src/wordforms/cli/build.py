#!/usr/bin/env python3
"""
wordforms-be — Build Belarusian word-form lists from GrammarDB.

Reads:
  - GrammarDB/data/{A1,A2,C,...,Z}.xml (checkout of the RELEASE-202309 tag)

Outputs:
  - wordforms-be-2008.txt
  - wordforms-be-all.txt
  - wordforms-be-altpairs.txt
  - wordforms-be-manifest.json (with --manifest)

Usage:
    wordforms-be [--data-dir DIR] [--output-dir DIR] [--verbose] [--manifest]

Nothing is written unless every source file parses cleanly.
"""

import argparse
import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from wordforms.aggregate import WordformAggregates
from wordforms.export_wordforms import export_all
from wordforms.grammardb import (
    GRAMMARDB_TAG,
    MANIFEST_OUTPUT,
    XML_FILES,
    default_data_dir,
    missing_data_message,
)
from wordforms.manifest import build_manifest, write_manifest
from wordforms.paradigm_parse import GrammarDBStructureError, parse_sources
from wordforms.progress_display import ProgressDisplay


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build Belarusian word-form lists from GrammarDB XML'
    )
    parser.add_argument('--data-dir', type=Path, default=default_data_dir(),
                        help='GrammarDB data directory (default: $GRAMMARDB_DATA or GrammarDB/data)')
    parser.add_argument('--output-dir', type=Path, default=Path('.'),
                        help='Directory for the generated lists (default: current directory)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Report every skipped form')
    parser.add_argument('--no-progress', action='store_true',
                        help='Disable the live progress panel')
    parser.add_argument('--manifest', action='store_true',
                        help=f'Also write {MANIFEST_OUTPUT}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the wordforms-be CLI."""
    args = build_parser().parse_args(argv)

    message = missing_data_message(args.data_dir)
    if message:
        logger.error(message)
        return 1

    logger.info("GrammarDB word-form export")
    logger.info(f"  Data:   {args.data_dir}")
    logger.info(f"  Tag:    {GRAMMARDB_TAG}")
    logger.info(f"  Output: {args.output_dir}")
    logger.info("")

    aggregates = WordformAggregates()

    try:
        with ProgressDisplay("Parsing GrammarDB", enabled=not args.no_progress) as progress:
            stats = parse_sources(args.data_dir, XML_FILES, aggregates, args.verbose, progress)
    except GrammarDBStructureError as e:
        logger.error(str(e))
        return 1
    except ET.ParseError as e:
        logger.error(f"Malformed XML: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read source file: {e}")
        return 1

    outputs = export_all(aggregates, args.output_dir, GRAMMARDB_TAG)
    counts = aggregates.counts()

    if args.manifest:
        manifest = build_manifest(outputs, counts, GRAMMARDB_TAG)
        write_manifest(manifest, args.output_dir / MANIFEST_OUTPUT)

    logger.info("")
    logger.info("=" * 60)
    logger.info("WORDFORMS EXPORT SUMMARY")
    logger.info("=" * 60)
    logger.info(f"  Files parsed:      {stats.files:,}")
    logger.info(f"  Paradigms:         {stats.paradigms:,}")
    logger.info(f"  Variants:          {stats.variants:,} ({stats.skipped_variants:,} skipped)")
    logger.info(f"  Forms:             {stats.forms:,} ({stats.skipped_forms:,} skipped)")
    logger.info(f"  Modern lemmas:     {counts['modern_lemmas']:,}")
    logger.info(f"  All lemmas:        {counts['all_lemmas']:,}")
    logger.info(f"  Alternative pairs: {counts['alt_pairs']:,}")
    logger.info("=" * 60)

    return 0


if __name__ == '__main__':
    sys.exit(main())

# main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from ogz_analyzer.parser import OgzFileParser
from ogz_analyzer.utils.logging import setup_logging

logger = logging.getLogger(__name__)

def process_ogz_files(
    paths: Iterable[Path],
    output_dir: Path,
    include_octree: bool = False
) -> List[Path]:
    """Decode each OGZ file and write its analysis as JSON.

    A file that fails to decode is logged and skipped; the rest are
    still processed.

    Returns:
        Paths that failed
    """
    parser = OgzFileParser()
    failed = []

    output_dir.mkdir(parents=True, exist_ok=True)

    for ogz_file in paths:
        try:
            logger.info(f"Processing {ogz_file}")
            result = parser.parse_file(ogz_file, include_octree=include_octree)

            # Decode errors were already logged by the parser
            if result['errors']:
                failed.append(ogz_file)
                continue

            output_path = output_dir / f"{ogz_file.stem}_analysis.json"
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(result, f, indent=2)

            stats = result['world']['octree_stats']
            logger.info(
                f"Results written to {output_path} "
                f"({len(result['world']['entities'])} entities, {stats['cubes']} cubes)"
            )

        except Exception as e:
            logger.error(f"Failed to process {ogz_file}: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")
            failed.append(ogz_file)

    return failed

def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode OGZ map files and generate analysis files'
    )
    parser.add_argument('paths',
                       nargs='+',
                       help='OGZ files to decode (gzipped or raw)')
    parser.add_argument('--output',
                       default='output',
                       help='Output directory for JSON analysis files')
    parser.add_argument('--dump-octree',
                       action='store_true',
                       help='Include the full cube tree in the JSON output')
    parser.add_argument('--log-dir',
                       default=None,
                       help='Log directory (console only if omitted)')
    parser.add_argument('--verbose', '-v',
                       action='store_true',
                       help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    paths = [Path(p) for p in args.paths]
    output_dir = Path(args.output)

    try:
        failed = process_ogz_files(paths, output_dir, args.dump_octree)
    except OSError as e:
        # Output directory could not be created
        logger.error(f"Processing failed: {e}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Detailed error:")
        return 1

    if failed:
        logger.error(f"{len(failed)} of {len(paths)} files failed")
        return 1

    logger.info("Processing complete")
    return 0

if __name__ == "__main__":
    sys.exit(main())

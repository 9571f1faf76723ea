"""
Command line driver for landmark conversion.

Usage:
    landmark-converter -in_file pairs.txt -in_type ix_pp -out_dir out \\
        -out_type slr_fid -keep_all 1

    # Convert a registration landmark list to plain text:
    python -m PyLandmarkConverter -in_file lmk.txt -in_type ireg -out_dir out \\
        -out_type std_txt -keep_all 1
"""

import argparse
import logging
from typing import List, Optional

from .config import ConverterConfig
from .errors import LandmarkConverterError
from .logging_utils import configure_logging
from .processing.adapters.registry import (
    LandmarkReaderRegistry,
    LandmarkWriterRegistry,
)
from .PyLandmarkConverter import LandmarkConverter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landmark-converter",
        description="Convert landmark coordinates between registration file formats",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Input
    parser.add_argument(
        "-in_file",
        type=str,
        required=True,
        help="Input landmark file",
    )
    parser.add_argument(
        "-in_type",
        type=str,
        required=True,
        choices=LandmarkReaderRegistry.list_available(),
        help="Input format: ix_pp (Image eXplorer point pairs), ireg (registration landmarks)",
    )

    # Output
    parser.add_argument(
        "-out_dir",
        type=str,
        required=True,
        help="Directory to write the output file(s) to",
    )
    parser.add_argument(
        "-out_type",
        type=str,
        required=True,
        choices=LandmarkWriterRegistry.list_available(),
        help="Output format: tfx_lmk (Transformix), slr_fid (3D Slicer fiducials), std_txt (plain text)",
    )
    parser.add_argument(
        "-keep_all",
        type=str,
        required=True,
        choices=["0", "1"],
        help="Keep (1) or discard (0) manually chosen points marked as very unsure",
    )

    # Behaviour
    parser.add_argument(
        "-strict",
        action="store_true",
        help="Stop on unreadable files and malformed tokens instead of warning",
    )
    parser.add_argument(
        "-image_root",
        type=str,
        default=None,
        help="Directory replacing the drive letter of Windows image paths in point pair files",
    )
    parser.add_argument(
        "-log_file",
        type=str,
        default="landmark_converter.log",
        help="Log file (DEBUG level)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one conversion and return the process exit status."""
    args = parse_args(argv)
    config = ConverterConfig(
        in_file=args.in_file,
        in_type=args.in_type,
        out_dir=args.out_dir,
        out_type=args.out_type,
        keep_all=args.keep_all,
        strict=args.strict,
        image_root=args.image_root,
        log_file=args.log_file,
    )
    # Rejected arguments are reported on the console only; no log file.
    try:
        converter = LandmarkConverter(config=config)
    except (LandmarkConverterError, ValueError) as e:
        configure_logging(log_file=None)
        logger.error(str(e))
        return 1

    configure_logging(log_file=config.log_file)
    try:
        written = converter.convert()
    except (LandmarkConverterError, ValueError) as e:
        logger.error(str(e))
        return 1

    for path in written:
        logger.debug(f"Output: {path}")
    return 0

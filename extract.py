#!/usr/bin/env python3
"""
PDF text extraction — CLI entry point.

Extracts the text of every page of a PDF, either as plain text or as
absolutely-positioned HTML that mirrors the page layout.

Usage::

    python extract.py input.pdf
    python extract.py input.pdf output.txt
    python extract.py input.pdf page.html --mode layout
    python extract.py locked.pdf --password secret -v 2

Verbosity levels::

    -v 0   Quiet — warnings and errors only.
    -v 1   Normal — run summary and progress bar (default).
    -v 2   Debug — per-page item counts, all internal decisions.
"""

import argparse
import logging
import sys
from pathlib import Path

from core.errors import ExtractionError
from extraction.pipeline import ExtractionConfig, ExtractionPipeline
from extraction.projector import ExtractionMode

logger = logging.getLogger("extraction")

# Mapping from --verbose integer to logging level
_VERBOSITY_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# ------------------------------------------------------------------
# Argument parsing
# ------------------------------------------------------------------


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'.")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Scale must be > 0, got '{value}'.")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with all extraction options."""
    p = argparse.ArgumentParser(
        description="Extract the text of a PDF as plain text or positioned HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  python extract.py paper.pdf\n"
            "  python extract.py paper.pdf paper.txt\n"
            "  python extract.py paper.pdf paper.html --mode layout\n"
        ),
    )

    # -- Positional --------------------------------------------------------
    p.add_argument("input", help="Path to the input PDF file")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output file. Defaults to standard output.",
    )

    # -- Output ------------------------------------------------------------
    output = p.add_argument_group("output")
    output.add_argument(
        "--mode",
        default=ExtractionMode.TEXT.value,
        choices=[m.value for m in ExtractionMode],
        help="'text' for plain text, 'layout' for positioned HTML (default: text)",
    )
    output.add_argument(
        "--scale",
        type=_positive_float,
        default=1.0,
        metavar="FLOAT",
        help="Viewport scale factor for layout pages (default: 1.0)",
    )

    # -- Engine ------------------------------------------------------------
    engine = p.add_argument_group("engine")
    engine.add_argument(
        "--password",
        default=None,
        help="Password for encrypted PDFs",
    )
    engine.add_argument(
        "--no-ligatures",
        action="store_true",
        help="Expand ligature glyphs into their component letters",
    )

    # -- Debug / output control --------------------------------------------
    debug = p.add_argument_group("debug & output")
    debug.add_argument(
        "-v",
        "--verbose",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Verbosity: 0=quiet, 1=normal (default), 2=debug",
    )
    debug.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )

    return p


# ------------------------------------------------------------------
# Logging setup
# ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    """
    Set up the ``extraction`` and ``core`` loggers.

    Logs always go to stderr so that extracted text written to stdout
    stays clean.
    """
    level = _VERBOSITY_MAP.get(verbosity, logging.INFO)

    if level <= logging.DEBUG:
        fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif level <= logging.INFO:
        fmt = "%(message)s"
        datefmt = None
    else:
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for name in ("extraction", "core"):
        root = logging.getLogger(name)
        root.setLevel(level)
        root.handlers.clear()
        root.addHandler(handler)


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv=None) -> int:
    """Parse arguments, configure logging, and run the pipeline."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Logging must be configured before any logger calls
    disable_tqdm = args.no_progress or args.verbose == 0
    _configure_logging(args.verbose)

    # Validate input file
    input_path = Path(args.input)
    if not input_path.exists():
        parser.error(f"Input file not found: {input_path}")
    if input_path.suffix.lower() != ".pdf":
        parser.error(f"Input must be a PDF file: {input_path}")

    config = ExtractionConfig(
        mode=args.mode,
        viewport_scale=args.scale,
        password=args.password,
        preserve_ligatures=not args.no_ligatures,
        disable_tqdm=disable_tqdm,
    )

    logger.info("PDF text extraction")
    logger.info("  Input:  %s", input_path)
    logger.info("  Output: %s", args.output or "<stdout>")
    logger.info("  Mode:   %s", config.mode)

    pipeline = ExtractionPipeline(config)
    try:
        result = pipeline.extract(input_path)
    except ExtractionError as e:
        logger.error("Failed to extract text from PDF. %s", e)
        return 1

    if args.output:
        Path(args.output).write_text(result.text, encoding="utf-8")
    else:
        sys.stdout.write(result.text)
        if result.text and not result.text.endswith("\n"):
            sys.stdout.write("\n")

    logger.info("\n%s", result.summary())

    if not result.text.strip():
        logger.warning("No text was extracted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

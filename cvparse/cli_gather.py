"""
CLI Phase 1: Gather user requirements.

Parses command-line arguments and returns UserConfig dataclass.
No side effects - just parsing and conversion.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .cli_config import UserConfig
from .vocabulary import SUPPORTED_MIME_TYPES


def gather_user_requirements(argv: Optional[List[str]] = None) -> UserConfig:
    """
    Phase 1: Parse command-line arguments and return user configuration.
    """
    parser = argparse.ArgumentParser(
        description="Parse résumé documents (PDF, DOC/DOCX, text) into structured JSON.",
        epilog="""
Examples:
  Print the parsed record of one file:
    python -m cvparse.cli cv.pdf

  Parse a batch into a folder, four files at a time:
    python -m cvparse.cli cvs/*.docx --output-dir parsed/ --jobs 4

  Force the MIME type of a file without a useful extension:
    python -m cvparse.cli upload.bin --mime-type application/pdf
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("sources", nargs="+", type=Path, metavar="FILE",
                        help="Résumé documents to parse.")
    parser.add_argument("--mime-type", default=None,
                        help="Declared MIME type for every FILE. "
                             f"Supported: {', '.join(SUPPORTED_MIME_TYPES)}. "
                             "Default: guessed from each file extension.")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Write <name>.json per FILE here instead of printing to stdout.")
    parser.add_argument("--jobs", type=int, default=1,
                        help="Number of files parsed in parallel (default: 1).")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default: 2).")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug).")
    parser.add_argument("--debug", action="store_true",
                        help="Debug logging and tracebacks on failure.")
    parser.add_argument("--log-file", default=None,
                        help="Also write full logs to this file.")

    args = parser.parse_args(argv)
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    return UserConfig(
        sources=list(args.sources),
        mime_type=args.mime_type,
        output_dir=args.output_dir,
        jobs=args.jobs,
        indent=args.indent,
        debug=args.debug,
        verbosity=args.verbose,
        log_file=args.log_file,
    )

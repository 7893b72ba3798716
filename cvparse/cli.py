#!/usr/bin/env python3
# Copyright 2025 Ivo Mateev
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command-line interface for cvparse.

Two-phase architecture:
1. Gather user requirements (parse args) -> UserConfig
2. Execute: parse each source and emit its JSON record
"""

from __future__ import annotations

import json
import sys
import traceback
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Tuple

from .cli_config import UserConfig
from .cli_gather import gather_user_requirements
from .errors import CVParseError
from .logging_utils import LOG, setup_logging
from .pipeline import guess_mime_type, parse
from .shared import CVRecord


def parse_source(source: Path, config: UserConfig) -> Tuple[Path, Optional[CVRecord], str]:
    """Parse one file. Returns (source, record or None, error message)."""
    mime_type = config.mime_type or guess_mime_type(source)
    try:
        return source, parse(source, mime_type), ""
    except (CVParseError, OSError) as e:
        if config.debug:
            LOG.error(traceback.format_exc())
        return source, None, str(e)


def write_record(source: Path, record: CVRecord, config: UserConfig) -> None:
    payload = json.dumps(record.as_dict(), indent=config.indent, ensure_ascii=False)
    if config.output_dir is None:
        sys.stdout.write(payload + "\n")
        return
    out = config.output_dir / f"{source.stem}.json"
    out.write_text(payload, encoding="utf-8")
    LOG.info("Wrote %s", out)


def execute(config: UserConfig) -> int:
    if config.output_dir is not None:
        config.output_dir.mkdir(parents=True, exist_ok=True)

    if config.parallel:
        # Parsing keeps no shared state, so plain threads are enough
        with ThreadPoolExecutor(max_workers=config.jobs) as pool:
            results = list(pool.map(lambda s: parse_source(s, config), config.sources))
    else:
        results = [parse_source(s, config) for s in config.sources]

    failures: List[str] = []
    for source, record, error in results:
        if record is None:
            LOG.error("%s: %s", source.name, error)
            failures.append(source.name)
            continue
        write_record(source, record, config)

    if failures:
        LOG.warning("%d of %d file(s) failed", len(failures), len(results))
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = gather_user_requirements(argv)

    if config.log_file:
        Path(config.log_file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    setup_logging(config.debug, log_file=config.log_file, verbosity=config.verbosity)

    try:
        return execute(config)
    except Exception as e:
        LOG.error(str(e))
        if config.debug:
            LOG.error(traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

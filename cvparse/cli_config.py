"""
CLI configuration data structures.

Defines the UserConfig dataclass shared by the gather and execute phases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    sources: List[Path] = field(default_factory=list)
    mime_type: Optional[str] = None  # None: guess from each file extension
    output_dir: Optional[Path] = None  # None: print JSON to stdout
    jobs: int = 1
    indent: int = 2

    debug: bool = False
    verbosity: int = 0
    log_file: Optional[str] = None

    @property
    def parallel(self) -> bool:
        return self.jobs > 1 and len(self.sources) > 1

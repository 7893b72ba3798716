"""
Patterns shared by several extractors.
"""

from __future__ import annotations

import re
from typing import Optional

from ..vocabulary import ACHIEVEMENT_LABELS

MONTH_NAME = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|"
    r"May|Jun(?:e)?|Jul(?:y)?|Aug(?:ust)?|"
    r"Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

ACHIEVEMENT_RE = re.compile(
    r"^(?:" + "|".join(ACHIEVEMENT_LABELS) + r")\s*:\s*(.+)$",
    re.IGNORECASE,
)


def achievement_text(line: str) -> Optional[str]:
    """Text after an "Achievements:"-style label, or None."""
    m = ACHIEVEMENT_RE.match(line)
    return m.group(1).strip() if m else None

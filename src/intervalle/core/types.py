"""Type aliases for intervalle."""

from datetime import datetime
from pathlib import Path
from typing import TypeAlias

# Path types
PathLike: TypeAlias = str | Path

# A calendar date plus wall-clock time, no tzinfo
Instant: TypeAlias = datetime

# Reference instant for relative keywords and bare times
Anchor: TypeAlias = datetime

"""Top-level package for namesplit.

namesplit turns free-form pasted text (names, ID numbers, company names,
deceased-person markers) into a clean, deduplicated, one-per-line list. The
main entry points are `process` and `NameSplitPipeline`.
"""

from .models.datatypes import SplitOptions, SplitResult
from .pipeline import NameSplitPipeline, process, to_multiline

__all__ = [
    "NameSplitPipeline",
    "SplitOptions",
    "SplitResult",
    "process",
    "to_multiline",
    "__version__",
]

__version__ = "0.1.0"

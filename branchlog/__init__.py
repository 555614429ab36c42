__version__ = "0.1.0"

from .branch import commits_on_branch, first_unique, is_merged
from .history import GitHistory
from .errors import (
    BranchlogError,
    ReferenceResolutionError,
    MergeBaseError,
    IterationError,
)

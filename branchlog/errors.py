class BranchlogError(Exception):
    pass


class ReferenceResolutionError(BranchlogError):
    """A reference could not be resolved to a commit."""

    def __init__(self, ref):
        super().__init__("Could not resolve {} to a commit".format(ref))
        self.ref = ref


class MergeBaseError(BranchlogError):
    """No common ancestor could be computed for two commits."""

    def __init__(self, commit, other, reason="no common ancestor"):
        super().__init__(
            "Could not find merge base of {} and {}: {}".format(commit, other, reason)
        )
        self.commit = commit
        self.other = other


class IterationError(BranchlogError):
    pass

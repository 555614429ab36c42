import logging

import git

from .errors import MergeBaseError
from .history import GitHistory
from .util import walk_until


def _as_history(history):
    if isinstance(history, git.Repo):
        return GitHistory(history)
    return history


def commit_from_history(history, ref):
    hexsha = history.resolve_reference(ref)
    return history.get_commit(hexsha)


# Find the common ancestor of two commits. When git reports more than one
# candidate, the last one is used.
def merge_base(history, commit, other):
    try:
        bases = history.merge_bases(commit, other)
        if not bases:
            raise MergeBaseError(commit.hexsha, other.hexsha)

    except MergeBaseError as ex:
        logging.error("%s", ex)
        raise

    return bases[-1]


def commits_on_branch(history, branch_ref, compare_ref):
    """
    Return the hexshas of the commits on branch_ref that aren't on compare_ref,
    newest first. The walk starts at the tip of branch_ref and stops at the
    merge base of the two refs, which is not included.
    """
    history = _as_history(history)

    branch_commit = commit_from_history(history, branch_ref)
    compare_commit = commit_from_history(history, compare_ref)

    common_hash = merge_base(history, branch_commit, compare_commit).hexsha
    logging.info("walking %s back to %s", branch_ref, common_hash)

    commits, found = walk_until(
        history.iter_history(branch_commit),
        lambda commit: commit.hexsha == common_hash,
    )

    if not found:
        logging.info("history of %s ended before reaching %s", branch_ref, common_hash)

    return [c.hexsha for c in commits]


# Find the oldest commit on branch that isn't on upstream
def first_unique(history, branch_ref, compare_ref):
    commits = commits_on_branch(history, branch_ref, compare_ref)
    if not commits:
        return None

    return commits[-1]


def is_merged(history, branch_ref, compare_ref):
    return not commits_on_branch(history, branch_ref, compare_ref)

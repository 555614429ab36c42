import logging

from git.exc import GitCommandError

from .errors import ReferenceResolutionError, MergeBaseError, IterationError


class GitHistory:
    """
    GitHistory is the read-only view of a repo's commit graph that branchlog
    needs. Anything with the same four methods can stand in for it.
    """

    def __init__(self, repo):
        self.repo = repo

    def resolve_reference(self, ref):
        """Peel ref down to the hexsha of the commit it points to."""
        try:
            return self.repo.git.rev_parse(
                "--verify", "--end-of-options", "{}^{{commit}}".format(ref)
            )
        except GitCommandError as ex:
            raise ReferenceResolutionError(ref) from ex

    def get_commit(self, hexsha):
        # Commit objects load lazily, so make sure the sha exists first
        return self.repo.commit(self.resolve_reference(hexsha))

    def merge_bases(self, commit, other):
        """
        Return every merge base candidate of commit and other. An empty list
        means the two histories are unrelated.
        """
        try:
            bases = self.repo.merge_base(commit, other, all=True)
        except GitCommandError as ex:
            raise MergeBaseError(str(commit), str(other), ex) from ex

        logging.debug("merge bases of %s and %s: %s", commit, other, bases)
        return bases

    def iter_history(self, commit):
        # iter_commits is lazy, so git errors show up while iterating
        try:
            for c in self.repo.iter_commits(commit):
                yield c
        except GitCommandError as ex:
            raise IterationError("Failed to walk history of {}: {}".format(commit, ex)) from ex

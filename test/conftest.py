import pytest

from git import Repo
from git.objects import Commit

@pytest.fixture
def repo(tmpdir_factory):
    repo = Repo.init(tmpdir_factory.mktemp("repo"), initial_branch="master")

    # Annotated tags need a committer identity
    with repo.config_writer() as config:
        config.set_value("user", "name", "branchlog")
        config.set_value("user", "email", "branchlog@example.com")

    return repo

# Produces a complex branching repo
# * 078d4b8 (branch1) 4
# * 9c96605 3
# | * 752d474 (branch2) 12
# | * 60b94a4 11
# | | * 3d83fed (branch3) 10
# | | * 6d95ca2 9
# | |/
# | * 8d4d6b2 8
# | * f2f9e5a 7
# | | * 5ef83b3 (HEAD -> master) 14
# | | * f7eea99 13
# | |/
# | * 3559552 6
# | * e864436 5
# |/
# * 6051626 2
# * 4f7eeec 1
# * 45b78f0 0
@pytest.fixture
def branching_repo(repo, commit):
    master = repo.head.ref
    commit(repo)
    commit(repo)
    commit(repo)

    branch1 = repo.create_head("branch1")

    branch1.checkout()
    commit(repo)
    commit(repo)

    master.checkout()
    commit(repo)
    commit(repo)

    branch2 = repo.create_head("branch2")

    branch2.checkout()
    commit(repo)
    commit(repo)

    branch3 = repo.create_head("branch3")

    branch3.checkout()
    commit(repo)
    commit(repo)

    branch2.checkout()
    commit(repo)
    commit(repo)

    master.checkout()
    commit(repo)
    commit(repo)

    return repo

# Adds a root commit with no history in common with master, on branch orphan
@pytest.fixture
def orphan_repo(branching_repo):
    tree = branching_repo.head.commit.tree
    root = Commit.create_from_tree(branching_repo, tree, "orphan", parent_commits=[], head=False)
    branching_repo.create_head("orphan", root)

    return branching_repo

@pytest.fixture
def commit():
    class CommitFactory:
        commit_number = 0

        def _do_commit(self, repo):
            f = open("{}/{}".format(repo.working_tree_dir, self.commit_number), 'a')
            f.close()

            repo.index.add([str(self.commit_number)])
            c = repo.index.commit(str(self.commit_number))

            self.commit_number += 1
            return c

    return CommitFactory()._do_commit

@pytest.fixture
def commits(branching_repo):
    return index_map(branching_repo)

# Map the summary number of every commit in repo to its hexsha
def index_map(repo):
    commits = {}
    for head in repo.heads:
        for commit in repo.iter_commits(head):
            if commit.summary.isdigit():
                commits[int(commit.summary)] = commit.hexsha

    return commits

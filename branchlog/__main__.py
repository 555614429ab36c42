import argparse
import logging
import sys

from pathlib import Path

import git
import requests
import yaml

from . import __version__
from .config import load_config
from .branch import commits_on_branch
from .history import GitHistory
from .errors import ReferenceResolutionError, MergeBaseError, IterationError

from . import style

default_config_path = Path.home().joinpath(".branchlog.yml")


def _check_for_updates():
    try:
        latest = requests.get("https://pypi.org/pypi/branchlog/json", timeout=5).json()[
            "info"
        ]["version"]
    except (requests.RequestException, ValueError, KeyError) as ex:
        logging.warning("Could not check for updates: %s", ex)
        return

    if latest != __version__:
        print("You are running branchlog {}, the latest is {}".format(__version__, latest))


def _log(history, args, config):
    commits = commits_on_branch(history, args.branch, args.compare)

    if args.count:
        print(len(commits))
        return

    if args.reverse:
        commits = list(reversed(commits))

    color = style.context
    if args.no_color or not config["color"]:
        color = None

    for sha in commits:
        commit = history.get_commit(sha)
        short = sha if args.full else sha[:8]
        print("{} {}".format(style.wrap(short, color), commit.summary))


def _read_config(path):
    # A missing config at the default location just means defaults
    if path is None:
        if not default_config_path.exists():
            return load_config()
        path = default_config_path

    return load_config(path)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="list the commits on a branch that aren't on another branch",
    )
    parser.add_argument(
        "-C",
        metavar="path",
        type=Path,
        help="change directory to path before running branchlog",
    )
    parser.add_argument(
        "-f",
        "--config",
        metavar="config",
        type=Path,
        help="branchlog config file (default: ~/.branchlog.yml)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="display verbose logging information",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="display version information",
    )
    parser.add_argument(
        "-c",
        "--compare",
        metavar="ref",
        help="branch to compare against (default: upstream from config)",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        help="list the oldest commit first",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="only print the number of commits",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="print full commit hashes",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="disable colored output",
    )
    parser.add_argument(
        "branch",
        nargs="?",
        default="HEAD",
        help="branch to list commits from (default: HEAD)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    if args.version:
        print("branchlog {} from {}".format(__version__, __file__))
        return 0

    try:
        config = _read_config(args.config)
    except IOError as ex:
        logging.error("Could not open config file: %s", ex)
        return 1
    except (ValueError, yaml.YAMLError) as ex:
        logging.error("Could not parse config file: %s", ex)
        return 1
    except KeyError as ex:
        logging.error("Missing required config field: %s", ex)
        return 2

    if config["check_for_updates"]:
        _check_for_updates()

    if args.compare is None:
        args.compare = config["upstream"]

    # Find the repo root
    try:
        if args.C:
            repo_root = args.C
        else:
            repo_root = git.Git().rev_parse("--show-toplevel")
        repo = git.Repo(repo_root)

    except (git.GitCommandError, git.InvalidGitRepositoryError, git.NoSuchPathError) as ex:
        logging.error("Could not find git repo: %s", ex)
        return 6

    try:
        _log(GitHistory(repo), args, config)

    except ReferenceResolutionError as ex:
        logging.error("%s", ex)
        return 3

    except MergeBaseError:
        # Already logged where the merge base was computed
        return 4

    except IterationError as ex:
        logging.error("%s", ex)
        return 5

    return 0


if __name__ == "__main__":
    sys.exit(main())

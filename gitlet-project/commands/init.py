# The command: gitlet init
# What it does: Initializes a new repository by creating the hidden `.gitlet` directory and its internal structure, then records the initial commit
# How it does: It creates `objects`, `refs` and `refs/remotes`, points HEAD at `refs/master`, writes an empty stage and global ref, and commits the fixed "initial commit" stamped with the UNIX epoch
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Directed Acyclic Graph (the commit history)

import os

from utils import repository, commits, index as index_utils
from commands import commit

def run(args):
    init_repository(os.getcwd())

def init_repository(repo_root):
    repository.create_layout(repo_root)
    index_utils.clear_index(repo_root)
    return commit.record_commit(repo_root, commits.Commit.initial())

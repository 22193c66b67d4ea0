# What it does: Provides high-level functions for interacting with the repository structure, like finding the repo root and managing branch refs, the global ref and the remote table
# How it does: It reads/writes files like `HEAD`, `global` and those in `refs/` to manage the repository's current state. `find_repo_root` only looks for a `.gitlet` directory in the given (current) directory
# What data structure it uses: Conceptually, it manages pointers (the `HEAD` file and the branch commit-trees), which are fundamental components of data structures like Graphs and Linked Lists

import os

from .refs import CommitTree, read_ref, write_ref

GITLET_DIR = '.gitlet'


class GitletError(Exception):
    """A user-facing failure; the message is printed verbatim by the CLI."""


def find_repo_root(path='.'): # Returns the directory if it holds a .gitlet directory; parents are not searched
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, GITLET_DIR)):
        return path
    return None

def require_repo_root(path='.'):
    repo_root = find_repo_root(path)
    if not repo_root:
        raise GitletError("Not in an initialized Gitlet directory.")
    return repo_root

def gitlet_path(repo_root, *parts):
    return os.path.join(repo_root, GITLET_DIR, *parts)

def repo_root_of(gitlet_dir): # The working directory that owns a given .gitlet directory
    return os.path.dirname(os.path.abspath(gitlet_dir.rstrip(os.sep)))

# HEAD

def get_current_branch(repo_root):
    with open(gitlet_path(repo_root, 'HEAD'), 'r') as f:
        head_content = f.read().strip()
    return head_content.split('/', 1)[1]

def set_head(repo_root, branch_name):
    with open(gitlet_path(repo_root, 'HEAD'), 'w') as f:
        f.write(f'refs/{branch_name}')

def is_head(repo_root, branch_name):
    with open(gitlet_path(repo_root, 'HEAD'), 'r') as f:
        return f.read().strip() == f'refs/{branch_name}'

def get_head_commit(repo_root): # Retrieves the commit hash at the tip of the current branch
    return read_branch(repo_root, get_current_branch(repo_root)).head

# Branches

def branch_path(repo_root, branch_name):
    return gitlet_path(repo_root, 'refs', branch_name)

def branch_exists(repo_root, branch_name):
    return os.path.isfile(branch_path(repo_root, branch_name))

def get_all_branches(repo_root): # Lists all branch names by reading the plain files of the refs directory
    refs_dir = gitlet_path(repo_root, 'refs')
    return sorted(name for name in os.listdir(refs_dir)
                  if os.path.isfile(os.path.join(refs_dir, name)))

def read_branch(repo_root, branch_name): # Returns the commit-tree of a branch, or None if the branch doesn't exist
    path = branch_path(repo_root, branch_name)
    if not os.path.isfile(path):
        return None
    return read_ref(path)

def write_branch(repo_root, branch_name, tree):
    write_ref(branch_path(repo_root, branch_name), tree)

def read_current_branch(repo_root):
    return read_branch(repo_root, get_current_branch(repo_root))

def write_current_branch(repo_root, tree):
    write_branch(repo_root, get_current_branch(repo_root), tree)

def delete_branch(repo_root, branch_name):
    os.remove(branch_path(repo_root, branch_name))

# Global ref

def read_global(repo_root):
    return read_ref(gitlet_path(repo_root, 'global'))

def write_global(repo_root, tree):
    write_ref(gitlet_path(repo_root, 'global'), tree)

# Remotes

def remote_path(repo_root, remote_name):
    return gitlet_path(repo_root, 'refs', 'remotes', remote_name)

def remote_exists(repo_root, remote_name):
    return os.path.isfile(remote_path(repo_root, remote_name))

def normalize_remote_dir(directory):
    return os.path.abspath(directory.replace('/', os.sep))

def write_remote(repo_root, remote_name, directory):
    with open(remote_path(repo_root, remote_name), 'w') as f:
        f.write(directory)

def read_remote(repo_root, remote_name): # Returns the registered .gitlet directory of a remote
    with open(remote_path(repo_root, remote_name), 'r') as f:
        return f.read().strip()

def delete_remote(repo_root, remote_name):
    os.remove(remote_path(repo_root, remote_name))

def create_layout(repo_root):
    """
    Creates the .gitlet hierarchy with an empty master ref, stage and global ref.
    Raises GitletError if the directory already exists.
    """
    try:
        os.mkdir(gitlet_path(repo_root))
    except FileExistsError:
        raise GitletError("A Gitlet version-control system already exists in the current directory.")
    os.makedirs(gitlet_path(repo_root, 'objects'))
    os.makedirs(gitlet_path(repo_root, 'refs', 'remotes'))
    set_head(repo_root, 'master')
    write_branch(repo_root, 'master', CommitTree())
    write_global(repo_root, CommitTree())

# What it does: Reads and writes the plain files of the working directory (the parent of .gitlet)
# How it does: Only top-level regular files are considered; subdirectories (including .gitlet itself) are never traversed
# What data structure it uses: List (sorted file names)

import os

from . import blobs, index
from .repository import GITLET_DIR, GitletError

UNTRACKED_MESSAGE = "There is an untracked file in the way; delete it, or add and commit it first."

def plain_filenames(repo_root):
    return sorted(name for name in os.listdir(repo_root)
                  if os.path.isfile(os.path.join(repo_root, name)))

def file_exists(repo_root, name):
    return os.path.isfile(os.path.join(repo_root, name))

def write_file(repo_root, name, content):
    with open(os.path.join(repo_root, name), 'wb') as f:
        f.write(content)

def write_blob_file(repo_root, name, blob_hash): # Restores a working file from a stored blob
    blob = blobs.read_blob(repo_root, blob_hash)
    write_file(repo_root, name, blob.content)

def restricted_delete(repo_root, name):
    """
    Deletes a working file, refusing to touch anything outside a Gitlet working directory.
    Returns True if a file was removed.
    """
    if not os.path.isdir(os.path.join(repo_root, GITLET_DIR)):
        raise ValueError("not .gitlet working directory")
    path = os.path.join(repo_root, name)
    if not os.path.isfile(path):
        return False
    os.remove(path)
    return True

def clear_working_files(repo_root):
    for name in plain_filenames(repo_root):
        restricted_delete(repo_root, name)

def find_untracked(repo_root, tracked=None): # Working files that neither HEAD nor the stage tracks
    if tracked is None:
        tracked = index.get_tracked_tree(repo_root)
    return [name for name in plain_filenames(repo_root) if not tracked.tracks(name)]

def check_untracked(repo_root):
    if find_untracked(repo_root):
        raise GitletError(UNTRACKED_MESSAGE)

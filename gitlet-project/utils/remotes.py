# What it does: Opens registered remotes and copies commits, with their trees and blobs, between two repositories on the local filesystem
# How it does: It walks the first-parent chain from a starting commit back to (but not including) a stop commit, then copies the object files oldest first and records every commit in the receiving repository's global ref
# What data structure it uses: List (the commit chain), Hash Table (both object stores)

import os

from . import repository, objects, blobs, commits

def get_remote_root(repo_root, remote_name): # Returns the working directory of a registered remote
    if not repository.remote_exists(repo_root, remote_name):
        raise repository.GitletError("A remote with that name does not exist.")
    gitlet_dir = repository.read_remote(repo_root, remote_name)
    if not os.path.isdir(gitlet_dir):
        raise repository.GitletError("Remote directory not found.")
    return repository.repo_root_of(gitlet_dir)

def first_commit(repo_root, commit_id): # Follows parent1 until the commit whose own parent is empty
    commit = commits.read_commit(repo_root, commit_id)
    while commit.parent1:
        commit_id = commit.parent1
        commit = commits.read_commit(repo_root, commit_id)
    return commit_id

def copy_commit_objects(src_root, dst_root, commit_id, commit):
    if commit.tree:
        tree = blobs.read_tree(src_root, commit.tree)
        for name in tree.tracked_names():
            objects.copy_object(src_root, dst_root, tree.blob_of(name))
        objects.copy_object(src_root, dst_root, commit.tree)
    # the commit goes last so a present commit implies a complete snapshot
    objects.copy_object(src_root, dst_root, commit_id)

def deliver(src_root, dst_root, start_id, stop_id):
    """
    Copies the commits from start_id back to stop_id (exclusive) into dst_root.
    Returns the copied (commit_id, commit) pairs, oldest first.
    """
    chain = []
    commit_id = start_id
    while commit_id and commit_id != stop_id:
        commit = commits.read_commit(src_root, commit_id)
        chain.append((commit_id, commit))
        commit_id = commit.parent1
    chain.reverse()

    history = repository.read_global(dst_root)
    for commit_id, commit in chain:
        copy_commit_objects(src_root, dst_root, commit_id, commit)
        history.add(commit_id, commit.message)
    repository.write_global(dst_root, history)
    return chain

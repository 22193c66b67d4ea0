# The command: gitlet commit "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the HEAD commit's files plus the currently staged changes
# How it does: It layers the stage over the parent commit's blob-tree (and, for merges, unions in the second parent's tree), stores the tree, hashes the commit, appends it to the current branch and the global ref, and clears the stage
# What data structure it uses: Directed Acyclic Graph (DAG) (each commit links to its parents), Hash Table / Dictionary (the underlying object store and the blob-tree mapping)

import time

from utils import repository, blobs, commits, index as index_utils

def run(args):
    repo_root = repository.require_repo_root()
    create_commit(repo_root, args.message)

def create_commit(repo_root, message, second_parent=None): # Creates a commit object and updates the current branch
    if message == '':
        raise repository.GitletError("Please enter a commit message.")

    stage = index_utils.read_index(repo_root)
    if second_parent is None and not stage.is_changed():
        raise repository.GitletError("No changes added to the commit.")

    parent_id = repository.get_head_commit(repo_root)
    parent = commits.read_commit(repo_root, parent_id)

    tracked = blobs.read_tree(repo_root, parent.tree).merge_stage(stage)
    if second_parent is not None:
        other = commits.read_commit(repo_root, second_parent)
        tracked.merge_tree(blobs.read_tree(repo_root, other.tree))
    tree_hash = tracked.store(repo_root)

    new_commit = commits.Commit(message, time.time_ns(), parent_id, tree=tree_hash)
    if second_parent is not None:
        new_commit.set_second_parent(second_parent)
    commit_hash = record_commit(repo_root, new_commit)

    stage.clear()
    index_utils.write_index(repo_root, stage)
    return commit_hash

def record_commit(repo_root, commit): # Stores a commit and appends it to the current branch and the global ref
    commit_hash = commits.write_commit(repo_root, commit)

    branch = repository.read_current_branch(repo_root)
    branch.add(commit_hash, commit.message)
    repository.write_current_branch(repo_root, branch)

    history = repository.read_global(repo_root)
    history.add(commit_hash, commit.message)
    repository.write_global(repo_root, history)
    return commit_hash

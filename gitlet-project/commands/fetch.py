# The command: gitlet fetch <remote-name> <remote-branch>
# What it does: Brings down the commits of a remote branch into a local branch named `<remote-name><remote-branch>`
# How it does: It finds the latest common ancestor of the local head and the remote head, copies every remote commit above it (with trees and blobs) into the local object store, and points the local branch at the remote head. Fetching twice without remote changes leaves both repositories unchanged
# What data structure it uses: DAG (ancestor search across both repositories), List (the copied chain)

from utils import repository, commits, refs, remotes
from commands import merge

def run(args):
    repo_root = repository.require_repo_root()
    fetch_branch(repo_root, args.remote, args.branch)

def fetch_branch(repo_root, remote_name, branch_name): # Returns the name of the local branch that received the commits
    remote_root = remotes.get_remote_root(repo_root, remote_name)
    remote_branch = repository.read_branch(remote_root, branch_name)
    if remote_branch is None:
        raise repository.GitletError("That remote does not have that branch.")

    remote_head = remote_branch.head
    local_head = repository.get_head_commit(repo_root)
    ancestor_id = merge.find_latest_ancestor(repo_root, local_head, remote_root, remote_head)

    chain = remotes.deliver(remote_root, repo_root, remote_head, ancestor_id)

    local_name = f'{remote_name}{branch_name}'
    fetched = repository.read_branch(repo_root, local_name)
    if fetched is None:
        ancestor = commits.read_commit(repo_root, ancestor_id)
        fetched = refs.CommitTree.starting_at(ancestor_id, ancestor.message)
    for commit_id, commit in chain:
        fetched.add(commit_id, commit.message)
    fetched.set_head(remote_head, commits.read_commit(repo_root, remote_head).message)
    repository.write_branch(repo_root, local_name, fetched)
    return local_name

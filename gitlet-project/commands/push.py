# The command: gitlet push <remote-name> <remote-branch>
# What it does: Appends the current branch's new commits to a branch of a remote repository and brings the remote's working tree up to date
# How it does: The remote branch head must be the common ancestor of the local head (otherwise the user has to pull first). Every commit above it is copied with its tree and blobs, appended to the remote branch, and checked out there if the remote is on that branch
# What data structure it uses: DAG (ancestor search across both repositories), List (the copied chain)

from utils import repository, commits, refs, remotes, workdir
from commands import checkout, merge

def run(args):
    repo_root = repository.require_repo_root()
    push_branch(repo_root, args.remote, args.branch)

def push_branch(repo_root, remote_name, branch_name):
    remote_root = remotes.get_remote_root(repo_root, remote_name)
    local_head = repository.get_head_commit(repo_root)

    remote_branch = repository.read_branch(remote_root, branch_name)
    if remote_branch is not None:
        start_id = merge.find_latest_ancestor(repo_root, local_head, remote_root, remote_branch.head)
        if start_id != remote_branch.head:
            raise repository.GitletError("Please pull down remote changes before pushing.")

    updates_worktree = repository.is_head(remote_root, branch_name)
    if updates_worktree:
        # Nothing is copied to the remote until its working tree is known to be safe to overwrite
        workdir.check_untracked(remote_root)

    if remote_branch is None:
        start_id = remotes.first_commit(repo_root, local_head)
        start = commits.read_commit(repo_root, start_id)
        remotes.copy_commit_objects(repo_root, remote_root, start_id, start)
        remote_branch = refs.CommitTree.starting_at(start_id, start.message)

    chain = remotes.deliver(repo_root, remote_root, local_head, start_id)

    if updates_worktree:
        checkout.checkout_commit(remote_root, local_head, move_head=True)

    for commit_id, commit in chain:
        remote_branch.add(commit_id, commit.message)
    repository.write_branch(remote_root, branch_name, remote_branch)
    return local_head

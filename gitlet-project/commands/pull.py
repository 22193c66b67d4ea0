# The command: gitlet pull <remote-name> <remote-branch>
# What it does: Fetches a remote branch and merges it into the current branch

from utils import repository
from commands import fetch, merge

def run(args):
    repo_root = repository.require_repo_root()
    message = pull_branch(repo_root, args.remote, args.branch)
    if message:
        print(message)

def pull_branch(repo_root, remote_name, branch_name):
    return merge.merge_branch(repo_root, fetch.fetch_branch(repo_root, remote_name, branch_name))

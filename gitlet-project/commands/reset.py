# The command: gitlet reset <commit-id>
# What it does: Checks out all files tracked by the given commit and moves the current branch head to it
# How it does: It resolves the (possibly short) id and delegates to the whole-tree checkout with head movement, which also clears the stage

from utils import repository, commits
from commands import checkout

def run(args): #Executes the reset command
    repo_root = repository.require_repo_root()
    reset_to(repo_root, args.commit_id)

def reset_to(repo_root, commit_id):
    commit_hash = commits.find_commit(repo_root, commit_id)
    checkout.checkout_commit(repo_root, commit_hash, move_head=True)
    return commit_hash

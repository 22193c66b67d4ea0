# The command: gitlet rm-branch <branch-name>
# What it does: Deletes the branch pointer with the given name. Commits made on the branch are kept

from utils import repository

def run(args):
    repo_root = repository.require_repo_root()
    remove_branch(repo_root, args.name)

def remove_branch(repo_root, branch_name):
    if repository.is_head(repo_root, branch_name):
        raise repository.GitletError("Cannot remove the current branch.")
    if not repository.branch_exists(repo_root, branch_name):
        raise repository.GitletError("A branch with that name does not exist.")
    repository.delete_branch(repo_root, branch_name)

# The command: gitlet branch <branch-name>
# What it does: Creates a new branch pointer to the current commit. HEAD stays on the current branch
# How it does: It writes a new commit-tree under `.gitlet/refs/<branch-name>` whose only entry, and head, is the current HEAD commit
# What data structure it uses: Map / Dictionary (conceptually, the `refs` directory maps branch names to commit-trees)

from utils import repository, commits, refs

def run(args):
    repo_root = repository.require_repo_root()
    create_branch(repo_root, args.name)

def create_branch(repo_root, branch_name):
    if repository.branch_exists(repo_root, branch_name):
        raise repository.GitletError("A branch with that name already exists.")
    head = repository.get_head_commit(repo_root)
    message = commits.read_commit(repo_root, head).message
    repository.write_branch(repo_root, branch_name, refs.CommitTree.starting_at(head, message))

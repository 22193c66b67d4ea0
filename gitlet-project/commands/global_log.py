# The command: gitlet global-log
# What it does: Displays every commit ever recorded in this repository, in the order they were recorded
# What data structure it uses: Ordered Dictionary (the global commit-tree)

from utils import repository, commits

def run(args):
    repo_root = repository.require_repo_root()
    print(format_global_history(repo_root), end='')

def format_global_history(repo_root):
    history = repository.read_global(repo_root)
    return ''.join(commits.read_commit(repo_root, commit_id).format_log(commit_id)
                   for commit_id in history.entries)

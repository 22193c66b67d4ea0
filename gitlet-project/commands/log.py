# The command: gitlet log
# What it does: Displays the commit history by starting at the current HEAD and walking backward through the first-parent links
# How it does: It starts with the current commit hash and loops, printing each commit's record and following parent1 until the initial commit (whose parent is empty) has been printed
# What data structure it uses: It performs a Graph Traversal (specifically, a linear traversal up the first-parent chain) on the Directed Acyclic Graph (DAG) formed by the commits

from utils import repository, commits

def run(args):
    repo_root = repository.require_repo_root()
    print(format_history(repo_root), end='')

def format_history(repo_root):
    head = repository.get_head_commit(repo_root)
    return ''.join(commit.format_log(commit_id)
                   for commit_id, commit in commits.iter_first_parents(repo_root, head))

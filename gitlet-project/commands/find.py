# The command: gitlet find "<message>"
# What it does: Prints the ids of all commits whose message matches exactly, one per line

from utils import repository

def run(args):
    repo_root = repository.require_repo_root()
    print(find_commits(repo_root, args.message), end='')

def find_commits(repo_root, message):
    ids = repository.read_global(repo_root).find_by_message(message)
    if not ids:
        raise repository.GitletError("Found no commit with that message.")
    return ids

# The command: gitlet checkout -- <file> | <commit-id> -- <file> | <branch-name>
# What it does: Restores a single file from the HEAD commit or from a given commit, or switches the whole working directory to another branch
# How it does:
#   - For a file: resolves the commit (short ids allowed), looks the name up in its blob-tree and overwrites the working file with the blob's bytes.
#   - For a branch: refuses if an untracked file is in the way, replaces every working file with the branch head's snapshot, clears the stage and moves HEAD.
# What data structure it uses: Hash Table / Dictionary (blob-tree lookups), List (working directory files)

from utils import repository, blobs, commits, workdir, index as index_utils

def run(args):
    repo_root = repository.require_repo_root()
    if args.file is not None:
        checkout_file(repo_root, args.file, args.commit)
    else:
        checkout_branch(repo_root, args.target)

def checkout_file(repo_root, file_name, commit_id=None):
    if commit_id is None:
        commit_hash = repository.get_head_commit(repo_root)
    else:
        commit_hash = commits.find_commit(repo_root, commit_id)

    commit = commits.read_commit(repo_root, commit_hash)
    tree = blobs.read_tree(repo_root, commit.tree)
    if not tree.tracks(file_name):
        raise repository.GitletError("File does not exist in that commit.")
    workdir.write_blob_file(repo_root, file_name, tree.blob_of(file_name))

def checkout_branch(repo_root, branch_name):
    if repository.is_head(repo_root, branch_name):
        raise repository.GitletError("No need to checkout the current branch.")
    branch = repository.read_branch(repo_root, branch_name)
    if branch is None:
        raise repository.GitletError("No such branch exists.")

    checkout_commit(repo_root, branch.head, move_head=False)
    repository.set_head(repo_root, branch_name)

def checkout_commit(repo_root, commit_hash, move_head):
    """
    Replaces the working directory with the snapshot of a commit and clears the stage.
    With move_head, the current branch's head is moved to that commit as well.
    """
    commit = commits.read_commit(repo_root, commit_hash)
    workdir.check_untracked(repo_root)

    workdir.clear_working_files(repo_root)
    tree = blobs.read_tree(repo_root, commit.tree)
    for name in tree.tracked_names():
        workdir.write_blob_file(repo_root, name, tree.blob_of(name))

    index_utils.clear_index(repo_root)

    if move_head:
        branch = repository.read_current_branch(repo_root)
        branch.set_head(commit_hash, commit.message)
        repository.write_current_branch(repo_root, branch)

# The command: gitlet rm <file>
# What it does: Unstages a file that is staged for addition, or stages a tracked file for removal and deletes it from the working directory
# How it does: An unstaged addition drops its throwaway blob from the object store. A file tracked by the HEAD commit is recorded in the stage's removals map
# What data structure it uses: Hash Table / Dictionary (the stage), Set (blob hashes referenced by recorded commits)

from utils import repository, objects, blobs, commits, workdir, index as index_utils

def run(args):
    repo_root = repository.require_repo_root()
    remove_file(repo_root, args.file)

def remove_file(repo_root, file_name):
    stage = index_utils.read_index(repo_root)

    if stage.is_staged(file_name):
        blob_hash = stage.unstage(file_name)
        if blob_hash not in _referenced_blobs(repo_root):
            objects.delete_object(repo_root, blob_hash)
    else:
        head_tree = index_utils.get_head_tree(repo_root)
        if not head_tree.tracks(file_name):
            raise repository.GitletError("No reason to remove the file.")
        stage.add_removal(file_name, head_tree.blob_of(file_name))
        workdir.restricted_delete(repo_root, file_name)

    index_utils.write_index(repo_root, stage)

def _referenced_blobs(repo_root): # Blob hashes reachable from any recorded commit
    referenced = set()
    seen_trees = set()
    for commit_id in repository.read_global(repo_root).entries:
        commit = commits.read_commit(repo_root, commit_id)
        if commit.tree in seen_trees:
            continue
        seen_trees.add(commit.tree)
        referenced.update(blobs.read_tree(repo_root, commit.tree).entries.values())
    return referenced

# The command: gitlet add <file>
# What it does: Takes a snapshot of a file from the working directory and stages it for the next commit by updating the index
# How it does: It stores the file as a blob, then compares it with the tracked tree (HEAD's tree layered with the stage). Re-adding a tracked, byte-identical file is a no-op; otherwise the blob is recorded in the stage
# What data structure it uses: Hash Table / Dictionary (the stage's additions and removals maps)

from utils import repository, blobs, workdir, index as index_utils

def run(args):
    repo_root = repository.require_repo_root()
    add_file(repo_root, args.file)

def add_file(repo_root, file_name):
    if not workdir.file_exists(repo_root, file_name):
        raise repository.GitletError("File does not exist.")

    blob = blobs.blob_from_file(repo_root, file_name)
    blob_hash = blobs.write_blob(repo_root, blob)

    stage = index_utils.read_index(repo_root)
    tracked = index_utils.get_tracked_tree(repo_root, stage)
    if tracked.blob_of(file_name) == blob_hash and not stage.is_removed(file_name):
        return blob_hash

    stage.add(file_name, blob_hash)
    index_utils.write_index(repo_root, stage)
    return blob_hash

# The command: gitlet merge <branch-name>
# What it does: Performs a three-way merge between the current branch, the given branch, and their latest common ancestor
# How it does: It finds the ancestor by walking both first-parent chains, takes the fast paths when one side contains the other, otherwise decides every file case by case, writes conflict markers where both sides changed, and records a merge commit with two parents
# What data structure it uses: DAG (for finding the common ancestor), Hash Tables (the three blob-trees being compared)

#  Split point | HEAD     | Given     | Result
#  origin      | origin   | modified  | checkout given & stage
#  none        | none     | new       | checkout given & stage
#  origin      | origin   | deleted   | remove
#  origin      | my mod   | your mod  | conflict
#  origin      | my mod   | deleted   | drop working file
#  anything else                      | keep current

from utils import repository, blobs, commits, workdir, index as index_utils
from utils.blobs import DELETED
from commands import add, checkout, commit, rm

CONFLICT_MESSAGE = "Encountered a merge conflict."

def run(args):
    repo_root = repository.require_repo_root()
    message = merge_branch(repo_root, args.branch)
    if message:
        print(message)

def merge_branch(repo_root, branch_name):
    """
    Merges the given branch into the current one.
    Returns the message to show the user, or None for a clean merge.
    """
    stage = index_utils.read_index(repo_root)
    if stage.is_changed():
        raise repository.GitletError("You have uncommitted changes.")
    if repository.is_head(repo_root, branch_name):
        raise repository.GitletError("Cannot merge a branch with itself.")
    given = repository.read_branch(repo_root, branch_name)
    if given is None:
        raise repository.GitletError("A branch with that name does not exist.")
    workdir.check_untracked(repo_root)

    current_id = repository.get_head_commit(repo_root)
    given_id = given.head
    ancestor_id = find_latest_ancestor(repo_root, current_id, repo_root, given_id)

    if ancestor_id == given_id:
        return "Given branch is an ancestor of the current branch."
    if ancestor_id == current_id:
        checkout.checkout_commit(repo_root, given_id, move_head=True)
        return "Current branch fast-forwarded."

    conflicted = _merge_trees(repo_root, ancestor_id, current_id, given_id)

    current_branch = repository.get_current_branch(repo_root)
    commit.create_commit(repo_root, f"Merged {branch_name} into {current_branch}.", given_id)

    if conflicted:
        return CONFLICT_MESSAGE
    return None

def find_latest_ancestor(current_root, current_id, given_root, given_id):
    """
    Walks both first-parent chains, always stepping back from the younger commit,
    until the two pointers meet. The chains may live in different repositories.

    This approximates the lowest common ancestor; on histories where the
    second-parent side matters it can pick an older split point.
    """
    current = commits.read_commit(current_root, current_id)
    given = commits.read_commit(given_root, given_id)
    while current_id != given_id:
        if current.timestamp > given.timestamp:
            current_id = current.parent1
            current = commits.read_commit(current_root, current_id)
        else:
            given_id = given.parent1
            given = commits.read_commit(given_root, given_id)
    return current_id

def _tree_of(repo_root, commit_id):
    return blobs.read_tree(repo_root, commits.read_commit(repo_root, commit_id).tree)

def _merge_trees(repo_root, ancestor_id, current_id, given_id): # Returns True if any file conflicted
    ancestor_tree = _tree_of(repo_root, ancestor_id)
    current_tree = _tree_of(repo_root, current_id)
    given_tree = _tree_of(repo_root, given_id)
    conflicted = False

    for name, given_hash in sorted(given_tree.entries.items()):
        current_hash = current_tree.blob_of(name)
        ancestor_hash = ancestor_tree.blob_of(name)
        if _merge_file(repo_root, name, ancestor_hash, current_hash, given_hash, given_id):
            conflicted = True

    # files the given branch never mentions
    for name in current_tree.tracked_names():
        if given_tree.contains(name):
            continue
        current_hash = current_tree.blob_of(name)
        ancestor_hash = ancestor_tree.blob_of(name)
        if ancestor_hash is None or ancestor_hash == DELETED:
            continue
        if current_hash == ancestor_hash:
            rm.remove_file(repo_root, name)
        else:
            _create_conflict_file(repo_root, name, current_hash, None)
            conflicted = True

    return conflicted

def _merge_file(repo_root, name, ancestor_hash, current_hash, given_hash, given_id):
    """Merge a single file of the given tree. Returns True on conflict."""

    # Removed on the given branch, untouched here
    if given_hash == DELETED:
        if current_hash not in (None, DELETED) and current_hash == ancestor_hash:
            rm.remove_file(repo_root, name)
            return False

    # Modified or added on the given branch only
    elif given_hash != current_hash and current_hash == ancestor_hash:
        checkout.checkout_file(repo_root, name, given_id)
        add.add_file(repo_root, name)
        return False

    # Both branches changed the file differently
    if given_hash != current_hash and given_hash != ancestor_hash and current_hash != ancestor_hash:
        if given_hash == DELETED:
            workdir.restricted_delete(repo_root, name)
            return False
        _create_conflict_file(repo_root, name, current_hash, given_hash)
        return True

    return False

def _create_conflict_file(repo_root, name, current_hash, given_hash):
    current = blobs.read_blob(repo_root, current_hash)
    given = blobs.read_blob(repo_root, given_hash)

    content = b'<<<<<<< HEAD\n'
    if current is not None:
        content += current.content
    content += b'=======\n'
    if given is not None:
        content += given.content
    content += b'>>>>>>>\n'

    workdir.write_file(repo_root, name, content)
    add.add_file(repo_root, name)

# The command: gitlet status
# What it does: Provides a summary of the repository state: branches, staged and removed files, unstaged modifications and untracked files
# How it does: It builds the tracked tree (HEAD's tree layered with the stage) and compares it with the hashes of the plain files in the working directory
# What data structure it uses: Hash Table / Dictionary (the tracked tree and the stage for O(1) average lookups), List (sorted section entries)

from utils import repository, blobs, workdir, index as index_utils

SECTIONS = (
    ('branches', 'Branches'),
    ('staged', 'Staged Files'),
    ('removed', 'Removed Files'),
    ('modified', 'Modifications Not Staged For Commit'),
    ('untracked', 'Untracked Files'),
)

def run(args): # Compares the HEAD, index, and working directory states and prints the status
    repo_root = repository.require_repo_root()
    print(format_status(get_status(repo_root)))

def get_status(repo_root):
    stage = index_utils.read_index(repo_root)
    tracked = index_utils.get_tracked_tree(repo_root, stage)
    working_files = workdir.plain_filenames(repo_root)

    return {
        'branches': _branch_lines(repo_root),
        'staged': sorted(stage.added),
        'removed': sorted(stage.removed),
        'modified': _unstaged_modifications(repo_root, tracked, stage, working_files),
        'untracked': workdir.find_untracked(repo_root, tracked),
    }

def _branch_lines(repo_root): # Current branch first, marked with '*'
    current = repository.get_current_branch(repo_root)
    others = [name for name in repository.get_all_branches(repo_root) if name != current]
    return [f'*{current}'] + others

def _unstaged_modifications(repo_root, tracked, stage, working_files):
    changes = {}
    present = set(working_files)

    for name in tracked.tracked_names():
        if name not in present and not stage.is_removed(name):
            changes[name] = f'{name} (deleted)'

    for name in working_files:
        if not tracked.tracks(name):
            continue
        if blobs.blob_from_file(repo_root, name).hash(repo_root) != tracked.blob_of(name):
            changes[name] = f'{name} (modified)'

    return [changes[name] for name in sorted(changes)]

def format_status(status):
    blocks = []
    for key, header in SECTIONS:
        lines = [f'=== {header} ==='] + list(status[key])
        blocks.append('\n'.join(lines) + '\n')
    return '\n'.join(blocks)

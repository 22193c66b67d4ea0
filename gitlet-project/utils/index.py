# What it does: Provides centralized read/write operations for the .gitlet/index file (the staging area)
# How it does: The stage keeps two maps, additions and removals, and is stored as JSON. `get_tracked_tree` layers the stage over the HEAD commit's tree
# What data structure it uses: Dictionary (mapping file names to blob hashes)

import json

from . import blobs, commits, repository


class Stage:
    def __init__(self, added=None, removed=None):
        self.added = dict(added or {})
        self.removed = dict(removed or {})

    def add(self, blob_name, blob_hash):
        if self.removed.get(blob_name) == blob_hash:
            # the removed file has been restored
            del self.removed[blob_name]
            return
        self.removed.pop(blob_name, None)
        self.added[blob_name] = blob_hash

    def unstage(self, name):
        return self.added.pop(name, None)

    def add_removal(self, name, blob_hash):
        self.added.pop(name, None)
        self.removed[name] = blob_hash

    def is_staged(self, name):
        return name in self.added

    def is_removed(self, name):
        return name in self.removed

    def is_changed(self):
        return bool(self.added) or bool(self.removed)

    def clear(self):
        self.added = {}
        self.removed = {}


def index_path(repo_root):
    return repository.gitlet_path(repo_root, 'index')

def read_index(repo_root):
    with open(index_path(repo_root), 'r') as f:
        data = json.load(f)
    return Stage(data.get('added'), data.get('removed'))

def write_index(repo_root, stage):
    with open(index_path(repo_root), 'w') as f:
        json.dump({'added': stage.added, 'removed': stage.removed}, f, indent=1, sort_keys=True)

def clear_index(repo_root):
    write_index(repo_root, Stage())

def get_head_tree(repo_root):
    head = commits.read_commit(repo_root, repository.get_head_commit(repo_root))
    return blobs.read_tree(repo_root, head.tree)

def get_tracked_tree(repo_root, stage=None): # HEAD commit's tree with the stage layered on top
    if stage is None:
        stage = read_index(repo_root)
    return get_head_tree(repo_root).merge_stage(stage)

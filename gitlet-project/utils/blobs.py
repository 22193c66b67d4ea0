# What it does: Models blobs (one tracked file's bytes) and blob-trees (a snapshot mapping file names to blob hashes)
# How it does: A blob's canonical body is `<name>\0<content>`, so the file name is part of its identity. A blob-tree is serialized as sorted `<hash>\t<name>` lines; its hash is assigned only when it is stored, so trees built during commit or merge can still be reshaped
# What data structure it uses: Dictionary (name -> blob hash, or the "deleted" tombstone)

import os

from . import objects

DELETED = 'deleted'


class Blob:
    def __init__(self, file_name, content):
        self.file_name = file_name
        self.content = content

    def serialize(self):
        return self.file_name.encode() + b'\0' + self.content

    @classmethod
    def deserialize(cls, data):
        name, _, content = data.partition(b'\0')
        return cls(name.decode(), content)

    def hash(self, repo_root):
        return objects.hash_object(repo_root, self.serialize(), 'blob', write=False)


def blob_from_file(repo_root, file_name): # Builds a blob from a working-directory file
    with open(os.path.join(repo_root, file_name), 'rb') as f:
        return Blob(file_name, f.read())

def write_blob(repo_root, blob):
    return objects.hash_object(repo_root, blob.serialize(), 'blob')

def read_blob(repo_root, blob_hash): # Returns None for the tombstone or a missing hash
    if not blob_hash or blob_hash == DELETED:
        return None
    obj_type, content = objects.read_object(repo_root, blob_hash)
    if obj_type != 'blob':
        raise TypeError(f"Object {blob_hash} is not a blob")
    return Blob.deserialize(content)


class BlobTree:
    def __init__(self, entries=None):
        self.entries = dict(entries or {})

    def contains(self, name):
        return name in self.entries

    def blob_of(self, name):
        return self.entries.get(name)

    def tracks(self, name):
        """True when the name maps to a live blob rather than a tombstone."""
        blob_hash = self.entries.get(name)
        return blob_hash is not None and blob_hash != DELETED

    def tracked_names(self):
        return sorted(name for name in self.entries if self.tracks(name))

    def merge_stage(self, stage):
        self.entries.update(stage.added)
        for name in stage.removed:
            self.entries[name] = DELETED
        return self

    def merge_tree(self, other):
        # existing entries win on name collisions
        for name, blob_hash in other.entries.items():
            self.entries.setdefault(name, blob_hash)
        return self

    def serialize(self):
        return ''.join(f'{blob_hash}\t{name}\n'
                       for name, blob_hash in sorted(self.entries.items())).encode()

    @classmethod
    def deserialize(cls, data):
        entries = {}
        for line in data.decode().splitlines():
            blob_hash, name = line.split('\t', 1)
            entries[name] = blob_hash
        return cls(entries)

    def store(self, repo_root):
        return objects.hash_object(repo_root, self.serialize(), 'tree')

    def __eq__(self, other):
        if not isinstance(other, BlobTree):
            return NotImplemented
        return sorted(self.entries.items()) == sorted(other.entries.items())

    def __repr__(self):
        return f'BlobTree({sorted(self.entries.items())!r})'


def read_tree(repo_root, tree_hash): # An empty hash (the initial commit) yields an empty tree
    if not tree_hash:
        return BlobTree()
    obj_type, content = objects.read_object(repo_root, tree_hash)
    if obj_type != 'tree':
        raise TypeError(f"Object {tree_hash} is not a tree")
    return BlobTree.deserialize(content)

# What it does: Defines the commit-tree record behind every branch ref and the global ref
# How it does: A commit-tree remembers every commit that has been the tip of the branch (id -> message, in insertion order) plus a `head` pointer. It is stored as JSON
# What data structure it uses: Ordered Dictionary (insertion-ordered dict keyed by commit id)

import json


class CommitTree:
    def __init__(self, entries=None, head=''):
        self.entries = dict(entries or {})
        self.head = head

    @classmethod
    def starting_at(cls, commit_id, message):
        tree = cls()
        tree.add(commit_id, message)
        return tree

    def add(self, commit_id, message):
        """Record a commit and move the head to it."""
        self.entries[commit_id] = message
        self.head = commit_id

    def set_head(self, commit_id, message):
        if commit_id not in self.entries:
            self.entries[commit_id] = message
        self.head = commit_id

    def contains(self, commit_id):
        return commit_id in self.entries

    def find_by_message(self, message):
        return ''.join(f'{commit_id}\n' for commit_id, msg in self.entries.items()
                       if msg == message)

    def to_dict(self):
        return {'head': self.head, 'commits': self.entries}

    @classmethod
    def from_dict(cls, data):
        return cls(data.get('commits', {}), data.get('head', ''))

    def __eq__(self, other):
        if not isinstance(other, CommitTree):
            return NotImplemented
        return self.head == other.head and list(self.entries.items()) == list(other.entries.items())

    def __repr__(self):
        return f'CommitTree(head={self.head!r}, commits={len(self.entries)})'


def read_ref(path):
    with open(path, 'r') as f:
        return CommitTree.from_dict(json.load(f))

def write_ref(path, tree):
    with open(path, 'w') as f:
        json.dump(tree.to_dict(), f, indent=1)

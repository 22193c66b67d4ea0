# What it does: Models commit records, their on-disk encoding and the six-line log entry
# How it does: A commit is serialized as `key value` header lines followed by a blank line and the message, then hashed into the object store like any other object
# What data structure it uses: Directed Acyclic Graph (DAG) (each commit links to one or two parents by hash)

from datetime import datetime

from . import objects
from .repository import GitletError

INITIAL_MESSAGE = 'initial commit'
NANOS = 1_000_000_000


class Commit:
    def __init__(self, message, timestamp, parent1='', parent2=None, tree=''):
        self.message = message
        self.timestamp = timestamp
        self.parent1 = parent1
        self.parent2 = parent2
        self.tree = tree

    @classmethod
    def initial(cls):
        return cls(INITIAL_MESSAGE, 0)

    def set_second_parent(self, commit_id):
        if self.parent2 is not None:
            raise ValueError("second parent is already set")
        self.parent2 = commit_id

    def is_merge(self):
        return self.parent2 is not None

    def serialize(self):
        lines = [f'tree {self.tree}', f'parent {self.parent1}']
        if self.parent2 is not None:
            lines.append(f'parent {self.parent2}')
        lines.append(f'timestamp {self.timestamp}')
        lines.append('')
        lines.append(self.message)
        return '\n'.join(lines).encode()

    @classmethod
    def deserialize(cls, data):
        header, _, message = data.decode().partition('\n\n')
        parents = []
        tree = ''
        timestamp = 0
        for line in header.splitlines():
            key, _, value = line.partition(' ')
            if key == 'tree':
                tree = value
            elif key == 'parent':
                parents.append(value)
            elif key == 'timestamp':
                timestamp = int(value)
            else:
                raise ValueError(f'Unknown field {key}')
        parent2 = parents[1] if len(parents) > 1 else None
        return cls(message, timestamp, parents[0], parent2, tree)

    def date(self):
        return datetime.fromtimestamp(self.timestamp // NANOS).astimezone()

    def format_log(self, commit_id):
        """Renders the log record: ===, id, optional merge line, date, message, blank line."""
        lines = ['===', f'commit {commit_id}']
        if self.is_merge():
            lines.append(f'Merge: {self.parent1[:7]}\t{self.parent2[:7]}')
        date = self.date()
        lines.append(f'Date: {date:%a %b} {date.day} {date:%H:%M:%S %Y %z}')
        lines.append(self.message)
        return '\n'.join(lines) + '\n\n'


def write_commit(repo_root, commit):
    return objects.hash_object(repo_root, commit.serialize(), 'commit')

def read_commit(repo_root, commit_id):
    obj_type, content = objects.read_object(repo_root, commit_id)
    if obj_type != 'commit':
        raise TypeError(f"Object {commit_id} is not a commit")
    return Commit.deserialize(content)

def find_commit(repo_root, commit_id): # Resolves a full or short commit id, failing with the user-facing message
    full_id = objects.resolve_prefix(repo_root, commit_id, 'commit')
    if full_id is None:
        raise GitletError("No commit with that id exists.")
    return full_id

def iter_first_parents(repo_root, commit_id): # Walks parent1 from a commit back to the initial commit
    while commit_id:
        commit = read_commit(repo_root, commit_id)
        yield commit_id, commit
        commit_id = commit.parent1

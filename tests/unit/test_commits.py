# Unit tests for utils/commits.py

import pytest
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'gitlet-project'))

from commands import init
from utils import commits, repository
from utils.commits import Commit
from utils.repository import GitletError

from conftest import commit_file


@pytest.fixture
def utc():
    # Pins the local timezone so log dates are predictable
    old = os.environ.get('TZ')
    os.environ['TZ'] = 'UTC'
    time.tzset()
    yield
    if old is None:
        del os.environ['TZ']
    else:
        os.environ['TZ'] = old
    time.tzset()


class TestCommitRecord:

    def test_serialize_round_trip(self):
        commit = Commit('a message\nwith two lines', 1234, 'p1', 'p2', 't1')
        result = Commit.deserialize(commit.serialize())
        assert result.message == 'a message\nwith two lines'
        assert result.timestamp == 1234
        assert (result.parent1, result.parent2, result.tree) == ('p1', 'p2', 't1')

    def test_initial_commit_is_identical_everywhere(self, temp_repo, tmp_path):
        other = str(tmp_path)
        init.init_repository(other)
        assert repository.get_head_commit(temp_repo) == repository.get_head_commit(other)

        initial = commits.read_commit(temp_repo, repository.get_head_commit(temp_repo))
        assert initial.message == 'initial commit'
        assert initial.timestamp == 0
        assert initial.parent1 == ''
        assert not initial.is_merge()

    def test_second_parent_set_once(self):
        commit = Commit('m', 1)
        commit.set_second_parent('p2')
        assert commit.is_merge()
        with pytest.raises(ValueError):
            commit.set_second_parent('p3')


class TestFormatLog:

    def test_initial_commit_entry(self, utc):
        assert Commit.initial().format_log('abc') == (
            '===\n'
            'commit abc\n'
            'Date: Thu Jan 1 00:00:00 1970 +0000\n'
            'initial commit\n'
            '\n'
        )

    def test_merge_line(self, utc):
        commit = Commit('Merged b into master.', 86400 * commits.NANOS,
                        '1234567890', 'abcdefabcd')
        lines = commit.format_log('f' * 40).split('\n')
        assert lines[2] == 'Merge: 1234567\tabcdefa'
        assert lines[3] == 'Date: Fri Jan 2 00:00:00 1970 +0000'


class TestFindCommit:
    # Tests for commits.find_commit()

    def test_short_id(self, repo_with_commit):
        repo_root, commit_hash = repo_with_commit
        assert commits.find_commit(repo_root, commit_hash[:6]) == commit_hash

    def test_unknown_id(self, temp_repo):
        with pytest.raises(GitletError, match="No commit with that id exists."):
            commits.find_commit(temp_repo, 'ffffffffff')

    def test_blob_id_is_not_a_commit(self, repo_with_commit):
        repo_root, _ = repo_with_commit
        from utils import index
        blob_hash = index.get_head_tree(repo_root).blob_of('README.md')
        with pytest.raises(GitletError):
            commits.find_commit(repo_root, blob_hash)

    def test_ambiguous_short_id(self, temp_repo):
        for i in range(17):
            commit_file(temp_repo, 'f.txt', f'version {i}\n', f'commit {i}')
        ids = list(repository.read_global(temp_repo).entries)
        first_chars = [commit_id[0] for commit_id in ids]
        shared = next(c for c in first_chars if first_chars.count(c) > 1)
        with pytest.raises(GitletError, match="No commit with that id exists."):
            commits.find_commit(temp_repo, shared)

    def test_first_parent_walk(self, repo_with_commit):
        repo_root, commit_hash = repo_with_commit
        history = [commit_id for commit_id, _ in commits.iter_first_parents(repo_root, commit_hash)]
        assert history[0] == commit_hash
        assert len(history) == 2

# Shared pytest fixtures for Gitlet tests

import pytest
import os
import sys
import shutil
import tempfile

# Add gitlet-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'gitlet-project'))

import gitlet
from commands import init, add, commit, branch
from utils import repository


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Gitlet repository in a temporary directory
    original_dir = os.getcwd()
    os.chdir(temp_dir)

    init.init_repository(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def repo_with_commit(temp_repo):
    # Creates a repo with one committed file
    write_file(temp_repo, 'README.md', '# Test Project\n')
    add.add_file(temp_repo, 'README.md')
    commit_hash = commit.create_commit(temp_repo, 'add readme')
    return temp_repo, commit_hash


@pytest.fixture
def repo_with_branches(repo_with_commit):
    # Creates a repo with master and a feature branch at the same commit
    repo_root, commit_hash = repo_with_commit
    branch.create_branch(repo_root, 'feature')
    return repo_root, commit_hash


@pytest.fixture
def run_gitlet(capsys):
    # Runs the CLI entry point and returns what it printed
    def run(*argv):
        gitlet.main(list(argv))
        return capsys.readouterr().out
    return run


def write_file(repo_root, name, content):
    mode = 'wb' if isinstance(content, bytes) else 'w'
    with open(os.path.join(repo_root, name), mode) as f:
        f.write(content)


def read_file(repo_root, name):
    with open(os.path.join(repo_root, name), 'r') as f:
        return f.read()


def commit_file(repo_root, name, content, message):
    write_file(repo_root, name, content)
    add.add_file(repo_root, name)
    return commit.create_commit(repo_root, message)


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)

# Integration tests for the command-line front end (gitlet.py)

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'gitlet-project'))

import gitlet
from utils import config, repository, index as index_utils
from utils.repository import GitletError

from conftest import write_file, read_file, commit_file, MockArgs


class TestDispatch:

    def test_no_command(self, temp_repo, run_gitlet):
        assert run_gitlet() == 'Please enter a command.\n'

    def test_unknown_command(self, temp_repo, run_gitlet):
        assert run_gitlet('frobnicate') == 'No command with that name exists.\n'

    @pytest.mark.parametrize('argv', [
        ('add',),
        ('commit', 'one', 'two'),
        ('log', 'extra'),
        ('branch',),
        ('push', 'origin'),
        ('add-remote', 'origin'),
    ])
    def test_wrong_arity(self, temp_repo, run_gitlet, argv):
        assert run_gitlet(*argv) == 'Incorrect operands.\n'

    def test_not_initialized(self, temp_dir, run_gitlet):
        os.chdir(temp_dir)
        assert run_gitlet('status') == 'Not in an initialized Gitlet directory.\n'
        assert run_gitlet('log') == 'Not in an initialized Gitlet directory.\n'

    def test_subdirectory_of_repository_is_not_a_repository(self, temp_repo, run_gitlet):
        subdir = os.path.join(temp_repo, 'sub')
        os.makedirs(subdir)
        os.chdir(subdir)
        assert run_gitlet('status') == 'Not in an initialized Gitlet directory.\n'

    def test_init_in_empty_directory(self, temp_dir, run_gitlet):
        os.chdir(temp_dir)
        assert run_gitlet('init') == ''
        assert repository.find_repo_root(temp_dir) == temp_dir

    def test_main_reads_sys_argv(self, temp_repo, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['gitlet', 'find', 'initial commit'])
        gitlet.main()
        assert len(capsys.readouterr().out.strip()) == 40


class TestDashLeadingOperands:
    # Operands are literal even when they look like options

    def test_add_file(self, temp_repo, run_gitlet):
        write_file(temp_repo, '-notes', 'hello\n')
        assert run_gitlet('add', '-notes') == ''
        assert index_utils.read_index(temp_repo).is_staged('-notes')

    def test_help_flag_is_a_file_name(self, temp_repo, run_gitlet):
        assert run_gitlet('add', '-h') == 'File does not exist.\n'

    def test_commit_message_and_branch(self, temp_repo, run_gitlet):
        write_file(temp_repo, 'a.txt', 'a\n')
        run_gitlet('add', 'a.txt')
        assert run_gitlet('commit', '--amend') == ''
        assert run_gitlet('find', '--amend') == repository.get_head_commit(temp_repo) + '\n'
        assert run_gitlet('branch', '-b') == ''
        assert repository.read_branch(temp_repo, '-b').head == repository.get_head_commit(temp_repo)

    def test_extra_operands_still_rejected(self, temp_repo, run_gitlet):
        assert run_gitlet('add', '-a', '-b') == 'Incorrect operands.\n'
        assert run_gitlet('status', '-v') == 'Incorrect operands.\n'


class TestCheckoutOperands:
    # Tests for gitlet.normalize_checkout()

    def test_file_from_head(self):
        assert gitlet.normalize_checkout(['--', 'f.txt']) == ['--file=f.txt']

    def test_file_from_commit(self):
        assert gitlet.normalize_checkout(['abc123', '--', 'f.txt']) == ['--file=f.txt', '--commit=abc123']

    def test_branch(self):
        assert gitlet.normalize_checkout(['feature']) == ['--', 'feature']

    def test_dash_leading_branch(self):
        assert gitlet.normalize_checkout(['-b']) == ['--', '-b']

    @pytest.mark.parametrize('operands', [
        [],
        ['--'],
        ['abc123', '++', 'f.txt'],
        ['a', 'b'],
        ['a', '--', 'b', 'c'],
        ['--file=x'],
        ['--commit=abc123'],
    ])
    def test_malformed(self, operands):
        with pytest.raises(GitletError, match="Incorrect operands."):
            gitlet.normalize_checkout(operands)

    def test_malformed_through_cli(self, repo_with_commit, run_gitlet):
        assert run_gitlet('checkout', 'abc', '++', 'README.md') == 'Incorrect operands.\n'

    def test_option_spelling_is_rejected(self, repo_with_commit, run_gitlet):
        repo_root, _ = repo_with_commit
        write_file(repo_root, 'README.md', 'scratch\n')
        assert run_gitlet('checkout', '--file=README.md') == 'Incorrect operands.\n'
        assert read_file(repo_root, 'README.md') == 'scratch\n'

    def test_dash_leading_names_through_cli(self, repo_with_commit, run_gitlet):
        repo_root, first = repo_with_commit
        commit_file(repo_root, '-notes', 'v1\n', 'notes')
        write_file(repo_root, '-notes', 'scratch\n')
        assert run_gitlet('checkout', '--', '-notes') == ''
        assert read_file(repo_root, '-notes') == 'v1\n'
        assert run_gitlet('checkout', first, '--', '-notes') == 'File does not exist in that commit.\n'
        assert run_gitlet('checkout', '-h') == 'No such branch exists.\n'

    def test_all_forms_through_cli(self, repo_with_branches, run_gitlet):
        repo_root, first = repo_with_branches
        commit_file(repo_root, 'README.md', 'second\n', 'second')

        write_file(repo_root, 'README.md', 'scratch\n')
        assert run_gitlet('checkout', '--', 'README.md') == ''
        assert read_file(repo_root, 'README.md') == 'second\n'

        assert run_gitlet('checkout', first, '--', 'README.md') == ''
        assert read_file(repo_root, 'README.md') == '# Test Project\n'

        assert run_gitlet('checkout', '--', 'README.md') == ''
        assert run_gitlet('checkout', 'feature') == ''
        assert repository.get_current_branch(repo_root) == 'feature'


class TestConfigCommand:

    def test_sets_value(self, temp_repo, run_gitlet):
        assert run_gitlet('config', 'core.compression', '9') == ''
        assert config.get_compression_level(temp_repo) == 9

    def test_bad_key(self, temp_repo, run_gitlet):
        assert run_gitlet('config', 'compression', '9') == "Invalid key format. Should be 'section.key'.\n"

    def test_out_of_range_level_falls_back(self, temp_repo):
        from commands import config as config_command
        config_command.run(MockArgs(key='core.compression', value='42'))
        assert config.get_compression_level(temp_repo) == config.DEFAULT_COMPRESSION

    def test_non_numeric_level_falls_back(self, temp_repo):
        config.write_config(temp_repo, 'core.compression', 'fast')
        assert config.get_compression_level(temp_repo) == config.DEFAULT_COMPRESSION

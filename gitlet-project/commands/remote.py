# The commands: gitlet add-remote <name> <path-to-remote/.gitlet> | gitlet rm-remote <name>
# What it does: Registers or forgets another repository on the local filesystem under a short name
# How it does: Each remote is a file under `.gitlet/refs/remotes/` holding the absolute path of the remote's `.gitlet` directory

from utils import repository

def run_add(args):
    repo_root = repository.require_repo_root()
    add_remote(repo_root, args.name, args.path)

def run_rm(args):
    repo_root = repository.require_repo_root()
    remove_remote(repo_root, args.name)

def add_remote(repo_root, remote_name, directory):
    if repository.remote_exists(repo_root, remote_name):
        raise repository.GitletError("A remote with that name already exists.")
    repository.write_remote(repo_root, remote_name, repository.normalize_remote_dir(directory))

def remove_remote(repo_root, remote_name):
    if not repository.remote_exists(repo_root, remote_name):
        raise repository.GitletError("A remote with that name does not exist.")
    repository.delete_remote(repo_root, remote_name)

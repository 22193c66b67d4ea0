# The command: gitlet config <section.key> <value>
# What it does: Sets a repository option in `.gitlet/config` (for example `core.compression`)

from utils import repository, config

def run(args):
    repo_root = repository.require_repo_root()
    config.write_config(repo_root, args.key, args.value)

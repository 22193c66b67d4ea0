import argparse
import sys

from commands import (
    init, add, commit, rm, log, global_log, find, status, checkout,
    reset, branch, rm_branch, merge, remote, push, fetch, pull, config
)
from utils.repository import GitletError

INCORRECT_OPERANDS = "Incorrect operands."


class GitletArgumentParser(argparse.ArgumentParser):
    # Usage errors become the single user-facing operand message
    def error(self, message):
        raise GitletError(INCORRECT_OPERANDS)


def build_parser():
    # The main parser
    parser = GitletArgumentParser(prog="gitlet", description="Gitlet: a subset of the Git version-control system.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create a new repository in the current directory.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage a file for the next commit.")
    add_parser.add_argument("file", help="File to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes.")
    commit_parser.add_argument("message", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: rm
    rm_parser = subparsers.add_parser("rm", help="Unstage a file or stage it for removal.")
    rm_parser.add_argument("file", help="File to remove.")
    rm_parser.set_defaults(func=rm.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the history of the current branch.")
    log_parser.set_defaults(func=log.run)

    # Command: global-log
    global_log_parser = subparsers.add_parser("global-log", help="Show every commit ever made.")
    global_log_parser.set_defaults(func=global_log.run)

    # Command: find
    find_parser = subparsers.add_parser("find", help="Print the ids of commits with a given message.")
    find_parser.add_argument("message", help="Commit message to look for.")
    find_parser.set_defaults(func=find.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: checkout (operands are normalised by normalize_checkout first)
    checkout_parser = subparsers.add_parser("checkout", help="Restore a file or switch branches.")
    checkout_parser.add_argument("target", nargs="?", help="Branch name.")
    checkout_parser.add_argument("--file", help="File to restore.")
    checkout_parser.add_argument("--commit", help="Commit to restore the file from (defaults to the head commit).")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="Create a branch at the current commit.")
    branch_parser.add_argument("name", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: rm-branch
    rm_branch_parser = subparsers.add_parser("rm-branch", help="Delete a branch pointer.")
    rm_branch_parser.add_argument("name", help="The name of the branch to delete.")
    rm_branch_parser.set_defaults(func=rm_branch.run)

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Check out a commit and move the branch head to it.")
    reset_parser.add_argument("commit_id", help="Full or abbreviated commit id.")
    reset_parser.set_defaults(func=reset.run)

    # Command: merge
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch.")
    merge_parser.add_argument("branch", help="The branch to merge.")
    merge_parser.set_defaults(func=merge.run)

    # Command: add-remote
    add_remote_parser = subparsers.add_parser("add-remote", help="Register another repository.")
    add_remote_parser.add_argument("name", help="Remote name.")
    add_remote_parser.add_argument("path", help="Path to the remote's .gitlet directory.")
    add_remote_parser.set_defaults(func=remote.run_add)

    # Command: rm-remote
    rm_remote_parser = subparsers.add_parser("rm-remote", help="Forget a registered remote.")
    rm_remote_parser.add_argument("name", help="Remote name.")
    rm_remote_parser.set_defaults(func=remote.run_rm)

    # Commands: push, fetch, pull
    for name, module, text in (("push", push, "Send the current branch to a remote branch."),
                               ("fetch", fetch, "Copy a remote branch into <remote><branch>."),
                               ("pull", pull, "Fetch a remote branch and merge it.")):
        remote_parser = subparsers.add_parser(name, help=text)
        remote_parser.add_argument("remote", help="Remote name.")
        remote_parser.add_argument("branch", help="Remote branch name.")
        remote_parser.set_defaults(func=module.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a repository option.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.compression).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    parser.command_names = set(subparsers.choices)
    return parser

def normalize_checkout(operands): # Turns the git-style `--` separator into the --file and --commit options
    if len(operands) == 2 and operands[0] == "--":
        return [f"--file={operands[1]}"]
    if len(operands) == 3 and operands[1] == "--":
        return [f"--file={operands[2]}", f"--commit={operands[0]}"]
    # A lone operand is a branch name; option spellings like --file=x are not accepted here
    if len(operands) == 1 and not operands[0].startswith("--"):
        return ["--", operands[0]]
    raise GitletError(INCORRECT_OPERANDS)

# The main entry point for the Gitlet version control system
def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    try:
        if not argv:
            raise GitletError("Please enter a command.")
        command, operands = argv[0], list(argv[1:])
        if command not in parser.command_names:
            raise GitletError("No command with that name exists.")
        if command == "checkout":
            operands = normalize_checkout(operands)
        elif operands:
            # Operands are always literal, even when they start with a dash
            operands = ["--"] + operands

        # Parse the arguments and run the command's function
        args = parser.parse_args([command] + operands)
        args.func(args)
    except GitletError as e:
        print(e)

if __name__ == "__main__":
    main()

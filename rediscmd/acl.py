"""Commands of the ACL system."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rediscmd.cmd import Cmd, cmd


def _acl(*subcommand: Any) -> Cmd:
    command = cmd("ACL")
    for part in subcommand:
        command.arg(part)
    return command


def acl_load() -> Cmd:
    """Reload the ACL rules from the configured ACL file."""
    return _acl("LOAD")


def acl_save() -> Cmd:
    """Save the ACL rules held in memory to the configured ACL file."""
    return _acl("SAVE")


def acl_list() -> Cmd:
    """Show the ACL rules currently in effect."""
    return _acl("LIST")


def acl_users() -> Cmd:
    """List the names of all configured users."""
    return _acl("USERS")


def acl_getuser(username: Any) -> Cmd:
    """Return all the rules defined for a user."""
    return _acl("GETUSER", username)


def acl_setuser(username: Any) -> Cmd:
    """Create a user without any privilege."""
    return _acl("SETUSER", username)


def acl_setuser_rules(username: Any, rules: Sequence[Any]) -> Cmd:
    """Create a user with the given rules, or change the rules of an existing one."""
    return _acl("SETUSER", username, rules)


def acl_deluser(usernames: Sequence[Any]) -> Cmd:
    """Delete users and close the connections authenticated as them."""
    return _acl("DELUSER", usernames)


def acl_cat() -> Cmd:
    """Show the available ACL categories."""
    return _acl("CAT")


def acl_cat_categoryname(categoryname: Any) -> Cmd:
    """Show all the commands in a category."""
    return _acl("CAT", categoryname)


def acl_genpass() -> Cmd:
    """Generate a 256-bit password."""
    return _acl("GENPASS")


def acl_genpass_bits(bits: int) -> Cmd:
    """Generate a password of the given number of bits."""
    return _acl("GENPASS", bits)


def acl_whoami() -> Cmd:
    """Return the user the connection is authenticated as."""
    return _acl("WHOAMI")


def acl_log(count: int) -> Cmd:
    """Show up to ``count`` recent ACL security events."""
    return _acl("LOG", count)


def acl_log_reset() -> Cmd:
    """Clear the ACL log."""
    return _acl("LOG", "RESET")


def acl_help() -> Cmd:
    """Return a text describing the ACL subcommands."""
    return _acl("HELP")
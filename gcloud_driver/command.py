"""Command assembly for the external cluster tool."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

QUIET = "quiet"
SEPARATOR = "--"
WILDCARD = "*"


def create_option(name: str, value: Optional[str] = "") -> str:
    """Render a single option token.

    Returns ``--name=value``, or a bare ``--name`` when value is empty.
    """
    if value:
        return f"--{name}={value}"
    return f"--{name}"


def with_options(options: Optional[Mapping[str, str]], **injected: str) -> dict[str, str]:
    """Copy caller options and apply injected entries on top.

    Injected entries replace caller entries with the same key, so each key
    is rendered exactly once.
    """
    merged = dict(options or {})
    merged.update(injected)
    return merged


def build_filter(filters: Mapping[str, Optional[str]]) -> str:
    """Render a filter expression for list operations.

    Empty or missing values match anything, e.g. ``{"labels.env": ""}``
    becomes ``labels.env = *``.
    """
    items = []
    for key, value in filters.items():
        items.append(f"{key} = {value or WILDCARD}")
    return " AND ".join(items)


def build_command(
    base_command: str,
    account: Optional[str],
    subcommand: Sequence[str],
    options: Mapping[str, str],
    positional: Sequence[str] = (),
) -> list[str]:
    """Build the full argument vector for one invocation.

    Layout: ``base [--account ID] subcommand... --quiet --k=v... [-- args...]``

    Args:
        base_command: Executable name or path
        account: Account to run as (skipped when None or empty)
        subcommand: Command path tokens, appended verbatim
        options: Option map, rendered in iteration order
        positional: Arguments placed after a literal ``--``

    Returns:
        Flat list of argument tokens
    """
    command = [base_command]
    if account:
        command.extend(["--account", account])
    command.extend(subcommand)
    command.append(create_option(QUIET))
    command.extend(create_option(key, value) for key, value in options.items())
    if positional:
        command.append(SEPARATOR)
        command.extend(positional)
    return command

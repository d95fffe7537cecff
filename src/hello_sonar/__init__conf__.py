"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; they back ``--version``
and the ``info`` banner without requiring package metadata at runtime.
"""

from __future__ import annotations

from typing import Callable

name = "hello_sonar"
title = "Greeting logger and integer addition helper"
version = "1.0.0"
homepage = "https://example.com/hello_sonar"
author = "hello_sonar maintainers"
author_email = "maintainers@example.com"
shell_command = "hello-sonar"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one ``key = value`` line per field.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for hello_sonar:
    <BLANKLINE>
        Greeting logger and integer addition helper
    <BLANKLINE>
        name          = hello_sonar
        version       = ...
    """

    fields = [
        ("name", name),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", "", f"    {title}", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)

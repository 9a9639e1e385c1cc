"""Distribution metadata shared by the CLI banner and packaging checks."""

from __future__ import annotations

from typing import Callable

name = "lib_log_levels"
title = "Runtime-adjustable logging levels for dotted logger hierarchies"
version = "1.0.0"
homepage = "https://github.com/bitranox/lib_log_levels"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_levels"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Emit the metadata banner through ``writer``.

    ``writer`` receives the whole banner as one string ending in a newline;
    the default prints it without adding another.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    banner = "\n".join(lines) + "\n"
    if writer is print:
        print(banner, end="")
    else:
        writer(banner)

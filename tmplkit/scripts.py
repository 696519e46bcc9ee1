"""Shebang script handling, command construction and terraform formatting."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
import sys
import tempfile
from typing import Any

from tmplkit.files import glob_func

__all__ = [
    "is_shebang_script",
    "script_parts",
    "is_command",
    "get_env",
    "get_command_from_file",
    "get_command_from_string",
    "default_shell",
    "is_terraform_file",
    "terraform_format",
]

_SHEBANG = re.compile(
    r"(?sm)^(?:\s*#!\s*(?P<program>[^\s]*)[ \t]*(?P<app>[^\s]*)?\s*$)?\s*(?P<source>.*)"
)

_TERRAFORM_EXTENSIONS = (".tf", ".tf.json", ".tfvars")

_default_shell = ""


def script_parts(content: str) -> tuple[str, str, str]:
    """Split content into (program, subprogram, source) following its shebang line."""
    match = _SHEBANG.match(content.strip())
    if not match:
        return "", "", content
    return match["program"] or "", match["app"] or "", match["source"] or ""


def is_shebang_script(content: str) -> bool:
    """Tell whether the content starts with a ``#! program`` line."""
    return script_parts(content)[0] != ""


def is_command(command: str) -> bool:
    """Tell whether the text holds no shell specific characters."""
    return not any(char in command for char in " \t|&$,;(){}<>[]")


def get_env(var_name: str, default_value: str) -> str:
    """Return the environment variable or the default when it is not set."""
    return os.environ.get(var_name, default_value)


def get_command_from_file(filename: str, *args: Any) -> list[str] | None:
    """Return the command line that runs the script file, or None if its command is unknown."""
    with open(filename, encoding="utf-8") as handle:
        script = handle.read()
    executer, delegate, command = script_parts(script.strip())
    arguments = glob_func(*args)

    if executer:
        command = executer
        arguments = [filename, *arguments]
        if delegate:
            arguments = [delegate, *arguments]
    elif shutil.which(command) is None:
        if " " not in command:
            return None
        program, *rest = command.split(" ")
        command = program
        arguments = [*rest, *arguments]
    return [command, *arguments]


def _save_temp_file(content: str, args: tuple) -> tuple[list[str] | None, str]:
    handle, name = tempfile.mkstemp(prefix="exec_")
    with os.fdopen(handle, "w", encoding="utf-8") as stream:
        stream.write(content)
    return get_command_from_file(name, *args), name


def get_command_from_string(script: str, *args: Any) -> tuple[list[str] | None, str]:
    """Return the command line for a script text and the temporary file written for it, if any.

    Raises FileNotFoundError when the script is a single unknown command.
    """
    executer, delegate, command = script_parts(script.strip())
    if executer:
        return _save_temp_file(f"#! {executer} {delegate}\n{command}", args)
    if shutil.which(command) is not None:
        return [command, *glob_func(*args)], ""
    if is_command(command):
        raise FileNotFoundError(f"exec: {command!r}: executable file not found in $PATH")
    return _save_temp_file(f"#! {default_shell()}\n{command}", args)


def default_shell() -> str:
    """Return the path of the first shell found, or an empty string."""
    global _default_shell
    if _default_shell:
        return _default_shell
    candidates = ("powershell", "pwsh", "cmd") if sys.platform == "win32" else ("bash", "sh", "zsh", "ksh")
    for name in candidates:
        found = shutil.which(name)
        if found:
            _default_shell = found
            break
    return _default_shell


def _extension(file: str) -> str:
    base = file.replace("\\", "/").rsplit("/", 1)[-1]
    position = base.rfind(".")
    return base[position:] if position >= 0 else ""


def is_terraform_file(file: str) -> bool:
    """Tell whether the file extension is one of the terraform extensions."""
    return _extension(file) in _TERRAFORM_EXTENSIONS


def terraform_format(*args: str) -> None:
    """Run ``terraform fmt`` in the folders of the terraform files given, if terraform is installed.

    Raises RuntimeError listing the folders where formatting failed.
    """
    terraform = shutil.which("terraform")
    if terraform is None:
        return
    folders = dict.fromkeys(os.path.dirname(f) or "." for f in args if is_terraform_file(f))
    failures: list[str] = []
    for folder in folders:
        first = subprocess.run(
            [terraform, "fmt"], cwd=folder, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True
        )
        if first.returncode != 0:
            failures.append(f"terraform fmt failed in {folder}: {first.stdout.strip()}")
            continue
        # A second pass is sometimes needed for the formatting to settle.
        subprocess.run([terraform, "fmt"], cwd=folder, check=True, capture_output=True)
    if failures:
        raise RuntimeError("\n".join(failures))
import os
import stat
import sys

import pytest

from tmplkit.scripts import (
    default_shell,
    get_command_from_file,
    get_command_from_string,
    get_env,
    is_command,
    is_shebang_script,
    is_terraform_file,
    script_parts,
    terraform_format,
)


def test_is_shebang_script():
    assert is_shebang_script("#! /bin/bash\necho hi") is True
    assert is_shebang_script("echo hi") is False


def test_script_parts_with_delegate():
    assert script_parts("#!/usr/bin/env python\nprint(1)") == ("/usr/bin/env", "python", "print(1)")


def test_script_parts_plain():
    assert script_parts("plain text") == ("", "", "plain text")


@pytest.mark.parametrize(
    "command, expected",
    [("ls", True), ("ls -l", False), ("a|b", False), ("x;y", False), ("$HOME", False)],
)
def test_is_command(command, expected):
    assert is_command(command) is expected


def test_get_env(monkeypatch):
    monkeypatch.setenv("TMPLKIT_TEST_VAR", "value")
    monkeypatch.delenv("TMPLKIT_MISSING_VAR", raising=False)
    assert get_env("TMPLKIT_TEST_VAR", "default") == "value"
    assert get_env("TMPLKIT_MISSING_VAR", "default") == "default"


def test_command_from_file_with_shebang(tmp_path):
    script = tmp_path / "run"
    script.write_text("#! /bin/sh\necho hi\n")
    assert get_command_from_file(str(script), "x") == ["/bin/sh", str(script), "x"]


def test_command_from_file_with_delegate(tmp_path):
    script = tmp_path / "run"
    script.write_text("#!/usr/bin/env python3\nprint(1)\n")
    assert get_command_from_file(str(script)) == ["/usr/bin/env", "python3", str(script)]


def test_command_from_file_existing_program(tmp_path):
    script = tmp_path / "run"
    script.write_text(sys.executable)
    assert get_command_from_file(str(script), "a", "b") == [sys.executable, "a", "b"]


def test_command_from_file_unknown_program(tmp_path):
    script = tmp_path / "run"
    script.write_text("nosuch_command_tmplkit")
    assert get_command_from_file(str(script)) is None


def test_command_from_file_splits_words(tmp_path):
    script = tmp_path / "run"
    script.write_text("nosuch_command_tmplkit arg1 arg2")
    assert get_command_from_file(str(script), "more") == ["nosuch_command_tmplkit", "arg1", "arg2", "more"]


def test_command_from_file_expands_globs(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    script = tmp_path / "run"
    script.write_text("#! /bin/sh\n")
    argv = get_command_from_file(str(script), str(tmp_path / "*.txt"))
    assert argv == ["/bin/sh", str(script), str(tmp_path / "a.txt")]


def test_command_from_string_with_shebang():
    argv, temp = get_command_from_string("#!/bin/sh\necho hi", "arg")
    try:
        assert argv == ["/bin/sh", temp, "arg"]
        with open(temp, encoding="utf-8") as handle:
            assert handle.read() == "#! /bin/sh \necho hi"
    finally:
        os.remove(temp)


def test_command_from_string_existing_program():
    assert get_command_from_string(sys.executable, "x") == ([sys.executable, "x"], "")


def test_command_from_string_unknown_command():
    with pytest.raises(FileNotFoundError):
        get_command_from_string("nosuch_command_tmplkit")


def test_command_from_string_shell_expression():
    argv, temp = get_command_from_string("echo hi | cat")
    try:
        assert temp in argv
        with open(temp, encoding="utf-8") as handle:
            assert handle.read().endswith("\necho hi | cat")
    finally:
        os.remove(temp)


def test_default_shell():
    assert os.path.basename(default_shell()) in ("bash", "sh", "zsh", "ksh")


@pytest.mark.parametrize(
    "name, expected",
    [("main.tf", True), ("vars.tfvars", True), ("x.tf.json", False), ("main.go", False)],
)
def test_is_terraform_file(name, expected):
    assert is_terraform_file(name) is expected


def _fake_terraform(folder, body):
    program = folder / "terraform"
    program.write_text("#!/bin/sh\n" + body)
    program.chmod(program.stat().st_mode | stat.S_IEXEC)


def test_terraform_format_runs_twice(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _fake_terraform(bin_dir, "echo line >> formatted\n")
    monkeypatch.setenv("PATH", str(bin_dir))
    work = tmp_path / "work"
    work.mkdir()
    tf_file = work / "main.tf"
    tf_file.write_text("")
    terraform_format(str(tf_file), str(work / "readme.md"))
    assert (work / "formatted").read_text().splitlines() == ["line", "line"]


def test_terraform_format_failure(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _fake_terraform(bin_dir, "echo boom\nexit 1\n")
    monkeypatch.setenv("PATH", str(bin_dir))
    tf_file = tmp_path / "main.tf"
    tf_file.write_text("")
    with pytest.raises(RuntimeError, match="boom"):
        terraform_format(str(tf_file))


def test_terraform_format_only_visits_terraform_folders(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _fake_terraform(bin_dir, "echo line >> formatted\n")
    monkeypatch.setenv("PATH", str(bin_dir))
    infra = tmp_path / "infra"
    infra.mkdir()
    docs = tmp_path / "docs"
    docs.mkdir()
    (infra / "main.tf").write_text("")
    (docs / "notes.txt").write_text("")
    terraform_format(str(docs / "notes.txt"), str(infra / "main.tf"))
    assert (infra / "formatted").read_text().splitlines() == ["line", "line"]
    assert sorted(p.name for p in docs.iterdir()) == ["notes.txt"]
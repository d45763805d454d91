# cpstt  - Competitive Programming Stress Test Tools.
#
# Copyright (c)   2019 - 2022 Václav Volhejn <vaclav.volhejn@gmail.com>
# Copyright (c)   2019 - 2022 Jiří Beneš <mail@jiribenes.com>
# Copyright (c)   2020 - 2022 Michal Töpfer <michal.topfer@gmail.com>
# Copyright (c)   2022        Jiří Kalvoda <jirikalvoda@kam.mff.cuni.cz>
# Copyright (c)   2023        Daniel Skýpala <daniel@honza.info>

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# any later version.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

from enum import Enum
import os
import subprocess
import sys
from typing import Optional

from cpstt.config.settings import Settings
from cpstt.errors import ProgramError
from cpstt.utils.paths import build_path

CPP_EXTENSIONS = [".cpp", ".cc"]
PYTHON_EXTENSIONS = [".py"]

CPP_FLAGS = ["-std=c++1z", "-O3", "-fsanitize=undefined", "-I", "."]


class RunResultKind(Enum):
    """Represents the way the generator execution ended."""

    OK = 0
    COMPILE_ERROR = 1
    RUNTIME_ERROR = 2


class RunResult:
    def __init__(
        self, kind: RunResultKind, stdout: str = "", msg: Optional[str] = None
    ) -> None:
        self.kind: RunResultKind = kind
        self.stdout: str = stdout
        self.msg: Optional[str] = msg

    def __repr__(self) -> str:
        return f"RunResult(kind={self.kind}, msg={self.msg})"


def _split_path(filepath: str) -> tuple[str, str, str]:
    """
    /path/to/file.ext ~~> (/path/to, file, .ext)
    """
    dirname, basename = os.path.split(filepath)
    filename, file_extension = os.path.splitext(basename)
    return dirname, filename, file_extension


def _run_process(command: list[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            command, capture_output=True, encoding="utf-8", errors="replace"
        )
    except OSError as err:
        raise ProgramError(f"Could not run {command[0]}: {err}")


def compile_cpp(filepath: str, build_dir: str) -> tuple[Optional[str], str]:
    """Compiles filepath into build_dir. Returns executable (or None) and stderr."""
    _, filename, _ = _split_path(filepath)
    os.makedirs(build_dir, exist_ok=True)
    executable = os.path.join(build_dir, filename)

    gpp = _run_process(["g++"] + CPP_FLAGS + [filepath, "-o", executable])
    # Warnings count as errors too
    if gpp.returncode != 0 or gpp.stderr:
        return None, gpp.stderr
    return executable, gpp.stderr


def _command(filepath: str, root_path: str) -> list[str] | RunResult:
    _, _, extension = _split_path(filepath)
    if extension in PYTHON_EXTENSIONS:
        return [sys.executable, filepath]
    elif extension in CPP_EXTENSIONS:
        executable, stderr = compile_cpp(filepath, build_path(root_path))
        if executable is None:
            return RunResult(
                RunResultKind.COMPILE_ERROR, msg=f"{stderr}It seems compile error"
            )
        return [executable]

    raise ProgramError(
        f"Unsupported generator {filepath}. "
        f"Supported extensions are {', '.join(PYTHON_EXTENSIONS + CPP_EXTENSIONS)}."
    )


def run_generator(filepath: str, args: list[str], root_path: str) -> RunResult:
    """Compiles (if needed) and runs generator at filepath with given args."""
    if not os.path.isfile(filepath):
        raise ProgramError(f"Generator {filepath} does not exist.")

    command = _command(filepath, root_path)
    if isinstance(command, RunResult):
        return command

    result = _run_process(command + args)
    if result.returncode != 0 or result.stderr:
        msg = result.stderr
        if result.returncode < 0:
            msg += f"Generator was killed by signal {-result.returncode}\n"
        elif result.returncode > 0:
            msg += f"Generator ended with exitcode {result.returncode}\n"
        return RunResult(
            RunResultKind.RUNTIME_ERROR,
            stdout=result.stdout,
            msg=msg + "It seems execution error",
        )

    return RunResult(RunResultKind.OK, stdout=result.stdout)


def truncate_output(text: str, settings: Settings) -> str:
    """Limits text to max_output_line lines of max_output_len characters."""
    max_len = settings.execution.max_output_len
    max_lines = settings.execution.max_output_line

    lines = text.splitlines()
    truncated = [
        line if len(line) <= max_len else line[:max_len] + "..."
        for line in lines[:max_lines]
    ]
    if len(lines) > max_lines:
        truncated.append(f"... ({len(lines) - max_lines} more lines)")
    return "\n".join(truncated)

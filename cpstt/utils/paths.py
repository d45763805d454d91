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

import os
from typing import Optional

TESTCASE_SUBDIR = "testcase"
GENERATOR_SUBDIR = "test"
BUILD_DIR = "build"

INPUT_SUFFIX = ".in"
OUTPUT_SUFFIX = ".out"
CLEANABLE_SUFFIXES = (INPUT_SUFFIX, OUTPUT_SUFFIX)

DEFAULT_GENERATOR = os.path.join(GENERATOR_SUBDIR, "generator.py")
SETTINGS_FILENAME = "settings"


def get_root_path(root: Optional[str] = None) -> str:
    """Returns absolute path of the project root (cwd if not given)."""
    return os.path.abspath(root if root is not None else os.getcwd())


def testcase_file(root_path: str, prefix: str, num: int) -> str:
    """
    Path of a test case input, e.g. <root>/testcase/0_sample_03.in

    root_path is used verbatim, so an empty root gives an absolute
    path starting with /testcase.
    """
    return f"{root_path}/{TESTCASE_SUBDIR}/{prefix}_{num:02}{INPUT_SUFFIX}"


def testcase_dir(root_path: str) -> str:
    return os.path.join(root_path, GENERATOR_SUBDIR, TESTCASE_SUBDIR)


def build_path(root_path: str, *path: str) -> str:
    return os.path.join(root_path, BUILD_DIR, *path)


def settings_file(root_path: str) -> str:
    return os.path.join(root_path, SETTINGS_FILENAME)

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

from cpstt.errors import CleanError
from cpstt.utils.paths import CLEANABLE_SUFFIXES
from cpstt.utils.text import print_error


def get_path_list(dir_path: str) -> list[str]:
    """Sorted paths of all entries in dir_path."""
    return sorted(os.path.join(dir_path, name) for name in os.listdir(dir_path))


def file_clean(dir_path: str) -> list[str]:
    """
    Removes all test case inputs and outputs from dir_path.

    Raises
    ------
    CleanError
        If dir_path contains a directory or a file of any other kind.
        Files removed before it was found stay removed.
    """
    removed = []
    for path in get_path_list(dir_path):
        extension = os.path.splitext(path)[1]
        if os.path.isdir(path):
            print_error(f"{path} could not be deleted because it is a directory")
            raise CleanError(f"Cleaning {dir_path} failed.")
        elif extension in CLEANABLE_SUFFIXES:
            os.remove(path)
            removed.append(path)
        else:
            print_error(
                f"{path} could not be deleted because its extension is {extension.lstrip('.')}"
            )
            raise CleanError(f"Cleaning {dir_path} failed.")
    return removed


def write_file(path: str, content: str) -> None:
    with open(path, "w") as f:
        f.write(content)
        f.flush()


def read_file(path: str) -> str:
    with open(path) as f:
        return f.read()

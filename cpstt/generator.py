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

"""
Emits integer pair test cases into <root>/testcase/<prefix>_<NN>.in

Run as a program, all arguments are concatenated into the root path:

    python -m cpstt.generator /path/to/test
"""

import random
import sys
import time
from typing import Iterable

from cpstt.utils.paths import testcase_file

SAMPLE_PREFIX = "0_sample"

SAMPLE_CASES: list[tuple[int, int]] = [(0, 0), (0, 1), (1, 0), (1, 1)]
SINGLE_CASES: list[tuple[int, int]] = [(0, 1)]

CASE_SETS: dict[str, list[tuple[int, int]]] = {
    "sample": SAMPLE_CASES,
    "single": SINGLE_CASES,
}


def init(argv: list[str]) -> str:
    """Seeds random from the current time and returns the root path."""
    # XXX: Nothing below consults the seed, kept so edited generators can.
    random.seed(time.time())
    return "".join(argv)


def output(root_path: str, a: int, b: int, prefix: str, num: int) -> bool:
    """
    Writes "a b" into the test case file for prefix and num.

    Returns False if the file could not be written (e.g. the testcase
    directory does not exist). Existing files are overwritten.
    """
    try:
        with open(testcase_file(root_path, prefix, num), "w") as f:
            f.write(f"{a} {b}\n")
    except OSError:
        return False
    return True


def emit_cases(
    root_path: str, cases: Iterable[tuple[int, int]], prefix: str = SAMPLE_PREFIX
) -> list[int]:
    """Emits cases in order, returns indices of cases that failed to write."""
    failed = []
    for num, (a, b) in enumerate(cases):
        if not output(root_path, a, b, prefix, num):
            failed.append(num)
    return failed


def main(argv: list[str]) -> int:
    root_path = init(argv)
    emit_cases(root_path, SAMPLE_CASES)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

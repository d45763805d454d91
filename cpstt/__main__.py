# cpstt  - Competitive Programming Stress Test Tools.
#
# Copyright (c)   2019 - 2022 Václav Volhejn <vaclav.volhejn@gmail.com>
# Copyright (c)   2019 - 2022 Jiří Beneš <mail@jiribenes.com>
# Copyright (c)   2020 - 2022 Michal Töpfer <michal.topfer@gmail.com>
# Copyright (c)   2022        Jiří Kalvoda <jirikalvoda@kam.mff.cuni.cz>
# Copyright (c)   2023        Daniel Skýpala <daniel@honza.info>
# Copyright (c)   2024        Benjamin Swart <benjaminswart@email.cz>

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# any later version.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

import argparse
import os
import signal
import sys

from cpstt import generator
from cpstt.config.settings import load_settings
from cpstt.errors import CleanError, CpsttError
from cpstt.logo import print_logo
from cpstt.program import RunResultKind, run_generator, truncate_output
from cpstt.utils.fileio import file_clean
from cpstt.utils.paths import (
    DEFAULT_GENERATOR,
    TESTCASE_SUBDIR,
    get_root_path,
    testcase_dir,
    testcase_file,
)
from cpstt.utils.text import eprint, print_error, print_warning, set_colors
from cpstt.version import ABOUT, print_version


def sigint_handler(sig, frame):
    eprint("\rStopping...")
    sys.exit(2)


def generate(args) -> int:
    root_path = generator.init(args.paths)
    cases = generator.CASE_SETS[args.cases]
    failed = generator.emit_cases(root_path, cases, args.prefix)

    if failed and args.strict:
        for num in failed:
            print_error(
                f"Could not write {testcase_file(root_path, args.prefix, num)}"
            )
        return 1
    return 0


def run(args) -> int:
    root_path = get_root_path(args.root)
    settings = load_settings(root_path)
    if settings is None:
        return 1

    if not args.no_logo:
        print_logo()

    generator_path = os.path.join(root_path, args.generator)
    output_dir = os.path.join(os.path.dirname(generator_path), TESTCASE_SUBDIR)
    if not os.path.isdir(output_dir):
        print_warning(
            f"Directory {output_dir} does not exist. No test cases can be written."
        )

    eprint(f"Running generator: {args.generator}")
    result = run_generator(
        generator_path, [os.path.dirname(generator_path)], root_path
    )

    if result.stdout:
        print(truncate_output(result.stdout, settings))
    if result.kind != RunResultKind.OK:
        print_error(result.msg or "Generator failed")
        return 1
    return 0


def clean(args) -> int:
    dir_path = args.dir or testcase_dir(get_root_path(args.root))
    eprint(f"Cleaning directory: {os.path.abspath(dir_path)}")
    if not os.path.isdir(dir_path):
        raise CleanError(f"Directory {dir_path} does not exist.")
    file_clean(dir_path)
    return 0


def main(argv):
    parser = argparse.ArgumentParser(prog="cpstt", description=ABOUT)

    parser.add_argument(
        "--plain",
        "-p",
        action="store_true",
        help="do not use ANSI escape sequences",
    )
    parser.add_argument(
        "--no-colors",
        action="store_true",
        help="do not use ANSI color sequences",
    )
    parser.add_argument(
        "--root",
        "-r",
        type=str,
        help="project root directory (defaults to current directory)",
    )

    subparsers = parser.add_subparsers(
        help="subcommand to run", dest="subcommand", required=True
    )

    # ------------------------------- cpstt version -------------------------------

    subparsers.add_parser("version", help="print current version")

    # ------------------------------- cpstt generate -------------------------------

    parser_generate = subparsers.add_parser(
        "generate", help="write sample test cases into PATHS/testcase/"
    )
    parser_generate.add_argument(
        "paths",
        type=str,
        nargs="*",
        help="fragments of the root path (concatenated without separator)",
    )
    parser_generate.add_argument(
        "--cases",
        "-c",
        choices=list(generator.CASE_SETS),
        default="sample",
        help="which test cases to write",
    )
    parser_generate.add_argument(
        "--prefix",
        type=str,
        default=generator.SAMPLE_PREFIX,
        help="prefix of test case filenames",
    )
    parser_generate.add_argument(
        "--strict",
        action="store_true",
        help="fail if a test case can't be written",
    )

    # ------------------------------- cpstt run -------------------------------

    parser_run = subparsers.add_parser("run", help="run the test case generator")
    parser_run.add_argument(
        "--generator",
        "-g",
        type=str,
        default=DEFAULT_GENERATOR,
        help=f"generator source relative to root (default {DEFAULT_GENERATOR})",
    )
    parser_run.add_argument(
        "--no-logo", action="store_true", help="don't print the logo"
    )

    # ------------------------------- cpstt clean -------------------------------

    parser_clean = subparsers.add_parser(
        "clean", help="remove generated test cases"
    )
    parser_clean.add_argument(
        "--dir",
        type=str,
        help="directory to clean (defaults to test/testcase in root)",
    )

    args = parser.parse_args(argv)
    set_colors(not args.plain and not args.no_colors)

    try:
        if args.subcommand == "version":
            result = print_version()
        elif args.subcommand == "generate":
            result = generate(args)
        elif args.subcommand == "run":
            result = run(args)
        elif args.subcommand == "clean":
            result = clean(args)
        else:
            raise RuntimeError(f"Unknown subcommand {args.subcommand}")
    except CpsttError as err:
        print_error(str(err))
        result = 1

    return result


def main_wrapped():
    signal.signal(signal.SIGINT, sigint_handler)
    result = main(sys.argv[1:])

    if result:
        exit(1)


if __name__ == "__main__":
    main_wrapped()

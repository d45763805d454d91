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

import sys

from colorama import Fore, Style

_colors_on = True


def set_colors(colors_on: bool) -> None:
    """Turns ANSI colors on or off for all output."""
    global _colors_on
    _colors_on = colors_on


def colored(msg: str, color: str, bold: bool = False) -> str:
    if not _colors_on:
        return msg

    col = (Style.BRIGHT if bold else "") + getattr(Fore, color.upper())
    return f"{col}{msg}{Style.RESET_ALL}"


def tab(text: str, tab_str: str = "  "):
    return tab_str + text.replace("\n", f"\n{tab_str}")


def eprint(msg, *args, **kwargs):
    """Prints to sys.stderr."""
    print(msg, *args, file=sys.stderr, **kwargs)


def green(msg: str) -> str:
    return colored(msg, "green", bold=True)


def yellow(msg: str) -> str:
    return colored(msg, "yellow", bold=True)


def print_error(msg: str) -> None:
    """Prints 'Error: msg' to sys.stderr with the label in bold red."""
    eprint(f"{colored('Error', 'red', bold=True)}: {msg}")


def print_warning(msg: str) -> None:
    """Prints 'Warning: msg' to sys.stderr with the label in bold yellow."""
    eprint(f"{yellow('Warning')}: {msg}")


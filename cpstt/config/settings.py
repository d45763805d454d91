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

from configparser import (
    ConfigParser,
    DuplicateSectionError,
    DuplicateOptionError,
    MissingSectionHeaderError,
)
from importlib.resources import files
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from cpstt.errors import SettingsError
from cpstt.utils.paths import settings_file
from cpstt.utils.text import colored, eprint, tab

DEFAULT_SETTINGS = str(files("cpstt").joinpath("config/default-settings"))


class ExecutionSettings(BaseModel):
    max_output_len: int = Field(gt=0)
    max_output_line: int = Field(gt=0)


class Settings(BaseModel):
    """Settings loaded from the settings file (over the defaults)."""

    execution: ExecutionSettings


def _read_config(config: ConfigParser, path: str) -> bool:
    try:
        res = config.read(path)
    except DuplicateSectionError as e:
        raise SettingsError(f"In {path}: Duplicate section [{e.section}]")
    except DuplicateOptionError as e:
        raise SettingsError(
            f"In {path}: Duplicate key '{e.option}' in section [{e.section}]"
        )
    except MissingSectionHeaderError:
        raise SettingsError(f"In {path}: Missing section header")
    return len(res) > 0


def _check_unused_keys(defaults: ConfigParser, config: ConfigParser, path: str):
    for section in config.sections():
        if not defaults.has_section(section):
            raise SettingsError(f"Unexpected section [{section}] in {path}.")
        for key in config[section]:
            if not defaults.has_option(section, key):
                raise SettingsError(
                    f"Unexpected key '{key}' in section [{section}] of {path}."
                )


def read_settings(root_path: str) -> Settings:
    """
    Reads settings of project in root_path.

    Raises
    ------
    SettingsError
        If a settings file can't be parsed or contains unknown keys.
    ValidationError
        If a value is invalid.
    """
    defaults = ConfigParser(interpolation=None)
    if not _read_config(defaults, DEFAULT_SETTINGS):
        raise SettingsError(f"Missing default settings {DEFAULT_SETTINGS}.")

    path = settings_file(root_path)
    config = ConfigParser(interpolation=None)
    if _read_config(config, path):
        _check_unused_keys(defaults, config, path)

    values = {
        section: {
            key: config.get(section, key, fallback=defaults[section][key])
            for key in defaults[section]
        }
        for section in defaults.sections()
    }
    return Settings(**values)


def load_settings(root_path: str) -> Optional[Settings]:
    """Loads settings, printing errors instead of raising them."""
    try:
        return read_settings(root_path)
    except SettingsError as err:
        eprint(colored(str(err), "red"))
    except ValidationError as err:
        eprint(
            colored(
                "Invalid settings:\n\n"
                + "\n\n".join(
                    f"In [{']['.join(map(str, error['loc']))}]:\n"
                    + tab(error["msg"])
                    for error in err.errors()
                ),
                "red",
            )
        )
    return None

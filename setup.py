# cpstt  - Competitive Programming Stress Test Tools.
#
# Copyright (c)   2019 - 2022 Václav Volhejn <vaclav.volhejn@gmail.com>
# Copyright (c)   2019 - 2022 Jiří Beneš <mail@jiribenes.com>
# Copyright (c)   2020 - 2022 Michal Töpfer <michal.topfer@gmail.com>
# Copyright (c)   2022        Jiri Kalvoda <jirikalvoda@kam.mff.cuni.cz>

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# any later version.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

import setuptools

setuptools.setup(
    name="cpstt",
    version="1.0.0",
    description="Competitive Programming Stress Test Tools",
    packages=setuptools.find_packages(include=["cpstt", "cpstt.*"]),
    python_requires=">=3.10",
    install_requires=["colorama", "pydantic>=2"],
    extras_require={"dev": ["black", "mypy", "pytest"]},
    entry_points={"console_scripts": ["cpstt=cpstt.__main__:main_wrapped"]},
    include_package_data=True,
    package_data={"cpstt": ["logo.txt", "config/default-settings"]},
)

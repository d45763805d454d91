from importlib.resources import files

from cpstt.utils.text import green

LOGO_FILE = str(files("cpstt").joinpath("logo.txt"))


def print_logo(path: str = LOGO_FILE) -> None:
    with open(path) as f:
        for line in f:
            print(green(line.rstrip("\n")))

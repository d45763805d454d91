from importlib.metadata import version, PackageNotFoundError

ABOUT = "Competitive Programming Stress Test Tools"


def get_version() -> str:
    try:
        return version("cpstt")
    except PackageNotFoundError:
        return "unknown"


def print_version() -> int:
    print(f"cpstt {get_version()} ({ABOUT})")
    return 0

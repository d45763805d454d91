class CpsttError(Exception):
    """Error reported to the user by the cpstt command line."""


class CleanError(CpsttError):
    """A file in a testcase directory can not be cleaned."""


class ProgramError(CpsttError):
    """A generator program could not be compiled or run."""


class SettingsError(CpsttError):
    """Settings file is missing, malformed or contains unknown keys."""

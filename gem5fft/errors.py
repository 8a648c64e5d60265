class LauncherError(Exception):
    """Base class for errors that stop a run before gem5 is started."""


class ConfigError(LauncherError):
    pass


class OutputDirExhausted(LauncherError):
    pass


class OutputDirError(LauncherError):
    pass


class Gem5StartError(LauncherError):
    pass

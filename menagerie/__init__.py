from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("menagerie")
except PackageNotFoundError:
    # running from a plain checkout, not installed
    __version__ = "0.0.0"

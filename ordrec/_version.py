from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ordrec")
except PackageNotFoundError:
    # Source checkout without installed distribution metadata
    __version__ = "0.0.0-dev"

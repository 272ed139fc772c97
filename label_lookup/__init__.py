"""Label Lookup API"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("label-lookup-api")
except PackageNotFoundError:
    __version__ = "dev"

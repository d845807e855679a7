"""
gitremotes: discover git repositories below a directory and report their remotes.
"""
from .version import __version__

__all__ = ["__version__"]

"""
Commity - Interactive commit message wizard

Asks the questions declared in a .commity.yaml file page by page and
renders the answers into a commit message template.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("commity")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]

"""contractdrift - compare a declared API contract against observed traffic."""

from contractdrift.__version__ import __version__

__all__ = ["__version__"]

"""Core functionality for publication conversion."""

from . import models
from . import parsers

__all__ = ["models", "parsers"]

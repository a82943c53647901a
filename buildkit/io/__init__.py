"""Binary IO utilities for map and archive parsing."""

from buildkit.io.reader import Reader
from buildkit.io.writer import Writer

__all__ = ['Reader', 'Writer']

"""
Persistence backends implementing the ``EntityStore`` interface.
"""

from .base import EntityStore  # noqa: F401
from .memory import InMemoryEntityStore  # noqa: F401
from .sqlite import SQLiteEntityStore  # noqa: F401

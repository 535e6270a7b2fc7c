"""Process-wide database connection state.

The connection settings are checked once per process. After the first
successful connection the state is cached, so later lookups skip the
configuration check entirely. ``reset()`` returns to the unconnected state.
"""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, connections

from events.domain.errors import DatabaseConfigurationError

logger = logging.getLogger(__name__)


class ConnectionState:
    """Init-once guard around the Django database connection."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        self._alias = alias
        self._lock = threading.Lock()
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """Verify configuration and open the connection if not done yet.

        Raises:
            DatabaseConfigurationError: If DATABASE_URL is unset or Django
                reports the database as improperly configured.
        """
        if self._connected:
            return
        with self._lock:
            if self._connected:
                return
            if not getattr(settings, "DATABASE_URL", None):
                logger.error("DATABASE_URL is not configured")
                raise DatabaseConfigurationError()
            try:
                connections[self._alias].ensure_connection()
            except ImproperlyConfigured as exc:
                logger.error("Database is improperly configured: %s", exc)
                raise DatabaseConfigurationError() from exc
            self._connected = True
            logger.info("Connected to database %r", self._alias)

    def reset(self) -> None:
        with self._lock:
            self._connected = False


connection_state = ConnectionState()


def ensure_connection() -> None:
    connection_state.connect()

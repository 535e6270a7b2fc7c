"""Translate a DATABASE_URL into a Django DATABASES entry."""

from urllib.parse import unquote, urlparse

from django.core.exceptions import ImproperlyConfigured

ENGINES = {
    "sqlite": "django.db.backends.sqlite3",
    "postgres": "django.db.backends.postgresql",
    "postgresql": "django.db.backends.postgresql",
}


def database_from_url(url: str) -> dict:
    """Build a database settings dict from a URL.

    Supports ``sqlite:///relative/or/absolute/path``, ``sqlite://:memory:``
    and ``postgres[ql]://user:password@host:port/name``.
    """
    parsed = urlparse(url)
    engine = ENGINES.get(parsed.scheme)
    if engine is None:
        raise ImproperlyConfigured(f"Unsupported database scheme: {parsed.scheme!r}")

    if parsed.scheme == "sqlite":
        if parsed.netloc == ":memory:" or parsed.path in ("", "/", "/:memory:"):
            name = ":memory:"
        else:
            # sqlite:///db.sqlite3 is relative, sqlite:////srv/db.sqlite3 absolute.
            name = unquote(parsed.path[1:])
        return {"ENGINE": engine, "NAME": name}

    name = unquote(parsed.path.lstrip("/"))
    if not name:
        raise ImproperlyConfigured("DATABASE_URL must include a database name")
    return {
        "ENGINE": engine,
        "NAME": name,
        "USER": unquote(parsed.username or ""),
        "PASSWORD": unquote(parsed.password or ""),
        "HOST": parsed.hostname or "",
        "PORT": str(parsed.port or ""),
    }

"""Create (or reset) the configured Postgres database before migrating."""
from __future__ import annotations

import argparse
import logging
import sys
from urllib.parse import urlsplit, urlunsplit

import psycopg
from psycopg import sql

from nonna_kitchen.core.settings import settings

logger = logging.getLogger(__name__)


def to_libpq_url(url: str) -> str:
    """Strip the SQLAlchemy driver suffix (``postgresql+psycopg`` -> ``postgresql``)."""
    parts = urlsplit(url.strip().strip("'\""))
    scheme = parts.scheme.split("+", 1)[0]
    if scheme not in ("postgresql", "postgres"):
        raise ValueError(f"Not a Postgres URL: {url!r}")
    return urlunsplit(("postgresql", parts.netloc, parts.path, parts.query, parts.fragment))


def maintenance_url(url: str) -> tuple[str, str]:
    """Return ``(url of the postgres maintenance db, target database name)``."""
    parts = urlsplit(url)
    target = parts.path.lstrip("/") or "postgres"
    return urlunsplit((parts.scheme, parts.netloc, "/postgres", parts.query, "")), target


def ensure_database(url: str) -> bool:
    """Create the target database when missing; returns True if it was created."""
    admin_url, target = maintenance_url(url)
    with psycopg.connect(admin_url, autocommit=True) as conn, conn.cursor() as cur:
        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (target,))
        if cur.fetchone() is not None:
            logger.info("Database %s already exists", target)
            return False
        cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(target)))
    logger.info("Created database %s", target)
    return True


def reset_schema(url: str) -> None:
    with psycopg.connect(url, autocommit=True) as conn, conn.cursor() as cur:
        cur.execute("DROP SCHEMA IF EXISTS public CASCADE")
        cur.execute("CREATE SCHEMA public")
    logger.info("Recreated public schema")


def main() -> None:
    parser = argparse.ArgumentParser(description="Ensure or reset the configured database")
    parser.add_argument("--reset", action="store_true", help="Drop every table first")
    parser.add_argument("--url", default=None, help="Override the configured database URL")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())
    raw_url = args.url or settings.effective_database_url
    if raw_url.startswith("sqlite"):
        logger.info("SQLite database is created on first connect; nothing to do")
        return

    try:
        url = to_libpq_url(raw_url)
        ensure_database(url)
        if args.reset:
            reset_schema(url)
    except (ValueError, psycopg.Error) as exc:
        logger.error("Database bootstrap failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()

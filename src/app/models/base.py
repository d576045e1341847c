from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as a naive datetime.

    Timestamp columns are stored without time zone (SQLite TEXT, PostgreSQL
    TIMESTAMP WITHOUT TIME ZONE); all times are UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)

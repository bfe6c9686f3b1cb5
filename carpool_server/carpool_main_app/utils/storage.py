"""Database error classification for the storage layer"""
import logging
import os
import signal

from django.db import IntegrityError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = '23505'

# Raised by psycopg_pool once the pool is closed for good. PoolTimeout and
# TooManyRequests only mean it is busy and fail the single request.
FATAL_POOL_ERRORS = ('PoolClosed',)


def is_unique_violation(exc):
    """True when an IntegrityError comes from a unique constraint (not a FK or check)"""
    if not isinstance(exc, IntegrityError):
        return False

    cause = exc.__cause__
    sqlstate = getattr(cause, 'sqlstate', None) or getattr(cause, 'pgcode', None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return 'unique' in str(exc).lower()


def is_fatal_pool_error(exc):
    cause = exc.__cause__ or exc
    return type(cause).__name__ in FATAL_POOL_ERRORS


def request_shutdown(exc):
    """Ask the process to terminate so the supervisor can restart it with a fresh pool"""
    logger.critical(f'[DB] Connection pool unusable, shutting down: {exc!r}')
    os.kill(os.getpid(), signal.SIGTERM)

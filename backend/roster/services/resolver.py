"""
Roster Backend — Resource Resolver
===================================

What:  Turns a raw route-parameter string into a persisted entity.
How:   Coerces the key to the lookup column's type, performs one read
       through the session, and reports the outcome as Found or NotFound.
Who:   Called by the route binding dependency (routes/binding.py) before
       any handler runs.

Resolution States:
    Pending ──▶ Found(entity)            handler runs with the entity
            └─▶ NotFound(model, key)     handler never runs, 404 returned

Failure Classification:
    key cannot be coerced (e.g. "abc" for an integer id)  → NotFound, no query
    integer key outside the column type's range           → NotFound, no query
    statement rejected by the database (DataError, ...)   → NotFound
    transport failure (OperationalError, InterfaceError,
    invalidated connection, OSError)                      → InfrastructureError

The resolver holds no state between calls. Concurrent requests each bring
their own session, so nothing here needs a lock.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, Union

from sqlalchemy import BigInteger, Integer, SmallInteger, inspect, select
from sqlalchemy.exc import (
    DBAPIError,
    InterfaceError,
    OperationalError,
    StatementError,
)
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.schema import Column
from sqlalchemy.types import TypeEngine

from roster.exceptions import InfrastructureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """The key resolved; `entity` is the loaded ORM instance."""
    entity: Any


@dataclass(frozen=True)
class NotFound:
    """The key did not resolve to a row of `model`."""
    model: str
    key: str

    @property
    def message(self) -> str:
        return f"No query results for model [{self.model}] {self.key}"


Resolution = Union[Found, NotFound]


def lookup_column(model: Type[Any], field: Optional[str] = None) -> Column:
    """
    Return the column a binding looks up by.

    `field=None` selects the single-column primary key. Raises ValueError
    for unknown fields and composite primary keys; bindings call this at
    registration time so mistakes surface on startup, not per request.
    """
    mapper = inspect(model)
    if field is None:
        primary_key = mapper.primary_key
        if len(primary_key) != 1:
            raise ValueError(
                f"{model.__name__} has a composite primary key; "
                "bind it by an explicit field"
            )
        return primary_key[0]

    if field not in mapper.columns:
        raise ValueError(f"{model.__name__} has no column '{field}'")
    return mapper.columns[field]


def _integer_bounds(column_type: TypeEngine) -> Tuple[int, int]:
    # Most specific first: BigInteger and SmallInteger subclass Integer
    if isinstance(column_type, BigInteger):
        return -(2 ** 63), 2 ** 63 - 1
    if isinstance(column_type, SmallInteger):
        return -(2 ** 15), 2 ** 15 - 1
    return -(2 ** 31), 2 ** 31 - 1


def coerce_key(column: Column, raw_key: str) -> Any:
    """
    Convert a raw path segment to the column's Python type.

    Integer keys outside the column type's storable range are rejected here,
    before the driver sees them (drivers raise OverflowError or a client-side
    error that is indistinguishable from a transport failure).

    Raises ValueError or TypeError when the segment cannot be converted.
    """
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw_key
    if python_type is str:
        return raw_key

    key = python_type(raw_key)
    if isinstance(column.type, Integer):
        low, high = _integer_bounds(column.type)
        if not low <= key <= high:
            raise ValueError(f"{raw_key} is out of range for {column.type}")
    return key


async def find_by_key(
    session: AsyncSession,
    model: Type[Any],
    key: Any,
    field: Optional[str] = None,
) -> Optional[Any]:
    """
    Single read against the persistence layer.

    Primary-key lookups go through `AsyncSession.get`, which consults the
    identity map first: the same key in the same session always yields the
    same instance. Other fields issue SELECT ... WHERE field = key LIMIT 1.
    """
    if field is None:
        return await session.get(model, key)

    result = await session.execute(
        select(model).where(getattr(model, field) == key).limit(1)
    )
    return result.scalars().first()


async def resolve(
    session: AsyncSession,
    model: Type[Any],
    raw_key: str,
    field: Optional[str] = None,
) -> Resolution:
    """
    Resolve `raw_key` to an instance of `model`.

    Args:
        session: Request-scoped async session
        model: ORM class to look up
        raw_key: The path segment exactly as the router extracted it
        field: Lookup column name (None = primary key)

    Returns:
        Found(entity) or NotFound(model name, raw_key). Exactly one lookup
        is performed; none when the key cannot be coerced.

    Raises:
        InfrastructureError: The datastore could not be reached.
    """
    column = lookup_column(model, field)
    model_name = model.__name__

    try:
        key = coerce_key(column, raw_key)
    except (TypeError, ValueError):
        logger.debug("Key %r is not a valid %s.%s", raw_key, model_name, column.key)
        return NotFound(model=model_name, key=raw_key)

    try:
        entity = await find_by_key(session, model, key, field)
    except (OperationalError, InterfaceError) as e:
        raise _infrastructure_error(model_name, raw_key, e) from e
    except DBAPIError as e:
        if e.connection_invalidated:
            raise _infrastructure_error(model_name, raw_key, e) from e
        logger.warning(
            "Lookup of %s %r rejected by the database: %s",
            model_name, raw_key, type(e.orig).__name__ if e.orig else type(e).__name__,
        )
        return NotFound(model=model_name, key=raw_key)
    except StatementError as e:
        logger.warning("Lookup of %s %r could not be executed: %s", model_name, raw_key, e)
        return NotFound(model=model_name, key=raw_key)
    except OSError as e:
        raise _infrastructure_error(model_name, raw_key, e) from e

    if entity is None:
        return NotFound(model=model_name, key=raw_key)
    return Found(entity=entity)


def _infrastructure_error(model_name: str, raw_key: str, error: Exception) -> InfrastructureError:
    logger.error("Datastore unreachable while resolving %s %r: %s", model_name, raw_key, error)
    return InfrastructureError(
        context={
            "model": model_name,
            "key": raw_key,
            "original_error": type(error).__name__,
        },
    )

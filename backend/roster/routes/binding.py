"""
Roster Backend — Route Model Binding
=====================================

What:  Resolves a path parameter into an ORM entity before the handler runs.
Why:   Handlers receive the entity as an argument and never re-fetch it;
       the 404 for a missing key is produced here, in one place.
How:   A RouteBinding describes param name → model → lookup field. bind()
       turns it into a FastAPI dependency at route-registration time.

Naming Convention:
    The path parameter is the model's lowercase class name:

        @router.get("/student/{student}/detail")
        async def show(student: Student = Depends(bind("student"))): ...

    Renaming {studentId} to {student} is what opts a route into binding.

Request Flow:
    router extracts "7" ──▶ bind_student(student="7", db=session)
                           ──▶ resolver.resolve(session, Student, "7")
                               ├─ Found      → handler(student=<Student 7>)
                               └─ NotFound   → ModelNotFoundError → 404
                                               (or binding.missing(outcome))
"""

import inspect
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterator, Optional, Type, Union

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from roster.database import get_db_session
from roster.exceptions import ModelNotFoundError
from roster.services.resolver import NotFound, lookup_column, resolve

# Name of the session argument on generated dependencies
SESSION_PARAM = "db"


@dataclass(frozen=True)
class RouteBinding:
    """
    Static mapping from a path parameter to the entity it resolves to.

    Attributes:
        param:   Path parameter name ("student" for /student/{student})
        model:   ORM class to look up
        field:   Lookup column; None means the primary key
        missing: Optional hook building the exception raised on NotFound.
                 Used when an endpoint needs its own not-found message
                 instead of "No query results for model [...]".
    """
    param: str
    model: Type[Any]
    field: Optional[str] = None
    missing: Optional[Callable[[NotFound], Exception]] = None

    def __post_init__(self) -> None:
        if not self.param.isidentifier():
            raise ValueError(f"Route parameter '{self.param}' is not a valid identifier")
        if self.param == SESSION_PARAM:
            raise ValueError(f"Route parameter name '{SESSION_PARAM}' is reserved")
        # Fail at registration for unknown fields / composite keys
        lookup_column(self.model, self.field)

    @classmethod
    def for_model(
        cls,
        model: Type[Any],
        field: Optional[str] = None,
        missing: Optional[Callable[[NotFound], Exception]] = None,
    ) -> "RouteBinding":
        return cls(param=model.__name__.lower(), model=model, field=field, missing=missing)


class BindingRegistry:
    """Route bindings keyed by path parameter name."""

    def __init__(self) -> None:
        self._bindings: Dict[str, RouteBinding] = {}

    def register(self, target: Union[Type[Any], RouteBinding]) -> RouteBinding:
        """
        Register a model (under its lowercase name) or an explicit binding.

        Raises:
            ValueError: The parameter name is already bound.
        """
        binding = target if isinstance(target, RouteBinding) else RouteBinding.for_model(target)
        if binding.param in self._bindings:
            raise ValueError(f"Route parameter '{binding.param}' is already bound")
        self._bindings[binding.param] = binding
        return binding

    def get(self, param: str) -> RouteBinding:
        try:
            return self._bindings[param]
        except KeyError:
            raise LookupError(f"No route binding registered for '{param}'") from None

    def __contains__(self, param: object) -> bool:
        return param in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)


# Default registry; models register themselves from their route modules
bindings = BindingRegistry()


def bind(
    target: Union[str, RouteBinding],
    *,
    field: Optional[str] = None,
    missing: Optional[Callable[[NotFound], Exception]] = None,
    registry: Optional[BindingRegistry] = None,
) -> Callable[..., Any]:
    """
    Build the FastAPI dependency that resolves one bound path parameter.

    Args:
        target: A registered parameter name or an explicit RouteBinding
        field: Override the lookup column (e.g. "student_number")
        missing: Override the not-found hook
        registry: Registry to look names up in (default: `bindings`)

    Returns:
        An async dependency declaring the path parameter and a database
        session. It returns the entity, or raises before the handler runs.

    Raises:
        LookupError: `target` names no registered binding.
        ValueError: `field` is not a column of the bound model.
    """
    if isinstance(target, RouteBinding):
        binding = target
    else:
        binding = (registry if registry is not None else bindings).get(target)

    overrides: Dict[str, Any] = {}
    if field is not None:
        overrides["field"] = field
    if missing is not None:
        overrides["missing"] = missing
    if overrides:
        binding = replace(binding, **overrides)

    key_name = lookup_column(binding.model, binding.field).key

    async def resolve_binding(**kwargs: Any) -> Any:
        outcome = await resolve(
            kwargs[SESSION_PARAM], binding.model, kwargs[binding.param], binding.field,
        )
        if isinstance(outcome, NotFound):
            if binding.missing is not None:
                raise binding.missing(outcome)
            raise ModelNotFoundError(model=outcome.model, key=outcome.key)
        return outcome.entity

    # FastAPI reads the dependency's parameters from its signature; declare
    # the bound path parameter under its real name so it is extracted from
    # the URL and documented in OpenAPI.
    resolve_binding.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        parameters=[
            inspect.Parameter(
                binding.param,
                inspect.Parameter.KEYWORD_ONLY,
                default=Path(description=f"{binding.model.__name__} {key_name}"),
                annotation=str,
            ),
            inspect.Parameter(
                SESSION_PARAM,
                inspect.Parameter.KEYWORD_ONLY,
                default=Depends(get_db_session),
                annotation=AsyncSession,
            ),
        ],
    )
    resolve_binding.__name__ = f"bind_{binding.param}"
    resolve_binding.binding = binding  # type: ignore[attr-defined]
    return resolve_binding

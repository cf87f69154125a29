from __future__ import annotations

"""Validation of compression requests arriving from the tool surface."""

import logging
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    BadTypeError,
    ConflictError,
    EmptyTargetsError,
    OutOfRangeError,
    ValidationError,
)
from .models import (
    MAX_LEVEL,
    MIN_LEVEL,
    SUPPORTED_FORMATS,
    AdvancedRequest,
    QuickRequest,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _translate(exc: PydanticValidationError) -> ValidationError:
    """Map the first pydantic error onto the request error taxonomy."""
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "request"
    kind = error.get("type", "")
    if field == "targets" and kind == "missing":
        return EmptyTargetsError()
    if kind == "extra_forbidden":
        return BadTypeError(field, f"'{field}' is not a recognized parameter")
    return BadTypeError(
        field,
        f"'{field}' has an invalid value: {error.get('msg', 'invalid input')}",
        error.get("input"),
    )


def _parse(model_cls: Type[ModelT], raw: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    if isinstance(raw, model_cls):
        return raw
    if not isinstance(raw, Mapping):
        raise BadTypeError("request", f"Expected a mapping of parameters, got {type(raw).__name__}")
    # ``None`` on the wire means the parameter was left out.
    params = {key: value for key, value in raw.items() if value is not None}
    try:
        return model_cls.model_validate(params)
    except PydanticValidationError as exc:
        raise _translate(exc) from exc


def _check_targets(targets: tuple) -> None:
    if not targets:
        raise EmptyTargetsError()
    for target in targets:
        if not isinstance(target, str) or not target.strip():
            raise BadTypeError("targets", "'targets' entries must be non-empty path strings", target)


def _check_non_negative(field: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise OutOfRangeError(field, f"'{field}' must be 0 or greater, got {value}", value)


def validate_quick(raw: Union[QuickRequest, Mapping[str, Any]]) -> QuickRequest:
    """Return a validated :class:`QuickRequest` or raise :class:`ValidationError`."""
    request = _parse(QuickRequest, raw)
    _check_targets(request.targets)
    return request


def validate_advanced(raw: Union[AdvancedRequest, Mapping[str, Any]]) -> AdvancedRequest:
    """
    Return a validated :class:`AdvancedRequest` or raise :class:`ValidationError`.

    ``raw`` may be a constructed request or the loosely-typed parameters of a
    tool call; numeric values given as strings are coerced here so nothing
    stringly-typed reaches the encoder.
    """
    request = _parse(AdvancedRequest, raw)
    _check_targets(request.targets)

    if request.level is not None and not MIN_LEVEL <= request.level <= MAX_LEVEL:
        raise OutOfRangeError(
            "level",
            f"'level' must be between {MIN_LEVEL} and {MAX_LEVEL}, got {request.level}",
            request.level,
        )
    if request.format is not None and request.format not in SUPPORTED_FORMATS:
        raise OutOfRangeError(
            "format",
            f"'format' must be one of {', '.join(SUPPORTED_FORMATS)}, got '{request.format}'",
            request.format,
        )
    _check_non_negative("width", request.width)
    _check_non_negative("height", request.height)

    if request.use_default_directory and request.directory is not None:
        raise ConflictError(
            "directory",
            "'directory' cannot be combined with 'use_default_directory'",
            request.directory,
        )

    logger.debug("Validated advanced request for %d target(s)", len(request.targets))
    return request


def validate(request: Union[QuickRequest, AdvancedRequest]) -> Union[QuickRequest, AdvancedRequest]:
    """Validate either request variant."""
    if isinstance(request, AdvancedRequest):
        return validate_advanced(request)
    if isinstance(request, QuickRequest):
        return validate_quick(request)
    raise BadTypeError("request", f"Unsupported request type: {type(request).__name__}")


__all__ = ["validate", "validate_quick", "validate_advanced"]

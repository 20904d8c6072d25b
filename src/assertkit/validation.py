# src/assertkit/validation.py
"""Assertions over pydantic model validation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails

from assertkit.contracts.errors import AssertionFailure


def assert_validation_error(
    model: type[BaseModel],
    data: Mapping[str, Any],
    field: str,
    comparison: Callable[[list[ErrorDetails]], bool] | None = None,
) -> list[ErrorDetails]:
    """Assert validating ``data`` against ``model`` fails at ``field``.

    Args:
        model: Pydantic model class
        data: Input to validate
        field: Field expected to carry an error (name or alias)
        comparison: Optional check run against the errors for ``field``

    Returns:
        The validation errors located at ``field``

    Example:
        errors = assert_validation_error(ServerConfig, {"port": 0}, "port")
        assert errors[0]["type"] == "greater_than"
    """
    model_field = model.model_fields.get(field)
    if model_field is None:
        raise AssertionFailure(
            f"Field '{field}' is not defined on {model.__name__}",
            left=field,
            right=sorted(model.model_fields),
        )
    names = {field, model_field.alias} - {None}

    try:
        model.model_validate(data)
    except ValidationError as exc:
        all_errors = exc.errors(include_url=False)
        errors = [error for error in all_errors if error["loc"] and error["loc"][0] in names]
        if not errors:
            raise AssertionFailure(
                f"No validation error for field '{field}'",
                left=all_errors,
                right=field,
                args_=(model, data, field),
            ) from None
        if comparison is not None and not comparison(errors):
            raise AssertionFailure(
                f"Validation errors for field '{field}' did not satisfy the comparison",
                left=errors,
                right=comparison,
                args_=(model, data, field),
            ) from None
        return errors

    raise AssertionFailure(
        f"{model.__name__} accepted the data",
        left=dict(data),
        right=field,
        args_=(model, data, field),
    )

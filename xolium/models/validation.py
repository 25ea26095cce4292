"""Schema validation helpers.

Inputs that fail validation raise InvalidInputError; payloads from the
remote service that fail validation raise ContractMismatchError.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from xolium.errors import ContractMismatchError, InvalidInputError, validation_issues

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(model: type[ModelT], data: Any, message: str) -> ModelT:
    """Validate caller-supplied data, passing model instances through."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(message, {"issues": validation_issues(e)}) from e


def parse_response(model: type[ModelT], data: Any, message: str) -> ModelT:
    """Validate a remote payload."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ContractMismatchError(message, {"issues": validation_issues(e)}) from e


__all__ = ["parse_input", "parse_response"]

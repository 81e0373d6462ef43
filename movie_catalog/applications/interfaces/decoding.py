"""Request body decoding.

Turns raw request bytes into a pydantic model and reports every structural
problem (bad JSON, unknown keys, wrong types, bad runtimes) as a
``FormatError`` carrying a client-facing description. Semantic checks are
left to validation.
"""

from typing import Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from movie_catalog.domain.exceptions import FormatError

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_BODY_BYTES = 1_048_576

BODY_TOO_LARGE = f"body must not be larger than {MAX_BODY_BYTES} bytes"


def _field_path(error: ErrorDetails) -> str:
    return ".".join(str(part) for part in error["loc"])


def describe_error(error: ErrorDetails) -> str:
    kind = error["type"]

    if kind == "json_invalid":
        return "body contains badly-formed JSON"
    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return "body must contain a JSON object"
    if kind == "extra_forbidden":
        return f'body contains unknown key "{_field_path(error)}"'
    if kind == "value_error":
        # raised by field validators such as the runtime decoder
        return str(error.get("ctx", {}).get("error", error["msg"]))
    return f'body contains incorrect JSON type for field "{_field_path(error)}"'


def decode_body(raw: bytes, model: Type[ModelT]) -> ModelT:
    if not raw or not raw.strip():
        raise FormatError("body must not be empty")
    if len(raw) > MAX_BODY_BYTES:
        raise FormatError(BODY_TOO_LARGE)

    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        # the first problem wins; the whole document is rejected
        raise FormatError(describe_error(e.errors()[0])) from e

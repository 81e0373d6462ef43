"""Wire form of a movie runtime.

Runtimes are stored as a plain count of minutes and travel over JSON as
``"<minutes> mins"``. A zero runtime means "unknown" and is left out of
responses entirely.
"""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

from movie_catalog.domain.exceptions import FormatError

RUNTIME_UNIT = "mins"

INVALID_RUNTIME_FORMAT = "invalid runtime format"

# the runtime column is a 32-bit integer
MAX_RUNTIME = 2_147_483_647


def encode_runtime(minutes: int) -> Optional[str]:
    if minutes == 0:
        return None
    return f"{minutes} {RUNTIME_UNIT}"


def decode_runtime(value: Any) -> int:
    if not isinstance(value, str):
        raise FormatError(INVALID_RUNTIME_FORMAT)

    parts = value.split()
    if len(parts) != 2 or parts[1] != RUNTIME_UNIT:
        raise FormatError(INVALID_RUNTIME_FORMAT)

    digits = parts[0]
    # str.isdigit() also accepts superscripts and other unicode digits
    if not digits.isascii() or not digits.isdigit():
        raise FormatError(INVALID_RUNTIME_FORMAT)

    minutes = int(digits)
    if minutes > MAX_RUNTIME:
        raise FormatError(INVALID_RUNTIME_FORMAT)
    return minutes


def _validate_runtime(value: Any) -> int:
    try:
        return decode_runtime(value)
    except FormatError as e:
        raise ValueError(str(e)) from e


Runtime = Annotated[int, BeforeValidator(_validate_runtime)]

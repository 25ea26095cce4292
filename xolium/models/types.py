"""Shared type definitions for Xolium wire models.

Numeric and boolean fields are strict: strings such as "10" and booleans
standing in for numbers (or numbers for booleans) are rejected rather than
coerced. Amounts carried as decimal strings use DigitString.
"""

from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, Field, StrictInt

# Base58 alphabet (no 0, O, I, l)
BASE58_PATTERN = r"^[1-9A-HJ-NP-Za-km-z]{32,44}$"


def validate_digit_string(value: Any) -> str:
    """Validate an unsigned integer amount carried as a decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        The amount as a decimal string

    Raises:
        ValueError: If value is negative, a bool, or not made of digits only
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be a decimal string, got bool")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Amount cannot be negative: {value}")
        return str(value)
    if not isinstance(value, str):
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"Amount must be a decimal integer string: '{value}'")
    return value


def validate_number(value: Any) -> float:
    """Accept an int or float (not bool, not str) as a float."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"Expected a number, got {type(value).__name__}")
    return float(value)


def validate_opt_in(value: Any) -> Any:
    """Only a real boolean may express consent."""
    if not isinstance(value, bool):
        raise ValueError(f"Opt-in must be a boolean, got {type(value).__name__}")
    return value


# Solana-style mint / public key (base58, 32-44 chars)
MintAddress = Annotated[str, Field(pattern=BASE58_PATTERN)]

# Unsigned integer amount as decimal string (validated)
DigitString = Annotated[
    str,
    BeforeValidator(validate_digit_string),
    Field(description="Unsigned integer amount as decimal string"),
]

# Real-valued amount (e.g. USD); constraints go on the field
Number = Annotated[float, BeforeValidator(validate_number)]

# Basis points in [0, 10_000]
Bps = Annotated[StrictInt, Field(ge=0, le=10_000)]

# Millisecond timestamp
TimestampMs = Annotated[StrictInt, Field(ge=0)]

NonEmptyStr = Annotated[str, Field(min_length=1)]

# Explicit consent flag: must be the boolean True
ExplicitOptIn = Annotated[Literal[True], BeforeValidator(validate_opt_in)]

__all__ = [
    "BASE58_PATTERN",
    "Bps",
    "DigitString",
    "ExplicitOptIn",
    "MintAddress",
    "NonEmptyStr",
    "Number",
    "TimestampMs",
    "validate_digit_string",
    "validate_number",
    "validate_opt_in",
]

"""
Primitive shape validators used by the configuration loader.

These only check types. Values are handed to Maven unchanged, so ranges and
formats are left for Maven itself to reject.
"""

from typing import Any, List, Optional, Tuple, Union

from .exceptions import ValidationError


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """
    Validate that a value is a boolean.

    Raises:
        ValidationError: If the value is not ``True`` or ``False``
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a string.

    Raises:
        ValidationError: If the value is not a string
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_string_list(value: Any, field_name: str = "value") -> Tuple[str, ...]:
    """
    Validate a list of strings, returning it as a tuple.

    A single string is accepted and treated as a one-element list.

    Raises:
        ValidationError: If the value is not a string or a list of strings
    """
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValidationError(
            f"{field_name} must be a list of strings, got {value!r}",
            field_name=field_name,
            value=value
        )
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ValidationError(
                f"{field_name}[{i}] must be a string, got {item!r}",
                field_name=field_name,
                value=value
            )
    return tuple(value)


def validate_thread_count(value: Any, field_name: str = "threads") -> Union[int, float, str]:
    """
    Validate the shape of a thread count.

    Maven accepts plain counts (``4``) as well as core multipliers (``"1.5C"``),
    so integers, floats and strings are all allowed. Booleans are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(
            f"{field_name} must be a number or a string, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        valid_choices: List of valid choices
        field_name: Name of the field being validated
        case_sensitive: Whether comparison should be case sensitive

    Returns:
        The matching choice as spelled in ``valid_choices``

    Raises:
        ValidationError: If value is not in valid choices
    """
    str_value = str(value)

    if case_sensitive:
        if str_value in valid_choices:
            return str_value
    else:
        for choice in valid_choices:
            if str_value.lower() == choice.lower():
                return choice

    raise ValidationError(
        f"{field_name} must be one of {valid_choices}, got '{str_value}'",
        field_name=field_name,
        value=value
    )


def validate_define(value: str, field_name: str = "define") -> Tuple[str, str]:
    """
    Split a ``key=value`` define into its parts.

    A define without ``=`` maps to an empty value, mirroring ``-Dkey`` on
    the Maven command line.

    Raises:
        ValidationError: If the key is empty
    """
    key, _, define_value = value.partition("=")
    if not key:
        raise ValidationError(
            f"{field_name} must look like key=value, got '{value}'",
            field_name=field_name,
            value=value
        )
    return key, define_value


def parse_comma_list(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated CLI value, dropping empty entries."""
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())

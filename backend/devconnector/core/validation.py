"""
Field presence and format checks for request bodies.

Request schemas keep their fields optional so a missing field produces the
route's own message (``Status is required``) instead of a generic pydantic
error. Each route declares a list of ``FieldCheck`` and calls
``validate_fields``; every failing check is reported at once.
"""
from typing import Any, Callable, Iterable, Mapping, NamedTuple, Dict, List

from email_validator import validate_email, EmailNotValidError

from devconnector.core.exceptions import ValidationError


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, dict)):
        return bool(value)
    return True


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def min_length(length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= length
    return check


class FieldCheck(NamedTuple):
    field: str
    message: str
    predicate: Callable[[Any], bool] = is_present


def collect_errors(payload: Mapping[str, Any], checks: Iterable[FieldCheck]) -> List[Dict[str, Any]]:
    errors = []
    for check in checks:
        value = payload.get(check.field)
        if not check.predicate(value):
            errors.append({
                "msg": check.message,
                "param": check.field,
                "location": "body",
            })
    return errors


def validate_fields(payload: Mapping[str, Any], checks: Iterable[FieldCheck]) -> None:
    """Raise ValidationError listing every failed check"""
    errors = collect_errors(payload, checks)
    if errors:
        raise ValidationError(errors)

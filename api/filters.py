"""Translate raw query-string parameters into an EmployeeFilter.

Usage:
    from api.filters import parse_employee_filter

    f = parse_employee_filter({"fio": "Smith", "limit": "10"})

Unrecognized keys are ignored.  Recognized keys are checked in the order of
_PARSERS and the first malformed one raises FilterError naming the field.
"""

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from api.errors import FilterError
from api.models import EmployeeFilter, SortOrder

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_unsigned(value: str) -> int:
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid unsigned integer {value!r}")
    number = int(value)
    if number > UINT64_MAX:
        raise ValueError(f"value out of range {value!r}")
    return number


def parse_signed(value: str) -> int:
    if not _SIGNED_RE.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"value out of range {value!r}")
    return number


def parse_sort_order(value: str) -> SortOrder:
    try:
        return SortOrder(value)
    except ValueError:
        raise ValueError(f"wrong order {value!r}") from None


def _as_is(value: str) -> str:
    return value


# query parameter -> (EmployeeFilter field, value parser)
_PARSERS: Mapping[str, tuple[str, Callable[[str], Any]]] = MappingProxyType({
    "limit": ("limit", parse_unsigned),
    "offset": ("offset", parse_unsigned),
    "fio": ("fio", _as_is),
    "employee_id": ("employee_id", parse_signed),
    "assignment_id": ("assignment_id", parse_signed),
    "job_name": ("job_name", _as_is),
    "date_from_sort": ("date_from_sort", parse_sort_order),
    "salary_sort": ("salary_sort", parse_sort_order),
})


def parse_employee_filter(params: Mapping[str, str]) -> EmployeeFilter:
    """
    Build an EmployeeFilter from single-valued query parameters.

    Args:
        params: Mapping of parameter name to its (first) raw value

    Returns:
        EmployeeFilter with a field set for every recognized key present

    Raises:
        FilterError: If a recognized key holds a value of the wrong shape
    """
    fields: dict[str, Any] = {}
    for key, (field, parse) in _PARSERS.items():
        if key not in params:
            continue
        try:
            fields[field] = parse(params[key])
        except ValueError as exc:
            raise FilterError(key, str(exc)) from exc
    return EmployeeFilter(**fields)

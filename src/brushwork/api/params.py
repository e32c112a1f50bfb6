"""Build filter requests from comma-separated query parameters."""

from __future__ import annotations

from brushwork.domain.errors import InvalidRequestError
from brushwork.domain.filtering import FilterRequest
from brushwork.domain.model import MatchMode


def split_names(value: str | None) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def split_months(value: str | None) -> frozenset[int]:
    try:
        return frozenset(int(part) for part in split_names(value))
    except ValueError:
        raise InvalidRequestError(
            f"months must be a comma-separated list of integers, got {value!r}"
        ) from None


def filter_request_from_params(
    *,
    months: str | None = None,
    tags: str | None = None,
    materials: str | None = None,
    mode: str | None = None,
) -> FilterRequest:
    return FilterRequest(
        months=split_months(months),
        tags=split_names(tags),
        materials=split_names(materials),
        mode=mode if mode is not None else MatchMode.ALL.value,
    )

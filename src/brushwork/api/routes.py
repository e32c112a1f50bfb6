"""Catalog query endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from brushwork.app import UnitOfWorkFactory, filter_episodes, list_vocabulary
from brushwork.domain.model import VocabularyKind

from .params import filter_request_from_params
from .schema import EpisodeResponse, ErrorResponse

router = APIRouter()


def get_unit_of_work_factory(request: Request) -> UnitOfWorkFactory:
    return request.app.state.unit_of_work_factory


UnitOfWorkDep = Annotated[UnitOfWorkFactory, Depends(get_unit_of_work_factory)]


@router.get(
    "/episodes",
    response_model=list[EpisodeResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_episodes(
    unit_of_work_factory: UnitOfWorkDep,
    months: Annotated[str | None, Query(description="Comma-separated month numbers")] = None,
    tags: Annotated[str | None, Query(description="Comma-separated tag names")] = None,
    materials: Annotated[str | None, Query(description="Comma-separated material names")] = None,
    mode: Annotated[str, Query(description="'all' or 'any'")] = "all",
) -> list[EpisodeResponse]:
    """Filter episodes by broadcast month, tags and materials."""
    request = filter_request_from_params(months=months, tags=tags, materials=materials, mode=mode)
    episodes = filter_episodes(request, unit_of_work_factory=unit_of_work_factory)
    return [EpisodeResponse.from_view(episode) for episode in episodes]


@router.get("/materials", response_model=list[str])
def get_materials(unit_of_work_factory: UnitOfWorkDep) -> list[str]:
    return list_vocabulary(VocabularyKind.MATERIAL, unit_of_work_factory=unit_of_work_factory)


@router.get("/tags", response_model=list[str])
def get_tags(unit_of_work_factory: UnitOfWorkDep) -> list[str]:
    return list_vocabulary(VocabularyKind.TAG, unit_of_work_factory=unit_of_work_factory)

"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from brushwork.adapters.sources import (
    read_csv_rows,
    read_date_lines,
    translate_date_lines,
    translate_material_rows,
    translate_tag_rows,
)
from brushwork.domain.filtering import FilterRequest, build_query_plan
from brushwork.domain.model import Diagnostic, DiagnosticKind, VocabularyKind
from brushwork.domain.ports.unit_of_work import CatalogUnitOfWork
from brushwork.domain.reconciliation import (
    PersistenceResult,
    ReconciliationResult,
    persist_catalog,
    reconcile,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from brushwork.config import SourceConfig
    from brushwork.domain.model import EpisodeView

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class CatalogLoadResult:
    """Outcome of one batch load."""

    merged: int
    persistence: PersistenceResult
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    def count(self, kind: DiagnosticKind) -> int:
        return sum(1 for diagnostic in self.diagnostics if diagnostic.kind is kind)


def reconcile_sources(
    *,
    date_lines: Iterable[str],
    material_rows: Iterable[Mapping[str, str]],
    tag_rows: Iterable[Mapping[str, str]],
) -> ReconciliationResult:
    """Validate raw rows into records and merge them; diagnostics from both stages are kept."""

    dates = translate_date_lines(date_lines)
    materials = translate_material_rows(material_rows)
    tags = translate_tag_rows(tag_rows)
    log.info(
        "Extracted %s date records, %s material records, %s tag records",
        len(dates.records),
        len(materials.records),
        len(tags.records),
    )
    result = reconcile(materials=materials.records, dates=dates.records, tags=tags.records)
    result.diagnostics[:0] = [
        *materials.diagnostics,
        *dates.diagnostics,
        *tags.diagnostics,
    ]
    return result


def load_catalog(
    sources: SourceConfig,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> CatalogLoadResult:
    """Read the three source files, reconcile them and persist the result in one transaction."""

    log.info(
        "Starting catalog load: dates=%s, materials=%s, tags=%s",
        sources.dates_path,
        sources.materials_path,
        sources.tags_path,
    )
    merged = reconcile_sources(
        date_lines=read_date_lines(sources.dates_path),
        material_rows=read_csv_rows(sources.materials_path),
        tag_rows=read_csv_rows(sources.tags_path),
    )
    persistence = persist_catalog(merged.episodes, unit_of_work_factory=unit_of_work_factory)
    result = CatalogLoadResult(
        merged=len(merged.episodes),
        persistence=persistence,
        diagnostics=merged.diagnostics,
    )
    log.info(
        f"Finished catalog load: merged={result.merged}, "
        f"written={persistence.episodes_written}, skipped={persistence.episodes_skipped}, "
        f"malformed={result.count(DiagnosticKind.MALFORMED_RECORD)}, "
        f"orphans={result.count(DiagnosticKind.ORPHAN_RECORD)}"
    )
    return result


def filter_episodes(
    request: FilterRequest,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> list[EpisodeView]:
    """Return persisted episodes matching ``request``.

    The request is validated before any storage access.
    """

    plan = build_query_plan(request)
    with unit_of_work_factory() as uow:
        return uow.repositories.queries.filter(plan)


def list_vocabulary(
    kind: VocabularyKind,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> list[str]:
    with unit_of_work_factory() as uow:
        return uow.repositories.vocabularies.names(kind)

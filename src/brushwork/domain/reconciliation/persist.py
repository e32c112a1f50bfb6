"""Write a reconciled batch through a unit of work.

Everything happens in one transaction: vocabularies are upserted, the previous
episode rows are replaced, and links are created. A storage failure anywhere
rolls the whole batch back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from brushwork.domain.model import VocabularyKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from brushwork.domain.model import Episode
    from brushwork.domain.ports import CatalogUnitOfWork

log = logging.getLogger(__name__)


@dataclass(slots=True)
class PersistenceResult:
    """Summary of persisted changes for one batch."""

    committed: bool
    episodes_written: int = 0
    episodes_skipped: int = 0
    materials: int = 0
    tags: int = 0
    links: int = 0


def collect_vocabulary(episodes: Iterable[Episode], kind: VocabularyKind) -> list[str]:
    names: set[str] = set()
    for episode in episodes:
        names.update(episode.materials if kind is VocabularyKind.MATERIAL else episode.tags)
    return sorted(names)


def persist_catalog(
    episodes: Iterable[Episode],
    *,
    unit_of_work_factory: Callable[[], CatalogUnitOfWork],
) -> PersistenceResult:
    """Persist ``episodes``; entities without a broadcast date are skipped."""

    episodes = list(episodes)
    dated = [episode for episode in episodes if episode.is_dated]
    result = PersistenceResult(committed=False, episodes_skipped=len(episodes) - len(dated))
    if result.episodes_skipped:
        log.info("Skipping %s episodes without a broadcast date", result.episodes_skipped)

    with unit_of_work_factory() as uow:
        vocabularies = uow.repositories.vocabularies
        repository = uow.repositories.episodes

        ids: dict[VocabularyKind, dict[str, int]] = {}
        for kind in VocabularyKind:
            names = collect_vocabulary(episodes, kind)
            for name in names:
                vocabularies.upsert(kind, name)
            ids[kind] = vocabularies.ids_by_name(kind)
            log.info("%s vocabulary populated with %s names", kind.value.title(), len(names))
        result.materials = len(ids[VocabularyKind.MATERIAL])
        result.tags = len(ids[VocabularyKind.TAG])

        removed = repository.clear()
        if removed:
            log.info("Replacing %s previously loaded episodes", removed)

        for episode in dated:
            episode_id = repository.insert(episode)
            result.episodes_written += 1
            for kind, names in (
                (VocabularyKind.MATERIAL, episode.materials),
                (VocabularyKind.TAG, episode.tags),
            ):
                for name in sorted(names):
                    vocabulary_id = ids[kind].get(name)
                    if vocabulary_id is None:
                        continue
                    repository.link(episode_id, vocabulary_id, kind)
                    result.links += 1

        uow.commit()
        result.committed = True

    log.info(
        "Persisted %s episodes with %s links", result.episodes_written, result.links
    )
    return result

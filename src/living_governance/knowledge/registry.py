"""Registry of authored knowledge objects and their archived snapshots."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from living_governance.exceptions import KnowledgeKindError, UnknownKnowledgeError
from living_governance.knowledge.models import KnowledgeObject
from living_governance.knowledge.threat_models import ThreatsKnowledge

if TYPE_CHECKING:
    from collections.abc import Mapping

    from living_governance.knowledge.models import ArchivedSnapshot

AnyKnowledge = KnowledgeObject | ThreatsKnowledge


class KnowledgeRegistry:
    """Resolve knowledge objects by registry name or knowledge id.

    Entries are either framework-coverage objects or threat catalogs;
    :meth:`coverage` and :meth:`threats` resolve a name and check its kind.
    """

    def __init__(
        self,
        entries: Mapping[str, AnyKnowledge],
        archives: Mapping[str, tuple[ArchivedSnapshot, ...]] | None = None,
    ) -> None:
        self._entries = {self._normalize(name): item for name, item in entries.items()}
        self._archives = {
            self._normalize(name): tuple(items)
            for name, items in (archives or {}).items()
        }

    def get(self, name_or_id: str) -> AnyKnowledge:
        """Look up a knowledge object by registry name, falling back to its id.

        Raises:
            UnknownKnowledgeError: If nothing matches.
        """
        key = self._normalize(name_or_id)
        if key in self._entries:
            return self._entries[key]
        for item in self._entries.values():
            if item.id.lower() == key:
                return item
        known = ", ".join(self.names()) or "none"
        msg = f"Unknown knowledge {name_or_id!r} (known: {known})"
        raise UnknownKnowledgeError(msg)

    def coverage(self, name_or_id: str) -> KnowledgeObject:
        """Like :meth:`get`, for framework-coverage knowledge only.

        Raises:
            UnknownKnowledgeError: If nothing matches.
            KnowledgeKindError: If the match is a threat catalog.
        """
        item = self.get(name_or_id)
        if not isinstance(item, KnowledgeObject):
            msg = f"{name_or_id!r} is a threat catalog, not framework coverage"
            raise KnowledgeKindError(msg)
        return item

    def threats(self, name_or_id: str) -> ThreatsKnowledge:
        """Like :meth:`get`, for threat catalogs only.

        Raises:
            UnknownKnowledgeError: If nothing matches.
            KnowledgeKindError: If the match is framework coverage.
        """
        item = self.get(name_or_id)
        if not isinstance(item, ThreatsKnowledge):
            msg = f"{name_or_id!r} is framework coverage, not a threat catalog"
            raise KnowledgeKindError(msg)
        return item

    def names(self) -> list[str]:
        return sorted(self._entries)

    def all(self) -> list[AnyKnowledge]:
        return [self._entries[name] for name in self.names()]

    def archives(self, name_or_id: str) -> tuple[ArchivedSnapshot, ...]:
        """Archived snapshots for a knowledge object, oldest first."""
        knowledge = self.get(name_or_id)
        for name, item in self._entries.items():
            if item is knowledge:
                snapshots = self._archives.get(name, ())
                return tuple(sorted(snapshots, key=lambda snap: snap.snapshot_date))
        return ()

    def _normalize(self, name: str) -> str:
        return name.strip().lower()


@functools.lru_cache(maxsize=1)
def default_registry() -> KnowledgeRegistry:
    """The registry of knowledge shipped with the package."""
    from living_governance.knowledge.archives import FRAMEWORK_COVERAGE_ARCHIVES
    from living_governance.knowledge.framework_coverage import FRAMEWORK_COVERAGE
    from living_governance.knowledge.threat_catalog import THREATS_KNOWLEDGE

    return KnowledgeRegistry(
        {"framework-coverage": FRAMEWORK_COVERAGE, "threats": THREATS_KNOWLEDGE},
        {"framework-coverage": FRAMEWORK_COVERAGE_ARCHIVES},
    )

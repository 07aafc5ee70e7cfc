"""Requirement table — which node types must declare a parent before storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import BaseModel, Field, ValidationError

from graphseed.graph.errors import TaxonomyLoadError, UnknownNodeTypeError
from graphseed.taxonomy import CHILD_TYPES, ROOT_TYPES, TAXONOMY_VERSION

logger = logging.getLogger(__name__)


class TaxonomyFile(BaseModel):
    """On-disk shape of an alternate taxonomy."""

    version: str = ""
    node_types: dict[str, bool] = Field(default_factory=dict)


class RequirementTable(Mapping[str, bool]):
    """Read-only ``node type -> requires parent`` mapping.

    Built once at startup and injected wherever validation happens. Never
    mutated after construction, so concurrent reads need no locking.
    ``with_types`` returns an extended copy instead of changing this one.
    """

    def __init__(
        self, requirements: Mapping[str, bool], version: str = TAXONOMY_VERSION,
    ) -> None:
        self._table = MappingProxyType(
            {str(node_type): bool(required) for node_type, required in requirements.items()},
        )
        self.version = version

    @classmethod
    def default(cls) -> RequirementTable:
        """The canonical table from the generated taxonomy (shared instance)."""
        return _default_table()

    @classmethod
    def from_yaml(cls, path: Path | str) -> RequirementTable:
        """Load a table from a YAML taxonomy file.

        Format::

            version: "2.1.0"
            node_types:
              host: false
              port: true
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            msg = f"cannot read taxonomy file {path}: {e}"
            raise TaxonomyLoadError(msg) from e

        if not isinstance(raw, dict):
            msg = f"taxonomy file {path} must contain a mapping"
            raise TaxonomyLoadError(msg)
        try:
            parsed = TaxonomyFile(**raw)
        except ValidationError as e:
            msg = f"invalid taxonomy file {path}: {e}"
            raise TaxonomyLoadError(msg) from e

        table = cls(parsed.node_types, version=parsed.version or TAXONOMY_VERSION)
        logger.info(
            "Loaded taxonomy %s from %s: %d node types (%d require a parent)",
            table.version, path, len(table), len(table.child_types()),
        )
        return table

    def __getitem__(self, node_type: str) -> bool:
        return self._table[node_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"RequirementTable(version={self.version!r}, types={len(self)})"

    def requires_parent(self, node_type: str) -> bool:
        """Whether ``node_type`` needs a parent. Unknown types raise."""
        try:
            return self._table[node_type]
        except KeyError:
            raise UnknownNodeTypeError(node_type) from None

    def root_types(self) -> list[str]:
        return sorted(t for t, required in self._table.items() if not required)

    def child_types(self) -> list[str]:
        return sorted(t for t, required in self._table.items() if required)

    def with_types(
        self, roots: Iterable[str] = (), children: Iterable[str] = (),
    ) -> RequirementTable:
        """Return a copy that also knows the given root and child types.

        Used to register namespaced custom kinds such as ``k8s:pod``.
        Entries given here override existing ones.
        """
        merged = dict(self._table)
        merged.update({str(t): False for t in roots})
        merged.update({str(t): True for t in children})
        return RequirementTable(merged, version=self.version)


@lru_cache(maxsize=1)
def _default_table() -> RequirementTable:
    requirements = {str(t): False for t in ROOT_TYPES}
    requirements.update({str(t): True for t in CHILD_TYPES})
    return RequirementTable(requirements)

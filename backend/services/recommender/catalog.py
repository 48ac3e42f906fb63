"""Read-only learning resource catalog.

The catalog is a set of named pools of ResourceRecord, loaded once from a
YAML file and shared by every request. Nothing here mutates after load, so
the same instance can serve concurrent requests without locking.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from models.schemas.resource import ExperienceTier, ResourceRecord
from services.recommender.exceptions import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "learning_resources.yaml"


class ResourceCatalog:
    """Immutable mapping of pool key -> ordered records, with an id index."""

    def __init__(self, pools: Mapping[str, Iterable[ResourceRecord]]) -> None:
        frozen: dict[str, tuple[ResourceRecord, ...]] = {}
        by_id: dict[str, ResourceRecord] = {}
        for key, records in pools.items():
            records = tuple(records)
            for record in records:
                if record.id in by_id:
                    raise CatalogError(f"Duplicate resource id {record.id!r} in pool {key!r}")
                by_id[record.id] = record
            frozen[key] = records
        self._pools = MappingProxyType(frozen)
        self._by_id = MappingProxyType(by_id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResourceCatalog":
        """Build a catalog from ``{"pools": {key: [record, ...]}}``."""
        raw_pools = data.get("pools") if isinstance(data, Mapping) else None
        if not isinstance(raw_pools, Mapping) or not raw_pools:
            raise CatalogError("Catalog must define a non-empty 'pools' mapping")

        pools: dict[str, list[ResourceRecord]] = {}
        for key, raw_records in raw_pools.items():
            if not isinstance(raw_records, list):
                raise CatalogError(f"Pool {key!r} must be a list of resources")
            try:
                pools[str(key)] = [ResourceRecord.model_validate(r) for r in raw_records]
            except ValidationError as e:
                raise CatalogError(f"Invalid resource in pool {key!r}: {e}") from e
        return cls(pools)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ResourceCatalog":
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        except yaml.YAMLError as e:
            raise CatalogError(f"Malformed catalog {path}: {e}") from e

        catalog = cls.from_dict(data or {})
        logger.info("Loaded %d resources in %d pools from %s", len(catalog), len(catalog.pool_keys()), path)
        return catalog

    def pool(self, key: str) -> tuple[ResourceRecord, ...]:
        try:
            return self._pools[key]
        except KeyError:
            raise CatalogError(f"Unknown resource pool: {key}") from None

    def pool_keys(self) -> list[str]:
        return list(self._pools)

    def has_pool(self, key: str) -> bool:
        return key in self._pools

    def get(self, resource_id: str) -> ResourceRecord | None:
        return self._by_id.get(resource_id)

    def tiers_covered(self, key: str) -> set[ExperienceTier]:
        """Tiers for which the pool holds at least one resource."""
        return {tier for record in self.pool(key) for tier in record.experience_levels}

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._by_id


def load_catalog(path: str | Path | None = None) -> ResourceCatalog:
    """Load the catalog from ``path``, or the packaged catalog when omitted."""
    return ResourceCatalog.from_yaml(path or DEFAULT_CATALOG_PATH)

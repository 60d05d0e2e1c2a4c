# app/domains/catalog/services/specifications.py
"""
Especificações de consulta ao catálogo.

O mesmo CatalogFilter é usado para contar e para buscar a página, pelo que
o total e os itens devolvidos referem-se sempre à mesma população.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Protocol


class _HasCatalogIds(Protocol):
    catalog_brand_id: int
    catalog_type_id: int


@dataclass(frozen=True, slots=True)
class CatalogFilter:
    brand_id: int | None = None
    type_id: int | None = None

    def matches(self, item: _HasCatalogIds) -> bool:
        """Predicado em memória, equivalente às cláusulas SQL do repositório."""
        if self.brand_id is not None and item.catalog_brand_id != self.brand_id:
            return False
        if self.type_id is not None and item.catalog_type_id != self.type_id:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PageWindow:
    skip: int
    take: int

    def __post_init__(self) -> None:
        if self.skip < 0 or self.take < 0:
            raise ValueError(f"Invalid page window skip={self.skip} take={self.take}")


@dataclass(frozen=True, slots=True)
class CatalogFilterPaginated:
    filter: CatalogFilter = field(default_factory=CatalogFilter)
    window: PageWindow = field(default_factory=lambda: PageWindow(0, 0))

    @classmethod
    def build(
        cls,
        *,
        skip: int,
        take: int,
        brand_id: int | None = None,
        type_id: int | None = None,
    ) -> CatalogFilterPaginated:
        return cls(filter=CatalogFilter(brand_id, type_id), window=PageWindow(skip, take))

    @property
    def skip(self) -> int:
        return self.window.skip

    @property
    def take(self) -> int:
        return self.window.take

# app/infra/bootstrap.py
import logging
from decimal import Decimal

from sqlalchemy import func, select

from app.models import CatalogBrand, CatalogItem, CatalogType

log = logging.getLogger("catalog.bootstrap")

_PIC = "http://catalogbaseurltobereplaced/images/products/{}.png"

SEED_BRANDS = ["Azure", ".NET", "Visual Studio", "SQL Server", "Other"]
SEED_TYPES = ["Mug", "T-Shirt", "Sheet", "USB Memory Stick"]

# (type_id, brand_id, name, description, price)
SEED_ITEMS = [
    (2, 2, ".NET Bot Black Sweatshirt", ".NET Bot Black Sweatshirt", "19.5"),
    (1, 2, ".NET Black & White Mug", ".NET Black & White Mug", "8.50"),
    (2, 5, "Prism White T-Shirt", "Prism White T-Shirt", "12"),
    (2, 2, ".NET Foundation Sweatshirt", ".NET Foundation Sweatshirt", "12"),
    (3, 5, "Roslyn Red Sheet", "Roslyn Red Sheet", "8.5"),
    (2, 2, ".NET Blue Sweatshirt", ".NET Blue Sweatshirt", "12"),
    (2, 5, "Roslyn Red T-Shirt", "Roslyn Red T-Shirt", "12"),
    (2, 5, "Kudu Purple Sweatshirt", "Kudu Purple Sweatshirt", "8.5"),
    (1, 5, "Cup<T> White Mug", "Cup<T> White Mug", "12"),
    (3, 2, ".NET Foundation Sheet", ".NET Foundation Sheet", "12"),
    (3, 2, "Cup<T> Sheet", "Cup<T> Sheet", "8.5"),
    (2, 5, "Prism White TShirt", "Prism White TShirt", "12"),
]


def ensure_catalog_seed(session_factory) -> dict[str, int]:
    """
    Popula um catálogo vazio com marcas, tipos e itens de referência.
    Se já existirem itens, não faz nada.
    Retorna contagem de registos criados.
    """
    result = {"brands": 0, "types": 0, "items": 0}

    with session_factory() as db:
        existing = db.scalar(select(func.count(CatalogItem.id))) or 0
        if existing:
            log.debug("Bootstrap: catalog already has %d items, skipping seed", existing)
            return result

        db.add_all(CatalogBrand(id=i, name=name) for i, name in enumerate(SEED_BRANDS, start=1))
        db.add_all(CatalogType(id=i, name=name) for i, name in enumerate(SEED_TYPES, start=1))
        db.flush()

        for n, (type_id, brand_id, name, description, price) in enumerate(SEED_ITEMS, start=1):
            db.add(
                CatalogItem(
                    catalog_type_id=type_id,
                    catalog_brand_id=brand_id,
                    name=name,
                    description=description,
                    price=Decimal(price),
                    picture_uri=_PIC.format(n),
                )
            )
        db.commit()

    result.update(brands=len(SEED_BRANDS), types=len(SEED_TYPES), items=len(SEED_ITEMS))
    log.info("Bootstrap: seeded catalog %s", result)
    return result

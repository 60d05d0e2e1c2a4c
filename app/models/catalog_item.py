# app/models/catalog_item.py
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infra.base import Base, utcnow


class CatalogItem(Base):
    __tablename__ = "catalog_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    # Referência da imagem tal como guardada (relativa ou com placeholder do host)
    picture_uri: Mapped[str | None] = mapped_column(Text, nullable=True)

    catalog_brand_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("catalog_brands.id"), nullable=False, index=True
    )
    catalog_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("catalog_types.id"), nullable=False, index=True
    )
    catalog_brand = relationship("CatalogBrand")
    catalog_type = relationship("CatalogType")

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

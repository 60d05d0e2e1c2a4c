# app/models/catalog_type.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infra.base import Base


class CatalogType(Base):
    __tablename__ = "catalog_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

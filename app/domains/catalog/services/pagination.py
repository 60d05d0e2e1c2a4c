# app/domains/catalog/services/pagination.py
# Aritmética de paginação offset/limit

from __future__ import annotations

from app.domains.catalog.services.specifications import PageWindow


def page_window(page_index: int, page_size: int) -> PageWindow:
    return PageWindow(skip=page_index * page_size, take=page_size)


def page_count(total_items: int, page_size: int) -> int:
    """
    Número de páginas para `total_items` com `page_size` itens por página.

    page_size == 0 significa "sem paginação": 1 página se houver itens, 0 caso contrário.
    """
    if page_size > 0:
        return (total_items + page_size - 1) // page_size
    return 1 if total_items > 0 else 0

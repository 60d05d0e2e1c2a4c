# app/domains/catalog/services/uri_composer.py
"""
Resolve as referências de imagem guardadas no catálogo para URLs públicos.

As referências podem vir em três formas:
- template com o host placeholder (http://catalogbaseurltobereplaced/images/1.png)
- URL absoluto (devolvido sem alterações)
- caminho relativo (images/1.png ou /images/1.png)
"""

from __future__ import annotations

from urllib.parse import urlsplit

CATALOG_BASE_URL_PLACEHOLDER = "http://catalogbaseurltobereplaced"


class UriComposer:
    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def compose_pic_uri(self, ref: str | None) -> str:
        if not ref:
            return ""

        if ref.startswith(CATALOG_BASE_URL_PLACEHOLDER):
            return self.base_url + ref[len(CATALOG_BASE_URL_PLACEHOLDER) :]

        parts = urlsplit(ref)
        if parts.scheme and parts.netloc:
            return ref

        return f"{self.base_url}/{ref.lstrip('/')}"

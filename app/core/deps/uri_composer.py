from app.core.config import settings
from app.domains.catalog.services.uri_composer import UriComposer


def get_uri_composer() -> UriComposer:
    return UriComposer(settings.CATALOG_BASE_URL)

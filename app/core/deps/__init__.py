from .uow import get_uow
from .uri_composer import get_uri_composer

__all__ = [
    "get_uow",
    "get_uri_composer",
]

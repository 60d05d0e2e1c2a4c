# app/core/errors.py
"""
Erros de aplicação. Cada erro sabe o seu código e o status HTTP correspondente;
o mapeamento para respostas é feito em app.core.http_errors.
"""

from __future__ import annotations


class AppError(Exception):
    code: str = "app_error"
    http_status: int = 500

    def __init__(self, detail: str | None = None, *, code: str | None = None) -> None:
        self.detail = detail or self.__class__.__name__
        if code:
            self.code = code
        super().__init__(self.detail)


class ValidationFailure(AppError):
    code = "validation_failed"
    http_status = 400


class StorageError(AppError):
    """Falha ao ler/contar registos no armazenamento."""

    code = "storage_error"
    http_status = 500


class MappingError(AppError):
    """Registo que não pode ser projetado para o schema de saída."""

    code = "mapping_error"
    http_status = 500


class RequestCancelled(AppError):
    code = "request_cancelled"
    http_status = 499

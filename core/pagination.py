"""
Utilidades de paginación para una paginación consistente en toda la aplicación.

Los repositorios reciben la ventana de resultados como un campo ``limit`` con
el par ``[skip, take]`` dentro de los filtros; estas funciones hacen la
traducción entre ese formato, el de páginas de la API y el que espera ``find``.
"""

from typing import Any, List, Optional, Tuple
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class PaginationMeta(BaseModel):
    """Metadata para la paginacion."""
    page: int = Field(..., ge=0, description="Current page number (0-indexed)")
    page_size: int = Field(..., ge=1, description="Page size")
    total_items: int = Field(..., ge=0, description="Total items available")
    total_pages: int = Field(..., ge=0, description="Total pages")
    has_next: bool = Field(..., description="Has next page")
    has_previous: bool = Field(..., description="Has previous page")


def calculate_pagination_meta(
    page: int,
    page_size: int,
    total_items: int
) -> PaginationMeta:
    """
    Calcula la metadata de la paginación.

    Args:
        page: Número de página actual (0-indexed)
        page_size: Items por página
        total_items: Total number of items

    Returns:
        paginationmeta objeto con valores calculados
    """
    total_pages = (total_items + page_size - 1) // page_size if page_size > 0 else 0

    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages - 1,
        has_previous=page > 0
    )


def create_paginated_response(
    items: List[Any],
    page: int,
    page_size: int,
    total_items: int
) -> dict:
    """
    Crea un diccionario de respuesta paginado.
    Argumentos:
    items: Lista de elementos de la página actual
    page: Número de página actual (indexado desde 0)
    page_size: Número de elementos por página
    total_items: Número total de elementos
    Devuelve:
    Diccionario con la respuesta paginada
    """
    pagination_meta = calculate_pagination_meta(page, page_size, total_items)

    return {
        "success": True,
        "data": items,
        "pagination": pagination_meta.model_dump(),
        "timestamp": datetime.now(timezone.utc)
    }


def calculate_skip(page: int, page_size: int) -> int:
    """
    Calcula el valor de skip/offset para las consultas de la base de datos.

    Args:
        page: Número de página actual (indexado desde 0)
        page_size: Número de elementos por página

    Returns:
        Número de elementos a saltar
    """
    return page * page_size


def page_to_limit(page: int, page_size: int) -> List[int]:
    """Convierte página y tamaño de página al par ``[skip, take]``."""
    return [calculate_skip(page, page_size), page_size]


def split_limit(filters: dict) -> Tuple[dict, dict]:
    """
    Separa el campo ``limit`` del resto de filtros.

    Args:
        filters: Filtros con un campo ``limit`` de la forma ``[skip, take]``

    Returns:
        Tupla (filtros sin ``limit``, paginación ``{"skip": ..., "take": ...}``)

    Raises:
        KeyError: Si los filtros no incluyen ``limit``
    """
    remaining = dict(filters)
    skip, take = remaining.pop("limit")
    return remaining, {"skip": skip, "take": take}


def pagination_window(pagination: Optional[dict]) -> Tuple[Optional[int], Optional[int]]:
    """Devuelve (skip, take) de un diccionario de paginación, None si no se indicó."""
    pagination = pagination or {}
    return pagination.get("skip"), pagination.get("take")

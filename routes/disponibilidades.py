"""
Disponibilidad routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for disponibilidad endpoints.
All business logic is delegated to the DisponibilidadService layer.
"""

from fastapi import APIRouter, HTTPException, Depends, Query, status
from typing import Optional
import logging

from models.disponibilidades import Disponibilidad, DisponibilidadCreate, DisponibilidadUpdate
from core.pagination import create_paginated_response
from core.exceptions import AppException
from services.disponibilidad_service import DisponibilidadService
from repositories.disponibilidad_repository import DisponibilidadRepository
from repositories.interconsulta_repository import InterconsultaRepository
from database.db import get_db
from sqlalchemy.orm import Session
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/disponibilidades", tags=["disponibilidades"])


# ==================== Dependency Injection ====================

def get_disponibilidad_service(db: Session = Depends(get_db)) -> DisponibilidadService:
    """Inject DisponibilidadService with its repositories."""
    return DisponibilidadService(
        DisponibilidadRepository(db),
        InterconsultaRepository(db),
    )


# ==================== Exception Handler ====================

def handle_service_exception(e: AppException) -> HTTPException:
    """Convert a classified exception to an HTTP exception using its kind."""
    if e.status_code >= 500:
        logger.error(f"{e.kind.value}: {e.message}")
    return HTTPException(status_code=e.status_code, detail=e.message)


# ==================== Endpoints ====================

@router.post("/", response_model=Disponibilidad, status_code=status.HTTP_201_CREATED)
def crear_disponibilidad(
    disponibilidad: DisponibilidadCreate,
    service: DisponibilidadService = Depends(get_disponibilidad_service),
):
    """
    Registrar una nueva franja de disponibilidad.

    Args:
        disponibilidad: Datos de la disponibilidad
        service: Injected DisponibilidadService

    Returns:
        Disponibilidad creada
    """
    try:
        return service.create_disponibilidad(disponibilidad)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error creating disponibilidad: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al crear disponibilidad"
        )


@router.get("/")
def obtener_disponibilidades(
    page: int = Query(0, ge=0, description="Número de página (0-indexed)"),
    page_size: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Tamaño de página"
    ),
    nid_interconsulta: Optional[int] = Query(None, ge=1, description="Filtrar por interconsulta"),
    disponible: Optional[bool] = Query(None, description="Filtrar por disponibilidad"),
    service: DisponibilidadService = Depends(get_disponibilidad_service),
):
    """
    List disponibilidades with pagination and filters.

    Returns:
        Paginated list of disponibilidades
    """
    try:
        items, total = service.get_disponibilidades(
            page=page,
            page_size=page_size,
            nid_interconsulta=nid_interconsulta,
            disponible=disponible,
        )
        data = [Disponibilidad.model_validate(item) for item in items]
        return create_paginated_response(data, page, page_size, total)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error listing disponibilidades: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al listar disponibilidades"
        )


@router.get("/{disponibilidad_uuid}", response_model=Disponibilidad)
def obtener_disponibilidad(
    disponibilidad_uuid: str,
    service: DisponibilidadService = Depends(get_disponibilidad_service),
):
    """Get a disponibilidad by its uuid."""
    try:
        return service.get_disponibilidad(disponibilidad_uuid)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting disponibilidad {disponibilidad_uuid}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener disponibilidad"
        )


@router.put("/{disponibilidad_uuid}", response_model=Disponibilidad)
def actualizar_disponibilidad(
    disponibilidad_uuid: str,
    disponibilidad_update: DisponibilidadUpdate,
    service: DisponibilidadService = Depends(get_disponibilidad_service),
):
    """
    Update a disponibilidad.

    Only the fields present in the request body are modified.
    """
    try:
        return service.update_disponibilidad(disponibilidad_uuid, disponibilidad_update)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error updating disponibilidad {disponibilidad_uuid}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al actualizar disponibilidad"
        )

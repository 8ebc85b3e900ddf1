from .disponibilidades import router as disponibilidades_router

__all__ = [
    "disponibilidades_router",
]

"""
API routers module.
"""
from carbon_cue.api.calculations import router as calculations_router
from carbon_cue.api.datasets import router as datasets_router
from carbon_cue.api.factors import router as factors_router
from carbon_cue.api.history import router as history_router

__all__ = [
    "calculations_router",
    "datasets_router",
    "factors_router",
    "history_router",
]

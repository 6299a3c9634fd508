# routers/admin/__init__.py
"""
Admin surface: role check only, no ownership checks.
"""
from .active_plans import router as active_plans_router
from .buildings import router as buildings_router
from .plans import router as plans_router
from .users import router as users_router
from .visitors import router as visitors_router
from .visits import router as visits_router

routers = [
     users_router,
     buildings_router,
     plans_router,
     active_plans_router,
     visitors_router,
     visits_router,
]

__all__ = ["routers"]

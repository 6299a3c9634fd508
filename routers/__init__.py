from .users import router as users_router
from .profile import router as profile_router
from .plans import router as plans_router
from .active_plans import router as active_plans_router
from .credit_transactions import router as credit_transactions_router
from .buildings import router as buildings_router
from .doormen import router as doormen_router
from .visitors import router as visitors_router
from .visits import router as visits_router
from .admin import routers as admin_routers

routers = [
     users_router,
     profile_router,
     plans_router,
     active_plans_router,
     credit_transactions_router,
     buildings_router,
     doormen_router,
     visitors_router,
     visits_router,
     *admin_routers,
]

__all__ = ["routers"]

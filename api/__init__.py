from .health import h_router
from .pull_request import pr_router
from .team import t_router
from .user import u_router


routers = [h_router, pr_router, t_router, u_router]


__all__ = ['routers', 'h_router', 'pr_router', 't_router', 'u_router']

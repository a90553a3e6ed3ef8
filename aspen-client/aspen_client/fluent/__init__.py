from .builder import AspenClient, FluentClient, IdentityStage, RoutingStage, SIGNIN_PATH
from .facade import AspenFacade

__all__ = [
    "AspenClient",
    "AspenFacade",
    "FluentClient",
    "IdentityStage",
    "RoutingStage",
    "SIGNIN_PATH",
]

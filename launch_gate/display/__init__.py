"""Display modes, host queries and resolution negotiation."""
from .catalog import DisplayModeCatalog
from .host import DisplayHost, PygameDisplayHost
from .modes import DisplayMode
from .negotiator import Negotiation, ResolutionNegotiator

__all__ = [
    "DisplayHost",
    "DisplayMode",
    "DisplayModeCatalog",
    "Negotiation",
    "PygameDisplayHost",
    "ResolutionNegotiator",
]

from .site_store import SiteStore
from .auth_gate import AuthGate, AuthResult

__all__ = [
    "SiteStore",
    "AuthGate",
    "AuthResult",
]

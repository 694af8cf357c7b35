from enotaris.features.session.service import AuthSession, is_notaris
from enotaris.features.session.store import SessionStore, StoredAuth

__all__ = ["AuthSession", "SessionStore", "StoredAuth", "is_notaris"]

from .identity import IdentityMiddleware

__all__ = ["IdentityMiddleware"]

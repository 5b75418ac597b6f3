"""
Identity middleware.

Authentication is performed upstream (reverse proxy or identity provider);
this middleware only lifts the forwarded identity headers into
``request.state.user`` for the get_user_id dependency.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ...config import AuthConfig

log = logging.getLogger(__name__)


class IdentityMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, auth_config: AuthConfig):
        super().__init__(app)
        self.auth_config = auth_config

    async def dispatch(self, request: Request, call_next):
        user_id = request.headers.get(self.auth_config.user_id_header, "").strip()
        if user_id:
            request.state.user = {
                "id": user_id,
                "name": request.headers.get(self.auth_config.user_name_header),
                "email": request.headers.get(self.auth_config.user_email_header),
            }
            log.debug("Resolved identity %s for %s %s", user_id, request.method, request.url.path)
        else:
            request.state.user = None
        return await call_next(request)

import logging
from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class CORSInterceptor(BaseHTTPMiddleware):
    """Stamps a fixed CORS header set on every response under `path_prefix`.

    Preflight (`OPTIONS`) requests on matched paths are answered here with an
    empty 204 and never reach the routes.
    """

    def __init__(self, app: ASGIApp, headers: Mapping[str, str], path_prefix: str = "/api"):
        super().__init__(app)
        self.headers = dict(headers)
        self.path_prefix = path_prefix.rstrip("/")

    def matches(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.matches(request.url.path):
            return await call_next(request)

        if request.method == "OPTIONS":
            logger.debug(f"Answering preflight for {request.url.path}")
            return Response(status_code=204, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response

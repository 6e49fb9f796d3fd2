"""Let HTML forms reach PATCH, PUT and DELETE routes.

Browsers only submit forms with GET or POST, so a POST whose query string
carries ``_method=patch|put|delete`` is dispatched with that method instead.
"""

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"PATCH", "PUT", "DELETE"})


class MethodOverrideMiddleware:
    def __init__(self, app: ASGIApp, param: str = "_method") -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            requested = query.get(self.param, [""])[0].upper()
            if requested in OVERRIDABLE_METHODS:
                scope = {**scope, "method": requested}
        await self.app(scope, receive, send)

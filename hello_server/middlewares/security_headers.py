from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from hello_server.utils.config import SecurityHeadersConfig


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Добавляет заголовки безопасности к каждому ответу сервера.
    Заголовки, уже выставленные обработчиком, не перезаписываются.
    """

    def __init__(self, app: ASGIApp, config: SecurityHeadersConfig | None = None):
        super().__init__(app)
        self.headers: dict[str, str] = (config or SecurityHeadersConfig()).as_headers()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """
        Обрабатывает запрос и дополняет ответ заголовками безопасности.

        :param request: Запрос для обработки.
        :param call_next: Следующий вызов.
        :return: Ответ на запрос.
        """
        response: Response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)

        return response

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


class GreetingEndpoint:
    """
    Описывает эндпоинт приветствия на корне сервера.
    """
    greeting: str = "Hello world!"

    def __init__(self, router: APIRouter):
        self.router: APIRouter = router
        self.router.add_api_route(
            "/",
            self.greet,
            description="Возвращает приветствие",
            methods=["GET"],
            response_class=PlainTextResponse,
            responses={
                200: {"description": "Приветствие в виде простого текста"}
            },
            tags=["greeting"]
        )

    async def greet(self) -> PlainTextResponse:
        """
        Отвечает неизменным приветствием независимо от параметров запроса.

        :return: Текстовый ответ.
        """
        return PlainTextResponse(self.greeting)

import argparse
import logging
import socket
from argparse import Namespace
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hello_server.controllers import GreetingEndpoint
from hello_server.exceptions import ListenError
from hello_server.middlewares import SecurityHeadersMiddleware
from hello_server.utils.config import AppConfig, SecurityHeadersConfig

logger: logging.Logger = logging.getLogger("hello_server")


class HelloServer:
    app: FastAPI
    cors_methods: tuple[str, ...] = ("GET", "HEAD", "PUT", "PATCH", "POST", "DELETE")

    def __init__(
        self,
        config: AppConfig,
        security_headers: Optional[SecurityHeadersConfig] = None
    ) -> None:
        self.app = FastAPI(
            docs_url=None,
            redoc_url=None,
            openapi_url=None
        )
        self.config: AppConfig = config
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=[config.frontend_url],
            allow_credentials=True,
            allow_methods=list(self.cors_methods),
            allow_headers=["*"]
        )
        # Must stay outermost, CORS preflight responses carry these headers too
        self.app.add_middleware(
            SecurityHeadersMiddleware,
            config=security_headers or SecurityHeadersConfig()
        )
        self.router: APIRouter = APIRouter()

        # Setup routes
        greeting: APIRouter = APIRouter()
        GreetingEndpoint(greeting)
        self.register_routes(greeting)

    def register_routes(self, new_router: APIRouter) -> None:
        """
        Добавляет новые эндпоинты к основному роутеру.

        :param new_router: Новый роутер для включения.
        :return: Ничего.
        """
        self.router.include_router(new_router)

    def finish_setup(self) -> None:
        """
        Завершает подготовку FastAPI сервера для работы.

        :return: Ничего.
        """
        self.app.include_router(self.router)

    @staticmethod
    def parse_launch_arguments(args: Optional[list[str]] = None) -> Namespace:
        """
        Получает параметры запуска при инициализации приложения.

        :param args: Аргументы командной строки, по умолчанию берутся из sys.argv.
        :return: Пространство имен с полученными переменными.
        """
        parser: argparse.ArgumentParser = argparse.ArgumentParser(
            prog="hello_server",
            add_help=False,
            description="HTTP сервер с единственным маршрутом приветствия"
        )
        parser.add_argument(
            '-h', '--help', action='help', default=argparse.SUPPRESS,
            help='Показывает сообщение с помощью и закрывает программу'
        )
        parser.add_argument(
            "--env-file", "-e", default=Path("./.env"), type=Path,
            dest="env_file",
            help="Устанавливает путь до файла с переменными окружения"
        )
        parser.add_argument(
            "--host", default="0.0.0.0",
            dest="host",
            help="Устанавливает адрес, на котором сервер принимает подключения"
        )

        return parser.parse_args(args)

    def bind_socket(self, host: str = "0.0.0.0") -> socket.socket:
        """
        Открывает сокет на порту из конфигурации.

        :param host: Адрес для прослушивания.
        :return: Привязанный сокет.
        :raise ListenError: Порт не является числом или занят.
        """
        try:
            port: int = int(self.config.port)

        except ValueError as err:
            raise ListenError(self.config.port, "port is not a number") from err

        sock: socket.socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))

        except (OSError, OverflowError) as err:
            sock.close()
            raise ListenError(self.config.port, str(err)) from err

        return sock

    def start(self, host: str = "0.0.0.0") -> None:
        """
        Запускает сервер и блокирует поток до его остановки.

        :param host: Адрес для прослушивания.
        :return: Ничего.
        :raise ListenError: Не удалось открыть сокет.
        """
        sock: socket.socket = self.bind_socket(host)
        logger.info("Server listening on port %s", self.config.port)

        server: uvicorn.Server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                log_level="debug" if self.config.is_development else "info",
                server_header=False
            )
        )
        try:
            server.run(sockets=[sock])

        finally:
            sock.close()

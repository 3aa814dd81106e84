from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from hello_server.utils.config.environment_mode import EnvironmentMode


class AppConfig(BaseModel):
    """
    Хранит проверенную конфигурацию приложения, прочитанную из переменных окружения.
    """
    port: str = Field(
        alias="PORT",
        min_length=1,
        description="Порт для прослушивания, проверяется как число только при открытии сокета"
    )
    frontend_url: str = Field(
        alias="FRONTEND_URL",
        min_length=1,
        description="Единственный адрес, которому разрешены CORS запросы"
    )
    environment_mode: EnvironmentMode = Field(alias="NODE_ENV")

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        return self.environment_mode is EnvironmentMode.development

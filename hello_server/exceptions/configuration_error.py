class ConfigurationError(ValueError):
    """
    Представляет ошибку проверки переменных окружения при запуске сервера.

    :param problems: Имена неверных переменных и причины, по которым они не прошли проверку.
    """
    def __init__(self, problems: dict[str, str]):
        self.problems: dict[str, str] = dict(problems)
        details: str = ", ".join(
            f"{variable}: {reason}" for variable, reason in self.problems.items()
        )
        super().__init__(f"Invalid configuration: {details}")

class ListenError(OSError):
    """
    Представляет ошибку открытия сокета на заданном порту.
    """
    def __init__(self, port: str, reason: str):
        self.port: str = port
        self.reason: str = reason
        super().__init__(f"Unable to listen on port {port!r}: {reason}")

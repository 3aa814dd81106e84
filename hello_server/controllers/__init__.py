from .greeting_endpoint import GreetingEndpoint

__all__ = (
    "GreetingEndpoint",
)

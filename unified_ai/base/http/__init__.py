"""HTTP layer: transport contract, response value, multipart payloads."""

from .client import close_all_clients, get_httpx_client
from .form_data import FormData
from .response import HttpResponse
from .transport import HttpxTransport, Transport

__all__ = [
    "Transport",
    "HttpxTransport",
    "HttpResponse",
    "FormData",
    "get_httpx_client",
    "close_all_clients",
]

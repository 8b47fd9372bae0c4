"""Client library for the Voyage AI embeddings and rerank API."""

from .client import VoyageClient
from .config import DEFAULT_BASE_URL, ClientConfig, Settings, load_settings
from .encoding import decode_embedding
from .errors import (
    APIStatusError,
    DocumentsRequiredError,
    DocumentsTooLargeError,
    InputRequiredError,
    InputTooLargeError,
    ModelRequiredError,
    QueryRequiredError,
    RequestValidationError,
    VoyageError,
)
from .logging import configure_logging
from .models import (
    EmbedRequest,
    EmbedResponse,
    EmbedResponseData,
    EncodingFormat,
    InputType,
    OutputDtype,
    RerankRequest,
    RerankResponse,
    RerankResponseData,
    Usage,
    VoyageModel,
    VoyageRerankModel,
)

__all__ = [
    "VoyageClient",
    "ClientConfig",
    "Settings",
    "load_settings",
    "DEFAULT_BASE_URL",
    "configure_logging",
    "decode_embedding",
    "EmbedRequest",
    "EmbedResponse",
    "EmbedResponseData",
    "RerankRequest",
    "RerankResponse",
    "RerankResponseData",
    "Usage",
    "VoyageModel",
    "VoyageRerankModel",
    "InputType",
    "OutputDtype",
    "EncodingFormat",
    "VoyageError",
    "RequestValidationError",
    "InputRequiredError",
    "InputTooLargeError",
    "DocumentsRequiredError",
    "DocumentsTooLargeError",
    "QueryRequiredError",
    "ModelRequiredError",
    "APIStatusError",
]

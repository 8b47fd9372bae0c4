"""Synchronous client for the Voyage embeddings and rerank API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_BASE_URL, ClientConfig, load_settings
from .errors import APIStatusError
from .models import EmbedRequest, EmbedResponse, RerankRequest, RerankResponse

logger = logging.getLogger(__name__)

EMBEDDINGS_PATH = "/v1/embeddings"
RERANK_PATH = "/v1/rerank"


class VoyageClient:
    """Thin wrapper around the Voyage HTTP API.

    Example:
        client = VoyageClient(ClientConfig(api_key="..."))
        response = client.embed(EmbedRequest(input=["I like cats"], model=VoyageModel.VOYAGE_3))
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        config = config or ClientConfig()
        settings = load_settings()
        self.api_key = config.api_key or settings.api_key
        self.base_url = (config.base_url or settings.base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = config.timeout
        self._owns_session = config.transport is None
        self._session = config.transport if config.transport is not None else requests.Session()

    @property
    def transport(self) -> requests.Session:
        return self._session

    def embed(self, request: EmbedRequest) -> EmbedResponse:
        """Generate embeddings for ``request.input``."""

        request.validate_request()
        payload = self._post(EMBEDDINGS_PATH, request.to_payload())
        response = EmbedResponse.model_validate(payload)
        logger.debug(
            "embeddings received",
            extra={"count": len(response.data), "model": response.model, "total_tokens": response.usage.total_tokens},
        )
        return response

    def rerank(self, request: RerankRequest) -> RerankResponse:
        """Rank ``request.documents`` by relevance to ``request.query``."""

        request.validate_request()
        payload = self._post(RERANK_PATH, request.to_payload())
        response = RerankResponse.model_validate(payload)
        logger.debug(
            "rerank results received",
            extra={"count": len(response.data), "model": response.model, "total_tokens": response.usage.total_tokens},
        )
        return response

    def _post(self, path: str, body: Dict[str, Any]) -> Any:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        url = f"{self.base_url}{path}"
        logger.debug("sending request", extra={"url": url})
        response = self._session.post(url, json=body, headers=headers, timeout=self.timeout)
        if not response.ok:
            raise APIStatusError.from_response(response)
        return response.json()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "VoyageClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

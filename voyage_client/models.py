"""Request and response models for the Voyage embeddings and rerank endpoints."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import (
    DocumentsRequiredError,
    DocumentsTooLargeError,
    InputRequiredError,
    InputTooLargeError,
    ModelRequiredError,
    QueryRequiredError,
)

MAX_EMBED_INPUTS = 128
MAX_RERANK_DOCUMENTS = 1000


class VoyageModel(str, Enum):
    """Embedding models."""

    # Recommended
    VOYAGE_3_LARGE = "voyage-3-large"
    VOYAGE_3 = "voyage-3"
    VOYAGE_3_LITE = "voyage-3-lite"
    VOYAGE_CODE_3 = "voyage-code-3"
    VOYAGE_FINANCE_2 = "voyage-finance-2"
    VOYAGE_LAW_2 = "voyage-law-2"
    # Older
    VOYAGE_MULTILINGUAL_2 = "voyage-multilingual-2"
    VOYAGE_LARGE_2_INSTRUCT = "voyage-large-2-instruct"
    VOYAGE_LARGE_2 = "voyage-large-2"
    VOYAGE_2 = "voyage-2"
    VOYAGE_LITE_02_INSTRUCT = "voyage-lite-02-instruct"
    VOYAGE_02 = "voyage-02"
    VOYAGE_01 = "voyage-01"
    VOYAGE_LITE_01 = "voyage-lite-01"
    VOYAGE_LITE_01_INSTRUCT = "voyage-lite-01-instruct"


class VoyageRerankModel(str, Enum):
    """Reranker models."""

    RERANK_2 = "rerank-2"
    RERANK_2_LITE = "rerank-2-lite"


class InputType(str, Enum):
    QUERY = "query"
    DOCUMENT = "document"


class OutputDtype(str, Enum):
    FLOAT = "float"
    INT8 = "int8"
    UINT8 = "uint8"
    BINARY = "binary"
    UBINARY = "ubinary"


class EncodingFormat(str, Enum):
    BASE64 = "base64"


class _RequestModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body, leaving out optional fields that are unset."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EmbedRequest(_RequestModel):
    input: List[str] = Field(
        default_factory=list,
        description="Texts to embed, at most 128 per request",
    )
    model: Union[VoyageModel, str] = Field("", description="Embedding model name")
    input_type: Optional[InputType] = Field(
        None,
        description="Set to query or document to prepend the retrieval prompt",
    )
    truncate: Optional[bool] = Field(
        None,
        alias="truncation",
        description="Truncate over-length inputs instead of failing (server default: true)",
    )
    output_dimension: Optional[int] = Field(
        None,
        gt=0,
        description="Embedding dimension; unset uses the model default",
    )
    output_dtype: Optional[OutputDtype] = Field(None, description="Embedding data type (server default: float)")
    encoding_format: Optional[EncodingFormat] = Field(
        None,
        description="Set to base64 to receive base64-encoded NumPy buffers",
    )

    def validate_request(self) -> None:
        if not self.input:
            raise InputRequiredError()
        if len(self.input) > MAX_EMBED_INPUTS:
            raise InputTooLargeError()
        if not self.model:
            raise ModelRequiredError()


class RerankRequest(_RequestModel):
    query: str = Field("", description="Query the documents are ranked against")
    documents: List[str] = Field(
        default_factory=list,
        description="Documents to rerank, at most 1000 per request",
    )
    model: Union[VoyageRerankModel, str] = Field("", description="Reranker model name")
    top_k: Optional[int] = Field(
        None,
        gt=0,
        description="Number of most relevant documents to return; unset returns all",
    )
    return_documents: bool = Field(False, description="Echo document text in each result")
    truncate: Optional[bool] = Field(
        None,
        description="Truncate query and documents to the context limit (server default: true)",
    )

    def validate_request(self) -> None:
        if not self.documents:
            raise DocumentsRequiredError()
        if len(self.documents) > MAX_RERANK_DOCUMENTS:
            raise DocumentsTooLargeError()
        if not self.query:
            raise QueryRequiredError()
        if not self.model:
            raise ModelRequiredError()


class Usage(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_tokens: int = Field(0, ge=0)


class EmbedResponseData(BaseModel):
    """A single embedding.

    ``embedding`` is a list of numbers, or a base64 string when the request
    asked for ``encoding_format=base64``. See :func:`voyage_client.encoding.decode_embedding`.
    """

    model_config = ConfigDict(frozen=True)

    object: str = "embedding"
    embedding: Union[List[float], str] = Field(default_factory=list)
    index: int = Field(0, ge=0)


class EmbedResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    object: str = "list"
    data: List[EmbedResponseData] = Field(default_factory=list)
    model: str = ""
    usage: Usage = Field(default_factory=Usage)

    @field_validator("data")
    @classmethod
    def _order_by_index(cls, value: List[EmbedResponseData]) -> List[EmbedResponseData]:
        return sorted(value, key=lambda item: item.index)

    @property
    def embeddings(self) -> List[Union[List[float], str]]:
        return [item.embedding for item in self.data]


class RerankResponseData(BaseModel):
    model_config = ConfigDict(frozen=True)

    # only filled in when return_documents was set
    document: str = ""
    relevance_score: float = 0.0
    index: int = Field(0, ge=0)

    @field_validator("document", mode="before")
    @classmethod
    def _null_document(cls, value: Any) -> Any:
        return "" if value is None else value


class RerankResponse(BaseModel):
    """Rerank results, most relevant first."""

    model_config = ConfigDict(frozen=True)

    object: str = "list"
    data: List[RerankResponseData] = Field(default_factory=list)
    model: str = ""
    usage: Usage = Field(default_factory=Usage)

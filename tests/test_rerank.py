import pytest
from pydantic import ValidationError

from voyage_client import APIStatusError, ClientConfig, RerankRequest, VoyageClient, VoyageRerankModel


def test_payload_always_sends_return_documents():
    payload = RerankRequest(query="q", documents=["d1", "d2"], model="rerank-2").to_payload()

    assert payload == {"query": "q", "documents": ["d1", "d2"], "model": "rerank-2", "return_documents": False}


def test_payload_with_optional_fields():
    request = RerankRequest(
        query="q",
        documents=["d1"],
        model=VoyageRerankModel.RERANK_2_LITE,
        top_k=3,
        return_documents=True,
        truncate=True,
    )

    assert request.to_payload() == {
        "query": "q",
        "documents": ["d1"],
        "model": "rerank-2-lite",
        "top_k": 3,
        "return_documents": True,
        "truncate": True,
    }


def test_top_k_must_be_positive():
    with pytest.raises(ValidationError):
        RerankRequest(query="q", documents=["d1"], model="rerank-2", top_k=0)


def test_rerank_end_to_end_with_documents(fake_session):
    body = {
        "object": "list",
        "data": [
            {"relevance_score": 0.91, "index": 1, "document": "d2"},
            {"relevance_score": 0.42, "index": 0, "document": "d1"},
        ],
        "model": "rerank-2",
        "usage": {"total_tokens": 12},
    }
    session = fake_session(body=body)
    client = VoyageClient(ClientConfig(api_key="test-key", transport=session))

    response = client.rerank(
        RerankRequest(query="q", documents=["d1", "d2"], model=VoyageRerankModel.RERANK_2, return_documents=True)
    )

    call = session.calls[0]
    assert call["url"] == "https://api.voyageai.com/v1/rerank"
    assert call["headers"]["Authorization"] == "Bearer test-key"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["json"]["return_documents"] is True

    assert response.model == "rerank-2"
    assert response.usage.total_tokens == 12
    # server order (by relevance) is kept
    assert [item.index for item in response.data] == [1, 0]
    assert [item.document for item in response.data] == ["d2", "d1"]
    assert response.data[0].relevance_score == pytest.approx(0.91)


def test_rerank_without_documents_leaves_text_empty(fake_session):
    body = {
        "object": "list",
        "data": [{"relevance_score": 0.5, "index": 0}, {"relevance_score": 0.1, "index": 1, "document": None}],
        "model": "rerank-2",
        "usage": {"total_tokens": 4},
    }
    client = VoyageClient(ClientConfig(api_key="k", transport=fake_session(body=body)))

    response = client.rerank(RerankRequest(query="q", documents=["d1", "d2"], model="rerank-2"))

    assert [item.document for item in response.data] == ["", ""]


def test_rerank_raises_status_error(fake_session):
    session = fake_session(status_code=400, body={"detail": "top_k must be less than documents"})
    client = VoyageClient(ClientConfig(api_key="k", transport=session))

    with pytest.raises(APIStatusError) as excinfo:
        client.rerank(RerankRequest(query="q", documents=["d1"], model="rerank-2", top_k=5))

    assert excinfo.value.status_code == 400
    assert "top_k" in str(excinfo.value)

import pytest


async def test_healthcheck(http_client):
    response = await http_client.get("/rpc/healthcheck")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_create_user_and_duplicate(http_client):
    payload = {"email": "new@example.com", "name": "New User"}
    created = await http_client.post("/rpc/createUser", json=payload)
    assert created.status_code == 200
    assert created.json()["email"] == "new@example.com"

    duplicate = await http_client.post("/rpc/createUser", json=payload)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "CONFLICT"


async def test_validation_error_is_structured(http_client):
    response = await http_client.post("/rpc/createUser", json={"email": "broken", "name": ""})
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)


async def test_document_lifecycle(http_client, user):
    created = await http_client.post("/rpc/createDocument", json={"title": "Draft", "user_id": user.id})
    assert created.status_code == 200
    document = created.json()
    assert document["content"] == ""

    listed = await http_client.post("/rpc/getDocuments", json={"user_id": user.id})
    assert [item["id"] for item in listed.json()] == [document["id"]]

    updated = await http_client.post("/rpc/updateDocument", json={"id": document["id"], "content": "<p>Body</p>"})
    assert updated.json()["title"] == "Draft"
    assert updated.json()["content"] == "<p>Body</p>"

    fetched = await http_client.post("/rpc/getDocument", json={"id": document["id"], "user_id": user.id})
    assert fetched.json()["content"] == "<p>Body</p>"

    deleted = await http_client.post("/rpc/deleteDocument", json={"id": document["id"], "user_id": user.id})
    assert deleted.json() is True

    gone = await http_client.post("/rpc/getDocument", json={"id": document["id"], "user_id": user.id})
    assert gone.status_code == 200
    assert gone.json() is None


async def test_create_document_for_unknown_user(http_client):
    response = await http_client.post("/rpc/createDocument", json={"title": "Draft", "user_id": 999999})
    assert response.status_code == 404
    assert response.json() == {"error": "NOT_FOUND", "message": "User not found"}


async def test_update_missing_document_returns_null(http_client):
    response = await http_client.post("/rpc/updateDocument", json={"id": 99999, "title": "Ghost"})
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.parametrize("payload", [
    {"user_id": 1, "limit": 0},
    {"user_id": 1, "limit": 500},
    {"user_id": 1, "offset": -5},
    {"limit": 10},
])
async def test_get_documents_rejects_bad_input(http_client, payload):
    response = await http_client.post("/rpc/getDocuments", json=payload)
    assert response.status_code == 422


async def test_sources_procedures(http_client, document):
    created = await http_client.post("/rpc/createSource", json={
        "document_id": document.id,
        "title": "Article",
        "content": "Body",
        "source_type": "url",
        "source_url": "https://example.com/a",
    })
    assert created.status_code == 200
    source = created.json()
    assert source["source_url"] == "https://example.com/a"

    listed = await http_client.post("/rpc/getSources", json={"document_id": document.id})
    assert [item["id"] for item in listed.json()] == [source["id"]]

    wrong = await http_client.post("/rpc/deleteSource", json={"id": source["id"], "document_id": document.id + 1})
    assert wrong.json() is False

    deleted = await http_client.post("/rpc/deleteSource", json={"id": source["id"], "document_id": document.id})
    assert deleted.json() is True


async def test_get_sources_unknown_document(http_client):
    response = await http_client.post("/rpc/getSources", json={"document_id": 99999})
    assert response.status_code == 404
    assert response.json()["message"] == "Document not found"


async def test_create_source_rejects_bad_type(http_client, document):
    response = await http_client.post("/rpc/createSource", json={
        "document_id": document.id, "title": "T", "content": "C", "source_type": "video"
    })
    assert response.status_code == 422


async def test_ai_procedures(http_client, document):
    requested = await http_client.post("/rpc/requestAiAssistance", json={
        "document_id": document.id,
        "prompt": "Summarize this",
        "assistance_type": "summarize",
    })
    assert requested.status_code == 200
    body = requested.json()
    assert body["assistance_type"] == "summarize"
    assert "Test Document" in body["response_content"]

    history = await http_client.post("/rpc/getAiResponses", json={"id": document.id, "user_id": document.user_id})
    assert [item["id"] for item in history.json()] == [body["id"]]


async def test_ai_request_for_unknown_document(http_client):
    response = await http_client.post("/rpc/requestAiAssistance", json={
        "document_id": 99999, "prompt": "Write", "assistance_type": "write"
    })
    assert response.status_code == 404
    assert "Document not found" in response.json()["message"]


async def test_ai_request_requires_prompt(http_client, document):
    response = await http_client.post("/rpc/requestAiAssistance", json={
        "document_id": document.id, "prompt": "", "assistance_type": "write"
    })
    assert response.status_code == 422

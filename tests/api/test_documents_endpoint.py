"""
Test suite for the federal document API endpoints.

Tests GET /api/details and PUT /api/details/{doc_id}/relevant with a mocked
DocumentService.

System role: Verification of document browser HTTP API
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from regchat.api.deps import get_document_service
from regchat.api.main import create_app
from regchat.core.exceptions import DocumentNotFoundError, InvalidRequestError
from regchat.models.document import DocumentMetadata, RelevanceUpdateResponse


@pytest.fixture
def mock_document_service() -> MagicMock:
    service = MagicMock()
    service.list_documents = AsyncMock(
        return_value=[
            DocumentMetadata(
                doc_id="EPA-2024-001",
                title="NESHAP: Coke Ovens",
                agency_id="EPA",
                document_type="Rule",
                posted_date=date(2024, 3, 1),
                open_for_comment=True,
            )
        ]
    )
    service.update_relevance = AsyncMock(
        return_value=RelevanceUpdateResponse(doc_id="EPA-2024-001", relevant=True)
    )
    return service


@pytest.fixture
def app(mock_document_service) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestListDocuments:
    """Test GET /api/details."""

    def test_list(self, client, mock_document_service):
        response = client.get("/api/details")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["doc_id"] == "EPA-2024-001"
        assert data[0]["agencyId"] == "EPA"
        assert data[0]["postedDate"] == "2024-03-01"
        assert data[0]["openForComment"] is True
        mock_document_service.list_documents.assert_awaited_once_with(limit=None, offset=0)

    def test_pagination_params(self, client, mock_document_service):
        client.get("/api/details?limit=10&offset=20")

        mock_document_service.list_documents.assert_awaited_once_with(limit=10, offset=20)


class TestUpdateRelevance:
    """Test PUT /api/details/{doc_id}/relevant."""

    def test_success(self, client, mock_document_service):
        response = client.put("/api/details/EPA-2024-001/relevant", json={"relevant": True})

        assert response.status_code == 200
        assert response.json() == {"doc_id": "EPA-2024-001", "relevant": True}
        mock_document_service.update_relevance.assert_awaited_once_with("EPA-2024-001", True)

    def test_non_boolean_passed_through(self, client, mock_document_service):
        """Test the raw value reaches the service, which owns the boolean check."""
        mock_document_service.update_relevance.side_effect = InvalidRequestError(
            "Invalid relevant status", field="relevant"
        )

        response = client.put("/api/details/EPA-2024-001/relevant", json={"relevant": "yes"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid relevant status"
        mock_document_service.update_relevance.assert_awaited_once_with("EPA-2024-001", "yes")

    def test_not_found(self, client, mock_document_service):
        mock_document_service.update_relevance.side_effect = DocumentNotFoundError("NOPE-1")

        response = client.put("/api/details/NOPE-1/relevant", json={"relevant": False})

        assert response.status_code == 404
        assert response.json()["error"] == "Document not found"

    def test_unexpected_error(self, client, mock_document_service):
        mock_document_service.update_relevance.side_effect = RuntimeError("db gone")

        response = client.put("/api/details/EPA-2024-001/relevant", json={"relevant": False})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to process document request"

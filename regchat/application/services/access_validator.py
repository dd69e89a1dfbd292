"""
Document access validation.

Answers whether a caller may query a document. The rule today is existence
only: any authenticated user may chat about any document that exists. The
user id is accepted so a per-user entitlement check can slot in here without
changing callers.

Dependencies: sqlalchemy, regchat.boundary.db
System role: Access Validator
"""

import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from regchat.boundary.db.CRUD.federal_document_crud import federal_document_crud
from regchat.models.common import ErrorInfo

logger = logging.getLogger(__name__)

DOCUMENT_NOT_FOUND = "document_not_found"
VALIDATION_FAILED = "validation_failed"


class AccessDecision(BaseModel):
    """Result of an access check."""

    valid: bool
    error: ErrorInfo | None = None


class DocumentAccessValidator:
    """Existence-based document access validator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize validator.

        Args:
            db: AsyncSession for document lookups
        """
        self.db = db

    async def validate(self, user_id: str, document_id: str) -> AccessDecision:
        """
        Check whether a user may query a document.

        Args:
            user_id: Authenticated caller
            document_id: Federal document id

        Returns:
            AccessDecision: valid=True, or valid=False with an error code of
            DOCUMENT_NOT_FOUND or VALIDATION_FAILED
        """
        try:
            found = await federal_document_crud.exists(self.db, document_id)
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:validate - Lookup failed: {type(e).__name__}: {e}",
                extra={"user_id": user_id, "document_id": document_id},
            )
            return AccessDecision(
                valid=False,
                error=ErrorInfo(
                    message="Document access validation failed",
                    code=VALIDATION_FAILED,
                    details=str(e),
                ),
            )

        if not found:
            return AccessDecision(
                valid=False,
                error=ErrorInfo(message="Document not found", code=DOCUMENT_NOT_FOUND),
            )

        return AccessDecision(valid=True)

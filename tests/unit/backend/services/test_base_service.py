"""
Unit Tests for Base Service.

Tests the BaseService error translation and required-field validation.
"""

import pytest
from unittest.mock import AsyncMock

from sqlalchemy.exc import IntegrityError, OperationalError

from modules.backend.core.exceptions import ConflictError, DatabaseError, ValidationError
from modules.backend.services.base import BaseService


@pytest.fixture
def service():
    """Create a BaseService instance."""
    return BaseService(AsyncMock())


class TestExecuteDbOperation:
    """Tests for _execute_db_operation."""

    @pytest.mark.asyncio
    async def test_returns_result(self, service):
        """Should return the coroutine result on success."""
        async def operation():
            return 42

        assert await service._execute_db_operation("op", operation()) == 42

    @pytest.mark.asyncio
    async def test_unique_violation_is_conflict(self, service):
        """Unique constraint failures become ConflictError with the given message."""
        async def operation():
            raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: status_page.slug"))

        with pytest.raises(ConflictError) as exc_info:
            await service._execute_db_operation("create", operation(), conflict_message="Slug already exists")

        assert exc_info.value.message == "Slug already exists"

    @pytest.mark.asyncio
    async def test_other_integrity_error(self, service):
        """Non-unique integrity failures are database errors."""
        async def operation():
            raise IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))

        with pytest.raises(DatabaseError, match="constraint violation"):
            await service._execute_db_operation("create", operation())

    @pytest.mark.asyncio
    async def test_operational_error(self, service):
        """Connection problems become DatabaseError (503)."""
        async def operation():
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        with pytest.raises(DatabaseError, match="Database operation failed: list"):
            await service._execute_db_operation("list", operation())


class TestValidateRequired:
    """Tests for _validate_required."""

    def test_passes_when_present(self, service):
        """No error when every field has a value."""
        service._validate_required({"name": "x", "url": "y"}, ["name", "url"])

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_values_are_missing(self, service, value):
        """None, empty and blank strings count as missing."""
        with pytest.raises(ValidationError) as exc_info:
            service._validate_required({"name": value, "url": "y"}, ["name", "url"])

        assert exc_info.value.message == "Missing required fields: name, url"
        assert exc_info.value.details == {"missing_fields": ["name"]}

    def test_zero_and_false_are_values(self, service):
        """Falsy non-string values are still present."""
        service._validate_required({"maxretries": 0, "active": False}, ["maxretries", "active"])


class TestRejectCleared:
    """Tests for _reject_cleared."""

    def test_lists_cleared_fields_sorted(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service._reject_cleared({"url": "", "name": None, "interval": 30}, {"name", "url", "interval"})

        assert exc_info.value.message == "Fields cannot be empty: name, url"

    def test_unprotected_fields_may_be_cleared(self, service):
        """Nullable fields such as keyword can be set to null."""
        service._reject_cleared({"keyword": None, "description": ""}, {"name"})

"""
Campus Records API - Entity Service Unit Tests
===============================================

What:  Tests for EntityService business logic (list, get, create, update, delete).
How:   Uses a mock DB session (no real database).

What we test:
    ✅ get returns the row or raises EntityNotFoundError with the exact message
    ✅ create persists via add + flush and returns the generated key
    ✅ update overwrites every mutable field but never the key
    ✅ delete re-fetches, deletes and confirms
    ✅ driver failures surface as DatabaseError, unique violations as DuplicateEntityError
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import DatabaseError, DuplicateEntityError, EntityNotFoundError
from app.models import HelpRequest, UCSBOrganization
from app.repositories import HelpRequestRepository, UCSBOrganizationRepository
from app.schemas.help_request import HelpRequestFields, HelpRequestResponse
from app.schemas.ucsb_organization import (
    UCSBOrganizationCreate,
    UCSBOrganizationFields,
    UCSBOrganizationResponse,
)
from app.services.entity_service import EntityService


def _help_request(**overrides) -> HelpRequest:
    values = dict(
        id=7,
        requester_email="ttnguyen@ucsb.edu",
        team_id="F24-16",
        table_or_breakout_room="Table 16",
        explanation="Needs help with jpa03",
        solved=True,
        request_time=datetime(2024, 10, 2),
    )
    values.update(overrides)
    return HelpRequest(**values)


def _returns(session, row):
    """Make the next session.execute() resolve to `row`."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    result.scalars.return_value.all.return_value = row if isinstance(row, list) else [row]
    session.execute = AsyncMock(return_value=result)


class TestEntityServiceRead:
    """Tests for list_all and get."""

    def setup_method(self):
        self.service = EntityService(HelpRequestRepository, "HelpRequest", HelpRequestResponse)

    @pytest.mark.asyncio
    async def test_get_existing(self, mock_db_session):
        _returns(mock_db_session, _help_request())

        result = await self.service.get(mock_db_session, 7)

        assert isinstance(result, HelpRequestResponse)
        assert result.id == 7
        assert result.team_id == "F24-16"
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, mock_db_session):
        _returns(mock_db_session, None)

        with pytest.raises(EntityNotFoundError) as exc_info:
            await self.service.get(mock_db_session, 123)

        assert exc_info.value.message == "HelpRequest with id 123 not found"
        assert exc_info.value.error_type == "EntityNotFoundException"

    @pytest.mark.asyncio
    async def test_list_all_maps_every_row(self, mock_db_session):
        _returns(mock_db_session, [_help_request(id=1), _help_request(id=2, solved=False)])

        result = await self.service.list_all(mock_db_session)

        assert [r.id for r in result] == [1, 2]
        assert result[1].solved is False

    @pytest.mark.asyncio
    async def test_list_all_empty(self, mock_db_session):
        _returns(mock_db_session, [])

        assert await self.service.list_all(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get(mock_db_session, 1)

        assert exc_info.value.context["operation"] == "get"
        assert "connection refused" not in exc_info.value.message


class TestEntityServiceCreate:
    """Tests for create."""

    def setup_method(self):
        self.service = EntityService(HelpRequestRepository, "HelpRequest", HelpRequestResponse)

    @pytest.mark.asyncio
    async def test_create_assigns_key(self, mock_db_session):
        def assign_id():
            mock_db_session.add.call_args[0][0].id = 1

        mock_db_session.flush = AsyncMock(side_effect=assign_id)
        fields = HelpRequestFields(
            requester_email="ttnguyen@ucsb.edu",
            team_id="F24-16",
            table_or_breakout_room="Table 16",
            explanation="Needs help with jpa03",
            solved=True,
            request_time=datetime(2024, 10, 2),
        )

        result = await self.service.create(mock_db_session, fields)

        assert result.id == 1
        assert result.requester_email == "ttnguyen@ucsb.edu"
        mock_db_session.add.assert_called_once()
        assert isinstance(mock_db_session.add.call_args[0][0], HelpRequest)
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_natural_key(self, mock_db_session):
        service = EntityService(
            UCSBOrganizationRepository, "UCSBOrganization", UCSBOrganizationResponse
        )
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        )

        with pytest.raises(DuplicateEntityError) as exc_info:
            await service.create(mock_db_session, UCSBOrganizationCreate(org_code="ZPR"))

        assert exc_info.value.message == "UCSBOrganization with id ZPR already exists"


class TestEntityServiceMutations:
    """Tests for update and delete."""

    def setup_method(self):
        self.service = EntityService(HelpRequestRepository, "HelpRequest", HelpRequestResponse)

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, mock_db_session):
        existing = _help_request()
        _returns(mock_db_session, existing)
        incoming = HelpRequestFields(
            requester_email="other@ucsb.edu",
            team_id="F24-01",
            table_or_breakout_room="Breakout 3",
            explanation="Merge conflict",
            solved=False,
            request_time=datetime(2024, 11, 5, 14, 30),
        )

        result = await self.service.update(mock_db_session, 7, incoming)

        assert result.id == 7
        assert result.team_id == "F24-01"
        assert result.solved is False
        assert existing.request_time == datetime(2024, 11, 5, 14, 30)
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_never_changes_natural_key(self, mock_db_session):
        service = EntityService(
            UCSBOrganizationRepository, "UCSBOrganization", UCSBOrganizationResponse
        )
        existing = UCSBOrganization(org_code="ZPR", org_translation_short="ZETA PHI RHO")
        _returns(mock_db_session, existing)

        result = await service.update(
            mock_db_session, "ZPR", UCSBOrganizationFields(org_translation="Zeta Phi Rho", inactive=True)
        )

        assert result.org_code == "ZPR"
        assert result.org_translation == "Zeta Phi Rho"
        assert result.inactive is True
        # Omitted fields are replaced, not merged.
        assert result.org_translation_short is None

    @pytest.mark.asyncio
    async def test_update_missing_does_not_write(self, mock_db_session):
        _returns(mock_db_session, None)

        with pytest.raises(EntityNotFoundError):
            await self.service.update(mock_db_session, 99, HelpRequestFields())

        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_existing(self, mock_db_session):
        existing = _help_request()
        _returns(mock_db_session, existing)

        result = await self.service.delete(mock_db_session, 7)

        assert result.message == "HelpRequest with id 7 deleted"
        mock_db_session.delete.assert_awaited_once_with(existing)
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_db_session):
        _returns(mock_db_session, None)

        with pytest.raises(EntityNotFoundError) as exc_info:
            await self.service.delete(mock_db_session, 15)

        assert exc_info.value.message == "HelpRequest with id 15 not found"
        mock_db_session.delete.assert_not_awaited()

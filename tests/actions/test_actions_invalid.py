# ruff: noqa: S101

"""Invalid tests for actions endpoint."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from scheduler_admin.actions.repository import SQLActionStore, get_action_store
from scheduler_admin.app import app
from scheduler_admin.config.errors import ErrorCode


class _UnavailableSession:
    """Session stand-in whose queries fail like a lost database connection."""

    async def exec(self, _statement: object) -> None:  # noqa: PLR6301
        raise OperationalError("SELECT", {}, ConnectionError("database is gone"))


@pytest.mark.asyncio
@pytest.mark.actions
class TestActionsInvalidParams:
    """Tests for invalid requests on the /actions endpoint."""

    @classmethod
    @pytest.mark.parametrize(
        "url",
        [
            "/actions?offset=abc",
            "/actions?offset=1.5",
            "/actions?page=abc",
            "/actions?page=ten&offset=-1",
        ],
    )
    async def test_non_integer_pagination(cls, client: TestClient, url: str) -> None:
        """Test that non-integer pagination values result in 422."""
        response = client.get(url)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @classmethod
    async def test_store_failure_is_reported(cls, client: TestClient) -> None:
        """Test that a failing store query surfaces as 503."""
        app.dependency_overrides[get_action_store] = lambda: SQLActionStore(
            _UnavailableSession()  # type: ignore[arg-type]
        )
        response = client.get("/actions")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        body = response.json()
        assert body["code"] == ErrorCode.SERVICE_UNAVAILABLE
        assert body["message"]

    @classmethod
    async def test_unknown_group_is_empty(cls, client: TestClient) -> None:
        """Test that an unknown group yields an empty list, not an error."""
        response = client.get("/actions?group=does-not-exist")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

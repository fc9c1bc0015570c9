"""
Campus Records API - Role Guard Unit Tests
===========================================

What:  Tests for role resolution and the require_role dependency.
How:   Calls the dependency functions directly with a stub request.

What we test:
    ✅ roles claim → highest matching Role (ROLE_ prefix optional)
    ✅ missing, badly signed and expired tokens resolve to ANONYMOUS
    ✅ guard lets allowed roles through and raises ForbiddenError otherwise
    ✅ route guards can be re-run from the Authorization header alone
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials

from app.config import settings
from app.exceptions import ForbiddenError
from app.security import (
    Role,
    enforce_route_guards,
    get_current_role,
    require_admin,
    require_user,
    resolve_role,
    role_from_claims,
)


def _request(method: str = "GET", path: str = "/api/articles/all", headers=None, route=None):
    return SimpleNamespace(
        method=method,
        url=SimpleNamespace(path=path),
        state=SimpleNamespace(),
        headers=headers or {},
        scope={"route": route} if route is not None else {},
    )


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestRoleFromClaims:

    @pytest.mark.parametrize(
        "roles, expected",
        [
            (["ROLE_ADMIN", "ROLE_USER"], Role.ADMIN),
            (["ROLE_ADMIN"], Role.ADMIN),
            (["ROLE_USER"], Role.USER),
            (["user"], Role.USER),
            ("ROLE_USER", Role.USER),
            (["ROLE_MEMBER"], Role.ANONYMOUS),
            ([], Role.ANONYMOUS),
            (None, Role.ANONYMOUS),
        ],
    )
    def test_mapping(self, roles, expected):
        assert role_from_claims(roles) is expected


class TestGetCurrentRole:

    def test_no_credentials_is_anonymous(self):
        request = _request()
        assert get_current_role(request, None) is Role.ANONYMOUS
        assert request.state.role is Role.ANONYMOUS

    def test_valid_token(self, make_token):
        request = _request()
        token = make_token("ROLE_USER", subject="cgaucho@ucsb.edu")

        assert get_current_role(request, _bearer(token)) is Role.USER
        assert request.state.subject == "cgaucho@ucsb.edu"

    def test_wrong_signature_is_anonymous(self, make_token):
        token = make_token("ROLE_ADMIN", secret="some-other-secret-0123456789abcdef")
        assert get_current_role(_request(), _bearer(token)) is Role.ANONYMOUS

    def test_garbage_token_is_anonymous(self):
        assert get_current_role(_request(), _bearer("not-a-jwt")) is Role.ANONYMOUS

    def test_expired_token_is_anonymous(self):
        token = jwt.encode(
            {
                "sub": "admin@ucsb.edu",
                "roles": ["ROLE_ADMIN"],
                "exp": datetime.now(timezone.utc) - timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        assert get_current_role(_request(), _bearer(token)) is Role.ANONYMOUS

    def test_unconfigured_secret_is_anonymous(self, make_token, monkeypatch):
        token = make_token("ROLE_ADMIN")
        monkeypatch.setattr(settings, "jwt_secret", "")
        assert get_current_role(_request(), _bearer(token)) is Role.ANONYMOUS


class TestRequireRole:

    def test_user_guard(self):
        assert require_user(_request(), Role.USER) is Role.USER
        assert require_user(_request(), Role.ADMIN) is Role.ADMIN
        with pytest.raises(ForbiddenError):
            require_user(_request(), Role.ANONYMOUS)

    def test_admin_guard(self):
        assert require_admin(_request("POST"), Role.ADMIN) is Role.ADMIN
        for role in (Role.USER, Role.ANONYMOUS):
            with pytest.raises(ForbiddenError) as exc_info:
                require_admin(_request("POST"), role)
            assert exc_info.value.error_type == "AccessDeniedException"
            assert exc_info.value.message == "Access Denied"


class TestEnforceRouteGuards:
    """Guards re-run from the request-validation handler."""

    def test_resolve_role_reads_bearer_header(self, make_token):
        request = _request(headers={"Authorization": f"Bearer {make_token('ROLE_ADMIN')}"})
        assert resolve_role(request) is Role.ADMIN

    @pytest.mark.parametrize("header", ["", "Bearer", "Basic dXNlcjpwYXNz", "Bearer  "])
    def test_resolve_role_without_bearer_token(self, header):
        assert resolve_role(_request(headers={"Authorization": header})) is Role.ANONYMOUS

    def test_rejects_caller_below_route_role(self, make_token):
        route = SimpleNamespace(dependencies=[Depends(require_admin)])
        request = _request(
            "PUT",
            "/api/helprequest",
            headers={"Authorization": f"Bearer {make_token('ROLE_USER')}"},
            route=route,
        )
        with pytest.raises(ForbiddenError):
            enforce_route_guards(request)

    def test_allows_caller_with_route_role(self, make_token):
        route = SimpleNamespace(dependencies=[Depends(require_admin)])
        request = _request(
            "PUT",
            "/api/helprequest",
            headers={"Authorization": f"Bearer {make_token('ROLE_ADMIN')}"},
            route=route,
        )
        enforce_route_guards(request)
        assert request.state.role is Role.ADMIN

    def test_unguarded_route_is_left_alone(self):
        enforce_route_guards(_request(path="/health", route=SimpleNamespace(dependencies=[])))
        enforce_route_guards(_request(path="/nowhere"))

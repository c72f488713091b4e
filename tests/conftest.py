"""Shared test fixtures for all tests."""
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from localstyle.core.roles import StaffRole
from localstyle.core.security import create_access_token, create_refresh_token
from localstyle.main import create_app
from localstyle.models.user import AuthUser
from localstyle.repositories import Collections
from localstyle.seed import build_collections
from localstyle.services.categories import CategoryService
from localstyle.services.notifications import EmailNotifier
from localstyle.services.products import ProductService
from localstyle.services.staff import StaffService


@pytest.fixture(scope="function")
def collections():
    """Fresh stores loaded with the demo fixtures for each test."""
    return build_collections(seed=True)


@pytest.fixture(scope="function")
def empty_collections():
    """Fresh empty stores."""
    return Collections()


@pytest.fixture
def notifier():
    return EmailNotifier(enabled=False)


@pytest.fixture(scope="function")
def client(collections, notifier):
    """Test client for an application bound to this test's stores."""
    app = create_app(collections=collections, notifier=notifier)
    return TestClient(app)


@pytest.fixture
def category_service(collections):
    return CategoryService(collections.categories)


@pytest.fixture
def product_service(collections):
    return ProductService(collections.products)


@pytest.fixture
def staff_service(collections, notifier):
    return StaffService(collections.staff, collections.invites, notifier)


def make_user(role: StaffRole = StaffRole.BRAND_OWNER) -> AuthUser:
    return AuthUser(
        id=f"user_{role.value}",
        email=f"{role.value}@localstyle.com",
        name=f"Test {role.value.replace('_', ' ').title()}",
        role=role,
    )


@pytest.fixture
def brand_owner():
    return make_user(StaffRole.BRAND_OWNER)


@pytest.fixture
def admin_user():
    return make_user(StaffRole.ADMIN)


@pytest.fixture
def branch_manager():
    return make_user(StaffRole.BRANCH_MANAGER)


@pytest.fixture
def auth_headers():
    """Bearer headers for a signed access token of the given role."""
    def _headers(role: StaffRole = StaffRole.BRAND_OWNER) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(make_user(role))}"}
    return _headers


@pytest.fixture
def refresh_token():
    return create_refresh_token(make_user(StaffRole.BRAND_OWNER))


@pytest.fixture
def staff_payload():
    """Valid request body for creating a staff member."""
    return {
        "email": "nina.patel@localstyle.com",
        "firstName": "Nina",
        "lastName": "Patel",
        "role": "staff",
        "department": "Sales",
        "position": "Sales Associate",
        "branchId": "branch_001",
        "managerId": "staff_002",
        "employeeId": "EMP006",
        "hireDate": "2024-03-01",
        "salary": 42000,
    }


@pytest.fixture
def invite_payload():
    """Valid request body for inviting a staff member."""
    return {
        "email": "omar.haddad@example.com",
        "firstName": "Omar",
        "lastName": "Haddad",
        "role": "staff",
        "branchId": "branch_002",
        "position": "Stylist",
        "department": "Sales",
        "message": "Looking forward to working with you.",
    }


@pytest.fixture
def fixed_now():
    return datetime(2024, 2, 10, 12, 0, tzinfo=timezone.utc)

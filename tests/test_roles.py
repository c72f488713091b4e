"""Tests for the role hierarchy and permission matrix."""
import pytest

from localstyle.core.roles import (
    ALL_PERMISSIONS,
    ROLE_HIERARCHY,
    ROLE_PERMISSIONS,
    Permission,
    StaffRole,
    StaffStatus,
    assignable_roles,
    can_manage,
    has_permission,
    permissions_for,
    role_display_name,
    role_rank,
    sorted_permissions,
    status_display_name,
)


class TestPermissions:
    """Tests for the fixed per-role permission sets."""

    def test_every_role_has_a_permission_set(self):
        """Test that permissions_for is total over the role enum."""
        for role in StaffRole:
            assert permissions_for(role)

    def test_admin_and_brand_owner_hold_everything(self):
        """Test that the top two roles hold all 26 permissions."""
        assert len(ALL_PERMISSIONS) == 26
        assert permissions_for(StaffRole.ADMIN) == ALL_PERMISSIONS
        assert permissions_for(StaffRole.BRAND_OWNER) == ALL_PERMISSIONS

    def test_branch_manager_permissions(self):
        """Test the branch manager set: no deletes outside orders, no brand edits."""
        granted = permissions_for(StaffRole.BRANCH_MANAGER)
        assert len(granted) == 14
        assert Permission.ORDERS_DELETE in granted
        assert Permission.STAFF_CREATE in granted
        assert Permission.STAFF_DELETE not in granted
        assert Permission.PRODUCTS_DELETE not in granted
        assert Permission.BRAND_EDIT not in granted

    def test_staff_permissions(self):
        """Test the smallest permission set."""
        assert permissions_for(StaffRole.STAFF) == {
            Permission.PRODUCTS_VIEW,
            Permission.CATEGORIES_VIEW,
            Permission.ORDERS_VIEW,
            Permission.ORDERS_CREATE,
            Permission.ORDERS_EDIT,
            Permission.REPORTS_VIEW,
        }

    def test_has_permission_accepts_string_values(self):
        """Test membership with raw enum values."""
        assert has_permission("staff", "products.view")
        assert not has_permission("staff", "products.edit")

    def test_sorted_permissions_follow_declaration_order(self):
        """Test that materialised permission lists are in a stable order."""
        perms = sorted_permissions(StaffRole.STAFF)
        assert perms[0] == Permission.PRODUCTS_VIEW
        assert perms == sorted(perms, key=list(Permission).index)

    def test_tables_are_read_only(self):
        """Test that the role tables cannot be mutated."""
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[StaffRole.STAFF] = ALL_PERMISSIONS
        with pytest.raises(TypeError):
            ROLE_HIERARCHY[StaffRole.STAFF] = 10


class TestHierarchy:
    """Tests for role ranks and who may manage whom."""

    def test_ranks(self):
        """Test the numeric hierarchy."""
        assert [role_rank(r) for r in StaffRole] == [4, 3, 2, 1]

    @pytest.mark.parametrize("actor,target,expected", [
        (StaffRole.ADMIN, StaffRole.BRAND_OWNER, True),
        (StaffRole.BRAND_OWNER, StaffRole.BRANCH_MANAGER, True),
        (StaffRole.BRANCH_MANAGER, StaffRole.STAFF, True),
        (StaffRole.BRAND_OWNER, StaffRole.BRAND_OWNER, False),
        (StaffRole.BRANCH_MANAGER, StaffRole.BRAND_OWNER, False),
        (StaffRole.STAFF, StaffRole.STAFF, False),
        (StaffRole.ADMIN, StaffRole.ADMIN, False),
    ])
    def test_can_manage_requires_strictly_higher_rank(self, actor, target, expected):
        """Test that peers, self included, cannot be managed."""
        assert can_manage(actor, target) is expected

    def test_assignable_roles(self):
        """Test the roles each actor may hand out, highest first."""
        assert assignable_roles(StaffRole.ADMIN) == [
            StaffRole.BRAND_OWNER, StaffRole.BRANCH_MANAGER, StaffRole.STAFF
        ]
        assert assignable_roles(StaffRole.BRAND_OWNER) == [StaffRole.BRANCH_MANAGER, StaffRole.STAFF]
        assert assignable_roles(StaffRole.STAFF) == []

    def test_display_names(self):
        """Test human-readable role and status labels."""
        assert role_display_name(StaffRole.STAFF) == "Staff Member"
        assert role_display_name("admin") == "Administrator"
        assert status_display_name(StaffStatus.SUSPENDED) == "Suspended"

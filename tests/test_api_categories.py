"""Tests for category API endpoints."""
import pytest


class TestCategoryAPI:
    """Tests for category-related API endpoints."""

    def test_list_categories(self, client):
        """Test the paged list without children."""
        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 6
        assert data["items"][0]["slug"] == "clothing"
        assert "children" not in data["items"][0]
        assert "productCount" in data["items"][0]

    @pytest.mark.parametrize("parent", ["null", ""])
    def test_list_root_categories(self, client, parent):
        """Test root-only listing."""
        data = client.get("/api/v1/categories", params={"parentId": parent}).json()
        assert [c["name"] for c in data["items"]] == ["Clothing", "Accessories"]

    def test_list_with_children(self, client):
        """Test includeChildren on a parent filter."""
        data = client.get(
            "/api/v1/categories",
            params={"parentId": "null", "includeChildren": "true"}
        ).json()
        assert [c["name"] for c in data["items"][1]["children"]] == ["Bags", "Jewelry"]

    def test_create_category(self, client):
        """Test create returns 201 with derived fields."""
        response = client.post("/api/v1/categories", json={"name": "Totes", "parentId": "5"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "7"
        assert data["slug"] == "totes"
        assert data["level"] == 2
        assert data["isActive"] is True

    def test_create_requires_name(self, client):
        """Test request validation."""
        response = client.post("/api/v1/categories", json={"description": "No name"})
        assert response.status_code == 422
        fields = [e["field"] for e in response.json()["details"]["validation_errors"]]
        assert any(f.endswith("name") for f in fields)

    def test_duplicate_slug_conflict(self, client):
        """Test 409 for a sibling slug clash."""
        response = client.post("/api/v1/categories", json={"name": "Dresses", "parentId": "1"})
        assert response.status_code == 409
        assert response.json()["details"]["reason"] == "duplicate_slug"

    def test_tree(self, client):
        """Test the nested forest."""
        client.post("/api/v1/categories", json={"name": "Totes", "parentId": "5"})
        tree = client.get("/api/v1/categories/tree").json()

        assert [n["name"] for n in tree] == ["Clothing", "Accessories"]
        assert tree[1]["children"][0]["children"][0]["name"] == "Totes"
        assert tree[1]["children"][0]["children"][0]["depth"] == 2

    def test_get_category(self, client):
        """Test detail with children."""
        data = client.get("/api/v1/categories/1").json()
        assert data["name"] == "Clothing"
        assert [c["id"] for c in data["children"]] == ["2", "3"]

    def test_get_missing_category(self, client):
        """Test 404 for unknown ids."""
        response = client.get("/api/v1/categories/999")
        assert response.status_code == 404
        assert response.json()["details"]["resource"] == "Category"

    def test_update_reparents(self, client):
        """Test an explicit null parent moves to the root."""
        response = client.put("/api/v1/categories/5", json={"parentId": None, "name": "Handbags"})
        assert response.status_code == 200
        data = response.json()
        assert data["parentId"] is None
        assert data["level"] == 0
        assert data["slug"] == "handbags"

    def test_update_into_descendant_conflicts(self, client):
        """Test cycle rejection over HTTP."""
        response = client.put("/api/v1/categories/4", json={"parentId": "5"})
        assert response.status_code == 409
        assert response.json()["details"]["reason"] == "category_cycle"

    def test_delete_guards(self, client):
        """Test 409 for children and products, then a clean delete."""
        assert client.delete("/api/v1/categories/1").json()["details"]["reason"] == "has_children"
        assert client.delete("/api/v1/categories/5").json()["details"]["reason"] == "has_products"

        created = client.post("/api/v1/categories", json={"name": "Scarves", "parentId": "4"}).json()
        response = client.delete(f"/api/v1/categories/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted successfully"}
        assert client.get(f"/api/v1/categories/{created['id']}").status_code == 404

    def test_blank_parent_creates_root(self, client):
        """Test that an empty parentId from a form lands in the root listing."""
        created = client.post("/api/v1/categories", json={"name": "Outerwear", "parentId": ""}).json()
        assert created["parentId"] is None

        roots = client.get("/api/v1/categories", params={"parentId": "null"}).json()
        assert created["id"] in [c["id"] for c in roots["items"]]

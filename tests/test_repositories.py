"""Tests for the in-memory collection store."""
from localstyle.models.product import Product
from localstyle.repositories import Collections, InMemoryRepository
from localstyle.seed import build_collections, demo_products


def make_product(product_id: str, sku: str = "SKU") -> Product:
    return Product(id=product_id, name="Test", price=10, sku=sku, date_added="2024-01-01T00:00:00Z")


class TestInMemoryRepository:
    """Tests for id allocation and CRUD on the list-backed store."""

    def test_next_id_is_sequential_and_padded(self):
        """Test zero-padded sequential ids."""
        repo = InMemoryRepository(prefix="prod_")
        assert repo.next_id() == "prod_001"
        assert repo.next_id() == "prod_002"

    def test_next_id_starts_above_existing_items(self):
        """Test that seeding moves the counter past existing numeric suffixes."""
        repo = InMemoryRepository(prefix="prod_", items=demo_products())
        assert repo.next_id() == "prod_011"

    def test_ids_are_not_reused_after_delete(self):
        """Test that deleting the newest item does not free its id."""
        repo = InMemoryRepository(prefix="prod_")
        product = make_product(repo.next_id())
        repo.insert(product)
        assert repo.delete(product.id) is True
        assert repo.next_id() == "prod_002"

    def test_unpadded_ids(self):
        """Test plain numeric ids for width 0."""
        repo = InMemoryRepository(prefix="", width=0)
        assert repo.next_id() == "1"

    def test_find_and_update(self):
        """Test lookups and in-place replacement."""
        repo = InMemoryRepository(prefix="prod_", items=[make_product("prod_001"), make_product("prod_002")])
        updated = repo.find_by_id("prod_001").model_copy(update={"name": "Renamed"})
        repo.update(updated)
        assert repo.find_by_id("prod_001").name == "Renamed"
        assert [p.id for p in repo.find_all()] == ["prod_001", "prod_002"]

    def test_missing_ids(self):
        """Test that missing ids are reported rather than raised."""
        repo = InMemoryRepository(prefix="prod_")
        assert repo.find_by_id("prod_404") is None
        assert repo.update(make_product("prod_404")) is None
        assert repo.delete("prod_404") is False

    def test_find_all_with_predicate_keeps_insertion_order(self):
        """Test filtered reads."""
        repo = InMemoryRepository(prefix="prod_", items=[
            make_product("prod_001", "A"), make_product("prod_002", "B"), make_product("prod_003", "A")
        ])
        assert [p.id for p in repo.find_all(lambda p: p.sku == "A")] == ["prod_001", "prod_003"]
        assert repo.count() == 3


class TestCollections:
    """Tests for the bundle of stores."""

    def test_empty_collections(self):
        """Test that default stores are empty and independent."""
        first, second = Collections(), Collections()
        first.products.insert(make_product("prod_001"))
        assert second.products.count() == 0

    def test_seeded_collections(self):
        """Test the demo fixture counts."""
        collections = build_collections(seed=True)
        assert collections.categories.count() == 6
        assert collections.staff.count() == 5
        assert collections.invites.count() == 2
        assert collections.products.count() == 10
        assert collections.categories.next_id() == "7"
        assert collections.staff.next_id() == "staff_006"

    def test_unseeded_collections(self):
        """Test that seeding can be switched off."""
        assert build_collections(seed=False).products.count() == 0

"""
Category tree manager.

Categories form a forest linked by ``parent_id``. Slugs are derived from the
name and levels from the parent chain; both are recomputed on update so the
stored values never drift from the tree.
"""
import re
from typing import Callable, Optional

from localstyle.error_handlers import ConflictError, ResourceNotFoundError, ValidationError
from localstyle.logging_config import get_logger
from localstyle.models.base import utcnow
from localstyle.models.category import Category, CategoryTreeNode, CategoryWithChildren
from localstyle.repositories import Repository
from localstyle.schemas.category import CategoryCreate, CategoryUpdate
from localstyle.schemas.common import Page, paginate
from localstyle.services.result import Err, Ok, Result

logger = get_logger("categories")

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")

# Query values that select root categories only
ROOT_SENTINELS = frozenset({"null", ""})


def derive_slug(name: str) -> str:
    """
    Build a URL slug from a category name.

    >>> derive_slug("Nova Style!!")
    'nova-style'
    >>> derive_slug("  multiple   spaces ")
    'multiple-spaces'
    """
    slug = _WHITESPACE.sub("-", name.strip().lower())
    return _NON_SLUG.sub("", slug)


def compute_level(parent_id: Optional[str], lookup: Callable[[str], Optional[Category]]) -> int:
    """0 for roots and dangling parents, otherwise the parent's level plus one."""
    if parent_id is None:
        return 0
    parent = lookup(parent_id)
    if parent is None:
        return 0
    return parent.level + 1


def _sort_key(category: Category):
    return (category.sort_order, category.name.lower())


def attach_children(category: Category, categories: list[Category]) -> CategoryWithChildren:
    """One-level projection: the category plus its direct children."""
    children = sorted(
        (c for c in categories if c.parent_id == category.id),
        key=_sort_key
    )
    return CategoryWithChildren(**category.model_dump(), children=children)


def build_tree(categories: list[Category]) -> list[CategoryTreeNode]:
    """
    Build the full category forest.

    Roots are categories without a parent or whose parent no longer exists.
    Each node is emitted once, so a corrupted parent loop cannot recurse forever.
    """
    known = {c.id for c in categories}
    by_parent: dict[Optional[str], list[Category]] = {}
    for category in categories:
        parent = category.parent_id if category.parent_id in known else None
        by_parent.setdefault(parent, []).append(category)

    visited: set[str] = set()

    def node(category: Category, depth: int) -> CategoryTreeNode:
        visited.add(category.id)
        children = [
            node(child, depth + 1)
            for child in sorted(by_parent.get(category.id, []), key=_sort_key)
            if child.id not in visited
        ]
        return CategoryTreeNode(**category.model_dump(), children=children, depth=depth)

    return [node(root, 0) for root in sorted(by_parent.get(None, []), key=_sort_key)]


class CategoryService:
    """Create, update, delete and read categories against a repository."""

    def __init__(self, repository: Repository[Category]):
        self.repository = repository

    def _descendant_ids(self, category_id: str) -> set[str]:
        categories = self.repository.find_all()
        found: set[str] = set()
        frontier = [category_id]
        while frontier:
            current = frontier.pop()
            for category in categories:
                if category.parent_id == current and category.id not in found:
                    found.add(category.id)
                    frontier.append(category.id)
        return found

    def _slug_taken(self, slug: str, parent_id: Optional[str], exclude_id: Optional[str] = None) -> bool:
        return bool(self.repository.find_all(
            lambda c: c.slug == slug and c.parent_id == parent_id and c.id != exclude_id
        ))

    def _cascade_levels(self, category: Category) -> None:
        """Rewrite descendant levels after ``category`` changed level."""
        frontier = [category]
        while frontier:
            parent = frontier.pop()
            for child in self.repository.find_all(lambda c: c.parent_id == parent.id):
                if child.level != parent.level + 1:
                    child = child.model_copy(update={"level": parent.level + 1})
                    self.repository.update(child)
                frontier.append(child)

    def list_categories(
        self,
        parent_id: Optional[str] = None,
        include_children: bool = False,
        page: int = 1,
        limit: int = 10
    ) -> Page:
        """
        List categories in store order.

        ``parent_id=None`` applies no filter, ``"null"`` or ``""`` selects roots,
        anything else selects the direct children of that id.
        """
        categories = self.repository.find_all()
        if parent_id is None:
            filtered = categories
        elif parent_id in ROOT_SENTINELS:
            filtered = [c for c in categories if c.parent_id is None]
        else:
            filtered = [c for c in categories if c.parent_id == parent_id]

        items, total = paginate(filtered, page, limit)
        if include_children:
            items = [attach_children(c, categories) for c in items]
        return Page(items=items, total=total, page=page, limit=limit)

    def get(self, category_id: str) -> Result[CategoryWithChildren]:
        category = self.repository.find_by_id(category_id)
        if category is None:
            return Err(ResourceNotFoundError("Category", category_id))
        return Ok(attach_children(category, self.repository.find_all()))

    def tree(self) -> list[CategoryTreeNode]:
        return build_tree(self.repository.find_all())

    def create(self, request: CategoryCreate) -> Result[Category]:
        slug = derive_slug(request.name)
        if not slug:
            return Err(ValidationError(
                "Category name must contain at least one letter or digit",
                errors=[{"field": "name", "message": "Produces an empty slug"}]
            ))
        if self._slug_taken(slug, request.parent_id):
            logger.warning(f"Rejected category '{request.name}': slug '{slug}' already used by a sibling")
            return Err(ConflictError(
                f"A sibling category already uses the slug '{slug}'",
                reason="duplicate_slug",
                details={"slug": slug, "parentId": request.parent_id}
            ))

        now = utcnow()
        category = Category(
            id=self.repository.next_id(),
            name=request.name,
            description=request.description,
            slug=slug,
            parent_id=request.parent_id,
            level=compute_level(request.parent_id, self.repository.find_by_id),
            is_active=True if request.is_active is None else request.is_active,
            sort_order=1 if request.sort_order is None else request.sort_order,
            image_url=request.image_url,
            meta_title=request.meta_title,
            meta_description=request.meta_description,
            created_at=now,
            updated_at=now,
            product_count=0,
        )
        self.repository.insert(category)
        logger.info(f"Created category {category.id} '{category.slug}' at level {category.level}")
        return Ok(category)

    def update(self, category_id: str, request: CategoryUpdate) -> Result[Category]:
        """
        Apply a partial update.

        The slug follows a changed name and the level follows an explicitly
        provided ``parentId`` (``null`` moves the category to the root).
        """
        existing = self.repository.find_by_id(category_id)
        if existing is None:
            return Err(ResourceNotFoundError("Category", category_id))

        changes = request.model_dump(exclude_unset=True, exclude={"id"})
        # Null only has meaning for parent_id; elsewhere it means "not provided"
        changes = {k: v for k, v in changes.items() if v is not None or k == "parent_id"}

        if "name" in changes and changes["name"] != existing.name:
            slug = derive_slug(changes["name"])
            if not slug:
                return Err(ValidationError(
                    "Category name must contain at least one letter or digit",
                    errors=[{"field": "name", "message": "Produces an empty slug"}]
                ))
            changes["slug"] = slug

        if "parent_id" in changes and changes["parent_id"] != existing.parent_id:
            new_parent = changes["parent_id"]
            if new_parent is not None and (
                new_parent == category_id or new_parent in self._descendant_ids(category_id)
            ):
                logger.warning(f"Rejected moving category {category_id} under its own subtree ({new_parent})")
                return Err(ConflictError(
                    "A category cannot be moved under itself or one of its descendants",
                    reason="category_cycle",
                    details={"id": category_id, "parentId": new_parent}
                ))
            changes["level"] = compute_level(new_parent, self.repository.find_by_id)

        slug = changes.get("slug", existing.slug)
        parent_id = changes.get("parent_id", existing.parent_id)
        if (slug, parent_id) != (existing.slug, existing.parent_id) and self._slug_taken(slug, parent_id, category_id):
            logger.warning(f"Rejected update of category {category_id}: slug '{slug}' already used by a sibling")
            return Err(ConflictError(
                f"A sibling category already uses the slug '{slug}'",
                reason="duplicate_slug",
                details={"slug": slug, "parentId": parent_id}
            ))

        changes["updated_at"] = utcnow()
        updated = existing.model_copy(update=changes)
        self.repository.update(updated)
        if updated.level != existing.level:
            self._cascade_levels(updated)
        logger.info(f"Updated category {category_id}: {sorted(changes)}")
        return Ok(updated)

    def delete(self, category_id: str) -> Result[Category]:
        """Remove a leaf category that has no products."""
        existing = self.repository.find_by_id(category_id)
        if existing is None:
            return Err(ResourceNotFoundError("Category", category_id))

        if self.repository.find_all(lambda c: c.parent_id == category_id):
            logger.warning(f"Rejected delete of category {category_id}: it has subcategories")
            return Err(ConflictError(
                "Cannot delete a category that has subcategories",
                reason="has_children",
                details={"id": category_id}
            ))
        if existing.product_count > 0:
            logger.warning(f"Rejected delete of category {category_id}: {existing.product_count} products assigned")
            return Err(ConflictError(
                "Cannot delete a category that has products",
                reason="has_products",
                details={"id": category_id, "productCount": existing.product_count}
            ))

        self.repository.delete(category_id)
        logger.info(f"Deleted category {category_id}")
        return Ok(existing)

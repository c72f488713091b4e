"""
Typed clients for the API collections.

Reads go through the ``QueryCache``. Creates and deletes drop the list
entries of their collection; updates drop the lists and seed the detail
entry with the entity the API returned.
"""
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from localstyle.client.cache import QueryCache, cache_key
from localstyle.client.http import ApiClient
from localstyle.models.category import CategoryTreeNode, CategoryWithChildren
from localstyle.models.product import Product
from localstyle.models.staff import InviteStatus, StaffInvite, StaffProfile
from localstyle.schemas.common import Page
from localstyle.schemas.staff import StaffStatsResponse

M = TypeVar("M", bound=BaseModel)

LIST = "list"
DETAIL = "detail"


def query_params(**params: Any) -> dict[str, Any]:
    """camelCase query parameters without the unset ones."""
    return {to_camel(name): value for name, value in params.items() if value is not None}


def request_body(data: BaseModel) -> dict[str, Any]:
    return data.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ResourceClient(Generic[M]):
    collection: str
    path: str
    model: type[M]
    # Cache kinds derived from the whole collection, dropped on every mutation
    aggregate_kinds: tuple[str, ...] = (LIST,)

    def __init__(self, api: ApiClient, cache: QueryCache):
        self.api = api
        self.cache = cache

    def _detail_key(self, entity_id: str):
        return cache_key(self.collection, DETAIL, {"id": entity_id})

    def _invalidate_aggregates(self) -> None:
        for kind in self.aggregate_kinds:
            self.cache.invalidate(self.collection, kind)

    def _load_page(self, params: dict[str, Any]) -> Page[M]:
        return Page[self.model].model_validate(self.api.get(self.path, params=params))

    def list(self, **filters: Any) -> Page[M]:
        params = query_params(**filters)
        return self.cache.fetch(
            cache_key(self.collection, LIST, params),
            lambda: self._load_page(params)
        )

    def get(self, entity_id: str) -> M:
        return self.cache.fetch(
            self._detail_key(entity_id),
            lambda: self.model.model_validate(self.api.get(f"{self.path}/{entity_id}"))
        )

    def create(self, data: BaseModel) -> M:
        entity = self.model.model_validate(self.api.post(self.path, json=request_body(data)))
        self._invalidate_aggregates()
        return entity

    def update(self, entity_id: str, data: BaseModel) -> M:
        entity = self.model.model_validate(
            self.api.put(f"{self.path}/{entity_id}", json=request_body(data))
        )
        self._invalidate_aggregates()
        self.cache.set(self._detail_key(entity_id), entity)
        return entity

    def delete(self, entity_id: str) -> None:
        self.api.delete(f"{self.path}/{entity_id}")
        self._invalidate_aggregates()
        self.cache.discard(self._detail_key(entity_id))


class ProductsClient(ResourceClient[Product]):
    collection = "products"
    path = "products"
    model = Product


class CategoriesClient(ResourceClient[CategoryWithChildren]):
    collection = "categories"
    path = "categories"
    model = CategoryWithChildren
    aggregate_kinds = (LIST, "tree")

    def tree(self) -> list[CategoryTreeNode]:
        return self.cache.fetch(
            cache_key(self.collection, "tree"),
            lambda: [CategoryTreeNode.model_validate(node) for node in self.api.get(f"{self.path}/tree")]
        )


class StaffClient(ResourceClient[StaffProfile]):
    collection = "staff"
    path = "staff"
    model = StaffProfile
    aggregate_kinds = (LIST, "stats")

    def stats(self) -> StaffStatsResponse:
        return self.cache.fetch(
            cache_key(self.collection, "stats"),
            lambda: StaffStatsResponse.model_validate(self.api.get(f"{self.path}/stats"))
        )


class InvitesClient(ResourceClient[StaffInvite]):
    """Invites list as a plain array; pending counts feed the staff stats."""
    collection = "invites"
    path = "staff/invites"
    model = StaffInvite

    def _invalidate_aggregates(self) -> None:
        super()._invalidate_aggregates()
        self.cache.invalidate(StaffClient.collection, "stats")

    def list(self, status: Optional[InviteStatus] = None, email: Optional[str] = None) -> list[StaffInvite]:
        params = query_params(status=status.value if status else None, email=email)
        return self.cache.fetch(
            cache_key(self.collection, LIST, params),
            lambda: [StaffInvite.model_validate(item) for item in self.api.get(self.path, params=params)]
        )

    def respond(self, invite_id: str, status: InviteStatus) -> StaffInvite:
        """Accept or cancel; cached like an update."""
        invite = StaffInvite.model_validate(
            self.api.put(f"{self.path}/{invite_id}", json={"status": InviteStatus(status).value})
        )
        self._invalidate_aggregates()
        self.cache.set(self._detail_key(invite_id), invite)
        return invite

    def cancel(self, invite_id: str) -> None:
        self.delete(invite_id)

"""Python client for the brand admin API: session, HTTP client, query cache."""
from localstyle.client.storage import KeyValueStorage, MemoryStorage, FileStorage
from localstyle.client.session import AuthSession
from localstyle.client.http import ApiClient
from localstyle.client.cache import QueryCache, cache_key
from localstyle.client.resources import (
    ProductsClient,
    CategoriesClient,
    StaffClient,
    InvitesClient,
)

__all__ = [
    "KeyValueStorage", "MemoryStorage", "FileStorage",
    "AuthSession",
    "ApiClient",
    "QueryCache", "cache_key",
    "ProductsClient", "CategoriesClient", "StaffClient", "InvitesClient",
]

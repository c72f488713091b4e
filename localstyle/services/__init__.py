"""Domain services over the collection stores."""
from localstyle.services.result import Ok, Err, Result, unwrap
from localstyle.services.categories import CategoryService, derive_slug, compute_level, build_tree
from localstyle.services.staff import StaffService, filter_staff, compute_stats
from localstyle.services.products import ProductService
from localstyle.services.notifications import EmailNotifier

__all__ = [
    "Ok", "Err", "Result", "unwrap",
    "CategoryService", "derive_slug", "compute_level", "build_tree",
    "StaffService", "filter_staff", "compute_stats",
    "ProductService",
    "EmailNotifier",
]

"""
Demo fixtures for the Nova Style brand.

``build_collections(seed=True)`` returns stores preloaded with the sample
catalog, categories, staff and invites the dashboard ships with.
"""
from datetime import datetime, timedelta, timezone

from localstyle.core.roles import StaffRole, StaffStatus, sorted_permissions
from localstyle.models.base import utcnow
from localstyle.models.category import Category
from localstyle.models.product import Product, ProductStatus
from localstyle.models.staff import (
    Address,
    EmergencyContact,
    InviteStatus,
    ManagerRef,
    StaffInvite,
    StaffProfile,
)
from localstyle.models.user import Brand, ContactInfo
from localstyle.repositories import Collections, InMemoryRepository

BRAND = Brand(
    id="brand_001",
    name="Nova Style",
    logo_url="https://picsum.photos/seed/novastyle-logo/300/300",
    bio=(
        "Nova Style is a contemporary fashion brand that combines modern aesthetics with "
        "timeless elegance. Founded in 2020, we specialize in creating premium clothing and "
        "accessories that empower individuals to express their unique style. Our collections "
        "feature carefully curated pieces made from sustainable materials, blending comfort "
        "with sophisticated design. From casual everyday wear to elegant evening attire, Nova "
        "Style offers versatile fashion solutions for the modern lifestyle."
    ),
    contact_info=ContactInfo(
        email="contact@novastyle.com",
        phone="+1 (555) 123-4567",
        website="https://www.novastyle.com",
    ),
)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _category(id, name, description, parent_id, sort_order, image, meta_title, meta_description,
              created, product_count) -> Category:
    return Category(
        id=id,
        name=name,
        description=description,
        slug=name.lower(),
        parent_id=parent_id,
        level=0 if parent_id is None else 1,
        sort_order=sort_order,
        image_url=f"https://images.unsplash.com/photo-{image}",
        meta_title=meta_title,
        meta_description=meta_description,
        created_at=_ts(created),
        updated_at=_ts(created),
        product_count=product_count,
    )


def demo_categories() -> list[Category]:
    return [
        _category("1", "Clothing", "All types of clothing items", None, 1,
                  "1441986300917-64674bd600d8", "Clothing Category",
                  "Browse our extensive collection of clothing items", "2024-01-15T08:00:00", 45),
        _category("2", "Shirts", "Casual and formal shirts", "1", 1,
                  "1602810318383-e386cc2a3ccf", "Shirts Collection",
                  "Quality shirts for every occasion", "2024-01-15T08:30:00", 15),
        _category("3", "Dresses", "Elegant dresses for all occasions", "1", 2,
                  "1595777457583-95e059d581b8", "Dresses Collection",
                  "Beautiful dresses for every style", "2024-01-15T09:00:00", 20),
        _category("4", "Accessories", "Fashion accessories and jewelry", None, 2,
                  "1469334031218-e382a71b716b", "Accessories Category",
                  "Complete your look with our accessories", "2024-01-15T10:00:00", 30),
        _category("5", "Bags", "Handbags, backpacks, and more", "4", 1,
                  "1553062407-98eeb64c6a62", "Bags Collection",
                  "Stylish bags for every need", "2024-01-15T10:30:00", 12),
        _category("6", "Jewelry", "Necklaces, earrings, and rings", "4", 2,
                  "1515562141207-7a88fb7ce338", "Jewelry Collection",
                  "Elegant jewelry pieces", "2024-01-15T11:00:00", 18),
    ]


def _staff(id, first_name, last_name, role, status, department, position, branch, manager,
           employee_id, hire_date, salary, phone, dob, address, contact, last_login,
           created_by, updated_at="2024-02-01T10:00:00") -> StaffProfile:
    branch_id, branch_name = branch
    manager_id, manager_name = manager
    street, city, state, zip_code = address
    contact_name, contact_phone, relationship = contact
    return StaffProfile(
        id=id,
        email=f"{first_name}.{last_name}@localstyle.com".lower(),
        name=f"{first_name} {last_name}",
        first_name=first_name,
        last_name=last_name,
        role=role,
        phone_number=phone,
        date_of_birth=dob,
        address=Address(street=street, city=city, state=state, zip_code=zip_code, country="USA"),
        emergency_contact=EmergencyContact(
            name=contact_name, phone_number=contact_phone, relationship=relationship
        ),
        status=status,
        department=department,
        position=position,
        branch_id=branch_id,
        branch_name=branch_name,
        manager=ManagerRef(id=manager_id, name=manager_name),
        employee_id=employee_id,
        hire_date=_ts(hire_date),
        salary=salary,
        is_email_verified=last_login is not None,
        is_phone_verified=last_login is not None,
        last_login=_ts(last_login) if last_login else None,
        permissions=sorted_permissions(role),
        created_at=_ts(hire_date),
        updated_at=_ts(updated_at),
        created_by=created_by,
        updated_by=id if last_login else created_by,
    )


def demo_staff() -> list[StaffProfile]:
    no_branch = (None, None)
    downtown_la = ("branch_001", "Downtown LA Store")
    sf_union_square = ("branch_002", "SF Union Square")
    sarah = ("staff_001", "Sarah Johnson")
    return [
        _staff("staff_001", "Sarah", "Johnson", StaffRole.BRAND_OWNER, StaffStatus.ACTIVE,
               "Executive", "Brand Owner", no_branch, (None, None), "EMP001",
               "2020-01-15T00:00:00", 120000, "+1 (555) 234-5678", "1985-03-15",
               ("123 Fashion Ave", "New York", "NY", "10001"),
               ("Michael Johnson", "+1 (555) 234-5679", "Spouse"),
               "2024-02-10T15:30:00", "system"),
        _staff("staff_002", "Marcus", "Chen", StaffRole.BRANCH_MANAGER, StaffStatus.ACTIVE,
               "Operations", "Store Manager", downtown_la, sarah, "EMP002",
               "2021-03-01T00:00:00", 75000, "+1 (555) 345-6789", "1990-07-22",
               ("456 Retail Blvd", "Los Angeles", "CA", "90210"),
               ("Lisa Chen", "+1 (555) 345-6780", "Sister"),
               "2024-02-10T14:15:00", "staff_001"),
        _staff("staff_003", "Emma", "Rodriguez", StaffRole.STAFF, StaffStatus.ACTIVE,
               "Sales", "Sales Associate", downtown_la, ("staff_002", "Marcus Chen"), "EMP003",
               "2022-06-15T00:00:00", 45000, "+1 (555) 456-7890", "1995-11-08",
               ("789 Commerce St", "Los Angeles", "CA", "90210"),
               ("Carlos Rodriguez", "+1 (555) 456-7891", "Father"),
               "2024-02-10T16:45:00", "staff_002"),
        _staff("staff_004", "David", "Kim", StaffRole.STAFF, StaffStatus.PENDING,
               "Sales", "Sales Associate", sf_union_square, ("staff_005", "Jennifer Martinez"), "EMP004",
               "2024-02-01T00:00:00", 45000, "+1 (555) 567-8901", "1993-04-12",
               ("321 Style Lane", "San Francisco", "CA", "94102"),
               ("Grace Kim", "+1 (555) 567-8902", "Mother"),
               None, "staff_001", updated_at="2024-02-01T00:00:00"),
        _staff("staff_005", "Jennifer", "Martinez", StaffRole.BRANCH_MANAGER, StaffStatus.ACTIVE,
               "Operations", "Store Manager", sf_union_square, sarah, "EMP005",
               "2021-08-01T00:00:00", 78000, "+1 (555) 678-9012", "1988-09-25",
               ("654 Market St", "San Francisco", "CA", "94105"),
               ("Roberto Martinez", "+1 (555) 678-9013", "Husband"),
               "2024-02-10T13:20:00", "staff_001"),
    ]


def demo_invites() -> list[StaffInvite]:
    """One live pending invite (expiring a week from now) and one long expired."""
    return [
        StaffInvite(
            id="invite_001",
            email="alice.smith@example.com",
            first_name="Alice",
            last_name="Smith",
            role=StaffRole.STAFF,
            branch_id="branch_001",
            branch_name="Downtown LA Store",
            position="Sales Associate",
            department="Sales",
            invited_by="Sarah Johnson",
            message="Welcome to the LocalStyle team! We're excited to have you join us.",
            status=InviteStatus.PENDING,
            sent_at=_ts("2024-02-08T10:00:00"),
            expires_at=utcnow() + timedelta(days=7),
            created_at=_ts("2024-02-08T10:00:00"),
        ),
        StaffInvite(
            id="invite_002",
            email="bob.wilson@example.com",
            first_name="Bob",
            last_name="Wilson",
            role=StaffRole.BRANCH_MANAGER,
            branch_id="branch_003",
            branch_name="Chicago North",
            position="Store Manager",
            department="Operations",
            invited_by="Sarah Johnson",
            status=InviteStatus.EXPIRED,
            sent_at=_ts("2024-01-25T10:00:00"),
            expires_at=_ts("2024-02-01T10:00:00"),
            created_at=_ts("2024-01-25T10:00:00"),
        ),
    ]


def _product(number, name, description, price, sku, category, colors, sizes, status, tags,
             image_seed, added, is_price_visible=True) -> Product:
    return Product(
        id=f"prod_{number:03d}",
        name=name,
        description=description,
        price=price,
        is_price_visible=is_price_visible,
        sku=sku,
        category=category,
        colors=colors,
        sizes=sizes,
        status=status,
        tags=tags,
        image_urls=[f"https://picsum.photos/seed/{image_seed}{number}{suffix}/300/400" for suffix in "abcde"],
        date_added=_ts(added),
    )


def demo_products() -> list[Product]:
    published = ProductStatus.PUBLISHED
    apparel = ["XS", "S", "M", "L", "XL"]
    return [
        _product(1, "Classic Cotton T-Shirt",
                 "Premium 100% cotton t-shirt with comfortable fit and modern design. Perfect for casual wear.",
                 29.99, "LS-TEE-001", "T-Shirts", ["Black", "White", "Navy", "Gray"], apparel,
                 published, ["casual", "cotton", "basic", "unisex"], "tshirt", "2024-01-15T10:30:00"),
        _product(2, "Slim Fit Dark Wash Jeans",
                 "Modern slim-fit jeans crafted from premium denim with stretch comfort technology.",
                 89.99, "LS-JNS-002", "Jeans", ["Dark Blue", "Black", "Medium Blue"],
                 ["28", "30", "32", "34", "36", "38"],
                 published, ["denim", "slim-fit", "premium", "stretch"], "jeans", "2024-01-18T14:45:00"),
        _product(3, "Urban Runner Sneakers",
                 "Lightweight athletic sneakers with responsive cushioning and breathable mesh upper.",
                 129.99, "LS-SNK-003", "Sneakers", ["White/Black", "All Black", "Gray/Blue"],
                 ["7", "8", "9", "10", "11", "12"],
                 published, ["athletic", "running", "comfortable", "breathable"], "sneaker", "2024-01-20T09:15:00"),
        _product(4, "Elegant Evening Dress",
                 "Sophisticated midi dress perfect for formal occasions with flowing silhouette and premium fabric.",
                 159.99, "LS-DRS-004", "Dresses", ["Black", "Navy", "Burgundy", "Emerald"], apparel,
                 published, ["formal", "elegant", "midi", "evening"], "dress", "2024-01-22T16:20:00",
                 is_price_visible=False),
        _product(5, "Merino Wool Sweater",
                 "Luxurious merino wool sweater with classic crew neck design. Soft, warm, and naturally odor-resistant.",
                 119.99, "LS-SWR-005", "Sweaters", ["Charcoal", "Cream", "Forest Green", "Rust"],
                 ["S", "M", "L", "XL", "XXL"],
                 published, ["wool", "luxury", "warm", "crew-neck"], "sweater", "2024-01-25T11:10:00"),
        _product(6, "Professional Leather Boots",
                 "Handcrafted leather boots perfect for business casual wear. Durable construction with comfort insole.",
                 249.99, "LS-BTS-006", "Boots", ["Brown", "Black", "Tan"],
                 ["7", "8", "9", "10", "11", "12", "13"],
                 ProductStatus.DRAFT, ["leather", "professional", "durable", "handcrafted"], "boots",
                 "2024-01-28T13:45:00"),
        _product(7, "Summer Beach Shorts",
                 "Lightweight quick-dry shorts perfect for beach activities and summer adventures. Multiple pockets included.",
                 39.99, "LS-SHT-007", "Shorts", ["Navy", "Olive", "Coral", "Sky Blue"], ["S", "M", "L", "XL"],
                 published, ["summer", "beach", "quick-dry", "lightweight"], "shorts", "2024-02-01T08:30:00"),
        _product(8, "Designer Silk Blouse",
                 "Elegant silk blouse with modern cut and sophisticated draping. Perfect for office or special occasions.",
                 179.99, "LS-BLS-008", "Blouses", ["White", "Blush Pink", "Midnight Blue", "Champagne"],
                 ["XS", "S", "M", "L"],
                 published, ["silk", "designer", "elegant", "office-wear"], "blouse", "2024-02-03T15:20:00",
                 is_price_visible=False),
        _product(9, "Athletic Performance Jacket",
                 "High-performance athletic jacket with moisture-wicking technology and wind-resistant outer shell.",
                 199.99, "LS-JKT-009", "Jackets", ["Black/Red", "Navy/White", "Gray/Green"],
                 ["S", "M", "L", "XL", "XXL"],
                 published, ["athletic", "performance", "moisture-wicking", "wind-resistant"], "jacket",
                 "2024-02-05T12:00:00"),
        _product(10, "Vintage Leather Handbag",
                 "Timeless leather handbag with vintage-inspired design. Multiple compartments and adjustable strap.",
                 299.99, "LS-BAG-010", "Accessories", ["Cognac", "Black", "Deep Brown"], ["One Size"],
                 ProductStatus.ARCHIVED, ["leather", "vintage", "handbag", "accessories"], "handbag",
                 "2024-02-08T10:15:00"),
    ]


def build_collections(seed: bool = True) -> Collections:
    """Fresh stores, optionally loaded with the demo fixtures."""
    if not seed:
        return Collections()
    return Collections(
        categories=InMemoryRepository(prefix="", width=0, items=demo_categories()),
        staff=InMemoryRepository(prefix="staff_", items=demo_staff()),
        invites=InMemoryRepository(prefix="invite_", items=demo_invites()),
        products=InMemoryRepository(prefix="prod_", items=demo_products()),
    )

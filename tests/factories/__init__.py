"""Faker-backed builders for test data.

Each ``make_*`` helper persists a model with realistic random values; pass
keyword arguments to pin the fields a test cares about.
"""

from decimal import Decimal

from faker import Faker

from core.enums import UserRole
from core.models import Category, Order, OrderItem, Product, Review, User
from core.schemas.order import LineItem
from core.services.price_calculator import calc_prices

fake = Faker()

DEFAULT_PASSWORD = "Str0ng!Passw0rd"


def make_user(
    *, admin: bool = False, password: str = DEFAULT_PASSWORD, **overrides
) -> User:
    """Create a user whose password is ``password``."""
    fields = {
        "username": fake.unique.user_name()[:50],
        "email": fake.unique.email(),
        "role": UserRole.ADMIN.value if admin else UserRole.USER.value,
    }
    fields.update(overrides)
    user = User(**fields)
    user.set_password(password)
    user.save()
    return user


def make_category(**overrides) -> Category:
    """Create a category with a unique name."""
    fields = {
        "name": f"{fake.word().capitalize()} {fake.unique.random_int(1, 10**6)}",
        "description": fake.sentence(),
    }
    fields.update(overrides)
    return Category.objects.create(**fields)


def make_product(**overrides) -> Product:
    """Create an in-stock product; a category is created unless given."""
    if "category" not in overrides:
        overrides["category"] = make_category()
    fields = {
        "name": fake.unique.catch_phrase()[:255],
        "image": f"/uploads/image-{fake.unix_time():.0f}.png",
        "brand": fake.company()[:255],
        "quantity": fake.random_int(min=1, max=50),
        "description": fake.paragraph(),
        "price": Decimal(fake.random_int(min=100, max=99999)) / 100,
        "count_in_stock": fake.random_int(min=1, max=50),
    }
    fields.update(overrides)
    return Product.objects.create(**fields)


def make_review(
    product: Product, user: User, rating: int = 4, **overrides
) -> Review:
    """Create a review row without touching the product's rating summary."""
    fields = {
        "name": user.username,
        "rating": rating,
        "comment": fake.sentence(),
    }
    fields.update(overrides)
    return Review.objects.create(product=product, user=user, **fields)


def make_order(
    user: User, lines: list[tuple[Product, int]] | None = None, **overrides
) -> Order:
    """Create an order for ``user`` priced from ``lines`` of (product, qty)."""
    if lines is None:
        lines = [(make_product(), 1)]
    totals = calc_prices(
        LineItem(price=product.price, qty=qty) for product, qty in lines
    )
    fields = {
        "shipping_address": fake.street_address(),
        "shipping_city": fake.city()[:100],
        "shipping_postal_code": fake.postcode()[:20],
        "shipping_country": fake.country()[:100],
        "payment_method": "PayPal",
        **totals.as_decimals(),
    }
    fields.update(overrides)
    order = Order.objects.create(user=user, **fields)
    for product, qty in lines:
        OrderItem.objects.create(
            order=order,
            product=product,
            name=product.name,
            image=product.image,
            qty=qty,
            price=product.price,
        )
    return order

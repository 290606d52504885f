import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.errors import NotFound, ValidationError
from storefront.models.product import Product
from storefront.services.sanitize import clean_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price")


def _to_price(value) -> Decimal:
    try:
        price = Decimal(str(value)).quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValidationError("Invalid price")
    if not price.is_finite() or price < 0:
        raise ValidationError("Invalid price")
    return price


def _apply(product: Product, fields: dict) -> None:
    if "name" in fields:
        name = clean_text(fields["name"])
        if not name:
            raise ValidationError("name cannot be empty")
        product.name = name
    if "description" in fields:
        product.description = clean_text(fields["description"]) or ""
    if "price" in fields:
        product.price = _to_price(fields["price"])
    if "image_url" in fields:
        product.image_url = (fields["image_url"] or "").strip() or None


def list_products(db: Session, limit: int | None = None, offset: int = 0) -> list[Product]:
    stmt = select(Product).order_by(Product.id.asc()).offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def get_product(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if not product:
        raise NotFound("Product not found")
    return product


def create_product(db: Session, fields: dict) -> Product:
    product = Product(description="")
    _apply(product, fields)
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product id=%s", product.id)
    return product


def update_product(db: Session, product_id: int, changes: dict) -> Product:
    product = get_product(db, product_id)
    for field in REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} cannot be null")
    _apply(product, changes)
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)
    db.delete(product)
    db.commit()
    logger.info("Deleted product id=%s", product_id)

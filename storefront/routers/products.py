from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.db import get_db
from storefront.deps import require_admin
from storefront.schemas import (
    MessageOut,
    ProductCreatedOut,
    ProductIn,
    ProductOut,
    ProductUpdateIn,
)
from storefront.services import products as products_service

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductOut])
def product_list(
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    return products_service.list_products(db, limit=limit, offset=offset)


@router.get("/{product_id}", response_model=ProductOut)
def product_detail(product_id: int, db: Session = Depends(get_db)):
    return products_service.get_product(db, product_id)


@router.post("", response_model=ProductCreatedOut, status_code=status.HTTP_201_CREATED)
def product_create(
    payload: ProductIn,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    product = products_service.create_product(db, payload.model_dump())
    return {"message": "Product created", "product": ProductOut.model_validate(product)}


@router.put("/{product_id}", response_model=ProductOut)
@router.patch("/{product_id}", response_model=ProductOut)
def product_update(
    product_id: int,
    payload: ProductUpdateIn,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return products_service.update_product(db, product_id, payload.model_dump(exclude_unset=True))


@router.delete("/{product_id}", response_model=MessageOut)
def product_delete(
    product_id: int,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    products_service.delete_product(db, product_id)
    return {"message": "Product deleted"}

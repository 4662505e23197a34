from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agrihub.auth.security import is_input_supplier
from agrihub.db.session import get_db
from agrihub.models.product import Product
from agrihub.models.user import User
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.product import Product as ProductSchema, ProductCreate, ProductListing
from agrihub.schemas.user import TokenData

router = APIRouter()

@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="List a farm input for sale. Requires the input_supplier role."
)
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_input_supplier)
):
    """
    Create a new product owned by the calling supplier.

    - **name**: Product name (required)
    - **category**: Product category such as seed, fertilizer or pesticide (required)
    - **pricePerUnit**: Price for one unit (required)
    - **unit**: Measurement unit (kg, packet, litre, ...)
    - **stockQuantity**: Units in stock (default 0)
    """
    db_product = Product(**product.model_dump(), supplier_id=current_user.user_id)
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

@router.get(
    "",
    response_model=PaginatedResponse[ProductListing],
    summary="Get products in stock",
    description="Retrieve a paginated list of products that still have stock."
)
def read_products(
    page: int = Query(1, ge=1, description="Page number starting from 1"),
    limit: int = Query(10, ge=1, le=100, description="Items per page (1-100)"),
    category: Optional[str] = Query(None, description="Filter by category"),
    search: Optional[str] = Query(None, description="Search in product name"),
    db: Session = Depends(get_db),
):
    query = (
        db.query(Product, User)
        .join(User, Product.supplier_id == User.id)
        .filter(Product.stock_quantity > 0)
    )

    if category:
        query = query.filter(Product.category == category)
    if search:
        query = query.filter(Product.name.ilike(f"%{search}%"))

    total_count = query.count()
    rows = (
        query.order_by(Product.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    items = [
        ProductListing(
            **ProductSchema.model_validate(product).model_dump(),
            supplier_name=supplier.name,
            supplier_phone=supplier.phone,
            supplier_location=supplier.location,
        )
        for product, supplier in rows
    ]
    return PaginatedResponse[ProductListing](
        items=items,
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )

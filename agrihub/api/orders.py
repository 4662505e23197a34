import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from agrihub.auth.security import get_current_identity
from agrihub.core.errors import ForbiddenError, InternalError, NotFoundError, ValidationError
from agrihub.db.session import get_db
from agrihub.models.order import Order, OrderItem
from agrihub.models.produce import Produce
from agrihub.models.product import Product
from agrihub.models.user import User, UserRole
from agrihub.schemas.order import Order as OrderSchema, OrderCreate, OrderItemCreate, OrderWithItems
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.user import TokenData

logger = logging.getLogger(__name__)

router = APIRouter()


def resolve_unit_price(db: Session, item: OrderItemCreate) -> Decimal:
    """Current catalog price of the referenced produce (per kg) or product (per unit)."""
    if item.type == "produce":
        price = db.query(Produce.price_per_kg).filter(Produce.id == item.item_id).scalar()
        label = "Produce"
    else:
        price = db.query(Product.price_per_unit).filter(Product.id == item.item_id).scalar()
        label = "Product"
    if price is None:
        raise NotFoundError(f"{label} {item.item_id} not found")
    return Decimal(str(price))


@router.post("", response_model=OrderWithItems, status_code=status.HTTP_201_CREATED)
def create_order(
    order: OrderCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    if not order.items:
        raise ValidationError("Order must contain at least one item")

    # One seller per order
    seller_id = order.items[0].seller_id
    if any(item.seller_id != seller_id for item in order.items):
        raise ValidationError("All items in an order must come from the same seller")
    if db.query(User.id).filter(User.id == seller_id).first() is None:
        raise NotFoundError("Seller not found")

    try:
        db_order = Order(
            buyer_id=current_user.user_id,
            seller_id=seller_id,
            total_amount=Decimal("0"),
            delivery_address=order.delivery_address,
        )
        db.add(db_order)
        db.flush()  # Flush to get the ID without committing

        total_amount = Decimal("0")
        for item in order.items:
            unit_price = resolve_unit_price(db, item)
            item_total = unit_price * item.quantity
            total_amount += item_total

            db.add(OrderItem(
                order_id=db_order.id,
                produce_id=item.item_id if item.type == "produce" else None,
                product_id=item.item_id if item.type == "product" else None,
                quantity=item.quantity,
                unit_price=unit_price,
                total_price=item_total,
            ))

        db_order.total_amount = total_amount
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Order creation failed")
        raise InternalError("Internal server error")

    db.refresh(db_order)
    logger.info(f"Order {db_order.id} created for buyer {current_user.user_id}: {total_amount}")
    return db_order


@router.get("", response_model=PaginatedResponse[OrderSchema])
def read_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    query = db.query(Order).filter(
        or_(Order.buyer_id == current_user.user_id, Order.seller_id == current_user.user_id)
    )
    total_count = query.count()
    orders = (
        query.order_by(Order.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return PaginatedResponse[OrderSchema](
        items=[OrderSchema.model_validate(o) for o in orders],
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )


@router.get("/{order_id}", response_model=OrderWithItems)
def read_order(
    order_id: str,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    db_order = (
        db.query(Order)
        .options(selectinload(Order.items))
        .filter(Order.id == order_id)
        .first()
    )
    if db_order is None:
        raise NotFoundError("Order not found")

    # Only the buyer, the seller or an admin can see the order
    if current_user.role != UserRole.admin and current_user.user_id not in (
        db_order.buyer_id,
        db_order.seller_id,
    ):
        raise ForbiddenError("Not enough permissions")

    return db_order

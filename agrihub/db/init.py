import logging
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from agrihub.db.session import engine, Base
from agrihub.models.user import User
from agrihub.models.equipment import Equipment, EquipmentBooking
from agrihub.models.product import Product
from agrihub.models.produce import Produce
from agrihub.models.order import Order, OrderItem
from agrihub.models.transport import TransportRequest
from agrihub.models.payment import Payment

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {"name": "Rajesh Kumar", "phone": "9876543210", "role": "farmer", "location": "Punjab"},
    {"name": "Priya Sharma", "phone": "9876543211", "role": "equipment_provider", "location": "Haryana"},
    {"name": "Amit Patel", "phone": "9876543212", "role": "consumer", "location": "Gujarat"},
    {"name": "Sunita Devi", "phone": "9876543213", "role": "input_supplier", "location": "UP"},
    {"name": "Admin User", "phone": "9876543214", "role": "admin", "location": "Delhi"},
]

DEMO_EQUIPMENT = [
    {
        "name": "John Deere 5310 Tractor",
        "type": "tractor",
        "description": "55 HP 4WD Tractor with excellent fuel efficiency",
        "specifications": {"horsepower": "55 HP", "fuelType": "diesel", "brand": "John Deere"},
        "base_rate_per_day": 1500,
        "location": "Haryana, India",
    },
    {
        "name": "Kubota Combine Harvester",
        "type": "harvester",
        "description": "Modern combine harvester for wheat and rice",
        "specifications": {"brand": "Kubota", "capacity": "50 acres/day"},
        "base_rate_per_day": 2500,
        "location": "Haryana, India",
    },
]

DEMO_PRODUCE = [
    {
        "name": "Fresh Organic Tomatoes",
        "category": "vegetables",
        "description": "Fresh, organically grown tomatoes from Punjab farms",
        "price_per_kg": 45.50,
        "stock_kg": 500,
        "harvest_date": date(2024, 10, 15),
        "organic": True,
    },
    {
        "name": "Premium Basmati Rice",
        "category": "grains",
        "description": "High quality basmati rice, aged for perfect aroma",
        "price_per_kg": 120.00,
        "stock_kg": 1000,
        "harvest_date": date(2024, 9, 20),
        "organic": False,
    },
]


def init_db():
    # Create all tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized successfully")


def seed_demo_data(db: Session) -> bool:
    """Insert the demo roster and catalog into an empty database.

    Returns False without writing anything when any user already exists, so
    restarts never duplicate the demo rows.
    """
    if db.query(func.count(User.id)).scalar():
        logger.info("Sample data already exists")
        return False

    users = {}
    for user_data in DEMO_USERS:
        user = User(**user_data, is_verified=True)
        db.add(user)
        users[user.role] = user
    db.flush()

    for equipment_data in DEMO_EQUIPMENT:
        db.add(Equipment(**equipment_data, owner_id=users["equipment_provider"].id))
    for produce_data in DEMO_PRODUCE:
        db.add(Produce(**produce_data, farmer_id=users["farmer"].id))

    db.commit()
    logger.info("Sample data seeded successfully")
    return True

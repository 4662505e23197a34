from agrihub.db.init import DEMO_USERS, init_db, seed_demo_data
from agrihub.models.equipment import Equipment
from agrihub.models.produce import Produce
from agrihub.models.user import User


def test_init_db_is_idempotent(db):
    init_db()
    init_db()
    assert db.query(User).count() == 0


def test_seed_inserts_demo_roster_once(db):
    assert seed_demo_data(db) is True
    assert seed_demo_data(db) is False

    users = db.query(User).all()
    assert len(users) == len(DEMO_USERS) == 5
    assert {u.role for u in users} == {"farmer", "equipment_provider", "consumer", "input_supplier", "admin"}
    assert all(u.is_verified for u in users)

    provider = db.query(User).filter(User.role == "equipment_provider").one()
    farmer = db.query(User).filter(User.role == "farmer").one()
    assert {e.owner_id for e in db.query(Equipment).all()} == {provider.id}
    assert db.query(Produce).filter(Produce.farmer_id == farmer.id).count() == 2


def test_seed_skips_when_any_user_exists(db):
    db.add(User(name="Existing", phone="9999999999", role="consumer"))
    db.commit()

    assert seed_demo_data(db) is False
    assert db.query(User).count() == 1
    assert db.query(Equipment).count() == 0


def test_seeded_catalog_is_listed(client, db):
    seed_demo_data(db)

    equipment = client.get("/api/v1/equipment").json()
    assert equipment["pagination"]["total"] == 2
    produce = client.get("/api/v1/produce", params={"organic": "true"}).json()
    assert [p["name"] for p in produce["items"]] == ["Fresh Organic Tomatoes"]


def test_cascade_delete_removes_owned_rows(db):
    seed_demo_data(db)
    provider = db.query(User).filter(User.role == "equipment_provider").one()

    db.delete(provider)
    db.commit()

    assert db.query(Equipment).count() == 0
    assert db.query(Produce).count() == 2

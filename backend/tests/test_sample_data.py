from datetime import UTC, datetime

from loyalty.models.customer import Customer
from loyalty.models.transaction import CustomerTransaction
from loyalty.services.rewards_service import RewardsService
from loyalty.services.sample_data import seed_sample_data


def test_seed_inserts_demo_data(db_session):
    assert seed_sample_data(db_session, now=datetime(2024, 12, 1, 12, 0)) is True
    assert db_session.query(Customer).count() == 3
    assert db_session.query(CustomerTransaction).count() == 11


def test_seed_skips_populated_database(db_session):
    seed_sample_data(db_session)
    assert seed_sample_data(db_session) is False
    assert db_session.query(Customer).count() == 3


def test_seeded_totals(db_session):
    seed_sample_data(db_session, now=datetime(2024, 12, 1, 12, 0))
    service = RewardsService(db_session, tz=UTC)
    assert service.calculate_total_rewards("CUST001").total_points == 366
    assert service.calculate_total_rewards("CUST002").total_points == 190
    assert service.calculate_total_rewards("CUST003").total_points == 500

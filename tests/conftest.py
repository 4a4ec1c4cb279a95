import pytest

from record_store import RecordStore
from subscriber_schema import Plan, Subscriber
from tariff_catalog import PlanCatalog, default_catalog


@pytest.fixture(scope="function")
def catalog() -> PlanCatalog:
    return default_catalog()


@pytest.fixture(scope="function")
def limited_plan() -> Plan:
    return Plan(name="Limited5", minute_quota=10, data_quota=5.0, sms_quota=2)


@pytest.fixture(scope="function")
def unlimited_plan() -> Plan:
    return Plan(name="Unlimited")


@pytest.fixture(scope="function")
def limited_subscriber(limited_plan: Plan) -> Subscriber:
    return Subscriber(name="Ivan", phone_number="+38 099 123 4567", plan=limited_plan, data_used=3.0)


@pytest.fixture(scope="function")
def store_path(tmp_path):
    return tmp_path / "users.txt"


@pytest.fixture(scope="function")
def store(store_path, catalog: PlanCatalog) -> RecordStore:
    return RecordStore(store_path, catalog)

import logging
from typing import Iterable, Iterator

from subscriber_schema import Plan

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


DEFAULT_PLANS: tuple[Plan, ...] = (
    Plan(name="Basic", minute_quota=10, data_quota=5.0, sms_quota=2),
    Plan(name="Premium", minute_quota=100, data_quota=50.0, sms_quota=20),
    Plan(name="Turbo", minute_quota=200, data_quota=100.0, sms_quota=50),
    Plan(name="Super Plus", minute_quota=500, data_quota=200.0, sms_quota=100),
    Plan(name="Unlimited"),
)


class PlanCatalog:
    """
    Упорядоченный неизменяемый список тарифов. Тариф с индексом 0
    используется как тариф по умолчанию при загрузке записей.
    """

    def __init__(self, plans: Iterable[Plan]):
        self._plans: tuple[Plan, ...] = tuple(plans)
        if not self._plans:
            raise ValueError("Каталог тарифов не может быть пустым")

        self._by_name: dict[str, Plan] = {}
        for plan in self._plans:
            if plan.name in self._by_name:
                raise ValueError(f"Тариф с именем '{plan.name}' уже есть в каталоге")
            self._by_name[plan.name] = plan

    def __iter__(self) -> Iterator[Plan]:
        return iter(self._plans)

    def __len__(self) -> int:
        return len(self._plans)

    @property
    def plans(self) -> tuple[Plan, ...]:
        return self._plans

    @property
    def default(self) -> Plan:
        return self._plans[0]

    def lookup_by_name(self, name: str) -> Plan:
        plan = self._by_name.get(name)
        if plan is None:
            logger.debug(f"Тариф '{name}' не найден, используется тариф по умолчанию '{self.default.name}'")
            return self.default
        return plan

    def lookup_by_index(self, index: int) -> Plan | None:
        # нумерация с 1, как в меню оператора
        if 1 <= index <= len(self._plans):
            return self._plans[index - 1]
        return None


def default_catalog() -> PlanCatalog:
    return PlanCatalog(DEFAULT_PLANS)

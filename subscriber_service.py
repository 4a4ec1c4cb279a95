import logging
from typing import Iterable, Sequence

from subscriber_schema import Plan, Subscriber, UsageListener
from tariff_catalog import PlanCatalog

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def internet_limit_notifier(subscriber: Subscriber) -> None:
    plan_name = subscriber.plan.name if subscriber.plan else None
    logger.warning(
        f"Абонент {subscriber.name} ({subscriber.phone_number}) превысил лимит интернета по тарифу {plan_name}"
    )


def attach_listeners(subscribers: Iterable[Subscriber], listeners: Sequence[UsageListener]) -> None:
    for subscriber in subscribers:
        for listener in listeners:
            subscriber.add_listener(listener)


def list_all(subscribers: Sequence[Subscriber]) -> tuple[Subscriber, ...]:
    return tuple(subscribers)


def create(
        name: str,
        phone_number: str,
        plan: Plan | None,
        initial_usage: float = 0.0,
        listeners: Sequence[UsageListener] = (),
) -> Subscriber:
    if not name.strip():
        raise ValueError("Имя абонента не может быть пустым")
    if not phone_number.strip():
        raise ValueError("Номер телефона не может быть пустым")

    subscriber = Subscriber(
        name=name,
        phone_number=phone_number,
        plan=plan,
        data_used=initial_usage,
    )
    for listener in listeners:
        subscriber.add_listener(listener)

    logger.info(f"Создан абонент {name} ({phone_number}), тариф {plan.name if plan else None}, расход {initial_usage} GB")
    return subscriber


def lookup_plan_by_index(catalog: PlanCatalog, index: int) -> Plan | None:
    return catalog.lookup_by_index(index)


def edit(
        subscriber: Subscriber,
        new_phone_number: str | None = None,
        new_plan: Plan | None = None,
        new_usage: float | None = None,
) -> Subscriber:
    """None или пустая строка в любом из аргументов означает "без изменений"."""
    # расход первым: при ошибке валидации остальные поля не меняются
    if new_usage is not None:
        subscriber.set_usage(new_usage)
    if new_phone_number is not None and new_phone_number.strip():
        subscriber.phone_number = new_phone_number
    if new_plan is not None:
        subscriber.plan = new_plan

    logger.info(
        f"Абонент {subscriber.name} обновлён: телефон {subscriber.phone_number}, "
        f"тариф {subscriber.plan.name if subscriber.plan else None}, расход {subscriber.data_used} GB"
    )
    return subscriber

import logging
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from subscriber_schema import Subscriber
from tariff_catalog import PlanCatalog

FIELD_SEPARATOR = "|"
FIELD_COUNT = 4

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def format_record_line(subscriber: Subscriber) -> str:
    # символ '|' внутри полей не экранируется: такая строка при чтении будет отброшена
    plan_name = subscriber.plan.name if subscriber.plan is not None else ""
    return FIELD_SEPARATOR.join(
        (subscriber.name, subscriber.phone_number, plan_name, str(subscriber.data_used))
    )


def parse_record_line(line: str, catalog: PlanCatalog) -> Subscriber | None:
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        logger.debug(f"Строка пропущена, ожидалось {FIELD_COUNT} поля, получено {len(parts)}: {line!r}")
        return None

    name, phone_number, plan_name, raw_data_used = parts
    try:
        data_used = float(raw_data_used)
    except ValueError:
        logger.warning(f"Строка пропущена, расход не является числом: {line!r}")
        return None

    try:
        return Subscriber(
            name=name,
            phone_number=phone_number,
            plan=catalog.lookup_by_name(plan_name),
            data_used=data_used,
        )
    except ValidationError as e:
        logger.warning(f"Строка пропущена, некорректные данные абонента: {line!r}. Ошибка: {e}")
        return None


class RecordStore:
    """Хранилище абонентов в текстовом файле, одна запись на строку."""

    def __init__(self, path: Path | str, catalog: PlanCatalog):
        self.path = Path(path)
        self.catalog = catalog

    def load(self) -> List[Subscriber]:
        subscribers: List[Subscriber] = []
        try:
            logger.info(f"Чтение файла абонентов: {self.path}")
            with open(self.path, 'rb') as f:
                for line_number, raw_line in enumerate(f, start=1):
                    try:
                        line = raw_line.decode('utf-8')
                    except UnicodeDecodeError as e:
                        logger.warning(f"Строка {line_number} в файле {self.path} пропущена, не UTF-8: {raw_line!r}. Ошибка: {e}")
                        continue
                    if not line.strip():
                        continue
                    subscriber = parse_record_line(line, self.catalog)
                    if subscriber is not None:
                        subscribers.append(subscriber)
        except FileNotFoundError:
            logger.info(f"Файл {self.path} не найден, список абонентов пуст")
            return []
        except OSError as e:
            logger.error(f"Ошибка при чтении файла {self.path}: {e}", exc_info=True)
            raise

        logger.info(f"Прочитано {len(subscribers)} абонентов из файла {self.path}")
        return subscribers

    def save(self, subscribers: Iterable[Subscriber]) -> bool:
        lines = [format_record_line(subscriber) for subscriber in subscribers]
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            logger.error(f"Ошибка при записи файла {self.path}: {e}", exc_info=True)
            return False

        logger.info(f"Сохранено {len(lines)} абонентов в файл {self.path}")
        return True

import logging
import math
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


class Plan(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    minute_quota: int | None = Field(default=None, ge=0)
    data_quota: float | None = Field(default=None, ge=0)
    sms_quota: int | None = Field(default=None, ge=0)

    @property
    def is_unlimited_data(self) -> bool:
        return self.data_quota is None


UsageListener = Callable[["Subscriber"], None]


class Subscriber(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str
    phone_number: str
    plan: Plan | None = None
    data_used: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    _listeners: list[UsageListener] = PrivateAttr(default_factory=list)

    def add_listener(self, listener: UsageListener) -> None:
        self._listeners.append(listener)

    @property
    def listeners(self) -> tuple[UsageListener, ...]:
        return tuple(self._listeners)

    def record_usage(self, amount: float) -> bool:
        """
        Накопление расхода интернета. Если с учётом amount лимит тарифа
        будет превышен, расход не применяется целиком, а слушатели
        вызываются по порядку регистрации.
        """
        if not math.isfinite(amount):
            raise ValueError(f"Расход должен быть конечным числом: {amount}")
        if amount < 0:
            raise ValueError(f"Расход не может быть отрицательным: {amount}")

        if self.plan is None or self.plan.data_quota is None:
            self.data_used += amount
            return True

        if self.data_used + amount > self.plan.data_quota:
            logger.info(
                f"Расход {amount} GB для {self.name} отклонён: "
                f"{self.data_used} + {amount} > {self.plan.data_quota} (тариф {self.plan.name})"
            )
            for listener in self._listeners:
                listener(self)
            return False

        self.data_used += amount
        return True

    def set_usage(self, value: float) -> None:
        # административная правка: лимит тарифа не проверяется, отрицательное или бесконечное значение даёт ValidationError
        self.data_used = value

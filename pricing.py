from typing import Callable

from subscriber_schema import Plan

CostFunction = Callable[[Plan], float]


def base_cost(plan: Plan) -> float:
    return plan.data_quota if plan.data_quota is not None else 0.0


def with_discount(cost: CostFunction, discount: float) -> CostFunction:
    def discounted(plan: Plan) -> float:
        return cost(plan) - discount

    return discounted


def describe(plan: Plan, discounted: bool = False) -> str:
    if discounted:
        return f"{plan.name} (with discount)"
    return plan.name

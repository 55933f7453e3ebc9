import math
from typing import Optional

Numero = Optional[float]


def _is_finite(*values: Numero) -> bool:
    for value in values:
        if value is None:
            return False
        try:
            if not math.isfinite(value):
                return False
        except TypeError:
            return False
    return True


def calc_percentage_interest(interest: float) -> float:
    return interest / 100


def calc_present_value(rate: Numero, periods: Numero, payment: Numero) -> float:
    """
    Present value of an ordinary annuity.

    PV = payment * (1 - (1 + rate) ** -periods) / rate

    Args:
        rate: monthly rate as a fraction (0.015 for 1.5%)
        periods: number of installments
        payment: installment amount

    Returns:
        float: present value, or 0 when any input is null or non-finite
            or the rate is negative
    """
    if not _is_finite(rate, periods, payment):
        return 0.0

    if rate < 0:
        return 0.0

    if rate == 0:
        return float(payment * periods)

    try:
        result = payment * (1 - math.pow(1 + rate, -periods)) / rate
    except (OverflowError, ValueError, ZeroDivisionError):
        return 0.0

    return float(result) if math.isfinite(result) else 0.0


def calc_payment_for_value(rate: Numero, periods: Numero, value: Numero) -> float:
    """
    Installment that amortizes `value` in `periods` months.

    PMT = value * rate * (1 + rate) ** periods / ((1 + rate) ** periods - 1)
    """
    if not _is_finite(rate, periods, value) or periods == 0:
        return 0.0

    if rate < 0:
        return 0.0

    if rate == 0:
        return float(value / periods)

    try:
        factor = math.pow(1 + rate, periods)
        result = value * rate * factor / (factor - 1)
    except (OverflowError, ValueError, ZeroDivisionError):
        return 0.0

    return float(result) if math.isfinite(result) else 0.0


calc_value_for_payment = calc_present_value


def calc_available_amount(present_value: float, due_amount: float) -> float:
    return present_value - due_amount

"""
Trig — обёртки exp / cos / sin / tan над exp_with_convergents

Каждая функция берёт последнюю финальную подходящую дробь (наиболее точное
приближение e^(iθ)) и конвертирует нужную величину в float только на
последнем шаге.

    cos θ = Re e^(iθ)
    sin θ = Im e^(iθ)
    tan θ = Im / Re  (отношение считается точно, затем в float)
"""

from cfrac_trig.core.math.complex_rational import ComplexRational
from cfrac_trig.core.math.rational import DivisionByZero, divide, to_float
from cfrac_trig.expansion.pipeline import DEFAULT_TERMS, exp_with_convergents


def exp(angle: object, terms: int = DEFAULT_TERMS) -> ComplexRational:
    """Приближение e^(iθ) как ComplexRational."""
    return exp_with_convergents(angle, terms).value


def cos(angle: object, terms: int = DEFAULT_TERMS) -> float:
    return exp(angle, terms).to_float().re


def sin(angle: object, terms: int = DEFAULT_TERMS) -> float:
    return exp(angle, terms).to_float().im


def tan(angle: object, terms: int = DEFAULT_TERMS) -> float:
    """
    tan θ как точное отношение Im/Re, конвертированное в float.

    Raises:
        DivisionByZero: Если вещественная часть приближения точно равна нулю
    """
    z = exp(angle, terms)
    if z.re.is_zero():
        raise DivisionByZero(f"tan undefined: real part of e^(i·{angle}) is zero")
    return to_float(divide(z.im, z.re))

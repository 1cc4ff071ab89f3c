"""
Beta formulas and conjugate direction update.

- Fletcher-Reeves: beta = delta_new / delta_old
- Polak-Ribiere:   beta = (delta_new - <r_new, s_old>) / delta_old

where ``delta = <r, s>`` with ``r`` the negative gradient and ``s`` the
(preconditioned) steepest-descent vector.
"""
from enum import Enum
from typing import Tuple, Union

from pyncg.core.exceptions import UnknownBetaFormulaError
from pyncg.core.vector import Vector, clone, dot


class BetaFormula(Enum):
    """Closed set of supported beta update rules."""

    FLETCHER_REEVES = "fletcher_reeves"
    POLAK_RIBIERE = "polak_ribiere"

    @classmethod
    def parse(cls, value: Union["BetaFormula", str]) -> "BetaFormula":
        """
        Resolve an enum member or its name in any common spelling.

        ``"fletcher_reeves"``, ``"Fletcher-Reeves"``, ``"fr"`` and
        ``"polak ribiere"`` are all accepted.

        Raises:
            UnknownBetaFormulaError: For anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            key = _ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise UnknownBetaFormulaError(value)


_ALIASES = {
    "fr": "fletcher_reeves",
    "pr": "polak_ribiere",
    "prp": "polak_ribiere",
}


def compute_beta(
    formula: BetaFormula,
    delta_old: float,
    delta_new: float,
    r_new: Vector,
    steepest_descent_old: Vector,
) -> float:
    """
    Compute beta for the configured formula.

    A zero ``delta_old`` means the previous point was exactly stationary;
    beta is 0 there and the direction falls back to steepest descent.

    Raises:
        UnknownBetaFormulaError: If *formula* is not a :class:`BetaFormula`.
    """
    if formula is BetaFormula.FLETCHER_REEVES:
        numerator = delta_new
    elif formula is BetaFormula.POLAK_RIBIERE:
        numerator = delta_new - dot(r_new, steepest_descent_old)
    else:
        raise UnknownBetaFormulaError(formula)

    if delta_old == 0:
        return 0.0
    return numerator / delta_old


def update_direction(
    direction: Vector,
    steepest_descent: Vector,
    beta: float,
    iteration: int,
    n: int,
) -> Tuple[Vector, bool]:
    """
    Compute the next search direction.

    Conjugation is broken every *n* iterations and whenever beta is
    negative; the direction is then exactly the steepest-descent vector.

    Returns:
        Tuple of (new_direction, reset). ``new_direction`` never aliases
        *steepest_descent*.
    """
    if iteration % n == 0 or beta < 0:
        return clone(steepest_descent), True
    return steepest_descent + beta * direction, False

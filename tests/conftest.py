import math

import pytest
import sympy as sp

from symbolic_calculus import variable, to_sympy, substitute, evaluate
from symbolic_calculus.expression_tree.utils import get_variables

# Value used for every variable other than the one being differentiated
OTHER_VARIABLE_VALUE = 1.3


@pytest.fixture
def x():
    return variable("x")


@pytest.fixture
def y():
    return variable("y")


@pytest.fixture
def assert_matches_sympy():
    """Check a derivative tree numerically against sympy.diff at a few points."""

    def _check(expr, derivative, wrt="x", points=(0.3, 0.7, 1.9)):
        expected = sp.diff(to_sympy(expr), sp.Symbol(wrt))
        names = set(get_variables(expr)) | set(get_variables(derivative))
        for point in points:
            bindings = {name: OTHER_VARIABLE_VALUE for name in names}
            bindings[wrt] = point
            ours = evaluate(substitute(derivative, bindings))
            theirs = float(expected.subs({sp.Symbol(k): v for k, v in bindings.items()}))
            assert math.isclose(ours, theirs, rel_tol=1e-9, abs_tol=1e-12)

    return _check

"""
Unit tests for the benchmark problems.
"""
import numpy as np
import pytest

from pyncg.problems import (
    BoothProblem,
    ExponentialProblem,
    QuadraticProblem,
    RosenbrockProblem,
    SphereProblem,
    describe,
    get_problem,
    list_problems,
)


def numerical_gradient(f, x, h=1e-6):
    """Central finite differences."""
    grad = np.zeros_like(x)
    for i in range(x.size):
        e = np.zeros_like(x)
        e[i] = h
        grad[i] = (f(x + e) - f(x - e)) / (2 * h)
    return grad


PROBLEMS = [
    QuadraticProblem(),
    SphereProblem(dimension=4),
    RosenbrockProblem(),
    BoothProblem(),
    ExponentialProblem(dimension=3),
]


@pytest.mark.parametrize("problem", PROBLEMS, ids=lambda p: p.get_name())
class TestAnalyticGradients:
    """Analytic gradients must match finite differences."""

    def test_gradient_at_start(self, problem) -> None:
        x = problem.start
        np.testing.assert_allclose(
            problem.gradient(x), numerical_gradient(problem.objective, x), rtol=1e-5, atol=1e-4
        )

    def test_gradient_at_random_point(self, problem) -> None:
        rng = np.random.default_rng(42)
        x = rng.uniform(-1.5, 1.5, size=problem.start.shape)
        np.testing.assert_allclose(
            problem.gradient(x), numerical_gradient(problem.objective, x), rtol=1e-5, atol=1e-4
        )

    def test_minimum_is_stationary(self, problem) -> None:
        np.testing.assert_allclose(problem.gradient(problem.minimum), 0.0, atol=1e-12)


class TestProblems:
    def test_quadratic_values(self) -> None:
        problem = QuadraticProblem()
        assert problem.objective(np.zeros(3)) == pytest.approx(10029.0)
        np.testing.assert_array_equal(problem.gradient(np.zeros(3)), [-4.0, -10.0, -200.0])

    def test_quadratic_empty_center(self) -> None:
        with pytest.raises(ValueError):
            QuadraticProblem(center=[])

    def test_sphere_does_not_start_at_minimum(self) -> None:
        problem = SphereProblem(dimension=3)
        assert problem.objective(problem.start) == pytest.approx(3.0)

    def test_rosenbrock_minimum_value(self) -> None:
        problem = RosenbrockProblem(a=2.0)
        assert problem.objective(problem.minimum) == 0.0

    def test_exponential_minimum_value(self) -> None:
        problem = ExponentialProblem(dimension=5)
        assert problem.objective(problem.minimum) == pytest.approx(5.0)

    @pytest.mark.parametrize("cls", [SphereProblem, ExponentialProblem])
    def test_invalid_dimension(self, cls) -> None:
        with pytest.raises(ValueError):
            cls(dimension=0)

    def test_rosenbrock_invalid_b(self) -> None:
        with pytest.raises(ValueError):
            RosenbrockProblem(b=0.0)


class TestRegistry:
    def test_list_problems(self) -> None:
        assert list_problems() == ["quadratic", "sphere", "rosenbrock", "booth", "exponential"]

    @pytest.mark.parametrize("name", ["quadratic", "sphere", "rosenbrock", "booth", "exponential"])
    def test_get_problem(self, name) -> None:
        assert get_problem(name).get_name() == name

    def test_get_problem_case_insensitive(self) -> None:
        assert isinstance(get_problem("Booth"), BoothProblem)

    def test_get_problem_params(self) -> None:
        problem = get_problem("quadratic", center=[1.0, 2.0])
        np.testing.assert_array_equal(problem.minimum, [1.0, 2.0])
        assert get_problem("sphere", dimension=5).start.shape == (5,)

    def test_unknown_problem(self) -> None:
        with pytest.raises(ValueError, match="Unknown problem: himmelblau"):
            get_problem("himmelblau")

    @pytest.mark.parametrize(
        "name, params",
        [
            ("sphere", {"dimension": [1, 2]}),
            ("exponential", {"dimension": {"n": 3}}),
            ("rosenbrock", {"a": "one"}),
            ("rosenbrock", {"b": None}),
            ("quadratic", {"center": {"x": 1.0}}),
            ("sphere", {"dimension": 0}),
        ],
    )
    def test_invalid_params(self, name, params) -> None:
        with pytest.raises(ValueError, match=f"Invalid parameters for {name}"):
            get_problem(name, **params)

    def test_describe(self) -> None:
        info = describe(get_problem("booth"))
        assert info == {
            "name": "booth",
            "dimension": 2,
            "start": [0.0, 0.0],
            "minimum": [1.0, 3.0],
        }

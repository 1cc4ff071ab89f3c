"""
Integration tests for the ``python -m pyncg`` command line.
"""
import pytest

from pyncg.__main__ import build_parser, main, params_from_args


class TestCli:
    def test_default_run(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "problem     : quadratic" in out
        assert "iterations  : 2" in out
        assert "Converged after 2 iterations" in out

    def test_iteration_cap_exit_code(self, capsys):
        assert main(["--max-iterations", "1", "--safe-min", "1e-300"]) == 1
        assert "Did not converge" in capsys.readouterr().out

    def test_unknown_formula_exit_code(self, capsys):
        assert main(["--formula", "newton"]) == 2
        assert capsys.readouterr().err.startswith("Error:")

    def test_unknown_problem_rejected_by_parser(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--problem", "himmelblau"])
        assert excinfo.value.code == 2

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_print_every(self, capsys):
        assert main(["--problem", "sphere", "--print-every", "1"]) == 0
        out = capsys.readouterr().out
        assert out.count("Iter ") == 2

    def test_yaml_run_file_with_overrides(self, tmp_path, capsys):
        path = tmp_path / "run.yaml"
        path.write_text(
            "problem: exponential\n"
            "beta_formula: polak_ribiere\n"
            "problem_params:\n"
            "  dimension: 3\n"
            "minimizer:\n"
            "  epsilon: 1.0e-9\n"
            "  safe_min: 1.0e-300\n"
        )
        args = build_parser().parse_args(
            ["--config", str(path), "--formula", "fr", "--initial-step", "0.5"]
        )
        params = params_from_args(args)
        assert params.problem == "exponential"
        assert params.beta_formula == "fr"
        assert params.problem_params == {"dimension": 3}
        assert params.config == {"epsilon": 1e-9, "safe_min": 1e-300, "initial_step": 0.5}

        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out
        assert "beta formula: polak_ribiere" in out

    def test_start_override(self, capsys):
        assert main(["--problem", "booth", "--start", "1", "2", "3"]) == 2
        assert "Error:" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "problem_params",
        ["  dimension: [1, 2]\n", "  dimension:\n    n: 3\n"],
    )
    def test_mistyped_problem_params_exit_code(self, tmp_path, capsys, problem_params):
        path = tmp_path / "run.yaml"
        path.write_text("problem: sphere\nproblem_params:\n" + problem_params)
        assert main(["--config", str(path)]) == 2
        assert "Invalid parameters for sphere" in capsys.readouterr().err

    def test_mistyped_tunable_exit_code(self, tmp_path, capsys):
        path = tmp_path / "run.yaml"
        path.write_text("minimizer:\n  epsilon: [1, 2]\n")
        assert main(["--config", str(path)]) == 2
        assert "Invalid value for epsilon" in capsys.readouterr().err

    def test_mistyped_start_point_exit_code(self, tmp_path, capsys):
        path = tmp_path / "run.yaml"
        path.write_text("start_point: 3\n")
        assert main(["--config", str(path)]) == 2
        assert "Invalid run parameters" in capsys.readouterr().err

    def test_non_mapping_run_file_exit_code(self, tmp_path, capsys):
        path = tmp_path / "run.yaml"
        path.write_text("- sphere\n")
        assert main(["--config", str(path)]) == 2

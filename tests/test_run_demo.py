"""
Tests for the demo script entry point.
"""

import importlib.util
from pathlib import Path

import pytest


SCRIPT = Path(__file__).parent.parent / "scripts" / "run_demo.py"


@pytest.fixture(scope="module")
def run_demo():
    module_spec = importlib.util.spec_from_file_location("run_demo", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestMain:

    @pytest.mark.parametrize("args", [["--tau", "0"], ["--tau", "-0.5"], ["--deposit-tenor", "0"]])
    def test_invalid_inputs_reported(self, run_demo, tmp_path, capsys, args):
        code = run_demo.main(args + ["--output-dir", str(tmp_path)])

        assert code == 1
        assert "Calibration failed" in capsys.readouterr().err
        assert not list(tmp_path.iterdir())

    def test_writes_exports(self, run_demo, tmp_path):
        assert run_demo.main(["--output-dir", str(tmp_path)]) == 0

        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == ["interpolated_swaps.csv", "swap_quotes.csv", "zero_curve.csv"]

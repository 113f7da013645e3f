import pytest

from mm1sim.cli import main
from mm1sim.distributions import Distribution
from mm1sim.simulation import SimulationConfig, simulate


def test_zero_end_time_output(capsys):
    assert main(["--end-time", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Mean queue size: 0.000000",
        "Mean system size: 0.000000",
        "Time: 0.000",
        "End",
    ]


def test_output_matches_library(capsys):
    assert main(["--end-time", "150", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    result = simulate(SimulationConfig(end_time=150), seed=5)
    assert f"Mean queue size: {result.mean_queue_size:.6f}" in out
    assert f"Mean system size: {result.mean_system_size:.6f}" in out


def test_series_output_length(capsys):
    argv = [
        "--end-time", "20", "--seed", "2",
        "--arrival", "uniform", "--arrival-params", "1", "3",
        "--service", "normal", "--service-params", "1", "0",
        "--series",
    ]
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    cfg = SimulationConfig(
        end_time=20,
        interarrival=Distribution.UNIFORM,
        interarrival_params=(1, 3),
        service=Distribution.NORMAL,
        service_params=(1, 0),
    )
    result = simulate(cfg, seed=2)
    assert lines[0] == "time,queue_size"
    assert len(lines) == 1 + len(result.queue_size_series) + 4


def test_single_param_keeps_default_second(capsys):
    assert main(["--end-time", "50", "--seed", "1", "--service-params", "1.5"]) == 0
    out = capsys.readouterr().out
    result = simulate(SimulationConfig(end_time=50), seed=1)
    assert f"Time: {result.final_time:.3f}" in out


def test_unknown_distribution_exits():
    with pytest.raises(SystemExit):
        main(["--arrival", "pareto"])


def test_too_many_params_exits():
    with pytest.raises(SystemExit):
        main(["--arrival-params", "1", "2", "3"])


def test_zero_rate_exits():
    with pytest.raises(SystemExit):
        main(["--end-time", "10", "--arrival-params", "0"])
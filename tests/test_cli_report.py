import logging
from typing import Any

import pytest

from swarm_ssp import cli
from swarm_ssp.instance import instance_from_weights


@pytest.fixture
def isolated_logger():
    pkg_logger = logging.getLogger("swarm_ssp")
    old_handlers = pkg_logger.handlers[:]
    old_level = pkg_logger.level
    old_propagate = pkg_logger.propagate
    yield pkg_logger
    for h in pkg_logger.handlers[:]:
        if h not in old_handlers:
            pkg_logger.removeHandler(h)
    pkg_logger.setLevel(old_level)
    pkg_logger.propagate = old_propagate


def test_report_lines(monkeypatch: Any, capsys: Any, isolated_logger: Any) -> None:
    monkeypatch.setattr(
        cli, "generate_instance", lambda n, **kwargs: instance_from_weights([3, 5], 8)
    )
    code = cli.main(["--seed", "4", "--timeout", "60"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "Starting solver with n=2 target=8",
        "Solution found (or search stopped):",
        "Error: 0 Target: 8",
        "Selected integers: 3 5",
        "Sum = 8 (target 8)",
    ]


def test_debug_logging_goes_to_stderr(monkeypatch: Any, capsys: Any, isolated_logger: Any) -> None:
    monkeypatch.setattr(
        cli, "generate_instance", lambda n, **kwargs: instance_from_weights([42], 42)
    )
    cli.main(["--log-level", "DEBUG", "--timeout", "60"])
    captured = capsys.readouterr()
    assert "starting swarm" in captured.err
    assert "starting swarm" not in captured.out


def test_timeout_exit_code(monkeypatch: Any, capsys: Any, isolated_logger: Any) -> None:
    monkeypatch.setattr(
        cli, "generate_instance", lambda n, **kwargs: instance_from_weights([3, 5], 4)
    )
    assert cli.main(["--timeout", "0.1"]) == 2
    assert "Error: " in capsys.readouterr().out


def test_bad_size_exits(isolated_logger: Any) -> None:
    with pytest.raises(SystemExit):
        cli.main(["--size", "0"])

import numpy as np

from swarm_ssp.agents import CouplingAgent, SpinAgent, build_agents
from swarm_ssp.instance import instance_from_weights
from swarm_ssp.qubo import qubo_matrix
from swarm_ssp.state import SolutionState


def _state(weights: list[int], target: int) -> SolutionState:
    return SolutionState(instance_from_weights(weights, target))


def test_spin_polarity_follows_bias_sign() -> None:
    rng = np.random.default_rng(0)
    assert SpinAgent(0, -0.2, rng).encouraged is True
    assert SpinAgent(0, 0.2, rng).encouraged is False
    assert SpinAgent(0, 0.0, rng).encouraged is False


def test_spin_flips_toward_encouraged_value() -> None:
    state = _state([3, 5], 8)
    agent = SpinAgent(1, -1.0, np.random.default_rng(0))
    assert agent.step(state) is True
    assert state.snapshot() == (False, True)
    # already agrees: no further change
    agent.step(state)
    assert state.snapshot() == (False, True)
    assert agent.flips == 1
    assert agent.trials == 2


def test_spin_with_zero_bias_never_sets() -> None:
    state = _state([3, 5], 8)
    agent = SpinAgent(0, 0.0, np.random.default_rng(0))
    for _ in range(100):
        agent.step(state)
    assert state.snapshot() == (False, False)


def test_spin_stops_once_error_is_zero() -> None:
    state = _state([3, 5], 0)
    state.publish_error()
    agent = SpinAgent(0, -1.0, np.random.default_rng(0))
    assert agent.step(state) is False
    assert state.snapshot() == (False, False)


def test_coupling_evicts_exactly_one() -> None:
    rng = np.random.default_rng(1)
    agent = CouplingAgent(0, 1, 1.0, rng)
    evicted = set()
    for _ in range(200):
        state = _state([3, 5], 3)
        state.set(0, True)
        state.set(1, True)
        agent.step(state)
        snap = state.snapshot()
        assert sum(snap) == 1
        evicted.add(snap.index(False))
    assert evicted == {0, 1}


def test_coupling_ignores_partial_selection() -> None:
    state = _state([3, 5, 7], 3)
    state.set(0, True)
    agent = CouplingAgent(0, 1, 1.0, np.random.default_rng(0))
    for _ in range(50):
        agent.step(state)
    assert state.snapshot() == (True, False, False)
    assert agent.evictions == 0


def test_coupling_uses_magnitude_of_weight() -> None:
    state = _state([3, 5], 3)
    state.set(0, True)
    state.set(1, True)
    agent = CouplingAgent(0, 1, -1.0, np.random.default_rng(0))
    agent.step(state)
    assert sum(state.snapshot()) == 1


def test_build_agents_layout() -> None:
    Q = qubo_matrix(instance_from_weights([3, 5, 7, 9], 12))
    spins, couplings = build_agents(Q, seed=0)
    assert [s.index for s in spins] == [0, 1, 2, 3]
    assert [(c.i, c.j) for c in couplings] == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert spins[2].bias == Q[2, 2]
    assert couplings[0].coupling == Q[0, 1]
    assert len({id(a.rng) for a in [*spins, *couplings]}) == 10

import numpy as np
import pytest

from swarm_ssp.instance import generate_instance, instance_from_weights
from swarm_ssp.qubo import build_qubo, normalize_qubo, qubo_energy, qubo_matrix


def test_raw_coefficients() -> None:
    Q = build_qubo(instance_from_weights([3, 5], 3))
    assert Q[0, 0] == pytest.approx(9 - 18)
    assert Q[1, 1] == pytest.approx(25 - 30)
    assert Q[0, 1] == pytest.approx(30)
    assert Q[1, 0] == pytest.approx(30)


def test_symmetric_and_bounded() -> None:
    for seed in range(10):
        Q = qubo_matrix(generate_instance(15, rng=seed))
        assert np.array_equal(Q, Q.T)
        assert np.max(np.abs(Q)) == pytest.approx(1.0)
        assert np.all(np.abs(Q) <= 1.0)


def test_all_zero_matrix_left_unchanged() -> None:
    Q = normalize_qubo(np.zeros((3, 3)))
    assert not Q.any()


def test_single_weight_matrix() -> None:
    Q = qubo_matrix(instance_from_weights([42], 42))
    assert Q.shape == (1, 1)
    assert Q[0, 0] == pytest.approx(-1.0)


def test_normalized_matrix_is_frozen() -> None:
    Q = qubo_matrix(instance_from_weights([3, 5], 8))
    with pytest.raises(ValueError):
        Q[0, 0] = 0.0


def test_energy_plus_constant_is_squared_error() -> None:
    instance = instance_from_weights([3, 5, 9], 12)
    Q = build_qubo(instance)
    for sel in ([False] * 3, [True, False, True], [True, True, True], [False, True, False]):
        err = instance.target - instance.subset_sum(sel)
        assert qubo_energy(Q, sel) + instance.target ** 2 == pytest.approx(err ** 2)

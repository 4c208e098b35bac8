"""
整体训练的冒烟测试：网络 + 损失 + 优化器 + 反向传播
"""
import pytest

from easygrad.errors import ShapeMismatch
from easygrad.data import xor_dataset, make_value_matrix, make_values
from easygrad.nn import MLP
from easygrad.optim import Adam
from easygrad.train import fit, predict

TOLERANCE = 0.1
SEED = 0


def _train(nin, nouts, X, y, epochs, lr):
    net = MLP(nin, nouts, rng=SEED)
    losses = fit(net, X, y, epochs=epochs, lr=lr)
    return net, losses, predict(net, X)


def test_xor_converges():
    X, y = xor_dataset()
    net, losses, predictions = _train(2, [4, 4, 1], X, y, epochs=2000, lr=0.01)
    assert len(losses) == 2000
    assert losses[-1] < losses[0]
    for p, t in zip(predictions, y):
        assert abs(p - t) < TOLERANCE


def test_simple_scenario_fits():
    X = [[2.0, 3.0, -1.0],
         [3.0, -1.0, 0.5],
         [0.5, 1.0, 1.0],
         [1.0, 1.0, -1.0]]
    y = [1.0, -1.0, -1.0, 1.0]
    _, _, predictions = _train(3, [4, 4, 1], X, y, epochs=100, lr=0.1)
    for p, t in zip(predictions, y):
        assert abs(p - t) < TOLERANCE


def test_fit_accepts_node_inputs_and_custom_optimizer():
    X, y = xor_dataset()
    net = MLP(2, [4, 4, 1], rng=3)
    losses = fit(net, make_value_matrix(X), y, epochs=50, optimizer=Adam(net.parameters(), lr=0.05))
    assert losses[-1] < losses[0]


def test_fit_accepts_node_targets():
    X, y = xor_dataset()
    net = MLP(2, [4, 4, 1], rng=SEED)
    losses = fit(net, X, make_values(y), epochs=20)
    reference = fit(MLP(2, [4, 4, 1], rng=SEED), X, y, epochs=20)
    assert losses == pytest.approx(reference)


def test_fit_rejects_bad_data():
    net = MLP(2, [2, 1], rng=0)
    with pytest.raises(ShapeMismatch):
        fit(net, [[0.0, 1.0]], [1.0, -1.0], epochs=1)
    with pytest.raises(ShapeMismatch):
        fit(net, [], [], epochs=1)


def test_fit_verbose_prints_progress(capsys):
    X, y = xor_dataset()
    net = MLP(2, [2, 1], rng=0)
    fit(net, X, y, epochs=30, verbose=True, log_every=10)
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Epoch    10: Loss = ")


def test_fit_is_silent_by_default(capsys):
    X, y = xor_dataset()
    fit(MLP(2, [2, 1], rng=0), X, y, epochs=5)
    assert capsys.readouterr().out == ""

import math

import pytest

from easygrad.engine import Node
from easygrad.errors import InvalidOperandKind
from easygrad.optim import SGD, Adam


def _params_with_grads(grads):
    params = [Node(1.0) for _ in grads]
    for p, g in zip(params, grads):
        p.grad = g
    return params


def test_sgd_step():
    params = _params_with_grads([0.5, -2.0])
    SGD(params, lr=0.1).step()
    assert [p.data for p in params] == pytest.approx([0.95, 1.2])


def test_sgd_momentum_moving_average():
    params = _params_with_grads([1.0])
    opt = SGD(params, lr=0.1, momentum=0.5)
    opt.step()
    # buf = 0.5 * 0 + 0.5 * 1
    assert opt.momentum_buffer[0] == pytest.approx(0.5)
    assert params[0].data == pytest.approx(1.0 - 0.05)
    opt.step()
    assert opt.momentum_buffer[0] == pytest.approx(0.75)
    assert params[0].data == pytest.approx(0.95 - 0.075)


def test_sgd_rejects_bad_hyperparameters():
    with pytest.raises(ValueError):
        SGD([Node(1.0)], lr=0.0)
    with pytest.raises(ValueError):
        SGD([Node(1.0)], momentum=1.0)


def test_zero_grad():
    params = _params_with_grads([0.5, -2.0])
    opt = SGD(params)
    opt.zero_grad()
    assert all(p.grad == 0.0 for p in params)


def test_adam_first_step_moves_by_lr():
    params = _params_with_grads([4.0, -0.01])
    Adam(params, lr=0.1).step()
    # 第一步偏差修正后 m_hat / sqrt(v_hat) = sign(grad)
    assert params[0].data == pytest.approx(0.9, abs=1e-6)
    assert params[1].data == pytest.approx(1.1, abs=1e-5)
    assert isinstance(params[0].data, float)


def test_adam_minimises_quadratic():
    x = Node(3.0)
    opt = Adam([x], lr=0.1)
    for _ in range(300):
        opt.zero_grad()
        loss = (x - 1.0) ** 2
        loss.backward()
        opt.step()
    assert math.isclose(x.data, 1.0, abs_tol=5e-2)


def test_optimizer_rejects_empty_or_non_node_parameters():
    with pytest.raises(ValueError):
        SGD([])
    with pytest.raises(InvalidOperandKind):
        Adam([Node(1.0), 2.0])


@pytest.mark.parametrize("kwargs", [
    {'lr': 0.0},
    {'betas': (1.0, 0.999)},
    {'betas': (0.9, -0.1)},
    {'eps': 0.0},
])
def test_adam_rejects_bad_hyperparameters(kwargs):
    with pytest.raises(ValueError):
        Adam([Node(1.0)], **kwargs)


def test_adam_keeps_float_data_and_moments_per_parameter():
    params = _params_with_grads([2.0, 0.0])
    opt = Adam(params, lr=0.01)
    opt.step()
    assert all(type(p.data) is float for p in params)
    # 梯度为0的参数不移动
    assert params[1].data == 1.0
    assert opt.state[0] == pytest.approx([0.2, 0.004])
    assert opt.state[1] == [0.0, 0.0]

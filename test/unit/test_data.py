import numpy as np

from easygrad.data import make_values, make_value_matrix, xor_dataset
from easygrad.engine import Node


def test_xor_dataset():
    X, y = xor_dataset()
    assert X.shape == (4, 2)
    assert y.shape == (4,)
    for xi, yi in zip(X, y):
        expected = 1.0 if xi[0] != xi[1] else -1.0
        assert yi == expected


def test_make_values():
    values = make_values([1, 2.5, np.float64(-3.0)])
    assert all(isinstance(v, Node) for v in values)
    assert [v.data for v in values] == [1.0, 2.5, -3.0]
    assert all(v.grad == 0.0 and v._prev == () for v in values)


def test_make_value_matrix():
    X, _ = xor_dataset()
    matrix = make_value_matrix(X)
    assert len(matrix) == 4 and all(len(row) == 2 for row in matrix)
    assert [[v.data for v in row] for row in matrix] == X.tolist()

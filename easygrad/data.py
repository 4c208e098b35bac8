import numpy as np

from easygrad.engine import Node


def make_values(data):
    """由一组数值创建叶子节点列表"""
    return [Node(x) for x in data]


def make_value_matrix(data):
    """由二维数值（列表或 numpy 数组）创建叶子节点矩阵，每行一个样本"""
    return [make_values(row) for row in data]


def xor_dataset():
    """
    异或数据集，False 记为 -1，True 记为 1，和 tanh 输出范围一致

    返回:
        X: shape (4, 2)
        y: shape (4,)
    """
    X = np.array([[0.0, 0.0],
                  [0.0, 1.0],
                  [1.0, 0.0],
                  [1.0, 1.0]])
    y = np.array([-1.0, 1.0, 1.0, -1.0])
    return X, y

import numbers

import numpy as np

from easygrad.errors import InvalidOperandKind


def _is_real(x):
    # bool 也是 numbers.Real 的子类，这里单独排除
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


def _as_node(x, op=None):
    """把原始数值包装成新的叶子节点；Node 原样返回"""
    if isinstance(x, Node):
        return x
    if not _is_real(x):
        raise InvalidOperandKind(x, op)
    return Node(x)


class Node:

    def __init__(self, data, _children=(), _op='', label=''):
        if isinstance(data, Node) or not _is_real(data):
            raise InvalidOperandKind(data, 'leaf')
        if len(_children) > 2:
            raise ValueError(f"一个节点最多有两个输入节点，得到 {len(_children)} 个")
        # 存储数值
        self.data = float(data)
        # 存储梯度
        self.grad = 0.0
        # 反向传播函数
        self._backward = lambda: None
        # 输入节点，有序且最多两个，用于构建计算图
        self._prev = tuple(_children)
        # 操作类型，用于调试和可视化
        self._op = _op
        self.label = label

    def __add__(self, other):
        # 确保other也是Node对象
        other = _as_node(other, '+')
        out = Node(self.data + other.data, (self, other), '+')

        def _backward():
            self.grad += out.grad
            other.grad += out.grad

        out._backward = _backward

        return out

    def __mul__(self, other):
        other = _as_node(other, '*')
        out = Node(self.data * other.data, (self, other), '*')

        def _backward():
            self.grad += other.data * out.grad
            other.grad += self.data * out.grad

        out._backward = _backward

        return out

    def __pow__(self, other):
        # 指数只能是常数，不参与求导
        if isinstance(other, Node) or not _is_real(other):
            raise InvalidOperandKind(other, '**')
        # 0的负数次幂得到inf，负数的非整数次幂得到nan，都不抛异常
        with np.errstate(all='ignore'):
            value = float(np.power(self.data, other))
        out = Node(value, (self,), f'**{other}')

        def _backward():
            with np.errstate(all='ignore'):
                local = float(other * np.power(self.data, other - 1))
            self.grad += local * out.grad

        out._backward = _backward

        return out

    def exp(self):
        with np.errstate(over='ignore'):
            e = float(np.exp(self.data))
        out = Node(e, (self,), 'exp')

        def _backward():
            self.grad += e * out.grad

        out._backward = _backward
        return out

    def tanh(self):
        t = float(np.tanh(self.data))
        out = Node(t, (self,), 'tanh')

        def _backward():
            self.grad += (1 - t ** 2) * out.grad

        out._backward = _backward

        return out

    def relu(self):
        out = Node(0.0 if self.data < 0 else self.data, (self,), 'relu')

        def _backward():
            self.grad += (out.data > 0) * out.grad

        out._backward = _backward

        return out

    def sigmoid(self):
        with np.errstate(over='ignore'):
            s = float(1 / (1 + np.exp(-self.data)))
        out = Node(s, (self,), 'sigmoid')

        def _backward():
            self.grad += s * (1 - s) * out.grad

        out._backward = _backward

        return out

    def log(self):
        # log(0) = -inf, 负数得到 nan
        with np.errstate(all='ignore'):
            out = Node(float(np.log(self.data)), (self,), 'log')

        def _backward():
            with np.errstate(all='ignore'):
                local = float(np.float64(1.0) / self.data)
            self.grad += local * out.grad

        out._backward = _backward
        return out

    def zero_grad(self):
        self.grad = 0.0

    def backward(self):
        # 第一步：拓扑图排序，确保按正确顺序处理节点
        topo = _topological_order(self)

        # 第二步：初始化输出节点的梯度为1，其他节点的梯度由调用方负责清零
        self.grad = 1.0
        # 第三步：按拓扑图逆序进行反向传播
        for v in reversed(topo):
            v._backward()

    def __neg__(self):  # -self
        return self * -1

    def __radd__(self, other):  # other + self
        return self + other

    def __sub__(self, other):  # self - other
        return self + (-_as_node(other, '-'))

    def __rsub__(self, other):  # other - self
        return _as_node(other, '-') + (-self)

    def __rmul__(self, other):  # other * self
        return self * other

    def __truediv__(self, other):  # self / other
        return self * _as_node(other, '/') ** -1

    def __rtruediv__(self, other):  # other / self
        return _as_node(other, '/') * self ** -1

    def __repr__(self):
        if self.label:
            return f"Node(label={self.label}, data={self.data}, grad={self.grad})"
        return f"Node(data={self.data}, grad={self.grad})"


def _topological_order(root):
    """
    后序深度优先遍历，返回从输入到root的拓扑序列

    共享的子节点只访问一次；一个节点只有在它的所有输入都已加入序列后才会被加入。
    用显式栈代替递归，避免很长的求和链超出递归深度限制。
    """
    topo = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            topo.append(v)
            continue
        if v in visited:
            continue
        visited.add(v)
        stack.append((v, True))
        # 逆序入栈，使输入按原顺序被访问
        for child in reversed(v._prev):
            if child not in visited:
                stack.append((child, False))
    return topo

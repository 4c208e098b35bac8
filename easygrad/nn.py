import numpy as np

from easygrad.engine import Node
from easygrad.errors import ShapeMismatch

ACTIVATIONS = ('tanh', 'relu', 'sigmoid', 'linear')


class Module:

    def zero_grad(self):
        for p in self.parameters():
            p.zero_grad()

    def parameters(self):
        return []


class Neuron(Module):

    def __init__(self, nin, activation='tanh', weights=None, bias=None, rng=None):
        """
        nin: 输入维度
        activation: 激活函数类型 - 'tanh', 'relu', 'sigmoid', 'linear'
        weights: 指定的权重列表，如果为None则在[-1, 1)内随机初始化
        bias: 指定的偏置值，如果为None则在[-1, 1)内随机初始化
        rng: 随机种子或 numpy Generator，用于可复现的初始化
        """
        if activation not in ACTIVATIONS:
            raise ValueError(f"不支持的激活函数: {activation}. 支持的函数: {', '.join(ACTIVATIONS)}")
        rng = np.random.default_rng(rng)

        if weights is not None:
            if len(weights) != nin:
                raise ShapeMismatch(f"权重数量 {len(weights)} 不匹配输入维度 {nin}")
            self.w = [Node(w) for w in weights]
        else:
            self.w = [Node(rng.uniform(-1, 1)) for _ in range(nin)]

        if bias is not None:
            self.b = Node(bias)
        else:
            self.b = Node(rng.uniform(-1, 1))

        self.activation = activation

    def __call__(self, x):
        if len(x) != len(self.w):
            raise ShapeMismatch(f"输入维度 {len(x)} 不匹配权重维度 {len(self.w)}")
        # w * x + b
        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)

        if self.activation == 'tanh':
            return act.tanh()
        elif self.activation == 'relu':
            return act.relu()
        elif self.activation == 'sigmoid':
            return act.sigmoid()
        return act

    def parameters(self):
        """
        返回神经元的所有参数

        返回: 权重列表 + 偏置 = [w1, w2, ..., wn, b]
        """
        return self.w + [self.b]

    def __repr__(self):
        return f"{self.activation.capitalize()}Neuron({len(self.w)})"


class Layer(Module):

    def __init__(self, nin, nout, activation='tanh', rng=None):
        rng = np.random.default_rng(rng)
        self.neurons = [Neuron(nin, activation=activation, rng=rng) for _ in range(nout)]

    def __call__(self, x):
        # 每个神经元一个输出，单个输出时也返回列表
        return [n(x) for n in self.neurons]

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):

    def __init__(self, nin, nouts, activation='tanh', rng=None):
        """
        nin: 输入维度
        nouts: 各层输出维度，例如 [4, 4, 1]
        rng: 所有层共享同一个随机数生成器，种子决定全部初始权重
        """
        rng = np.random.default_rng(rng)
        sz = [nin] + list(nouts)
        self.layers = [Layer(sz[i], sz[i + 1], activation=activation, rng=rng) for i in range(len(nouts))]

    def __call__(self, x):
        for layer in self.layers:
            x = layer(x)
        if len(x) != 1:
            raise ShapeMismatch(f"MLP最后一层应输出1个节点，得到 {len(x)} 个")
        return x[0]

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"

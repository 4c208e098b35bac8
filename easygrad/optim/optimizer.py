from easygrad.engine import Node
from easygrad.errors import InvalidOperandKind


class Optimizer:
    """
    优化器基类

    持有一组叶子节点参数。每轮训练的顺序固定为：
    zero_grad() -> loss.backward() -> step()
    backward 只做累加，不清零梯度，所以 zero_grad 必须由调用方显式执行。
    """

    def __init__(self, parameters, lr):
        self.parameters = list(parameters)
        if not self.parameters:
            raise ValueError("优化器的参数列表为空")
        for p in self.parameters:
            if not isinstance(p, Node):
                raise InvalidOperandKind(p, 'parameter')
        if lr <= 0:
            raise ValueError(f"学习率必须大于0, 得到 {lr}")
        self.lr = lr

    def zero_grad(self):
        for param in self.parameters:
            param.zero_grad()

    def step(self):
        """用当前梯度更新每个参数的 data，子类需要实现"""
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}(n_params={len(self.parameters)}, lr={self.lr})"

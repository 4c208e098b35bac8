from easygrad.optim.optimizer import Optimizer


class SGD(Optimizer):
    """随机梯度下降优化器（支持动量,非标准动量法）"""

    def __init__(self, parameters, lr=0.01, momentum=0.0):
        super().__init__(parameters, lr)
        if not 0.0 <= momentum < 1.0:
            raise ValueError(f"momentum必须在[0, 1)内, 得到 {momentum}")
        self.momentum = momentum  # β 权重系数
        # 为每个参数初始化历史梯度移动加权平均值 St-1
        self.momentum_buffer = [0.0 for _ in self.parameters]

    def step(self):
        """执行一步优化"""
        for i, param in enumerate(self.parameters):
            # Dt = β * St-1 + (1 - β) * Wt
            # 其中: St-1 是历史梯度移动加权平均值, Wt 是当前梯度值
            self.momentum_buffer[i] = (self.momentum * self.momentum_buffer[i] +
                                       (1 - self.momentum) * param.grad)

            # param = param - lr * Dt
            param.data -= self.lr * self.momentum_buffer[i]

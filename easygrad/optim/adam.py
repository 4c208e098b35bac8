import numpy as np

from easygrad.optim.optimizer import Optimizer


class Adam(Optimizer):
    """
    Adam优化器，每个标量参数各自维护一阶矩 m 和二阶矩 v

    betas: (beta1, beta2)，都必须在 [0, 1) 内
    eps: 分母中的平滑项，必须大于0
    """

    def __init__(self, parameters, lr=0.001, betas=(0.9, 0.999), eps=1e-8):
        super().__init__(parameters, lr)
        beta1, beta2 = betas
        for name, beta in (('beta1', beta1), ('beta2', beta2)):
            if not 0.0 <= beta < 1.0:
                raise ValueError(f"{name}必须在[0, 1)内, 得到 {beta}")
        if eps <= 0:
            raise ValueError(f"eps必须大于0, 得到 {eps}")
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps
        self.t = 0
        # 每个参数一组 [m, v]
        self.state = [[0.0, 0.0] for _ in self.parameters]

    def step(self):
        self.t += 1
        # 偏差修正系数在同一步内对所有参数相同
        correction1 = 1 - self.beta1 ** self.t
        correction2 = 1 - self.beta2 ** self.t

        for param, moments in zip(self.parameters, self.state):
            g = param.grad
            moments[0] = self.beta1 * moments[0] + (1 - self.beta1) * g
            moments[1] = self.beta2 * moments[1] + (1 - self.beta2) * g * g

            m_hat = moments[0] / correction1
            v_hat = moments[1] / correction2
            # data 保持为 Python float
            param.data = float(param.data - self.lr * m_hat / (np.sqrt(v_hat) + self.eps))

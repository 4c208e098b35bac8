from easygrad.engine import Node
from easygrad.errors import ShapeMismatch

REDUCTIONS = ('mean', 'sum', 'none')


class Loss:
    """损失函数基类"""

    def __call__(self, predictions, targets):
        raise NotImplementedError

    def __repr__(self):
        return self.__class__.__name__ + "()"


class MSELoss(Loss):
    """均方误差损失函数

    计算公式: MSE = (1/n) * Σ(pred_i - target_i)^2
    其中 n 是样本数量

    Args:
        reduction: 'mean', 'sum', 'none'
            - 'mean': 返回平均损失 (默认)
            - 'sum': 返回损失总和
            - 'none': 返回每个样本的损失
    """

    def __init__(self, reduction='mean'):
        if reduction not in REDUCTIONS:
            raise ValueError(f"reduction必须是 'mean', 'sum' 或 'none', 得到 '{reduction}'")
        self.reduction = reduction

    def __call__(self, predictions, targets):
        """
        Args:
            predictions: 预测值，可以是单个Node或Node列表
            targets: 目标值，可以是Node、实数或它们的列表

        Returns:
            Node: 损失值（reduction='none' 时为Node列表）
        """
        # 统一处理单个值和列表的情况
        if not isinstance(predictions, (list, tuple)):
            predictions = [predictions]
        if not isinstance(targets, (list, tuple)):
            targets = [targets]

        if len(predictions) != len(targets):
            raise ShapeMismatch(
                f"预测值数量({len(predictions)})与目标值数量({len(targets)})不匹配")
        if not predictions:
            raise ShapeMismatch("至少需要一个预测值")

        squared_errors = [(pred - target) ** 2 for pred, target in zip(predictions, targets)]

        if self.reduction == 'none':
            return squared_errors

        total_loss = squared_errors[0]
        for se in squared_errors[1:]:
            total_loss = total_loss + se
        if self.reduction == 'sum':
            return total_loss
        # 除以样本数量得到平均损失
        return total_loss * Node(1.0 / len(squared_errors))

    def __repr__(self):
        return f"MSELoss(reduction='{self.reduction}')"

class InvalidOperandKind(TypeError):
    """操作数既不是Node也不是实数"""

    def __init__(self, operand, op=None):
        self.operand = operand
        self.op = op
        where = f" ({op})" if op else ""
        super().__init__(
            f"操作数类型无效{where}: 期望 Node 或实数, 得到 {operand!r} ({type(operand).__name__})"
        )


class ShapeMismatch(ValueError):
    """网络/损失函数的尺寸约定不满足，例如MLP最后一层输出不是1个"""

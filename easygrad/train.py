from easygrad.engine import Node
from easygrad.errors import ShapeMismatch
from easygrad.loss import MSELoss
from easygrad.optim import SGD

DEFAULT_EPOCHS = 2000
DEFAULT_LR = 0.01
DEFAULT_LOG_EVERY = 100


def _to_nodes(row):
    return [x if isinstance(x, Node) else Node(x) for x in row]


def fit(model, X, y, epochs=DEFAULT_EPOCHS, lr=DEFAULT_LR, loss_fn=None, optimizer=None,
        verbose=False, log_every=DEFAULT_LOG_EVERY):
    """
    全批量训练：每个epoch对所有样本前向传播，累加损失后反向传播并更新一次参数

    参数:
        model: 可调用对象，输入一个样本返回一个Node，需提供 parameters()
        X: 样本列表（数值或Node），y: 目标值列表
        loss_fn: 默认 MSELoss(reduction='sum')，即各样本平方误差之和
        optimizer: 默认 SGD(model.parameters(), lr=lr)
        verbose: 为True时每 log_every 个epoch打印一次损失

    返回:
        losses: 每个epoch的损失值列表
    """
    if len(X) != len(y):
        raise ShapeMismatch(f"样本数量({len(X)})与目标数量({len(y)})不匹配")
    if len(X) == 0:
        raise ShapeMismatch("训练数据为空")

    loss_fn = loss_fn or MSELoss(reduction='sum')
    optimizer = optimizer or SGD(model.parameters(), lr=lr)
    inputs = [_to_nodes(row) for row in X]
    targets = [t if isinstance(t, Node) else float(t) for t in y]

    losses = []
    for epoch in range(epochs):
        # 前向传播
        predictions = [model(x) for x in inputs]
        loss = loss_fn(predictions, targets)
        losses.append(loss.data)

        # 反向传播，梯度是累加的，必须先清零
        optimizer.zero_grad()
        loss.backward()

        # 参数更新
        optimizer.step()

        if verbose and ((epoch + 1) % log_every == 0 or epoch == epochs - 1):
            print(f"Epoch {epoch + 1:5d}: Loss = {loss.data:.6f}")

    return losses


def predict(model, X):
    """对每个样本做前向推理，返回浮点数列表"""
    return [model(_to_nodes(row)).data for row in X]

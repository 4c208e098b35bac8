"""
用 2-4-4-1 的 tanh 网络拟合异或，训练后检查每个点的预测误差
"""
import sys

from easygrad import MLP, xor_dataset, fit, predict
from easygrad.utils import plot_losses

SEED = 0
EPOCHS = 2000
LEARNING_RATE = 0.01
TOLERANCE = 0.1


def main():
    X, y = xor_dataset()
    print("XOR 数据集:")
    for xi, yi in zip(X, y):
        print(f"  ({xi[0]:.0f}, {xi[1]:.0f}) -> {yi:+.0f}")

    net = MLP(2, [4, 4, 1], rng=SEED)
    print(f"\n网络结构: {net}")
    print(f"参数总数: {len(net.parameters())}")

    print("\n开始训练...")
    losses = fit(net, X, y, epochs=EPOCHS, lr=LEARNING_RATE, verbose=True)

    predictions = predict(net, X)
    print("\n测试模型:")
    failed = False
    for xi, yi, pred in zip(X, y, predictions):
        ok = abs(yi - pred) <= TOLERANCE
        failed = failed or not ok
        print(f"  ({xi[0]:.0f}, {xi[1]:.0f}) -> 真实值: {yi:+.0f} 预测值: {pred:+.4f} {'' if ok else '✗'}")

    if len(sys.argv) > 1:
        plot_losses(losses, path=sys.argv[1], title='XOR Training Loss')
        print(f"\n损失曲线已保存到: {sys.argv[1]}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

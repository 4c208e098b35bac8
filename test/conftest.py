import os

# 测试环境没有显示器，matplotlib 使用非交互后端
os.environ.setdefault("MPLBACKEND", "Agg")

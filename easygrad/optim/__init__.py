from easygrad.optim.optimizer import Optimizer
from easygrad.optim.sgd import SGD
from easygrad.optim.adam import Adam

__all__ = ['Optimizer', 'SGD', 'Adam']

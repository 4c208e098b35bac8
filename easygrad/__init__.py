from easygrad.engine import Node
from easygrad.errors import InvalidOperandKind, ShapeMismatch
from easygrad.nn import Module, Neuron, Layer, MLP
from easygrad.loss import MSELoss
from easygrad.data import make_values, make_value_matrix, xor_dataset
from easygrad.train import fit, predict

__all__ = [
    'Node',
    'InvalidOperandKind',
    'ShapeMismatch',
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    'MSELoss',
    'make_values',
    'make_value_matrix',
    'xor_dataset',
    'fit',
    'predict',
]

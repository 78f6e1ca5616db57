"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados y los resultados etiquetados.
"""

from .calculator import Calculator, CalculatorState, apply_operation
from .results import DivisionByZero, InvalidOperand, Number

__all__ = [
    'Calculator',
    'CalculatorState',
    'apply_operation',
    'Number',
    'DivisionByZero',
    'InvalidOperand',
]

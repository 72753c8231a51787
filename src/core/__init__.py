"""
Módulo core con la lógica principal de la calculadora.
Contiene el motor de estados y la taxonomía de errores.
"""

from .engine import CalculatorEngine, CalculatorState, Operator, compute, format_number
from .errors import (CalculatorError, DivisionByZero, IncompleteInput, InvalidNumber, ResultOverflow,
                     UnknownOperator)

__all__ = [
    'CalculatorEngine', 'CalculatorState', 'Operator', 'compute', 'format_number',
    'CalculatorError', 'DivisionByZero', 'IncompleteInput', 'InvalidNumber', 'ResultOverflow',
    'UnknownOperator',
]

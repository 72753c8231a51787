"""
Errores de la calculadora.

Todos son recuperables: el motor los captura y los convierte en el estado de
error (display "Error" + mensaje). Nunca salen del motor hacia la interfaz.
"""


# ============================================================================
# CLASE: CalculatorError
# Propósito: Base de la taxonomía de errores aritméticos
# Responsabilidades:
#   - Transportar el mensaje que se mostrará al usuario
# ============================================================================
class CalculatorError(Exception):
    """
    Error base de la calculadora.

    Atributos:
        - message: Texto que el display secundario muestra al usuario
    """

    message = "Error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidNumber(CalculatorError):
    """El display no se pudo interpretar como número al elegir operador."""

    message = "Invalid number"


class IncompleteInput(CalculatorError):
    """Se pulsó = sin primer operando, sin operador o sin segundo operando válido."""

    message = "Incomplete input"


class DivisionByZero(CalculatorError):
    """El divisor es cero (|b| < 1e-12)."""

    message = "Cannot divide by 0"


class UnknownOperator(CalculatorError):
    """Símbolo de operador fuera de {+, -, *, /}."""

    message = "Unknown operator"


class ResultOverflow(CalculatorError):
    """El resultado no es finito (desborda el rango de float)."""

    message = "Overflow"

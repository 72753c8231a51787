"""
Motor de la calculadora aritmética básica.

Este módulo contiene la máquina de estados que procesa las pulsaciones
(dígitos, punto decimal, operadores, =, C, AC) y el estado observable que la
interfaz lee después de cada evento.
"""

import math
from enum import Enum

from .errors import (CalculatorError, DivisionByZero, IncompleteInput, InvalidNumber, ResultOverflow,
                     UnknownOperator)


MAX_DISPLAY_LENGTH = 14     # Límite de caracteres del display (evita overflow visual)
ZERO_TOLERANCE = 1e-12      # |b| por debajo de este valor se considera divisor cero
INTEGER_TOLERANCE = 1e-10   # Distancia máxima a un entero para mostrarlo sin decimales
FRACTION_DIGITS = 10        # Decimales máximos al formatear resultados
ERROR_TEXT = "Error"


# ============================================================================
# ENUM: Operator
# Propósito: Operadores binarios soportados, identificados por su símbolo
# ============================================================================
class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol):
        """
        Convierte un símbolo ("+", "-", "*", "/") en Operator.

        Args:
            symbol (str | Operator): Símbolo o instancia ya construida

        Returns:
            Operator: Operador correspondiente

        Raises:
            UnknownOperator: Si el símbolo no es uno de los cuatro soportados
        """
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator() from None


def compute(a, op, b):
    """
    Aplica una operación binaria pura.

    Args:
        a (float): Primer operando
        op (Operator | str): Operador
        b (float): Segundo operando

    Returns:
        float: Resultado de a op b

    Raises:
        DivisionByZero: Si op es "/" y |b| < 1e-12 (tolerancia, no igualdad exacta)
        UnknownOperator: Si op no es un operador soportado
        ResultOverflow: Si el resultado no es finito (inf o nan)
    """
    op = Operator.from_symbol(op)
    if op is Operator.ADD:
        result = a + b
    elif op is Operator.SUBTRACT:
        result = a - b
    elif op is Operator.MULTIPLY:
        result = a * b
    else:
        if abs(b) < ZERO_TOLERANCE:
            raise DivisionByZero()
        result = a / b
    if not math.isfinite(result):
        raise ResultOverflow()
    return result


def format_number(value):
    """
    Formatea un número para el display.

    Formateo:
        - 5.0 → "5" (a menos de 1e-10 de su parte entera: sin decimales)
        - 2.5 → "2.5"
        - 1/3 → "0.3333333333" (máximo 10 decimales, sin ceros finales)
        - inf, -inf, nan → texto de Python; el motor nunca los muestra porque
          compute() lanza ResultOverflow antes
    """
    if not math.isfinite(value):
        return str(value)
    as_int = int(value)
    if abs(value - as_int) < INTEGER_TOLERANCE:
        return str(as_int)
    return f"{value:.{FRACTION_DIGITS}f}".rstrip("0").rstrip(".")


def _parse(text):
    """Interpreta el texto del display; None si no es un número."""
    try:
        return float(text)
    except ValueError:
        return None


# ============================================================================
# CLASE: CalculatorState
# Propósito: Estado mutable de una sesión de calculadora
# ============================================================================
class CalculatorState:
    """
    Estado de la calculadora, propiedad exclusiva del motor.

    Invariantes:
        - error_message no es None  ⇔  display_text == "Error"
        - display_text tiene como máximo 14 caracteres durante la entrada
        - display_text contiene como máximo un punto decimal
    """

    def __init__(self):
        self.display_text = "0"         # Valor mostrado en pantalla
        self.error_message = None       # Mensaje de error (None si no hay error)
        self.first_operand = None       # Operando izquierdo pendiente
        self.selected_operator = None   # Operator pendiente de aplicar
        self.start_new_number = True    # El próximo dígito empieza un número nuevo

    def copy(self):
        """Devuelve una copia independiente (snapshot de solo lectura)."""
        clone = CalculatorState()
        clone.__dict__.update(self.__dict__)
        return clone

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self):
        return (f"CalculatorState(display_text={self.display_text!r}, "
                f"error_message={self.error_message!r}, "
                f"first_operand={self.first_operand!r}, "
                f"selected_operator={self.selected_operator!r}, "
                f"start_new_number={self.start_new_number!r})")


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Máquina de estados de entrada/cálculo de la calculadora
# Responsabilidades:
#   - Construir números dígito por dígito (máximo 14 caracteres)
#   - Encadenar operaciones de izquierda a derecha (sin precedencia)
#   - Detectar errores (número inválido, entrada incompleta, división por 0, desbordamiento)
#   - Gestionar C (borrar entrada) y AC (borrar todo)
# ============================================================================
class CalculatorEngine:
    """
    Motor de la calculadora.

    Estados:
        - Idle/Entering: Introduciendo un número
        - OperatorPending: Operador elegido, esperando segundo operando
        - Error: Operadores e = ignorados hasta un dígito, punto, C o AC

    Ningún manejador devuelve valor ni lanza errores de cálculo: el resultado
    se observa en el estado (display_text, error_message, selected_operator).

    Ejemplo de encadenado:
        2 + 3 * → display "5" (2+3 se calcula al pulsar *)
        4 =     → display "20"
    """

    def __init__(self):
        self._state = CalculatorState()

    # ========================================================================
    # ESTADO OBSERVABLE
    # ========================================================================
    @property
    def display_text(self):
        return self._state.display_text

    @property
    def error_message(self):
        return self._state.error_message

    @property
    def first_operand(self):
        return self._state.first_operand

    @property
    def selected_operator(self):
        return self._state.selected_operator

    @property
    def start_new_number(self):
        return self._state.start_new_number

    @property
    def has_error(self):
        """True mientras la calculadora está en estado de error."""
        return self._state.error_message is not None

    @property
    def hint_text(self):
        """
        Texto secundario bajo el display.

        Returns:
            str: Mensaje de error si existe, "Op: +" si hay operador pendiente,
                 cadena vacía en otro caso
        """
        if self._state.error_message is not None:
            return self._state.error_message
        if self._state.selected_operator is not None:
            return f"Op: {self._state.selected_operator.value}"
        return ""

    def snapshot(self):
        """Copia del estado actual; modificarla no afecta al motor."""
        return self._state.copy()

    # ========================================================================
    # GESTIÓN DE ERRORES
    # ========================================================================
    def _set_error(self, message):
        self._state.error_message = message
        self._state.display_text = ERROR_TEXT

    def _clear_error_only(self):
        """Descarta el error sin tocar operando ni operador pendientes."""
        self._state.error_message = None
        if self._state.display_text == ERROR_TEXT:
            self._state.display_text = "0"

    # ========================================================================
    # ENTRADA DE NÚMEROS
    # ========================================================================
    def enter_digit(self, digit):
        """
        Añade un dígito al display.

        Args:
            digit (str): Carácter "0"-"9"

        Comportamiento:
            - En estado de error: descarta el error primero
            - Si empieza número nuevo o el display es "0": reemplaza
            - Si no: añade al final (ignorado al llegar a 14 caracteres)

        Raises:
            ValueError: Si digit no es un único carácter 0-9
        """
        if not (isinstance(digit, str) and len(digit) == 1 and digit in "0123456789"):
            raise ValueError(f"invalid digit: {digit!r}")

        if self.has_error:
            self._clear_error_only()

        state = self._state
        if state.start_new_number or state.display_text == "0":
            state.display_text = digit
            state.start_new_number = False
        elif len(state.display_text) < MAX_DISPLAY_LENGTH:
            state.display_text += digit

    def enter_decimal_point(self):
        """
        Añade el punto decimal.

        Comportamiento:
            - Si empieza número nuevo: display "0."
            - Si ya hay punto: no hace nada (un solo decimal permitido)
        """
        if self.has_error:
            self._clear_error_only()

        state = self._state
        if state.start_new_number:
            state.display_text = "0."
            state.start_new_number = False
            return
        if "." not in state.display_text and len(state.display_text) < MAX_DISPLAY_LENGTH:
            state.display_text += "."

    # ========================================================================
    # OPERADORES E IGUAL
    # ========================================================================
    def select_operator(self, op):
        """
        Registra un operador, calculando antes el resultado intermedio si hay
        una operación pendiente y se ha introducido un número nuevo.

        Args:
            op (Operator | str): Operador o su símbolo

        Errores (pasan a estado de error, sin lanzar):
            - Símbolo desconocido → "Unknown operator"
            - Display no numérico → "Invalid number"
            - División por cero en el cálculo intermedio → "Cannot divide by 0"
              (operando y operador previos se conservan)
            - Resultado intermedio no finito → "Overflow" (igual que división por cero)
        """
        if self.has_error:
            return

        state = self._state
        try:
            op = Operator.from_symbol(op)
            current = _parse(state.display_text)
            if current is None:
                raise InvalidNumber()

            if (state.first_operand is not None and state.selected_operator is not None
                    and not state.start_new_number):
                result = compute(state.first_operand, state.selected_operator, current)
                state.first_operand = result
                state.display_text = format_number(result)
            else:
                state.first_operand = current
        except CalculatorError as e:
            self._set_error(e.message)
            return

        state.selected_operator = op
        state.start_new_number = True
        state.error_message = None

    def evaluate(self):
        """
        Evalúa la operación pendiente (botón =).

        Tras un cálculo correcto el resultado pasa a ser el primer operando y
        el operador se limpia: un segundo = sin nuevo operador da
        "Incomplete input".
        """
        if self.has_error:
            return

        state = self._state
        second = _parse(state.display_text)
        try:
            if state.first_operand is None or state.selected_operator is None or second is None:
                raise IncompleteInput()
            result = compute(state.first_operand, state.selected_operator, second)
        except CalculatorError as e:
            self._set_error(e.message)
            return

        state.display_text = format_number(result)
        state.first_operand = result
        state.selected_operator = None
        state.start_new_number = True
        state.error_message = None

    # ========================================================================
    # BORRADO
    # ========================================================================
    def clear_entry(self):
        """C: borra la entrada actual; operando y operador pendientes sobreviven."""
        state = self._state
        state.error_message = None
        state.display_text = "0"
        state.start_new_number = True

    def all_clear(self):
        """AC: vuelve al estado inicial."""
        state = self._state
        state.display_text = "0"
        state.error_message = None
        state.first_operand = None
        state.selected_operator = None
        state.start_new_number = True

    # ========================================================================
    # DESPACHO DE BOTONES
    # ========================================================================
    def press(self, label):
        """
        Despacha la etiqueta de un botón del teclado al manejador adecuado.

        Args:
            label (str): "0"-"9", ".", "+", "-", "*", "/", "=", "C" o "AC"

        Raises:
            ValueError: Si la etiqueta no corresponde a ningún botón
        """
        if len(label) == 1 and label in "0123456789":
            self.enter_digit(label)
        elif label == ".":
            self.enter_decimal_point()
        elif label in ("+", "-", "*", "/"):
            self.select_operator(label)
        elif label == "=":
            self.evaluate()
        elif label == "C":
            self.clear_entry()
        elif label == "AC":
            self.all_clear()
        else:
            raise ValueError(f"unknown key: {label!r}")

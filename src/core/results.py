"""
Resultados etiquetados de la aritmética de la calculadora.

Un resultado es un número (Number) o un error (DivisionByZero,
InvalidOperand). Los errores viajan por la aritmética como valores y solo
se convierten en el texto "Error" al llegar al display.
"""

import math


ERROR_TEXT = "Error"

# Por encima de este valor los enteros se muestran en notación exponencial
_EXPONENT_THRESHOLD = 1e21


def format_number(value):
    """
    Convierte un float en el texto que se muestra en pantalla.

    Args:
        value (float): Valor a formatear

    Returns:
        str: Texto del número

    Formato:
        - 20.0 → "20" (enteros sin decimales)
        - 0.1 + 0.2 → "0.30000000000000004" (repr más corto, sin truncar)
        - 1e21 → "1e+21"
        - inf → "Infinity", -inf → "-Infinity"
    """
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        # -0.0 se muestra como "0"
        return str(int(value))
    return repr(value)


def parse_operand(text):
    """
    Interpreta el texto de un operando.

    Args:
        text (str): Dígitos tecleados o resultado previo ("12.5", "Infinity")

    Returns:
        Number | InvalidOperand: InvalidOperand si el texto está vacío,
        es un punto suelto o no representa un número
    """
    try:
        value = float(text)
    except ValueError:
        return InvalidOperand(text)
    if math.isnan(value):
        return InvalidOperand(text)
    return Number(value)


class Number:
    """Resultado numérico válido."""

    is_error = False

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    def to_display(self):
        return format_number(self.value)

    def __eq__(self, other):
        return isinstance(other, Number) and other.value == self.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"


class CalculationError:
    """Base de los resultados de error; todos se muestran como "Error"."""

    is_error = True

    def to_display(self):
        return ERROR_TEXT

    def __eq__(self, other):
        return type(other) is type(self)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class DivisionByZero(CalculationError):
    """División con divisor exactamente cero."""


class InvalidOperand(CalculationError):
    """Operando vacío o no numérico (equivalente a NaN)."""

    def __init__(self, text=""):
        self.text = text

    def __repr__(self):
        return f"InvalidOperand({self.text!r})"

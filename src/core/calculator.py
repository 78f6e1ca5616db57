"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator: una máquina de estados que
construye operandos pulsación a pulsación, encadena operaciones con
evaluación diferida y publica el texto del display tras cada acción.
"""

import math
import operator
import threading

from .results import (
    ERROR_TEXT,
    DivisionByZero,
    InvalidOperand,
    Number,
    parse_operand,
)


OPERATORS = ('+', '-', '*', '/')
SYMBOLS = '0123456789.'

_ARITHMETIC = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
}


def apply_operation(a, b, op):
    """
    Aplica un operador binario a dos resultados.

    Args:
        a (Number | CalculationError): Operando izquierdo (acumulador)
        b (Number | CalculationError): Operando derecho
        op (str | None): Operador ("+", "-", "*", "/")

    Returns:
        Number | CalculationError: Resultado de la operación

    Reglas:
        - Sin operador (o desconocido): devuelve b sin cambios
        - Un error en cualquiera de los lados se propaga (primero a)
        - Divisor exactamente 0: DivisionByZero
        - Resultado NaN (ej: inf - inf): InvalidOperand
    """
    if op not in _ARITHMETIC:
        return b
    if a.is_error:
        return a
    if b.is_error:
        return b
    if op == '/' and b.value == 0:
        return DivisionByZero()

    value = _ARITHMETIC[op](a.value, b.value)
    if math.isnan(value):
        return InvalidOperand()
    return Number(value)


# ============================================================================
# CLASE: CalculatorState
# Propósito: Registro único con todo el estado mutable de la calculadora
# ============================================================================
class CalculatorState:
    """
    Estado completo de la calculadora.

    Variables de estado:
        - pending_operand_text: Dígitos del operando en construcción
        - pending_operator: Operador pendiente de aplicar (o None)
        - accumulator: Operando izquierdo acumulado (Number, error o None)
        - awaiting_next_operand: True justo después de elegir operador
        - displayed_text: Texto que muestra el display
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Vuelve al estado inicial (Idle)."""
        self.pending_operand_text = ""
        self.pending_operator = None
        self.accumulator = None
        self.awaiting_next_operand = False
        self.displayed_text = ""

    def copy(self):
        clone = CalculatorState()
        clone.pending_operand_text = self.pending_operand_text
        clone.pending_operator = self.pending_operator
        clone.accumulator = self.accumulator
        clone.awaiting_next_operand = self.awaiting_next_operand
        clone.displayed_text = self.displayed_text
        return clone

    def _fields(self):
        return (
            self.pending_operand_text,
            self.pending_operator,
            self.accumulator,
            self.awaiting_next_operand,
            self.displayed_text,
        )

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self):
        return (
            f"CalculatorState(pending_operand_text={self.pending_operand_text!r}, "
            f"pending_operator={self.pending_operator!r}, "
            f"accumulator={self.accumulator!r}, "
            f"awaiting_next_operand={self.awaiting_next_operand!r}, "
            f"displayed_text={self.displayed_text!r})"
        )


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora de cuatro operaciones
# Responsabilidades:
#   - Construir operandos dígito por dígito
#   - Encadenar operaciones (6 + 4 * → calcula 10 antes de registrar *)
#   - Evaluar con "=" y dejar el resultado listo para seguir operando
#   - Notificar el texto del display a los sinks registrados
# ============================================================================
class Calculator:
    """
    Calculadora de cuatro operaciones con evaluación diferida.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en pending_operand_text
        2. Usuario selecciona operación → el operando pasa al acumulador
           (o se calcula la operación anterior si ya había una)
        3. Usuario ingresa el segundo operando
        4. Usuario presiona = → se aplica el operador pendiente

    Los errores (división por cero, operando vacío) nunca lanzan excepción:
    el display pasa a mostrar "Error" hasta el siguiente dígito o clear().
    """

    def __init__(self, display_sink=None):
        """
        Inicializa calculadora en estado vacío.

        Args:
            display_sink (callable): Receptor opcional del texto del display
        """
        self._state = CalculatorState()
        self._lock = threading.RLock()
        self._sinks = []
        if display_sink is not None:
            self.add_display_sink(display_sink)

    # ------------------------------------------------------------------
    # Sinks del display
    # ------------------------------------------------------------------
    def add_display_sink(self, sink):
        """Registra un callable que recibe el texto del display."""
        with self._lock:
            self._sinks.append(sink)

    def remove_display_sink(self, sink):
        with self._lock:
            self._sinks.remove(sink)

    def _notify(self):
        text = self._state.displayed_text
        for sink in list(self._sinks):
            sink(text)

    # ------------------------------------------------------------------
    # Operaciones de entrada
    # ------------------------------------------------------------------
    def enter_symbol(self, symbol):
        """
        Añade un dígito o el punto decimal al operando actual.

        Args:
            symbol (str): Dígito "0"-"9" o "."

        Raises:
            ValueError: Si el símbolo no es un dígito ni un punto

        Comportamiento:
            - Display en "Error": reinicio implícito antes de añadir
            - Tras elegir operador: el símbolo inicia el segundo operando
            - Segundo "." en el mismo operando: se ignora
        """
        if len(symbol) != 1 or symbol not in SYMBOLS:
            raise ValueError(f"Símbolo no válido: {symbol!r}")

        with self._lock:
            state = self._state
            if state.displayed_text == ERROR_TEXT:
                state.reset()

            if state.awaiting_next_operand:
                state.pending_operand_text = symbol
                state.awaiting_next_operand = False
            elif symbol == '.' and '.' in state.pending_operand_text:
                return
            else:
                state.pending_operand_text += symbol

            state.displayed_text = state.pending_operand_text
            self._notify()

    def select_operator(self, next_op):
        """
        Selecciona la siguiente operación.

        Args:
            next_op (str): Operador ("+", "-", "*", "/")

        Raises:
            ValueError: Si el operador no es uno de los cuatro soportados

        Casos:
            A. Sin operando nuevo y con acumulador: solo cambia el operador
            B. Sin acumulador: el operando actual pasa a ser el acumulador
            C. Con acumulador y segundo operando tecleado: calcula el
               resultado intermedio, lo muestra y lo acumula
        """
        if next_op not in OPERATORS:
            raise ValueError(f"Operador no válido: {next_op!r}")

        with self._lock:
            state = self._state

            # Caso A: el usuario cambia de opinión sobre el operador
            if state.pending_operand_text == "" and state.accumulator is not None:
                state.pending_operator = next_op
                self._notify()
                return

            if state.accumulator is None:
                # Caso B: primer operando
                state.accumulator = parse_operand(state.pending_operand_text)
                if state.accumulator.is_error:
                    state.displayed_text = ERROR_TEXT
            elif not state.awaiting_next_operand:
                # Caso C: encadenamiento
                result = apply_operation(
                    state.accumulator,
                    parse_operand(state.pending_operand_text),
                    state.pending_operator,
                )
                state.displayed_text = result.to_display()
                state.accumulator = result

            state.awaiting_next_operand = True
            state.pending_operator = next_op
            state.pending_operand_text = ""
            self._notify()

    def evaluate(self):
        """
        Aplica el operador pendiente (botón "=").

        Comportamiento:
            - Nada introducido: no hace nada
            - Solo un número, sin operador: lo muestra tal cual
            - Con acumulador: calcula, muestra el resultado y lo deja como
              acumulador y como texto del operando actual, de modo que un
              operador encadena desde él y un dígito lo extiende
        """
        with self._lock:
            state = self._state
            if state.pending_operand_text == "" and state.accumulator is None:
                return

            if state.accumulator is None:
                state.displayed_text = parse_operand(state.pending_operand_text).to_display()
                self._notify()
                return

            result = apply_operation(
                state.accumulator,
                parse_operand(state.pending_operand_text),
                state.pending_operator,
            )
            state.displayed_text = result.to_display()

            state.accumulator = result
            state.pending_operator = None
            state.pending_operand_text = result.to_display()
            state.awaiting_next_operand = False
            self._notify()

    def clear(self):
        """Borra TODO el estado de la calculadora y deja el display en blanco."""
        with self._lock:
            self._state.reset()
            self._notify()

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def snapshot(self):
        """Copia del estado actual (para inspección y tests)."""
        with self._lock:
            return self._state.copy()

    @property
    def display_text(self):
        return self._state.displayed_text

    @property
    def pending_operator(self):
        return self._state.pending_operator

    @property
    def has_error(self):
        return self._state.displayed_text == ERROR_TEXT

    def get_expression(self):
        """
        Texto de la línea secundaria del display.

        Returns:
            str: "6 +" con operador pendiente, "6 + 4" mientras se teclea
            el segundo operando, "" en cualquier otro caso
        """
        with self._lock:
            state = self._state
            if state.accumulator is None or state.pending_operator is None:
                return ""
            expr = f"{state.accumulator.to_display()} {state.pending_operator}"
            if state.pending_operand_text:
                expr += f" {state.pending_operand_text}"
            return expr

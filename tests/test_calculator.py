"""Tests de la máquina de estados de la calculadora."""

import random
import threading

import pytest

from core.calculator import Calculator, CalculatorState, apply_operation
from core.results import DivisionByZero, InvalidOperand, Number


def press(calc, *keys):
    """Simula pulsaciones: dígitos/punto, operadores, '=' y 'C'."""
    for key in keys:
        if key == '=':
            calc.evaluate()
        elif key == 'C':
            calc.clear()
        elif key in ('+', '-', '*', '/'):
            calc.select_operator(key)
        else:
            for symbol in key:
                calc.enter_symbol(symbol)
    return calc.display_text


@pytest.fixture
def calc():
    return Calculator()


class TestApplyOperation:
    def test_arithmetic(self):
        assert apply_operation(Number(6), Number(4), '+') == Number(10)
        assert apply_operation(Number(6), Number(4), '-') == Number(2)
        assert apply_operation(Number(6), Number(4), '*') == Number(24)
        assert apply_operation(Number(6), Number(4), '/') == Number(1.5)

    def test_divide_by_zero(self):
        assert apply_operation(Number(8), Number(0), '/') == DivisionByZero()
        assert apply_operation(Number(8), Number(-0.0), '/') == DivisionByZero()

    def test_no_operator_returns_right_operand(self):
        assert apply_operation(Number(1), Number(7), None) == Number(7)
        assert apply_operation(Number(1), Number(7), '%') == Number(7)

    def test_errors_propagate(self):
        assert apply_operation(DivisionByZero(), Number(2), '+') == DivisionByZero()
        assert apply_operation(Number(2), InvalidOperand(""), '*') == InvalidOperand()
        assert apply_operation(DivisionByZero(), InvalidOperand(), '-') == DivisionByZero()

    def test_nan_result_is_invalid(self):
        inf = Number(float('inf'))
        assert apply_operation(inf, inf, '-') == InvalidOperand()


class TestSymbolEntry:
    def test_digits_accumulate(self, calc):
        assert press(calc, '123') == '123'

    def test_second_decimal_point_ignored(self, calc):
        press(calc, '1', '.')
        before = calc.snapshot()
        calc.enter_symbol('.')
        assert calc.snapshot() == before
        assert before.pending_operand_text == '1.'

    def test_decimal_point_after_operator(self, calc):
        press(calc, '5', '+', '.', '.', '5')
        assert calc.snapshot().pending_operand_text == '.5'

    def test_invalid_symbol_raises(self, calc):
        with pytest.raises(ValueError):
            calc.enter_symbol('a')
        with pytest.raises(ValueError):
            calc.enter_symbol('12')
        assert calc.snapshot() == CalculatorState()

    def test_digit_after_result_extends_it(self, calc):
        assert press(calc, '2', '+', '3', '=') == '5'
        assert press(calc, '1') == '51'
        assert press(calc, '=') == '51'


class TestOperators:
    def test_chaining(self, calc):
        assert press(calc, '6', '+', '4', '*') == '10'
        assert press(calc, '2', '=') == '20'

    def test_operator_replacement(self, calc):
        press(calc, '5', '+')
        assert press(calc, '-') == '5'
        assert calc.pending_operator == '-'
        assert press(calc, '3', '=') == '2'

    def test_repeated_operator_does_not_recompute(self, calc):
        press(calc, '6', '+', '4', '+')
        snapshot = calc.snapshot()
        assert snapshot.accumulator == Number(10)
        press(calc, '+', '+')
        assert calc.snapshot() == snapshot

    def test_invalid_operator_raises(self, calc):
        with pytest.raises(ValueError):
            calc.select_operator('^')

    def test_operator_on_empty_input_shows_error(self, calc):
        assert press(calc, '+') == 'Error'
        assert press(calc, '4') == '4'
        assert calc.snapshot().accumulator is None

    def test_expression_line(self, calc):
        press(calc, '6', '+')
        assert calc.get_expression() == '6 +'
        press(calc, '4')
        assert calc.get_expression() == '6 + 4'
        press(calc, '=')
        assert calc.get_expression() == ''


class TestEvaluate:
    def test_nothing_entered_is_noop(self):
        received = []
        calc = Calculator(display_sink=received.append)
        calc.evaluate()
        assert received == []
        assert calc.snapshot() == CalculatorState()

    def test_pass_through(self, calc):
        press(calc, '9')
        before = calc.snapshot()
        assert press(calc, '=') == '9'
        after = calc.snapshot()
        assert after.pending_operand_text == before.pending_operand_text
        assert after.accumulator is None

    def test_pass_through_normalizes_number(self, calc):
        assert press(calc, '5', '.', '=') == '5'

    def test_result_reuse(self, calc):
        assert press(calc, '2', '+', '3', '=') == '5'
        assert press(calc, '+', '10', '=') == '15'

    def test_finalization_state(self, calc):
        press(calc, '7', '/', '2', '=')
        state = calc.snapshot()
        assert state.displayed_text == '3.5'
        assert state.accumulator == Number(3.5)
        assert state.pending_operator is None
        assert state.pending_operand_text == '3.5'
        assert state.awaiting_next_operand is False

    def test_repeated_equals_keeps_result(self, calc):
        press(calc, '2', '+', '3', '=')
        assert press(calc, '=', '=') == '5'

    def test_float_text(self, calc):
        assert press(calc, '0.1', '+', '0.2', '=') == '0.30000000000000004'


class TestErrors:
    def test_division_by_zero(self, calc):
        assert press(calc, '8', '/', '0', '=') == 'Error'
        assert calc.has_error
        assert calc.snapshot().accumulator == DivisionByZero()

    def test_error_recovery(self, calc):
        press(calc, '8', '/', '0', '=')
        assert press(calc, '1') == '1'
        state = calc.snapshot()
        assert state.accumulator is None
        assert state.pending_operand_text == '1'

    def test_empty_second_operand(self, calc):
        assert press(calc, '5', '+', '=') == 'Error'

    def test_error_propagates_through_operators(self, calc):
        press(calc, '8', '/', '0', '=')
        assert press(calc, '+') == 'Error'
        assert press(calc, '=') == 'Error'
        assert press(calc, '3') == '3'

    def test_intermediate_division_by_zero(self, calc):
        assert press(calc, '8', '/', '0', '+') == 'Error'
        assert press(calc, '2', '=') == '2'


class TestClear:
    @pytest.mark.parametrize('keys', [
        (),
        ('12.5',),
        ('6', '+'),
        ('6', '+', '4'),
        ('2', '+', '3', '='),
        ('8', '/', '0', '='),
    ])
    def test_clear_restores_initial_state(self, calc, keys):
        press(calc, *keys)
        calc.clear()
        assert calc.snapshot() == CalculatorState()
        calc.clear()
        assert calc.snapshot() == CalculatorState()
        assert calc.display_text == ''


class TestDisplaySinks:
    def test_sink_receives_every_update(self):
        received = []
        calc = Calculator(display_sink=received.append)
        press(calc, '6', '+', '4', '*', '2', '=', 'C')
        assert received == ['6', '6', '4', '10', '2', '20', '']

    def test_ignored_decimal_point_not_published(self):
        received = []
        calc = Calculator(display_sink=received.append)
        press(calc, '1', '.', '.')
        assert received == ['1', '1.']

    def test_remove_sink(self):
        received = []
        calc = Calculator()
        calc.add_display_sink(received.append)
        press(calc, '1')
        calc.remove_display_sink(received.append)
        press(calc, '2')
        assert received == ['1']


class TestInvariants:
    def test_random_sequences_keep_invariants(self):
        rng = random.Random(1234)
        keys = list('0123456789.') + ['+', '-', '*', '/', '=', 'C']
        calc = Calculator()
        for _ in range(2000):
            press(calc, rng.choice(keys))
            state = calc.snapshot()
            if state.awaiting_next_operand:
                assert state.pending_operand_text == ''
            if state.accumulator is None:
                assert state.pending_operator is None
            assert state.displayed_text != 'nan'

    def test_concurrent_entry_is_serialized(self, calc):
        def worker():
            for _ in range(200):
                calc.enter_symbol('1')

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert calc.snapshot().pending_operand_text == '1' * 1600

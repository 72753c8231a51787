"""Tests for the calculator engine state machine.

Digit entry, decimal point, operator chaining, equals, C / AC and the
error state, observed only through the engine's public state.
"""

import math
import random

import pytest

from core.engine import CalculatorEngine, CalculatorState, Operator


@pytest.fixture
def engine():
    return CalculatorEngine()


def press_all(engine, *labels):
    for label in labels:
        engine.press(label)


# --- Initial state ---

def test_fresh_state(engine):
    assert engine.display_text == "0"
    assert engine.error_message is None
    assert engine.first_operand is None
    assert engine.selected_operator is None
    assert engine.start_new_number is True
    assert engine.has_error is False
    assert engine.hint_text == ""


# --- Digit entry ---

def test_digits_append(engine):
    press_all(engine, "1", "2", "3")
    assert engine.display_text == "123"
    assert engine.start_new_number is False


def test_leading_zero_is_replaced(engine):
    press_all(engine, "0", "0", "5")
    assert engine.display_text == "5"


def test_display_capped_at_14_characters(engine):
    for _ in range(20):
        engine.enter_digit("9")
    assert engine.display_text == "9" * 14


def test_invalid_digit_rejected(engine):
    with pytest.raises(ValueError):
        engine.enter_digit("a")
    with pytest.raises(ValueError):
        engine.enter_digit("12")
    assert engine.display_text == "0"


# --- Decimal point ---

def test_decimal_on_new_number(engine):
    engine.enter_decimal_point()
    assert engine.display_text == "0."
    engine.enter_digit("5")
    assert engine.display_text == "0.5"


def test_single_decimal_point(engine):
    press_all(engine, "3", ".", "1", ".", "4")
    assert engine.display_text == "3.14"


def test_decimal_after_operator_starts_new_number(engine):
    press_all(engine, "7", "+", ".")
    assert engine.display_text == "0."


def test_decimal_respects_length_cap(engine):
    for _ in range(14):
        engine.enter_digit("1")
    engine.enter_decimal_point()
    assert engine.display_text == "1" * 14


# --- Operators and equals ---

def test_simple_addition(engine):
    press_all(engine, "2", "+", "3", "=")
    assert engine.display_text == "5"
    assert engine.first_operand == pytest.approx(5.0)
    assert engine.selected_operator is None
    assert engine.start_new_number is True


def test_select_operator_stores_first_operand(engine):
    press_all(engine, "1", "2", "*")
    assert engine.first_operand == pytest.approx(12.0)
    assert engine.selected_operator is Operator.MULTIPLY
    assert engine.start_new_number is True
    assert engine.hint_text == "Op: *"


def test_operator_accepts_enum(engine):
    engine.enter_digit("9")
    engine.select_operator(Operator.SUBTRACT)
    engine.enter_digit("4")
    engine.evaluate()
    assert engine.display_text == "5"


def test_chained_evaluation_left_to_right(engine):
    """2 + 3 * 4 = 20, no operator precedence."""
    press_all(engine, "2", "+", "3", "*")
    assert engine.display_text == "5"
    assert engine.first_operand == pytest.approx(5.0)
    press_all(engine, "4", "=")
    assert engine.display_text == "20"


def test_changing_operator_without_new_number_does_not_chain(engine):
    press_all(engine, "5", "+", "-", "3", "=")
    assert engine.display_text == "2"


def test_result_feeds_next_operation(engine):
    press_all(engine, "2", "+", "3", "=", "*", "4", "=")
    assert engine.display_text == "20"


def test_negative_and_fractional_results(engine):
    press_all(engine, "3", "-", "5", "=")
    assert engine.display_text == "-2"
    engine.all_clear()
    press_all(engine, "1", "/", "3", "=")
    assert engine.display_text == "0.3333333333"
    engine.all_clear()
    press_all(engine, "0", ".", "1", "+", "0", ".", "2", "=")
    assert engine.display_text == "0.3"


def test_digit_after_result_starts_new_number(engine):
    press_all(engine, "2", "+", "2", "=", "7")
    assert engine.display_text == "7"


# --- Errors ---

def test_division_by_zero(engine):
    press_all(engine, "6", "/", "0", "=")
    assert engine.has_error
    assert engine.error_message == "Cannot divide by 0"
    assert engine.display_text == "Error"
    assert engine.first_operand == pytest.approx(6.0)
    assert engine.selected_operator is Operator.DIVIDE


def test_division_by_zero_in_chain_keeps_previous_operator(engine):
    press_all(engine, "8", "/", "0", "+")
    assert engine.error_message == "Cannot divide by 0"
    assert engine.display_text == "Error"
    assert engine.first_operand == pytest.approx(8.0)
    assert engine.selected_operator is Operator.DIVIDE


def test_incomplete_input_on_fresh_state(engine):
    engine.evaluate()
    assert engine.error_message == "Incomplete input"
    assert engine.display_text == "Error"


def test_incomplete_input_without_operator(engine):
    press_all(engine, "5", "=")
    assert engine.error_message == "Incomplete input"


def test_second_equals_is_incomplete(engine):
    press_all(engine, "2", "+", "3", "=", "=")
    assert engine.error_message == "Incomplete input"


def test_invalid_number_when_display_unparseable(engine):
    engine._state.display_text = "1.2.3"
    engine.select_operator("+")
    assert engine.error_message == "Invalid number"
    assert engine.display_text == "Error"
    assert engine.selected_operator is None


def test_unknown_operator(engine):
    engine.enter_digit("4")
    engine.select_operator("%")
    assert engine.error_message == "Unknown operator"
    assert engine.selected_operator is None


def test_error_blocks_operator_and_equals(engine):
    press_all(engine, "6", "/", "0", "=")
    before = engine.snapshot()
    engine.select_operator("+")
    engine.evaluate()
    assert engine.snapshot() == before


def test_digit_clears_error_and_keeps_pending_operation(engine):
    press_all(engine, "6", "/", "0", "=")
    engine.enter_digit("2")
    assert not engine.has_error
    assert engine.display_text == "2"
    engine.evaluate()
    assert engine.display_text == "3"


def test_decimal_point_clears_error(engine):
    engine.evaluate()
    engine.enter_decimal_point()
    assert engine.error_message is None
    assert engine.display_text == "0."


BIG = "9" * 14


def test_chained_overflow_enters_error_state(engine):
    press_all(engine, *BIG, "*")
    for _ in range(30):
        previous = engine.first_operand
        press_all(engine, *BIG, "*")
        if engine.has_error:
            break
    assert engine.error_message == "Overflow"
    assert engine.display_text == "Error"
    assert engine.first_operand == previous
    assert math.isfinite(engine.first_operand)
    assert engine.selected_operator is Operator.MULTIPLY


def test_overflow_on_equals(engine):
    press_all(engine, *BIG, "*")
    while math.isfinite(engine.first_operand * float(BIG)):
        press_all(engine, *BIG, "*")
    press_all(engine, *BIG, "=")
    assert engine.error_message == "Overflow"
    assert engine.display_text == "Error"
    press_all(engine, "0", "-", "0", "=")
    assert engine.display_text == "0"


def test_results_are_not_capped_like_entry(engine):
    press_all(engine, *BIG, "*", *BIG, "=")
    assert len(engine.display_text) > 14
    assert not engine.has_error
    engine.enter_digit("1")
    assert engine.display_text == "1"


def test_hint_shows_error_message(engine):
    engine.evaluate()
    assert engine.hint_text == "Incomplete input"


# --- Clear entry / all clear ---

def test_clear_entry_preserves_pending_operation(engine):
    press_all(engine, "5", "+", "C", "3", "=")
    assert engine.display_text == "8"


def test_clear_entry_dismisses_error(engine):
    engine.evaluate()
    engine.clear_entry()
    assert engine.error_message is None
    assert engine.display_text == "0"
    assert engine.start_new_number is True


def test_all_clear_resets_everything(engine):
    press_all(engine, "6", "/", "0", "=")
    engine.all_clear()
    assert engine.display_text == "0"
    assert engine.error_message is None
    assert engine.first_operand is None
    assert engine.selected_operator is None
    assert engine.start_new_number is True


def test_all_clear_is_idempotent(engine):
    press_all(engine, "1", "2", "+", "4")
    engine.all_clear()
    once = engine.snapshot()
    engine.all_clear()
    assert engine.snapshot() == once
    assert once == CalculatorState()


# --- Dispatch and observation ---

def test_press_unknown_label(engine):
    with pytest.raises(ValueError):
        engine.press("sqrt")


def test_snapshot_is_independent(engine):
    snap = engine.snapshot()
    snap.display_text = "42"
    assert engine.display_text == "0"


def test_random_sequences_keep_invariants():
    rng = random.Random(1234)
    labels = list("0123456789.+-*/=") + ["C", "AC"]
    for _ in range(200):
        engine = CalculatorEngine()
        for _ in range(30):
            label = rng.choice(labels)
            engine.press(label)
            text = engine.display_text
            assert engine.has_error == (text == "Error")
            assert text.count(".") <= 1
            if label in "0123456789.":
                assert len(text) <= 14
            if not engine.has_error:
                assert math.isfinite(float(text))


def test_long_digit_runs_stay_within_cap():
    rng = random.Random(99)
    for _ in range(50):
        engine = CalculatorEngine()
        for _ in range(40):
            engine.press(rng.choice("0123456789."))
            assert len(engine.display_text) <= 14

from config.settings import MAX_AMOUNT
from models.salary import SalaryInput
from utils.validators import (
    FieldError,
    normalize_numeric_text,
    validate,
    build_error_tree,
    collect_error_messages,
    BASE_SALARY_RANGE_MESSAGE,
    FIXED_OVERTIME_RANGE_MESSAGE,
    AVERAGE_OVERTIME_RANGE_MESSAGE,
    HOURS_OUT_OF_RANGE_MESSAGE,
    NEGATIVE_AMOUNT_MESSAGE,
    AMOUNT_TOO_LARGE_MESSAGE,
    validate_amount,
    validate_overtime_hours,
)


def test_normalize_numeric_text():
    """Non-digits are stripped and empty text becomes zero"""
    assert normalize_numeric_text("300,000") == 300000
    assert normalize_numeric_text("￥1,200円") == 1200
    assert normalize_numeric_text("-45") == 45
    assert normalize_numeric_text("12.5") == 125
    assert normalize_numeric_text("") == 0
    assert normalize_numeric_text("abc") == 0
    assert normalize_numeric_text(None) == 0


def test_defaults_are_valid():
    assert validate(SalaryInput.defaults()) == {}


def test_base_salary_range_violation():
    salary_input = SalaryInput.defaults()
    salary_input.base_salary_min = 600000
    tree = validate(salary_input)

    assert tree == {"base_salary_min": FieldError(BASE_SALARY_RANGE_MESSAGE)}
    assert collect_error_messages(tree) == [BASE_SALARY_RANGE_MESSAGE]


def test_overtime_range_violations_are_nested():
    salary_input = SalaryInput.defaults()
    salary_input.overtime_fixed.amount_min = 200000
    salary_input.overtime_average.amount_min = 100000
    tree = validate(salary_input)

    assert tree == {
        "overtime_fixed": {"amount_min": FieldError(FIXED_OVERTIME_RANGE_MESSAGE)},
        "overtime_average": {"amount_min": FieldError(AVERAGE_OVERTIME_RANGE_MESSAGE)},
    }


def test_all_rules_are_independent():
    """Every violated rule is reported, in field declaration order"""
    salary_input = SalaryInput.defaults()
    salary_input.overtime_average.amount_min = 100000
    salary_input.overtime_fixed.amount_min = 200000
    salary_input.base_salary_min = 600000

    assert collect_error_messages(validate(salary_input)) == [
        BASE_SALARY_RANGE_MESSAGE,
        FIXED_OVERTIME_RANGE_MESSAGE,
        AVERAGE_OVERTIME_RANGE_MESSAGE,
    ]


def test_hours_bound():
    salary_input = SalaryInput.defaults()
    salary_input.overtime_fixed.hours = 81
    salary_input.overtime_average.hours = 80

    assert validate(salary_input) == {
        "overtime_fixed": {"hours": FieldError(HOURS_OUT_OF_RANGE_MESSAGE)},
    }


def test_negative_amount_bound():
    salary_input = SalaryInput.defaults()
    salary_input.bonus = -1

    assert collect_error_messages(validate(salary_input)) == [NEGATIVE_AMOUNT_MESSAGE]


def test_first_message_per_field_wins():
    salary_input = SalaryInput.defaults()
    salary_input.base_salary_min = -1
    salary_input.base_salary_max = -2

    assert collect_error_messages(validate(salary_input)) == [
        NEGATIVE_AMOUNT_MESSAGE,
        NEGATIVE_AMOUNT_MESSAGE,
    ]


def test_build_error_tree_orders_by_declaration():
    tree = build_error_tree([
        ("bonus", "c"),
        ("overtime_fixed.amount_max", "b"),
        ("overtime_fixed.hours", "a"),
    ])

    assert list(tree) == ["overtime_fixed", "bonus"]
    assert list(tree["overtime_fixed"]) == ["hours", "amount_max"]


def test_collect_error_messages_walks_deep_trees():
    tree = {
        "a": FieldError("first"),
        "b": {"c": {"d": FieldError("second")}, "e": FieldError("third")},
        "f": {},
    }
    assert collect_error_messages(tree) == ["first", "second", "third"]


def test_normalize_saturates_long_text():
    """Overlong digit text stops at the field limit instead of failing"""
    assert normalize_numeric_text("1" * 5000) == MAX_AMOUNT
    assert normalize_numeric_text("9" * 400) == MAX_AMOUNT
    assert normalize_numeric_text(str(MAX_AMOUNT + 1)) == MAX_AMOUNT
    assert normalize_numeric_text("0" * 50 + "123") == 123
    assert normalize_numeric_text("000") == 0


def test_amount_limit_message():
    salary_input = SalaryInput.defaults()
    salary_input.bonus = MAX_AMOUNT

    assert validate(salary_input) == {"bonus": FieldError(AMOUNT_TOO_LARGE_MESSAGE)}


def test_validate_amount():
    assert validate_amount(0)
    assert validate_amount(MAX_AMOUNT - 1)
    assert not validate_amount(MAX_AMOUNT)
    assert not validate_amount(-1)


def test_validate_overtime_hours():
    assert validate_overtime_hours(0)
    assert validate_overtime_hours(80)
    assert not validate_overtime_hours(81)
    assert not validate_overtime_hours(-1)

import config
from halal_mortgage.core.comparator import compare


def test_default_input_is_the_reference_scenario():
    params = config.default_input()
    assert params.loan_amount == 240_000
    assert params.monthly_buyout == 1_000.0
    assert params.term_years == config.TERM_YEARS == 20


def test_default_input_compares():
    res = compare(config.default_input())
    assert len(res.yearly_breakdown) == config.TERM_YEARS
    assert res.advantage.better_option in {"Halal", "Conventional", "Equal"}


def test_log_level_is_a_logging_name():
    assert config.LOG_LEVEL in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

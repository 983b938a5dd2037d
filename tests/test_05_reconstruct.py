"""Test end-to-end recovery of constant terms."""
import logging
import pytest
from sympy import Symbol
import polyrecover as pr
from polyrecover.names import *


@pytest.mark.timeout(15)
def test_sample_case(sample_case):
    result = pr.reconstruct_constant_term(sample_case)
    assert str(result) == "3"
    assert result.status == OPTIMAL
    assert len(result.solutions) == 4
    assert result.support == 4
    assert result.inconsistent_points == ()


@pytest.mark.timeout(15)
def test_sample_case_polynomial(sample_case):
    result = pr.reconstruct_constant_term(sample_case)
    x = Symbol('x')
    assert result.get_polynomial().as_expr() == x**2 + 3
    assert result.evaluate(6) == 39


@pytest.mark.timeout(60)
def test_second_case_first_integer(second_case):
    result = pr.reconstruct_constant_term(second_case)
    assert result.text == "-6290016743746469796"
    assert len(result.solutions) == 120
    assert result.selected.xs == (1, 2, 3, 4, 5, 6, 7)


@pytest.mark.timeout(60)
def test_second_case_majority(second_case):
    result = pr.reconstruct_constant_term(second_case, policy=MAJORITY)
    assert result.text == "79836264049851"
    assert result.support == 8
    assert result.inconsistent_points == (2, 8)


def test_exactly_k_points():
    record = {"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "1"}, "3": {"base": "10", "value": "2"}}
    result = pr.reconstruct_constant_term(record)
    assert len(result.solutions) == 1
    assert result.text == "1/2"
    assert result.status == FALLBACK


def test_all_subsets_singular():
    record = {
        "keys": {"n": 3, "k": 2},
        "1": {"base": "10", "value": "1"},
        "01": {"base": "10", "value": "2"},
        "001": {"base": "10", "value": "3"},
    }
    result = pr.reconstruct_constant_term(record)
    assert len(result.solutions) == 3
    assert result.text == NO_SOLUTION
    assert result.status == INFEASIBLE


def test_k_larger_than_n(sample_case):
    sample_case[KEYS][K] = 5
    assert pr.reconstruct_constant_term(sample_case).text == NO_SOLUTION


def test_max_subsets(second_case):
    result = pr.reconstruct_constant_term(second_case, max_subsets=1)
    assert len(result.solutions) == 1
    assert result.text == "-6290016743746469796"
    assert pr.reconstruct_constant_term(second_case, max_subsets=0).text == NO_SOLUTION


def test_record_from_file(sample_case, write_record):
    assert pr.reconstruct_constant_term(write_record(sample_case)).text == "3"


def test_parse_record(sample_case):
    case = pr.parse_record(sample_case)
    assert (case.n, case.k) == (4, 3)
    assert [(p.x, p.y) for p in case.points] == [(1, 4), (2, 7), (3, 12), (6, 39)]


def test_points_sorted_by_x():
    record = {"keys": {"k": 1}, "10": {"base": "2", "value": "1"}, "2": {"base": "2", "value": "10"}}
    case = pr.parse_record(record)
    assert [p.x for p in case.points] == [2, 10]
    assert case.n == 2


def test_invalid_digit_aborts_case(sample_case):
    sample_case["2"]["value"] = "112"
    with pytest.raises(pr.InvalidDigit):
        pr.reconstruct_constant_term(sample_case)


@pytest.mark.parametrize("record", [
    [],
    {"1": {"base": "10", "value": "4"}},
    {"keys": {"n": 1}},
    {"keys": {"k": "three"}},
    {"keys": {"k": 0}},
    {"keys": {"k": 1}, "x": {"base": "10", "value": "4"}},
    {"keys": {"k": 1}, "-1": {"base": "10", "value": "4"}},
    {"keys": {"k": 1}, "1": {"value": "4"}},
    {"keys": {"k": 1}, "1": "4"},
])
def test_invalid_record(record):
    with pytest.raises(pr.InvalidRecord):
        pr.parse_record(record)


def test_invalid_json(write_record):
    with pytest.raises(pr.InvalidRecord):
        pr.reconstruct_constant_term(write_record("{not json"))


def test_unsupported_keyword(sample_case):
    with pytest.raises(Exception):
        pr.reconstruct_constant_term(sample_case, solver='glpk')


def test_disable_logger(sample_case):
    with pr.DisableLogger():
        assert pr.reconstruct_constant_term(sample_case).text == "3"


def test_declared_n_mismatch_warns(sample_case, caplog):
    sample_case[KEYS][N] = 9
    with caplog.at_level(logging.WARNING):
        result = pr.reconstruct_constant_term(sample_case)
    assert result.text == "3"
    assert len(result.points) == 4
    assert "n=9" in caplog.text


def test_null_point_entry_skipped(sample_case, caplog):
    sample_case["7"] = None
    with caplog.at_level(logging.WARNING):
        case = pr.parse_record(sample_case)
    assert [p.x for p in case.points] == [1, 2, 3, 6]
    assert "Skipping empty point entry '7'" in caplog.text
    assert pr.reconstruct_constant_term(case).text == "3"


def test_unknown_policy_rejected_before_search(sample_case, monkeypatch):

    def fail(*args, **kwargs):
        raise AssertionError("search_subsets must not run")

    monkeypatch.setattr("polyrecover.reconstruct.search_subsets", fail)
    with pytest.raises(Exception, match="not supported"):
        pr.reconstruct_constant_term(sample_case, policy='vote')

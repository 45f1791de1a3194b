'''
Calculator engine tests
'''

import config
from calculator_engine import CalculatorEngine, ErrorKind, EvaluationOutcome

from pytest import fixture, mark


@fixture
def engine():
    return CalculatorEngine()


@mark.parametrize('expression, expected', [
    ('2+3', '5'),
    ('2+3+', '5'),
    ('6×7', '42'),
    ('9÷4', '2.25'),
    ('5−8', '-3'),
    ('0.1+0.2', '0.3'),
    ('1÷3', '0.3333333333'),
    ('(2+3)×4', '20'),
    ('-2', '-2'),
])
def test_success(engine, expression, expected):
    outcome = engine.evaluate(expression)
    assert outcome.ok
    assert outcome.error is None
    assert outcome.value == expected
    assert outcome.display_text == expected


@mark.parametrize('expression', ['', '   ', '+', '−', '.'])
def test_invalid_expression(engine, expression):
    outcome = engine.evaluate(expression)
    assert not outcome.ok
    assert outcome.error is ErrorKind.INVALID_EXPRESSION
    assert outcome.display_text == config.ERROR_MARKER


@mark.parametrize('expression', [
    '1÷0',
    '1.2.3+1',
    '(4+1',
    '(−8)^(1÷3)',
    '10^400',
])
def test_evaluation_failure(engine, expression):
    outcome = engine.evaluate(expression)
    assert outcome.error is ErrorKind.EVALUATION_FAILURE
    assert outcome.value is None
    assert outcome.display_text == config.ERROR_MARKER


def test_custom_evaluator_is_used():
    class FixedEvaluator:
        def evaluate(self, expression):
            assert expression == '1+1'
            return 7.5

    assert CalculatorEngine(FixedEvaluator()).evaluate('1+1+').value == '7.5'


def test_outcome_constructors():
    assert EvaluationOutcome.success('1') == EvaluationOutcome(value='1')
    failure = EvaluationOutcome.failure(ErrorKind.EVALUATION_FAILURE)
    assert failure.value is None
    assert not failure.ok


@mark.parametrize('expression, expected', [
    ('99999999999999999', '99999999999999999'),
    ('123456789×987654321', '121932631112635269'),
])
def test_large_operands_keep_every_digit(engine, expression, expected):
    assert engine.evaluate(expression).value == expected

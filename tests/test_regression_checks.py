'''
Headless key replay script
'''

from regression_checks import inspect_key_states, run_regressions


def test_regressions_pass(capsys):
    run_regressions()
    assert 'All regression checks passed.' in capsys.readouterr().out


def test_inspect(capsys):
    inspect_key_states('2 + + 3 =')
    out = capsys.readouterr().out
    assert 'total presses:  5' in out
    assert "final result:   '5'" in out

import pytest

from calculator_controller import CalculatorController


@pytest.fixture
def controller():
    return CalculatorController()


@pytest.fixture
def press(controller):
    '''
    Press space separated keys on the shared controller, return final state.
    '''
    def _press(keys):
        for key in keys.split():
            controller.press(key)
        return controller.state
    return _press

import pytest

from lucid.errors import LucidError
from lucid.interpreter import interpret


def test_program_5_undefined_variable(read_example):
    with pytest.raises(LucidError) as excinfo:
        interpret(read_example('program_5.lucid'))
    assert excinfo.value.err.name == 'UndefinedVariable'
    assert 'w' in excinfo.value.err.message

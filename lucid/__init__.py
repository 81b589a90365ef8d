# Lucid language package
# This package provides a tokenizer, parser and interpreter for the Lucid language.
from .interpreter import interpret, run_program, Interpreter
from .environment import Environment
from .errors import LucidError
from .types import FunctionValue

__all__ = [
    'interpret',
    'run_program',
    'Interpreter',
    'Environment',
    'LucidError',
    'FunctionValue',
]

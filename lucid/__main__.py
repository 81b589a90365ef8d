"""CLI entry point for the Lucid interpreter.

Usage:
    python -m lucid [-v|-vv|-vvv] [program_file]
    python -m lucid [-v...] --emit-ast <program_file>
    python -m lucid [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lucid file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a program file the built-in sample program is run. The final
environment is printed one binding per line, with functions shown as
``<function>``. Debug information is written to `debug.txt` in the
current directory when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .ast_json import program_to_obj, ast_from_obj
from .environment import Environment
from .errors import LucidError, MALFORMED_INPUT
from .interpreter import Interpreter
from .parser import parse_program
from .types import ErrorVal, to_string


SAMPLE_CODE = """
let x = 10
let y = x + 5
func add(a, b) { return a + b }
let result = add(x, y)
"""


def print_result(result: Any) -> None:
    if isinstance(result, Environment):
        print("Final Environment:")
        for name, value in result.items():
            print(f"{name} : {to_string(value)}")
    else:
        print(f"Result: {to_string(result)}")


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def execute(statements, debug_level: int) -> None:
    interpreter = Interpreter(debug_level=debug_level)
    try:
        result = interpreter.run(statements)
    except LucidError as e:
        print(f"Error during interpretation: {e}", file=sys.stderr)
        sys.exit(1)
    print_result(result)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Lucid language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LUCID_FILE', help='emit AST JSON for the given .lucid file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Lucid program file (.lucid) to execute; runs a sample program if omitted')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            statements = parse_program(source)
        except LucidError as e:
            print(f"Error during interpretation: {e}", file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        text = read_source(ast_path)
        try:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise LucidError(ErrorVal(MALFORMED_INPUT, f'invalid AST JSON in {ast_path}: {e}'))
            statements = ast_from_obj(data)
            if not isinstance(statements, list):
                statements = [statements]
        except LucidError as e:
            print(f"Error during interpretation: {e}", file=sys.stderr)
            sys.exit(1)
        execute(statements, args.v)
        return

    # Default: execute source file, or the sample program
    source = read_source(Path(args.program)) if args.program else SAMPLE_CODE
    try:
        statements = parse_program(source)
    except LucidError as e:
        print(f"Error during interpretation: {e}", file=sys.stderr)
        sys.exit(1)
    execute(statements, args.v)


if __name__ == '__main__':
    main()

#!/usr/bin/env python3

import argparse as arg
import math
import sys

from conscalc.compiler import compile_expression, MAX_DEPTH
from conscalc.expression import evaluate, dump
from conscalc.errors import CalcError

help_text = f"""Commands:
 - (h): prints the help to the console
 - (q): quits the program
 - (o): execute a operation

Available operations:
 - Addition (+)
 - Subtraction (-)
 - Multiplication (*)
 - Division (/)
 - Power (^)

Constants:
 - pi = {math.pi!r}
 - e = {math.e!r}"""

def format_result(value: float, precision=15) -> str:
    return f'{value:.{precision}g}'

def run_expression(expression: str, args, out=None) -> bool:
    try:
        tree = compile_expression(expression, args.max_depth)
        result = evaluate(tree)
    except CalcError as err:
        print(f"Error, {err}", file=out)
        return False
    if args.tree:
        print(dump(tree), end='', file=out)
    print(f"{expression} = {format_result(result, args.precision)}", file=out)
    return True

def interactive(args, read=input, out=None):
    print("Welcome to calculator, type an action to do (type h for help)", file=out)
    try:
        while True:
            action = read().strip()
            if action == 'h':
                print(help_text, file=out)
            elif action == 'q':
                break
            elif action == 'o':
                expression = read("Enter a operation: ").strip()
                run_expression(expression, args, out)
            else:
                print("Unrecognized action, type h for help", file=out)
    except EOFError:
        pass

# Each nesting level costs a couple of interpreter frames
DEPTH_LIMIT = 300

def precision_type(text: str) -> int:
    value = int(text)
    if value < 1:
        raise arg.ArgumentTypeError(f"precision must be at least 1, got {value}")
    return value

def max_depth_type(text: str) -> int:
    value = int(text)
    if not 1 <= value <= DEPTH_LIMIT:
        raise arg.ArgumentTypeError(f"max depth must be between 1 and {DEPTH_LIMIT}, got {value}")
    return value

def parse_args(argv=None):
    parser = arg.ArgumentParser(
        prog='calc',
        description='Evaluates arithmetic expressions',
        epilog='Version 0.1.0')

    parser.add_argument('expression', nargs='*',
                        help='expression to evaluate; starts the interactive prompt when omitted')
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False)
    parser.add_argument('-p', '--precision', dest='precision', type=precision_type, default=15)
    parser.add_argument('-d', '--max-depth', dest='max_depth', type=max_depth_type, default=MAX_DEPTH)
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)

    if args.expression:
        expression = ' '.join(args.expression)
        return 0 if run_expression(expression, args) else 1

    import readline
    interactive(args)
    return 0

if __name__ == '__main__':
    sys.exit(main())

"""Stack machine command bindings.

Each Command names a case-sensitive token, the number of polynomials that
must be on the stack before it runs, and the action to run.  Actions receive
the Interpreter session; the buffered character of its source is the first
character after the command token (and its single separating space, if any).

Stack effects (top of the stack is popped first):

  ZERO            push 0
  IS_COEFF        print 1/0 for the top
  IS_ZERO         print 1/0 for the top
  CLONE           push a copy of the top
  ADD / MUL       pop p, pop q, push p+q / p*q
  NEG             pop p, push -p
  SUB             pop p, pop q, push p-q
  IS_EQ           print 1/0 for equality of the two topmost (stack unchanged)
  DEG             print total degree of the top
  DEG_BY idx      print degree of the top in variable idx
  AT x            pop p, push p(x, ...)
  PRINT           print the top in canonical form
  POP             pop and discard
  POW e           pop p, push p^e
  COMPOSE k       pop p, then q[k-1], ..., q[0]; push p(q[0], ..., q[k-1])
  DUMP            print the whole stack, bottom to top
  CLEAN           empty the stack
  EXIT            stop the session
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict

from ..core.poly import (
    add, at, clone, compose, degree, degree_by, equal, is_coeff, is_zero,
    make_zero, mul, neg, pow_poly, sub,
)
from ..core.render import to_card, to_cardinal, to_human
from .errors import ErrorKind

if TYPE_CHECKING:
    from .interpreter import Interpreter


@dataclass(frozen=True)
class Command:
    """One entry of the command table."""

    name: str              # exact token, case-sensitive
    required_params: int   # polynomials needed on the stack before running
    action: Callable[["Interpreter"], None]


def op_zero(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.stack.push(make_zero())


def op_is_coeff(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.emit(int(is_coeff(calc.stack.peek())))


def op_is_zero(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.emit(int(is_zero(calc.stack.peek())))


def op_clone(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.stack.push(clone(calc.stack.peek()))


def op_add(calc: Interpreter) -> None:
    calc.expect_line_end()
    p = calc.stack.pop()
    q = calc.stack.pop()
    calc.stack.push(add(p, q))


def op_mul(calc: Interpreter) -> None:
    calc.expect_line_end()
    p = calc.stack.pop()
    q = calc.stack.pop()
    calc.stack.push(mul(p, q))


def op_neg(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.stack.push(neg(calc.stack.pop()))


def op_sub(calc: Interpreter) -> None:
    calc.expect_line_end()
    p = calc.stack.pop()
    q = calc.stack.pop()
    calc.stack.push(sub(p, q))


def op_is_eq(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.emit(int(equal(calc.stack.peek(0), calc.stack.peek(1))))


def op_deg(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.emit(degree(calc.stack.peek()))


def op_deg_by(calc: Interpreter) -> None:
    var_idx = calc.parse_argument(ErrorKind.WRONG_VARIABLE, 0, calc.config.var_idx_max)
    calc.emit(degree_by(calc.stack.peek(), var_idx))


def op_at(calc: Interpreter) -> None:
    x = calc.parse_argument(ErrorKind.WRONG_VALUE, calc.config.at_min, calc.config.at_max)
    calc.stack.push(at(calc.stack.pop(), x))


def op_print(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.emit(to_cardinal(calc.stack.peek()))


def op_pop(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.stack.pop()


def op_pow(calc: Interpreter) -> None:
    exp = calc.parse_argument(ErrorKind.WRONG_VALUE, 0, calc.config.pow_exp_max)
    calc.stack.push(pow_poly(calc.stack.pop(), exp))


def op_compose(calc: Interpreter) -> None:
    count = calc.parse_argument(ErrorKind.WRONG_COUNT, 0, calc.config.compose_count_max)
    calc.require(count + 1)
    p = calc.stack.pop()
    inputs = [calc.stack.pop() for _ in range(count)]
    inputs.reverse()
    calc.stack.push(compose(p, inputs))


_DUMP_RENDERERS = {
    "human": to_human,
    "card": to_card,
    "cardinal": to_cardinal,
}


def op_dump(calc: Interpreter) -> None:
    calc.expect_line_end()
    render = _DUMP_RENDERERS[calc.config.dump_format]
    calc.emit("[" + ", ".join(render(p) for p in calc.stack) + "]")


def op_clean(calc: Interpreter) -> None:
    calc.expect_line_end()
    calc.stack.clear()


def op_exit(calc: Interpreter) -> None:
    raise calc.source.error(ErrorKind.PROCESS_FORCE_RETURN, critical=True)


COMMANDS: Dict[str, Command] = {
    cmd.name: cmd for cmd in (
        Command("ZERO", 0, op_zero),
        Command("IS_COEFF", 1, op_is_coeff),
        Command("IS_ZERO", 1, op_is_zero),
        Command("CLONE", 1, op_clone),
        Command("ADD", 2, op_add),
        Command("MUL", 2, op_mul),
        Command("NEG", 1, op_neg),
        Command("SUB", 2, op_sub),
        Command("IS_EQ", 2, op_is_eq),
        Command("DEG", 1, op_deg),
        Command("DEG_BY", 1, op_deg_by),
        Command("AT", 1, op_at),
        Command("PRINT", 1, op_print),
        Command("POP", 1, op_pop),
        Command("POW", 1, op_pow),
        Command("COMPOSE", 0, op_compose),  # needs count + 1, checked by the action
        Command("DUMP", 0, op_dump),
        Command("CLEAN", 0, op_clean),
        Command("EXIT", 0, op_exit),
    )
}

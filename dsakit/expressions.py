"""Expression handling with stacks: bracket matching, infix to postfix, evaluation."""

from __future__ import annotations

__all__ = [
    "is_balanced",
    "is_balanced_brackets",
    "infix_to_postfix",
    "infix_to_postfix_full",
    "evaluate_postfix",
]

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())

_BASIC_OPERATORS = {"+": 1, "-": 1, "*": 2, "/": 2}

# Precedence of an operator arriving from the input and of one already on
# the stack; the difference gives left or right associativity.
_OUT_STACK = {"+": 1, "-": 1, "*": 3, "/": 3, "^": 6, "(": 7, ")": 0}
_IN_STACK = {"+": 2, "-": 2, "*": 4, "/": 4, "^": 5, "(": 0}

_DIGITS = "0123456789"


def is_balanced(expression: str) -> bool:
    """Return True if the round parentheses in expression match up."""
    stack: list[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            if not stack:
                return False
            stack.pop()
    return not stack


def is_balanced_brackets(expression: str) -> bool:
    """Return True if (), [] and {} in expression match up and nest properly."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[ch]:
                return False
            stack.pop()
    return not stack


def infix_to_postfix(infix: str) -> str:
    """Convert infix with + - * / to postfix; every other character is an operand."""
    stack: list[str] = []
    output: list[str] = []
    for ch in infix:
        if ch not in _BASIC_OPERATORS:
            output.append(ch)
            continue
        while stack and _BASIC_OPERATORS[ch] <= _BASIC_OPERATORS[stack[-1]]:
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix_full(infix: str) -> str:
    """Convert infix with + - * / ^ and parentheses to postfix.

    ``^`` is right associative, the others left associative. Every
    character that is not an operator or parenthesis is an operand.
    """
    stack: list[str] = []
    output: list[str] = []
    i = 0
    while i < len(infix):
        ch = infix[i]
        if ch not in _OUT_STACK:
            output.append(ch)
            i += 1
            continue
        if not stack:
            if ch == ")":
                raise ValueError(f"unmatched ')' at position {i}")
            stack.append(ch)
            i += 1
            continue
        incoming = _OUT_STACK[ch]
        on_stack = _IN_STACK[stack[-1]]
        if incoming > on_stack:
            stack.append(ch)
            i += 1
        elif incoming == on_stack:
            stack.pop()
            i += 1
        else:
            output.append(stack.pop())
    if "(" in stack:
        raise ValueError("unmatched '('")
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) or a == 0 else -quotient


def evaluate_postfix(postfix: str) -> int:
    """Evaluate postfix made of single-digit operands and + - * /.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for ch in postfix:
        if ch in _DIGITS:
            stack.append(ord(ch) - ord("0"))
            continue
        if ch not in _BASIC_OPERATORS:
            raise ValueError(f"unexpected character {ch!r}")
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands")
        x2 = stack.pop()
        x1 = stack.pop()
        if ch == "+":
            stack.append(x1 + x2)
        elif ch == "-":
            stack.append(x1 - x2)
        elif ch == "*":
            stack.append(x1 * x2)
        else:
            stack.append(_truncating_divide(x1, x2))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]
# -*- coding: utf-8 -*-
"""prt 스크립트 인터프리터 (prt / input / 대입 / if - else if - else)"""

from .expr import evaluate, parse_expr
from .interpreter import Interpreter, read_source, run_source, split_lines
from .literal import resolve_literal
from .parser import count_statements, parse_program, parse_statement
from .values import Value, VariableStore

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "Value",
    "VariableStore",
    "count_statements",
    "evaluate",
    "parse_expr",
    "parse_program",
    "parse_statement",
    "read_source",
    "resolve_literal",
    "run_source",
    "split_lines",
]

# -*- coding: utf-8 -*-
"""
줄 목록 -> 튜플 IR [(line_index, stmt), ...]

stmt:
  ('PRINT', expr)
  ('INPUT', name)
  ('ASSIGN', name, expr)
  ('IF_CHAIN', [(cond_expr, body), ...], else_body | None)
  ('NOP',)

IF 체인은 한 번에 구조만 결합한다 (2nd pass 없이 줄 위치 계산으로).
어느 분기를 실행할지는 interpreter가 정한다.
"""

from collections import Counter
from typing import Any, List, Tuple

from .blocks import (
    extract_condition,
    find_block_end,
    get_block_content,
    header_at,
    is_else_header,
    is_else_if_header,
    is_if_header,
)
from .expr import parse_expr, trim

Stmt = Tuple[Any, ...]
LineStmt = Tuple[int, Stmt]

PRINT_KW = 'prt '
INPUT_KW = 'input '

# '=' 앞뒤에 이 문자가 있으면 대입이 아니라 비교연산자의 일부
NOT_ASSIGN_BEFORE = ('=', '!', '>', '<')
NOT_ASSIGN_AFTER = ('=',)


def find_assignment(text: str) -> int:
    for i, ch in enumerate(text):
        if ch != '=':
            continue
        if text[i - 1:i] in NOT_ASSIGN_BEFORE or text[i + 1:i + 2] in NOT_ASSIGN_AFTER:
            continue
        return i
    return -1


def parse_statement(line: str) -> Stmt:
    s = trim(line)

    if s.startswith(PRINT_KW):
        return ('PRINT', parse_expr(s[len(PRINT_KW):]))

    if s.startswith(INPUT_KW):
        words = s[len(INPUT_KW):].split()
        if not words:
            return ('NOP',)
        return ('INPUT', words[0])

    idx = find_assignment(s)
    if idx != -1:
        name = trim(s[:idx])
        if name and len(name.split()) == 1:
            return ('ASSIGN', name, parse_expr(s[idx + 1:]))

    return ('NOP',)


def _parse_branch(lines: List[str], pos: int) -> Tuple[List[LineStmt], int]:
    end = find_block_end(lines, pos)
    body = parse_program(get_block_content(lines, pos, end))
    return body, end


def _parse_chain(lines: List[str], pos: int) -> Tuple[Stmt, int]:
    branches = []

    cond = parse_expr(extract_condition(trim(lines[pos])))
    body, pos = _parse_branch(lines, pos)
    branches.append((cond, body))

    # else if 는 바로 다음 줄에 있어야 체인이 이어진다
    while header_at(lines, pos + 1, is_else_if_header):
        pos += 1
        cond = parse_expr(extract_condition(trim(lines[pos])))
        body, pos = _parse_branch(lines, pos)
        branches.append((cond, body))

    else_body = None
    if header_at(lines, pos + 1, is_else_header):
        pos += 1
        else_body, pos = _parse_branch(lines, pos)

    return ('IF_CHAIN', branches, else_body), pos


def parse_program(lines: List[str]) -> List[LineStmt]:
    out: List[LineStmt] = []
    i = 0
    n = len(lines)
    while i < n:
        if is_if_header(trim(lines[i])):
            chain, end = _parse_chain(lines, i)
            out.append((i, chain))
            i = end + 1
        else:
            out.append((i, parse_statement(lines[i])))
            i += 1
    return out


def count_statements(prog: List[LineStmt]) -> Counter:
    """Deep statement-tag counts, chain bodies included."""
    c = Counter()

    def walk(body):
        for _, st in body:
            c[st[0]] += 1
            if st[0] == 'IF_CHAIN':
                _, branches, else_body = st
                for _, b in branches:
                    walk(b)
                if else_body is not None:
                    walk(else_body)

    walk(prog)
    return c

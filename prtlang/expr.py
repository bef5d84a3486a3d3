# -*- coding: utf-8 -*-
"""
비교식 평가기

식 텍스트 -> 튜플 트리 -> Value
  ('LIT', text)
  ('CMP', op, left_node, right_node)

연산자는 텍스트에 처음 나온 것이 아니라 COMPARISON_OPS 우선순위 순서로 찾는다.
양쪽은 다시 전체 식으로 파싱되므로 중첩 비교도 허용된다 (예: 1 < 2 == 3 < 4).
"""

from .literal import resolve_literal
from .values import Value, NUMBER

TRIM_CHARS = " \t\n\r"

# 검출 우선순위 (앞쪽이 먼저)
COMPARISON_OPS = ('==', '!=', '>=', '<=', '>', '<')


def trim(text):
    return text.strip(TRIM_CHARS)


def find_operator(text):
    """Return (op, index) of the highest-priority operator present, or (None, -1)."""
    for op in COMPARISON_OPS:
        idx = text.find(op)
        if idx != -1:
            return op, idx
    return None, -1


def parse_expr(text):
    s = trim(text)
    op, idx = find_operator(s)
    if op is None:
        return ('LIT', s)
    left = parse_expr(s[:idx])
    right = parse_expr(s[idx + len(op):])
    return ('CMP', op, left, right)


def compare(op, a, b):
    if op in ('==', '!='):
        if a.kind == NUMBER and b.kind == NUMBER:
            same = a.data == b.data
        else:
            same = a.render() == b.render()
        return Value.boolean(same if op == '==' else not same)
    # 순서 비교는 숫자 필드끼리 (숫자가 아니면 0)
    x, y = a.numeric, b.numeric
    if op == '>': return Value.boolean(x > y)
    if op == '<': return Value.boolean(x < y)
    if op == '>=': return Value.boolean(x >= y)
    if op == '<=': return Value.boolean(x <= y)
    raise ValueError(f"Unknown comparison operator {op!r}")


def eval_node(node, store):
    typ = node[0]
    if typ == 'LIT':
        return resolve_literal(node[1], store)
    if typ == 'CMP':
        _, op, left, right = node
        return compare(op, eval_node(left, store), eval_node(right, store))
    raise ValueError(f"Unknown expr node {node}")


def evaluate(text, store):
    return eval_node(parse_expr(text), store)

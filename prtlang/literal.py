# -*- coding: utf-8 -*-
"""
리터럴/식별자 해석기
필요 패키지: pip install lark

토큰(이미 trim, 비교연산자 없음) -> Value
  1) ""            -> EMPTY
  2) "..."         -> STRING (escape 처리 없음)
  3) 변수 이름     -> 저장된 값
  4) true / false  -> BOOL
  5) 10진 실수     -> NUMBER, 앞부분만 숫자면 'Invalid number format', 아니면 'Unknown identifier'
"""

import math

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from .values import Value

# -----------------------------
# 1) 숫자 리터럴 문법 (lexer="basic", 공백 무시 없음)
# -----------------------------
NUMBER_GRAMMAR = r"""
start: SIGNED_NUMBER

%import common.SIGNED_NUMBER
"""

BOOL_LITERALS = {'true': True, 'false': False}


# -----------------------------
# 2) Transformer
# -----------------------------
@v_args(inline=True)
class NumberTransformer(Transformer):
    def start(self, tok):
        return Value.number(float(tok.value))


_number_parser = Lark(NUMBER_GRAMMAR, parser="lalr", start="start", lexer="basic")
_number_transformer = NumberTransformer()


def parse_number(token):
    """Strict decimal parse of the whole token.

    Returns the Number value, or an Error value: 'Invalid number format' when
    only a prefix of the token is numeric or the value overflows a double,
    'Unknown identifier' otherwise.
    """
    try:
        tree = _number_parser.parse(token)
    except UnexpectedInput as e:
        # pos_in_stream > 0 이면 앞부분은 숫자로 읽혔다는 뜻
        if e.pos_in_stream:
            return Value.error(f"Invalid number format: '{token}'")
        return Value.error(f"Unknown identifier: '{token}'")
    value = _number_transformer.transform(tree)
    # 1e400 처럼 범위를 넘으면 inf 대신 형식 오류
    if math.isinf(value.data):
        return Value.error(f"Invalid number format: '{token}'")
    return value


def is_quoted(text):
    return len(text) >= 2 and text[0] == '"' and text[-1] == '"'


def resolve_literal(text, store):
    if not text:
        return Value.empty()
    if is_quoted(text):
        return Value.string(text[1:-1])
    found = store.get(text)
    if found is not None:
        return found
    if text in BOOL_LITERALS:
        return Value.boolean(BOOL_LITERALS[text])
    return parse_number(text)

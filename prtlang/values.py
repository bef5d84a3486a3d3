# -*- coding: utf-8 -*-
"""
값(Value) 모델 + 변수 저장소

Value는 STRING / NUMBER / BOOL / EMPTY / ERROR 중 하나만 의미를 갖는 태그 값.
ERROR도 일반 값처럼 대입/출력/비교된다 (예외로 던지지 않음).
"""

STRING = 'STRING'
NUMBER = 'NUMBER'
BOOL = 'BOOL'
EMPTY = 'EMPTY'
ERROR = 'ERROR'

KINDS = (STRING, NUMBER, BOOL, EMPTY, ERROR)


class Value:
    __slots__ = ('kind', 'data')

    def __init__(self, kind=EMPTY, data=None):
        if kind not in KINDS:
            raise ValueError(f"Unknown value kind {kind!r}")
        self.kind = kind
        self.data = data

    # ----- constructors -----
    @classmethod
    def string(cls, text):
        return cls(STRING, str(text))

    @classmethod
    def number(cls, n):
        return cls(NUMBER, float(n))

    @classmethod
    def boolean(cls, b):
        return cls(BOOL, bool(b))

    @classmethod
    def empty(cls):
        return cls(EMPTY)

    @classmethod
    def error(cls, message):
        return cls(ERROR, str(message))

    # ----- accessors -----
    @property
    def numeric(self):
        # 순서 비교(>,<,>=,<=)에 쓰는 숫자 필드: NUMBER가 아니면 0
        return self.data if self.kind == NUMBER else 0.0

    def is_true(self):
        return self.kind == BOOL and self.data

    def render(self):
        if self.kind == STRING:
            return self.data
        if self.kind == NUMBER:
            return f"{self.data:f}"
        if self.kind == BOOL:
            return 'true' if self.data else 'false'
        if self.kind == ERROR:
            return f"ERROR: {self.data}"
        return 'EMPTY'

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.kind == other.kind and self.data == other.data

    def __repr__(self):
        if self.kind == EMPTY:
            return "Value(EMPTY)"
        return f"Value({self.kind},{self.data!r})"


class VariableStore:
    """이름 -> Value. 프로그램 실행 1회 동안 유지, 스코프/삭제 없음."""

    def __init__(self):
        self.vars = {}

    def get(self, name):
        return self.vars.get(name)

    def set(self, name, value):
        if not isinstance(value, Value):
            raise TypeError(f"Store expects Value, got {type(value).__name__}")
        self.vars[name] = value

    def __contains__(self, name):
        return name in self.vars

    def __len__(self):
        return len(self.vars)

    def __repr__(self):
        return f"VariableStore({self.vars!r})"

# -*- coding: utf-8 -*-
import sys

from .expr import eval_node
from .parser import parse_program
from .values import Value, VariableStore


class Interpreter:
    def __init__(self, store=None, reader=None, out=None):
        # 실행마다 자기 저장소를 가진다 (전역 상태 없음)
        self.store = store if store is not None else VariableStore()
        self.reader = reader  # readline() 가능한 스트림, None이면 표준입력
        self.out = out        # None이면 sys.stdout

    def eval_expr(self, node):
        return eval_node(node, self.store)

    def truthy(self, node):
        return self.eval_expr(node).is_true()

    def read_line(self):
        if self.reader is None:
            try:
                return input()
            except EOFError:
                return ''
        line = self.reader.readline()
        if line.endswith('\n'):
            line = line[:-1]
        return line

    def emit(self, text):
        print(text, file=self.out)

    def run(self, program):
        for ln, st in program:
            self.exec_stmt(st)

    def run_lines(self, lines):
        self.run(parse_program(lines))

    def exec_stmt(self, st):
        typ = st[0]
        if typ == 'PRINT':
            self.emit(self.eval_expr(st[1]).render())
        elif typ == 'INPUT':
            self.store.set(st[1], Value.string(self.read_line()))
        elif typ == 'ASSIGN':
            self.store.set(st[1], self.eval_expr(st[2]))
        elif typ == 'IF_CHAIN':
            self.exec_chain(st)
        elif typ == 'NOP':
            pass
        else:
            raise RuntimeError(f"Unknown stmt {st}")

    def exec_chain(self, st):
        """첫 번째 참 분기만 실행. 만족된 뒤의 조건은 평가하지 않는다."""
        _, branches, else_body = st
        for cond, body in branches:
            if self.truthy(cond):
                self.run(body)
                return
        if else_body is not None:
            self.run(else_body)


# -------------- high-level helpers --------------
def split_lines(text):
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return lines


def read_source(path):
    with open(path, 'r', encoding='utf-8') as fh:
        return [line.rstrip('\n') for line in fh]


def run_source(text, reader=None, out=None, store=None):
    rt = Interpreter(store=store, reader=reader, out=out)
    rt.run_lines(split_lines(text))
    return rt.store

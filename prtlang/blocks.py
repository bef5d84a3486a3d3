# -*- coding: utf-8 -*-
"""
블록 위치 계산 (AST 없이 중괄호 균형만으로)

find_block_end(lines, start)        -> 블록이 닫히는 줄 index
get_block_content(lines, start, end) -> 중괄호 안쪽 텍스트 (새 줄 목록)
"""

from typing import List, Optional

from .expr import trim

IF_KW = 'if'
ELSE_IF_KW = 'else if'
ELSE_KW = 'else'


def is_if_header(text: str) -> bool:
    return text.startswith(IF_KW)


def is_else_if_header(text: str) -> bool:
    return text.startswith(ELSE_IF_KW)


def is_else_header(text: str) -> bool:
    return text.startswith(ELSE_KW) and not is_else_if_header(text)


def extract_condition(header: str) -> str:
    """Text between the header's first '(' and its last ')'."""
    lp = header.find('(')
    rp = header.rfind(')')
    if lp == -1 or rp <= lp:
        return ''
    return header[lp + 1:rp]


def find_block_end(lines: List[str], start: int) -> int:
    balance = 0
    started = False
    for i in range(start, len(lines)):
        for ch in lines[i]:
            if ch == '{':
                balance += 1
                started = True
            elif ch == '}':
                balance -= 1
                if started and balance == 0:
                    return i
    # 닫는 괄호가 없으면 입력 끝을 블록 끝으로 본다
    return len(lines) - 1


def _first_brace(lines: List[str], start: int, end: int) -> Optional[int]:
    for i in range(start, end + 1):
        if '{' in lines[i]:
            return i
    return None


def get_block_content(lines: List[str], start: int, end: int) -> List[str]:
    b = _first_brace(lines, start, end)
    if b is None:
        return []

    first = lines[b]
    after_open = first[first.index('{') + 1:]

    if b == end:
        close = after_open.rfind('}')
        return [after_open if close == -1 else after_open[:close]]

    last = lines[end]
    close = last.rfind('}')
    body = [after_open]
    body.extend(lines[b + 1:end])
    body.append(last if close == -1 else last[:close])
    return body


def header_at(lines: List[str], pos: int, predicate) -> bool:
    return 0 <= pos < len(lines) and predicate(trim(lines[pos]))

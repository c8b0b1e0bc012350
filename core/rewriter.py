"""core/rewriter.py - 百分号与隐式乘法的文本改写"""
import logging

from config.config import ENGINE_CONFIG

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
OPERATOR_CHARS = "+-*/%"


def _skip_spaces(text, idx):
    """返回 idx 起第一个非空白字符的位置"""
    while idx < len(text) and text[idx].isspace():
        idx += 1
    return idx


def _scan_digits(text, idx):
    while idx < len(text) and text[idx] in DIGITS:
        idx += 1
    return idx


def _minus_is_unary(last_char):
    """last_char 为改写结果中最后一个非空白字符；开头、操作符之后或 '(' 之后的 '-' 为一元负号"""
    return last_char is None or last_char in OPERATOR_CHARS or last_char == '('


def _match_percent_literal(text, start):
    """
    尝试在 start 处匹配 “可选负号 + 数字 + 可选小数部分 + %”

    Returns:
        (literal, end) 匹配成功时返回数字字面量和 '%' 之后的位置，否则 None
    """
    idx = start
    if text[idx] == '-':
        idx += 1
    digits_end = _scan_digits(text, idx)
    if digits_end == idx:
        return None

    end = digits_end
    # 小数部分必须是 '.' 后至少一位数字，否则退回到整数部分
    if end < len(text) and text[end] == '.':
        frac_end = _scan_digits(text, end + 1)
        if frac_end > end + 1:
            end = frac_end

    if end >= len(text) or text[end] != '%':
        return None

    # % 后紧跟另一个数字时，% 保留为取模运算符
    follow = _skip_spaces(text, end + 1)
    if follow < len(text) and (text[follow] in DIGITS or text[follow] == '.'):
        return None

    return text[start:end], end + 1


def rewrite_percent(text):
    """
    将后缀百分号字面量改写为除法：50% -> (50/100)，-5% -> (-5/100)

    从左到右扫描，匹配不重叠；负号只在一元位置时并入字面量，
    其余字符原样保留。
    """
    divisor = ENGINE_CONFIG["percent_divisor"]
    out = []
    i = 0
    last_char = None  # 已输出内容中最后一个非空白字符
    while i < len(text):
        ch = text[i]
        match = None
        if ch == '-' and _minus_is_unary(last_char):
            match = _match_percent_literal(text, i)
        elif ch in DIGITS:
            match = _match_percent_literal(text, i)

        if match is not None:
            literal, i = match
            out.append(f"({literal}/{divisor})")
            last_char = ')'
            continue

        out.append(ch)
        if not ch.isspace():
            last_char = ch
        i += 1

    rewritten = ''.join(out)
    if rewritten != text:
        logger.debug(f"Percent rewrite: {text!r} -> {rewritten!r}")
    return rewritten


def insert_implicit_multiplication(text):
    """
    在并列的项之间补上 '*'：
        2(3+4)  -> 2*(3+4)
        )(      -> )*(
        )5      -> )*5
    两者之间的空白被吞掉；已有操作符分隔时不插入。
    """
    # 第一遍：数字或 ')' 后（跳过空白）紧跟 '('
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        out.append(ch)
        i += 1
        if ch in DIGITS or ch == ')':
            nxt = _skip_spaces(text, i)
            if nxt < len(text) and text[nxt] == '(':
                out.append('*(')
                i = nxt + 1
    text = ''.join(out)

    # 第二遍：')' 后（跳过空白）紧跟数字
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        out.append(ch)
        i += 1
        if ch == ')':
            nxt = _skip_spaces(text, i)
            if nxt < len(text) and text[nxt] in DIGITS:
                out.append('*')
                out.append(text[nxt])
                i = nxt + 1

    return ''.join(out)

import logging

from common.code_tables import (
    CREDIT_CODE_CHARS,
    CREDIT_CODE_INDEX,
    CREDIT_CODE_MODULUS,
    CREDIT_CODE_WEIGHTS,
    DIGITS,
    IDENTITY_CHECK_CODES,
    IDENTITY_MODULUS,
    IDENTITY_WEIGHTS,
)
from common.exceptions import InvalidArgumentError

PREFIX_LENGTH = 17


def _is_digits(text):
    return bool(text) and all(char in DIGITS for char in text)


def credit_code_parity(prefix: str) -> int:
    """
    计算统一社会信用代码前17位的校验位

    参数:
        prefix: 至少17位的信用代码，只取前17位参与计算
    返回:
        校验字符在字符集中的下标 [0, 30]；包含非法字符或长度不足时返回 -1
    """
    if len(prefix) < PREFIX_LENGTH:
        return -1
    total = 0
    for char, weight in zip(prefix[:PREFIX_LENGTH], CREDIT_CODE_WEIGHTS):
        code_index = CREDIT_CODE_INDEX.get(char)
        if code_index is None:
            return -1
        total += code_index * weight
    result = CREDIT_CODE_MODULUS - total % CREDIT_CODE_MODULUS
    return 0 if result == CREDIT_CODE_MODULUS else result


def credit_code_check_char(prefix: str) -> str:
    parity = credit_code_parity(prefix)
    if parity == -1:
        logging.error(f"信用代码前17位格式错误：{prefix}")
        raise InvalidArgumentError(f"信用代码前17位包含非法字符：{prefix}")
    return CREDIT_CODE_CHARS[parity]


def validate_credit_code(code: str) -> bool:
    """校验一个完整的18位统一社会信用代码"""
    if not isinstance(code, str) or len(code) != PREFIX_LENGTH + 1:
        return False
    if not _is_digits(code[2:8]):
        return False
    parity = credit_code_parity(code)
    if parity == -1:
        return False
    return CREDIT_CODE_CHARS[parity] == code[-1]


def identity_check_char(prefix: str) -> str:
    """
    计算18位身份证的第18位校验码

    参数:
        prefix: 身份证前17位，必须全部为数字
    """
    if len(prefix) != PREFIX_LENGTH or not _is_digits(prefix):
        logging.error(f"身份证前17位格式错误：{prefix}")
        raise InvalidArgumentError(f"身份证前17位必须是17位数字：{prefix}")
    total = sum(int(digit) * weight for digit, weight in zip(prefix, IDENTITY_WEIGHTS))
    return IDENTITY_CHECK_CODES[total % IDENTITY_MODULUS]


def validate_identity_code(code: str) -> bool:
    """15位身份证只校验数字格式，18位身份证还要校验最后一位"""
    if not isinstance(code, str):
        return False
    if len(code) == 15:
        return _is_digits(code)
    if len(code) != PREFIX_LENGTH + 1:
        return False
    prefix = code[:PREFIX_LENGTH]
    if not _is_digits(prefix):
        return False
    return identity_check_char(prefix) == code[-1]

"""
设置值的文本转换

所有设置都以字符串保存，这里集中处理数字与布尔的解析和格式化。
解析失败统一返回 None，由调用方决定哨兵值。
"""

import math
from typing import Optional


# 视为 True 的文本（已 trim + lower）
TRUE_LITERALS = ("1", "yes", "true")


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    解析浮点数

    允许前后空白；拒绝数字分隔下划线（如 "1_000"）。

    Returns:
        浮点数，无法解析时返回 None
    """
    if text is None or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_int(text: Optional[str]) -> Optional[int]:
    """解析十进制整数，"1.0" 之类的小数文本视为无效"""
    if text is None or "_" in text:
        return None
    try:
        return int(text.strip(), 10)
    except ValueError:
        return None


def parse_bool(text: Optional[str]) -> bool:
    """"1" / "yes" / "true"（忽略大小写与首尾空白）为真，其余均为假"""
    if text is None:
        return False
    return text.strip().lower() in TRUE_LITERALS


def round_digits(value: float, digits: int = -1) -> float:
    """
    按小数位数舍入

    digits < 0 表示不舍入；否则使用内置 round（银行家舍入）。
    """
    if digits < 0 or math.isnan(value) or math.isinf(value):
        return value
    return round(value, digits)


def format_float(value: float, digits: int = -1) -> str:
    """
    格式化浮点数

    Args:
        value: 数值
        digits: 最多保留的小数位数；-1 表示完整精度

    Returns:
        文本。小数部分末尾的 0 会被去掉:
        format_float(3.1230000, 4) == "3.123"，format_float(14.0) == "14"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if digits < 0:
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
    else:
        text = f"{value:.{digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_int(value: int) -> str:
    """十进制整数文本"""
    return str(int(value))


def format_bool(value: bool) -> str:
    """布尔值写作 "1" / "0" """
    return "1" if value else "0"

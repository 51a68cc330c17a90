"""
XML 编解码 - 基础设施层

文件格式: 一个根元素，每个设置是根元素的直接子元素，
元素名为键，元素文本为值。

    <Settings>
      <FullScreen>1</FullScreen>
      <FontSize>14</FontSize>
    </Settings>
"""

import re
import xml.etree.ElementTree as ET
from typing import List, Mapping, Tuple


# XML 元素名（NCName，不允许冒号前缀）
_NAME_START = (
    "A-Za-z_"
    "\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
    "\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF\uFDF0-\uFFFD"
)
_NAME_CHAR = _NAME_START + "\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"
_XML_NAME_RE = re.compile(f"[{_NAME_START}][{_NAME_CHAR}]*")

# XML 1.0 不允许出现的字符（Char 产生式之外）
_INVALID_CHAR_RE = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


class InvalidSettingKeyError(ValueError):
    """键不是合法的 XML 元素名，无法序列化"""

    def __init__(self, key: str):
        super().__init__(f"设置键不是合法的 XML 元素名: {key!r}")
        self.key = key


class InvalidSettingValueError(ValueError):
    """值包含 XML 不允许的字符，无法序列化"""

    def __init__(self, key: str, value: str):
        super().__init__(f"设置 {key!r} 的值包含 XML 不允许的字符: {value!r}")
        self.key = key
        self.value = value


def is_valid_element_name(name: str) -> bool:
    """判断字符串能否作为 XML 元素名"""
    return bool(name) and _XML_NAME_RE.fullmatch(name) is not None


def is_valid_text(text: str) -> bool:
    """判断字符串能否作为元素文本写入"""
    return _INVALID_CHAR_RE.search(text) is None


def encode_settings(
    settings: Mapping[str, object],
    root_tag: str = "Settings",
    encoding: str = "utf-8",
    indent: str = "  "
) -> bytes:
    """
    将设置序列化为 XML 文档

    Args:
        settings: 键值映射，按迭代顺序输出
        root_tag: 根元素名称
        encoding: 输出编码
        indent: 缩进字符串，空串表示单行

    Returns:
        带 XML 声明的文档字节

    Raises:
        InvalidSettingKeyError: 某个键或根元素名不是合法的元素名
        InvalidSettingValueError: 某个值包含 XML 不允许的字符
    """
    if not is_valid_element_name(root_tag):
        raise InvalidSettingKeyError(root_tag)

    root = ET.Element(root_tag)
    for key, value in settings.items():
        if not is_valid_element_name(key):
            raise InvalidSettingKeyError(key)
        text = "" if value is None else str(value)
        if not is_valid_text(text):
            raise InvalidSettingValueError(key, text)
        item = ET.SubElement(root, key)
        item.text = text

    if indent:
        ET.indent(root, space=indent)

    return ET.tostring(root, encoding=encoding, xml_declaration=True)


def decode_settings(data: bytes) -> List[Tuple[str, str]]:
    """
    解析 XML 文档

    只读取根元素的直接子元素；值为子元素内全部文本的拼接。
    同名元素按出现顺序全部返回，由调用方决定覆盖规则。

    Raises:
        xml.etree.ElementTree.ParseError: 文档格式错误
    """
    root = ET.fromstring(data)
    return [(item.tag, "".join(item.itertext())) for item in root]

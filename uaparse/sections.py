from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Section:
    """Одна секция User-Agent: продукт name/version и необязательный комментарий в скобках"""
    name: str = ''
    version: str = ''
    comment: Tuple[str, ...] = field(default_factory=tuple)


def read_until(ua, index, delimiter, nested=False):
    """Читает строку с позиции index до разделителя или до конца строки.

    При nested=True вложенные '(' учитываются, и разделитель закрывает
    группу только на нулевой глубине. Возвращает прочитанное и индекс
    сразу за разделителем.
    """
    depth = 0
    i = index
    while i < len(ua):
        ch = ua[i]
        if ch == delimiter:
            if depth == 0:
                return ua[index:i], i + 1
            depth -= 1
        elif nested and ch == '(':
            depth += 1
        i += 1
    return ua[index:], i + 1


def parse_product(product):
    """Делит продукт 'Name/Version' по первому '/'"""
    parts = product.split('/', 1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return product, ''


def parse_section(ua, index):
    buffer, index = read_until(ua, index, ' ')
    name, version = parse_product(buffer)
    comment = ()
    if index < len(ua) and ua[index] == '(':
        buffer, index = read_until(ua, index + 1, ')', nested=True)
        comment = tuple(buffer.split('; '))
        # пробел после закрывающей скобки
        index += 1
    return Section(name, version, comment), index


def tokenize(ua):
    """Разбивает User-Agent на упорядоченный список секций.

    Никогда не падает: незакрытые токены и комментарии дочитываются до конца строки.
    """
    sections = []
    index = 0
    while index < len(ua):
        section, index = parse_section(ua, index)
        sections.append(section)
    return sections

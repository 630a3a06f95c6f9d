"""
uaparse - разбор заголовка User-Agent в браузер, движок, ОС, платформу,
локаль и признаки бота/мобильного устройства.
"""

__version__ = "1.0.0"

from .browser import Browser
from .os_info import OSInfo
from .sections import Section, parse_product, tokenize
from .user_agent import ParseResult, UserAgent, parse

__all__ = [
    "Browser",
    "OSInfo",
    "ParseResult",
    "Section",
    "UserAgent",
    "parse",
    "parse_product",
    "tokenize",
    "__version__",
]

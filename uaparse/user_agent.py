import logging
from dataclasses import dataclass, field

from .bot import check_bot, google_bot
from .browser import Browser, detect_browser
from .os_info import os_info
from .platforms import detect_os
from .sections import tokenize
from .state import ParseState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора User-Agent. Неизменяем после создания."""
    ua: str = ''
    mozilla: str = ''
    platform: str = ''
    os: str = ''
    localization: str = ''
    browser: Browser = field(default_factory=Browser)
    is_bot: bool = False
    is_mobile: bool = False

    @property
    def engine(self):
        return self.browser.engine, self.browser.engine_version

    @property
    def browser_info(self):
        return self.browser.name, self.browser.version

    def os_info(self):
        return os_info(self.os)

    def to_dict(self):
        info = self.os_info()
        return {
            'ua': self.ua,
            'mozilla': self.mozilla,
            'platform': self.platform,
            'os': self.os,
            'os_name': info.name,
            'os_version': info.version,
            'localization': self.localization,
            'browser': self.browser.name,
            'browser_version': self.browser.version,
            'engine': self.browser.engine,
            'engine_version': self.browser.engine_version,
            'is_bot': self.is_bot,
            'is_mobile': self.is_mobile,
        }

    @classmethod
    def from_state(cls, state):
        return cls(
            ua=state.ua,
            mozilla=state.mozilla,
            platform=state.platform,
            os=state.os,
            localization=state.localization,
            browser=Browser(
                name=state.browser_name,
                version=state.browser_version,
                engine=state.engine,
                engine_version=state.engine_version,
            ),
            is_bot=state.bot,
            is_mobile=state.mobile,
        )


EMPTY_RESULT = ParseResult()


class UserAgent:
    """Разборщик User-Agent.

    Объект можно переиспользовать: каждый вызов parse() начинает с пустого
    состояния. Один объект не рассчитан на одновременный разбор из разных потоков.

    Usage:
        agent = UserAgent("Mozilla/5.0 (Windows NT 6.1; WOW64) ...")
        agent.browser        # ('Chrome', '29.0.1541.0')
        result = agent.parse(other_ua)
    """

    def __init__(self, ua=None):
        self.result = EMPTY_RESULT
        if ua is not None:
            self.parse(ua)

    def parse(self, ua):
        state = ParseState(ua=ua or '')
        sections = tokenize(state.ua)
        state.mark_mobile(any(section.name == 'Mobile' for section in sections))

        if sections:
            if sections[0].name == 'Mozilla':
                state.mozilla = sections[0].version

            detect_browser(state, sections)
            detect_os(state, sections[0])
            google_bot(state)

            if state.undecided:
                check_bot(state, sections)

        self.result = ParseResult.from_state(state)
        return self.result

    # -- Доступ к последнему результату ---------------------------

    @property
    def ua(self):
        return self.result.ua

    @property
    def mozilla(self):
        return self.result.mozilla

    @property
    def platform(self):
        return self.result.platform

    @property
    def os(self):
        return self.result.os

    @property
    def localization(self):
        return self.result.localization

    @property
    def bot(self):
        return self.result.is_bot

    @property
    def mobile(self):
        return self.result.is_mobile

    @property
    def engine(self):
        return self.result.engine

    @property
    def browser(self):
        return self.result.browser_info

    def os_info(self):
        return self.result.os_info()

    def __repr__(self):
        name, version = self.browser
        return f"<UserAgent browser={name!r} version={version!r} os={self.os!r} bot={self.bot}>"

    def __str__(self):
        return self.ua


def parse(ua):
    """Разбирает строку User-Agent в новый независимый результат"""
    return UserAgent().parse(ua)

import logging
import re
from dataclasses import dataclass

from .state import at

logger = logging.getLogger(__name__)

IE11_PATTERN = re.compile(r'^rv:(.+)$')

# Trident-токен точнее отражает версию IE 8-10, чем MSIE в режиме совместимости
TRIDENT_IE_VERSIONS = {
    '4.0': '8.0',
    '5.0': '9.0',
    '6.0': '10.0',
}


@dataclass(frozen=True)
class Browser:
    name: str = ''
    version: str = ''
    engine: str = ''
    engine_version: str = ''


def _webkit_browser(state, sections, index):
    last = sections[-1]
    if last.name == 'Edge':
        state.browser_name = 'Edge'
        state.browser_version = last.version
        state.engine = 'EdgeHTML'
        state.engine_version = ''
    elif last.name == 'OPR':
        state.browser_name = 'Opera'
        state.browser_version = last.version
    elif sections[index].name in ('Chrome', 'Chromium'):
        state.browser_name = sections[index].name
    else:
        state.browser_name = 'Safari'


def _gecko_browser(state, sections):
    name = sections[2].name
    # Firefox, завёрнутый в прокси Mail.Ru Agent
    if name == 'MRA' and len(sections) > 4:
        name = sections[4].name
        state.browser_version = sections[4].version
    state.browser_name = name


def _ie11_browser(state, sections):
    state.engine = 'Trident'
    state.browser_name = 'Internet Explorer'
    for entry in sections[0].comment:
        match = IE11_PATTERN.match(entry)
        if match:
            state.browser_version = match.group(1)
            return
    state.browser_version = ''


def _legacy_ie_browser(state, comment):
    state.engine = 'Trident'
    state.browser_name = 'Internet Explorer'
    for entry in comment:
        if entry.startswith('Trident/'):
            state.browser_version = TRIDENT_IE_VERSIONS.get(entry[len('Trident/'):], '')
            break
    if not state.browser_version:
        state.browser_version = at(comment, 1)[len('MSIE'):].strip()


def detect_browser(state, sections):
    """Определяет движок и браузер по списку секций.

    Порядок правил важен: Opera, Dalvik, затем движок во второй секции,
    затем старый IE с единственной секцией. Если ни одно правило не сработало,
    решение откладывается до проверки на бота.
    """
    count = len(sections)
    if count == 0:
        return
    first = sections[0]

    if first.name == 'Opera':
        state.browser_name = 'Opera'
        state.browser_version = first.version
        state.engine = 'Presto'
        if count > 1:
            state.engine_version = sections[1].version
    elif first.name == 'Dalvik':
        # у Dalvik нет данных о браузере, но клиент совместим с Mozilla/5.0
        state.mozilla = '5.0'
    elif count > 1:
        engine = sections[1]
        state.engine = engine.name
        state.engine_version = engine.version
        if count > 2:
            index = 2
            # на Ubuntu версия после движка бывает пустой, берём следующую секцию
            if sections[2].version == '' and count > 3:
                index = 3
            state.browser_version = sections[index].version
            if engine.name == 'AppleWebKit':
                _webkit_browser(state, sections, index)
            elif engine.name == 'Gecko':
                _gecko_browser(state, sections)
            elif engine.name == 'like' and sections[2].name == 'Gecko':
                _ie11_browser(state, sections)
    elif len(first.comment) > 1:
        comment = first.comment
        if comment[0] == 'compatible' and comment[1].startswith('MSIE'):
            _legacy_ie_browser(state, comment)

    if not state.engine and first.name not in ('Opera', 'Dalvik'):
        logger.debug("Движок не определён, откладываем решение: %r", state.ua)
        state.undecided = True

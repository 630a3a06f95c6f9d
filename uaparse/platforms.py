import logging
from enum import Enum

from .bot import google_bot
from .state import at

logger = logging.getLogger(__name__)

WINDOWS_NT_VERSIONS = {
    '5.0': 'Windows 2000',
    '5.01': 'Windows 2000, Service Pack 1 (SP1)',
    '5.1': 'Windows XP',
    '5.2': 'Windows XP x64 Edition',
    '6.0': 'Windows Vista',
    '6.1': 'Windows 7',
    '6.2': 'Windows 8',
    '6.3': 'Windows 8.1',
    '10.0': 'Windows 10',
}


class EngineKind(Enum):
    GECKO = 'Gecko'
    WEBKIT = 'AppleWebKit'
    TRIDENT = 'Trident'
    PRESTO = 'Presto'
    DALVIK = 'Dalvik'
    EDGEHTML = 'EdgeHTML'
    UNKNOWN = ''

    @classmethod
    def from_name(cls, name):
        for kind in cls:
            if kind.value == name:
                return kind
        return cls.UNKNOWN


def normalize_os(name):
    """Windows NT x.y -> человеческое название релиза, остальное без изменений"""
    parts = name.split(' ', 2)
    if len(parts) != 3 or parts[1] != 'NT':
        return name
    return WINDOWS_NT_VERSIONS.get(parts[2], name)


def get_platform(comment):
    """Платформа по первому элементу комментария первой секции"""
    first = at(comment, 0)
    if not comment or first == 'compatible':
        return ''
    if first.startswith('Windows'):
        return 'Windows'
    if first.startswith('Symbian'):
        return 'Symbian'
    if first.startswith('webOS'):
        return 'webOS'
    if first == 'BB10':
        return 'BlackBerry'
    return first


def webkit(state, comment):
    size = len(comment)
    if state.platform == 'webOS':
        state.browser_name = state.platform
        state.os = 'Palm'
        if size > 2:
            state.localization = comment[2]
        state.mark_mobile()
    elif state.platform == 'Symbian':
        state.mark_mobile()
        state.browser_name = state.platform
        state.os = at(comment, 0)
    elif state.platform == 'Linux':
        mobile = True
        if state.browser_name == 'Safari':
            state.browser_name = 'Android'
        if size > 1:
            if comment[1] == 'U':
                if size > 2:
                    state.os = comment[2]
                else:
                    mobile = False
                    state.os = comment[0]
            else:
                state.os = comment[1]
        state.mark_mobile(mobile)
        if size > 3:
            state.localization = comment[3]
        elif size == 3:
            google_bot(state)
    elif size > 0:
        if size > 3:
            state.localization = comment[3]
        if comment[0].startswith('Windows NT'):
            state.os = normalize_os(comment[0])
        elif size < 2:
            state.localization = comment[0]
        elif size < 3:
            if not google_bot(state):
                state.os = normalize_os(comment[1])
        else:
            state.os = normalize_os(comment[2])
        if state.platform == 'BlackBerry':
            state.browser_name = state.platform
            if state.os == 'Touch':
                state.os = state.platform


def gecko(state, comment):
    size = len(comment)
    if size < 2:
        return
    if comment[1] == 'U':
        if size > 2:
            state.os = normalize_os(comment[2])
        else:
            state.os = normalize_os(comment[1])
    elif state.platform == 'Android':
        state.mark_mobile()
        state.platform, state.os = normalize_os(comment[1]), state.platform
    elif comment[0] in ('Mobile', 'Tablet'):
        state.mark_mobile()
        state.os = 'FirefoxOS'
    elif not state.os:
        state.os = normalize_os(comment[1])
    # Firefox на Ubuntu кладёт сюда rv:XX.X, это не локаль
    if size > 3 and not comment[3].startswith('rv:'):
        state.localization = comment[3]


def trident(state, comment):
    # Internet Explorer бывает только на Windows
    state.platform = 'Windows'
    # IE11 мог уже заполнить ОС из первого элемента комментария
    if not state.os:
        if len(comment) > 2:
            state.os = normalize_os(comment[2])
        else:
            state.os = 'Windows NT 4.0'
    state.mark_mobile(any(entry.startswith('IEMobile') for entry in comment))


def opera(state, comment):
    size = len(comment)
    first = at(comment, 0)
    if first.startswith('Windows'):
        state.platform = 'Windows'
        state.os = normalize_os(first)
        if size > 2:
            if size > 3 and comment[2].startswith('MRA'):
                state.localization = comment[3]
            else:
                state.localization = comment[2]
    else:
        state.mark_mobile(first.startswith('Android'))
        state.platform = first
        if size > 1:
            state.os = comment[1]
            if size > 3:
                state.localization = comment[3]
        else:
            state.os = first


def dalvik(state, comment):
    first = at(comment, 0)
    if first.startswith('Linux'):
        state.platform = first
        if len(comment) > 2:
            state.os = comment[2]
        state.mark_mobile()


HANDLERS = {
    EngineKind.GECKO: gecko,
    EngineKind.WEBKIT: webkit,
    EngineKind.TRIDENT: trident,
    EngineKind.PRESTO: opera,
    EngineKind.DALVIK: dalvik,
}

# Движки, которые встречаются после Mozilla/x.y
MOZILLA_KINDS = (EngineKind.GECKO, EngineKind.WEBKIT, EngineKind.TRIDENT)

# Продукты первой секции, у которых свой формат комментария
TOP_LEVEL_KINDS = {
    'Opera': EngineKind.PRESTO,
    'Dalvik': EngineKind.DALVIK,
}


def detect_os(state, section):
    """Платформа, ОС и локаль по первой секции и уже найденному движку"""
    comment = section.comment
    if section.name == 'Mozilla':
        state.platform = get_platform(comment)
        if state.platform == 'Windows' and comment:
            state.os = normalize_os(comment[0])

        kind = EngineKind.from_name(state.engine)
        if kind is EngineKind.UNKNOWN:
            logger.debug("Неизвестный движок %r, проверяем на бота", state.engine)
            state.undecided = True
        elif kind in MOZILLA_KINDS:
            HANDLERS[kind](state, comment)
    elif section.name in TOP_LEVEL_KINDS:
        if comment:
            HANDLERS[TOP_LEVEL_KINDS[section.name]](state, comment)
    else:
        logger.debug("Неизвестный продукт %r, проверяем на бота", section.name)
        state.undecided = True

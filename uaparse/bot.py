import logging
import re

logger = logging.getLogger(__name__)

BOT_PATTERN = re.compile(r'(bot|crawler|sp(i|y)der|search|worm|fetch|nutch)', re.IGNORECASE)
SITE_PATTERN = re.compile(r'http://.+\.\w+')
GOOGLEBOT_PATTERN = re.compile(r'(Googlebot[\w-]*)(?:/([\w.]+))?')


def google_bot(state):
    """Мобильный Googlebot маскируется под обычный браузер: сбрасываем платформу
    и отправляем разбор на проверку бота"""
    if 'Googlebot' in state.ua:
        state.platform = ''
        state.undecided = True
    return state.undecided


def get_from_site(comment):
    """Имя бота по сайту в комментарии, '' если сайта нет"""
    if not comment:
        return ''
    # в длинном комментарии сайт третий, а имя бота стоит перед ним
    index = 2 if len(comment) >= 3 else 0
    match = SITE_PATTERN.search(comment[index])
    if not match:
        return ''
    if index == 0:
        return match.group(0)
    return comment[1].strip()


def fix_other(state, sections):
    if not sections:
        return
    match = GOOGLEBOT_PATTERN.search(state.ua)
    if match:
        state.set_simple(match.group(1), match.group(2) or '', True)
        return
    state.browser_name = sections[0].name
    state.browser_version = sections[0].version
    state.mozilla = ''


def check_bot(state, sections):
    """Бот или просто странный браузер. Вызывается только для нерешённых разборов."""
    if len(sections) == 1 and sections[0].name != 'Mozilla':
        section = sections[0]
        state.mozilla = ''
        if BOT_PATTERN.search(section.name):
            logger.debug("Бот по имени продукта: %s", section.name)
            state.set_simple(section.name, '', True)
        elif get_from_site(section.comment):
            logger.debug("Бот по сайту в комментарии: %s", section.name)
            state.set_simple(section.name, section.version, True)
        else:
            state.set_simple(section.name, section.version, 'Googlebot' in state.ua)
        return

    for section in sections:
        name = get_from_site(section.comment)
        if name:
            parts = name.split('/', 1)
            logger.debug("Бот по сайту в комментарии: %s", name)
            state.set_simple(parts[0], parts[1] if len(parts) == 2 else '', True)
            return

    fix_other(state, sections)

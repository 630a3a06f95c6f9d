from dataclasses import dataclass


@dataclass
class ParseState:
    """Промежуточный результат одного прохода разбора.

    Живёт только внутри UserAgent.parse(), затем замораживается в ParseResult.
    Флаг mobile только поднимается: снять его после установки нельзя.
    """
    ua: str = ''
    mozilla: str = ''
    platform: str = ''
    os: str = ''
    localization: str = ''
    browser_name: str = ''
    browser_version: str = ''
    engine: str = ''
    engine_version: str = ''
    bot: bool = False
    undecided: bool = False
    _mobile: bool = False

    @property
    def mobile(self):
        return self._mobile

    def mark_mobile(self, value=True):
        if value:
            self._mobile = True

    def set_simple(self, name, version, bot):
        """Упрощённый результат для ботов и странных браузеров. mobile не трогаем."""
        self.bot = bot
        if not bot:
            self.mozilla = ''
        self.browser_name = name
        self.browser_version = version
        self.engine = ''
        self.engine_version = ''
        self.os = ''
        self.localization = ''


def at(comment, index):
    """Безопасный доступ к элементу комментария: отсутствующий элемент это ''"""
    if 0 <= index < len(comment):
        return comment[index]
    return ''

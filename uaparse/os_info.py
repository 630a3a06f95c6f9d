from dataclasses import dataclass


@dataclass(frozen=True)
class OSInfo:
    """Полная информация об ОС.

    full_name совпадает с ParseResult.os, name бывает короче
    ("Mac OS X" вместо "Intel Mac OS X"), version вида "7" или "10.8".
    """
    full_name: str = ''
    name: str = ''
    version: str = ''


def os_name(parts):
    """Имя и версия ОС из разбитого по пробелам полного названия"""
    if len(parts) == 1:
        return parts[0], ''

    # версия обычно последним словом
    name_parts = parts[:-1]
    version = parts[-1]
    if len(name_parts) >= 2 and name_parts[0] == 'Intel' and name_parts[1] == 'Mac':
        name_parts = name_parts[1:]
    name = ' '.join(name_parts)

    if 'x86' in version or 'i686' in version:
        # x86_64 и i686 это архитектура, а не версия
        version = ''
    elif version == 'X' and name == 'Mac OS':
        name = name + ' ' + version
        version = ''
    return name, version


def os_info(full_name):
    # особый случай iPhone: "CPU iPhone OS 6_0 like Mac OS X"
    os = full_name.replace('like Mac OS X', '', 1)
    os = os.replace('CPU', '', 1)
    os = os.strip(' ')

    parts = os.split(' ')
    if os == 'Windows XP x64 Edition':
        parts = parts[:-2]

    name, version = os_name(parts)

    if '/' in name:
        split = name.split('/')
        name, version = split[0], split[1]

    version = version.replace('_', '.')
    return OSInfo(full_name=full_name, name=name, version=version)

import gzip
import logging
import re
import sys
from collections import Counter
from pathlib import Path

from .logparser import LogParser
from .user_agent import UserAgent

logger = logging.getLogger(__name__)


class UserAgentStatsAnalyzer:
    """Статистика User-Agent по access-логам"""

    def __init__(self, log_path, start_date=None, end_date=None, exclude_bots=False, top_n=20, log_files=None):
        self.log_path = Path(log_path)
        self.log_files = [Path(p) for p in log_files] if log_files else self._resolve_log_files(self.log_path)
        self.start_date = start_date
        self.end_date = end_date
        self.exclude_bots = exclude_bots
        self.top_n = top_n
        self.agent = UserAgent()
        self.cache = {}  # Кэш результатов по строке User-Agent
        self.ua_counter = Counter()
        self.total_records = 0
        self.skipped_count = 0

    def _resolve_log_files(self, log_path):
        """Определяет список файлов для анализа"""
        if log_path.is_file():
            return [log_path]
        if log_path.is_dir():
            access_files = sorted(
                p for p in log_path.iterdir()
                if p.is_file() and 'access' in p.name.lower()
            )
            if not access_files:
                print(f"Ошибка: в директории {log_path} нет access-логов для анализа")
                sys.exit(1)
            return access_files

        print(f"Ошибка: путь {log_path} не найден")
        sys.exit(1)

    def _open_log(self, log_file):
        if log_file.suffix == '.gz':
            return gzip.open(log_file, 'rt', encoding='utf-8', errors='ignore')
        return open(log_file, 'r', encoding='utf-8', errors='ignore')

    def parse_user_agent(self, ua):
        """Разбирает User-Agent, повторные строки берутся из кэша"""
        result = self.cache.get(ua)
        if result is None:
            result = self.agent.parse(ua)
            self.cache[ua] = result
        return result

    def parse_logs(self):
        """Читает логи и считает вхождения каждого User-Agent"""
        print(f"Парсинг логов из {self.log_path}...")
        print(f"Найдено файлов для анализа: {len(self.log_files)}")

        for file_index, log_file in enumerate(self.log_files, 1):
            print(f"[{file_index}/{len(self.log_files)}] Файл: {log_file}")
            try:
                with self._open_log(log_file) as f:
                    for line_num, line in enumerate(f, 1):
                        line = line.strip()
                        if not line:
                            continue
                        entry = LogParser.parse_line(line)
                        if not entry:
                            self.skipped_count += 1
                            continue
                        if self.start_date and entry['timestamp'] < self.start_date:
                            self.skipped_count += 1
                            continue
                        if self.end_date and entry['timestamp'] > self.end_date:
                            self.skipped_count += 1
                            continue

                        ua = entry['user_agent'] if entry['user_agent'] != '-' else ''
                        self.ua_counter[ua] += 1
                        self.total_records += 1

                        if line_num % 10000 == 0:
                            print(f"  Обработано строк: {line_num:,} | Записей: {self.total_records:,}")
            except OSError as e:
                logger.error("Не удалось прочитать %s: %s", log_file, e)
                print(f"Ошибка при чтении файла {log_file}: {e}")
                sys.exit(1)

        print(f"Всего записей: {self.total_records:,}")
        if self.skipped_count > 0:
            print(f"Пропущено (фильтр/ошибки): {self.skipped_count:,}")
        return self.total_records

    def aggregate(self):
        """Сводит разобранные User-Agent в счётчики по браузерам, ОС и ботам"""
        browsers = Counter()
        engines = Counter()
        systems = Counter()
        platforms = Counter()
        bot_names = Counter()
        localizations = Counter()
        user_agents = []
        total = bots = mobile = 0

        for ua, count in self.ua_counter.items():
            result = self.parse_user_agent(ua)
            if result.is_bot:
                bots += count
                bot_names[result.browser.name or 'Unknown'] += count
                if self.exclude_bots:
                    continue
            total += count
            if result.is_mobile:
                mobile += count

            name, version = result.browser_info
            browsers[name or 'Unknown'] += count
            engines[result.browser.engine or 'Unknown'] += count
            systems[result.os_info().name or 'Unknown'] += count
            platforms[result.platform or 'Unknown'] += count
            if result.localization:
                localizations[result.localization] += count
            user_agents.append((count, result))

        user_agents.sort(key=lambda x: x[0], reverse=True)
        return {
            'total': total,
            'bots': bots,
            'mobile': mobile,
            'mobile_rate': mobile / total * 100 if total else 0,
            'bot_rate': bots / self.total_records * 100 if self.total_records else 0,
            'unique_user_agents': len(self.ua_counter),
            'browsers': browsers.most_common(self.top_n),
            'engines': engines.most_common(self.top_n),
            'os': systems.most_common(self.top_n),
            'platforms': platforms.most_common(self.top_n),
            'bot_names': bot_names.most_common(self.top_n),
            'localizations': localizations.most_common(self.top_n),
            'top_user_agents': [
                dict(result.to_dict(), count=count)
                for count, result in user_agents[:self.top_n]
            ],
        }

    def slugify(self, name=None):
        """Создает безопасное имя файла"""
        name = name or self.log_path.stem or 'logs'
        return re.sub(r'[^a-z0-9]+', '_', name.lower()).strip('_')

    def print_summary(self, stats):
        """Выводит сводку в консоль"""
        print("\n" + "=" * 50)
        print("СВОДКА")
        print("=" * 50)
        print(f"Всего записей обработано: {self.total_records:,}")
        print(f"Уникальных User-Agent: {stats['unique_user_agents']:,}")
        print(f"Ботов: {stats['bots']:,} ({stats['bot_rate']:.2f}%)")
        print(f"Мобильных: {stats['mobile']:,} ({stats['mobile_rate']:.2f}%)")

        for title, key in (('БРАУЗЕРЫ', 'browsers'), ('ОПЕРАЦИОННЫЕ СИСТЕМЫ', 'os'), ('БОТЫ', 'bot_names')):
            print(f"\n{title}")
            if not stats[key]:
                print("  нет данных")
            for name, count in stats[key][:5]:
                print(f"  - {name}: {count:,}")

import pandas as pd

class ExcelReporter:
    """Генератор отчетов в Excel"""
    
    def __init__(self, output_path):
        self.output_path = output_path

    @staticmethod
    def _counter_frame(rows, label):
        return pd.DataFrame([{label: name, 'Количество': count} for name, count in rows])
        
    def generate(self, stats, summary_extra=None):
        """Генерирует Excel отчет"""
        print(f"\nГенерация отчета: {self.output_path}")
        
        with pd.ExcelWriter(self.output_path, engine='openpyxl') as writer:
            summary_data = {
                'Метрика': [
                    'Всего запросов',
                    'Уникальных User-Agent',
                    'Запросов от ботов',
                    'Доля ботов (%)',
                    'Мобильных запросов',
                    'Доля мобильных (%)',
                ],
                'Значение': [
                    stats['total'],
                    stats['unique_user_agents'],
                    stats['bots'],
                    f"{stats['bot_rate']:.2f}%",
                    stats['mobile'],
                    f"{stats['mobile_rate']:.2f}%",
                ]
            }
            
            if summary_extra:
                for k, v in summary_extra.items():
                    summary_data['Метрика'].append(k)
                    summary_data['Значение'].append(v)
            
            pd.DataFrame(summary_data).to_excel(writer, sheet_name='Сводка', index=False)

            sheets = [
                ('browsers', 'Браузер', 'Браузеры'),
                ('engines', 'Движок', 'Движки'),
                ('os', 'ОС', 'Операционные системы'),
                ('platforms', 'Платформа', 'Платформы'),
                ('bot_names', 'Бот', 'Боты'),
                ('localizations', 'Локаль', 'Локали'),
            ]
            for key, label, sheet_name in sheets:
                if stats.get(key):
                    self._counter_frame(stats[key], label).to_excel(writer, sheet_name=sheet_name, index=False)
            
            if stats.get('top_user_agents'):
                ua_data = []
                for item in stats['top_user_agents']:
                    ua_data.append({
                        'User-Agent': item['ua'][:200],
                        'Количество': item['count'],
                        'Браузер': item['browser'] or 'Unknown',
                        'Версия браузера': item['browser_version'],
                        'Движок': item['engine'],
                        'Версия движка': item['engine_version'],
                        'Платформа': item['platform'],
                        'ОС': item['os_name'],
                        'Версия ОС': item['os_version'],
                        'Локаль': item['localization'],
                        'Бот': 'Да' if item['is_bot'] else 'Нет',
                        'Мобильное': 'Да' if item['is_mobile'] else 'Нет',
                    })
                pd.DataFrame(ua_data).to_excel(writer, sheet_name='Топ User-Agent', index=False)
        
        print(f"Excel отчет сохранен: {self.output_path}")
        return self.output_path

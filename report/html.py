from datetime import datetime
import html

class HtmlReporter:
    """Генератор отчетов в HTML"""
    
    def __init__(self, output_path):
        self.output_path = output_path.replace('.xlsx', '.html')

    @staticmethod
    def _counter_table(title, label, rows):
        content = f"""
                <h2>{html.escape(title)}</h2>
                <table>
                    <thead>
                        <tr><th>{html.escape(label)}</th><th>Количество</th></tr>
                    </thead>
                    <tbody>
        """
        for name, count in rows:
            content += f"""
                        <tr><td>{html.escape(str(name))}</td><td>{count}</td></tr>
            """
        content += """
                    </tbody>
                </table>
        """
        return content
        
    def generate(self, stats, summary_extra=None):
        """Генерирует HTML отчет"""
        print(f"\nГенерация HTML отчета: {self.output_path}")
        
        summary_rows = [
            ('Всего запросов', stats['total']),
            ('Уникальных User-Agent', stats['unique_user_agents']),
            ('Доля ботов', f"{stats['bot_rate']:.2f}%"),
            ('Доля мобильных', f"{stats['mobile_rate']:.2f}%")
        ]
        
        if summary_extra:
            for k, v in summary_extra.items():
                summary_rows.append((k, v))
                
        html_content = f"""
        <!DOCTYPE html>
        <html lang="ru">
        <head>
            <meta charset="UTF-8">
            <meta name="viewport" content="width=device-width, initial-scale=1.0">
            <title>Отчет по User-Agent</title>
            <style>
                body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 1200px; margin: 0 auto; padding: 20px; background: #f5f5f5; }}
                .container {{ background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }}
                h1, h2 {{ color: #2c3e50; }}
                h1 {{ border-bottom: 2px solid #eee; padding-bottom: 10px; }}
                h2 {{ margin-top: 30px; border-left: 4px solid #3498db; padding-left: 10px; }}
                table {{ width: 100%; border-collapse: collapse; margin-bottom: 20px; font-size: 14px; }}
                th, td {{ padding: 12px; text-align: left; border-bottom: 1px solid #ddd; }}
                th {{ background-color: #f8f9fa; font-weight: 600; }}
                .badge {{ padding: 4px 8px; border-radius: 4px; font-size: 12px; font-weight: bold; }}
                .badge-danger {{ background: #ffebee; color: #c62828; }}
                .badge-success {{ background: #e8f5e9; color: #2e7d32; }}
                .grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(250px, 1fr)); gap: 20px; }}
                .stat-box {{ background: #f8f9fa; padding: 15px; border-radius: 6px; text-align: center; }}
                .stat-value {{ font-size: 24px; font-weight: bold; color: #2c3e50; }}
                .stat-label {{ font-size: 14px; color: #7f8c8d; }}
            </style>
        </head>
        <body>
            <div class="container">
                <h1>Отчет по User-Agent</h1>
                <p>Сгенерирован: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}</p>
                
                <h2>Сводка</h2>
                <div class="grid">
        """
        
        for label, value in summary_rows:
            html_content += f"""
                    <div class="stat-box">
                        <div class="stat-value">{html.escape(str(value))}</div>
                        <div class="stat-label">{html.escape(label)}</div>
                    </div>
            """
        
        html_content += """
                </div>
        """

        for key, label, title in (
            ('browsers', 'Браузер', 'Браузеры'),
            ('os', 'ОС', 'Операционные системы'),
            ('platforms', 'Платформа', 'Платформы'),
            ('bot_names', 'Бот', 'Боты'),
        ):
            if stats.get(key):
                html_content += self._counter_table(title, label, stats[key])

        if stats.get('top_user_agents'):
            html_content += """
                <h2>Топ User-Agent</h2>
                <table>
                    <thead>
                        <tr>
                            <th>User-Agent</th>
                            <th>Запросов</th>
                            <th>Браузер</th>
                            <th>ОС</th>
                            <th>Тип</th>
                        </tr>
                    </thead>
                    <tbody>
            """
            for item in stats['top_user_agents']:
                kind = '<span class="badge badge-danger">бот</span>' if item['is_bot'] else '<span class="badge badge-success">браузер</span>'
                browser = f"{item['browser']} {item['browser_version']}".strip() or 'Unknown'
                html_content += f"""
                        <tr>
                            <td>{html.escape(item['ua'][:200])}</td>
                            <td>{item['count']}</td>
                            <td>{html.escape(browser)}</td>
                            <td>{html.escape(item['os'])}</td>
                            <td>{kind}</td>
                        </tr>
                """
            html_content += """
                    </tbody>
                </table>
            """
            
        html_content += """
            </div>
        </body>
        </html>
        """
        
        with open(self.output_path, 'w', encoding='utf-8') as f:
            f.write(html_content)
            
        print(f"HTML отчет сохранен: {self.output_path}")
        return self.output_path

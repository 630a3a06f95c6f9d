"""
Tests for the Excel and HTML report generators.
"""
from openpyxl import load_workbook

from report.excel import ExcelReporter
from report.html import HtmlReporter


class TestExcelReporter:
    """Test suite for ExcelReporter."""

    def test_sheets(self, tmp_path, sample_stats):
        path = tmp_path / "report.xlsx"
        ExcelReporter(str(path)).generate(sample_stats)

        workbook = load_workbook(path)
        assert workbook.sheetnames == [
            'Сводка', 'Браузеры', 'Движки', 'Операционные системы',
            'Платформы', 'Боты', 'Топ User-Agent',
        ]

    def test_summary_values(self, tmp_path, sample_stats):
        path = tmp_path / "report.xlsx"
        ExcelReporter(str(path)).generate(sample_stats, summary_extra={'Файл': 'access.log'})

        sheet = load_workbook(path)['Сводка']
        rows = {row[0]: row[1] for row in sheet.iter_rows(min_row=2, values_only=True)}
        assert rows['Всего запросов'] == 4
        assert rows['Доля ботов (%)'] == '25.00%'
        assert rows['Файл'] == 'access.log'

    def test_browsers_sheet(self, tmp_path, sample_stats):
        path = tmp_path / "report.xlsx"
        ExcelReporter(str(path)).generate(sample_stats)

        sheet = load_workbook(path)['Браузеры']
        rows = list(sheet.iter_rows(values_only=True))
        assert rows[0] == ('Браузер', 'Количество')
        assert rows[1] == ('Chrome', 2)


class TestHtmlReporter:
    """Test suite for HtmlReporter."""

    def test_output_path(self, tmp_path):
        reporter = HtmlReporter(str(tmp_path / "report.xlsx"))
        assert reporter.output_path.endswith('report.html')

    def test_generate(self, tmp_path, sample_stats):
        path = HtmlReporter(str(tmp_path / "report.xlsx")).generate(sample_stats)

        content = open(path, encoding='utf-8').read()
        assert 'Отчет по User-Agent' in content
        assert 'Chrome' in content
        assert 'Googlebot' in content

    def test_escapes_user_agent(self, tmp_path, sample_stats):
        path = HtmlReporter(str(tmp_path / "report.xlsx")).generate(sample_stats)

        content = open(path, encoding='utf-8').read()
        assert '<script>' not in content
        assert '&lt;script&gt;' in content

    def test_summary_extra(self, tmp_path, sample_stats):
        path = HtmlReporter(str(tmp_path / "report.xlsx")).generate(
            sample_stats, summary_extra={'Период': '2023-10-01 - 2023-10-31'}
        )

        content = open(path, encoding='utf-8').read()
        assert '2023-10-01 - 2023-10-31' in content

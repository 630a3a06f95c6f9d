import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from config import Config
from uaparse import parse
from uaparse.analyzer import UserAgentStatsAnalyzer
from report.excel import ExcelReporter
from report.html import HtmlReporter

def build_parser():
    parser = argparse.ArgumentParser(description='User-Agent Analyzer')
    parser.add_argument('log_path', nargs='?', help='Path to access.log or directory')
    parser.add_argument('--ua', action='append', default=[], help='Parse a single User-Agent string (repeatable)')
    parser.add_argument('--config', help='Path to config.yaml')
    parser.add_argument('--start-date', help='YYYY-MM-DD')
    parser.add_argument('--end-date', help='YYYY-MM-DD')
    parser.add_argument('--exclude-bots', action='store_true', help='Exclude bots from browser/OS stats')
    parser.add_argument('--top', type=int, help='Size of top lists')
    parser.add_argument('--format', choices=['excel', 'html', 'all', 'none'], help='Report format')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.log_path and not args.ua:
        parser.error('log_path or --ua is required')
    
    # Init config
    cfg = Config(args.config)
    
    level = 'DEBUG' if args.verbose else str(cfg.get('logging.level', 'WARNING')).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    
    for ua in args.ua:
        print(json.dumps(parse(ua).to_dict(), ensure_ascii=False, indent=2))
    
    if not args.log_path:
        return
    
    start_date = datetime.strptime(args.start_date, '%Y-%m-%d') if args.start_date else None
    end_date = datetime.strptime(args.end_date, '%Y-%m-%d').replace(hour=23, minute=59, second=59) if args.end_date else None
    
    analyzer = UserAgentStatsAnalyzer(
        log_path=args.log_path,
        start_date=start_date,
        end_date=end_date,
        exclude_bots=args.exclude_bots or cfg.get('analyzer.exclude_bots', False),
        top_n=args.top or cfg.get('analyzer.top_n', 20)
    )
    analyzer.parse_logs()
    stats = analyzer.aggregate()
    analyzer.print_summary(stats)
    
    report_format = args.format or cfg.get('report.format', 'excel')
    if report_format == 'none':
        return
    
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    slug = analyzer.slugify()
    results_dir = Path(cfg.get('report.output_dir', 'results')) / slug
    results_dir.mkdir(parents=True, exist_ok=True)
    print(f"\nРезультаты будут сохранены в папку: {results_dir}")
    
    report_file_excel = results_dir / f"{slug}_ua_report_{timestamp}.xlsx"
    summary_extra = {
        'Источник': str(analyzer.log_path),
        'Файлов проанализировано': len(analyzer.log_files),
        'Период': f"{args.start_date or '...'} - {args.end_date or '...'}",
    }
    formats = [report_format] if report_format != 'all' else ['excel', 'html']
    
    if 'excel' in formats:
        ExcelReporter(str(report_file_excel)).generate(stats, summary_extra)
        
    if 'html' in formats:
        HtmlReporter(str(report_file_excel)).generate(stats, summary_extra)

if __name__ == '__main__':
    main()

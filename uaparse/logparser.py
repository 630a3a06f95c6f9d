import re
from datetime import datetime


class LogParser:
    """Извлекает User-Agent и сопутствующие поля из строк access-логов.

    Поддерживаются Apache combined (с виртуальным хостом), Nginx combined и
    расширенный формат с временем обработки запроса.
    """

    APACHE_PATTERN = (
        'apache',
        re.compile(
            r'(?P<hostname>\S+) '
            r'(?P<ip>\S+) '
            r'(?P<remote_user>\S+) '
            r'(?P<auth_user>\S+) '
            r'\[(?P<timestamp>[^\]]+)\] '
            r'"(?P<method>\S+) (?P<url>[^"]+) (?P<protocol>[^"]+)" '
            r'(?P<status>\d+) '
            r'(?P<size>\S+) '
            r'"(?P<referer>[^"]*)" '
            r'"(?P<user_agent>[^"]*)"'
        )
    )

    # $remote_addr - $remote_user [$time_local] "$request" $status $body_bytes_sent "$http_referer" "$http_user_agent"
    NGINX_PATTERN = (
        'nginx',
        re.compile(
            r'(?P<ip>\S+) '
            r'(?P<hostname>\S+) '
            r'(?P<remote_user>\S+) '
            r'\[(?P<timestamp>[^\]]+)\] '
            r'"(?P<request>[^"]+)" '
            r'(?P<status>\d{3}) '
            r'(?P<size>\S+) '
            r'"(?P<referer>[^"]*)" '
            r'"(?P<user_agent>[^"]*)"'
        )
    )

    # 69.63.189.13 - - [23/Dec/2025:00:00:03 -0500 - 0.005] 206 "GET /robots.txt HTTP/2.0" 1517 "-" "ua" "-"
    EXTENDED_PATTERN = (
        'extended',
        re.compile(
            r'(?P<ip>\S+) '
            r'(?P<hostname>\S+) '
            r'(?P<remote_user>\S+) '
            r'\[(?P<timestamp>[^\]]+)\] '
            r'(?P<status>\d{3}) '
            r'"(?P<request>[^"]+)" '
            r'(?P<size>\S+) '
            r'"(?P<referer>[^"]*)" '
            r'"(?P<user_agent>[^"]*)" '
            r'"(?P<extra>[^"]*)"'
        )
    )

    PATTERNS = [APACHE_PATTERN, NGINX_PATTERN, EXTENDED_PATTERN]

    TIMESTAMP_PATTERN = re.compile(r'(\d{2}/\w{3}/\d{4}:\d{2}:\d{2}:\d{2})(?:\s+([+-]\d{4}))?')

    @staticmethod
    def _parse_timestamp(timestamp_str):
        """Дата без tzinfo, чтобы сравнивать с naive-датами фильтра.

        Хвост расширенного формата ('- 0.005', '- 0.000 : 0.004') отбрасывается.
        """
        match = LogParser.TIMESTAMP_PATTERN.search(timestamp_str)
        if not match:
            return None
        date_time_str, timezone_str = match.groups()
        try:
            if timezone_str:
                parsed = datetime.strptime(f"{date_time_str} {timezone_str}", '%d/%b/%Y:%H:%M:%S %z')
                return parsed.replace(tzinfo=None)
            return datetime.strptime(date_time_str, '%d/%b/%Y:%H:%M:%S')
        except ValueError:
            return None

    @staticmethod
    def _split_request(request_str):
        parts = request_str.split()
        parts += ['-'] * (3 - len(parts))
        return parts[0], parts[1], parts[2]

    @staticmethod
    def parse_line(line):
        """Парсит одну строку лога, None если формат не распознан"""
        for fmt, pattern in LogParser.PATTERNS:
            match = pattern.match(line)
            if not match:
                continue
            fields = match.groupdict()
            timestamp = LogParser._parse_timestamp(fields['timestamp'])
            if not timestamp:
                continue

            if 'request' in fields:
                method, url, protocol = LogParser._split_request(fields['request'])
            else:
                method, url, protocol = fields['method'], fields['url'], fields['protocol']

            return {
                'hostname': fields['hostname'],
                'ip': fields['ip'],
                'remote_user': fields['remote_user'],
                'timestamp': timestamp,
                'method': method,
                'url': url,
                'protocol': protocol,
                'status': int(fields['status']),
                'size': fields['size'] if fields['size'] != '-' else '0',
                'referer': fields['referer'],
                'user_agent': fields['user_agent'],
                'raw_line': line,
                'log_format': fmt,
            }
        return None

import pytest

CHROME_WIN7 = "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/29.0.1541.0 Safari/537.36"
IE11_WIN7 = "Mozilla/5.0 (Windows NT 6.1; Trident/7.0; rv:11.0) like Gecko"
SAFARI_IPHONE = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 7_0 like Mac OS X) AppleWebKit/537.51.1 "
    "(KHTML, like Gecko) Version/7.0 Mobile/11A465 Safari/9537.53"
)
GOOGLEBOT = "Googlebot/2.1 (+http://www.google.com/bot.html)"
GOOGLEBOT_COMPATIBLE = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


@pytest.fixture
def chrome_ua():
    return CHROME_WIN7


@pytest.fixture
def ie11_ua():
    return IE11_WIN7


@pytest.fixture
def iphone_ua():
    return SAFARI_IPHONE


@pytest.fixture
def googlebot_ua():
    return GOOGLEBOT


@pytest.fixture
def sample_log_lines():
    """Access-log lines in all supported formats plus one broken line."""
    return [
        f'192.168.1.1 - - [10/Oct/2023:13:55:36 +0000] "GET /index.html HTTP/1.1" 200 2326 "-" "{CHROME_WIN7}"',
        f'192.168.1.2 - - [10/Oct/2023:14:01:02 +0000] "GET /about HTTP/1.1" 200 512 "-" "{CHROME_WIN7}"',
        f'example.com 10.0.0.1 - - [11/Oct/2023:09:00:00 +0300] "GET /page HTTP/1.1" 404 - "http://ref/" "{SAFARI_IPHONE}"',
        f'69.63.189.13 - - [12/Oct/2023:00:00:03 -0500 - 0.005] 206 "GET /robots.txt HTTP/2.0" 1517 "-" "{GOOGLEBOT}" "-"',
        'this is not a log line',
    ]


@pytest.fixture
def log_file(tmp_path, sample_log_lines):
    """access.log written to a temporary directory."""
    path = tmp_path / "access.log"
    path.write_text("\n".join(sample_log_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_stats():
    """Aggregated statistics in the shape returned by UserAgentStatsAnalyzer.aggregate()."""
    return {
        'total': 4,
        'bots': 1,
        'mobile': 1,
        'mobile_rate': 25.0,
        'bot_rate': 25.0,
        'unique_user_agents': 3,
        'browsers': [('Chrome', 2), ('Safari', 1), ('Googlebot', 1)],
        'engines': [('AppleWebKit', 3), ('Unknown', 1)],
        'os': [('Windows', 2), ('iPhone OS', 1), ('Unknown', 1)],
        'platforms': [('Windows', 2), ('iPhone', 1), ('Unknown', 1)],
        'bot_names': [('Googlebot', 1)],
        'localizations': [],
        'top_user_agents': [
            {
                'ua': '<script>alert(1)</script>',
                'count': 2,
                'mozilla': '',
                'platform': '',
                'os': '',
                'os_name': '',
                'os_version': '',
                'localization': '',
                'browser': '<script>alert(1)</script>',
                'browser_version': '',
                'engine': '',
                'engine_version': '',
                'is_bot': False,
                'is_mobile': False,
            },
        ],
    }

"""
Tests for engine and browser detection on tokenized sections.
"""
import pytest

from uaparse.browser import detect_browser
from uaparse.sections import tokenize
from uaparse.state import ParseState


def detect(ua):
    state = ParseState(ua=ua)
    detect_browser(state, tokenize(ua))
    return state


class TestDetectBrowser:
    """Test suite for detect_browser()."""

    def test_chrome(self, chrome_ua):
        state = detect(chrome_ua)

        assert (state.browser_name, state.browser_version) == ("Chrome", "29.0.1541.0")
        assert (state.engine, state.engine_version) == ("AppleWebKit", "537.36")
        assert not state.undecided

    def test_opera_presto(self):
        state = detect("Opera/9.80 (Windows NT 6.1; U; en) Presto/2.10.289 Version/12.02")

        assert (state.browser_name, state.browser_version) == ("Opera", "9.80")
        assert (state.engine, state.engine_version) == ("Presto", "2.10.289")

    def test_opera_single_section_has_no_engine_version(self):
        state = detect("Opera/9.80")

        assert state.engine == "Presto"
        assert state.engine_version == ""

    def test_dalvik_is_mozilla_compatible(self):
        state = detect("Dalvik/1.6.0 (Linux; U; Android 4.4.2; GT-I9505 Build/KOT49H)")

        assert state.mozilla == "5.0"
        assert state.browser_name == ""
        assert state.engine == ""
        assert not state.undecided

    def test_edge_relabels_engine(self):
        state = detect(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/42.0.2311.135 Safari/537.36 Edge/12.10136"
        )

        assert (state.browser_name, state.browser_version) == ("Edge", "12.10136")
        assert (state.engine, state.engine_version) == ("EdgeHTML", "")

    def test_opr_is_opera(self):
        state = detect(
            "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/39.0.2171.95 Safari/537.36 OPR/26.0.1656.60"
        )

        assert (state.browser_name, state.browser_version) == ("Opera", "26.0.1656.60")
        assert state.engine == "AppleWebKit"

    def test_empty_version_uses_next_section(self):
        state = detect(
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/535.11 (KHTML, like Gecko) "
            "Ubuntu Chromium/17.0.963.65 Chrome/17.0.963.65 Safari/535.11"
        )

        assert (state.browser_name, state.browser_version) == ("Chromium", "17.0.963.65")

    def test_webkit_defaults_to_safari(self, iphone_ua):
        state = detect(iphone_ua)

        assert (state.browser_name, state.browser_version) == ("Safari", "7.0")

    def test_gecko(self):
        state = detect("Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:24.0) Gecko/20100101 Firefox/24.0")

        assert (state.browser_name, state.browser_version) == ("Firefox", "24.0")
        assert (state.engine, state.engine_version) == ("Gecko", "20100101")

    def test_gecko_behind_mra_proxy(self):
        state = detect(
            "Mozilla/5.0 (Windows; U; Windows NT 5.1; ru; rv:1.9.0.1) Gecko/2008070208 "
            "MRA 5.5 (build 02842) Firefox/3.0.1"
        )

        assert (state.browser_name, state.browser_version) == ("Firefox", "3.0.1")

    def test_ie11(self, ie11_ua):
        state = detect(ie11_ua)

        assert (state.browser_name, state.browser_version) == ("Internet Explorer", "11.0")
        assert (state.engine, state.engine_version) == ("Trident", "")

    def test_ie11_without_rv_token(self):
        state = detect("Mozilla/5.0 (Windows NT 6.1; Trident/7.0) like Gecko")

        assert state.browser_name == "Internet Explorer"
        assert state.browser_version == ""

    @pytest.mark.parametrize("ua, version", [
        ("Mozilla/4.0 (compatible; MSIE 8.0; Windows NT 6.1; Trident/4.0)", "8.0"),
        ("Mozilla/4.0 (compatible; MSIE 7.0; Windows NT 6.1; Trident/5.0)", "9.0"),
        ("Mozilla/5.0 (compatible; MSIE 10.0; Windows NT 6.1; Trident/6.0)", "10.0"),
        ("Mozilla/4.0 (compatible; MSIE 7.0; Windows NT 5.1)", "7.0"),
        ("Mozilla/4.0 (compatible; MSIE 6.0)", "6.0"),
    ])
    def test_legacy_ie(self, ua, version):
        state = detect(ua)

        assert state.browser_name == "Internet Explorer"
        assert state.browser_version == version
        assert state.engine == "Trident"

    def test_unknown_single_section_is_undecided(self, googlebot_ua):
        state = detect(googlebot_ua)

        assert state.undecided
        assert state.browser_name == ""

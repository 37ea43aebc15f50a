from sourcedetect.engines import SEARCH_ENGINES, match_search_engine


def test_reference_table_order():
    assert [fragment for fragment, _ in SEARCH_ENGINES] == [
        "google.",
        "bing.",
        "yahoo.",
        "duckduckgo.",
        "yandex.",
        "ecosia.",
        "msn.",
        "qwant.",
    ]


def test_first_matching_fragment_wins():
    overlapping = (("search.", "generic"), ("google.", "google"))
    assert match_search_engine("search.google.com", overlapping) == "generic"
    assert match_search_engine("www.google.com", overlapping) == "google"


def test_no_match_or_no_hostname():
    assert match_search_engine("news.ycombinator.com") is None
    assert match_search_engine("") is None
    assert match_search_engine(None) is None

import unittest

from sourcedetect.utils.enrich import extract_hostname, parse_query_string, query_from_url


class ExtractHostnameTests(unittest.TestCase):
    def test_absolute_url(self):
        self.assertEqual(extract_hostname("https://www.google.com/search?q=x"), "www.google.com")

    def test_lowercases_and_drops_port_and_credentials(self):
        self.assertEqual(extract_hostname("http://User:pw@Blog.Example.CO.UK:8080/post"), "blog.example.co.uk")

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(extract_hostname("  https://example.com/  "), "example.com")

    def test_missing_values_return_none(self):
        self.assertIsNone(extract_hostname(None))
        self.assertIsNone(extract_hostname(""))
        self.assertIsNone(extract_hostname("   "))

    def test_relative_references_return_none(self):
        self.assertIsNone(extract_hostname("example.com/path"))
        self.assertIsNone(extract_hostname("//example.com/path"))
        self.assertIsNone(extract_hostname("/just/a/path"))

    def test_unparseable_urls_return_none(self):
        self.assertIsNone(extract_hostname("http://[::1"))
        self.assertIsNone(extract_hostname("http://"))
        self.assertIsNone(extract_hostname("mailto:someone@example.com"))

    def test_ipv6_literal_keeps_brackets(self):
        self.assertEqual(extract_hostname("http://[::1]:8000/"), "[::1]")
        self.assertEqual(extract_hostname("http://[2001:DB8:0:0::1]/"), "[2001:db8::1]")

    def test_forbidden_host_characters_return_none(self):
        for url in ("http://exa mple.com/", "http://exa<mple.com/", "http://a|b.com/", "http://a%20b.com/"):
            with self.subTest(url=url):
                self.assertIsNone(extract_hostname(url))

    def test_bad_ports_return_none(self):
        self.assertIsNone(extract_hostname("https://example.com:99999/"))
        self.assertIsNone(extract_hostname("https://example.com:http/"))

    def test_percent_encoded_host_is_decoded(self):
        self.assertEqual(extract_hostname("https://%67oogle.com/"), "google.com")
        self.assertEqual(extract_hostname("https://%47OOGLE.com/"), "google.com")

    def test_idn_host_becomes_punycode(self):
        self.assertEqual(extract_hostname("https://bücher.de/"), "xn--bcher-kva.de")
        self.assertEqual(extract_hostname("https://www.Bücher.de/katalog"), "www.xn--bcher-kva.de")


class ParseQueryStringTests(unittest.TestCase):
    def test_blank_values_are_kept(self):
        self.assertEqual(parse_query_string("gclid&utm_source="), {"gclid": "", "utm_source": ""})

    def test_first_value_wins(self):
        self.assertEqual(parse_query_string("utm_source=a&utm_source=b"), {"utm_source": "a"})

    def test_leading_question_mark_and_decoding(self):
        result = parse_query_string("?utm_campaign=Spring+Sale&utm_term=red%20shoes")
        self.assertEqual(result, {"utm_campaign": "Spring Sale", "utm_term": "red shoes"})

    def test_empty_query(self):
        self.assertEqual(parse_query_string(""), {})
        self.assertEqual(parse_query_string(None), {})


class QueryFromUrlTests(unittest.TestCase):
    def test_reads_query_component_only(self):
        result = query_from_url("https://example.com/p?utm_source=x#utm_medium=y")
        self.assertEqual(result, {"utm_source": "x"})

    def test_bad_urls_give_empty_dict(self):
        self.assertEqual(query_from_url("http://[::1?utm_source=x"), {})
        self.assertEqual(query_from_url(None), {})


if __name__ == "__main__":
    unittest.main()

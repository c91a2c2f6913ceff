import random
import unittest

from tools.headers import (
    REFERER_POOL,
    USER_AGENT_POOL,
    generate_dynamic_headers,
    random_delay_seconds,
)
from tools.text_extractor import (
    clean_description,
    extract_fields,
    extract_json_ld_blocks,
    find_job_posting,
    first_match,
    FIELD_PATTERNS,
)
from tools.url_parser import canonical_posting_url, extract_posting_id, extract_title_from_url


class TestCleanDescription(unittest.TestCase):
    def test_strips_tags_and_decodes_entities(self):
        self.assertEqual(clean_description("<div>Build &amp; ship &lt;code&gt;</div>"), "Build & ship <code>")

    def test_collapses_whitespace(self):
        fragment = "<p>Line one</p>\n\n  <ul><li>Python</li><li>SQL&nbsp;&nbsp;skills</li></ul>"
        self.assertEqual(clean_description(fragment), "Line one PythonSQL skills")

    def test_inline_tags_do_not_split_words(self):
        self.assertEqual(
            clean_description("We use <strong>Python</strong>. Java<b>Script</b> too"),
            "We use Python. JavaScript too",
        )

    def test_decodes_quotes(self):
        self.assertEqual(clean_description("We&#39;re &quot;hiring&quot;"), "We're \"hiring\"")

    def test_empty(self):
        self.assertEqual(clean_description(""), "")
        self.assertEqual(clean_description(None), "")


class TestFieldPatterns(unittest.TestCase):
    def test_first_pattern_wins(self):
        html = (
            '<div class="company">Fallback Inc</div>'
            '<div class="company-name"><a href="/c">Primary Inc</a></div>'
        )
        self.assertEqual(first_match(html, FIELD_PATTERNS["organization"]), "Primary Inc")

    def test_missing_fields_are_empty_strings(self):
        fields = extract_fields("<html><body>Sign in</body></html>")

        self.assertEqual(
            fields,
            {"organization": "", "role_title": "", "location": "", "description": ""},
        )

    def test_first_match_handles_empty_html(self):
        self.assertEqual(first_match("", FIELD_PATTERNS["role_title"]), "")


class TestJsonLd(unittest.TestCase):
    def test_invalid_blocks_are_skipped(self):
        html = (
            '<script type="application/ld+json">{"@type": "JobPosting", "title": "A"}</script>'
            '<script type="application/ld+json">{oops</script>'
            '<script type="application/ld+json">   </script>'
            '<script type="text/javascript">var x = 1;</script>'
        )

        blocks = extract_json_ld_blocks(html)

        self.assertEqual(blocks, [{"@type": "JobPosting", "title": "A"}])

    def test_find_job_posting_in_list_and_graph(self):
        posting = {"@type": "JobPosting", "title": "B"}

        self.assertIs(find_job_posting([{"@type": "Organization"}, posting]), posting)
        self.assertIs(find_job_posting({"@graph": [posting]}), posting)
        self.assertEqual(find_job_posting({"@type": ["Thing", "JobPosting"], "title": "C"})["title"], "C")
        self.assertIsNone(find_job_posting({"@type": "WebPage"}))
        self.assertIsNone(find_job_posting("JobPosting"))


class TestUrlParser(unittest.TestCase):
    def test_posting_id(self):
        self.assertEqual(extract_posting_id("https://www.linkedin.com/jobs/view/4257191625"), "4257191625")
        self.assertEqual(
            extract_posting_id("https://linkedin.com/jobs/view/4257191625/?refId=x&trk=y"),
            "4257191625",
        )
        self.assertIsNone(extract_posting_id("https://www.linkedin.com/jobs/search/?keywords=python"))
        self.assertIsNone(extract_posting_id("https://www.indeed.com/viewjob?jk=123"))
        self.assertIsNone(extract_posting_id(""))

    def test_title_from_slug(self):
        self.assertEqual(
            extract_title_from_url("https://www.linkedin.com/jobs/view/4257191625/senior-front-end-developer"),
            "Senior Front End Developer",
        )
        self.assertEqual(
            extract_title_from_url("https://www.linkedin.com/jobs/view/1/senior-iOS-developer"),
            "Senior IOS Developer",
        )
        self.assertIsNone(extract_title_from_url("https://www.linkedin.com/jobs/view/4257191625/"))

    def test_title_ignores_query_string(self):
        self.assertIsNone(extract_title_from_url("https://www.linkedin.com/jobs/view/4257191625?trk=abc"))

    def test_canonical_url(self):
        self.assertEqual(canonical_posting_url("42"), "https://www.linkedin.com/jobs/view/42")


class TestHeaders(unittest.TestCase):
    def test_dynamic_headers_are_seeded(self):
        first = generate_dynamic_headers(random.Random(7))
        second = generate_dynamic_headers(random.Random(7))

        self.assertEqual(first, second)
        self.assertIn(first["User-Agent"], USER_AGENT_POOL)
        self.assertIn(first["Referer"], REFERER_POOL)
        self.assertEqual(first["Accept-Language"], "en-US,en;q=0.9")

    def test_delay_range(self):
        rng = random.Random(3)
        for _ in range(50):
            delay = random_delay_seconds(rng)
            self.assertGreaterEqual(delay, 1.0)
            self.assertLessEqual(delay, 3.0)


if __name__ == "__main__":
    unittest.main()

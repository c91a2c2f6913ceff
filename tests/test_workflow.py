import random
import unittest
from unittest.mock import patch

from graph.workflow import JobPostingExtractor, build_strategies, extract_job_posting
from models.errors import InvalidUrl
from strategies.browser import BrowserStrategy
from strategy_fakes import FakeBrowserSession, StubStrategy, failing_stub


POSTING_URL = "https://www.linkedin.com/jobs/view/4257191625/software-engineer-ii"

USABLE = {"organization": "Acme", "role_title": "Engineer", "location": "Remote"}


class TestInvalidUrl(unittest.TestCase):
    @patch("tools.api_fetcher.httpx.Client")
    @patch("tools.web_scraper.httpx.Client")
    def test_rejects_urls_without_posting_id_before_any_call(self, web_client, api_client):
        strategy = StubStrategy("first", fields=USABLE)
        extractor = JobPostingExtractor([strategy])

        for url in (
            "",
            "https://example.com/jobs/view/123",
            "https://www.linkedin.com/jobs/view/not-a-number",
            "https://www.linkedin.com/in/someone",
        ):
            with self.assertRaises(InvalidUrl):
                extractor.extract(url)

        self.assertEqual(strategy.calls, 0)
        web_client.assert_not_called()
        api_client.assert_not_called()


class TestStrategyChain(unittest.TestCase):
    def test_second_strategy_short_circuits_the_rest(self):
        first = StubStrategy("first")  # empty result
        second = StubStrategy("second", fields=USABLE)
        rest = [StubStrategy(name, fields=USABLE) for name in ("third", "fourth", "fifth")]

        state = JobPostingExtractor([first, second, *rest]).run(POSTING_URL)

        self.assertEqual(first.calls, 1)
        self.assertEqual(second.calls, 1)
        for strategy in rest:
            self.assertEqual(strategy.calls, 0)
        self.assertEqual(state["attempted"], ["first", "second"])
        self.assertEqual(state["result"].organization, "Acme")
        self.assertEqual(state["result"].source, "second")
        self.assertEqual(state["result"].posting_id, "4257191625")

    def test_incomplete_results_do_not_stop_the_chain(self):
        company_only = StubStrategy("company_only", fields={"organization": "Acme"})
        role_only = StubStrategy("role_only", fields={"role_title": "Engineer"})
        complete = StubStrategy("complete", fields=USABLE)

        result = extract_job_posting(POSTING_URL, [company_only, role_only, complete])

        self.assertEqual(result.source, "complete")
        self.assertEqual(company_only.calls, 1)
        self.assertEqual(role_only.calls, 1)

    def test_unexpected_exceptions_are_recovered(self):
        crashing = StubStrategy("crashing", error=RuntimeError("boom"))
        working = StubStrategy("working", fields=USABLE)

        state = JobPostingExtractor([crashing, working]).run(POSTING_URL)

        self.assertEqual(state["result"].source, "working")
        self.assertEqual(len(state["errors"]), 1)
        self.assertIn("crashing", state["errors"][0])
        self.assertIn("boom", state["errors"][0])

    def test_url_heuristic_when_every_strategy_fails(self):
        names = ["browser", "fetch", "mobile_api", "structured_data", "alternative"]
        strategies = [failing_stub(name) for name in names]

        state = JobPostingExtractor(strategies).run(POSTING_URL)
        result = state["result"]

        self.assertEqual(result.role_title, "Software Engineer Ii")
        self.assertEqual(result.organization, "")
        self.assertEqual(result.posting_id, "4257191625")
        self.assertIn("4257191625", result.description)
        self.assertTrue(result.needs_manual_completion)
        self.assertEqual(result.source, "url_heuristic")
        self.assertEqual(state["attempted"], names + ["url_heuristic"])
        self.assertEqual(len(state["errors"]), 5)
        for strategy in strategies:
            self.assertEqual(strategy.calls, 1)

    def test_placeholder_title_without_slug(self):
        result = extract_job_posting(
            "https://www.linkedin.com/jobs/view/4257191625/", [failing_stub("fetch")]
        )

        self.assertEqual(result.role_title, "Job from LinkedIn")
        self.assertEqual(result.organization, "")

    def test_no_strategies_goes_straight_to_fallback(self):
        state = JobPostingExtractor([]).run(POSTING_URL)

        self.assertEqual(state["attempted"], ["url_heuristic"])
        self.assertEqual(state["result"].role_title, "Software Engineer Ii")

    def test_browser_navigation_failure_advances_to_next_strategy(self):
        session = FakeBrowserSession(fail_navigations=5)
        browser = BrowserStrategy(
            session_factory=lambda: session,
            rng=random.Random(1),
            sleep=lambda seconds: None,
            max_attempts=5,
        )
        fetch = StubStrategy("fetch", fields=USABLE)

        state = JobPostingExtractor([browser, fetch]).run(POSTING_URL)

        self.assertEqual(state["result"].source, "fetch")
        self.assertEqual(session.navigations, 5)
        self.assertTrue(session.closed)
        self.assertIn("browser", state["errors"][0])


class TestBuildStrategies(unittest.TestCase):
    def test_builds_in_requested_order(self):
        strategies = build_strategies(["structured_data", "fetch"])

        self.assertEqual([s.name for s in strategies], ["structured_data", "fetch"])

    def test_unknown_strategy_name(self):
        with self.assertRaises(ValueError):
            build_strategies(["fetch", "carrier_pigeon"])

    def test_duplicate_strategy_name(self):
        with self.assertRaises(ValueError):
            build_strategies(["fetch", "fetch"])

    def test_default_extractor_uses_all_five_strategies(self):
        extractor = JobPostingExtractor()

        self.assertEqual(
            [s.name for s in extractor.strategies],
            ["browser", "fetch", "mobile_api", "structured_data", "alternative"],
        )


if __name__ == "__main__":
    unittest.main()

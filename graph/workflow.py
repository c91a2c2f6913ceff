"""
LangGraph Workflow — the ordered fallback chain of extraction strategies.

Graph structure (default order):
    browser → fetch → mobile_api → structured_data → alternative → url_heuristic

After every strategy node a conditional edge checks the result: a usable
result (company and role both known) ends the graph, anything else moves on to
the next strategy. The URL heuristic always ends the graph.
"""

from langgraph.graph import StateGraph, END

from config.settings import settings
from models.errors import InvalidUrl, StrategyError
from models.extraction import ExtractionResult
from models.state import ExtractionState
from strategies.alternative import AlternativeEndpointStrategy
from strategies.base import ExtractionStrategy
from strategies.browser import BrowserStrategy
from strategies.fetch import FetchStrategy
from strategies.mobile_api import MobileApiStrategy
from strategies.structured_data import StructuredDataStrategy
from strategies.url_heuristic import extract_from_url
from tools.url_parser import extract_posting_id


FALLBACK_NODE = "url_heuristic"

STRATEGY_CLASSES = {
    BrowserStrategy.name: BrowserStrategy,
    FetchStrategy.name: FetchStrategy,
    MobileApiStrategy.name: MobileApiStrategy,
    StructuredDataStrategy.name: StructuredDataStrategy,
    AlternativeEndpointStrategy.name: AlternativeEndpointStrategy,
}


def build_strategies(names: list[str]) -> list[ExtractionStrategy]:
    """
    Instantiate strategies by name, keeping the given order.

    Raises:
        ValueError: for unknown or repeated names.
    """
    unknown = [name for name in names if name not in STRATEGY_CLASSES]
    if unknown:
        raise ValueError(
            f"Unknown extraction strategies: {', '.join(unknown)} "
            f"(choose from {', '.join(STRATEGY_CLASSES)})"
        )
    if len(set(names)) != len(names):
        raise ValueError(f"Extraction strategies listed more than once: {names}")
    return [STRATEGY_CLASSES[name]() for name in names]


def make_strategy_node(strategy: ExtractionStrategy):
    """
    Wrap a strategy as a graph node.

    Strategy failures never leave the node: they are printed and recorded in
    state['errors'] so the chain can move on.
    """

    def run_strategy(state: ExtractionState) -> dict:
        print(f"[Extractor] Strategy '{strategy.name}': {strategy.label}...")

        try:
            result = strategy.attempt_extract(state["url"], state["posting_id"])
        except StrategyError as e:
            print(f"[Extractor] ❌ {strategy.name} failed: {e}")
            return {"result": None, "attempted": [strategy.name], "errors": [f"{strategy.name}: {e}"]}
        except Exception as e:
            print(f"[Extractor] ❌ {strategy.name} crashed: {type(e).__name__}: {e}")
            return {
                "result": None,
                "attempted": [strategy.name],
                "errors": [f"{strategy.name}: {type(e).__name__}: {e}"],
            }

        if result.is_usable():
            print(f"[Extractor] ✅ {strategy.name} succeeded: {result.role_title} at {result.organization}")
            return {"result": result, "attempted": [strategy.name], "errors": []}

        print(f"[Extractor] {strategy.name} returned incomplete data (company and role both required)")
        return {
            "result": result,
            "attempted": [strategy.name],
            "errors": [f"{strategy.name}: incomplete result"],
        }

    return run_strategy


def url_heuristic_node(state: ExtractionState) -> dict:
    """Final fallback: derive what we can from the URL itself."""
    print("[Extractor] All strategies failed, falling back to URL parsing...")
    result = extract_from_url(state["url"], state["posting_id"])
    return {"result": result, "attempted": [FALLBACK_NODE], "errors": []}


def has_usable_result(state: ExtractionState) -> bool:
    result = state.get("result")
    return result is not None and result.is_usable()


def _route_after(next_node: str):
    def route(state: ExtractionState) -> str:
        return "done" if has_usable_result(state) else "next"

    route.__name__ = f"route_to_{next_node}"
    return route


def build_workflow(strategies: list[ExtractionStrategy]) -> StateGraph:
    """
    Build and compile the fallback chain for the given strategies.

    Returns:
        Compiled StateGraph ready to invoke.
    """
    names = [strategy.name for strategy in strategies]
    if FALLBACK_NODE in names or len(set(names)) != len(names):
        raise ValueError(f"Strategy names must be unique and not '{FALLBACK_NODE}': {names}")

    workflow = StateGraph(ExtractionState)

    # Add nodes (each strategy is a node in the graph)
    for strategy in strategies:
        workflow.add_node(strategy.name, make_strategy_node(strategy))
    workflow.add_node(FALLBACK_NODE, url_heuristic_node)

    # Chain strategies: usable → END, otherwise → next strategy (or the fallback)
    node_order = names + [FALLBACK_NODE]
    workflow.set_entry_point(node_order[0])

    for current, following in zip(node_order, node_order[1:]):
        workflow.add_conditional_edges(
            current,
            _route_after(following),
            {
                "done": END,
                "next": following,
            },
        )

    # Fallback → END
    workflow.add_edge(FALLBACK_NODE, END)

    return workflow.compile()


class JobPostingExtractor:
    """Runs the strategy chain for one posting URL at a time."""

    def __init__(self, strategies: list[ExtractionStrategy] = None):
        if strategies is None:
            strategies = build_strategies(settings.extraction_strategies)
        self.strategies = list(strategies)
        self.graph = build_workflow(self.strategies)

    def run(self, url: str) -> ExtractionState:
        """
        Run the chain and return the final graph state.

        Raises:
            InvalidUrl: when the URL has no /jobs/view/<id> path. Nothing is
                fetched in that case.
        """
        posting_id = extract_posting_id(url)
        if not posting_id:
            raise InvalidUrl(url)

        print(f"[Extractor] Starting extraction for job ID {posting_id}")

        initial_state = {
            "url": url,
            "posting_id": posting_id,
            "result": None,
            "attempted": [],
            "errors": [],
        }
        return self.graph.invoke(initial_state)

    def extract(self, url: str) -> ExtractionResult:
        return self.run(url)["result"]


def extract_job_posting(url: str, strategies: list[ExtractionStrategy] = None) -> ExtractionResult:
    """
    Extract job details for a LinkedIn posting URL.

    Always returns a result for a well-formed posting URL; when every strategy
    fails the result is a URL-derived placeholder with
    ``needs_manual_completion`` set.

    Raises:
        InvalidUrl: if the URL is not a /jobs/view/<numeric-id> posting.
    """
    return JobPostingExtractor(strategies).extract(url)

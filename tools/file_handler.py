"""
File Handler Tool — loads posting URL lists, saves results to JSON and CSV.
"""

import csv
import json
import os
from datetime import datetime

import yaml

from models.extraction import ExtractionResult


RESULT_FIELDS = list(ExtractionResult.model_fields.keys())


def load_urls(path: str) -> list[str]:
    """
    Load posting URLs for a batch run.

    YAML files (.yaml/.yml) hold a ``postings`` list whose entries are URL
    strings or ``{url: ...}`` maps. Any other file is read as one URL per line,
    skipping blanks and ``#`` comments.

    Args:
        path: Path to the URL list.

    Returns:
        URLs in file order.
    """
    if path.endswith((".yaml", ".yml")):
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        urls = []
        for entry in data.get("postings", []):
            if isinstance(entry, str):
                urls.append(entry.strip())
            elif isinstance(entry, dict) and entry.get("url"):
                urls.append(str(entry["url"]).strip())
        return [url for url in urls if url]

    with open(path, "r") as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith("#")]


def save_to_json(results: list[dict], output_dir: str, filename: str = None) -> str:
    """
    Save extraction results to a JSON file.

    Args:
        results: List of result dicts to save.
        output_dir: Directory to save the file in.
        filename: Optional filename (auto-generated with timestamp if not provided).

    Returns:
        Path to the saved file.
    """
    os.makedirs(output_dir, exist_ok=True)

    if not filename:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"postings_{timestamp}.json"

    filepath = os.path.join(output_dir, filename)

    with open(filepath, "w") as f:
        json.dump(results, f, indent=2, default=str)

    return filepath


def save_to_csv(results: list[dict], output_dir: str, filename: str = None) -> str:
    """
    Save extraction results to a CSV file.

    Args:
        results: List of result dicts to save.
        output_dir: Directory to save the file in.
        filename: Optional filename (auto-generated with timestamp if not provided).

    Returns:
        Path to the saved file.
    """
    os.makedirs(output_dir, exist_ok=True)

    if not filename:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"postings_{timestamp}.csv"

    filepath = os.path.join(output_dir, filename)

    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)

    return filepath


def generate_summary(results: list[dict]) -> str:
    """
    Generate a human-readable summary of an extraction batch.

    Args:
        results: List of result dicts.

    Returns:
        Formatted summary string.
    """
    if not results:
        return "No postings processed."

    # Count by the strategy that produced each result
    by_source = {}
    for result in results:
        source = result.get("source") or "unknown"
        by_source[source] = by_source.get(source, 0) + 1

    manual = sum(1 for result in results if result.get("needs_manual_completion"))

    lines = [
        f"{'=' * 50}",
        f"  EXTRACTION SUMMARY",
        f"{'=' * 50}",
        f"  Postings processed: {len(results)}",
        f"  Need manual details: {manual}",
        f"",
        f"  By Strategy:",
    ]
    for source, count in sorted(by_source.items(), key=lambda x: -x[1]):
        lines.append(f"    - {source}: {count}")

    lines.append(f"{'=' * 50}")

    return "\n".join(lines)

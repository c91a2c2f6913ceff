"""
Job Posting Extractor — pre-fill job applications from LinkedIn posting URLs.
CLI entry point for running the extraction chain.
"""

import argparse
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.settings import settings
from graph.workflow import JobPostingExtractor, build_strategies
from models.application import JobApplication
from models.errors import InvalidUrl
from tools.application_store import init_db, create_application, find_by_link, get_application_count
from tools.file_handler import load_urls, save_to_json, save_to_csv, generate_summary
from tools.notifier import build_status_message, notify, send_email_notification


def run_once(urls: list[str], extractor: JobPostingExtractor) -> tuple[list, list[str]]:
    """Extract every URL in order; return results and the URLs that were rejected."""
    results = []
    invalid = []

    for index, url in enumerate(urls, start=1):
        print(f"\n{'─' * 60}")
        print(f"  Posting {index}/{len(urls)}: {url}")
        print(f"{'─' * 60}")

        try:
            state = extractor.run(url)
        except InvalidUrl as e:
            notify("error", f"{e}. Expected a URL like https://www.linkedin.com/jobs/view/4257191625")
            invalid.append(url)
            continue

        result = state["result"]
        status, message = build_status_message(result)
        notify(status, message)
        print(f"   Strategies tried: {' → '.join(state['attempted'])}")
        results.append(result)

    return results, invalid


def main():
    """Main entry point for the extraction CLI."""
    parser = argparse.ArgumentParser(
        description="Job Posting Extractor — pre-fill applications from LinkedIn job URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py https://www.linkedin.com/jobs/view/4257191625
  python run.py --urls-file postings.yaml --output-dir results/
  python run.py https://www.linkedin.com/jobs/view/4257191625 --save --status interviewing
  python run.py --urls-file postings.txt --skip-browser --notify-email you@example.com
        """,
    )

    parser.add_argument(
        "urls",
        nargs="*",
        help="LinkedIn job posting URLs",
    )
    parser.add_argument(
        "--urls-file",
        type=str,
        default=None,
        help="YAML (postings: [...]) or text file with one URL per line",
    )
    parser.add_argument(
        "--skip-browser",
        action="store_true",
        help="Skip the headless browser strategy (faster, no Chromium needed)",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store each extraction as a job application in the local tracker",
    )
    parser.add_argument(
        "--status",
        type=str,
        default="applied",
        choices=["applied", "interviewing", "offer", "rejected"],
        help="Application status to use with --save (default: applied)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Output directory for JSON and CSV results (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--notify-email",
        type=str,
        default=None,
        help="Email address to send an extraction summary to (requires SMTP config in .env)",
    )

    args = parser.parse_args()

    urls = list(args.urls)
    if args.urls_file:
        if not os.path.exists(args.urls_file):
            print(f"❌ URL file not found: {args.urls_file}")
            sys.exit(1)
        urls.extend(load_urls(args.urls_file))

    if not urls:
        parser.error("provide at least one posting URL or --urls-file")

    strategy_names = list(settings.extraction_strategies)
    if args.skip_browser and "browser" in strategy_names:
        strategy_names.remove("browser")

    try:
        extractor = JobPostingExtractor(build_strategies(strategy_names))
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    if args.output_dir:
        settings.output_dir = args.output_dir

    notify_email = args.notify_email or settings.notify_email

    print("=" * 60)
    print("  Job Posting Extractor")
    print("=" * 60)
    print(f"  Postings:   {len(urls)}")
    print(f"  Strategies: {' → '.join(strategy_names) or '(URL parsing only)'}")
    print(f"  Output:     {settings.output_dir}/")
    if args.save:
        print(f"  Tracker:    {settings.db_path}")
    if notify_email:
        print(f"  Email:      📧 {notify_email}")
    print("=" * 60)

    try:
        results, invalid = run_once(urls, extractor)
    except KeyboardInterrupt:
        print("\n\n⛔ Extraction interrupted by user.")
        sys.exit(1)

    if args.save and results:
        init_db(settings.db_path)
        for result in results:
            if find_by_link(result.posting_url, settings.db_path):
                print(f"[Store] Already tracking {result.posting_url}, skipping")
                continue
            create_application(JobApplication.from_extraction(result, status=args.status), settings.db_path)
        print(f"📦 Tracker now holds {get_application_count(settings.db_path)} application(s)")

    result_dicts = [result.model_dump() for result in results]

    if result_dicts:
        json_path = save_to_json(result_dicts, settings.output_dir)
        csv_path = save_to_csv(result_dicts, settings.output_dir)
        print(f"\n  📄 JSON: {json_path}")
        print(f"  📄 CSV:  {csv_path}")

    print(f"\n{generate_summary(result_dicts)}")

    if notify_email and results:
        if settings.smtp_user and settings.smtp_password:
            send_email_notification(
                results,
                recipient=notify_email,
                smtp_host=settings.smtp_host,
                smtp_port=settings.smtp_port,
                smtp_user=settings.smtp_user,
                smtp_password=settings.smtp_password,
            )
        else:
            print("⚠️  Email requested but SMTP not configured in .env")

    if invalid:
        print(f"\n⚠️  {len(invalid)} URL(s) were not LinkedIn job postings:")
        for url in invalid:
            print(f"  - {url}")

    if invalid and not results:
        sys.exit(1)


if __name__ == "__main__":
    main()

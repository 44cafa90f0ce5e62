"""
Command-line interface for the summarization pipeline.
"""

import sys
import logging
import argparse

from .config import DEFAULT_MAX_SENTENCES, LOG_LEVEL, METRICS_PORT, ENABLE_SYNONYMS, SUMMARY_ORDER
from .constants import SUMMARY_ORDERS
from .exceptions import PipelineError
from .logging import configure_logging
from .metrics import start_metrics_server
from .pipeline import Summarizer, build_options


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Summarize a text document by extracting its key sentences")

    parser.add_argument("input", nargs="?", default="-", help="Path to a text file, or '-' for stdin")
    parser.add_argument("--max-sentences", type=int, default=DEFAULT_MAX_SENTENCES,
                        help="Maximum number of sentences in the summary")
    parser.add_argument("--no-synonyms", action="store_true", default=not ENABLE_SYNONYMS,
                        help="Keep the selected sentences' original wording")
    parser.add_argument("--order", default=SUMMARY_ORDER, choices=SUMMARY_ORDERS,
                        help="Emit sentences by rank or in document order")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--metrics-port", type=int, default=METRICS_PORT, help="Port for metrics server (0 to disable)")
    parser.add_argument("--log-level", default=LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set log level")

    return parser.parse_args(argv)


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)
    logger = configure_logging(console_level=getattr(logging, args.log_level))

    if args.metrics_port > 0:
        if start_metrics_server(args.metrics_port):
            logger.info("Metrics server started", port=args.metrics_port)
        else:
            logger.warning("Failed to start metrics server")

    try:
        text = read_input(args.input)
        summarizer = Summarizer(options=build_options(
            enable_synonyms=not args.no_synonyms,
            summary_order=args.order,
        ))
        result = summarizer.summarize_detailed(text, args.max_sentences)
    except (OSError, PipelineError) as e:
        logger.error("Summarization failed", error=str(e))
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for ReviewSense."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List

from .core.config import settings
from .core.constants import FileConstants
from .core.dashboard import generate_report_summary
from .services.analyzer import SentimentService, to_record
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _read_reviews(path: str) -> List[str]:
    """Read one review per non-empty line."""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def cmd_analyze(args):
    """Analyze a single review."""
    service = SentimentService()
    result = service.analyze_single(args.text, use_advanced=args.advanced)

    lexicon = result.lexicon
    classifier = result.classifier
    print(f"Lexicon: {lexicon.label} (score {lexicon.total_score}, "
          f"comparative {lexicon.comparative_score:.3f}, confidence {lexicon.confidence:.1f}%)")
    print(f"  positive: {', '.join(lexicon.positive_tokens) or '-'}")
    print(f"  negative: {', '.join(lexicon.negative_tokens) or '-'}")
    print(f"  VADER compound: {lexicon.compound:.3f} ({lexicon.stars:.1f}/5 stars)")
    print(f"Classifier: {classifier.predicted_class} ({classifier.confidence:.1f}%) "
          f"pos={classifier.positive_prob:.3f} neg={classifier.negative_prob:.3f} "
          f"neu={classifier.neutral_prob:.3f}")

    if result.preprocessed:
        meta = result.preprocessed.metadata
        print(f"Readability: {meta.readability_score:.1f}  "
              f"Intensity: {meta.emotional_intensity:.1f}  "
              f"Subjectivity: {meta.subjectivity:.1f}")

    if args.out:
        export_to_json({"result": asdict(result), "metadata": {}}, args.out)
        print(f"Results exported to {args.out}")


def cmd_batch(args):
    """Analyze a file of reviews."""
    reviews = _read_reviews(args.input_file)
    service = SentimentService()
    batch = service.analyze_batch(reviews, use_advanced=args.advanced)

    summary = batch.aggregate
    print(f"Analyzed {summary.total} reviews")
    print(f"  Positive: {summary.positive} ({summary.positive_percentage:.1f}%)")
    print(f"  Negative: {summary.negative} ({summary.negative_percentage:.1f}%)")
    print(f"  Neutral:  {summary.neutral} ({summary.neutral_percentage:.1f}%)")
    print(f"  Average score: {summary.avg_score:.2f}, confidence: {summary.avg_confidence:.1f}%")

    if args.out:
        export_to_json(prepare_export(batch), args.out)
        print(f"Results exported to {args.out}")


def cmd_compare(args):
    """Compare two reviews."""
    service = SentimentService()
    comparison = service.compare(args.text_a, args.text_b)

    print(f"A: {comparison.result_a.lexicon.label} (score {comparison.result_a.lexicon.total_score})")
    print(f"B: {comparison.result_b.lexicon.label} (score {comparison.result_b.lexicon.total_score})")
    print(f"Score difference: {comparison.score_difference}")
    print(f"Word similarity: {comparison.jaccard_similarity:.3f}")


def cmd_features(args):
    """Extract linguistic features."""
    service = SentimentService()
    summary = service.extract_features(args.text)
    print(json.dumps(asdict(summary), indent=2))


def cmd_dashboard(args):
    """Build dashboard metrics and a report for a file of reviews."""
    reviews = _read_reviews(args.input_file)
    service = SentimentService()
    batch = service.analyze_batch(reviews)
    metrics = service.build_dashboard(batch.results)
    report = generate_report_summary([to_record(r) for r in batch.results], metrics)

    print(f"Dashboard for {metrics.total_reviews} reviews")
    print(f"  Median score: {metrics.median_score:.2f}, std deviation: {metrics.std_deviation:.2f}")
    print("Key insights:")
    for insight in report.key_insights:
        print(f"  - {insight}")

    if metrics.top_positive_words:
        print("Top positive words: " + ", ".join(
            f"{w.word} ({w.frequency})" for w in metrics.top_positive_words[:5]))
    if metrics.top_negative_words:
        print("Top negative words: " + ", ".join(
            f"{w.word} ({w.frequency})" for w in metrics.top_negative_words[:5]))

    if args.out:
        export_to_json(prepare_export(batch, metrics), args.out)
        print(f"Results exported to {args.out}")


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if args.pretty:
            print(json.dumps(data, indent=2))
        else:
            output_file = args.output or args.input_file.replace('.json', '_export.json')
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            print(f"Exported to {output_file}")

    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ReviewSense - Product Review Sentiment Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    analyze_parser = subparsers.add_parser('analyze', help='Analyze a single review')
    analyze_parser.add_argument('text', help='Review text')
    analyze_parser.add_argument('--advanced', action='store_true', help='Include advanced preprocessing')
    analyze_parser.add_argument('--out', help='Output JSON file')

    batch_parser = subparsers.add_parser('batch', help='Analyze a file of reviews (one per line)')
    batch_parser.add_argument('input_file', help='Input text file')
    batch_parser.add_argument('--advanced', action='store_true', help='Include advanced preprocessing')
    batch_parser.add_argument('--out', help='Output JSON file')

    compare_parser = subparsers.add_parser('compare', help='Compare two reviews')
    compare_parser.add_argument('text_a', help='First review')
    compare_parser.add_argument('text_b', help='Second review')

    features_parser = subparsers.add_parser('features', help='Extract linguistic features')
    features_parser.add_argument('text', help='Review text')

    dashboard_parser = subparsers.add_parser('dashboard', help='Dashboard metrics for a file of reviews')
    dashboard_parser.add_argument('input_file', help='Input text file')
    dashboard_parser.add_argument('--out', help='Output JSON file')

    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


COMMANDS = {
    'analyze': cmd_analyze,
    'batch': cmd_batch,
    'compare': cmd_compare,
    'features': cmd_features,
    'dashboard': cmd_dashboard,
    'export': cmd_export,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

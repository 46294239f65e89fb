"""Basic usage examples for ReviewSense."""

from reviewsense import SentimentService
from reviewsense.core.dashboard import generate_report_summary
from reviewsense.services.analyzer import to_record

REVIEWS = [
    "This product is absolutely amazing! Best purchase I've ever made. Highly recommend!",
    "Terrible quality. Broke after one day. Complete waste of money. Very disappointed.",
    "Arrived on time. Does what it says.",
    "Love the design, but the battery life is poor.",
    "GREAT value for the price!!!",
]


def example_single_review(service):
    """Example: Single review analysis."""
    print("🔍 Analyzing a single review")

    result = service.analyze_single(REVIEWS[0], use_advanced=True)
    print(f"🎯 Lexicon: {result.lexicon.label} (score {result.lexicon.total_score})")
    print(f"🤖 Classifier: {result.classifier.predicted_class} ({result.classifier.confidence:.1f}%)")
    print(f"📋 Tokens kept: {result.preprocessed.filtered_tokens}")


def example_compare(service):
    """Example: Side-by-side comparison."""
    print("\n🔍 Comparing two reviews")

    comparison = service.compare("I love this product!", "I hate this product!")
    print(f"📊 Score difference: {comparison.score_difference}")
    print(f"📊 Word similarity: {comparison.jaccard_similarity:.2f}")


def example_dashboard(service):
    """Example: Batch analysis and dashboard report."""
    print("\n🔍 Building a dashboard")

    batch = service.analyze_batch(REVIEWS)
    metrics = service.build_dashboard(batch.results)
    report = generate_report_summary([to_record(r) for r in batch.results], metrics)

    print(f"📊 {metrics.positive_count} positive, {metrics.negative_count} negative, "
          f"{metrics.neutral_count} neutral")
    for insight in report.key_insights:
        print(f"  - {insight}")


if __name__ == "__main__":
    print("🚀 ReviewSense Examples")
    print("=" * 50)

    service = SentimentService()
    example_single_review(service)
    example_compare(service)
    example_dashboard(service)
    print("\n✅ All examples completed successfully!")

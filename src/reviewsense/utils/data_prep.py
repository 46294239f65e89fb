"""Data preparation for export."""

import datetime
import json
from dataclasses import asdict
from typing import Any, Dict, Optional

from ..core.constants import FileConstants
from ..core.dashboard import generate_report_summary
from ..core.models import BatchAnalysis, DashboardMetrics
from ..services.analyzer import to_record


def prepare_export(batch: BatchAnalysis, metrics: Optional[DashboardMetrics] = None) -> Dict[str, Any]:
    """Prepare batch results (and optional dashboard metrics) for JSON export."""
    reviews_data = []
    for result in batch.results:
        reviews_data.append({
            "text": result.text,
            "text_length": result.text_length,
            "timestamp": result.timestamp,
            "lexicon": asdict(result.lexicon),
            "classifier": asdict(result.classifier),
            "preprocessed": asdict(result.preprocessed) if result.preprocessed else None,
        })

    export_data = {
        "summary": asdict(batch.aggregate),
        "reviews": reviews_data,
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    if metrics is not None:
        records = [to_record(r) for r in batch.results]
        export_data["dashboard"] = asdict(metrics)
        export_data["report"] = asdict(generate_report_summary(records, metrics))

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

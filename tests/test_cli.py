"""Tests for the command-line interface and JSON export."""

import json

import pytest
from reviewsense.cli import main
from reviewsense.services.analyzer import SentimentService
from reviewsense.utils.data_prep import export_to_json, prepare_export


@pytest.fixture
def reviews_file(tmp_path):
    path = tmp_path / "reviews.txt"
    path.write_text(
        "I love it\n\nGreat product\nAmazing quality\nTerrible waste\nThe box arrived on Tuesday\n",
        encoding="utf-8",
    )
    return path


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_analyze(capsys):
    main(["analyze", "I love this product!", "--advanced"])
    out = capsys.readouterr().out
    assert "Lexicon: Positive" in out
    assert "VADER compound" in out
    assert "/5 stars" in out
    assert "Readability" in out


def test_compare(capsys):
    main(["compare", "I love this product!", "I hate this product!"])
    out = capsys.readouterr().out
    assert "A: Positive" in out
    assert "B: Negative" in out
    assert "Word similarity: 0.600" in out


def test_features(capsys):
    main(["features", "I LOVE this product! Is it good?"])
    data = json.loads(capsys.readouterr().out)
    assert data["tokens"] == ["love", "product", "good"]


def test_features_empty_exits_with_error():
    with pytest.raises(SystemExit) as exc:
        main(["features", ""])
    assert exc.value.code == 1


def test_batch_export(reviews_file, tmp_path, capsys):
    out_file = tmp_path / "results.json"
    main(["batch", str(reviews_file), "--out", str(out_file)])

    assert "Analyzed 5 reviews" in capsys.readouterr().out
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["summary"]["total"] == 5
    assert data["summary"]["positive"] == 3
    assert len(data["reviews"]) == 5
    assert data["metadata"]["export_timestamp"]
    assert "dashboard" not in data


def test_dashboard_export(reviews_file, tmp_path, capsys):
    out_file = tmp_path / "dashboard.json"
    main(["dashboard", str(reviews_file), "--out", str(out_file)])

    out = capsys.readouterr().out
    assert "Dashboard for 5 reviews" in out
    assert "Key insights:" in out
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["dashboard"]["positive_count"] == 3
    assert data["report"]["sentiment_summary"]["positive"]["percentage"] == "60.00"


def test_export_pretty(tmp_path, capsys):
    in_file = tmp_path / "in.json"
    in_file.write_text(json.dumps({"a": 1}), encoding="utf-8")
    main(["export", "--in", str(in_file), "--pretty"])
    assert json.loads(capsys.readouterr().out) == {"a": 1}


def test_export_missing_file(tmp_path, capsys):
    main(["export", "--in", str(tmp_path / "missing.json")])
    assert "not found" in capsys.readouterr().out


def test_prepare_export_with_metrics(tmp_path):
    service = SentimentService()
    batch = service.analyze_batch(["Great product", "Terrible waste"], use_advanced=True)
    metrics = service.build_dashboard(batch.results)

    data = prepare_export(batch, metrics)
    assert data["metadata"]["export_timestamp"] is None
    assert data["reviews"][0]["preprocessed"]["cleaned_text"] == "great product"
    assert data["dashboard"]["total_reviews"] == 2

    out_file = tmp_path / "out.json"
    export_to_json(data, str(out_file))
    loaded = json.loads(out_file.read_text(encoding="utf-8"))
    assert loaded["metadata"]["export_timestamp"]
    assert loaded["metadata"]["version"] == "1.0.0"

"""Command-line interface for EcoScore."""

import argparse
import json
import logging
import sys
from datetime import datetime

from .core.config import settings
from .core.constants import FileConstants
from .core.defaults import DEFAULT_VENUE_TYPE, get_default_eco_scores
from .core.models import EcoScoreMetadata
from .core.scoring import analyze_eco_scores
from .services.google_client import GooglePlacesService
from .services.place_scoring import EcoScoreRefresher, VenueOutcome, VenueRef, score_place_details
from .utils.data_prep import export_to_json, prepare_export, result_to_record

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _load_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _print_record(record):
    print(json.dumps(record, indent=2, ensure_ascii=False))


def cmd_analyze(args):
    """Analyze command: score reviews from a JSON file."""
    data = _load_json(args.input_file)

    # Either a bare list of reviews or {"name", "description", "reviews"}
    if isinstance(data, dict):
        raw_reviews = data.get("reviews", [])
        place = {"name": data.get("name", ""), "description": data.get("description", "")}
    else:
        raw_reviews = data
        place = {}
    if args.name:
        place["name"] = args.name
    if args.description:
        place["description"] = args.description

    result = analyze_eco_scores(raw_reviews, place)
    record = result_to_record(result)

    if args.out:
        export_to_json(prepare_export([record]), args.out)
        print(f"Results exported to {args.out}")
    _print_record(record)


def cmd_defaults(args):
    """Defaults command: show baseline scores for a venue type."""
    _print_record(result_to_record(get_default_eco_scores(args.type)))


def cmd_place(args):
    """Place command: fetch a place from Google Places and score it."""
    places = GooglePlacesService()
    place = places.get_place_details(args.place_id)
    scored = score_place_details(place, args.type)

    print(f"{place.name or args.place_id}: {len(place.reviews)} reviews, source={scored.data_source}")
    record = result_to_record(scored.result)
    if args.out:
        export_to_json(prepare_export([record]), args.out)
        print(f"Results exported to {args.out}")
    _print_record(record)


def _parse_timestamp(value):
    """Parse ISO-8601 timestamps, including the "Z" suffix JavaScript writes."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _venue_from_dict(item):
    venue_id = item.get("id") or item.get("_id")
    if not venue_id:
        raise ValueError("venue has no id")

    metadata = None
    meta = item.get("ecoScoreMetadata")
    if meta and meta.get("lastCalculated"):
        metadata = EcoScoreMetadata(
            confidence_level=meta.get("confidenceLevel", 1),
            last_calculated=_parse_timestamp(meta["lastCalculated"]),
        )
    return VenueRef(
        venue_id=str(venue_id),
        venue_type=item.get("type") or DEFAULT_VENUE_TYPE,
        google_place_id=item.get("googlePlaceId") or (meta or {}).get("googlePlaceId"),
        metadata=metadata,
    )


def _load_venues(items):
    """Convert venue rows, turning unreadable rows into error outcomes."""
    venues, rejected = [], []
    for index, item in enumerate(items):
        try:
            venues.append(_venue_from_dict(item))
        except Exception as e:
            label = (item.get("id") or item.get("_id")) if isinstance(item, dict) else None
            label = str(label or f"row {index}")
            logger.warning(f"Skipping venue {label}: {e}")
            rejected.append(VenueOutcome(venue_id=label, status="error", error=str(e)))
    return venues, rejected


def cmd_rescore(args):
    """Rescore command: refresh eco scores for a list of venues."""
    venues, rejected = _load_venues(_load_json(args.input_file))
    refresher = EcoScoreRefresher(max_workers=args.workers)
    summary = refresher.rescore(venues, force=args.force)
    summary.total += len(rejected)
    for outcome in rejected:
        summary.record(outcome)

    print(f"\nRescore Summary:")
    print(f"  Total processed: {summary.total}")
    print(f"  Successful: {summary.success}")
    print(f"  Errors: {summary.error}")
    print(f"  Skipped: {summary.skipped}")
    print(f"\nData Sources:")
    for source, count in summary.by_data_source.items():
        print(f"  {source}: {count}")

    if args.out:
        records = [
            {"id": outcome.venue_id, "dataSource": outcome.data_source, **result_to_record(outcome.result)}
            for outcome in summary.outcomes if outcome.result is not None
        ]
        export_to_json(prepare_export(records), args.out)
        print(f"\nResults exported to {args.out}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="EcoScore - Eco scoring from venue reviews")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Score reviews from a JSON file')
    analyze_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    analyze_parser.add_argument('--name', help='Place name')
    analyze_parser.add_argument('--description', help='Place description')
    analyze_parser.add_argument('--out', help='Output JSON file')

    # Defaults command
    defaults_parser = subparsers.add_parser('defaults', help='Show default scores for a venue type')
    defaults_parser.add_argument('--type', default=DEFAULT_VENUE_TYPE, help='Venue type')

    # Place command
    place_parser = subparsers.add_parser('place', help='Fetch and score a Google place')
    place_parser.add_argument('place_id', help='Google place ID')
    place_parser.add_argument('--type', default=DEFAULT_VENUE_TYPE, help='Venue type for fallback scores')
    place_parser.add_argument('--out', help='Output JSON file')

    # Rescore command
    rescore_parser = subparsers.add_parser('rescore', help='Refresh scores for stored venues')
    rescore_parser.add_argument('--in', dest='input_file', required=True, help='Venues JSON file')
    rescore_parser.add_argument('--force', action='store_true', help='Rescore even recent high-confidence venues')
    rescore_parser.add_argument('--workers', type=int, default=None, help='Worker threads')
    rescore_parser.add_argument('--out', help='Output JSON file')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'defaults':
            cmd_defaults(args)
        elif args.command == 'place':
            cmd_place(args)
        elif args.command == 'rescore':
            cmd_rescore(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Main entry point for Job-Match."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from src import __version__
from src.config.settings import OutputFormat, Settings
from src.utils.logging import configure_logging


def _unit_interval(value: str) -> float:
    score = float(value)
    if not (0.0 <= score <= 1.0):
        raise argparse.ArgumentTypeError("value must be between 0.0 and 1.0")
    return score


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return number


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_dump_json(payload), encoding="utf-8")


def _dump_json(payload: object) -> str:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    return json.dumps(payload, indent=2, default=_default)


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "jobs",
        nargs="?",
        type=Path,
        default=None,
        help="Job corpus: JSON file or directory (defaults to JOB_MATCH_JOBS_PATH)",
    )
    parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to candidate profile (YAML or JSON)",
    )
    parser.add_argument(
        "--remote",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override the profile's remote-work preference",
    )
    parser.add_argument(
        "--industry",
        action="append",
        default=None,
        help="Override preferred industries (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Also write the JSON result to this file",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="job-match",
        description="Job-Match: rule-based job matching and recommendations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src recommend jobs.json --profile profile.yaml --insights
  python -m src match jobs.json --profile profile.yaml --limit 5
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available operating modes",
    )

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Rank and classify jobs for a candidate",
    )
    _add_input_arguments(recommend_parser)
    recommend_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Maximum recommendations (defaults to RECOMMEND_MAX_RECOMMENDATIONS)",
    )
    recommend_parser.add_argument(
        "--min-fit",
        type=_unit_interval,
        default=None,
        help="Drop matches below this fit score (0.0-1.0)",
    )
    recommend_parser.add_argument(
        "--min-confidence",
        type=_unit_interval,
        default=None,
        help="Drop matches below this confidence (0.0-1.0)",
    )
    recommend_parser.add_argument(
        "--insights",
        action="store_true",
        help="Include aggregate market insights",
    )
    recommend_parser.add_argument(
        "--scenarios",
        action="store_true",
        help="Include quick-win / growth / salary / remote views",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Score jobs with the Matcher only (no tiers or priority)",
    )
    _add_input_arguments(match_parser)
    match_parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=10,
        help="Number of top matches to show (default: 10)",
    )

    return parser


def _criteria_overrides(parsed: argparse.Namespace) -> dict:
    overrides: dict = {}
    if parsed.remote is not None:
        overrides["remote"] = parsed.remote
    if parsed.industry:
        overrides["industries"] = parsed.industry
    return overrides


def _print_insights(insights) -> None:
    print("\nInsights:")
    print(
        f"Tiers: perfect={insights.perfect_matches} good={insights.good_matches} "
        f"explore={insights.explore_opportunities} stretch={insights.stretch_goals}"
    )
    print(f"Average fit: {insights.average_fit_score:.2f}")
    if insights.top_skills:
        print(f"Top skills: {', '.join(insights.top_skills)}")
    if insights.top_industries:
        print(f"Top industries: {', '.join(insights.top_industries)}")
    if insights.salary.average:
        print(
            f"Salary: avg={insights.salary.average} "
            f"range={insights.salary.minimum}-{insights.salary.maximum}"
        )
    print(f"Remote: {insights.location.remote_percentage:.2f}%")
    if insights.location.top_locations:
        print(f"Top locations: {', '.join(insights.location.top_locations)}")


def _print_scenarios(scenarios) -> None:
    from src.matching.service import UNKNOWN_COMPANY

    views = (
        ("Quick wins", scenarios.quick_wins),
        ("Career growth", scenarios.career_growth),
        ("Salary boost", scenarios.salary_boost),
        ("Remote work", scenarios.remote_work),
    )
    for title, recs in views:
        print(f"\n{title}:")
        if not recs:
            print("  (none)")
        for rec in recs:
            company = rec.job.company or UNKNOWN_COMPANY
            print(f"  - {company}: {rec.job.title} ({rec.fit_score:.2f})")


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"Job-Match v{__version__} starting in {parsed.mode} mode")

    from src.matching.corpus import CorpusError, load_jobs
    from src.matching.models import MatchingCriteria
    from src.matching.profile import ProfileService

    jobs_path = parsed.jobs or settings.jobs_path
    if jobs_path is None:
        print(
            "Error: no job corpus given (pass a path or set JOB_MATCH_JOBS_PATH)",
            file=sys.stderr,
        )
        return 1

    profile_service = ProfileService(settings=settings)
    try:
        profile = profile_service.load_profile(parsed.profile)
        jobs = load_jobs(jobs_path)
        if not jobs:
            raise CorpusError(f"No valid jobs in {jobs_path}")
        criteria = MatchingCriteria.from_profile(
            profile, **_criteria_overrides(parsed)
        )
    except (FileNotFoundError, ValueError) as e:
        # pydantic.ValidationError and CorpusError are ValueErrors too.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in profile_service.validate_profile(profile):
        logger.warning(f"Profile: {warning}")

    as_json = parsed.json or settings.output_format == OutputFormat.JSON

    if parsed.mode == "match":
        from src.matching.service import JobMatcher

        matcher = JobMatcher()
        matches = matcher.find_matches(jobs, criteria, limit=parsed.limit)
        payload = {"matches": matches}
        if parsed.out:
            _write_json(parsed.out, payload)
        if as_json:
            print(_dump_json(payload))
            return 0
        for index, match in enumerate(matches, start=1):
            print(f"\n#{index} {matcher.format_match(match)}")
        return 0

    if parsed.mode == "recommend":
        from src.recommend.config import RecommendationConfig
        from src.recommend.service import RecommendationEngine

        overrides = {
            name: value
            for name, value in (
                ("max_recommendations", parsed.limit),
                ("min_fit_score", parsed.min_fit),
                ("min_confidence", parsed.min_confidence),
            )
            if value is not None
        }
        config = RecommendationConfig(**overrides)
        engine = RecommendationEngine(config=config)
        recommendations = engine.recommend(jobs, criteria)

        payload = {"recommendations": recommendations}
        insights = engine.insights(recommendations) if parsed.insights else None
        scenarios = (
            engine.scenarios(recommendations, criteria) if parsed.scenarios else None
        )
        if insights is not None:
            payload["insights"] = insights
        if scenarios is not None:
            payload["scenarios"] = scenarios

        if parsed.out:
            _write_json(parsed.out, payload)
            logger.info(f"Wrote: {parsed.out}")
        if as_json:
            print(_dump_json(payload))
            return 0

        print(f"{len(recommendations)} recommendation(s) from {len(jobs)} job(s)")
        for index, rec in enumerate(recommendations, start=1):
            print(f"\n#{index} {engine.format_recommendation(rec)}")
        if insights is not None:
            _print_insights(insights)
        if scenarios is not None:
            _print_scenarios(scenarios)
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""CLI entry point for reconciling saved leaderboard documents.

Usage:
    python -m leaderboard.process_leaderboard \\
        --html overall.html --json overall.json --tournament-id 4522280 \\
        --event-id 522157 --round-id 1615931 --round-name R3 \\
        --output ./output/scoreboard.json
"""

import argparse
import json
import logging
import os
import sys

from leaderboard.core.errors import ValidationError
from leaderboard.core.models import ScoreboardConfig, TournamentDocuments
from leaderboard.core.scoreboard_builder import build_scoreboard
from leaderboard.entities.tournament import DEFAULT_SORT, SORT_KEYS, Tournament


def _read(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv=None):
    parser = argparse.ArgumentParser(description='Reconcile leaderboard HTML and JSON documents')
    parser.add_argument('--html', nargs='+', required=True, help='Leaderboard HTML file(s), one per tournament')
    parser.add_argument('--json', nargs='+', required=True, help='Scoring JSON file(s), same order as --html')
    parser.add_argument('--tournament-id', nargs='+', required=True, help='Tournament id(s), same order as --html')
    parser.add_argument('--event-id', required=True, help='Event id')
    parser.add_argument('--event-name', default=None, help='Event name')
    parser.add_argument('--round-id', required=True, help='Round the documents were fetched for')
    parser.add_argument('--round-name', default=None, help='Round name (e.g. R3)')
    parser.add_argument('--sort', nargs='*', default=None, choices=SORT_KEYS,
                        help=f"Sort rows by these keys (default when given without keys: {' '.join(DEFAULT_SORT)})")
    parser.add_argument('--direction', default='asc', choices=['asc', 'desc'], help='Sort direction')
    parser.add_argument('--output', required=True, help='Output JSON file')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    if not (len(args.html) == len(args.json) == len(args.tournament_id)):
        parser.error('--html, --json and --tournament-id need the same number of values')

    config = ScoreboardConfig(
        event_id=args.event_id,
        event_name=args.event_name,
        round_id=args.round_id,
        round_name=args.round_name,
    )

    documents = []
    for html_path, json_path, tournament_id in zip(args.html, args.json, args.tournament_id):
        print(f"Reading {html_path} + {json_path}...")
        documents.append(TournamentDocuments(
            tournament_id=tournament_id,
            html=_read(html_path),
            json=_read(json_path),
        ))

    try:
        scoreboard = build_scoreboard(config, documents)
    except ValidationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.sort is not None:
        scoreboard['tournaments'] = [
            Tournament(t).sort(*args.sort, direction=args.direction).to_dict()
            for t in scoreboard['tournaments']
        ]

    for t in scoreboard['tournaments']:
        print(f"  -> {t['meta']['name']}: {len(t['rows'])} rows")

    output_dir = os.path.dirname(os.path.abspath(args.output))
    os.makedirs(output_dir, exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        json.dump(scoreboard, f, indent=2)
    print(f"Generated {args.output}")

    print("\nDone!")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3

import sys
import argparse
import logging
import json

from aip_charts import ChartAggregator, ChartSettings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_human(lookup):
    print(f"{lookup.icao}: {len(lookup.charts)} charts ({', '.join(lookup.providers)})")
    for chart in lookup.charts:
        page = f" [{chart.page}]" if chart.page else ''
        tags = f" ({', '.join(chart.tags)})" if chart.tags else ''
        print(f"  {chart.label:<20} {chart.subtitle}{page}{tags}")
        print(f"  {'':<20} {chart.url}")
    for name, error in lookup.failures.items():
        print(f"  ! {name} failed: {error}")
    for name in lookup.not_found:
        print(f"  - {name} has no publication")


def main():
    parser = argparse.ArgumentParser(description='Find the charts published for aerodromes')
    parser.add_argument('airports', help='List of ICAO airport codes', nargs='+')
    parser.add_argument('-s', '--source', help='Provider to query (SIA, SUPAIP, ATLAS, UK), repeatable', action='append')
    parser.add_argument('-a', '--airac-date', help='AIRAC effective date (YYYY-MM-DD), defaults to the current cycle')
    parser.add_argument('--uk-airac-date', help='AIRAC effective date for the UK eAIP if it differs')
    parser.add_argument('--atlas-vac', help='Also query the French VAC atlas', action='store_true')
    parser.add_argument('--format', help='Output format (json,human)', choices=['json', 'human'], default='human')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    settings = ChartSettings.from_env()
    if args.airac_date:
        settings = ChartSettings(
            airac_date=args.airac_date,
            uk_airac_date=args.uk_airac_date or args.airac_date,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            enable_atlas_vac=settings.enable_atlas_vac,
            max_workers=settings.max_workers,
        )
    elif args.uk_airac_date:
        settings.uk_airac_date = args.uk_airac_date
    if args.atlas_vac:
        settings.enable_atlas_vac = True

    aggregator = ChartAggregator(settings)
    lookups = [aggregator.lookup(icao.upper(), args.source) for icao in args.airports]

    if args.format == 'json':
        print(json.dumps([lookup.to_dict() for lookup in lookups], indent=2, ensure_ascii=False))
    else:
        for lookup in lookups:
            print_human(lookup)

    if not any(lookup.found for lookup in lookups):
        logger.error('No charts found')
        sys.exit(1)


if __name__ == '__main__':
    main()

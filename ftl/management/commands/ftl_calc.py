"""
Compute FDP limits from the command line.

    python manage.py ftl_calc --report 22:00 --arrival 04:00 --sectors 2
"""

from django.core.management.base import BaseCommand, CommandError

from ftl.clock import format_clock, format_duration
from ftl.exceptions import InvalidInput
from ftl.fdp_tables import Acclimatisation
from ftl.ftl_rules import calculate


class Command(BaseCommand):
    help = "Calculate maximum FDP, minimum rest and feasibility for a duty"

    def add_arguments(self, parser):
        parser.add_argument('--report', required=True, help="Report time, local HH:MM")
        parser.add_argument('--arrival', default=None, help="Proposed final on-block time, local HH:MM")
        parser.add_argument('--sectors', type=int, default=2, help="Number of sectors (1-10)")
        parser.add_argument(
            '--not-acclimatised',
            action='store_true',
            help="Crew is in an unknown state of acclimatisation",
        )

    def handle(self, *args, **options):
        state = Acclimatisation.ACCLIMATISED
        if options['not_acclimatised']:
            state = Acclimatisation.NOT_ACCLIMATISED

        try:
            result = calculate(options['report'], options['sectors'], state, options['arrival'])
        except InvalidInput as e:
            raise CommandError(str(e))

        lines = [
            f"Base FDP:          {format_duration(result.base_fdp)}",
            f"Sector reductions: {format_duration(result.sector_reduction)}",
            f"Max FDP:           {format_duration(result.final_fdp)}",
            f"WOCL infringement: {'yes (limited to 11:00)' if result.wocl_infringed else 'no'}",
            f"Latest off-block:  {format_clock(result.latest_permissible_time)}",
            f"Min. rest:         {format_duration(result.minimum_rest)}",
        ]
        if result.extension_eligible:
            lines.append(f"Extended FDP (+1h): {format_duration(result.extended_fdp)}")

        feasibility = result.feasibility
        if feasibility is not None:
            lines.append(f"Planned FDP:       {format_duration(feasibility.planned_fdp)}")
            if feasibility.is_feasible:
                lines.append("Flight is feasible")
            else:
                lines.append(f"Exceeds max FDP by {format_duration(feasibility.difference_minutes)}")

        self.stdout.write("\n".join(lines))

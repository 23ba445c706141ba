"""Find the closest threads for each colour.

Searches the thread library: the bundled Kreinik metallics plus any catalog
files given with --catalog or THREADMATCH_CATALOG. Restrict to brands with
--brand (repeatable). Returns the -n closest threads (default 5) ranked by
the selected algorithm (default ciede2000).

With --fail-on-delta N, a colour whose best match is further than N counts
as a failure and the command exits 1 (CI gating for fixed artwork palettes).

Example:
    threadmatch match '#b87333' --brand kreinik -n 3
    threadmatch match '#2e7d32' --catalog dmc.json --brand dmc --json
"""

from threadmatch.commands._common import match_dict, palette_for
from threadmatch.core.matching import find_closest_colors
from threadmatch.core.types import ColourSample, Command, Report

command = Command(
    name='match',
    help='Find the N closest threads for each colour.',
)


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    palette = palette_for(args)
    textiles = not getattr(args, 'graphic_arts', False)
    threshold = getattr(args, 'fail_on_delta', None)

    for sample in samples:
        matches = find_closest_colors(sample.rgb, palette, args.count, args.algorithm, textiles=textiles)
        report.add(sample.label, 'matches', [match_dict(m, args.algorithm) for m in matches])

        if threshold is not None:
            if matches and matches[0].distance <= threshold:
                report.record_pass(sample.label)
            else:
                report.record_fail(sample.label)

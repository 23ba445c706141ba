"""List thread libraries, or search threads by code or name.

Without --search, prints one line per loaded brand with its colour count.
With --search TEXT, lists threads whose code or name contains TEXT
(case-insensitive), restricted to --brand if given.

Example:
    threadmatch threads
    threadmatch threads --search gold --brand kreinik
"""

from threadmatch.commands._common import build_library, thread_dict
from threadmatch.core.threads import kreinik_type_name
from threadmatch.core.types import ColourSample, Command, Report

command = Command(
    name='threads',
    help='List thread libraries or search threads by code/name.',
)


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    library = build_library(args)
    query = getattr(args, 'search', None)

    if query is None:
        for info in library.libraries():
            report.add(
                info.name,
                'library',
                {'brand': info.brand.value, 'description': info.description, 'colours': info.color_count},
            )
        return

    found = library.search(query, getattr(args, 'brand', None) or None)
    rows = []
    for thread in found:
        row = thread_dict(thread)
        if row['category']:
            row['category'] = kreinik_type_name(row['category'])
        rows.append(row)
    report.add(f'search {query!r}', 'threads', rows)

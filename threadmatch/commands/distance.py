"""Distance from the first colour to each of the others.

Uses the algorithm chosen with -a, or all five when -a is not given:
euclidean, weighted, cie76, cie94 and ciede2000. Delta E results carry a
difference category (imperceptible, very close, close, ...).

--graphic-arts switches CIE94 from the textiles constants to graphic arts.

Example:
    threadmatch distance '#ff0000' '#fe0000' '#00ff00'
    threadmatch distance '#ff0000' '#ee1111' -a cie94 --graphic-arts
"""

from threadmatch.commands._common import category_for
from threadmatch.core.distance import color_distance
from threadmatch.core.types import Algorithm, ColourSample, Command, Report

command = Command(
    name='distance',
    help='Distance between the first colour and each other colour.',
)


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    if len(samples) < 2:
        raise ValueError('distance needs at least two colours')

    explicit = getattr(args, 'algorithm_explicit', False)
    algorithms = [args.algorithm] if explicit else list(Algorithm)
    textiles = not getattr(args, 'graphic_arts', False)

    reference = samples[0]
    for other in samples[1:]:
        results = {}
        for algorithm in algorithms:
            d = color_distance(reference.rgb, other.rgb, algorithm, textiles=textiles)
            results[algorithm.value] = {'value': round(d, 4), 'category': category_for(d, algorithm)}
        report.add(f'{reference.label} → {other.label}', 'distance', results)

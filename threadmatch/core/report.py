"""Report builder — text and JSON output for threadmatch results."""

import json
from typing import Any

from threadmatch.core.types import Report


def _fmt_triple(values: list[float], digits: int = 2) -> str:
    return '(' + ', '.join(f'{v:.{digits}f}' for v in values) + ')'


def _fmt_match(m: dict[str, Any]) -> str:
    name = m.get('name') or ''
    category = m.get('category')
    suffix = f' ({category})' if category else ''
    return f'{m["colorId"]:<16} {m["hex"]}  Δ={m["distance"]:.2f}{suffix}  {name}'.rstrip()


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'threadmatch {report.command}'
    if report.algorithm:
        header += f' — {report.algorithm}'
    lines.append(header)
    lines.append('')

    for label, data in report.sections.items():
        lines.append(f'── {label}')
        for key, value in data.items():
            if key == 'convert':
                lines.append(f'  hex: {value["hex"]}  rgb: {tuple(value["rgb"])}')
                lines.append(f'  xyz: {_fmt_triple(value["xyz"], 4)}')
                lines.append(f'  lab: {_fmt_triple(value["lab"], 4)}')
            elif key == 'distance':
                for algo, result in value.items():
                    category = result.get('category')
                    suffix = f'  ({category})' if category else ''
                    lines.append(f'  {algo:<10} {result["value"]:.4f}{suffix}')
            elif key == 'matches':
                if not value:
                    lines.append('  no match (empty palette)')
                for i, m in enumerate(value, 1):
                    lines.append(f'  {i}. {_fmt_match(m)}')
            elif key == 'reduced':
                thread = value.get('thread')
                line = f'  {value["hex"]}  rgb: {tuple(value["rgb"])}'
                if thread:
                    line += f'  → {_fmt_match(thread)}'
                lines.append(line)
            elif key == 'harmony':
                lines.append(f'  score: {value["score"]:.3f}  ({len(value["colours"])} colours)')
            elif key == 'threads':
                for t in value:
                    category = f'  [{t["category"]}]' if t.get('category') else ''
                    lines.append(f'  {t["brand"]} {t["code"]:<8} {t["hex"]}  {t["name"]}{category}')
            else:
                # Generic fallback
                if isinstance(value, dict):
                    for k, v in value.items():
                        lines.append(f'  {key}.{k}: {v}')
                else:
                    lines.append(f'  {key}: {value}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}
    if report.algorithm:
        obj['algorithm'] = report.algorithm

    obj['results'] = [{'label': label, **data} for label, data in report.sections.items()]

    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {'total': total, 'pass': report.pass_count, 'fail': report.fail_count}
    return json.dumps(obj, indent=2)

from __future__ import annotations

import os
from typing import List

from .models import MissingKeyReport

RULE = "=" * 80
THIN_RULE = "-" * 80


def format_missing_report(
    report: MissingKeyReport,
    *,
    key_limit: int = 50,
    concat_limit: int = 20,
    location_limit: int = 5,
) -> List[str]:
    """Render a missing-key report as console lines.

    Plain keys are listed with their occurrence count; concatenated keys
    also list where they occur, by file name and line.
    """
    lines: List[str] = [
        f"Total unique glue strings found in code: {report.total_keys}",
        f"Already localized: {report.localized_keys}",
        f"Missing localization: {report.missing_count}",
        THIN_RULE,
    ]

    if not report.missing:
        lines.append("All glue strings are already localized!")
        return lines

    plain = report.plain_missing()
    if plain:
        lines.append(f"Non-Concatenated Strings Needing Localization ({len(plain)}):")
        lines.append("(Glue String -> Occurrence Count)")
        lines.append(THIN_RULE)
        for info in plain[:key_limit]:
            line = f'  L["{info.key}"] -> {info.occurrence_count} occurrence(s)'
            if info.format_parameters:
                line += f" [format: {', '.join(info.format_parameters)}]"
            lines.append(line)
        if len(plain) > key_limit:
            lines.append(f"  ... and {len(plain) - key_limit} more")

    concat = report.concatenated_missing()
    if concat:
        if plain:
            lines.append("")
        lines.append(f"Concatenated Strings Needing Localization ({len(concat)}):")
        lines.append("(Glue String -> Locations)")
        lines.append(THIN_RULE)
        for info in concat[:concat_limit]:
            lines.append(f'  L["{info.key}"] ({info.occurrence_count} occurrence(s)):')
            for loc in info.locations[:location_limit]:
                lines.append(f"    - {os.path.basename(loc.file_path)}:{loc.line_number}")
            if len(info.locations) > location_limit:
                lines.append(f"    ... and {len(info.locations) - location_limit} more locations")
        if len(concat) > concat_limit:
            lines.append(f"  ... and {len(concat) - concat_limit} more concatenated strings")

    return lines

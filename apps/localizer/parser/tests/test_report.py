from apps.localizer.parser.models import KeyLocation, MissingKeyInfo, MissingKeyReport
from apps.localizer.parser.report import format_missing_report


def _info(key: str, count: int, concat: bool = False) -> MissingKeyInfo:
    return MissingKeyInfo(
        key=key,
        occurrence_count=count,
        locations=tuple(KeyLocation(file_path=f"/addon/Core/file{i}.lua", line_number=i + 1) for i in range(count)),
        has_concatenation=concat,
    )


def test_all_localized():
    report = MissingKeyReport(total_keys=4, defined_keys=6, localized_keys=4, missing={})
    lines = format_missing_report(report)
    assert "Missing localization: 0" in lines
    assert lines[-1] == "All glue strings are already localized!"


def test_plain_and_concatenated_sections():
    missing = {i.key: i for i in [_info("Zeta", 2), _info("Alpha", 1), _info("Joined", 7, concat=True)]}
    report = MissingKeyReport(total_keys=5, defined_keys=2, localized_keys=2, missing=missing)

    lines = format_missing_report(report, location_limit=5)

    assert "Non-Concatenated Strings Needing Localization (2):" in lines
    plain = [l for l in lines if "occurrence(s)" in l and "->" in l]
    assert plain == ['  L["Alpha"] -> 1 occurrence(s)', '  L["Zeta"] -> 2 occurrence(s)']

    assert "Concatenated Strings Needing Localization (1):" in lines
    assert '  L["Joined"] (7 occurrence(s)):' in lines
    assert "    - file0.lua:1" in lines
    assert "    - file5.lua:6" not in lines
    assert "    ... and 2 more locations" in lines


def test_plain_list_is_truncated():
    missing = {f"K{i:02d}": _info(f"K{i:02d}", 1) for i in range(5)}
    report = MissingKeyReport(total_keys=5, defined_keys=0, localized_keys=0, missing=missing)

    lines = format_missing_report(report, key_limit=3)

    assert '  L["K02"] -> 1 occurrence(s)' in lines
    assert '  L["K03"] -> 1 occurrence(s)' not in lines
    assert lines[-1] == "  ... and 2 more"


def test_plain_key_lists_its_format_specifiers():
    info = MissingKeyInfo(key="Deals %d damage over %.1f sec", occurrence_count=1, format_parameters=("%d", "%.1f"))
    report = MissingKeyReport(total_keys=1, defined_keys=0, localized_keys=0, missing={info.key: info})

    lines = format_missing_report(report)

    assert '  L["Deals %d damage over %.1f sec"] -> 1 occurrence(s) [format: %d, %.1f]' in lines

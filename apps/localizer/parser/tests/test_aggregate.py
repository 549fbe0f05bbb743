from apps.localizer.parser.aggregate import merge, merge_definitions
from apps.localizer.parser.models import DefinedKeySet, ParseResult
from apps.localizer.parser.scanner import scan_usages


def test_merge_keeps_every_entry_in_order():
    first = scan_usages("file1.lua", ['L["Msg1"] .. L["Msg2"]'])
    second = scan_usages("file2.lua", ['L["Msg2"]', 'L["Msg3"]'])

    merged = merge([first, second])

    assert merged.unique_keys == {"Msg1", "Msg2", "Msg3"}
    assert [(e.file_path, e.key) for e in merged.all_entries] == [
        ("file1.lua", "Msg1"),
        ("file1.lua", "Msg2"),
        ("file2.lua", "Msg2"),
        ("file2.lua", "Msg3"),
    ]
    assert [e.key for e in merged.concatenated_entries] == ["Msg1", "Msg2"]


def test_merge_key_set_is_order_independent():
    a = scan_usages("a.lua", ['L["A"]', 'L["B"]'])
    b = scan_usages("b.lua", ['L["B"]', 'L["C"]'])
    assert merge([a, b]).unique_keys == merge([b, a]).unique_keys


def test_merge_of_nothing_is_empty():
    assert merge([]) == ParseResult()


def test_merge_definitions_unions_ignoring_case():
    merged = merge_definitions([DefinedKeySet(["Alpha", "Beta"]), DefinedKeySet(["beta", "Gamma"])])
    assert len(merged) == 3
    assert list(merged) == ["Alpha", "Beta", "Gamma"]
    assert "BETA" in merged

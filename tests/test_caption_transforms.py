import os
import sys

sys.path.insert(0, os.getcwd())

from caption import Caption
from caption_transforms import (
    capitalize_first_letters,
    decapitalize,
    multiple_replace,
    remove_duplicate_words,
    remove_empty_captions,
    remove_multiple_spaces,
    replace_in_content,
    search_and_replace,
    trim_trailing_spaces,
)


def make(*contents):
    return [Caption(i, f"00:00:0{i},000 --> 00:00:0{i + 1},000", c) for i, c in enumerate(contents, 1)]


def contents(captions):
    return [c.content for c in captions]


def test_remove_empty_captions_keeps_numbers(capsys):
    caps = make("hello", "[no speech detected]", "", "world")
    kept = remove_empty_captions(caps)
    assert [c.number for c in kept] == [1, 4]
    assert contents(kept) == ["hello", "world"]
    # Input list is left alone
    assert len(caps) == 4
    assert capsys.readouterr().out == "Removing empty captions... 2 captions removed\n"


def test_case_insensitive_replace_counts_each_occurrence(capsys):
    caps = make("Use Zoom and zoom in.")
    assert search_and_replace(caps, "zoom", "Zoom") == 2
    assert contents(caps) == ["Use Zoom and Zoom in."]
    assert capsys.readouterr().out == 'Replacing "zoom" with "Zoom"... 2 replacements performed\n'


def test_replace_is_literal():
    assert replace_in_content("abc a.c", "a.c", "X") == ("abc X", 1)
    assert replace_in_content("cost $5 (approx)", "$5 (approx)", "five") == ("cost five", 1)
    assert replace_in_content("nothing here", "", "x") == ("nothing here", 0)


def test_replace_catches_matches_created_by_replacement():
    caps = make("and and and and so")
    assert search_and_replace(caps, "and and", "and", verbose=False) == 3
    assert contents(caps) == ["and so"]


def test_cleanup_after_deletion():
    caps = make("so actually.", "ok, basically?", "I mean, yes.")
    multiple_replace(caps, [("actually", ""), ("basically", ""), ("i mean", "")], verbose=False)
    # Only a space/comma directly before "." or "?" is removed
    assert contents(caps) == ["so.", "ok?", ", yes."]


def test_multiple_replace_prints_only_the_total(capsys):
    caps = make("then then we go", "peer to peer and client server")
    table = [("then then", "then"), ("peer to peer", "peer-to-peer"), ("client server", "client-server")]
    assert multiple_replace(caps, table) == 3
    assert contents(caps) == ["then we go", "peer-to-peer and client-server"]
    out = capsys.readouterr().out
    assert out == "Performing multiple content replacements... 3 total replacements performed\n"


def test_remove_duplicate_words():
    caps = make(
        "the the end",
        "Do we need this this?",
        "Very very very good",
        "that that had had",
        "go go",
        "word. word",
    )
    assert remove_duplicate_words(caps, verbose=False) == 4
    assert contents(caps) == [
        "the end",
        "Do we need this?",
        "very good",
        "that that had had",
        "go go",
        "word. word",
    ]


def test_remove_duplicate_words_strips_trailing_newline():
    caps = make("okay okay\n")
    assert remove_duplicate_words(caps, verbose=False) == 1
    assert contents(caps) == ["okay"]


def test_remove_multiple_spaces_counts_excess(capsys):
    caps = make("a   b  c", "single spaces only")
    assert remove_multiple_spaces(caps) == 3
    assert contents(caps) == ["a b c", "single spaces only"]
    assert "Removing multiple spaces... 3 extra spaces removed" in capsys.readouterr().out
    # Idempotent
    assert remove_multiple_spaces(caps, verbose=False) == 0
    assert all("  " not in c for c in contents(caps))


def test_trim_trailing_spaces():
    caps = make(" a ", "\tb\n", "c")
    assert trim_trailing_spaces(caps, verbose=False) == 2
    assert contents(caps) == ["a", "b", "c"]
    assert trim_trailing_spaces(caps, verbose=False) == 0


def test_decapitalize_keeps_acronyms_and_i():
    caps = make("Hello NASA I think I'll Go", "TCP-IP Zoom")
    assert decapitalize(caps, verbose=False) == 5
    assert contents(caps) == ["hello NASA I think I'll go", "tcp-ip zoom"]
    before = contents(caps)
    decapitalize(caps, verbose=False)
    assert contents(caps) == before


def test_decapitalize_leaves_only_allowed_uppercase():
    caps = make("ThE BBC Said I'LL Be There I")
    decapitalize(caps, verbose=False)
    for word in caps[0].to_words():
        assert (
            Caption.is_all_caps(word)
            or word in ("I", "I'll")
            or not any(ch.isupper() for ch in word)
        )


def test_capitalize_across_captions():
    caps = make("hello world.", "this is next.")
    assert capitalize_first_letters(caps, verbose=False) == 2
    assert contents(caps) == ["Hello world.", "This is next."]


def test_capitalize_inside_caption_and_after_question():
    caps = make("one. two. three", "still going", "is it? yes", "and so on")
    assert capitalize_first_letters(caps, verbose=False) == 3
    assert contents(caps) == ["One. Two. Three", "still going", "is it? yes", "and so on"]

    caps = make("really?", "sure.", "")
    capitalize_first_letters(caps, verbose=False)
    assert contents(caps) == ["Really?", "Sure.", ""]


def test_capitalize_tolerates_empty_first_caption(capsys):
    caps = make("", "abc")
    assert capitalize_first_letters(caps) == 0
    assert contents(caps) == ["", "abc"]
    assert capsys.readouterr().out == "Auto-capitalizing sentences... 0 capitalizations performed\n"

import math

import pytest

from puzzlesolvers.strings import (
    acm_team,
    append_and_delete,
    bigger_is_greater,
    commands,
    counting_valleys,
    designer_pdf_viewer,
    encryption,
    repeated_string,
)


@pytest.mark.parametrize(
    "s, t, k, expected",
    [
        ("hackerhappy", "hackerrank", 9, "Yes"),
        ("aba", "aba", 7, "Yes"),
        ("ashley", "ash", 2, "No"),
        ("abc", "abd", 3, "No"),
        ("abc", "abd", 2, "Yes"),
    ],
)
def test_append_and_delete(s, t, k, expected):
    assert append_and_delete(s, t, k) == expected


def test_append_and_delete_enough_moves_always_work():
    s, t = "abcdef", "xyz"
    assert append_and_delete(s, t, len(s) + len(t)) == "Yes"
    assert append_and_delete(s, t, len(s) + len(t) + 1) == "Yes"


def test_bigger_is_greater_example():
    assert bigger_is_greater("hefg") == "hegf"


@pytest.mark.parametrize("word", ["bb", "dcba", "a", ""])
def test_bigger_is_greater_without_answer(word):
    assert bigger_is_greater(word) == "no answer"


def test_bigger_is_greater_walks_permutations_in_order():
    seen = ["abcd"]
    while (following := bigger_is_greater(seen[-1])) != "no answer":
        seen.append(following)
    assert len(seen) == math.factorial(4)
    assert seen == sorted(seen)
    assert seen[-1] == "dcba"


def test_encryption_example():
    assert encryption("haveaniceday") == "hae and via ecy "


def _decode(encoded: str) -> str:
    columns = encoded.split(" ")[:-1]
    depth = max((len(col) for col in columns), default=0)
    return "".join(col[r] for r in range(depth) for col in columns if r < len(col))


@pytest.mark.parametrize(
    "text", ["feedthedog", "chillout", "if man was meant to stay on the ground", "a"]
)
def test_encryption_round_trip(text):
    encoded = encryption(text)
    assert encoded.endswith(" ")
    assert _decode(encoded) == text.replace(" ", "")


def test_encryption_column_count_is_ceiling_of_root():
    text = "chillout"
    assert len(encryption(text).split(" ")[:-1]) == math.ceil(math.sqrt(len(text)))


def test_encryption_empty():
    assert encryption("") == ""


def test_designer_pdf_viewer_uniform_heights():
    heights = [1] * 26
    word = "hello"
    assert designer_pdf_viewer(heights, word) == len(word)


def test_designer_pdf_viewer_uses_tallest_letter():
    heights = list(range(1, 27))
    assert designer_pdf_viewer(heights, "za") == designer_pdf_viewer(heights, "zz")
    assert designer_pdf_viewer(heights, "z") == heights[-1]


def test_designer_pdf_viewer_rejects_unknown_character():
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 26, "A")


@pytest.mark.parametrize("s, n", [("aba", 10), ("abcac", 7), ("ba", 1), ("a", 5)])
def test_repeated_string_matches_explicit_repetition(s, n):
    repeated = (s * (n // len(s) + 1))[:n]
    assert repeated_string(s, n) == repeated.count("a")


def test_repeated_string_all_a_and_no_a():
    assert repeated_string("a", 1000000000000) == 1000000000000
    assert repeated_string("bcd", 1000000000000) == 0


def test_repeated_string_empty():
    with pytest.raises(ValueError):
        repeated_string("", 3)


def test_counting_valleys_example():
    assert counting_valleys("UDDDUDUU") == 1


@pytest.mark.parametrize("count", [0, 1, 4])
def test_counting_valleys_dips_and_hills(count):
    assert counting_valleys("DU" * count) == count
    assert counting_valleys("UD" * count) == 0


def test_acm_team_example():
    assert acm_team(["10101", "11100", "11010", "00101"]) == [5, 2]


def test_acm_team_everyone_knows_everything():
    topics = ["111"] * 4
    assert acm_team(topics) == [3, math.comb(4, 2)]


def test_acm_team_single_person_has_no_team():
    assert acm_team(["1111"]) == acm_team([])


def test_commands_match_functions():
    table = commands()
    assert table["append-and-delete"]("hackerhappy\nhackerrank\n9\n") == "Yes\n"
    assert table["bigger-is-greater"]("2\nhefg\nbb\n") == (
        f"{bigger_is_greater('hefg')}\nno answer\n"
    )
    assert table["encryption"]("chillout\n") == f"{encryption('chillout')}\n"
    assert table["repeated-string"]("aba\n10\n") == f"{repeated_string('aba', 10)}\n"
    assert table["counting-valleys"]("8\nUDDDUDUU\n") == (
        f"{counting_valleys('UDDDUDUU')}\n"
    )


def test_designer_pdf_viewer_command():
    heights = " ".join(["1"] * 26)
    output = commands()["designer-pdf-viewer"](f"{heights}\nabc\n")
    assert output == f"{designer_pdf_viewer([1] * 26, 'abc')}\n"


def test_acm_team_command():
    text = "4 5\n10101\n11100\n11010\n00101\n"
    best, teams = acm_team(["10101", "11100", "11010", "00101"])
    assert commands()["acm-icpc-team"](text) == f"{best}\n{teams}\n"


def test_counting_valleys_command_requires_step_count():
    with pytest.raises(ValueError):
        commands()["counting-valleys"]("x\nUD\n")
import pytest

from sigtalk.libtext import atoi, itoa, split, strjoin, strnstr, strtrim, substr


@pytest.mark.parametrize("number", [0, 7, -7, 42, -2147483647, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_matches_digits_of_input():
    assert itoa(-2147483647) == "-2147483647"


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("  +42") == 42


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == 123


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_into_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


def test_split_source_example():
    assert split("Hello/World/this/is/a/test", "/") == [
        "Hello", "World", "this", "is", "a", "test",
    ]


def test_split_drops_empty_pieces():
    assert split("//a//b//", "/") == ["a", "b"]
    assert split("////", "/") == []
    assert split("", "/") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_split_empty_separator_keeps_whole_text():
    assert split("a b", "") == ["a b"]
    assert split("", "") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxy", "xy") == "hello"


def test_strtrim_keeps_inner_characters():
    assert strtrim("ab-cd", "-") == "ab-cd"


def test_strtrim_everything_removed():
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_set_is_identity():
    assert strtrim("  spaced  ", "") == "  spaced  "


def test_substr_source_example():
    text = "i just want this part #############"
    result = substr(text, 5, 20)
    assert len(result) == 20
    assert text.startswith(result, 5)


def test_substr_start_past_end():
    assert substr("abc", 10, 5) == ""


def test_substr_length_capped_at_end():
    assert substr("abcdef", 4, 100) == "ef"


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strnstr_source_example():
    big = "Hello World!"
    index = strnstr(big, "World", len(big))
    assert big[index:].startswith("World")
    assert index == big.index("World")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_match_must_end_within_limit():
    big = "Hello World!"
    assert strnstr(big, "World", big.index("World") + len("World") - 1) is None
    assert strnstr(big, "World", big.index("World") + len("World")) == big.index("World")


def test_strnstr_not_found():
    assert strnstr("abc", "zz", 100) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strjoin_concatenates():
    first, second = "Hello", "World!"
    joined = strjoin(first, second)
    assert joined.startswith(first)
    assert joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strjoin_with_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"
import pytest

from katas import kyu8


def test_abbrev_name():
    assert kyu8.abbrev_name("Sam Harris") == "S.H"
    assert kyu8.abbrev_name("patrick feeney") == "P.F"


def test_abbrev_name_needs_two_words():
    with pytest.raises(ValueError):
        kyu8.abbrev_name("Sam")


def test_slice_plus_slice():
    assert kyu8.slice_plus_slice([1, 2, 3], [4, 5]) == 15
    assert kyu8.slice_plus_slice([], []) == 0


def test_bin_to_decimal():
    assert kyu8.bin_to_decimal("101") == 5
    assert kyu8.bin_to_decimal("-1") == -1


@pytest.mark.parametrize("text", ["2", "", "0b1", "1" * 32])
def test_bin_to_decimal_errors(text):
    with pytest.raises(ValueError):
        kyu8.bin_to_decimal(text)


def test_bonus_time():
    assert kyu8.bonus_time(10000, True) == "¥100000"
    assert kyu8.bonus_time(25000, False) == "¥25000"
    assert kyu8.bonus_time2(10000, True) == "¥100000"
    assert kyu8.bonus_time2(25000, False) == "¥25000"


def test_contamination():
    assert kyu8.contamination("abc", "z") == "zzz"
    assert kyu8.contamination("", "z") == ""


def test_convert_to_i32():
    assert kyu8.convert_to_i32(1.0) == 1065353216
    assert kyu8.convert_to_i32(-2.0) == -1073741824
    assert kyu8.convert_to_i32(0.0) == 0


@pytest.mark.parametrize(
    "body, tail, expected",
    [("Fox", "x", True), ("Rhino", "o", True), ("Meerkat", "t", True), ("Emu", "m", False)],
)
def test_correct_tail(body, tail, expected):
    assert kyu8.correct_tail(body, tail) is expected
    assert kyu8.correct_tail_simplify(body, tail) is expected


def test_correct_tail_empty():
    with pytest.raises(ValueError):
        kyu8.correct_tail("", "x")


def test_phone_number_layout():
    digits = [1, 2, 3, 4, 5, 6, 7, 8, 9, 0]
    result = kyu8.create_phone_number1(digits)
    assert result[0] == "(" and result[4:6] == ") " and result[9] == "-"
    assert "".join(c for c in result if c.isdigit()) == "".join(map(str, digits))
    assert kyu8.create_phone_number2(digits) == result


def test_phone_number_too_short():
    with pytest.raises(ValueError):
        kyu8.create_phone_number1([1, 2])
    with pytest.raises(ValueError):
        kyu8.create_phone_number2([1, 2])


@pytest.mark.parametrize("n, expected", [(16, 7), (942, 6), (132189, 6), (5, 5)])
def test_digital_root(n, expected):
    assert kyu8.digital_root(n) == expected
    assert kyu8.digital_root_pp(n) == expected


def test_digital_root_variants_agree():
    assert all(kyu8.digital_root(n) == kyu8.digital_root_pp(n) for n in range(1, 500))


def test_digital_root_pp_zero_uses_truncating_remainder():
    assert kyu8.digital_root_pp(0) == 0


def test_disemvowel():
    assert kyu8.disemvowel("This website is for losers LOL!") == "Ths wbst s fr lsrs LL!"


def test_double_char():
    assert kyu8.double_char2("hello") == "hheelllloo"
    assert kyu8.double_char("hello") == "hheelllloo"


def test_fake_bin():
    assert kyu8.fake_bin1("45385593107843568") == "01011110001100111"
    assert kyu8.fake_bin2("45385593107843568") == "01011110001100111"


def test_find_average():
    assert kyu8.find_average1([]) == 0.0
    assert kyu8.find_average2([]) == 0.0
    assert kyu8.find_average1([1.0, 2.0, 3.0]) == 2.0
    assert kyu8.find_average2([1.0, 2.0, 3.0]) == 2.0


def test_find_difference():
    assert kyu8.find_difference([1, 2, 3], [4, 5, 6]) == abs(6 - 120)


def test_find_difference_wrong_shape():
    with pytest.raises(ValueError):
        kyu8.find_difference([1, 2], [4, 5, 6])


def test_find_multiples():
    assert kyu8.find_multiples(5, 25) == [5, 10, 15, 20, 25]
    assert kyu8.find_multiples(1, 2) == [1, 2]


def test_first_non_consecutive():
    assert kyu8.first_non_consecutive([1, 2, 3, 4, 6, 7, 8]) == 6
    assert kyu8.first_non_consecutive([1, 2, 3]) is None
    with pytest.raises(ValueError):
        kyu8.first_non_consecutive([])


def test_flick_switch():
    items = ["codewars", "flick", "code", "wars"]
    assert kyu8.flick_switch(items) == [True, False, False, False]
    assert kyu8.flick_switch2(items) == [True, False, False, False]


def test_html_special_chars():
    assert kyu8.html_special_chars("<h2>Hello World</h2>") == "&lt;h2&gt;Hello World&lt;/h2&gt;"
    assert kyu8.html_special_chars('"&"') == "&quot;&amp;&quot;"


def test_merge_arrays():
    expected = list(range(1, 11))
    assert kyu8.merge_arrays1([1, 3, 5, 7, 9], [10, 8, 6, 4, 2]) == expected
    assert kyu8.merge_arrays2([1, 3, 5, 7, 9], [10, 8, 6, 4, 2]) == expected
    assert kyu8.merge_arrays1([1, 1], [1]) == [1]
    assert kyu8.merge_arrays2([1, 1], [1]) == [1]


@pytest.mark.parametrize("n, expected", [(1, 1), (2, 1), (10, 9), (111, 121), (9999, 10000)])
def test_nearest_sq(n, expected):
    assert kyu8.nearest_sq1(n) == expected
    assert kyu8.nearest_sq2(n) == expected


def test_nearest_sq_limits():
    assert kyu8.nearest_sq1(2**32 - 1) == 2**32 - 1
    with pytest.raises(OverflowError):
        kyu8.nearest_sq2(2**32 - 1)


@pytest.mark.parametrize(
    "x, expected", [(121, True), (1221, True), (123, False), (-121, False), (0, True), (10, False)]
)
def test_is_palindrome(x, expected):
    assert kyu8.is_palindrome(x) is expected


def test_rps2():
    assert kyu8.rps2("rock", "scissors") == "Player 1 won!"
    assert kyu8.rps2("scissors", "rock") == "Player 2 won!"
    assert kyu8.rps2("paper", "paper") == "Draw!"


def test_sum_mix():
    assert kyu8.sum_mix([9, 3, "7", "3"]) == 22
    with pytest.raises(ValueError):
        kyu8.sum_mix([1, "x"])


@pytest.mark.parametrize("arr, expected", [([3, 2, 1], 2), ([2, 1, 10], 9), ([-3, -2, -1], 2), ([1], None)])
def test_sum_of_differences(arr, expected):
    assert kyu8.sum_of_differences1(arr) == expected
    assert kyu8.sum_of_differences2(arr) == expected


def test_sum_of_differences_overflow():
    with pytest.raises(OverflowError):
        kyu8.sum_of_differences1([-100, 100])
    with pytest.raises(OverflowError):
        kyu8.sum_of_differences2([-100, 100])


def test_mt2():
    lines = kyu8.mt2(5).split("\n")
    assert len(lines) == 10
    assert lines[0] == "1 * 5 = 5"
    assert lines[-1] == "10 * 5 = 50"


def test_points():
    games = ["1:0", "2:0", "3:0", "4:0", "2:1", "3:1", "4:1", "3:2", "4:2", "4:3"]
    assert kyu8.points(games) == 30
    assert kyu8.points(["1:1", "0:1"]) == 1
    with pytest.raises(ValueError):
        kyu8.points(["11"])


def test_two_sort():
    words = ["bitcoin", "take", "over", "the", "world", "maybe", "who", "knows", "perhaps"]
    assert kyu8.two_sort(words) == "b***i***t***c***o***i***n"
    with pytest.raises(ValueError):
        kyu8.two_sort([])


def test_get_average():
    assert kyu8.get_average([2, 2, 2, 2]) == 2
    assert kyu8.get_average([1, 2, 3, 4, 5, 6, 7, 8, 9]) == 5
    with pytest.raises(ZeroDivisionError):
        kyu8.get_average([])


@pytest.mark.parametrize(
    "ids, expected",
    [
        ([0, 1, 2, 4, 5], 3),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 11),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 11], 10),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 9, 11], 10),
        ([], 0),
        ([10], 0),
    ],
)
def test_next_id(ids, expected):
    assert kyu8.next_id(ids) == expected


def test_square_sum_and_maps():
    assert kyu8.square_sum([1, 2, 2]) == 9
    assert kyu8.maps([1, 2, 3]) == [2, 4, 6]
import pytest

from philosophers.parsing import (
    Config,
    ConfigError,
    check_no_letters,
    check_signs,
    parse_config,
    parse_long,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t+7", 7),
        ("-5", -5),
        ("12abc", 12),
        ("", 0),
        ("-", 0),
        ("+", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("2147483648", -1),
        ("-2147483649", -1),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_long_roundtrip():
    for value in (0, 1, 99, 200, 123456, -17):
        assert parse_long(str(value)) == value


def test_check_no_letters_reports_position():
    with pytest.raises(ConfigError, match="Argument 3 has invalid input"):
        check_no_letters(["5", "800", "2x0", "200"])


def test_check_no_letters_accepts_digits():
    check_no_letters(["5", "800", "200", "200"])
    with pytest.raises(ConfigError):
        check_no_letters(["Z"])


def test_check_signs_rejects_inner_sign():
    with pytest.raises(ConfigError, match="Argument 2 has invalid input"):
        check_signs(["5", "80+0", "200", "200"])


def test_check_signs_rejects_double_sign():
    with pytest.raises(ConfigError, match="Argument 1 has invalid input"):
        check_signs(["--5"])


def test_parse_config_basic():
    config = parse_config(["5", "800", "200", "200"])
    assert config.philosophers == 5
    assert config.time_to_die == parse_long("800") * 1000
    assert config.time_to_eat == config.time_to_sleep
    assert config.max_meals is None


def test_parse_config_with_meals():
    config = parse_config(["4", "410", "200", "100", "7"])
    assert config == Config(4, 410 * 1000, 200 * 1000, 100 * 1000, 7)


def test_parse_config_zero_meals_allowed():
    assert parse_config(["2", "400", "100", "100", "0"]).max_meals == 0


def test_parse_config_max_philosophers():
    assert parse_config(["200", "400", "100", "100"]).philosophers == 200
    with pytest.raises(ConfigError, match="less than 200"):
        parse_config(["201", "400", "100", "100"])


@pytest.mark.parametrize(
    "args",
    [
        ["0", "400", "100", "100"],
        ["-3", "400", "100", "100"],
        ["3", "0", "100", "100"],
        ["3", "400", "0", "100"],
        ["3", "400", "100", "0"],
        ["3", "400", "100", "100", "-1"],
        ["3", "400", "100", "100", "2147483648"],
        ["3", "3000000", "100", "100"],
    ],
)
def test_parse_config_rejects_non_positive(args):
    with pytest.raises(ConfigError, match="positive numbers"):
        parse_config(args)


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_config_wrong_count(args):
    with pytest.raises(ConfigError, match="Wrong number of arguments"):
        parse_config(args)


def test_parse_config_letter_error_comes_first():
    with pytest.raises(ConfigError, match="Argument 4 has invalid input"):
        parse_config(["0", "400", "100", "abc"])
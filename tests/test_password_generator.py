from __future__ import annotations

import random
import string

import pytest

from passgen import Alphabet, PasswordConfig, PasswordGenerator
from passgen.core.password_generator import DIGITS, SPECIALS

LATIN = Alphabet.LATIN
CYRILLIC = Alphabet.CYRILLIC

CONFIGS = [
    PasswordConfig.of(32, {LATIN}, True, True, True, True, '135'),
    PasswordConfig.of(40, {LATIN}, True, True, True, False, '13579'),
    PasswordConfig.of(12, {LATIN, CYRILLIC}, True, False, False, True, ''),
    PasswordConfig.of(10, {CYRILLIC}, False, True, True, False, '00'),
    PasswordConfig.of(8, set(), False, False, True, True, ''),
    PasswordConfig.of(1, set(), False, False, False, True, ''),
    PasswordConfig.of(6, {LATIN, CYRILLIC}, True, True, False, False, ''),
]


def allowed_chars(config: PasswordConfig) -> set[str]:
    allowed = set()
    for alphabet in config.alphabets:
        if config.lower:
            allowed.update(alphabet.lower)
        if config.upper:
            allowed.update(alphabet.upper)
    if config.digits:
        allowed.update(DIGITS)
    if config.special:
        allowed.update(SPECIALS)
    return allowed


def test_special_charset():
    assert SPECIALS == '!@#$%^&*()-_=+[]{};:,.?/\\|'
    assert len(SPECIALS) == 26


def test_default_source_is_system_random():
    assert isinstance(PasswordGenerator().rng, random.SystemRandom)


@pytest.mark.parametrize('config', CONFIGS)
def test_generated_password_honours_policy(generator, config):
    allowed = allowed_chars(config)
    letters_lower = ''.join(a.lower for a in config.alphabets)
    letters_upper = ''.join(a.upper for a in config.alphabets)

    for _ in range(50):
        password = generator.generate(config)

        assert len(password) == config.length
        assert set(password) <= allowed
        for digit in config.required_digits:
            assert digit in password
        if config.digits:
            assert any(ch in DIGITS for ch in password)
        if config.special:
            assert any(ch in SPECIALS for ch in password)
        if config.lower and config.alphabets:
            assert any(ch in letters_lower for ch in password)
        if config.upper and config.alphabets:
            assert any(ch in letters_upper for ch in password)
        for alphabet in config.alphabets:
            local = ''
            if config.lower:
                local += alphabet.lower
            if config.upper:
                local += alphabet.upper
            if local:
                assert any(ch in local for ch in password)


def test_mixed_latin_scenario(generator):
    config = PasswordConfig.of(32, {LATIN}, True, True, True, True, '135')

    password = generator.generate(config)

    assert len(password) == 32
    assert {'1', '3', '5'} <= set(password)
    assert any(ch in string.ascii_uppercase for ch in password)
    assert any(ch in string.ascii_lowercase for ch in password)
    assert any(ch in SPECIALS for ch in password)


def test_required_odd_digits_scenario(generator):
    config = PasswordConfig.of(40, {LATIN}, True, True, True, False, '13579')

    password = generator.generate(config)

    assert {'1', '3', '5', '7', '9'} <= set(password)
    assert not any(ch in SPECIALS for ch in password)


def test_too_many_mandatory_characters_fails(generator):
    config = PasswordConfig.of(3, set(), False, False, True, False, '123456')

    with pytest.raises(ValueError, match='Too many mandatory constraints'):
        generator.generate(config)


def test_mandatory_count_equal_to_length_succeeds(generator):
    # required digits + special + lower + one latin letter
    config = PasswordConfig.of(5, {LATIN}, False, True, True, True, '42')

    password = generator.generate(config)

    assert len(password) == 5
    assert {'4', '2'} <= set(password)


def test_generate_revalidates_config(generator):
    config = PasswordConfig(
        length=10,
        alphabets=frozenset({LATIN}),
        upper=True,
        lower=True,
        digits=False,
        special=False,
        required_digits='12',
    )

    with pytest.raises(ValueError, match='digits are disabled'):
        generator.generate(config)


def test_passwords_differ_between_calls(generator):
    config = PasswordConfig.of(24, {LATIN}, True, True, True, True, '')

    passwords = {generator.generate(config) for _ in range(20)}

    assert len(passwords) == 20


def test_digits_only_with_scripted_source(scripted):
    gen, rng = scripted(7, 1, 2, 0, 0)
    config = PasswordConfig.of(3, set(), False, False, True, False, '')

    assert gen.generate(config) == '127'
    assert rng.calls == [10, 10, 10, 3, 2]


def test_required_digit_replaces_random_digit(scripted):
    # special, lower, latin letter, one fill, then an identity shuffle
    gen, rng = scripted(0, 1, 2, 0, 4, 3, 2, 1)
    config = PasswordConfig.of(5, {LATIN}, False, True, True, True, '9')

    assert gen.generate(config) == '9!bca'
    assert rng.calls == [26, 26, 26, 62, 5, 4, 3, 2]


def test_case_and_alphabet_picks_with_scripted_source(scripted):
    gen, rng = scripted(26, 0, 51, 0, 59, 117, 5, 4, 3, 2, 1)
    config = PasswordConfig.of(6, {CYRILLIC, LATIN}, True, True, False, False, '')

    assert gen.generate(config) == 'аAZаAЯ'
    assert rng.calls == [59, 59, 52, 66, 118, 118, 6, 5, 4, 3, 2]


def test_single_alphabet_adds_two_mandatory_letters(scripted):
    # lower pick + latin pick leave no room for a third mandatory letter
    gen, rng = scripted(0, 1, 0)
    config = PasswordConfig.of(2, {LATIN}, False, True, False, False, '')

    assert gen.generate(config) == 'ba'
    assert rng.calls == [26, 26, 2]

    with pytest.raises(ValueError, match='Too many mandatory constraints'):
        PasswordGenerator().generate(
            PasswordConfig.of(1, {LATIN}, False, True, False, False, ''),
        )


def test_shuffle_moves_mandatory_characters(scripted):
    gen, _ = scripted(3, 0, 0, 0, 0, 0, 0)
    config = PasswordConfig.of(4, set(), False, False, True, False, '')

    # mandatory '3', fills '0' '0' '0', then swaps pull the '3' to the end
    assert gen.generate(config) == '0003'

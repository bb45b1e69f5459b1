import pytest
from hypothesis import given, strategies as st

from nicephrase.config import Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.words == 8
        assert settings.separator == " "
        assert settings.ignore_case is True

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        settings = Settings(words=12, separator="-", ignore_case=False)
        assert settings.words == 12
        assert settings.separator == "-"
        assert settings.ignore_case is False

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError, match="separator"):
            Settings(separator="")

    @pytest.mark.parametrize("separator", ["e", "and", " x ", "\u00e9"])
    def test_separator_with_letters_rejected(self, separator):
        """Letters would split words apart when decoding."""
        with pytest.raises(ValueError, match="separator must not contain letters"):
            Settings(separator=separator)

    @pytest.mark.parametrize("separator", ["-", ".", " ", ", ", "_"])
    def test_punctuation_separators_accepted(self, separator):
        assert Settings(separator=separator).separator == separator


class TestConfigValidation:
    @given(words=st.integers(min_value=0, max_value=512))
    def test_word_counts_in_range_are_valid(self, words):
        assert Settings(words=words).words == words

    @given(words=st.one_of(st.integers(max_value=-1), st.integers(min_value=513)))
    def test_word_counts_out_of_range_are_rejected(self, words):
        with pytest.raises(ValueError, match="words must be between 0 and 512"):
            Settings(words=words)


class TestFromEnv:
    def test_defaults_without_env(self, clean_env):
        assert Settings.from_env() == Settings()

    def test_reads_env(self, clean_env):
        clean_env.setenv("NICEPHRASE_WORDS", "4")
        clean_env.setenv("NICEPHRASE_SEPARATOR", "-")
        clean_env.setenv("NICEPHRASE_IGNORE_CASE", "no")

        settings = Settings.from_env()
        assert settings == Settings(words=4, separator="-", ignore_case=False)

    @pytest.mark.parametrize("value, expected", [
        ("1", True), ("TRUE", True), (" yes ", True), ("on", True),
        ("0", False), ("false", False), ("Off", False),
    ])
    def test_ignore_case_values(self, clean_env, value, expected):
        clean_env.setenv("NICEPHRASE_IGNORE_CASE", value)
        assert Settings.from_env().ignore_case is expected

    def test_invalid_words(self, clean_env):
        clean_env.setenv("NICEPHRASE_WORDS", "eight")
        with pytest.raises(ValueError, match="NICEPHRASE_WORDS must be an integer"):
            Settings.from_env()

    def test_out_of_range_words(self, clean_env):
        clean_env.setenv("NICEPHRASE_WORDS", "1000")
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_invalid_ignore_case(self, clean_env):
        clean_env.setenv("NICEPHRASE_IGNORE_CASE", "maybe")
        with pytest.raises(ValueError, match="NICEPHRASE_IGNORE_CASE must be a boolean"):
            Settings.from_env()

    def test_letter_separator_from_env(self, clean_env):
        clean_env.setenv("NICEPHRASE_SEPARATOR", "e")
        with pytest.raises(ValueError, match="separator must not contain letters"):
            Settings.from_env()

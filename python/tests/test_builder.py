"""Tests for the builder module."""

import pytest
import tempfile
import json
from pathlib import Path

from lexibit.builder import LexiconCompiler, compile_words
from lexibit.builder.compiler import compute_stats, substitution_mask
from lexibit.codec import ALPHABET, decode_letters, encode_letters, letter_bit
from lexibit.errors import InvalidParameterError
from lexibit.ingest.base import IngestResult
from lexibit.schema import Lexicon
from lexibit.trie import WordTrie


class TestWordTrie:
    """Tests for the membership trie."""

    def test_add_and_find(self):
        """Test inserted words are found and prefixes are not."""
        trie = WordTrie(["cold", "cord"])
        assert trie.find("cold")
        assert "cord" in trie
        assert not trie.find("col")
        assert not trie.find("colds")
        assert not trie.find("")
        assert len(trie) == 2

    def test_add_duplicate(self):
        """Test duplicates are counted once."""
        trie = WordTrie()
        assert trie.add("cold") is True
        assert trie.add("cold") is False
        assert len(trie) == 1


class TestLexiconCompiler:
    """Tests for LexiconCompiler."""

    @pytest.mark.parametrize("length", [0, -3, "4", 4.0, True, None])
    def test_rejects_bad_length(self, length):
        """Test malformed word lengths are rejected before processing."""
        with pytest.raises(InvalidParameterError) as exc:
            LexiconCompiler(length)
        assert exc.value.parameter == "word_length"

    def test_filters_by_length(self):
        """Test only words of the target length are kept."""
        compiler = LexiconCompiler(4)
        kept = compiler.add_words(["cold", "cat", "warms", "WARM", "co-d", "cold"])
        assert kept == 3
        assert compiler.get_word_count() == 2

        lexicon = compiler.compile()
        assert set(lexicon) == {"cold", "warm"}

    def test_add_result(self):
        """Test adding words from an IngestResult."""
        compiler = LexiconCompiler(4)
        result = IngestResult(
            words=["cold", "cord"],
            source_path="/test.txt",
            dict_name="test",
        )
        assert compiler.add_result(result) == 2
        assert compiler.get_word_count() == 2

    def test_empty_input(self):
        """Test no words compiles to an empty lexicon, not an error."""
        lexicon = compile_words(["cat", "horse"], 4)
        assert lexicon.is_empty()
        assert lexicon.word_length == 4

    def test_one_pattern_per_position(self, lexicon):
        """Test every word gets one wildcard pattern per letter."""
        for word in lexicon:
            patterns = lexicon.patterns(word)
            assert len(patterns) == 4
            assert list(patterns) == [
                word[:i] + "&" + word[i + 1:] for i in range(4)
            ]

    def test_known_masks(self, lexicon):
        """Test specific masks of the ladder fixture."""
        cold = lexicon.patterns("cold")
        assert cold["co&d"] == encode_letters("lr")
        assert cold["&old"] == letter_bit("c")
        assert cold["c&ld"] == letter_bit("o")

        assert lexicon.patterns("core")["co&e"] == encode_letters("rn")
        assert lexicon.patterns("core")["&ore"] == encode_letters("cb")

    def test_self_bit_always_set(self, lexicon):
        """Test a word's own letter is set in each of its masks."""
        for word in lexicon:
            for position, mask in enumerate(lexicon.patterns(word).values()):
                assert word[position] in decode_letters(mask)

    def test_masks_match_dictionary(self, lexicon, ladder_words):
        """Test decoded masks are exactly the valid substitutions."""
        members = set(ladder_words)
        for word in lexicon:
            for position, mask in enumerate(lexicon.patterns(word).values()):
                expected = {
                    c for c in ALPHABET
                    if word[:position] + c + word[position + 1:] in members
                }
                assert set(decode_letters(mask)) == expected

    def test_closure(self, lexicon):
        """Test every decoded neighbor is itself a lexicon key."""
        for word in lexicon:
            for pattern, mask in lexicon.patterns(word).items():
                for letter in decode_letters(mask):
                    assert pattern.replace("&", letter) in lexicon

    def test_substitution_mask(self):
        """Test mask computation for a single pattern."""
        trie = WordTrie(["bat", "cat", "hat", "cot"])
        assert substitution_mask(trie, "&at", 0) == encode_letters("bch")
        assert substitution_mask(trie, "c&t", 1) == encode_letters("ao")
        assert substitution_mask(trie, "ca&", 2) == encode_letters("t")
        assert substitution_mask(trie, "zz&", 2) == 0


class TestBuild:
    """Tests for writing compiled lexicons."""

    def test_build_creates_file(self, ladder_words):
        """Test build writes <length>-letter.json."""
        with tempfile.TemporaryDirectory() as tmpdir:
            compiler = LexiconCompiler(4)
            compiler.add_words(ladder_words)
            stats = compiler.build(tmpdir)

            filepath = Path(tmpdir, "4-letter.json")
            assert filepath.exists()
            assert stats.files_written == [str(filepath)]

            with open(filepath) as f:
                data = json.load(f)
            assert set(data) == set(ladder_words)
            assert all(
                isinstance(mask, int) and 0 <= mask < 1 << 26
                for patterns in data.values()
                for mask in patterns.values()
            )

    def test_build_roundtrip(self, ladder_words):
        """Test the written file loads back into the same lexicon."""
        with tempfile.TemporaryDirectory() as tmpdir:
            compiler = LexiconCompiler(4)
            compiler.add_words(ladder_words)
            compiler.build(tmpdir)

            loaded = Lexicon.load(Path(tmpdir, "4-letter.json"))
            assert loaded.to_dict() == compiler.compile().to_dict()

    def test_build_stats(self, lexicon):
        """Test build statistics of the ladder fixture."""
        stats = compute_stats(lexicon)
        assert stats.word_length == 4
        assert stats.total_words == 11
        assert stats.total_patterns == 44
        assert stats.total_edges == 10
        assert stats.isolated_words == 0

    def test_stats_isolated(self):
        """Test words without neighbors are counted."""
        stats = compute_stats(compile_words(["cold", "cord", "warm"], 4))
        assert stats.total_edges == 1
        assert stats.isolated_words == 1

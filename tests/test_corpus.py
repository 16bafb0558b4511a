import logging

import pytest

from fukn_weather.corpus import CorpusLoadError, all_bucket_keys, build_corpus, load_corpus, missing_buckets
from fukn_weather.models import Rating


def test_bucket_keys_cover_domain():
    keys = all_bucket_keys()
    assert len(keys) == 39
    assert keys[0] == "-50_-46"
    assert keys[-1] == "140_144"
    assert "-5_-1" in keys


def test_bundled_corpus_is_complete(bundled_corpus):
    assert set(bundled_corpus) == {r.key for r in Rating}
    assert missing_buckets(bundled_corpus) == []


def test_bundled_corpus_has_choices(bundled_corpus):
    """Every bucket offers more than one description."""
    for buckets in bundled_corpus.values():
        for descriptions in buckets.values():
            assert len(descriptions) >= 2


def test_load_preserves_order(write_corpus):
    path = write_corpus({"G": {"70_74": ["first", "second", "third"]}})
    corpus = load_corpus(path)
    assert corpus["G"]["70_74"] == ("first", "second", "third")


def test_corpus_is_immutable(write_corpus):
    corpus = load_corpus(write_corpus({"G": {"70_74": ["first"]}}))
    with pytest.raises(TypeError):
        corpus["G"] = {}
    with pytest.raises(TypeError):
        corpus["G"]["70_74"] = ("other",)


def test_missing_file(tmp_path):
    path = tmp_path / "nope.json"
    with pytest.raises(CorpusLoadError) as exc:
        load_corpus(path)
    assert exc.value.path == path


def test_invalid_json(write_corpus):
    with pytest.raises(CorpusLoadError):
        load_corpus(write_corpus("{not json"))


def test_wrong_shape(write_corpus):
    with pytest.raises(CorpusLoadError):
        load_corpus(write_corpus({"G": {"70_74": "a string, not a list"}}))


def test_unknown_rating(write_corpus):
    with pytest.raises(CorpusLoadError, match="Unknown rating"):
        load_corpus(write_corpus({"PG13": {"70_74": ["uses name instead of key"]}}))


def test_misaligned_bucket(write_corpus):
    with pytest.raises(CorpusLoadError):
        load_corpus(write_corpus({"G": {"72_76": ["not a multiple of 5"]}}))


def test_gaps_are_warned_not_fatal(write_corpus, caplog):
    path = write_corpus({"G": {"70_74": ["only one bucket"], "75_79": []}})
    with caplog.at_level(logging.WARNING, logger="fukn_weather.corpus"):
        corpus = load_corpus(path)
    assert corpus["G"]["70_74"] == ("only one bucket",)
    assert "have no descriptions" in caplog.text

    gaps = missing_buckets(corpus)
    assert ("G", "75_79") in gaps
    assert ("G", "70_74") not in gaps
    assert ("BLAND", "0_4") in gaps
    assert len(gaps) == 6 * 39 - 1


def test_build_corpus_freezes_lists():
    corpus = build_corpus({"X": {"0_4": ["a", "b"]}})
    assert corpus["X"]["0_4"] == ("a", "b")

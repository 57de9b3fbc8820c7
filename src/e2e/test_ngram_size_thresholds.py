import pytest
from dicematch import config as CFG
from dicematch import similarity
from dicematch.ngrams import ngram_size


@pytest.mark.parametrize("length, n", [
    (0, 2), (1, 2), (15, 2),
    (15.5, 3), (16, 3), (30, 3),
    (30.5, 4), (31, 4), (500, 4),
])
def test_thresholds_are_frozen(length, n):
    assert ngram_size(length) == n


def test_thresholds_follow_config(monkeypatch):
    monkeypatch.setattr(CFG, "SHORT_MAX", 3)
    monkeypatch.setattr(CFG, "MEDIUM_MAX", 5)
    assert ngram_size(3) == 2
    assert ngram_size(4) == 3
    assert ngram_size(6) == 4


# Strings of distinct characters differing only in the last one, so the
# expected score depends only on which n the pairwise path picked.
@pytest.mark.parametrize("a, b, expected", [
    # avg 15 -> n=2: 14 bigrams each, 13 shared
    ("abcdefghijklmno", "abcdefghijklmnz", (2 * 13) / (14 + 14)),
    # avg 15.5 -> n=3: 13 and 14 trigrams, all 13 of a's shared
    ("abcdefghijklmno", "abcdefghijklmnop", (2 * 13) / (13 + 14)),
    # avg 16 -> n=3: 14 trigrams each, 13 shared
    ("abcdefghijklmnop", "abcdefghijklmnoz", (2 * 13) / (14 + 14)),
    # avg 30 -> n=3: 28 trigrams each, 27 shared
    ("abcdefghijklmnopqrstuvwxyz0123", "abcdefghijklmnopqrstuvwxyz012!", (2 * 27) / (28 + 28)),
    # avg 31 -> n=4: 28 four-grams each, 27 shared
    ("abcdefghijklmnopqrstuvwxyz01234", "abcdefghijklmnopqrstuvwxyz0123!", (2 * 27) / (28 + 28)),
])
def test_pairwise_uses_average_length_thresholds(a, b, expected):
    assert similarity(a, b) == expected

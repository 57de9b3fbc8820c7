from collections import Counter
from dicematch.ngrams import build_multiset, intersection_count, rolling_hashes


def test_repeated_ngram_not_overmatched():
    ref = build_multiset("aaaa", 2)
    assert sum(ref.values()) == 3 and len(ref) == 1
    assert intersection_count(ref, rolling_hashes("aaaa", 2)) == 3


def test_stream_longer_than_reference_is_capped():
    ref = build_multiset("aa", 2)
    assert intersection_count(ref, rolling_hashes("aaaaaa", 2)) == 1


def test_reference_longer_than_stream():
    ref = build_multiset("aaaaaa", 2)
    assert intersection_count(ref, rolling_hashes("aaa", 2)) == 2


def test_empty_reference_is_zero():
    assert intersection_count(Counter(), rolling_hashes("anything", 2)) == 0


def test_reference_is_not_mutated():
    ref = build_multiset("banana", 2)
    before = dict(ref)
    intersection_count(ref, rolling_hashes("bananabanana", 2))
    intersection_count(ref, rolling_hashes("ana", 2))
    assert dict(ref) == before


def test_plain_dict_reference_accepted():
    ref = {1: 2, 5: 1}
    assert intersection_count(ref, [1, 1, 1, 5, 5, 7]) == 3

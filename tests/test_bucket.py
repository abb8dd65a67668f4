import pytest

from cache.bucket import FrequencyBucket


def test_keys_come_out_oldest_first():
    bucket = FrequencyBucket(1)
    for key in ["a", "b", "c"]:
        bucket.add(key)

    assert list(bucket) == ["a", "b", "c"]
    assert bucket.pop_oldest() == "a"
    assert bucket.pop_oldest() == "b"
    assert len(bucket) == 1


def test_discard_from_the_middle_keeps_order():
    bucket = FrequencyBucket(3)
    for key in ["a", "b", "c"]:
        bucket.add(key)

    bucket.discard("b")
    bucket.discard("missing")

    assert list(bucket) == ["a", "c"]
    assert "b" not in bucket
    assert "c" in bucket


def test_readding_moves_key_to_the_back():
    bucket = FrequencyBucket(1)
    bucket.add("a")
    bucket.add("b")
    bucket.add("a")

    assert list(bucket) == ["b", "a"]


def test_empty_bucket_raises_on_pop_oldest():
    bucket = FrequencyBucket(2)

    with pytest.raises(KeyError):
        bucket.pop_oldest()

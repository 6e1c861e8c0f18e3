import time
from concurrent.futures import ThreadPoolExecutor

from retrokit import rtime


def test_matches_time_localtime():
    assert rtime.localtime(0) == time.localtime(0)


def test_known_timestamp():
    stamp = 1_000_000_000
    assert rtime.localtime(stamp) == time.localtime(stamp)


def test_default_is_now():
    before = time.time()
    result = rtime.localtime()
    after = time.time()
    assert time.mktime(time.localtime(before)) - 1 <= time.mktime(result)
    assert time.mktime(result) <= time.mktime(time.localtime(after)) + 1


def test_concurrent_calls_agree():
    stamps = list(range(0, 86400 * 50, 86400))
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(rtime.localtime, stamps))
    assert results == [time.localtime(s) for s in stamps]
from models.schemas.candidate_profile import MatchCriteria
from models.schemas.job_match import EnhancedJobMatch
from services.match_cache import MatchCache, cache_key


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _match(job_id: str) -> EnhancedJobMatch:
    return EnhancedJobMatch(
        job_id=job_id,
        match_score=0.5,
        semantic_relevance=0.5,
        recency_score=0.5,
        liveness_score=0.5,
        personalization_score=0.5,
        final_score=0.5,
        trust_score=50,
    )


def test_cache_key_sorts_skills_and_fills_blanks():
    a = MatchCriteria(candidate_id="c1", skills=["Python", "Go"], location="Austin")
    b = MatchCriteria(candidate_id="c1", skills=["Go", "Python"], location="Austin")
    assert cache_key(a) == cache_key(b) == ("c1", ("Go", "Python"), "Austin", "")


def test_cache_key_ignores_fields_outside_key():
    a = MatchCriteria(candidate_id="c1", salary_expectation=90_000)
    b = MatchCriteria(candidate_id="c1", salary_expectation=150_000)
    assert cache_key(a) == cache_key(b)


def test_get_returns_stored_matches_within_ttl():
    clock = FakeClock()
    cache = MatchCache(ttl_seconds=60, clock=clock)
    cache.set("k", [_match("j1")])
    clock.advance(59.9)
    assert [m.job_id for m in cache.get("k")] == ["j1"]


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = MatchCache(ttl_seconds=60, clock=clock)
    cache.set("k", [_match("j1")])
    clock.advance(60)
    assert cache.get("k") is None
    assert len(cache) == 0


def test_missing_key():
    assert MatchCache().get("nope") is None


def test_reset_restarts_ttl():
    clock = FakeClock()
    cache = MatchCache(ttl_seconds=60, clock=clock)
    cache.set("k", [_match("j1")])
    clock.advance(50)
    cache.set("k", [_match("j2")])
    clock.advance(50)
    assert [m.job_id for m in cache.get("k")] == ["j2"]


def test_oldest_entry_evicted_at_capacity():
    cache = MatchCache(max_entries=2, clock=FakeClock())
    cache.set("a", [])
    cache.set("b", [])
    cache.set("c", [])
    assert "a" not in cache
    assert "b" in cache
    assert "c" in cache
    assert len(cache) == 2


def test_stored_list_is_a_copy():
    cache = MatchCache(clock=FakeClock())
    matches = [_match("j1")]
    cache.set("k", matches)
    matches.append(_match("j2"))
    assert len(cache.get("k")) == 1


def test_invalidate_candidate_drops_only_their_entries():
    cache = MatchCache(clock=FakeClock())
    cache.set(("c1", ("Python",), "", ""), [])
    cache.set(("c1", ("Go",), "Austin", "remote"), [])
    cache.set(("c2", ("Python",), "", ""), [])

    assert cache.invalidate_candidate("c1") == 2
    assert len(cache) == 1
    assert ("c2", ("Python",), "", "") in cache
    assert cache.invalidate_candidate("c1") == 0


def test_clear():
    cache = MatchCache(clock=FakeClock())
    cache.set("a", [])
    cache.clear()
    assert len(cache) == 0

"""
Tests for ranked name search.
"""

import pytest
from namematch.core.record import NameRecord
from namematch.errors import InvalidArgumentError
from namematch.matching import search_names


def make_record(record_id, name, is_active=True, **kwargs):
    return NameRecord(id=record_id, original_name=name, is_active=is_active, **kwargs)


@pytest.fixture
def records():
    return [
        make_record(1, "Suresh Kumar", person_type="suspect", case_number="CASE-2024-001"),
        make_record(2, "Anjali Devi", person_type="witness"),
        make_record(3, "Sursh Kumar", person_type="suspect"),
        make_record(4, "Suresh Kumar", is_active=False),
    ]


class TestSearchScenarios:
    """End-to-end search behaviour."""

    def test_misspelled_query_finds_record(self):
        """Test that a transliteration variant of the query matches."""
        matches = search_names(
            "Sureesh Kumar", [make_record(1, "Suresh Kumar")], "combined", 0.3
        )
        assert [m.id for m in matches] == [1]
        assert matches[0].match_score >= 0.8

    def test_unrelated_record_excluded(self):
        records = [make_record(1, "Suresh Kumar"), make_record(2, "Anjali Devi")]
        matches = search_names("Suresh", records, "combined", 0.3)
        assert [m.id for m in matches] == [1]

    @pytest.mark.parametrize("records", [
        [],
        [make_record(1, "Suresh Kumar", is_active=False)],
    ])
    def test_no_active_records(self, records):
        assert search_names("Suresh Kumar", records, "combined", -1.0) == []

    @pytest.mark.parametrize("query", ["", "   ", "\t"])
    def test_blank_query_rejected(self, query):
        with pytest.raises(InvalidArgumentError):
            search_names(query, [make_record(1, "Suresh Kumar")])

    def test_unknown_algorithm_behaves_like_combined(self, records):
        unknown = search_names("Suresh", records, "unknown", 0.3)
        combined = search_names("Suresh", records, "combined", 0.3)
        assert [(m.id, m.match_score) for m in unknown] == \
            [(m.id, m.match_score) for m in combined]


class TestSearchRules:
    """Filtering, boosting and ordering."""

    @pytest.mark.parametrize("threshold", [-1.0, 0.0, 0.3])
    def test_inactive_records_never_returned(self, records, threshold):
        matches = search_names("Suresh Kumar", records, "combined", threshold)
        assert 4 not in [m.id for m in matches]

    def test_threshold_is_exclusive(self):
        """Test that a score equal to the threshold is excluded."""
        records = [make_record(1, "Bhushan")]
        assert search_names("Bushan", records, "phonetic", 0.8) == []
        assert [m.id for m in search_names("Bushan", records, "phonetic", 0.79)] == [1]

    def test_negative_threshold_returns_all_active(self, records):
        matches = search_names("Zzz", records, "fuzzy", -0.01)
        assert sorted(m.id for m in matches) == [1, 2, 3]

    def test_threshold_of_one_returns_nothing(self, records):
        assert search_names("Suresh Kumar", records, "combined", 1.0) == []

    def test_standardized_boost(self):
        """Test that equal standardized names add 0.2."""
        records = [make_record(1, "Bhushan"), make_record(2, "Bhushan Kumar")]
        matches = search_names("BHUSHAN", records, "phonetic", 0.0)
        scores = {m.id: m.match_score for m in matches}
        assert scores[1] == pytest.approx(1.0)
        assert scores[2] == pytest.approx(0.1)

    def test_sorted_by_score(self, records):
        matches = search_names("Suresh Kumar", records, "combined", -1.0)
        scores = [m.match_score for m in matches]
        assert scores == sorted(scores, reverse=True)
        assert matches[-1].id == 2

    def test_ties_ordered_by_id(self):
        records = [make_record(5, "Suresh Kumar"), make_record(2, "Suresh Kumar")]
        matches = search_names("Suresh Kumar", records)
        assert [m.id for m in matches] == [2, 5]

    def test_scores_bounded(self, records):
        for algorithm in ["fuzzy", "phonetic", "combined"]:
            for match in search_names("Suresh Kumar", records, algorithm, -1.0):
                assert 0.0 <= match.match_score <= 1.0


class TestMatchResults:

    def test_standardized_forms_recomputed(self):
        """Test that a stale stored standardized name is not trusted."""
        records = [make_record(1, "Sureesh Kumar", standardized_name="Old Value")]
        match = search_names("sursh kumar", records)[0]
        assert match.standardized_query == "Suresh Kumar"
        assert match.record_standardized == "Suresh Kumar"
        assert match.record.standardized_name == "Old Value"

    def test_to_dict_includes_record_and_match_fields(self):
        match = search_names("Suresh", [make_record(1, "Suresh Kumar", case_number="C-1")])[0]
        data = match.to_dict()
        assert data['id'] == 1
        assert data['case_number'] == "C-1"
        assert data['match_score'] == match.match_score
        assert data['standardized_query'] == "Suresh"

    def test_records_not_modified(self, records):
        before = [r.to_dict() for r in records]
        search_names("Suresh Kumar", records)
        assert [r.to_dict() for r in records] == before

    def test_malformed_record_does_not_abort_search(self):
        records = [make_record(1, None), make_record(2, "Suresh Kumar")]
        matches = search_names("Suresh Kumar", records, "combined", 0.3)
        assert [m.id for m in matches] == [2]


class TestScoreHook:

    def test_event_per_active_record(self, records):
        events = []
        search_names("Suresh Kumar", records, "combined", 0.3, on_score=events.append)
        assert [e.record_id for e in events] == [1, 2, 3]
        accepted = {e.record_id: e.accepted for e in events}
        assert accepted[1] and not accepted[2]
        assert events[0].standardized_boost is True

    def test_failing_hook_does_not_change_results(self, records):
        def broken(event):
            raise RuntimeError("hook failure")

        with_hook = search_names("Suresh Kumar", records, on_score=broken)
        without_hook = search_names("Suresh Kumar", records)
        assert [(m.id, m.match_score) for m in with_hook] == \
            [(m.id, m.match_score) for m in without_hook]

"""Unit tests for the weighted fuzzy index."""

import pytest

from aroma_catalog.application.search.fuzzy_index import FieldWeight, FuzzyIndex

FIELDS = [
    FieldWeight("name", 3.0),
    FieldWeight("tags", 1.5),
    FieldWeight("description", 1.0),
]


def build(items, **kwargs):
    index = FuzzyIndex(FIELDS, **kwargs)
    index.index(items)
    return index


@pytest.mark.unit
class TestFuzzyIndex:
    """Matching, weighting and ordering behavior"""

    def test_name_match_outranks_description_match(self):
        index = build([
            {"name": "Calm Blend", "description": "contains lavender and cedar"},
            {"name": "Lavender Oil", "description": ""},
        ])

        matches = index.query("lavender")

        assert [m.item["name"] for m in matches] == ["Lavender Oil", "Calm Blend"]
        assert matches[0].score > matches[1].score

    def test_tolerates_typos(self):
        index = build([{"name": "Lavender"}])

        matches = index.query("lavendar")

        assert len(matches) == 1

    def test_unrelated_query_matches_nothing(self):
        index = build([{"name": "Lavender Oil"}, {"name": "Calm Blend"}])

        assert index.query("zzzzqqq") == []

    def test_long_unrelated_query_does_not_match_short_values(self):
        index = build([
            {"name": "Rose", "tags": ["herbal-collection", "floral"]},
            {"name": "Deep Blue Rub", "tags": ["soothing", "sport"]},
        ])

        assert index.query("xylophone concert tickets") == []

    def test_query_longer_than_value_counts_missing_characters(self):
        index = build([{"name": "rose"}])

        assert index.query("rose") != []
        # four of the eleven query characters are covered
        assert index.query("rose garden") == []

    def test_match_far_into_text_is_rejected(self):
        items = [{"name": "x" * 70 + "lavender"}]

        assert build(items).query("lavender") == []
        assert len(build(items, threshold=0.8).query("lavender")) == 1

    def test_items_without_optional_fields_match_by_name(self):
        index = build([{"name": "Vetiver"}, {"name": "Rose", "tags": None}])

        matches = index.query("vetiver")

        assert matches[0].item["name"] == "Vetiver"

    def test_equal_scores_keep_build_order(self):
        index = build([{"name": "rose", "id": 1}, {"name": "rose", "id": 2}])

        matches = index.query("rose")

        assert [m.item["id"] for m in matches] == [1, 2]
        assert [m.position for m in matches] == [0, 1]

    def test_blank_query_returns_nothing(self):
        index = build([{"name": "rose"}])

        assert index.query("") == []
        assert index.query("   ") == []

    def test_scores_are_normalised(self):
        index = build([{"name": "rose", "tags": ["rose"], "description": "rose"}])

        match = index.query("rose")[0]

        assert match.score == pytest.approx(1.0)

    def test_case_insensitive(self):
        index = build([{"name": "LAVENDER"}])

        assert index.query("lavender")[0].score == pytest.approx(3.0 / 5.5)

    def test_requires_fields(self):
        with pytest.raises(ValueError):
            FuzzyIndex([])

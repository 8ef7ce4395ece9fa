"""Tests for the record store and field index builder."""

import logging

import pytest
from conftest import make_entry, make_station

from station_finder.application.services import FieldIndexBuilder, RecordStore, normalize_text
from station_finder.application.services.field_index_builder import (
    CODE_FIELD,
    DISTRICT_FIELD,
    NAME_FIELD,
    REGIONAL_FIELDS,
    STATE_FIELD,
    UTTERANCE_FIELD,
)


class TestRecordStore:
    """Tests for RecordStore."""

    def test_from_entries_keeps_dataset_order(self) -> None:
        """Given valid entries, when building the store, then dataset order is kept."""
        store = RecordStore.from_entries([make_entry("B"), make_entry("A"), make_entry("C")])

        assert [s.code for s in store] == ["B", "A", "C"]
        assert len(store) == 3
        assert "A" in store
        assert store.get("C") is not None
        assert store.get("Z") is None

    def test_from_entries_skips_malformed_and_duplicates(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given malformed and duplicate entries, when building, then they are skipped."""
        entries = [
            make_entry("A", "First A"),
            {"name": "No code", "district": "D", "state": "S"},
            "not an object",
            make_entry("A", "Second A"),
            make_entry("B"),
        ]

        with caplog.at_level(logging.WARNING):
            store = RecordStore.from_entries(entries)

        assert [s.code for s in store] == ["A", "B"]
        assert store.get("A").name == "First A"  # type: ignore[union-attr]
        assert "Skipped 3" in caplog.text

    def test_constructor_rejects_duplicate_codes(self) -> None:
        """Given parsed stations sharing a code, when constructing, then ValueError is raised."""
        with pytest.raises(ValueError, match="unique"):
            RecordStore([make_station("A"), make_station("A")])

    def test_empty_dataset(self) -> None:
        """Given no entries, when building, then the store is empty."""
        store = RecordStore.from_entries([])

        assert len(store) == 0
        assert list(store) == []


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_folds_case_and_collapses_whitespace(self) -> None:
        """Given mixed case and padding, when normalizing, then text is folded and collapsed."""
        assert normalize_text("  New   DELHI\t") == "new delhi"

    def test_applies_compatibility_normalization(self) -> None:
        """Given full-width characters, when normalizing, then NFKC maps them to ASCII."""
        assert normalize_text("ＮＤＬＳ") == "ndls"

    def test_leaves_indic_script_comparable(self) -> None:
        """Given Devanagari text, when normalizing twice, then the result is stable."""
        once = normalize_text("गाज़ियाबाद")

        assert once == normalize_text(once)
        assert once


class TestFieldIndexBuilder:
    """Tests for FieldIndexBuilder."""

    def test_fields_carry_weights(self) -> None:
        """Given a station, when listing its fields, then each carries its weight."""
        station = make_station(
            "NDLS",
            "New Delhi",
            district="New Delhi",
            state="Delhi",
            name_hi="नई दिल्ली",
            utterances=["dilli"],
        )

        fields = FieldIndexBuilder.fields_for(station)

        assert fields == [
            (NAME_FIELD, "New Delhi"),
            (CODE_FIELD, "NDLS"),
            (REGIONAL_FIELDS["hi"], "नई दिल्ली"),
            (DISTRICT_FIELD, "New Delhi"),
            (STATE_FIELD, "Delhi"),
            (UTTERANCE_FIELD, "dilli"),
        ]
        assert NAME_FIELD.weight == CODE_FIELD.weight == 2.0
        assert REGIONAL_FIELDS["hi"].weight == 1.5
        assert DISTRICT_FIELD.weight == STATE_FIELD.weight == 1.0

    def test_absent_fields_are_not_indexed(self) -> None:
        """Given a station with no optional fields, when building, then only required ones exist."""
        store = RecordStore.from_entries([make_entry("A", "Alpha")])

        index = FieldIndexBuilder().build(store)

        assert [entry.field.key for entry in index.entries] == [
            "name",
            "code",
            "district",
            "state",
        ]
        assert "" not in index.texts

    def test_index_positions_point_into_store(self) -> None:
        """Given several stations, when building, then entry positions refer to dataset order."""
        store = RecordStore.from_entries([make_entry("A"), make_entry("B")])

        index = FieldIndexBuilder().build(store)

        assert {entry.position for entry in index.entries} == {0, 1}
        assert index.stations[1].code == "B"
        assert index.texts[1] == "a"
        assert len(index) == len(index.entries)

    def test_distinct_texts_are_shared_and_sorted_by_length(self) -> None:
        """Given stations sharing a district, when building, then each text is kept once."""
        store = RecordStore.from_entries([make_entry("A"), make_entry("B")])

        index = FieldIndexBuilder().build(store)

        assert index.unique_texts == ["a", "b", "state", "district", "station a", "station b"]
        assert index.entries_by_text[index.unique_texts.index("district")] == [2, 6]
        assert index.shorter_than(5) == 2
        assert index.shorter_than(6) == 3

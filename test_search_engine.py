#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Test SearchEngine indexing, lookups and tf-idf
"""

import copy
import math
import threading

import pytest

from DocRetriever import DocumentId, SearchEngine, SearchEngineError, UnknownDocumentError

D1 = DocumentId("d1")
D2 = DocumentId("d2")


@pytest.fixture
def engine():
    engine = SearchEngine()
    engine.ingest(DocumentId("d1"), "The Cat sat.")
    engine.ingest(DocumentId("d2"), "The dog sat")
    return engine


def test_lookup_by_term(engine):
    assert engine.lookup_by_term("the") == {D1, D2}
    assert engine.lookup_by_term("THE") == {D1, D2}
    assert engine.lookup_by_term("cat") == {D1}


def test_lookup_unknown_term_is_none(engine):
    assert engine.lookup_by_term("bird") is None


def test_lookup_does_not_strip_punctuation(engine):
    assert engine.lookup_by_term("cat.") is None


def test_lookup_returns_stored_set(engine):
    assert engine.lookup_by_term("the") is engine.inverted_index["the"]
    assert engine.index_lookup("the") is engine.lookup_by_term("the")


def test_every_term_maps_to_its_document(engine):
    for doc_id, counts in engine.forward_index.items():
        for term in counts:
            assert doc_id in engine.inverted_index[term]


def test_term_frequency(engine):
    assert engine.term_frequency(D1, "cat") == 1
    assert engine.term_frequency(D1, "CAT") == 1
    assert engine.term_frequency(D2, "cat") == 0
    assert engine.term_frequency(D1, "cat.") == 0


def test_term_frequency_counts_repeats():
    engine = SearchEngine()
    engine.ingest(D1, "to be or not to be, To BE!")
    assert engine.term_frequency(D1, "be") == 3
    assert engine.term_frequency(D1, "to") == 3
    assert engine.term_frequency(D1, "or") == 1


def test_unknown_document_raises(engine):
    unknown = DocumentId("d3")
    with pytest.raises(UnknownDocumentError) as excinfo:
        engine.term_frequency(unknown, "cat")
    assert excinfo.value.doc_id == unknown
    assert str(excinfo.value) == "Document id not in search engine: d3"

    with pytest.raises(UnknownDocumentError):
        engine.tf_idf(unknown, "cat")


def test_unknown_document_error_hierarchy(engine):
    with pytest.raises(SearchEngineError):
        engine.term_frequency(DocumentId("d3"), "cat")
    with pytest.raises(KeyError):
        engine.tf_idf(DocumentId("d3"), "cat")


def test_inverse_document_frequency(engine):
    assert engine.inverse_document_frequency("the") == 0.0
    assert engine.inverse_document_frequency("cat") == pytest.approx(math.log(3 / 2))
    assert engine.inverse_document_frequency("Cat") == pytest.approx(math.log(3 / 2))
    assert engine.inverse_document_frequency("bird") == pytest.approx(math.log(3))


def test_inverse_document_frequency_empty_engine():
    assert SearchEngine().inverse_document_frequency("anything") == 0.0


def test_inverse_document_frequency_grows_as_term_gets_rarer():
    engine = SearchEngine()
    engine.ingest(DocumentId("a"), "all three two one")
    engine.ingest(DocumentId("b"), "all three two")
    engine.ingest(DocumentId("c"), "all three")
    engine.ingest(DocumentId("d"), "all")

    idfs = [engine.inverse_document_frequency(term) for term in ["all", "three", "two", "one", "none"]]

    assert idfs[0] == 0.0
    assert all(earlier < later for earlier, later in zip(idfs, idfs[1:]))


def test_tf_idf(engine):
    assert engine.tf_idf(D1, "cat") == pytest.approx(math.log(3 / 2))
    assert engine.tf_idf(D2, "cat") == 0.0
    assert engine.tf_idf(D1, "the") == 0.0


def test_repeated_ingestion_adds_counts():
    engine = SearchEngine()
    engine.ingest(D1, "cat cat dog")
    engine.ingest(D1, "cat")

    assert engine.term_frequency(D1, "cat") == 3
    assert engine.term_frequency(D1, "dog") == 1
    assert engine.lookup_by_term("cat") == {D1}
    assert engine.document_count == 1


def test_equal_ids_share_entries():
    engine = SearchEngine()
    engine.ingest(DocumentId("x"), "cat")
    engine.ingest(DocumentId("x"), "cat")
    assert engine.term_frequency(DocumentId("x"), "cat") == 2
    assert len(engine.lookup_by_term("cat")) == 1


def test_empty_term_is_indexed():
    engine = SearchEngine()
    engine.ingest(D1, "!!! ...")

    assert engine.lookup_by_term("") == {D1}
    assert engine.term_frequency(D1, "") == 2
    assert "" in engine.inverted_index


def test_document_without_tokens_is_counted():
    engine = SearchEngine()
    engine.ingest(D1, "   ")

    assert D1 in engine
    assert engine.document_count == 1
    assert engine.term_frequency(D1, "cat") == 0
    assert engine.inverted_index == {}


def test_add_document_alias():
    engine = SearchEngine()
    engine.add_document(D1, "cat")
    assert engine.lookup_by_term("cat") == {D1}


def test_counts(engine):
    assert engine.document_count == 2
    assert len(engine) == 2
    assert engine.term_count == 4
    assert D1 in engine
    assert DocumentId("d3") not in engine


def test_relevance_lookup_single_term(engine):
    assert engine.relevance_lookup(["cat"]) == [D1]


def test_relevance_lookup_ties_are_lexicographic(engine):
    assert engine.relevance_lookup(["sat"]) == [D1, D2]


def test_relevance_lookup_is_case_sensitive(engine):
    assert engine.relevance_lookup(["Cat"]) == []
    assert engine.relevance_lookup(["bird"]) == []
    assert engine.relevance_lookup([]) == []


def test_relevance_lookup_is_permutation_of_candidates():
    engine = SearchEngine()
    engine.ingest(DocumentId("a"), "apple banana")
    engine.ingest(DocumentId("b"), "banana cherry")
    engine.ingest(DocumentId("c"), "cherry apple apple")
    engine.ingest(DocumentId("d"), "durian")

    result = engine.relevance_lookup(["apple", "banana", "cherry"])

    assert len(result) == len(set(result))
    assert set(result) == {DocumentId("a"), DocumentId("b"), DocumentId("c")}


def test_relevance_lookup_does_not_mutate_engine(engine):
    inverted = {term: set(doc_ids) for term, doc_ids in engine.inverted_index.items()}
    forward = {doc_id: dict(counts) for doc_id, counts in engine.forward_index.items()}

    engine.relevance_lookup(["cat", "dog", "bird"])

    assert engine.inverted_index == inverted
    assert {doc_id: dict(counts) for doc_id, counts in engine.forward_index.items()} == forward


def test_relevance_lookup_uses_configured_weights():
    engine = SearchEngine(config={"ranking": {"primary_weight": 0.0, "secondary_weight": 1.0}})
    engine.ingest(DocumentId("a"), "apple apple banana")
    engine.ingest(DocumentId("b"), "apple banana banana")
    engine.ingest(DocumentId("c"), "cherry")

    assert engine.relevance_lookup(["apple", "banana"]) == [DocumentId("b"), DocumentId("a")]


def test_dump_renders_both_maps(engine):
    dump = str(engine)

    assert "Term to doc id map" in dump
    assert "Doc id to term frequency map" in dump
    assert "'cat'" in dump
    assert "d1, d2" in dump


def test_dump_escapes_markup():
    engine = SearchEngine()
    engine.ingest(DocumentId("[bold]x"), "a[b]c")
    dump = engine.dump()

    assert "[bold]x" in dump
    assert "a[b]c" in dump


def test_thread_safe_ingestion():
    engine = SearchEngine(config={"engine": {"thread_safe": True}})
    doc_id = DocumentId("shared")

    def worker():
        for _ in range(50):
            engine.ingest(doc_id, "cat dog")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert engine.term_frequency(doc_id, "cat") == 200
    assert engine.relevance_lookup(["cat"]) == [doc_id]


def test_unknown_plain_string_id_raises_unknown_document(engine):
    with pytest.raises(UnknownDocumentError) as excinfo:
        engine.term_frequency("d1", "cat")
    assert str(excinfo.value) == "Document id not in search engine: d1"


def test_relevance_lookup_accepts_iterator(engine):
    assert engine.relevance_lookup(iter(["cat", "dog"])) == [D1, D2]


def test_indexes_can_be_deep_copied(engine):
    inverted = copy.deepcopy(engine.inverted_index)
    forward = copy.deepcopy(engine.forward_index)

    assert inverted == engine.inverted_index
    assert inverted["the"] is not engine.inverted_index["the"]
    assert forward[D1]["cat"] == 1

"""
Unit tests for corpus statistics and IDF.
"""

import math

import pytest
from toolsearch.bm25.corpus import CorpusStatistics, calculate_idf


class TestCalculateIDF:
    """Test smoothed IDF formula"""
    
    def test_formula(self):
        """Test ln((N - df + 0.5) / (df + 0.5) + 1)"""
        assert calculate_idf(3, 1) == pytest.approx(math.log(2.5 / 1.5 + 1))
        assert calculate_idf(10, 0) == pytest.approx(math.log(10.5 / 0.5 + 1))
    
    def test_positive_when_term_in_every_document(self):
        """Test that the +1 smoothing keeps IDF positive for ubiquitous terms"""
        assert calculate_idf(5, 5) > 0
        assert calculate_idf(1, 1) == pytest.approx(math.log(0.5 / 1.5 + 1))
    
    def test_rare_terms_weigh_more(self):
        """Test that IDF decreases as document frequency grows"""
        assert calculate_idf(100, 1) > calculate_idf(100, 10) > calculate_idf(100, 90)


class TestCorpusStatistics:
    """Test per-call corpus statistics"""
    
    def test_average_length(self):
        """Test mean token count across documents"""
        corpus = CorpusStatistics([["a1x", "b2y"], ["c3z"], ["d4w", "e5v", "f6u"]])
        assert corpus.num_docs == 3
        assert corpus.average_length() == pytest.approx(2.0)
    
    def test_empty_corpus(self):
        """Test that an empty corpus has zero average length"""
        corpus = CorpusStatistics([])
        assert corpus.num_docs == 0
        assert corpus.average_length() == 0.0
        assert corpus.document_frequency("file") == 0
    
    def test_document_frequency_counts_presence(self):
        """Test that df counts documents, not occurrences"""
        corpus = CorpusStatistics([
            ["file", "file", "file"],
            ["file", "disk"],
            ["url"],
        ])
        assert corpus.document_frequency("file") == 2
        assert corpus.document_frequency("disk") == 1
        assert corpus.document_frequency("missing") == 0
    
    def test_matches_full_scan(self):
        """Test that df equals a scan of every document"""
        docs = [
            ["read", "file", "read", "file", "from", "disk"],
            ["write", "file", "write", "file", "disk"],
            ["fetch", "url", "download", "resource", "from", "url"],
        ]
        corpus = CorpusStatistics(docs)
        for term in {t for doc in docs for t in doc}:
            assert corpus.document_frequency(term) == sum(1 for doc in docs if term in doc)
    
    def test_snapshot_ignores_later_mutation(self):
        """Test that mutating input lists after construction has no effect"""
        docs = [["read", "file"], ["write", "file"]]
        corpus = CorpusStatistics(docs)
        
        docs[0].append("disk")
        docs.append(["file"])
        
        assert corpus.num_docs == 2
        assert corpus.average_length() == pytest.approx(2.0)
        assert corpus.document_frequency("file") == 2
        assert corpus.document_frequency("disk") == 0
    
    def test_idf_uses_corpus_counts(self):
        """Test idf() combines num_docs and document_frequency"""
        corpus = CorpusStatistics([["read", "file"], ["write", "file"], ["fetch", "url"]])
        assert corpus.idf("read") == pytest.approx(calculate_idf(3, 1))
        assert corpus.idf("file") == pytest.approx(calculate_idf(3, 2))

"""Performance benchmarks for the Translation Lookup engine."""

import pytest
import time
from translation_lookup.core.engine import SearchEngine
from translation_lookup.core.normalizer import RecordNormalizer


def generate_rows(count):
    """Rows shaped like a large translation sheet."""
    rows = [["#", "Key", "Source"]]
    for i in range(count):
        rows.append([i + 1, f"section{i % 50}.item_{i}", f"Label number {i}"])
    return rows


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture(scope="class")
    def large_records(self):
        """Normalize a large dataset spread over several sheets."""
        normalizer = RecordNormalizer()
        sources = [(f"Sheet{n}", generate_rows(1000)) for n in range(5)]
        sources.append(("Menu", [
            [1, "menu.save", "Save"],
            [2, "menu.save_as", "Save As..."],
            [3, "dialog.confirm", "Are you sure?"],
        ]))
        return normalizer.normalize(sources)

    @pytest.fixture
    def large_engine(self, large_records):
        """Create a search engine loaded with the large dataset."""
        engine = SearchEngine(fuzzy_threshold=0.3)
        engine.load_records(large_records)
        return engine

    def test_dataset_size(self, large_records):
        assert len(large_records) == 5003

    def test_exact_match_performance(self, large_engine, benchmark):
        """Benchmark a query with whole-word hits."""
        def exact_search():
            return large_engine.search("Save")

        result = benchmark(exact_search)
        assert [r.key for r in result.exact_matches] == ["menu.save", "menu.save_as"]

    def test_fuzzy_match_performance(self, large_engine, benchmark):
        """Benchmark a query with only approximate hits."""
        def fuzzy_search():
            return large_engine.search("Sav")

        result = benchmark(fuzzy_search)
        assert result.exact_matches == []
        assert len(result.fuzzy_matches) > 0

    def test_no_match_performance(self, large_engine, benchmark):
        """Benchmark a query that matches nothing."""
        def no_match_search():
            return large_engine.search("zzqqxxjj")

        result = benchmark(no_match_search)
        assert result.exact_matches == []
        assert result.fuzzy_matches == []

    def test_browse_mode_performance(self, large_engine):
        start_time = time.time()
        result = large_engine.search("")
        total_time = time.time() - start_time

        assert len(result.fuzzy_matches) == 5003
        assert total_time < 1.0

    def test_index_build_performance(self, large_records):
        """Loading rebuilds the fuzzy index over the whole record set."""
        engine = SearchEngine()

        start_time = time.time()
        engine.load_records(large_records)
        total_time = time.time() - start_time

        assert len(engine.fuzzy_index) == 5003
        assert total_time < 5.0

    def test_normalization_performance(self):
        rows = generate_rows(5000)
        normalizer = RecordNormalizer()

        start_time = time.time()
        records = normalizer.normalize([("Big", rows)])
        total_time = time.time() - start_time

        # Header row is dropped
        assert len(records) == 5000
        assert total_time < 2.0

    def test_bulk_search_performance(self, large_engine):
        """Simulate a user typing a query one keystroke at a time."""
        typed = "Label number 424"
        queries = [typed[:i] for i in range(1, len(typed) + 1)]

        start_time = time.time()
        results = [large_engine.search(query) for query in queries]
        total_time = time.time() - start_time

        assert len(results) == len(typed)
        assert total_time < 10.0
        assert {r.source_text for r in results[-1].exact_matches} == {"Label number 424"}
        assert len(results[-1].exact_matches) == 5

    def test_memory_usage(self, large_engine):
        """Test memory usage with large dataset."""
        import psutil
        import os

        process = psutil.Process(os.getpid())
        memory_before = process.memory_info().rss / 1024 / 1024  # MB

        for i in range(20):
            large_engine.search(f"item_{i}")

        memory_after = process.memory_info().rss / 1024 / 1024  # MB

        # Results are lists of existing records, not copies
        assert memory_after - memory_before < 100

    def test_concurrent_access_simulation(self, large_engine):
        """Simulate concurrent readers of a loaded engine."""
        import threading
        import queue

        results_queue = queue.Queue()
        errors_queue = queue.Queue()

        def search_worker(queries):
            for query in queries:
                try:
                    results_queue.put((query, large_engine.search(query)))
                except Exception as e:
                    errors_queue.put((query, str(e)))

        query_sets = [
            ["Save", "menu", "dialog"],
            ["Label", "number 12", "item_7"],
            ["section3", "Are you sure", "Sheet2"],
        ]
        threads = [
            threading.Thread(target=search_worker, args=(queries,))
            for queries in query_sets
        ]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results_queue.qsize() == 9
        assert errors_queue.empty()

    def test_long_query_performance(self, large_engine):
        long_query = "very_long_word_" + "x" * 150

        start_time = time.time()
        result = large_engine.search(long_query)
        total_time = time.time() - start_time

        assert total_time < 2.0
        assert result.exact_matches == []

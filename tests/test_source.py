"""Document source and process-wide index tests."""

import json
import threading

import pytest
import xxhash

from tsdoc_index import (JsonDocumentSource, LoadFailure, NotLoadedError,
                         discover_doc_path, get_document_fingerprint, get_index,
                         index_loaded, load_documentation)


class TestJsonDocumentSource:
    """One blocking read of the whole tree."""

    def test_read_returns_root(self, doc_file, sample_doc):
        source = JsonDocumentSource(doc_file)
        assert source.read() == sample_doc

    def test_fingerprint_is_xxh3_of_file_bytes(self, doc_file):
        source = JsonDocumentSource(str(doc_file))
        assert source.fingerprint is None

        source.read()
        assert source.fingerprint == xxhash.xxh3_64(doc_file.read_bytes()).hexdigest()

    def test_fingerprint_follows_content(self, tmp_path):
        doc_path = tmp_path / "typedoc.json"
        source = JsonDocumentSource(doc_path)

        doc_path.write_text(json.dumps({"id": 0, "name": "a"}))
        source.read()
        first = source.fingerprint

        doc_path.write_text(json.dumps({"id": 0, "name": "b"}))
        source.read()
        assert source.fingerprint != first

    def test_missing_file_raises_load_failure(self, tmp_path):
        source = JsonDocumentSource(tmp_path / "missing.json")
        with pytest.raises(LoadFailure) as exc_info:
            source.read()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_json_raises_load_failure(self, tmp_path):
        doc_path = tmp_path / "typedoc.json"
        doc_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LoadFailure):
            JsonDocumentSource(doc_path).read()

    def test_deeply_nested_json_raises_load_failure(self, tmp_path):
        depth = 50000
        text = '{"id": 0, "name": "n", "kind": 4, "children": [' * depth + "]}" * depth
        doc_path = tmp_path / "typedoc.json"
        doc_path.write_text(text, encoding="utf-8")

        source = JsonDocumentSource(doc_path)
        with pytest.raises(LoadFailure, match="nested too deeply") as exc_info:
            source.read()
        assert isinstance(exc_info.value.__cause__, RecursionError)
        assert source.fingerprint is None


class TestDiscovery:
    """TypeDoc output lookup inside a project directory."""

    def test_prefers_docs_directory(self, tmp_path, doc_file):
        (tmp_path / "typedoc.json").write_text("{}")
        assert discover_doc_path(tmp_path) == doc_file

    def test_falls_back_to_documentation_then_root(self, tmp_path):
        root_doc = tmp_path / "typedoc.json"
        root_doc.write_text("{}")
        assert discover_doc_path(tmp_path) == root_doc

        alt = tmp_path / "documentation" / "typedoc.json"
        alt.parent.mkdir()
        alt.write_text("{}")
        assert discover_doc_path(str(tmp_path)) == alt

    def test_nothing_found(self, tmp_path):
        assert discover_doc_path(tmp_path) is None


class TestGlobalIndex:
    """Load then freeze: the shared index is swapped in only when complete."""

    def test_get_index_before_load(self):
        assert not index_loaded()
        with pytest.raises(NotLoadedError):
            get_index()

    def test_load_documentation(self, doc_file):
        index = load_documentation(doc_file)

        assert index_loaded()
        assert get_index() is index
        assert index.get_stats().total == 17
        assert get_document_fingerprint() == xxhash.xxh3_64(doc_file.read_bytes()).hexdigest()

    def test_failed_reload_leaves_nothing_loaded(self, doc_file, tmp_path):
        load_documentation(doc_file)

        broken = tmp_path / "broken.json"
        broken.write_text(json.dumps({"id": 0, "name": "x", "children": [{"name": "no id"}]}))
        with pytest.raises(LoadFailure):
            load_documentation(broken)

        assert not index_loaded()
        assert get_document_fingerprint() is None
        with pytest.raises(NotLoadedError):
            get_index()

    def test_concurrent_readers_share_one_index(self, doc_file):
        index = load_documentation(doc_file)
        results = []

        def reader():
            shared = get_index()
            results.append((shared is index, len(shared.find_by_name("size"))))

        threads = [threading.Thread(target=reader) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [(True, 2)] * 8

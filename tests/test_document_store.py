from threading import Thread

from mail_reflow.services.document_store import DocumentStore


def test_store_open_replace_close() -> None:
    store = DocumentStore()

    store.open("file:///a.eml", "first")
    assert store.get("file:///a.eml") == "first"
    assert "file:///a.eml" in store

    store.replace("file:///a.eml", "second")
    assert store.get("file:///a.eml") == "second"

    assert store.close("file:///a.eml") is True
    assert store.get("file:///a.eml") is None
    assert len(store) == 0


def test_store_close_unknown_document() -> None:
    store = DocumentStore()

    assert store.close("file:///missing.eml") is False


def test_store_replace_creates_missing_document() -> None:
    store = DocumentStore()

    store.replace("file:///late.eml", "text")

    assert store.get("file:///late.eml") == "text"


def test_store_handles_concurrent_writers() -> None:
    store = DocumentStore()

    def _writer(index: int) -> None:
        for revision in range(200):
            store.replace(f"file:///{index}.eml", f"revision {revision}")

    threads = [Thread(target=_writer, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 8
    assert all(store.get(f"file:///{index}.eml") == "revision 199" for index in range(8))

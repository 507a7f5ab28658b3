from extraction.pipeline import ExtractionConfig, ExtractionPipeline
from extraction.session import ExtractionSession, Notification, is_pdf_file


def _session(**config):
    received = []
    config.setdefault("disable_tqdm", True)
    session = ExtractionSession(
        ExtractionPipeline(ExtractionConfig(**config)), notify=received.append
    )
    return session, received


def test_is_pdf_file():
    assert is_pdf_file("a.PDF")
    assert not is_pdf_file("a.txt")
    assert is_pdf_file("upload.bin", "application/pdf")
    assert not is_pdf_file("a.pdf", "text/plain")


def test_handle_file_success(sample_pdf):
    session, received = _session()
    assert session.initialize()

    assert session.handle_file(sample_pdf, "application/pdf")
    assert session.extracted_text == "First page\n\nSecond page"
    assert not session.is_loading
    assert received == []


def test_rejects_non_pdf(tmp_path):
    session, received = _session()
    session.initialize()

    assert not session.handle_file(tmp_path / "notes.txt")
    assert received == [Notification("Error", "Please upload a PDF file", "error")]


def test_engine_not_loaded(sample_pdf):
    session, received = _session()

    assert not session.handle_file(sample_pdf)
    assert received[0].message == "PDF library not loaded yet. Please try again."


def test_engine_load_failure_notifies():
    session, received = _session(engine="missing")

    assert not session.initialize()
    assert received == [Notification("Error", "Failed to load PDF library", "error")]


def test_extraction_failure_notifies_and_clears_loading(tmp_path):
    bad = tmp_path / "broken.pdf"
    bad.write_bytes(b"garbage")
    session, received = _session()
    session.initialize()
    session.extracted_text = "stale"

    assert not session.handle_file(bad)
    assert session.extracted_text == ""
    assert not session.is_loading
    assert received[0].variant == "error"
    assert received[0].message.startswith("Failed to extract text from PDF. ")


def test_loading_flag_set_during_extraction(sample_pdf):
    seen = []

    class Pipeline(ExtractionPipeline):
        def extract(self, pdf_path, cancel_event=None):
            seen.append(session.is_loading)
            return super().extract(pdf_path, cancel_event)

    session = ExtractionSession(Pipeline(ExtractionConfig(disable_tqdm=True)))
    session.initialize()
    session.handle_file(sample_pdf)

    assert seen == [True]
    assert not session.is_loading

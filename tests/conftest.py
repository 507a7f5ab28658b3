import fitz
import pytest

from core.page.models import TextContent, TextItem, Viewport


class FakePage:
    def __init__(self, width, height, items, fail_content=False):
        self.width = width
        self.height = height
        self.items = items
        self.fail_content = fail_content

    def get_viewport(self, scale=1.0):
        return Viewport(self.width * scale, self.height * scale, scale)

    def get_text_content(self):
        if self.fail_content:
            raise RuntimeError("text content unavailable")
        return TextContent(items=list(self.items))


class FakeDocument:
    """In-memory stand-in for an engine document; records page fetches."""

    def __init__(self, pages, fail_on=None):
        self.pages = pages
        self.fail_on = fail_on
        self.fetched = []
        self.closed = False

    @property
    def page_count(self):
        return len(self.pages)

    def get_page(self, index):
        self.fetched.append(index)
        if index == self.fail_on:
            raise RuntimeError("boom")
        return self.pages[index - 1]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def build_pdf(pages, **save_options) -> bytes:
    """
    Build a PDF in memory.

    *pages* is a list of ``(width, height, [(x, y, text, fontsize), ...])``
    where ``(x, y)`` is the baseline origin measured from the top-left.
    """
    doc = fitz.open()
    for width, height, lines in pages:
        page = doc.new_page(width=width, height=height)
        for x, y, text, size in lines:
            page.insert_text((x, y), text, fontsize=size, fontname="helv")
    data = doc.tobytes(**save_options)
    doc.close()
    return data


@pytest.fixture
def two_page_document():
    return FakeDocument(
        [
            FakePage(
                612,
                792,
                [TextItem("Hello", (12, 0, 0, 12, 10, 780), "Helvetica")],
            ),
            FakePage(
                400,
                500,
                [TextItem("World", (10, 0, 0, 10, 5, 100), "Times-Roman")],
            ),
        ]
    )


@pytest.fixture
def sample_pdf_bytes():
    return build_pdf(
        [
            (612, 792, [(72, 100, "First page", 12)]),
            (300, 400, [(20, 50, "Second page", 10)]),
        ]
    )


@pytest.fixture
def sample_pdf(tmp_path, sample_pdf_bytes):
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path

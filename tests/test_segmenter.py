from mail_reflow.services.segmenter import format_document, split_document
from mail_reflow.services.text_lines import split_lines

DOCUMENTS = [
    "",
    "Subject: x\n\nHi there\n--\nBob\n",
    "no blank line at all\nstill header\n",
    "From: a@example.org\n\nbody only\n\n> quoted\n",
    "--\n\nbody after header delimiter\n-- \nsig\n--\nmore sig\n",
    "Subject: crlf\r\n\r\nbody\r\n",
    "\n\n\n",
]


def test_split_document_sections() -> None:
    sections = split_document("Subject: x\n\nHi there\n--\nBob\n")

    assert sections.header_text == "Subject: x\n\n"
    assert sections.body_text == "Hi there\n"
    assert sections.signature_text == "--\nBob\n"


def test_split_document_without_blank_line_is_all_header() -> None:
    sections = split_document("Subject: x\nFrom: y\n")

    assert sections.header == ["Subject: x", "From: y"]
    assert sections.body == []
    assert sections.signature == []


def test_split_document_without_signature_is_all_body() -> None:
    sections = split_document("Subject: x\n\none\n---\ntwo\n--  \n")

    assert sections.body == ["one", "---", "two", "--  "]
    assert sections.signature == []


def test_split_document_accepts_trailing_space_delimiter() -> None:
    sections = split_document("Subject: x\n\nbody\n-- \nBob\n")

    assert sections.signature == ["-- ", "Bob"]


def test_split_document_ignores_delimiter_inside_header() -> None:
    sections = split_document("--\n\nbody\n")

    assert sections.header == ["--", ""]
    assert sections.body == ["body"]


def test_split_document_covers_every_line() -> None:
    for document in DOCUMENTS:
        assert split_document(document).lines() == split_lines(document)


def test_format_document_only_rewraps_body() -> None:
    long_header = "Subject: " + " ".join(["word"] * 30)
    long_signature = "Bob " + " ".join(["title"] * 30)
    document = f"{long_header}\n\nHi\nthere\n> quoted\n> text\n--\n{long_signature}\n"

    assert format_document(document) == (
        f"{long_header}\n\nHi there\n> quoted text\n--\n{long_signature}\n"
    )


def test_format_document_uses_width() -> None:
    document = "Subject: x\n\n> aaaa bbbb cccc\n"

    assert format_document(document, 12) == "Subject: x\n\n> aaaa bbbb\n> cccc\n"

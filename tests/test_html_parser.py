# File: tests/test_html_parser.py
from page_harvester.parser import extract_text
from page_harvester.utils import sanitize_text


def test_extract_title_and_body():
    html = """
    <html>
      <head><title> My   Page </title><style>body { color: red }</style></head>
      <body>
        <h1>Header</h1>
        <script>var hidden = 1;</script>
        <p>First
           paragraph</p>
        <style>.x {}</style>
      </body>
    </html>
    """
    extracted = extract_text(html)
    assert sanitize_text(extracted.title) == "My Page"
    body = sanitize_text(extracted.body_text)
    assert body == "Header First paragraph"
    assert "hidden" not in body
    assert "color" not in body


def test_missing_title_gives_empty_string():
    extracted = extract_text("<html><body><p>text</p></body></html>")
    assert extracted.title == ""
    assert sanitize_text(extracted.body_text) == "text"


def test_fragment_without_body():
    extracted = extract_text("<p>just</p><p>a fragment</p>")
    assert sanitize_text(extracted.body_text) == "just a fragment"

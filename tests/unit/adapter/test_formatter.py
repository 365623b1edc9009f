"""Unit tests for BasicFormatter."""

from doccomments.adapter.formatter import BasicFormatter


class TestBasicFormatter:
    """Tests for BasicFormatter.render."""

    def test_escapes_markup(self):
        html = BasicFormatter().render('<script>alert("x")</script>')

        assert html == "<p>&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;</p>"

    def test_blank_lines_separate_paragraphs(self):
        html = BasicFormatter().render("first\n\nsecond\r\nline")

        assert html == "<p>first</p>\n<p>second<br>\nline</p>"

    def test_links_urls_without_trailing_punctuation(self):
        html = BasicFormatter().render("See http://docs.example.com/api.")

        assert html == (
            '<p>See <a href="http://docs.example.com/api" rel="nofollow">'
            "http://docs.example.com/api</a>.</p>"
        )

    def test_same_input_same_output(self):
        formatter = BasicFormatter()

        assert formatter.render("a\nb") == formatter.render("a\nb")

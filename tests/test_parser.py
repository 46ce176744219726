"""Tests for rendering.parser."""

from rendering.parser import markdown_to_html


class TestMarkdownToHtml:
    def test_heading(self):
        assert markdown_to_html("# Hello") == "<h1>Hello</h1>\n"

    def test_strikethrough(self):
        result = markdown_to_html("~~strike~~")
        assert "<s>strike</s>" in result or "<del>strike</del>" in result

    def test_commonmark_emphasis_and_lists(self):
        result = markdown_to_html("*a* **b**\n\n1. one\n2. two\n")
        assert "<em>a</em>" in result
        assert "<strong>b</strong>" in result
        assert "<ol>" in result

    def test_arbitrary_text_does_not_fail(self):
        noisy = "]]][[(( **unclosed `tick ~~ <div \x00 ☃\n" * 5
        assert isinstance(markdown_to_html(noisy), str)

    def test_empty_input(self):
        assert markdown_to_html("") == ""

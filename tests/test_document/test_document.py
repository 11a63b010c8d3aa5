"""Tests for tag scanning and document rewriting."""

import logging

import pytest

from twformat.document import (
    apply_edits,
    dominant_newline,
    find_class_tags,
    format_document,
    format_text,
    line_indent,
    rebuild_tag,
)
from twformat.model import ClassTag, FormatConfig, TextEdit


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


class TestFindClassTags:
    def test_html_class_attribute(self):
        text = '<div id="main" class="flex p-4" data-x="1">'
        tags = find_class_tags(text)
        assert tags == [
            ClassTag(
                start=0,
                end=len(text),
                tag_name="div",
                before=' id="main" ',
                attribute="class",
                quote='"',
                value="flex p-4",
                after=' data-x="1"',
            )
        ]

    def test_jsx_class_name_single_quotes(self):
        tags = find_class_tags("<Button className='px-2 sm:px-4' onClick={go}>")
        assert len(tags) == 1
        tag = tags[0]
        assert tag.tag_name == "Button"
        assert tag.attribute == "className"
        assert tag.quote == "'"
        assert tag.value == "px-2 sm:px-4"
        assert tag.after == " onClick={go}"

    def test_multiple_tags_in_order(self):
        text = '<p class="a">x</p>\n<span class="b c">y</span>'
        tags = find_class_tags(text)
        assert [t.value for t in tags] == ["a", "b c"]
        assert [text[t.start:t.end] for t in tags] == ['<p class="a">', '<span class="b c">']

    def test_tags_without_class_are_ignored(self):
        assert find_class_tags('<div id="x"><p>text</p></div>') == []

    def test_empty_class_value_is_ignored(self):
        assert find_class_tags('<div class="">') == []


class TestLineIndent:
    def test_first_line(self):
        assert line_indent('<div class="x">', 0) == ""

    def test_spaces(self):
        text = '<body>\n    <p class="x">'
        assert line_indent(text, text.index("<p")) == "    "

    def test_tabs(self):
        text = '<body>\n\t\t<p class="x">'
        assert line_indent(text, text.index("<p")) == "\t\t"


# ---------------------------------------------------------------------------
# Rebuilding
# ---------------------------------------------------------------------------


class TestRebuildTag:
    def test_attributes_each_on_own_line(self):
        tag = find_class_tags('<div id="main" class="flex p-4" data-x="1">')[0]
        result = rebuild_tag(tag, "\n    flex\n    p-4\n  ", "", "  ")
        assert result == '<div\n  id="main"\n  class="\n    flex\n    p-4\n  "\n  data-x="1"\n>'

    def test_preserves_spelling_and_quote(self):
        tag = find_class_tags("<Card className='p-4'>")[0]
        result = rebuild_tag(tag, "\n    p-4\n  ", "", "  ")
        assert result == "<Card\n  className='\n    p-4\n  '\n>"

    def test_no_surrounding_attributes(self):
        tag = find_class_tags('<a class="underline">')[0]
        assert rebuild_tag(tag, "X", "  ", "    ") == '<a\n    class="X"\n  >'


# ---------------------------------------------------------------------------
# format_document / format_text
# ---------------------------------------------------------------------------


class TestFormatDocument:
    def test_single_tag_edit(self):
        text = '<div class="p-4 flex">'
        edits = format_document(text)
        assert edits == [
            TextEdit(start=0, end=len(text), new_text='<div\n  class="\n    flex\n    p-4\n  "\n>')
        ]

    def test_indented_tag(self):
        text = '<body>\n  <div class="flex p-4">hi</div>\n</body>\n'
        assert format_text(text) == (
            '<body>\n  <div\n    class="\n      flex\n      p-4\n    "\n  >hi</div>\n</body>\n'
        )

    def test_close_quote_on_same_line(self):
        config = FormatConfig(close_quote_on_new_line=False)
        assert format_text('<div class="flex p-4">', config) == '<div\n  class="\n    flex\n    p-4"\n>'

    def test_unbounded_width(self):
        config = FormatConfig(max_line_width=0)
        result = format_text('<div class="flex items-center">', config)
        assert result == '<div\n  class="\n    flex\n    items-center\n  "\n>'

    def test_multiple_tags(self):
        text = '<ul class="flex">\n  <li class="p-2">a</li>\n</ul>'
        edits = format_document(text)
        assert len(edits) == 2
        result = format_text(text)
        assert '<ul\n  class="\n    flex\n  "\n>' in result
        assert '  <li\n    class="\n      p-2\n    "\n  >a</li>' in result

    def test_no_tags_no_edits(self):
        assert format_document("plain text") == []

    @pytest.mark.parametrize(
        "text",
        [
            '<div id="main" class="p-4 flex md:p-8 bg-white" data-x="1">',
            "<section>\n    <Card className='text-sm font-bold sm:text-lg shadow' key={id}>\n</section>",
            '<div class="flex items-center justify-between overflow-hidden p-4 m-2"></div>',
        ],
    )
    def test_formatting_is_idempotent(self, text):
        once = format_text(text)
        assert format_document(once) == []
        assert format_text(once) == once

    def test_logs_edit_count(self, caplog):
        with caplog.at_level(logging.INFO, logger="twformat.document.rewriter"):
            format_document('<div class="flex p-4">')
        assert "Found 1 edit(s)" in caplog.text


class TestApplyEdits:
    def test_out_of_order_edits(self):
        edits = [TextEdit(start=4, end=5, new_text="X"), TextEdit(start=0, end=1, new_text="YY")]
        assert apply_edits("abcdef", edits) == "YYbcdXf"

    def test_no_edits(self):
        assert apply_edits("abc", []) == "abc"


class TestLineEndings:
    def test_dominant_newline(self):
        assert dominant_newline("a\r\nb\r\nc\n") == "\r\n"
        assert dominant_newline("a\nb\nc\r\n") == "\n"
        assert dominant_newline("no breaks") == "\n"

    def test_crlf_document_keeps_crlf(self):
        text = '<body>\r\n<p>untouched</p>\r\n<div class="p-4 flex">\r\n</body>\r\n'
        assert format_text(text) == (
            '<body>\r\n<p>untouched</p>\r\n'
            '<div\r\n  class="\r\n    flex\r\n    p-4\r\n  "\r\n>\r\n'
            "</body>\r\n"
        )

    def test_crlf_formatting_is_idempotent(self):
        once = format_text('<div id="a" class="p-4 flex md:p-8">\r\n<span class="m-2">x</span>\r\n')
        assert format_document(once) == []

    def test_rebuild_tag_newline(self):
        tag = find_class_tags('<a class="underline">')[0]
        assert rebuild_tag(tag, "X", "", "  ", "\r\n") == '<a\r\n  class="X"\r\n>'

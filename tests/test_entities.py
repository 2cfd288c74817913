import unittest

from domserializer.entities import encode_xml, escape_attribute, escape_quotes, escape_text


class TestEncodeXML(unittest.TestCase):
    def test_reserved_characters(self):
        assert encode_xml("<a href='x'>&\"</a>") == "&lt;a href=&apos;x&apos;&gt;&amp;&quot;&lt;/a&gt;"

    def test_plain_ascii_is_unchanged(self):
        text = "Hello, world! (1 + 2 = 3) #t /path?q=1;"
        assert encode_xml(text) == text

    def test_non_ascii_uses_hex_references(self):
        assert encode_xml("\xe9\xa0\u2014") == "&#xe9;&#xa0;&#x2014;"

    def test_astral_characters_are_single_references(self):
        assert encode_xml("\U0001f600") == "&#x1f600;"

    def test_control_range_above_ascii(self):
        assert encode_xml("\x7f\x80") == "\x7f&#x80;"

    def test_existing_references_are_encoded_again(self):
        assert encode_xml("&amp;") == "&amp;amp;"

    def test_empty(self):
        assert encode_xml("") == ""


class TestHTMLEscaping(unittest.TestCase):
    def test_escape_attribute(self):
        assert escape_attribute('a & "b" <c>') == "a &amp; &quot;b&quot; <c>"

    def test_escape_attribute_keeps_non_ascii_and_single_quotes(self):
        assert escape_attribute("caf\xe9 'x'") == "caf\xe9 'x'"

    def test_escape_attribute_non_breaking_space(self):
        assert escape_attribute("a\xa0b") == "a&nbsp;b"

    def test_escape_text(self):
        assert escape_text('a & "b" <c>') == 'a &amp; "b" &lt;c&gt;'

    def test_escape_text_non_breaking_space(self):
        assert escape_text("\xa0\xe9") == "&nbsp;\xe9"

    def test_empty_values(self):
        assert escape_attribute("") == ""
        assert escape_text("") == ""

    def test_escape_quotes_only(self):
        assert escape_quotes('a & "b" <c>') == "a & &quot;b&quot; <c>"

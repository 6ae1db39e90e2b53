"""Tests for rendering documentation markup as HTML."""

import pytest

from xmlcomment.element_kind import ElementKind
from xmlcomment.errors import MalformedCommentError
from xmlcomment.format_comment import HANDLERS, format_comment

IF_URL = (
    "https://learn.microsoft.com/dotnet/csharp/language-reference/"
    "statements/selection-statements#the-if-statement"
)


def resolve_cref(cref: str) -> tuple[str, str | None]:
    """Resolve a handful of well-known ids, echo everything else unresolved."""
    known = {
        "T:System.Int32": ("int", "https://learn.microsoft.com/dotnet/api/system.int32"),
        "T:Calc": ("Calc", None),
    }
    return known.get(cref, (cref, None))


def test_basic() -> None:
    """Verify plain text and paragraphs."""
    assert format_comment("A") == "A"
    assert format_comment("<para>a</para>") == "<p>a</p>"
    assert format_comment("") == ""


def test_note() -> None:
    """Verify the note type selects both css class and header."""
    assert format_comment("<note>a</note>") == '<div class="note"><h5>note</h5>a</div>'
    assert (
        format_comment('<note type="warning">a</note>')
        == '<div class="warning"><h5>warning</h5>a</div>'
    )
    assert (
        format_comment('<note type="tips">a</note>') == '<div class="tips"><h5>tips</h5>a</div>'
    )


def test_text_is_escaped() -> None:
    """Verify leaf text is HTML-escaped but apostrophes stay readable."""
    assert format_comment("a &lt; b &amp;&amp; c > d") == "a &lt; b &amp;&amp; c &gt; d"
    assert format_comment("Foo's") == "Foo's"
    assert format_comment("<![CDATA[<b>]]>") == "&lt;b&gt;"


def test_term_and_description() -> None:
    """Verify term spans and unwrapped descriptions."""
    assert (
        format_comment("<term>a</term><description>b</description>")
        == '<span class="term">a</span>b'
    )


def test_unknown_tags_pass_through() -> None:
    """Verify unknown tags keep their name and drop their attributes."""
    assert format_comment("loose <i>not</i> wrapped") == "loose <i>not</i> wrapped"
    assert format_comment('<b class="x">y</b>') == "<b>y</b>"
    assert format_comment("<br/>") == "<br></br>"


def test_param_ref() -> None:
    """Verify paramref and typeparamref render the name or their children."""
    assert format_comment('<paramref name="arg"/>') == "<c>arg</c>"
    assert format_comment('<typeparamref name="T"/>') == "<c>T</c>"
    assert format_comment('<paramref name="arg">the arg</paramref>') == "<c>the arg</c>"
    assert format_comment('<paramref name="a&lt;b"/>') == "<c>a&lt;b</c>"
    assert format_comment("<paramref/>") == "<c></c>"


def test_see_href() -> None:
    """Verify href links use the children or the href as text."""
    assert (
        format_comment('<see href="https://example.org"/>')
        == '<a href="https://example.org">https://example.org</a>'
    )
    assert (
        format_comment('<see href="https://example.org">example</see>')
        == '<a href="https://example.org">example</a>'
    )
    assert (
        format_comment('<seealso href="https://example.org?a=1&amp;b=2"/>')
        == '<a href="https://example.org?a=1&amp;b=2">https://example.org?a=1&amp;b=2</a>'
    )


def test_see_href_wins() -> None:
    """Verify href takes precedence over cref and langword on the same element."""
    out = format_comment(
        '<see href="https://example.org" cref="T:System.Int32" langword="if"/>', resolve_cref
    )
    assert out == '<a href="https://example.org">https://example.org</a>'


def test_see_empty_href_is_ignored() -> None:
    """Verify an empty href falls through to the other rules."""
    assert format_comment('<see href="" langword="if"/>') == f'<a href="{IF_URL}">if</a>'


def test_see_langword() -> None:
    """Verify langword links and the code fallback for unknown keywords."""
    assert format_comment('<see langword="if" />') == f'<a href="{IF_URL}">if</a>'
    assert format_comment('<see langword="if">my if</see>') == f'<a href="{IF_URL}">my if</a>'
    assert format_comment('<see langword="undefined-langword" />') == "<c>undefined-langword</c>"
    assert format_comment('<see langword="undefined-langword">my</see>') == "<c>my</c>"


def test_see_langword_custom_table() -> None:
    """Verify a supplied keyword table replaces the built-in one."""
    table = {"null": "https://example.org/null"}.get
    assert (
        format_comment('<see langword="null"/>', resolve_langword=table)
        == '<a href="https://example.org/null">null</a>'
    )
    assert format_comment('<see langword="if"/>', resolve_langword=table) == "<c>if</c>"


def test_seealso_ignores_langword() -> None:
    """Verify langword only applies to see, not seealso."""
    assert format_comment('<seealso langword="if"/>') == ""


def test_see_cref() -> None:
    """Verify resolved crefs become links and unresolved ones code spans."""
    assert (
        format_comment('<see cref="T:System.Int32"/>', resolve_cref)
        == '<a class="xref" href="https://learn.microsoft.com/dotnet/api/system.int32">int</a>'
    )
    assert (
        format_comment('<see cref="T:System.Int32">Integer</see>', resolve_cref)
        == '<a class="xref" href="https://learn.microsoft.com/dotnet/api/system.int32">Integer</a>'
    )
    assert format_comment('<see cref="T:Calc"/>', resolve_cref) == '<c class="xref">Calc</c>'
    assert (
        format_comment('<see cref="System.Int">int</see>', resolve_cref)
        == '<c class="xref">int</c>'
    )


def test_see_cref_without_resolver() -> None:
    """Verify a cref renders nothing when no resolver is supplied."""
    assert format_comment('before<see cref="T:System.Int32"/>after') == "beforeafter"
    assert format_comment("<see/>") == ""


def test_see_external_reference_marker() -> None:
    """Verify the !: marker is stripped and the resolver is never consulted."""

    def fail(cref: str) -> tuple[str, str | None]:
        raise AssertionError(cref)

    expected = '<c class="xref">http://google.com</c>'
    assert format_comment('<see cref="!:http://google.com"/>') == expected
    assert format_comment('<seealso cref="!:http://google.com"/>', fail) == expected
    assert format_comment('<see cref="!:x">ABCS</see>', fail) == '<c class="xref">ABCS</c>'


def test_code_inline() -> None:
    """Verify inline code blocks default to C#."""
    assert (
        format_comment("<code>if (a &lt; b) {}</code>")
        == '<pre><code class="lang-csharp">if (a &lt; b) {}</code></pre>'
    )
    assert format_comment("<code></code>") == '<pre><code class="lang-csharp"></code></pre>'


def test_code_source_region() -> None:
    """Verify code loaded from a source file is cut to its region and escaped."""
    example = "\n".join(
        [
            "using System;",
            "",
            "namespace Example",
            "{",
            "#region Example",
            "    static class Program",
            "    {",
            '        public string Hello() => "<hi>";',
            "    }",
            "#endregion",
            "}",
        ]
    )
    out = format_comment(
        "<code source='Example.cs' region='Example'/>", resolve_code=lambda _: example
    )
    assert out == (
        '<pre><code class="lang-cs">static class Program\n'
        "{\n"
        "    public string Hello() =&gt; &quot;&lt;hi&gt;&quot;;\n"
        "}\n"
        "</code></pre>"
    )


def test_code_source_xaml_region() -> None:
    """Verify XAML sources use HTML comment region markers."""
    example = "\n".join(
        [
            "<UserControl",
            '    x:Class="Examples">',
            "    <UserControl.Resources>",
            "",
            "    <!-- <Example> -->",
            "    <Grid>",
            '      <TextBlock Text="Hello World" />',
            "    </Grid>",
            "    <!-- </Example> -->",
            "</UserControl>",
        ]
    )
    out = format_comment(
        "<code source='Example.xaml' region='Example'/>", resolve_code=lambda _: example
    )
    assert out == (
        '<pre><code class="lang-xaml">&lt;Grid&gt;\n'
        "  &lt;TextBlock Text=&quot;Hello World&quot; /&gt;\n"
        "&lt;/Grid&gt;\n"
        "</code></pre>"
    )


def test_code_source_whole_file() -> None:
    """Verify a source without region is embedded whole."""
    out = format_comment("<code source='run.py'/>", resolve_code=lambda _: "print(1 < 2)\n")
    assert out == '<pre><code class="lang-py">print(1 &lt; 2)\n</code></pre>'


def test_code_source_unavailable() -> None:
    """Verify missing sources and missing loaders render an empty block."""
    assert format_comment("<code source='a.cs'/>") == '<pre><code class="lang-cs"></code></pre>'
    assert (
        format_comment("<code source='a.cs' region='R'/>", resolve_code=lambda _: None)
        == '<pre><code class="lang-cs"></code></pre>'
    )
    assert format_comment("<code source='Makefile'/>", resolve_code=lambda _: "all:") == (
        '<pre><code class="lang-">all:</code></pre>'
    )


def test_bullet_and_number_lists() -> None:
    """Verify lists emit one li per direct item and ignore everything else."""
    assert (
        format_comment("<list><item>a</item> <item>b</item></list>")
        == "<ul><li><item>a</item></li><li><item>b</item></li></ul>"
    )
    assert (
        format_comment('<list type="bullet"><item>a</item><term>x</term></list>')
        == "<ul><li><item>a</item></li></ul>"
    )
    assert (
        format_comment('<list type="number"><item>a</item><item>b</item></list>')
        == "<ol><li><item>a</item></li><li><item>b</item></li></ol>"
    )


def test_nested_lists() -> None:
    """Verify lists nest inside descriptions."""
    raw = (
        '<list type="bullet"><item><description>'
        '<list type="number"><item><description>inner</description></item></list>'
        "</description></item></list>"
    )
    assert format_comment(raw) == (
        "<ul><li><item><ol><li><item>inner</item></li></ol></item></li></ul>"
    )


def test_table() -> None:
    """Verify tables put the header in thead and each item in its own cell."""
    raw = '<list type="table"><listheader>H</listheader><item>A</item><item>B</item></list>'
    assert format_comment(raw) == (
        "<table><thead><tr><td>H</td></tr></thead><tbody><td>A</td><td>B</td></tbody></table>"
    )


def test_table_header_cells() -> None:
    """Verify every child of the header becomes one header cell."""
    raw = (
        '<list type="table"><listheader><term>Name</term><description>Value</description>'
        "</listheader><item><term>a</term></item></list>"
    )
    assert format_comment(raw) == (
        '<table><thead><tr><td><span class="term">Name</span></td><td>Value</td></tr></thead>'
        '<tbody><td><span class="term">a</span></td></tbody></table>'
    )


def test_table_without_header() -> None:
    """Verify a table without listheader has only a body."""
    assert (
        format_comment('<list type="table"><item>A</item></list>')
        == "<table><tbody><td>A</td></tbody></table>"
    )


def test_whitespace_is_preserved() -> None:
    """Verify text layout survives formatting."""
    raw = "\n<para>\n  line one\n  line two\n</para>\n"
    assert format_comment(raw) == "\n<p>\n  line one\n  line two\n</p>\n"


def test_malformed_input() -> None:
    """Verify malformed markup raises a dedicated error carrying the input."""
    with pytest.raises(MalformedCommentError) as info:
        format_comment("<para>a")
    assert info.value.raw_xml == "<para>a"


def test_every_kind_has_a_handler() -> None:
    """Verify the dispatch table covers every element kind."""
    assert set(HANDLERS) == set(ElementKind)

"""Tests for the img/imgcap markdown extension."""
import markdown

from figsite.figure import usage_message
from figsite.markdown_extensions.imgcap import ImgCapExtension, makeExtension


def md(text, **config):
    return markdown.markdown(text, extensions=[ImgCapExtension(**config)])


class TestImgCapExtension:
    """Tags inside markdown documents."""

    def test_figure_block_is_not_wrapped_in_paragraph(self):
        html = md("{% imgcap /images/ninja.png Ninja Attack! %}")

        assert html == ('<figure><img src="/images/ninja.png" title="Ninja Attack!" alt="Ninja Attack!">'
                        '<figcaption>Ninja Attack!</figcaption></figure>')

    def test_inline_image(self):
        html = md("Look at {% img right /images/ninja.png %} this.")

        assert html == '<p>Look at <img class="right" src="/images/ninja.png"> this.</p>'

    def test_figure_between_paragraphs(self):
        html = md("Before.\n\n{% imgcap left half /images/ninja.png 150 150 \"A\" \"B\" %}\n\nAfter.")

        assert "<p>Before.</p>" in html
        assert ('<figure class="left half"><img src="/images/ninja.png" width="150" height="150" '
                'title="A" alt="B"><figcaption>A</figcaption></figure>') in html
        assert "<p>After.</p>" in html

    def test_markdown_is_not_applied_to_the_title(self):
        html = md("{% imgcap /images/ninja.png *Ninja* Attack! %}")

        assert "<figcaption>*Ninja* Attack!</figcaption>" in html

    def test_bad_tag_gives_usage(self):
        html = md("{% imgcap nothing here %}")

        assert usage_message("imgcap") in html

    def test_tag_without_arguments(self):
        html = md("{% img %}")

        assert usage_message("img") in html

    def test_custom_tag_names(self):
        html = md("{% caption /images/ninja.png Ninja %}", figure_tag="caption")

        assert html.startswith("<figure><img src=\"/images/ninja.png\"")

    def test_make_extension(self):
        html = markdown.markdown("{% imgcap /a/b.png %}", extensions=[makeExtension()])

        assert html == '<figure><img src="/a/b.png"><figcaption></figcaption></figure>'

    def test_other_text_untouched(self):
        assert md("Just *text*.") == "<p>Just <em>text</em>.</p>"

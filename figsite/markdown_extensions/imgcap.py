# Markdown extension for the img and imgcap tags
# Supported syntax:
# {% img [class name(s)] [http[s]:/]/path/to/image [width [height]] [title text | "title text" ["alt text"]] %}
# {% imgcap [class name(s)] [http[s]:/]/path/to/image [width [height]] [title text | "title text" ["alt text"]] %}
#
# img writes a bare <img> tag, imgcap wraps it in a <figure> with the title as
# the <figcaption>. The html goes into the raw html stash so markdown leaves it
# alone, and a figure on a line by itself is not wrapped in a paragraph.

import re

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .. import figure
from .. import tagparser


class ImgCapPreprocessor(Preprocessor):
    def __init__(self, md, figure_tag, image_tag):
        super().__init__(md)
        self.figure_tag = figure_tag
        self.image_tag = image_tag
        names = sorted([figure_tag, image_tag], key=len, reverse=True)
        self.tag_re = re.compile(r'\{%\s*(' + "|".join(re.escape(n) for n in names) +
                                 r')(?:\s+(.*?))?\s*%\}')

    def render_tag(self, m):
        tag_name = m.group(1)
        markup = m.group(2) or ""
        if tag_name == self.figure_tag:
            html = figure.render_figure(tagparser.parse_figure(markup), tag_name)
        else:
            html = figure.render_image(tagparser.parse_image(markup), tag_name)
        return self.md.htmlStash.store(html)

    def run(self, lines):
        text = "\n".join(lines)
        text = self.tag_re.sub(self.render_tag, text)
        return text.split("\n")


class ImgCapExtension(Extension):
    """ Extension to turn {% imgcap ... %} tags into captioned figures """
    def __init__(self, **kwargs):
        self.config = {
            "figure_tag": ["imgcap", "Name of the tag that writes a captioned <figure>"],
            "image_tag": ["img", "Name of the tag that writes a bare <img>"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # before html_block so the tags are stashed ahead of raw html handling
        md.preprocessors.register(ImgCapPreprocessor(md,
                                                     self.getConfig("figure_tag"),
                                                     self.getConfig("image_tag")),
                                  "imgcap", 25)


def makeExtension(**kwargs):
    return ImgCapExtension(**kwargs)

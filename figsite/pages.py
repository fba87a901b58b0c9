import html
import json
import logging

import lxml.etree
import lxml.html
import markdown

from .errors import CompileError
from .markdown_extensions import imgcap

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{title}}</title>
</head>
<body>
<article>
<h1>{{title}}</h1>
<p class="author">{{author}}</p>
{{article_content}}
</article>
</body>
</html>
"""


def split_header_contents(text):
    """ Splits the json header from the start of the page and returns
        (metadata, markdown) with the whitespace after the header removed """
    in_quotes = False
    escaped = False
    depth = 0
    end = None
    for pos, c in enumerate(text):
        if in_quotes:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_quotes = False
            continue
        if c == '"':
            in_quotes = True
        elif c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                end = pos + 1
                break
        elif depth == 0 and not c.isspace():
            raise ValueError("page does not start with a json header")

    if end is None:
        raise ValueError("json header is not closed")

    return json.loads(text[:end]), text[end:].lstrip()


def render_markdown(text):
    return markdown.markdown(text, extensions=["fenced_code", imgcap.ImgCapExtension()])


class SourcePage:
    """ A markdown page with a json header, rendered with the imgcap tags """

    def __init__(self, file_name):
        self.file_name = file_name
        self.images = []
        try:
            with open(file_name, encoding="utf-8") as f:
                self.metadata, self.contents = split_header_contents(f.read())
            if "title" not in self.metadata:
                raise ValueError("header has no title")
            self.processed_text = render_markdown(self.contents)
        except (OSError, ValueError) as err:
            raise CompileError(str(err), file_name)
        self.collect_images()

    def title(self):
        return self.metadata["title"]

    def author(self):
        return self.metadata.get("author", "")

    def collect_images(self):
        """ remembers the src of every image on the page """
        if not self.processed_text.strip():
            return
        try:
            elements = lxml.html.fragments_fromstring(self.processed_text)
        except lxml.etree.ParserError as err:
            logger.warning("could not read images from %s: %s", self.file_name, err)
            return

        for e in elements:
            if isinstance(e, str):
                continue
            for i in e.iter("img"):
                src = i.get("src")
                if src:
                    self.images.append(src)


def replace_mustache_tag(html_source, tag, replacement_text, encode=False):
    """ Replaces the tag in the text with (optionally) html escaped replacement """
    if encode:
        return html_source.replace(tag, html.escape(replacement_text, quote=True))
    return html_source.replace(tag, replacement_text)


def render_page(page, template_text=DEFAULT_TEMPLATE):
    html_source = replace_mustache_tag(template_text, "{{title}}", page.title(), encode=True)
    html_source = replace_mustache_tag(html_source, "{{author}}", page.author(), encode=True)
    return replace_mustache_tag(html_source, "{{article_content}}", page.processed_text)

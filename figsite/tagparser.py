# Parses the inline arguments of the img and imgcap tags
# Supported syntax:
#   [class name(s)] [http[s]:/]/path/to/image [width [height]] [title text | "title text" ["alt text"]]
#
# Examples:
#   /images/ninja.png Ninja Attack!
#   left half http://site.com/images/ninja.png Ninja Attack!
#   left half http://site.com/images/ninja.png 150 150 "Ninja Attack!" "Ninja in attack posture"

import logging
import re
from collections import namedtuple

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r'\S+')
NUMERIC_RE = re.compile(r'^\d+$')
QUOTED_RE = re.compile(r'"([^"]*)"')

SCANNING_CLASSES = "scanning_classes"
FOUND_SOURCE = "found_source"
SCANNING_DIMENSIONS = "scanning_dimensions"
SCANNING_TEXT = "scanning_text"


class ImageDescriptor(namedtuple("ImageDescriptor",
                                 ["source", "classes", "width", "height", "title", "alt"])):
    """ Everything needed to write an <img> element """
    __slots__ = ()


class FigureDescriptor(namedtuple("FigureDescriptor", ["classes", "image"])):
    """ A captioned image: the classes belong to the <figure>, not the <img> """
    __slots__ = ()


def looks_like_source(token):
    # covers http:// and https:// as well as absolute and relative paths
    return "/" in token


def is_numeric(token):
    return bool(NUMERIC_RE.match(token))


def parse_title_alt(region):
    """ returns (title, alt) from the text that follows the image dimensions """
    quoted = QUOTED_RE.findall(region)
    if len(quoted) >= 2:
        title, alt = quoted[0], quoted[1]
    elif len(quoted) == 1:
        title, alt = quoted[0], None
    else:
        title, alt = region.strip(), None

    title = title or None
    alt = alt or None
    if title is None:
        title = alt
    if alt is None:
        alt = title
    return title, alt


def parse_image(markup):
    """ parses tag arguments into an ImageDescriptor, or None if there is no image source """
    state = SCANNING_CLASSES
    classes = []
    source = None
    dimensions = []
    region = ""

    for m in TOKEN_RE.finditer(markup or ""):
        token = m.group(0)

        if state == SCANNING_CLASSES:
            if looks_like_source(token):
                source = token
                state = FOUND_SOURCE
            elif is_numeric(token):
                logger.debug("dimension %r before image source in %r", token, markup)
                return None
            else:
                classes.append(token)
            continue

        if state == FOUND_SOURCE:
            state = SCANNING_DIMENSIONS

        if state == SCANNING_DIMENSIONS:
            if is_numeric(token) and len(dimensions) < 2:
                dimensions.append(token)
                continue
            state = SCANNING_TEXT

        # the rest of the markup is opaque text, only scanned for quotes
        region = markup[m.start():]
        break

    if source is None:
        logger.debug("no image source in %r", markup)
        return None

    width = dimensions[0] if len(dimensions) > 0 else None
    height = dimensions[1] if len(dimensions) > 1 else None
    title, alt = parse_title_alt(region)

    return ImageDescriptor(source=source,
                           classes=tuple(classes),
                           width=width,
                           height=height,
                           title=title,
                           alt=alt)


def parse_figure(markup):
    """ parses imgcap arguments, moving the class names onto the figure """
    image = parse_image(markup)
    if image is None:
        return None
    return FigureDescriptor(classes=image.classes, image=image._replace(classes=()))

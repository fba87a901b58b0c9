# Turns parsed tag arguments into html
#    {% imgcap left half /images/ninja.png 150 150 "Ninja Attack!" "Ninja in attack posture" %}
# becomes
#    <figure class="left half">
#        <img src="/images/ninja.png" width="150" height="150" title="Ninja Attack!" alt="Ninja in attack posture">
#        <figcaption>Ninja Attack!</figcaption>
#    </figure>
# (on a single line)
#
# Attribute values are written exactly as given, nothing is html escaped.

USAGE_SYNTAX = "[class name(s)] [http[s]:/]/path/to/image [width [height]] [title text | \"title text\" [\"alt text\"]]"


def usage_message(tag_name):
    """ the text written in place of a tag that could not be parsed """
    return "Error processing input, expected syntax: {% " + tag_name + " " + USAGE_SYNTAX + " %}"


def attributes_text(attributes):
    return " ".join(name + "=\"" + value + "\"" for name, value in attributes if value)


def image_attributes(image):
    return [("src", image.source),
            ("width", image.width),
            ("height", image.height),
            ("title", image.title),
            ("alt", image.alt)]


def render_image(image, tag_name="img"):
    if image is None:
        return usage_message(tag_name)

    attributes = [("class", " ".join(image.classes))] + image_attributes(image)
    return "<img " + attributes_text(attributes) + ">"


def render_figure(figure, tag_name="imgcap"):
    if figure is None:
        return usage_message(tag_name)

    figure_open = "<figure>"
    if figure.classes:
        figure_open = "<figure " + attributes_text([("class", " ".join(figure.classes))]) + ">"

    image = figure.image
    caption = image.title or ""
    return (figure_open +
            "<img " + attributes_text(image_attributes(image)) + ">" +
            "<figcaption>" + caption + "</figcaption>" +
            "</figure>")

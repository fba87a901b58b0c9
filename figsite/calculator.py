# Running pace calculator form
# The form needs a distance input, a time input and a unit selector:
#    <form>
#      <input class="distance"> <input class="time"> <select class="units"></select>
#    </form>
# and somewhere in the same page a results block with one span per unit:
#    <div id="results" style="display: none">
#      <span id="km"></span> <span id="miles"></span> <span id="kph"></span> ...
#    </div>
# Any change recalculates everything. The results block is revealed first,
# then each span is faded out, given its new text and faded back in.

import logging
import re

import lxml.etree
import lxml.html

from . import pace
from .errors import FormError
from .units import DEFAULT_UNITS

logger = logging.getLogger(__name__)

DIGITS_ONLY_RE = re.compile(r'^\d+$')
DISPLAY_NONE_RE = re.compile(r'display\s*:\s*none\s*;?', re.IGNORECASE)


class StyleEffects:
    """ Shows and hides elements through their inline style, all transitions finish immediately """

    def is_hidden(self, element):
        if element.get("hidden") is not None:
            return True
        return bool(DISPLAY_NONE_RE.search(element.get("style", "")))

    def show(self, element):
        if "hidden" in element.attrib:
            del element.attrib["hidden"]
        style = DISPLAY_NONE_RE.sub("", element.get("style", "")).strip()
        if style:
            element.set("style", style)
        elif "style" in element.attrib:
            del element.attrib["style"]

    def hide(self, element):
        if self.is_hidden(element):
            return
        style = element.get("style", "").strip()
        if style and not style.endswith(";"):
            style += ";"
        element.set("style", (style + " display: none").strip())

    def slide_down(self, element):
        self.show(element)

    def fade_out(self, element):
        self.hide(element)

    def fade_in(self, element):
        self.show(element)


def find_control(form, tag, class_name):
    for element in form.find_class(class_name):
        if element.tag == tag:
            return element
    raise FormError("Calculator form has no " + tag + "." + class_name)


def option_value(option):
    """ the value attribute, or the trimmed text the way a browser reads it """
    value = option.get("value")
    if value is None:
        return (option.text or "").strip()
    return value


def normalize_time(text):
    """ a bare number of minutes like "45" becomes "45:00" """
    if text and DIGITS_ONLY_RE.match(text):
        return text + ":00"
    return text


class PaceCalculator:
    def __init__(self, form, config=DEFAULT_UNITS, effects=None):
        self.form = form
        self.config = config
        self.effects = effects if effects is not None else StyleEffects()

        self.distance_input = find_control(form, "input", "distance")
        self.time_input = find_control(form, "input", "time")
        self.unit_select = find_control(form, "select", "units")

        results = form.getroottree().xpath('//*[@id="results"]')
        if not results:
            raise FormError("Calculator page has no #results element")
        self.results = results[0]

    def populate_units(self):
        """ adds an <option> for every input unit the selector doesn't already offer """
        offered = [option_value(o) for o in self.unit_select.iter("option")]
        for unit in self.config.input_units:
            if unit in offered:
                continue
            option = lxml.etree.SubElement(self.unit_select, "option", value=unit)
            option.text = unit

    def distance(self):
        return self.distance_input.get("value")

    def time(self):
        return self.time_input.get("value")

    def unit(self):
        options = list(self.unit_select.iter("option"))
        for o in options:
            if o.get("selected") is not None:
                return option_value(o)
        # like a browser, nothing selected means the first option
        if options:
            return option_value(options[0])
        return None

    def distance_changed(self, value):
        self.distance_input.set("value", value)
        return self.handle_input_change()

    def time_changed(self, value):
        self.time_input.set("value", normalize_time(value))
        return self.handle_input_change()

    def unit_changed(self, value):
        options = list(self.unit_select.iter("option"))
        if value not in [option_value(o) for o in options]:
            raise FormError("Unit selector has no option for " + str(value))
        for o in options:
            if option_value(o) == value:
                o.set("selected", "selected")
            elif "selected" in o.attrib:
                del o.attrib["selected"]
        return self.handle_input_change()

    def handle_input_change(self):
        distance = self.distance()
        unit = self.unit()
        time = self.time()
        if not (distance and unit and time):
            return None

        result = pace.convert(distance, unit, time, self.config)
        if result is None:
            logger.debug("nothing to show for %r %r in %r", distance, unit, time)
            return None

        self.ensure_results_visible()
        self.update(result)
        return result

    def ensure_results_visible(self):
        if self.effects.is_hidden(self.results):
            self.effects.slide_down(self.results)

    def slot(self, unit):
        spans = self.results.xpath('.//span[@id=$unit]', unit=unit)
        if spans:
            return spans[0]
        return None

    def update(self, result):
        for values in (result.distances, result.speeds):
            for unit, text in values.items():
                span = self.slot(unit)
                if span is None:
                    logger.debug("no result slot for %s", unit)
                    continue
                self.effects.fade_out(span)
                for child in list(span):
                    span.remove(child)
                span.text = text
                self.effects.fade_in(span)


def load_form_page(html_text):
    """ parses a page and returns (document, first form holding the calculator inputs) """
    document = lxml.html.document_fromstring(html_text)
    for form in document.iter("form"):
        if form.find_class("distance"):
            return document, form
    raise FormError("Page has no calculator form")

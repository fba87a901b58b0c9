# Running pace conversions
# Distances are converted to meters and times to seconds, everything else is
# worked out from meters per second. Bad or missing input gives None, callers
# treat that as "nothing to show" rather than zero.

import math
import re
from collections import namedtuple

from .units import DEFAULT_UNITS

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0

SPEED_UNIT_RE = re.compile(r'ph$')

ConversionResult = namedtuple("ConversionResult", ["distances", "speeds"])


def parse_number(text):
    if text is None:
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def is_speed_unit(unit_name):
    """ kph and mph are speeds, everything else is a pace """
    return bool(SPEED_UNIT_RE.search(unit_name))


def distance_to_meters(value, unit, config=DEFAULT_UNITS):
    if not value or not unit:
        return None
    conversion = config.input_conversions.get(unit)
    distance = parse_number(value)
    if conversion is None or distance is None:
        return None
    return distance * conversion


def meters_to_unit(meters, unit, config=DEFAULT_UNITS):
    if not meters or not unit:
        return None
    conversion = config.input_conversions.get(unit)
    if conversion is None:
        return None
    return "%.2f" % (meters / conversion)


def time_string_to_seconds(text):
    """ "SS", "MM:SS" and "H:MM:SS" are all read from the right, empty fields count as zero """
    if not text:
        return None

    components = text.split(":")
    scales = [1.0, SECONDS_PER_MINUTE, SECONDS_PER_HOUR]
    total = 0.0
    for scale in scales:
        if not components:
            break
        component = components.pop().strip()
        if not component:
            continue
        value = parse_number(component)
        if value is None:
            return None
        total += value * scale
    return total


def meters_per_second(distance, unit, time, config=DEFAULT_UNITS):
    if not distance or not unit or not time:
        return None
    meters = distance_to_meters(distance, unit, config)
    seconds = time_string_to_seconds(time)
    if meters is None or not seconds:
        return None
    return meters / seconds


def meters_per_second_to_speed(mps, unit, config=DEFAULT_UNITS):
    conversion = config.output_conversions.get(unit)
    if mps is None or conversion is None:
        return None
    return "%.2f" % (mps * conversion)


def meters_per_second_to_pace(mps, unit, config=DEFAULT_UNITS):
    conversion = config.output_conversions.get(unit)
    if mps is None or mps <= 0 or conversion is None:
        return None

    minutes = conversion / mps
    whole_minutes = int(math.floor(minutes))
    # half up, the way a stopwatch reads
    whole_seconds = int(math.floor((minutes - whole_minutes) * SECONDS_PER_MINUTE + 0.5))
    if whole_seconds == 60:
        whole_minutes += 1
        whole_seconds = 0
    return "%d:%02d" % (whole_minutes, whole_seconds)


def format_speed(mps, unit, config=DEFAULT_UNITS):
    if is_speed_unit(unit):
        return meters_per_second_to_speed(mps, unit, config)
    return meters_per_second_to_pace(mps, unit, config)


def convert(distance, unit, time, config=DEFAULT_UNITS):
    """ every distance and speed/pace for one set of inputs, or None if the inputs are incomplete """
    meters = distance_to_meters(distance, unit, config)
    mps = meters_per_second(distance, unit, time, config)
    if not meters or not mps:
        return None

    distances = {}
    for output_unit in config.input_conversions:
        distances[output_unit] = meters_to_unit(meters, output_unit, config)

    speeds = {}
    for output_unit in config.output_conversions:
        speeds[output_unit] = format_speed(mps, output_unit, config)

    return ConversionResult(distances=distances, speeds=speeds)

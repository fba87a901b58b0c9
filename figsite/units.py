import os.path
import json
import types

from .errors import ConfigError

METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34
SECONDS_PER_MINUTE = 60.0

class UnitConfig:
  """ Units the calculator understands and how they relate to meters and seconds.
      input_conversions are meters per unit, output_conversions turn meters per
      second into speed units (kph, mph) or minutes per distance (pace units) """

  def __init__(self, input_units, input_conversions, output_conversions):
    self._input_units = tuple(input_units)
    self._input_conversions = types.MappingProxyType(dict(input_conversions))
    self._output_conversions = types.MappingProxyType(dict(output_conversions))

    for unit in self._input_units:
      if not isinstance(unit, str):
        raise ConfigError("Input unit names must be strings : " + repr(unit))
      if unit not in self._input_conversions:
        raise ConfigError("Input unit has no conversion : " + unit)

    for conversions in (self._input_conversions, self._output_conversions):
      for unit, factor in conversions.items():
        if not factor > 0:
          raise ConfigError("Conversion for " + str(unit) + " must be greater than zero")

  @property
  def input_units(self):
    return self._input_units

  @property
  def input_conversions(self):
    return self._input_conversions

  @property
  def output_conversions(self):
    return self._output_conversions

  def replace(self, input_units=None, input_conversions=None, output_conversions=None):
    if input_units is None:
      input_units = self.input_units
    if input_conversions is None:
      input_conversions = self.input_conversions
    if output_conversions is None:
      output_conversions = self.output_conversions
    return UnitConfig(input_units, input_conversions, output_conversions)

  def __eq__(self, other):
    if not isinstance(other, UnitConfig):
      return NotImplemented
    return (self.input_units == other.input_units and
            dict(self.input_conversions) == dict(other.input_conversions) and
            dict(self.output_conversions) == dict(other.output_conversions))

  def __hash__(self):
    return hash(self.input_units)

  def __repr__(self):
    return "UnitConfig(" + repr(self.input_units) + ", " + repr(dict(self.input_conversions)) + \
      ", " + repr(dict(self.output_conversions)) + ")"


DEFAULT_UNITS = UnitConfig(
  input_units=["km", "miles"],
  input_conversions={"km": METERS_PER_KM,
                     "miles": METERS_PER_MILE},
  output_conversions={"kph": 3.6,
                      "mph": 2.23694,
                      "minPerKm": METERS_PER_KM / SECONDS_PER_MINUTE,
                      "minPerMile": METERS_PER_MILE / SECONDS_PER_MINUTE})


def read_conversions(data, key, config_file_name):
  conversions = data.get(key)
  if conversions is None:
    return None
  if not isinstance(conversions, dict):
    raise ConfigError(key + " must be an object : " + config_file_name)

  result = {}
  for unit, factor in conversions.items():
    if isinstance(factor, bool) or not isinstance(factor, (int, float)):
      raise ConfigError("Conversion for " + unit + " is not a number : " + config_file_name)
    if factor <= 0:
      raise ConfigError("Conversion for " + unit + " must be greater than zero : " + config_file_name)
    result[unit] = float(factor)
  return result


def load_unit_config(config_file_name, defaults=DEFAULT_UNITS):
  """ reads a json unit file, anything it leaves out comes from the defaults """
  if not os.path.exists(config_file_name):
    raise ConfigError("No unit config file exists : " + config_file_name)

  try:
    with open(config_file_name, "r", encoding="utf-8") as f:
      data = json.load(f)
  except ValueError as err:
    raise ConfigError("Unit config file is not valid json : " + config_file_name + " (" + str(err) + ")")

  if not isinstance(data, dict):
    raise ConfigError("Unit config must be a json object : " + config_file_name)

  input_units = data.get("input_units")
  if input_units is not None and not isinstance(input_units, list):
    raise ConfigError("input_units must be a list : " + config_file_name)
  if input_units is not None and not all(isinstance(u, str) for u in input_units):
    raise ConfigError("input_units must all be strings : " + config_file_name)

  input_conversions = read_conversions(data, "input_conversions", config_file_name)
  output_conversions = read_conversions(data, "output_conversions", config_file_name)

  if input_conversions is not None and input_units is None:
    input_units = list(input_conversions.keys())

  return defaults.replace(input_units=input_units,
                          input_conversions=input_conversions,
                          output_conversions=output_conversions)

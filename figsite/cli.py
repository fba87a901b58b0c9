# main interface for using figsite
# figsite render - renders a markdown page with img/imgcap tags to html
# figsite pace   - prints distances, speeds and paces for a run
# figsite calc   - fills in the results of a calculator form page
# figsite units  - lists the units the calculator knows about

import argparse
import sys

import lxml.html

from . import calculator
from . import pace
from . import pages
from . import units
from .errors import CommandError, CompileError, ConfigError, FormError


def read_units(args):
  if args.config:
    return units.load_unit_config(args.config)
  return units.DEFAULT_UNITS

def write_output(text, dest):
  if dest:
    with open(dest, "w", encoding="utf-8") as f:
      f.write(text)
    print(dest, "written")
  else:
    sys.stdout.write(text)

def render(args):
  page = pages.SourcePage(args.source)
  template_text = pages.DEFAULT_TEMPLATE
  if args.template:
    with open(args.template, encoding="utf-8") as f:
      template_text = f.read()
  write_output(pages.render_page(page, template_text), args.dest)

def print_pace(args):
  config = read_units(args)
  result = pace.convert(args.distance, args.unit, args.time, config)
  if result is None:
    raise CommandError("Can't work out a pace from " + args.distance + " " + args.unit + " in " + args.time)

  print("Distance:")
  for unit, text in result.distances.items():
    print("   ", text, unit)
  print("Speed and pace:")
  for unit, text in result.speeds.items():
    print("   ", text, unit)

def calc(args):
  config = read_units(args)
  with open(args.page, encoding="utf-8") as f:
    document, form = calculator.load_form_page(f.read())

  calc_form = calculator.PaceCalculator(form, config)
  calc_form.populate_units()
  calc_form.distance_input.set("value", args.distance)
  calc_form.unit_changed(args.unit)
  if calc_form.time_changed(args.time) is None:
    raise CommandError("Can't work out a pace from " + args.distance + " " + args.unit + " in " + args.time)

  write_output(lxml.html.tostring(document, encoding="unicode", doctype="<!DOCTYPE html>"), args.dest)

def print_units(args):
  config = read_units(args)
  print("Input units:")
  for u in config.input_units:
    print("   ", u, "(" + str(config.input_conversions[u]) + " m)")
  print("Output units:")
  for u in config.output_conversions:
    kind = "speed" if pace.is_speed_unit(u) else "pace"
    print("   ", u, "(" + kind + ")")


def make_parser():
  parser = argparse.ArgumentParser(prog="figsite")
  commands = parser.add_subparsers(dest="command", required=True)

  p = commands.add_parser("render", help="Render a markdown page to html")
  p.add_argument("source", help="Markdown file with a json header")
  p.add_argument("--template", help="Html template with {{title}}, {{author}} and {{article_content}}")
  p.add_argument("--dest", help="Output file, stdout if not given")

  p = commands.add_parser("pace", help="Print distances, speeds and paces")
  p.add_argument("distance")
  p.add_argument("unit")
  p.add_argument("time", help="SS, MM:SS or H:MM:SS")
  p.add_argument("--config", help="Json unit config file")

  p = commands.add_parser("calc", help="Fill in a calculator form page")
  p.add_argument("page", help="Html page holding the calculator form")
  p.add_argument("distance")
  p.add_argument("unit")
  p.add_argument("time", help="minutes, MM:SS or H:MM:SS")
  p.add_argument("--config", help="Json unit config file")
  p.add_argument("--dest", help="Output file, stdout if not given")

  p = commands.add_parser("units", help="List the calculator units")
  p.add_argument("--config", help="Json unit config file")
  return parser


def main(argv=None):
  args = make_parser().parse_args(argv)

  try:
    {'render' : render,
     'pace' : print_pace,
     'calc' : calc,
     'units' : print_units}[args.command](args)
  except CompileError as err:
    print("Error in " + err.file_name + ": " + err.message, file=sys.stderr)
    return 1
  except (CommandError, ConfigError, FormError) as err:
    print("Error: " + err.message, file=sys.stderr)
    return 1
  except OSError as err:
    print("Error: " + str(err), file=sys.stderr)
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())

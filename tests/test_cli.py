"""Tests for the figsite command line."""
import json

import lxml.html

from figsite.cli import main

CALCULATOR_PAGE = """<!DOCTYPE html>
<html><body>
<form><input class="distance"><input class="time"><select class="units"></select></form>
<div id="results" style="display: none"><span id="km"></span><span id="miles"></span>
<span id="kph"></span><span id="minPerKm"></span></div>
</body></html>"""


class TestPaceCommand:
    """figsite pace"""

    def test_prints_all_units(self, capsys):
        assert main(["pace", "10", "km", "50:00"]) == 0

        out = capsys.readouterr().out
        assert "10.00 km" in out
        assert "6.21 miles" in out
        assert "12.00 kph" in out
        assert "5:00 minPerKm" in out
        assert "8:03 minPerMile" in out

    def test_bad_input(self, capsys):
        assert main(["pace", "10", "km", "soon"]) == 1
        assert "Can't work out a pace" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / "units.js"
        config.write_text(json.dumps({"output_conversions": {"kph": 3.6}}), encoding="utf-8")

        assert main(["pace", "10", "km", "1:00:00", "--config", str(config)]) == 0
        out = capsys.readouterr().out
        assert "10.00 kph" in out
        assert "mph" not in out

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["pace", "10", "km", "50:00", "--config", str(tmp_path / "none.js")]) == 1
        assert "No unit config file exists" in capsys.readouterr().err


class TestUnitsCommand:
    """figsite units"""

    def test_lists_units(self, capsys):
        assert main(["units"]) == 0

        out = capsys.readouterr().out
        assert "km (1000.0 m)" in out
        assert "kph (speed)" in out
        assert "minPerMile (pace)" in out


class TestRenderCommand:
    """figsite render"""

    def test_render_to_file(self, tmp_path, capsys):
        source = tmp_path / "run.md"
        source.write_text('{"title": "Run", "author": "Sam"}\n\n{% imgcap /images/run.jpg Morning %}\n',
                          encoding="utf-8")
        dest = tmp_path / "run.html"

        assert main(["render", str(source), "--dest", str(dest)]) == 0
        html = dest.read_text(encoding="utf-8")
        assert "<title>Run</title>" in html
        assert "<figcaption>Morning</figcaption>" in html

    def test_render_with_template(self, tmp_path, capsys):
        source = tmp_path / "run.md"
        source.write_text('{"title": "Run"}\nHi', encoding="utf-8")
        template = tmp_path / "page.html"
        template.write_text("[{{title}}]{{article_content}}", encoding="utf-8")

        assert main(["render", str(source), "--template", str(template)]) == 0
        assert capsys.readouterr().out == "[Run]<p>Hi</p>"

    def test_render_error(self, tmp_path, capsys):
        source = tmp_path / "run.md"
        source.write_text("no header", encoding="utf-8")

        assert main(["render", str(source)]) == 1
        assert "Error in " + str(source) in capsys.readouterr().err


class TestCalcCommand:
    """figsite calc"""

    def test_fills_in_results(self, tmp_path, capsys):
        page = tmp_path / "calc.html"
        page.write_text(CALCULATOR_PAGE, encoding="utf-8")
        dest = tmp_path / "out.html"

        assert main(["calc", str(page), "10", "km", "50", "--dest", str(dest)]) == 0

        document = lxml.html.fromstring(dest.read_text(encoding="utf-8"))
        assert document.get_element_by_id("km").text == "10.00"
        assert document.get_element_by_id("kph").text == "12.00"
        assert document.get_element_by_id("minPerKm").text == "5:00"
        assert "display" not in (document.get_element_by_id("results").get("style") or "")

    def test_unknown_unit(self, tmp_path, capsys):
        page = tmp_path / "calc.html"
        page.write_text(CALCULATOR_PAGE, encoding="utf-8")
        dest = tmp_path / "out.html"

        assert main(["calc", str(page), "5", "furlongs", "25:00", "--dest", str(dest)]) == 1
        assert "no option for furlongs" in capsys.readouterr().err
        assert not dest.exists()

    def test_bad_unit_config(self, tmp_path, capsys):
        config = tmp_path / "units.js"
        config.write_text(json.dumps({"input_conversions": {"bad": 0}}), encoding="utf-8")

        assert main(["pace", "5", "bad", "25:00", "--config", str(config)]) == 1
        assert "must be greater than zero" in capsys.readouterr().err

    def test_not_a_calculator_page(self, tmp_path, capsys):
        page = tmp_path / "calc.html"
        page.write_text("<html><body></body></html>", encoding="utf-8")

        assert main(["calc", str(page), "10", "km", "50"]) == 1
        assert "no calculator form" in capsys.readouterr().err

import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from atomlab.cli import app
from atomlab.config import load_config, parse_config

CUSTOM_CONFIG = {
    "reactions": [
        {"id": 10, "product": "NH3", "requirement": {"N": 1, "H": 3}, "equation": "N2 + 3H2 == 2(NH3)"},
        {"id": 4, "product": "H2", "requirement": {"H": 2}},
    ],
    "primary_atoms": [{"reactants": ["N", "H"], "primary": "N"}],
    "elements": {
        "N": {"radius": 0.009, "orbit_radius": 0.014, "color": "blue", "electrons": 5},
        "H": {"radius": 0.005},
    },
}


class TestConfig(unittest.TestCase):
    def test_defaults_when_sections_missing(self):
        config = parse_config({})
        self.assertEqual([t.product for t in config.catalog][:2], ["HCl", "H2O"])
        self.assertEqual(config.equations[1], "2H2 + O2 == 2(H2O)")
        self.assertIn("Na", config.elements)

    def test_custom_tables(self):
        config = parse_config(CUSTOM_CONFIG)
        self.assertEqual([t.product for t in config.catalog], ["NH3", "H2"])
        self.assertEqual(config.equations, {10: "N2 + 3H2 == 2(NH3)"})
        self.assertEqual(config.primary_atoms[frozenset({"N", "H"})], "N")
        self.assertEqual(config.elements["N"].electrons, 5)

        session = config.session()
        for atom in ["N", "H", "H", "H", "H", "H"]:
            self.assertTrue(session.place_atom(atom))
        outcome = session.react()
        self.assertEqual([f.product for f in outcome.firings], ["NH3", "H2"])
        self.assertEqual(outcome.plans[0].anchor, "N")
        self.assertEqual(
            outcome.equation_text.splitlines(),
            ["Reaction Equation(s):", "Unknown Equation", "N2 + 3H2 == 2(NH3)"],
        )

    def test_rejects_bad_entries(self):
        with self.assertRaises(ValueError):
            parse_config({"reactions": [{"id": 1, "product": "X", "requirement": {"H": 0}}]})
        with self.assertRaises(ValueError):
            parse_config({"reactions": [{"product": "X", "requirement": {"H": 1}}]})
        with self.assertRaises(ValueError):
            parse_config({"primary_atoms": [{"reactants": ["H", "O"], "primary": "C"}]})
        with self.assertRaises(ValueError):
            parse_config({"elements": {"H": {"color": "white"}}})
        with self.assertRaises(ValueError):
            parse_config([])

    def test_rejects_wrong_section_types(self):
        for data in (
            {"reactions": None},
            {"reactions": {"id": 1}},
            {"primary_atoms": "H"},
            {"elements": []},
            {"elements": ["H"]},
        ):
            with self.assertRaises(ValueError):
                parse_config(data)

    def test_load_config_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lab.json"
            path.write_text(json.dumps(CUSTOM_CONFIG), encoding="utf-8")
            config = load_config(path)
        self.assertEqual(len(config.catalog), 2)

    def test_load_config_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lab.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_detect(self):
        result = self.runner.invoke(app, ["detect", "H", "H", "O", "H", "H", "O"])
        self.assertEqual(result.exit_code, 0, result.output)
        firings = json.loads(result.output)
        self.assertEqual([f["product"] for f in firings], ["H2O", "H2O"])
        self.assertEqual(firings[0]["requirement"], {"H": 2, "O": 1})

    def test_react(self):
        result = self.runner.invoke(app, ["react", "C", "O", "O", "O"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["equation_ids"], [2])
        self.assertEqual(payload["equations"], "Reaction Equation(s):\nC + O2 == CO2")
        self.assertEqual(payload["plans"][0]["anchor"], "C")
        self.assertEqual(payload["remaining"], {"O": 1})

    def test_react_rejects_unknown_atom(self):
        result = self.runner.invoke(app, ["react", "H", "Xe"])
        self.assertEqual(result.exit_code, 1)

    def test_equations(self):
        result = self.runner.invoke(app, ["equations", "3", "0", "3"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output.splitlines(),
            ["Reaction Equation(s):", "H2 + Cl2 == 2(HCl)", "2Na + Cl2 == 2(NaCl)"],
        )

    def test_catalog(self):
        result = self.runner.invoke(app, ["catalog"])
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertEqual(len(lines), 6)
        self.assertEqual(lines[0], "0\tHCl\tH:1, Cl:1")

    def test_custom_config_option(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lab.json"
            path.write_text(json.dumps(CUSTOM_CONFIG), encoding="utf-8")
            result = self.runner.invoke(app, ["catalog", "--config", str(path)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines()[0], "10\tNH3\tN:1, H:3")

    def test_missing_config_file(self):
        result = self.runner.invoke(app, ["catalog", "--config", "/nonexistent/lab.json"])
        self.assertEqual(result.exit_code, 1)

    def test_wrong_section_type_reports_invalid_configuration(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "lab.json"
            path.write_text(json.dumps({"elements": ["H"]}), encoding="utf-8")
            result = self.runner.invoke(app, ["catalog", "--config", str(path)])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid configuration", result.output)
        self.assertIn("'elements' must be an object", result.output)


if __name__ == '__main__':
    unittest.main()

import os
from unittest import TestCase
from unittest.mock import patch

from hackmate.backend import config, constants
from hackmate.backend.ai.roster import ModelRoster


class ConfigTests(TestCase):
	def test_default_roster_keeps_rate_limit_prone_model_last(self) -> None:
		with patch.dict(os.environ, {"HACKMATE_MODEL_ROSTER": ""}, clear=False):
			roster = config.model_roster()
		self.assertEqual(roster, list(constants.MODEL_ROSTER))
		self.assertTrue(roster[-1].startswith("google/gemini"))

	def test_roster_override_is_deduplicated_in_order(self) -> None:
		with patch.dict(os.environ, {"HACKMATE_MODEL_ROSTER": "b, a,,b ,c"}, clear=False):
			self.assertEqual(list(ModelRoster.from_config()), ["b", "a", "c"])

	def test_empty_roster_is_rejected(self) -> None:
		with self.assertRaises(ValueError):
			ModelRoster.of([])

	def test_timeout_falls_back_on_bad_values(self) -> None:
		for raw in ("abc", "-5", "0"):
			with patch.dict(os.environ, {"HACKMATE_GATEWAY_TIMEOUT_S": raw}, clear=False):
				self.assertEqual(config.gateway_timeout(), constants.GATEWAY_TIMEOUT_S)
		with patch.dict(os.environ, {"HACKMATE_GATEWAY_TIMEOUT_S": "12.5"}, clear=False):
			self.assertEqual(config.gateway_timeout(), 12.5)

	def test_environment_report_names_missing_variables_only(self) -> None:
		with patch.dict(os.environ, {}, clear=False):
			os.environ.pop("OPENROUTER_API_KEY", None)
			report = config.environment_report()
		self.assertFalse(report["is_valid"])
		self.assertEqual(report["missing"], ["OPENROUTER_API_KEY"])
		self.assertIn("OPENROUTER_API_KEY", report["summary"])

		with patch.dict(os.environ, {"OPENROUTER_API_KEY": "sk-secret"}, clear=False):
			report = config.environment_report()
		self.assertTrue(report["is_valid"])
		self.assertEqual(report["present"], ["OPENROUTER_API_KEY"])
		self.assertNotIn("sk-secret", str(report))

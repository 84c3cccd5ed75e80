import json
from unittest import TestCase

from hackmate.backend.ai import fallbacks
from hackmate.backend.ai.errors import AllModelsFailed, InvalidIntent
from hackmate.backend.ai.processor import ActionProcessor, normalize_task, resolve_intent
from hackmate.backend.ai.types import Intent


class _StubWalker:
	def __init__(self, *, text: str | None = None, error: Exception | None = None):
		self._text = text
		self._error = error
		self.prompts = []

	def run(self, prompt_text: str) -> str:
		self.prompts.append(prompt_text)
		if self._error is not None:
			raise self._error
		return self._text


class ActionProcessorTests(TestCase):
	def test_analyze_idea_returns_model_analysis(self) -> None:
		walker = _StubWalker(
			text=(
				"Here you go:\n```json\n"
				'{"problem_statement": "Teams waste time planning.", "target_users": ["students"],'
				' "features": ["board"], "risks": [], "tech_stack_suggestions": ["FastAPI"]}\n```'
			)
		)
		result = ActionProcessor(walker).analyze_idea("AI planner for hackathons", "48h")
		self.assertEqual(result.source, "model")
		self.assertEqual(result.value["problem_statement"], "Teams waste time planning.")
		self.assertEqual(result.value["target_users"], ["students"])
		self.assertEqual(json.loads(result.text), result.value)
		self.assertIn("AI planner for hackathons", walker.prompts[0])
		self.assertIn("Duration: 48h", walker.prompts[0])

	def test_analyze_idea_defaults_duration(self) -> None:
		walker = _StubWalker(error=AllModelsFailed(None))
		ActionProcessor(walker).analyze_idea("idea")
		self.assertIn("Duration: 24h", walker.prompts[0])

	def test_analyze_idea_degrades_when_all_models_fail(self) -> None:
		result = ActionProcessor(_StubWalker(error=AllModelsFailed(None))).analyze_idea("idea", "24h")
		self.assertEqual(result.source, "fallback")
		self.assertTrue(result.value["problem_statement"])
		self.assertTrue(result.value["target_users"])
		self.assertEqual(result.value, fallbacks.idea_analysis())
		self.assertEqual(json.loads(result.text), result.value)

	def test_analyze_idea_degrades_on_unparsable_text(self) -> None:
		result = ActionProcessor(_StubWalker(text="I am not sure.")).analyze_idea("idea")
		self.assertEqual(result.source, "fallback")

	def test_analyze_idea_degrades_when_required_fields_missing(self) -> None:
		for text in (
			'{"problem_statement": "", "target_users": ["a"]}',
			'{"problem_statement": "Real problem", "target_users": "students"}',
			'{"target_users": ["a"]}',
		):
			result = ActionProcessor(_StubWalker(text=text)).analyze_idea("idea")
			self.assertEqual(result.source, "fallback", text)

	def test_analyze_idea_tolerates_missing_optional_lists(self) -> None:
		result = ActionProcessor(
			_StubWalker(text='{"problem_statement": "P", "target_users": [], "risks": "none"}')
		).analyze_idea("idea")
		self.assertEqual(result.source, "model")
		self.assertEqual(result.value["target_users"], [])
		self.assertEqual(result.value["features"], [])
		self.assertEqual(result.value["risks"], [])

	def test_generate_tasks_applies_defaults_to_model_output(self) -> None:
		walker = _StubWalker(
			text='```json\n[{"title":"Build login","description":"","effort":"Low"}, {}, {"title":"X","effort":"Critical"}]\n```'
		)
		result = ActionProcessor(walker).generate_tasks("Demo", ["login", "chat"], "24h")
		self.assertEqual(result.source, "model")
		self.assertEqual(
			result.value,
			[
				{"title": "Build login", "description": "", "effort": "Low"},
				{"title": "Untitled Task", "description": "No description provided", "effort": "Medium"},
				{"title": "X", "description": "No description provided", "effort": "Medium"},
			],
		)
		self.assertIn("Features: login, chat", walker.prompts[0])
		self.assertIn("Generate 6-8 realistic tasks", walker.prompts[0])

	def test_generate_tasks_without_features_uses_placeholder(self) -> None:
		walker = _StubWalker(text='[{"title": "t"}]')
		ActionProcessor(walker).generate_tasks("Demo", [], "24h")
		self.assertIn("Features: Basic functionality", walker.prompts[0])

	def test_generate_tasks_degrades_to_six_canned_tasks(self) -> None:
		for walker in (
			_StubWalker(error=AllModelsFailed(None)),
			_StubWalker(text="[]"),
			_StubWalker(text="no tasks today"),
		):
			result = ActionProcessor(walker).generate_tasks("Demo", ["login"], "24h")
			self.assertEqual(result.source, "fallback")
			self.assertEqual(len(result.value), 6)
			self.assertEqual(result.value, fallbacks.task_drafts())

	def test_mentor_chat_returns_free_text(self) -> None:
		walker = _StubWalker(text="  Cut scope to one killer feature.  ")
		result = ActionProcessor(walker).mentor_chat("What should we build first?", None)
		self.assertEqual(result.text, "Cut scope to one killer feature.")
		self.assertEqual(result.source, "model")
		self.assertIn("Context: Hackathon project", walker.prompts[0])
		self.assertIn("Question: What should we build first?", walker.prompts[0])

	def test_mentor_chat_propagates_failure(self) -> None:
		with self.assertRaises(AllModelsFailed):
			ActionProcessor(_StubWalker(error=AllModelsFailed(None))).mentor_chat("q", "ctx")

	def test_process_dispatches_by_intent(self) -> None:
		walker = _StubWalker(text="Answer.")
		result = ActionProcessor(walker).process(Intent.MENTOR_CHAT, {"question": "q", "context": "c"})
		self.assertEqual(result.intent, Intent.MENTOR_CHAT)
		self.assertEqual(result.text, "Answer.")


class TaskDefaultingTests(TestCase):
	def test_empty_object_gets_all_defaults(self) -> None:
		self.assertEqual(
			normalize_task({}),
			{"title": "Untitled Task", "description": "No description provided", "effort": "Medium"},
		)

	def test_invalid_effort_falls_back_to_medium(self) -> None:
		self.assertEqual(normalize_task({"title": "X", "effort": "Critical"})["effort"], "Medium")
		self.assertEqual(normalize_task({"title": "X", "effort": "low"})["effort"], "Medium")

	def test_empty_description_is_preserved(self) -> None:
		self.assertEqual(normalize_task({"title": "X", "description": ""})["description"], "")

	def test_blank_title_and_non_object_items_are_defaulted(self) -> None:
		self.assertEqual(normalize_task({"title": "   "})["title"], "Untitled Task")
		self.assertEqual(normalize_task("just a string")["title"], "Untitled Task")


class ResolveIntentTests(TestCase):
	def test_known_values_resolve(self) -> None:
		self.assertIs(resolve_intent("analyze_idea"), Intent.ANALYZE_IDEA)
		self.assertIs(resolve_intent(" Generate_Tasks "), Intent.GENERATE_TASKS)
		self.assertIs(resolve_intent(Intent.MENTOR_CHAT), Intent.MENTOR_CHAT)

	def test_unknown_value_raises(self) -> None:
		with self.assertRaises(InvalidIntent):
			resolve_intent("summarize_pitch")

from unittest import TestCase

from hackmate.backend.ai.cache import ResponseCache
from hackmate.backend.ai.errors import AllModelsFailed, InvalidIntent, InvalidPayload
from hackmate.backend.ai.pipeline import AIPipeline
from hackmate.backend.ai.processor import ActionProcessor
from hackmate.backend.ai.types import Intent


class _CountingWalker:
	def __init__(self, text: str | None = None, error: Exception | None = None):
		self._text = text
		self._error = error
		self.runs = 0
		self.prompts = []

	def run(self, prompt_text: str) -> str:
		self.runs += 1
		self.prompts.append(prompt_text)
		if self._error is not None:
			raise self._error
		return self._text


class AIPipelineTests(TestCase):
	def setUp(self) -> None:
		self.cache = ResponseCache()
		self.factory_calls = 0

	def _pipeline(self, walker) -> AIPipeline:
		def factory() -> ActionProcessor:
			self.factory_calls += 1
			return ActionProcessor(walker)

		return AIPipeline(cache=self.cache, processor_factory=factory)

	def test_second_identical_request_is_served_from_cache(self) -> None:
		walker = _CountingWalker(text="Demo early, demo often.")
		pipeline = self._pipeline(walker)
		payload = {"question": "Any tips?", "context": "Hackathon project"}

		first = pipeline.handle("mentor_chat", payload)
		second = pipeline.handle(Intent.MENTOR_CHAT, payload)

		self.assertFalse(first.cached)
		self.assertTrue(second.cached)
		self.assertEqual(second.text, first.text)
		self.assertEqual(walker.runs, 1)
		self.assertEqual(self.factory_calls, 1)

	def test_fallback_result_is_cached_with_its_source(self) -> None:
		walker = _CountingWalker(error=AllModelsFailed(None))
		pipeline = self._pipeline(walker)
		payload = {"idea": "Smart badge scanner", "duration": "24h"}

		first = pipeline.handle(Intent.ANALYZE_IDEA, payload)
		second = pipeline.handle(Intent.ANALYZE_IDEA, payload)

		self.assertEqual(first.source, "fallback")
		self.assertTrue(second.cached)
		self.assertEqual(second.source, "fallback")
		self.assertEqual(walker.runs, 1)

	def test_failed_chat_is_not_cached(self) -> None:
		walker = _CountingWalker(error=AllModelsFailed(None))
		pipeline = self._pipeline(walker)
		payload = {"question": "q", "context": "c"}
		for _ in range(2):
			with self.assertRaises(AllModelsFailed):
				pipeline.handle(Intent.MENTOR_CHAT, payload)
		self.assertEqual(walker.runs, 2)
		self.assertIsNone(self.cache.get(Intent.MENTOR_CHAT, payload))

	def test_invalid_intent_never_builds_processor(self) -> None:
		pipeline = self._pipeline(_CountingWalker(text="x"))
		with self.assertRaises(InvalidIntent):
			pipeline.handle("write_pitch", {})
		self.assertEqual(self.factory_calls, 0)

	def test_result_dict_shape(self) -> None:
		pipeline = self._pipeline(_CountingWalker(text='[{"title": "Build login", "effort": "Low"}]'))
		result = pipeline.handle(Intent.GENERATE_TASKS, {"project_name": "Demo", "features": ["login"], "duration": "24h"})
		self.assertEqual(
			result.as_dict(),
			{
				"intent": "generate_tasks",
				"result": '[{"title": "Build login", "description": "No description provided", "effort": "Low"}]',
				"cached": False,
				"source": "model",
			},
		)

	def test_camel_case_project_name_reaches_prompt_and_shares_cache_entry(self) -> None:
		walker = _CountingWalker(text='[{"title": "Build login", "effort": "Low"}]')
		pipeline = self._pipeline(walker)

		first = pipeline.handle(Intent.GENERATE_TASKS, {"projectName": "Demo", "features": ["login"], "duration": "24h"})
		second = pipeline.handle(Intent.GENERATE_TASKS, {"project_name": "Demo", "features": ["login"]})

		self.assertIn("Project: Demo\n", walker.prompts[0])
		self.assertFalse(first.cached)
		self.assertTrue(second.cached)
		self.assertEqual(walker.runs, 1)

	def test_missing_required_field_is_a_typed_error(self) -> None:
		pipeline = self._pipeline(_CountingWalker(text="x"))
		for intent, payload, field in (
			(Intent.ANALYZE_IDEA, {"duration": "24h"}, "idea"),
			(Intent.MENTOR_CHAT, {"context": "c"}, "question"),
		):
			with self.assertRaises(InvalidPayload) as ctx:
				pipeline.handle(intent, payload)
			self.assertEqual(ctx.exception.intent, intent.value)
			self.assertTrue(any(item.startswith(field) for item in ctx.exception.evidence))
		self.assertEqual(self.factory_calls, 0)

	def test_defaults_are_applied_before_fingerprinting(self) -> None:
		walker = _CountingWalker(text="Ship the demo first.")
		pipeline = self._pipeline(walker)
		pipeline.handle(Intent.MENTOR_CHAT, {"question": "Any tips?"})
		second = pipeline.handle(Intent.MENTOR_CHAT, {"question": "Any tips?", "context": "Hackathon project"})
		self.assertTrue(second.cached)
		self.assertEqual(walker.runs, 1)

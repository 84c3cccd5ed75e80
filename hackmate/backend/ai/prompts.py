from __future__ import annotations

from typing import Sequence

from hackmate.backend import constants


def analyze_idea_prompt(idea: str, duration: str) -> str:
	return f"""You are a hackathon project analyzer. Analyze this idea and return ONLY valid JSON.

Idea: {idea}
Duration: {duration}

Return this EXACT JSON structure with NO extra text:
{{
"problem_statement": "Clear 2-3 sentence description of the problem",
"target_users": ["specific user group 1", "specific user group 2"],
"features": ["feature 1", "feature 2", "feature 3", "feature 4"],
"risks": ["risk 1", "risk 2", "risk 3"],
"tech_stack_suggestions": ["technology 1", "technology 2", "technology 3"]
}}"""


def generate_tasks_prompt(project_name: str, features: Sequence[str], duration: str) -> str:
	features_text = ", ".join(features) or constants.DEFAULT_FEATURES_TEXT
	efforts = ", ".join(f'"{effort}"' for effort in constants.TASK_EFFORTS)
	return f"""You are a hackathon task generator. Create tasks for this project and return ONLY valid JSON.

Project: {project_name}
Features: {features_text}
Duration: {duration}

Return this EXACT JSON array with NO extra text:
[
{{"title": "Task name", "description": "Brief description", "effort": "Low"}},
{{"title": "Task name", "description": "Brief description", "effort": "Medium"}},
{{"title": "Task name", "description": "Brief description", "effort": "High"}}
]

Generate {constants.TASK_COUNT_MIN}-{constants.TASK_COUNT_MAX} realistic tasks. Use only {efforts} for effort."""


def mentor_chat_prompt(question: str, context: str) -> str:
	return f"""You are HackMate AI mentor for hackathon teams.
Be concise, practical, and actionable.

Context: {context}
Question: {question}

Provide a helpful response in 3-5 sentences. Focus on actionable advice."""

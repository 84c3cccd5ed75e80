from __future__ import annotations

import copy
from typing import Dict, List


# Placeholder content served when no model produced a usable structured result.
_IDEA_ANALYSIS: Dict[str, object] = {
	"problem_statement": "This project aims to solve a specific problem during the hackathon timeframe.",
	"target_users": ["Hackathon participants", "General users"],
	"features": ["Core functionality", "User interface", "Basic features"],
	"risks": ["Time constraints", "Technical complexity"],
	"tech_stack_suggestions": ["JavaScript", "React", "Node.js"],
}

_TASKS: List[Dict[str, str]] = [
	{"title": "Set up project structure", "description": "Initialize the project with basic folder structure", "effort": "Low"},
	{"title": "Design user interface", "description": "Create wireframes and basic UI components", "effort": "Medium"},
	{"title": "Implement core functionality", "description": "Build the main features of the application", "effort": "High"},
	{"title": "Add styling and polish", "description": "Improve the visual design and user experience", "effort": "Medium"},
	{"title": "Test and debug", "description": "Fix bugs and ensure everything works properly", "effort": "Medium"},
	{"title": "Prepare presentation", "description": "Create demo and presentation materials", "effort": "Low"},
]


def idea_analysis() -> Dict[str, object]:
	return copy.deepcopy(_IDEA_ANALYSIS)


def task_drafts() -> List[Dict[str, str]]:
	return copy.deepcopy(_TASKS)

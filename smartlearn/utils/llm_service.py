"""Learning path and quiz generation through the Anthropic Messages API."""
import json
import logging
import anthropic
from flask import current_app

logger = logging.getLogger(__name__)

PATH_MAX_TOKENS = 2000
QUIZ_MAX_TOKENS = 1500

PATH_PROMPT = """Create a comprehensive learning path for "{topic}". Generate exactly 4-6 lessons with:
1. A clear, engaging lesson title
2. A detailed lesson content (2-3 paragraphs explaining key concepts)
3. Each lesson should build on the previous one

Format your response as JSON with this structure:
{{
  "title": "Learning Path Title",
  "description": "Brief description",
  "lessons": [
    {{
      "title": "Lesson title",
      "content": "Detailed lesson content"
    }}
  ]
}}"""

QUIZ_PROMPT = """Based on this lesson:
Title: {title}
Content: {content}

Generate exactly 5 multiple-choice questions that test understanding of the key concepts.

Format your response as JSON:
{{
  "questions": [
    {{
      "question": "Question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correct": 0
    }}
  ]
}}

The "correct" field should be the index (0-3) of the correct answer."""


class GenerationError(Exception):
    """The model could not be reached or its reply held no usable JSON."""


def extract_json_object(text):
    """Return the first balanced ``{...}`` in ``text`` that parses as a JSON object."""
    if not isinstance(text, str):
        raise GenerationError("Model reply is not text")

    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            parsed, _ = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return parsed
        start = text.find("{", start + 1)

    raise GenerationError("No JSON object found in model reply")


def complete(prompt, max_tokens):
    """Send one user prompt and return the concatenated text of the reply."""
    api_key = current_app.config.get("ANTHROPIC_API_KEY")
    if not api_key:
        raise GenerationError("ANTHROPIC_API_KEY is not configured")

    client = anthropic.Anthropic(api_key=api_key)
    try:
        message = client.messages.create(
            model=current_app.config["LLM_MODEL"],
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        raise GenerationError(f"Model request failed: {e}") from e

    return "".join(block.text for block in message.content if getattr(block, "type", None) == "text")


def _is_text(value):
    return isinstance(value, str) and bool(value.strip())


def generate_learning_path(topic):
    data = extract_json_object(complete(PATH_PROMPT.format(topic=topic), PATH_MAX_TOKENS))

    lessons = data.get("lessons")
    if not _is_text(data.get("title")) or not isinstance(lessons, list) or not lessons:
        raise GenerationError("Learning path reply is missing a title or lessons")
    for lesson in lessons:
        if not isinstance(lesson, dict) or not _is_text(lesson.get("title")) or not isinstance(lesson.get("content"), str):
            raise GenerationError("Every lesson needs a title and content")

    description = data.get("description")
    return {
        "title": data["title"].strip(),
        "description": description if isinstance(description, str) else "",
        "lessons": [{"title": lesson["title"].strip(), "content": lesson["content"]} for lesson in lessons],
    }


def generate_quiz(lesson_title, lesson_content):
    prompt = QUIZ_PROMPT.format(title=lesson_title, content=lesson_content)
    data = extract_json_object(complete(prompt, QUIZ_MAX_TOKENS))

    questions = data.get("questions")
    if not isinstance(questions, list) or not questions:
        raise GenerationError("Quiz reply has no questions")

    for question in questions:
        if not isinstance(question, dict):
            raise GenerationError("Each question must be an object")
        if not _is_text(question.get("question")):
            raise GenerationError("Each question must have text")
        options = question.get("options")
        if not isinstance(options, list) or len(options) < 2:
            raise GenerationError("Each question needs a list of options")
        correct = question.get("correct")
        if isinstance(correct, bool) or not isinstance(correct, int) or not 0 <= correct < len(options):
            raise GenerationError("The 'correct' index must point at one of the options")

    return {"questions": questions}
